"""
Utility modules.
"""

from .config import Config, load_config, config_from_dict
from .logging import setup_logging, get_logger

__all__ = ['Config', 'load_config', 'config_from_dict', 'setup_logging', 'get_logger']
