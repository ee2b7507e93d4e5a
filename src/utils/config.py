"""
YAML configuration for the transform engine and the demo script.
"""

from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Dict, Optional, Union

import yaml


@dataclass
class TransformConfig:
    """Engine parameters; validated when the engine is built."""
    size: int = 64
    dtype: str = 'float32'


@dataclass
class DemoConfig:
    """Synthetic tone used by the demo: amplitude*sin((base + run*step)*2*pi*i/N)."""
    runs: int = 5
    amplitude: float = 8.0
    base_frequency: float = 2.0
    frequency_step: float = 0.2
    show_coefficients: bool = False


@dataclass
class LoggingConfig:
    level: str = 'INFO'
    log_file: Optional[str] = None


@dataclass
class Config:
    transform: TransformConfig = field(default_factory=TransformConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict:
        return asdict(self)


def _section(cls, values: Optional[dict]):
    if values is None:
        return cls()
    if not isinstance(values, dict):
        raise ValueError(f"Section for {cls.__name__} must be a mapping, got {type(values).__name__}")
    known = {f.name for f in fields(cls)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown keys for {cls.__name__}: {sorted(unknown)}")
    return cls(**values)


def config_from_dict(data: Optional[dict]) -> Config:
    """Build a Config from a parsed YAML mapping; missing keys keep defaults."""
    data = data or {}
    return Config(
        transform=_section(TransformConfig, data.get('transform')),
        demo=_section(DemoConfig, data.get('demo')),
        logging=_section(LoggingConfig, data.get('logging')),
    )


def load_config(config_path: Union[str, Path]) -> Config:
    """Load configuration from YAML file."""
    with open(config_path, 'r') as f:
        return config_from_dict(yaml.safe_load(f))
