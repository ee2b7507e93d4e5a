"""
Tests for configuration loading and logging setup.

Run:
    pytest tests/test_utils.py -v
"""

import sys
import os
import logging

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest

from src.utils import Config, load_config, config_from_dict, setup_logging, get_logger
from src.dht_core import configure, ConfigurationError

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..')
DEFAULT_CONFIG = os.path.join(PROJECT_ROOT, 'configs', 'default.yaml')


class TestConfig:

    def test_default_config_file(self):
        config = load_config(DEFAULT_CONFIG)
        assert config.transform.size == 64
        assert config.transform.dtype == 'float32'
        assert config.demo.runs == 5
        assert config.demo.amplitude == pytest.approx(8.0)
        assert config.logging.log_file is None

        engine = configure(config.transform.size, dtype=config.transform.dtype)
        assert engine.dtype == np.float32

    def test_missing_sections_use_defaults(self, tmp_path):
        path = tmp_path / 'partial.yaml'
        path.write_text("transform:\n  size: 1024\n")
        config = load_config(path)
        assert config.transform.size == 1024
        assert config.transform.dtype == 'float32'
        assert config.demo == Config().demo

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        assert load_config(path) == Config()

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            config_from_dict({'transform': {'size': 64, 'window': 'hann'}})

    def test_section_not_a_mapping(self):
        with pytest.raises(ValueError):
            config_from_dict({'demo': [1, 2, 3]})

    def test_invalid_size_fails_at_configure(self):
        config = config_from_dict({'transform': {'size': 100}})
        with pytest.raises(ConfigurationError):
            configure(config.transform.size, dtype=config.transform.dtype)

    def test_to_dict(self):
        data = Config().to_dict()
        assert data['transform'] == {'size': 64, 'dtype': 'float32'}
        assert set(data) == {'transform', 'demo', 'logging'}


class TestLogging:

    def test_setup_logging_console_only(self):
        logger = setup_logging(name='test_dht_console')
        assert logger is get_logger('test_dht_console')
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_setup_logging_string_level(self):
        logger = setup_logging(level='debug', name='test_dht_debug')
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_setup_logging_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging(level='LOUD', name='test_dht_bad_level')

    def test_setup_logging_file(self, tmp_path):
        log_file = tmp_path / 'logs' / 'dht.log'
        logger = setup_logging(log_file=str(log_file), name='test_dht_file')
        logger.info("transform done")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "transform done" in log_file.read_text(encoding='utf-8')

        for handler in logger.handlers:
            handler.close()

    def test_no_duplicate_handlers(self):
        setup_logging(name='test_dht_repeat')
        logger = setup_logging(name='test_dht_repeat')
        assert len(logger.handlers) == 1
