"""Tests for configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

from perhaps import PerhapsConfig, get_config, init
from perhaps._config import _detect_log_level, reset


class TestPerhapsConfig:
    """Tests for the PerhapsConfig dataclass."""

    def test_default_values(self) -> None:
        config = PerhapsConfig()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.log_absorbed_errors is True

    def test_config_is_frozen(self) -> None:
        config = PerhapsConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectLogLevel:
    """Tests for _detect_log_level()."""

    def test_env_level(self) -> None:
        with patch.dict(os.environ, {'PERHAPS_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'

    def test_env_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_env_invalid_is_silent(self) -> None:
        with patch.dict(os.environ, {'PERHAPS_LOG_LEVEL': 'loud'}):
            assert _detect_log_level() is None


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_returns_and_stores_config(self) -> None:
        config = init(log_level='warning', json_logs=False)
        assert config.log_level == 'WARNING'
        assert config.json_logs is False
        assert get_config() is config

    def test_init_without_level_is_silent(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config.log_level is None

    def test_init_reads_env(self) -> None:
        with patch.dict(os.environ, {'PERHAPS_LOG_LEVEL': 'ERROR'}):
            config = init()
        assert config.log_level == 'ERROR'
        assert logging.getLogger().level == logging.ERROR

    def test_explicit_level_wins_over_env(self) -> None:
        with patch.dict(os.environ, {'PERHAPS_LOG_LEVEL': 'ERROR'}):
            config = init(log_level='DEBUG')
        assert config.log_level == 'DEBUG'

    def test_reset(self) -> None:
        init()
        reset()
        with pytest.raises(RuntimeError):
            get_config()
