"""Tests for library configuration and initialization."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from randkit import (
    RandomConfig,
    ScriptedSource,
    SystemSource,
    default_source,
    get_config,
    init,
    reset,
)
from randkit._config import _detect_log_level, _detect_seed


class TestRandomConfig:
    """Tests for the RandomConfig dataclass."""

    def test_default_values(self) -> None:
        config = RandomConfig()
        assert config.seed is None
        assert config.log_level is None
        assert isinstance(config.source, SystemSource)

    def test_default_sources_are_distinct(self) -> None:
        assert RandomConfig().source is not RandomConfig().source

    def test_config_is_frozen(self) -> None:
        config = RandomConfig()
        with pytest.raises(AttributeError):
            config.seed = 8  # type: ignore[misc]


class TestDetectSeed:
    """Tests for _detect_seed()."""

    def test_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_seed() is None

    def test_decimal(self) -> None:
        with patch.dict(os.environ, {'RANDKIT_SEED': '1234'}):
            assert _detect_seed() == 1234

    def test_hex(self) -> None:
        with patch.dict(os.environ, {'RANDKIT_SEED': '0xff'}):
            assert _detect_seed() == 255

    def test_invalid_is_ignored(self) -> None:
        with patch.dict(os.environ, {'RANDKIT_SEED': 'not-a-seed'}):
            assert _detect_seed() is None

    def test_log_level_from_env(self) -> None:
        with patch.dict(os.environ, {'RANDKIT_LOG_LEVEL': 'warning'}):
            assert _detect_log_level() == 'warning'
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None


class TestInit:
    """Tests for init(), get_config() and reset()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_returns_active_config(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init(seed=5)
        assert get_config() is config
        assert config.seed == 5
        assert config.log_level is None
        assert isinstance(config.source, SystemSource)
        assert config.source.seed == 5

    def test_init_reads_seed_from_env(self) -> None:
        with patch.dict(os.environ, {'RANDKIT_SEED': '77'}, clear=True):
            config = init()
        assert config.seed == 77

    def test_explicit_seed_beats_env(self) -> None:
        with patch.dict(os.environ, {'RANDKIT_SEED': '77'}, clear=True):
            config = init(seed=3)
        assert config.seed == 3

    def test_explicit_source(self) -> None:
        source = ScriptedSource()
        config = init(source=source)
        assert config.source is source
        assert default_source() is source

    def test_init_with_log_level_configures_logging(self, restore_logging: None) -> None:
        with patch('randkit._config.configure_logging') as configure:
            init(log_level='DEBUG')
        configure.assert_called_once_with('DEBUG')

    def test_init_without_log_level_leaves_logging_alone(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch('randkit._config.configure_logging') as configure:
            init()
        configure.assert_not_called()

    def test_reset(self) -> None:
        init(seed=1)
        reset()
        with pytest.raises(RuntimeError):
            get_config()


class TestDefaultSource:
    """Tests for default_source()."""

    def test_fallback_is_lazy_and_stable(self) -> None:
        first = default_source()
        assert isinstance(first, SystemSource)
        assert default_source() is first

    def test_configured_source_takes_precedence(self) -> None:
        fallback = default_source()
        config = init(seed=2)
        assert default_source() is config.source
        assert default_source() is not fallback

    def test_reset_drops_fallback(self) -> None:
        first = default_source()
        reset()
        assert default_source() is not first
