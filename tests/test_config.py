"""
Test suite for package configuration.

Tests cover:
- Default values
- reset()
- temp_config restore semantics and error handling
"""

import pytest
import orrery
from orrery import config, temp_config


class TestDefaults:
    """Package defaults."""

    def test_kepler_defaults(self):
        assert config.KEPLER_TOL == 1e-6
        assert config.KEPLER_MAX_ITER == 100

    def test_calendar_range(self):
        assert config.MIN_YEAR == -2999
        assert config.MAX_YEAR == 3000

    def test_strict_by_default(self):
        assert config.STRICT_VALIDATION is True

    def test_repr_lists_settings(self):
        text = repr(config)
        assert "KEPLER_TOL" in text
        assert "STRICT_VALIDATION" in text


class TestReset:
    """Resetting configuration."""

    def test_reset_restores_defaults(self):
        config.KEPLER_MAX_ITER = 5
        config.STRICT_VALIDATION = False
        config.reset()
        assert config.KEPLER_MAX_ITER == 100
        assert config.STRICT_VALIDATION is True


class TestTempConfig:
    """Temporary configuration changes."""

    def test_values_applied_inside_block(self):
        with temp_config(KEPLER_TOL=1e-12) as cfg:
            assert cfg.KEPLER_TOL == 1e-12
            assert orrery.config.KEPLER_TOL == 1e-12
        assert config.KEPLER_TOL == 1e-6

    def test_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with temp_config(STRICT_VALIDATION=False):
                raise RuntimeError("boom")
        assert config.STRICT_VALIDATION is True

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError, match="no attribute 'NOT_A_SETTING'"):
            with temp_config(NOT_A_SETTING=1):
                pass
