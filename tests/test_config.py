"""
Tests for startup configuration checks.
"""

import pytest

import config


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_defaults_are_valid(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_CURRENCY", "USD")
        monkeypatch.setattr(config, "DEFAULT_THEME", "dark")
        config.validate_config()

    def test_unsupported_currency(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_CURRENCY", "XYZ")
        with pytest.raises(ValueError, match="DEFAULT_CURRENCY"):
            config.validate_config()

    def test_bad_theme(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_CURRENCY", "USD")
        monkeypatch.setattr(config, "DEFAULT_THEME", "sepia")
        with pytest.raises(ValueError, match="DEFAULT_THEME"):
            config.validate_config()

    def test_window_must_be_positive(self, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_CURRENCY", "USD")
        monkeypatch.setattr(config, "DEFAULT_THEME", "dark")
        monkeypatch.setattr(config, "DAILY_WINDOW_DAYS", 0)
        with pytest.raises(ValueError):
            config.validate_config()
