"""
Tests for display preferences.
"""

import pytest

from conftest import FakeUserRepository
from models.app_state import AppState, Theme, View
from services.settings_service import SettingsService
from utils.errors import ValidationError


class TestSettingsService:
    """Tests for SettingsService."""

    def test_load_without_saved_preferences_uses_defaults(self):
        state = SettingsService(FakeUserRepository()).load(42)
        assert state.currency == "USD"
        assert state.theme is Theme.DARK

    def test_load_saved_preferences(self):
        repo = FakeUserRepository({"currency": "inr", "theme": "light"})
        state = SettingsService(repo).load(42)
        assert state.currency == "INR"
        assert state.theme is Theme.LIGHT

    def test_change_currency_persists(self):
        repo = FakeUserRepository()
        state = AppState()
        SettingsService(repo).change_currency(42, state, "gbp")
        assert state.currency == "GBP"
        assert state.view is View.SETTINGS
        assert repo.updates == [(42, "currency", "GBP")]

    def test_invalid_currency_is_not_saved(self):
        repo = FakeUserRepository()
        with pytest.raises(ValidationError):
            SettingsService(repo).change_currency(42, AppState(), "ABC")
        assert repo.updates == []

    def test_change_theme_persists(self):
        repo = FakeUserRepository()
        state = AppState()
        SettingsService(repo).change_theme(42, state, "LIGHT")
        assert state.theme is Theme.LIGHT
        assert repo.updates == [(42, "theme", "light")]
