"""
services/settings_service.py
----------------------------
Display preferences: loads them into the per-user AppState and saves
changes back to the users table.
"""

from typing import Optional

from config import DEFAULT_CURRENCY, DEFAULT_THEME
from models.app_state import AppState, Theme, View
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def default_state() -> AppState:
    return AppState(currency=DEFAULT_CURRENCY, theme=Theme(DEFAULT_THEME))


class SettingsService:
    """Currency and theme preferences, validated before they are stored."""

    def __init__(self, user_repo: Optional[UserRepository] = None):
        self.user_repo = user_repo if user_repo is not None else UserRepository()

    def load(self, telegram_id: int) -> AppState:
        """Fresh state seeded with the user's saved preferences."""
        state = default_state()
        prefs = self.user_repo.get_preferences(telegram_id)
        if prefs:
            state.set_currency(prefs["currency"])
            state.set_theme(prefs["theme"])
        return state

    def change_currency(self, telegram_id: int, state: AppState, code: str) -> None:
        state.set_currency(code)
        state.set_view(View.SETTINGS.value)
        self.user_repo.update_field(telegram_id, "currency", state.currency)

    def change_theme(self, telegram_id: int, state: AppState, theme: str) -> None:
        state.set_theme(theme)
        state.set_view(View.SETTINGS.value)
        self.user_repo.update_field(telegram_id, "theme", state.theme.value)
