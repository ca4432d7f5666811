"""
models/app_state.py
-------------------
Per-user UI state passed between the handlers and the services.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config import DEFAULT_CURRENCY
from models.currency import is_supported
from utils.errors import ValidationError


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class View(str, Enum):
    DASHBOARD = "dashboard"
    SETTINGS = "settings"
    SUBSCRIPTION = "subscription"


@dataclass
class AppState:
    """
    Everything the presentation layer remembers between updates.

    Attributes:
        currency: Display currency code.
        theme: Chart palette.
        view: Last screen the user opened.
        selected_plan: Plan id of the checkout in progress, if any.
        pending_delete: Transaction id awaiting confirmation, if any.
        insights: Last AI commentary shown.
        insights_loading: True while an insights request is in flight.
    """
    currency: str = DEFAULT_CURRENCY
    theme: Theme = Theme.DARK
    view: View = View.DASHBOARD
    selected_plan: Optional[str] = None
    pending_delete: Optional[str] = None
    insights: str = ""
    insights_loading: bool = False

    def set_currency(self, code: str) -> None:
        normalized = code.strip().upper()
        if not is_supported(normalized):
            raise ValidationError(f"Unsupported currency: {normalized}")
        self.currency = normalized

    def set_theme(self, value: str) -> None:
        try:
            self.theme = Theme(value.strip().lower())
        except ValueError:
            raise ValidationError("Theme must be 'light' or 'dark'.") from None

    def set_view(self, value: str) -> None:
        try:
            self.view = View(value.strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown view '{value}'.") from None

    def reset(self) -> None:
        """Drop everything tied to the signed-in user (used on logout)."""
        self.view = View.DASHBOARD
        self.selected_plan = None
        self.pending_delete = None
        self.insights = ""
        self.insights_loading = False
