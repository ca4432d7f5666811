"""
handlers/common.py
------------------
Per-user objects kept in `context.user_data` and the error boundary that
turns service failures into a reply.
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from models.app_state import AppState
from security.auth import current_session
from services.dashboard_service import DashboardController
from services.settings_service import SettingsService, default_state
from services.transaction_store import TransactionStore
from utils.errors import FinSightError
from utils.logger import get_logger

logger = get_logger(__name__)

STATE_KEY = "state"
STORE_KEY = "store"
DASHBOARD_KEY = "dashboard"

settings_service = SettingsService()


def current_state(context: ContextTypes.DEFAULT_TYPE) -> AppState:
    """The user's AppState, created with defaults if missing."""
    return context.user_data.setdefault(STATE_KEY, default_state())


def load_state(context: ContextTypes.DEFAULT_TYPE, telegram_id: int) -> AppState:
    """Replace the AppState with one seeded from saved preferences."""
    state = settings_service.load(telegram_id)
    context.user_data[STATE_KEY] = state
    return state


def dashboard(context: ContextTypes.DEFAULT_TYPE) -> DashboardController:
    """
    The user's live dashboard. The first call opens the store subscription;
    later calls reuse it, so views are already current after every change.
    """
    controller = context.user_data.get(DASHBOARD_KEY)
    if controller is None:
        store = TransactionStore(current_session(context))
        controller = DashboardController(store)
        context.user_data[STORE_KEY] = store
        context.user_data[DASHBOARD_KEY] = controller
    return controller


def store(context: ContextTypes.DEFAULT_TYPE) -> TransactionStore:
    dashboard(context)
    return context.user_data[STORE_KEY]


def teardown(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Close the store subscription and forget per-user objects (logout)."""
    controller = context.user_data.pop(DASHBOARD_KEY, None)
    if controller is not None:
        controller.close()
    user_store = context.user_data.pop(STORE_KEY, None)
    if user_store is not None:
        user_store.close()


def reports_errors(func: Callable):
    """
    Decorator: expected errors are replied as-is, anything else is logged and
    reported as a generic failure. The action is abandoned either way.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        try:
            return await func(update, context, *args, **kwargs)
        except FinSightError as e:
            await update.message.reply_text(f"⚠️ {e}")
        except Exception as e:
            logger.error(f"{func.__name__} failed for user {update.effective_user.id}: {e}")
            await update.message.reply_text("❌ Something went wrong. Please try again.")

    return wrapper
