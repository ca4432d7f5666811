"""
handlers/settings_handler.py
----------------------------
Handles /settings, /currency and /theme.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import current_state, reports_errors, settings_service
from models.app_state import View
from models.currency import CURRENCIES, get_currency
from security.auth import authorized_only, current_session, signed_in_only
from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def settings_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /settings - show the profile and display preferences."""
    state = current_state(context)
    state.set_view(View.SETTINGS.value)
    user = current_session(context).user
    currency = get_currency(state.currency)
    await update.message.reply_text(
        f"⚙️ Settings\n\n"
        f"👤 {user.name} {f'({user.email})' if user.email else ''}\n"
        f"👑 Plan: {user.plan}\n"
        f"📅 Member since: {user.member_since:%Y-%m-%d}\n\n"
        f"💱 Currency: {currency.code} ({currency.symbol}) {currency.name}\n"
        f"🎨 Theme: {state.theme.value}\n\n"
        f"Change with /currency <code> or /theme <light|dark>."
    )


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def currency_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /currency <code> - change the display currency."""
    if not context.args:
        codes = " ".join(c.code for c in CURRENCIES)
        await update.message.reply_text(f"⚠️ Usage: /currency <code>\nAvailable: {codes}")
        return

    state = current_state(context)
    settings_service.change_currency(update.effective_user.id, state, context.args[0])
    currency = get_currency(state.currency)
    await update.message.reply_text(f"💱 Display currency set to {currency.name} ({currency.symbol}).")


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def theme_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /theme <light|dark> - change the chart theme."""
    if not context.args:
        await update.message.reply_text("⚠️ Usage: /theme <light|dark>")
        return

    state = current_state(context)
    settings_service.change_theme(update.effective_user.id, state, context.args[0])
    await update.message.reply_text(f"🎨 Theme set to {state.theme.value}.")
