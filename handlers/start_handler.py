"""
handlers/start_handler.py
--------------------------
Handles /start, /help, /myid and /logout.
/start signs the Telegram user in and loads their preferences.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import current_state, load_state, reports_errors, teardown
from repositories.user_repo import UserRepository
from security.auth import authorized_only, current_session
from security.rate_limiter import rate_limited
from utils.logger import get_logger

logger = get_logger(__name__)
user_repo = UserRepository()

HELP_TEXT = """
🤖 *FinSight AI* - your personal finance dashboard

*📝 Transactions*
/add [income|expense] <amount> [category] [description]
  e.g. `/add expense 42.50 Groceries Weekly shop`
/transactions - latest transactions
/delete <id> - delete a transaction
/export\\_csv - download everything as CSV

*📊 Dashboard*
/dashboard - totals and category breakdown
/chart - balance trend and category charts
/insights - AI spending commentary

*⚙️ Settings*
/settings - current preferences
/currency <code> - display currency (e.g. EUR)
/theme <light|dark> - chart theme
/reset\\_demo - replace your data with sample history

*👑 Subscription*
/plans - plans and prices
/subscribe <plan> - upgrade (pro\\_monthly, pro\\_yearly)

/myid - your Telegram ID
/logout - sign out
"""


@authorized_only
@rate_limited
@reports_errors
async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start - sign in (registering on first use) and show the welcome message."""
    tg_user = update.effective_user
    session = current_session(context)
    teardown(context)
    session.user = user_repo.ensure_user(tg_user.id, tg_user.full_name)
    load_state(context, tg_user.id)
    logger.info(f"User {tg_user.id} ({tg_user.first_name}) signed in.")

    await update.message.reply_text(
        f"Welcome {tg_user.first_name}! 👋\n"
        f"FinSight tracks your income and expenses and explains where the money goes.\n\n"
        f"Send /help to see every command."
    )


@authorized_only
@rate_limited
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")


@authorized_only
async def myid_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /myid command - show user's Telegram ID for whitelisting."""
    user = update.effective_user
    await update.message.reply_text(
        f"🆔 Your Telegram ID: `{user.id}`\n"
        f"Add it to `ALLOWED_USER_IDS` in `.env` to lock the bot down.",
        parse_mode="Markdown",
    )


@authorized_only
async def logout_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /logout - end the session and drop live subscriptions."""
    teardown(context)
    current_session(context).logout()
    current_state(context).reset()
    logger.info(f"User {update.effective_user.id} signed out.")
    await update.message.reply_text("👋 Signed out. Use /start to sign in again.")
