"""
security/auth.py
-----------------
Access control for the Telegram bot.

`authorized_only` blocks Telegram accounts outside the whitelist.
`signed_in_only` additionally requires a FinSight session (/start).
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import ALLOWED_USER_IDS
from models.user import Session
from utils.logger import get_logger

logger = get_logger(__name__)

SESSION_KEY = "session"


def current_session(context: ContextTypes.DEFAULT_TYPE) -> Session:
    """The session kept in this chat user's user_data (created empty on first use)."""
    return context.user_data.setdefault(SESSION_KEY, Session())


def authorized_only(func: Callable):
    """
    Decorator that restricts a handler to whitelisted users only.

    Behavior:
        - If ALLOWED_USER_IDS is empty, ALL users are allowed (dev mode).
        - If the list is set, only those users can use the bot.
        - Unauthorized attempts are logged.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if ALLOWED_USER_IDS and user.id not in ALLOWED_USER_IDS:
            logger.warning(
                f"🚫 Unauthorized access attempt: user_id={user.id}, "
                f"username={user.username}, name={user.first_name}"
            )
            await update.message.reply_text("⛔ Sorry, this FinSight instance is private.")
            return

        return await func(update, context, *args, **kwargs)

    return wrapper


def signed_in_only(func: Callable):
    """Decorator that refuses to run a handler until the user has signed in with /start."""
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        if not current_session(context).is_authenticated:
            await update.message.reply_text("🔒 Please sign in first with /start.")
            return
        return await func(update, context, *args, **kwargs)

    return wrapper
