"""
main.py
-------
Entry point for the FinSight Telegram bot.

Responsibilities:
    - Validate configuration against the currency and theme tables.
    - Initialize the database connection pool and schema.
    - Configure and start the Telegram bot with all handlers.
"""

from telegram import BotCommand
from telegram.ext import Application, CommandHandler

from config import TELEGRAM_BOT_TOKEN, validate_config
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from handlers.dashboard_handler import chart_command, dashboard_command, insights_command
from handlers.export_handler import export_csv_command
from handlers.settings_handler import currency_command, settings_command, theme_command
from handlers.start_handler import help_command, logout_command, myid_command, start_command
from handlers.subscription_handler import (
    confirm_payment_command,
    plans_command,
    subscribe_command,
)
from handlers.transaction_handler import (
    add_command,
    cancel_command,
    confirm_delete_command,
    delete_command,
    reset_demo_command,
    transactions_command,
)
from utils.logger import get_logger

logger = get_logger(__name__)

COMMANDS = {
    "start": (start_command, "🚀 Sign in"),
    "help": (help_command, "📖 Show help"),
    "dashboard": (dashboard_command, "📊 Totals and breakdowns"),
    "chart": (chart_command, "📈 Charts"),
    "insights": (insights_command, "✨ AI spending insights"),
    "add": (add_command, "➕ Add a transaction"),
    "transactions": (transactions_command, "🧾 Recent transactions"),
    "delete": (delete_command, "🗑️ Delete a transaction"),
    "confirm_delete": (confirm_delete_command, "✅ Confirm deletion"),
    "cancel": (cancel_command, "↩️ Cancel pending action"),
    "export_csv": (export_csv_command, "📄 Export CSV"),
    "plans": (plans_command, "👑 Subscription plans"),
    "subscribe": (subscribe_command, "💳 Upgrade your plan"),
    "confirm_payment": (confirm_payment_command, "🧾 Confirm a payment"),
    "settings": (settings_command, "⚙️ Settings"),
    "currency": (currency_command, "💱 Display currency"),
    "theme": (theme_command, "🎨 Chart theme"),
    "reset_demo": (reset_demo_command, "🧪 Load demo data"),
    "myid": (myid_command, "🆔 Your Telegram ID"),
    "logout": (logout_command, "👋 Sign out"),
}


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    await application.bot.set_my_commands(
        [BotCommand(name, description) for name, (_, description) in COMMANDS.items()]
    )
    logger.info("Bot commands menu registered successfully.")


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Configuration ──────────────────────────────────
    validate_config()

    # ── 2. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 3. Build the Telegram application ─────────────────
    # Updates run concurrently so a slow /insights call does not hold up other
    # users; per-user request guards live in the services.
    logger.info("Starting Telegram bot...")
    app = (
        Application.builder()
        .token(TELEGRAM_BOT_TOKEN)
        .concurrent_updates(True)
        .post_init(set_bot_commands)
        .build()
    )

    # ── 4. Register command handlers ──────────────────────
    for name, (callback, _) in COMMANDS.items():
        app.add_handler(CommandHandler(name, callback))

    # ── 5. Start polling ──────────────────────────────────
    logger.info("🚀 FinSight is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message"])

    # ── 6. Cleanup on shutdown ────────────────────────────
    close_pool()
    logger.info("FinSight stopped.")


if __name__ == "__main__":
    main()
