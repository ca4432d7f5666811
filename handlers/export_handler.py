"""
handlers/export_handler.py
---------------------------
Handles /export_csv. Delegates to ExportService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import current_state, dashboard, reports_errors
from security.auth import authorized_only, signed_in_only
from security.rate_limiter import rate_limited
from services.export_service import ExportService
from utils.logger import get_logger

logger = get_logger(__name__)
export_service = ExportService()


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def export_csv_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /export_csv - send every transaction as a CSV document."""
    transactions = dashboard(context).transactions
    if not transactions:
        await update.message.reply_text("📭 No transactions to export.")
        return

    currency = current_state(context).currency
    buffer = export_service.export_csv(transactions, currency)
    await update.message.reply_document(
        document=buffer,
        filename=export_service.filename(),
        caption=f"📄 {len(transactions)} transactions ({currency})",
    )
