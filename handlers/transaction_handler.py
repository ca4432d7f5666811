"""
handlers/transaction_handler.py
-------------------------------
Handles adding, listing and deleting transactions, plus the demo reset.
Delegates storage to the user's TransactionStore.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import current_state, dashboard, reports_errors, store
from models.transaction import Category, TransactionType, new_transaction
from security.auth import authorized_only, signed_in_only
from security.rate_limiter import rate_limited
from services.dashboard_service import format_money, format_transactions
from services.demo_data import generate_demo_transactions
from utils.logger import get_logger

logger = get_logger(__name__)

ADD_USAGE = (
    "⚠️ Usage: /add [income|expense] <amount> [category] [description]\n"
    "Example: /add expense 42.50 Groceries Weekly shop\n"
    f"Categories: {', '.join(c.value for c in Category)}"
)


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def add_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /add - record a transaction dated now.
    Type defaults to expense and category to Other; a blank description is
    saved as 'No description'.
    """
    args = list(context.args or [])
    if args and args[0].lower() not in {t.value for t in TransactionType}:
        args.insert(0, TransactionType.EXPENSE.value)
    if len(args) < 2:
        await update.message.reply_text(ADD_USAGE)
        return

    tx_type, amount = args[0], args[1]
    category = args[2] if len(args) >= 3 else Category.OTHER.value
    description = " ".join(args[3:])

    transaction = new_transaction(tx_type, amount, category, description)
    saved = store(context).add(transaction)

    state = current_state(context)
    emoji = "💰" if saved.is_income() else "💸"
    await update.message.reply_text(
        f"{emoji} Recorded {saved.type.value}:\n"
        f"  📂 Category: {saved.category.value}\n"
        f"  💶 Amount: {format_money(saved.amount, state.currency)}\n"
        f"  📝 {saved.description}\n"
        f"  🔖 ID: #{saved.id}"
    )


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def transactions_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /transactions - list the most recent transactions."""
    controller = dashboard(context)
    await update.message.reply_text(
        format_transactions(controller.transactions, current_state(context).currency)
    )


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def delete_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /delete <id> - ask for confirmation before deleting.
    Usage: /delete 5, then /confirm_delete
    """
    if not context.args:
        await update.message.reply_text("⚠️ Usage: /delete <transaction id>\nExample: /delete 5")
        return

    state = current_state(context)
    state.pending_delete = context.args[0].lstrip("#")
    await update.message.reply_text(
        f"🗑️ Delete transaction #{state.pending_delete}? This cannot be undone.\n"
        f"Send /confirm_delete to proceed or /cancel to keep it."
    )


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def confirm_delete_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /confirm_delete - delete the transaction chosen with /delete."""
    state = current_state(context)
    if not state.pending_delete:
        await update.message.reply_text("⚠️ Nothing to delete. Use /delete <id> first.")
        return

    transaction_id, state.pending_delete = state.pending_delete, None
    if not transaction_id.isdigit():
        await update.message.reply_text(f"⚠️ Transaction #{transaction_id} not found.")
        return
    store(context).remove(transaction_id)
    await update.message.reply_text(f"🗑️ Transaction #{transaction_id} deleted.")


@authorized_only
async def cancel_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /cancel - drop a pending delete or checkout."""
    state = current_state(context)
    state.pending_delete = None
    state.selected_plan = None
    await update.message.reply_text("👍 Cancelled.")


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def reset_demo_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /reset_demo - replace the user's data with 60 days of sample history."""
    count = store(context).replace_all(generate_demo_transactions(60))
    logger.info(f"User {update.effective_user.id} reset to demo data ({count} transactions)")
    await update.message.reply_text(f"🧪 Loaded {count} demo transactions. Try /dashboard.")
