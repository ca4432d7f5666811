"""
handlers/subscription_handler.py
--------------------------------
Handles /plans, /subscribe and /confirm_payment.
Prices come from the pricing service; checkout goes through PaymentService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import current_state, reports_errors
from models.app_state import View
from models.currency import currency_symbol
from models.plan import REFERENCE_CURRENCY
from security.auth import authorized_only, current_session, signed_in_only
from security.rate_limiter import rate_limited
from services.payment_service import PaymentService
from services.pricing_service import localized_plans
from utils.errors import PaymentError
from utils.logger import get_logger

logger = get_logger(__name__)
_payment_service: PaymentService | None = None


def payment_service() -> PaymentService:
    """Created on first use so the bot can start without Razorpay keys."""
    global _payment_service
    if _payment_service is None:
        _payment_service = PaymentService()
    return _payment_service


def format_plans(currency: str, current_plan: str) -> str:
    symbol = currency_symbol(currency)
    lines = ["👑 *FinSight plans*\n"]
    for priced in localized_plans(currency):
        plan = priced.plan
        price = "Free" if priced.price == 0 else f"{symbol}{priced.price:,.2f}{plan.period}"
        tags = []
        if plan.recommended:
            tags.append("Best Value")
        if plan.id == current_plan:
            tags.append("Current Plan")
        suffix = f" ({', '.join(tags)})" if tags else ""
        lines.append(f"*{plan.name}* `{plan.id}` - {price}{suffix}")
        lines.extend(f"  ✓ {feature}" for feature in plan.features)
        lines.append("")
    if currency != REFERENCE_CURRENCY:
        lines.append(f"_Prices converted from the base INR rate (₹99/mo, ₹999/yr) to {currency}._")
    return "\n".join(lines)


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def plans_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /plans - catalog priced in the user's currency."""
    state = current_state(context)
    state.set_view(View.SUBSCRIPTION.value)
    session = current_session(context)
    await update.message.reply_text(format_plans(state.currency, session.user.plan), parse_mode="Markdown")


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def subscribe_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /subscribe <plan> - open a Razorpay checkout.
    Usage: /subscribe pro_yearly
    """
    if not context.args:
        await update.message.reply_text("⚠️ Usage: /subscribe <pro_monthly|pro_yearly>")
        return

    state = current_state(context)
    url = payment_service().start_checkout(current_session(context), state, context.args[0].lower())
    await update.message.reply_text(
        f"💳 Complete your purchase in {state.currency} on Razorpay's secure checkout:\n{url}\n\n"
        f"When you're done, send /confirm_payment <payment id>."
    )


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def confirm_payment_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /confirm_payment <payment id> - apply the paid plan."""
    if not context.args:
        await update.message.reply_text("⚠️ Usage: /confirm_payment <payment id>")
        return

    try:
        plan = payment_service().confirm(current_session(context), current_state(context), context.args[0])
    except PaymentError as e:
        await update.message.reply_text(f"❌ Payment Failed: {e.description}")
        return
    await update.message.reply_text(f"🎉 Successfully upgraded to {plan.name}!")
