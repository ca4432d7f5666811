"""
handlers/dashboard_handler.py
-----------------------------
Handles /dashboard, /chart and /insights.
Reads the live dashboard views; charts are rendered by ChartService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from handlers.common import current_state, dashboard, reports_errors
from models.app_state import View
from security.auth import authorized_only, signed_in_only
from security.rate_limiter import rate_limited
from services.chart_service import ChartService
from services.dashboard_service import format_dashboard
from services.insights_service import InsightsService
from utils.logger import get_logger

logger = get_logger(__name__)
insights_service = InsightsService()


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def dashboard_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /dashboard - summary totals and category breakdowns."""
    state = current_state(context)
    state.set_view(View.DASHBOARD.value)
    data = dashboard(context).data
    await update.message.reply_text(format_dashboard(data, state.currency))


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def chart_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /chart - balance trend, daily bars and both category charts."""
    state = current_state(context)
    data = dashboard(context).data
    charts = ChartService(state.theme)

    await update.message.reply_text("📊 Drawing your charts...")
    await update.message.reply_photo(photo=charts.balance_trend(data.daily, state.currency),
                                     caption="📈 Balance trend")
    await update.message.reply_photo(photo=charts.daily_bars(data.daily, state.currency),
                                     caption="📅 Daily income vs expense")

    pie = charts.category_pie(data.expense_breakdown, state.currency, "Expenses by Category")
    if pie:
        await update.message.reply_photo(photo=pie, caption="💸 Expense breakdown")
    doughnut = charts.category_pie(data.income_breakdown, state.currency, "Income Sources", doughnut=True)
    if doughnut:
        await update.message.reply_photo(photo=doughnut, caption="💰 Income sources")
    if not pie and not doughnut:
        await update.message.reply_text("📭 No categories to chart yet. Add transactions with /add.")


@authorized_only
@rate_limited
@signed_in_only
@reports_errors
async def insights_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /insights - AI commentary on spending patterns (one request at a time)."""
    state = current_state(context)
    transactions = dashboard(context).transactions
    if transactions and not state.insights_loading:
        await update.message.reply_text("✨ Analyzing your spending...")
    text = await insights_service.request(state, transactions)
    await update.message.reply_text(f"✨ AI Insights\n\n{text}")
