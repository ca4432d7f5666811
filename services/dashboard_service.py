"""
services/dashboard_service.py
-----------------------------
Keeps the dashboard views in step with the transaction store and turns
them into the text the bot sends.
"""

from datetime import date
from typing import Callable, Optional

from models.currency import currency_symbol
from models.transaction import Transaction
from services.aggregation import CategoryTotal, DashboardData, build_dashboard
from services.transaction_store import TransactionStore
from utils.logger import get_logger

logger = get_logger(__name__)


class DashboardController:
    """
    Re-derives DashboardData on every snapshot the store pushes.

    Only the most recent snapshot matters: each delivery replaces
    `transactions` and `data` wholesale.
    """

    def __init__(self, store: TransactionStore, today: Optional[Callable[[], date]] = None):
        self.transactions: list[Transaction] = []
        self.data = DashboardData()
        self._today = today or date.today
        self._unsubscribe = store.subscribe(self._on_snapshot)

    def _on_snapshot(self, transactions: list[Transaction]) -> None:
        self.transactions = transactions
        self.data = build_dashboard(transactions, today=self._today())
        logger.debug(f"Dashboard recomputed from {len(transactions)} transactions")

    def close(self) -> None:
        self._unsubscribe()


def format_money(amount: float, currency: str) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency_symbol(currency)}{abs(amount):,.2f}"


def _breakdown_lines(title: str, totals: list[CategoryTotal], currency: str) -> list[str]:
    if not totals:
        return [f"{title}: none yet"]
    grand = sum(t.value for t in totals)
    lines = [f"{title}:"]
    for t in sorted(totals, key=lambda x: -x.value):
        pct = (t.value / grand * 100) if grand > 0 else 0
        lines.append(f"  • {t.name}: {format_money(t.value, currency)} ({pct:.0f}%)")
    return lines


def format_dashboard(data: DashboardData, currency: str) -> str:
    """Summary cards plus both category breakdowns as plain text."""
    s = data.summary
    lines = [
        "📊 Dashboard\n",
        f"💰 Total income: {format_money(s.total_income, currency)}",
        f"💸 Total expense: {format_money(s.total_expense, currency)}",
        f"{'📈' if s.balance >= 0 else '📉'} Balance: {format_money(s.balance, currency)}\n",
    ]
    lines += _breakdown_lines("📂 Expenses by category", data.expense_breakdown, currency)
    lines.append("")
    lines += _breakdown_lines("🏦 Income sources", data.income_breakdown, currency)
    return "\n".join(lines)


def format_transactions(transactions: list[Transaction], currency: str, limit: int = 20) -> str:
    """Most recent transactions, one per line."""
    if not transactions:
        return "📭 No transactions yet. Add one with /add."
    lines = [f"🧾 Recent transactions ({min(limit, len(transactions))} of {len(transactions)}):\n"]
    for t in transactions[:limit]:
        sign = "+" if t.is_income() else "-"
        icon = "🟢" if t.is_income() else "🔴"
        lines.append(
            f"{icon} #{t.id} | {t.day} | {t.category.value} | "
            f"{sign}{format_money(t.amount, currency)} | {t.description}"
        )
    return "\n".join(lines)
