"""
services/aggregation.py
-----------------------
Turns a transaction collection into the derived dashboard views:

    - summary totals (income, expense, balance)
    - a fixed window of daily income/expense with a running balance
    - per-category totals for expenses and for income

Everything here is a pure function of its arguments. Views are rebuilt from
scratch on every call; nothing is cached between calls.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, Optional

from config import DAILY_WINDOW_DAYS, EMPTY_WINDOW_DAYS
from models.transaction import Transaction, TransactionType


@dataclass(frozen=True)
class Summary:
    total_income: float = 0.0
    total_expense: float = 0.0
    balance: float = 0.0


@dataclass(frozen=True)
class DailyBalance:
    """One window day: display date ('MM-DD'), running balance and day totals."""
    date: str
    balance: float
    income: float
    expense: float


@dataclass(frozen=True)
class CategoryTotal:
    name: str
    value: float


@dataclass(frozen=True)
class DashboardData:
    """All views derived from one snapshot."""
    summary: Summary = field(default_factory=Summary)
    daily: list[DailyBalance] = field(default_factory=list)
    expense_breakdown: list[CategoryTotal] = field(default_factory=list)
    income_breakdown: list[CategoryTotal] = field(default_factory=list)


def summarize(transactions: Iterable[Transaction]) -> Summary:
    """Total income, total expense and their difference."""
    total_income = 0.0
    total_expense = 0.0
    for t in transactions:
        if t.is_income():
            total_income += t.amount
        else:
            total_expense += t.amount
    return Summary(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
    )


def window_days(days: int, today: date) -> list[date]:
    """`days` consecutive calendar days ending with `today`, oldest first."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def daily_balances(
    transactions: list[Transaction],
    days: Optional[int] = None,
    today: Optional[date] = None,
) -> list[DailyBalance]:
    """
    Build the daily time series used by the trend and bar charts.

    Args:
        transactions: Current snapshot.
        days: Window length. Defaults to DAILY_WINDOW_DAYS, or EMPTY_WINDOW_DAYS
            when there are no transactions at all.
        today: Last day of the window (defaults to the current date).

    Returns:
        One DailyBalance per window day in ascending order. Transactions that
        fall outside the window do not contribute.
    """
    if days is None:
        days = DAILY_WINDOW_DAYS if transactions else EMPTY_WINDOW_DAYS
    today = today or date.today()

    buckets: dict[date, list[float]] = {day: [0.0, 0.0] for day in window_days(days, today)}
    for t in transactions:
        bucket = buckets.get(t.day)
        if bucket is None:
            continue
        if t.is_income():
            bucket[0] += t.amount
        else:
            bucket[1] += t.amount

    running = 0.0
    series = []
    for day in sorted(buckets):
        income, expense = buckets[day]
        running += income - expense
        series.append(DailyBalance(
            date=day.strftime("%m-%d"),
            balance=running,
            income=income,
            expense=expense,
        ))
    return series


def category_totals(
    transactions: Iterable[Transaction], tx_type: TransactionType
) -> list[CategoryTotal]:
    """Sum amounts by category for one transaction type, first-seen order."""
    totals: dict[str, float] = {}
    for t in transactions:
        if t.type != tx_type:
            continue
        totals[t.category.value] = totals.get(t.category.value, 0.0) + t.amount
    return [CategoryTotal(name=name, value=value) for name, value in totals.items()]


def build_dashboard(
    transactions: list[Transaction], today: Optional[date] = None
) -> DashboardData:
    """Derive every dashboard view from one snapshot."""
    return DashboardData(
        summary=summarize(transactions),
        daily=daily_balances(transactions, today=today),
        expense_breakdown=category_totals(transactions, TransactionType.EXPENSE),
        income_breakdown=category_totals(transactions, TransactionType.INCOME),
    )
