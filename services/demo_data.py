"""
services/demo_data.py
---------------------
Plausible sample history for trying the dashboard out (/reset_demo).
Development aid only; never called for real accounts automatically.
"""

import random
from datetime import date, datetime, time, timedelta
from typing import Optional

from models.transaction import Category, Transaction, TransactionType


def generate_demo_transactions(
    days: int = 60,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> list[Transaction]:
    """
    Build `days` days of sample history ending today, newest first.

    Pattern:
        - salary (3500-4000) every 14th day counting back from today
        - groceries (15-95) on roughly 70% of days
        - entertainment (10-50) on roughly 30% of days
        - rent of 1800 on the 1st of each month
    """
    rng = rng or random.Random()
    today = today or date.today()
    transactions: list[Transaction] = []

    for i in range(days):
        day = today - timedelta(days=i)
        when = datetime.combine(day, time(hour=12))

        if i % 14 == 0:
            transactions.append(Transaction(
                amount=round(3500 + rng.random() * 500, 2),
                type=TransactionType.INCOME,
                category=Category.SALARY,
                date=when,
                description="Bi-weekly Salary",
            ))
        if rng.random() > 0.3:
            transactions.append(Transaction(
                amount=round(15 + rng.random() * 80, 2),
                type=TransactionType.EXPENSE,
                category=Category.GROCERIES,
                date=when,
                description="Grocery Store",
            ))
        if rng.random() > 0.7:
            transactions.append(Transaction(
                amount=round(10 + rng.random() * 40, 2),
                type=TransactionType.EXPENSE,
                category=Category.ENTERTAINMENT,
                date=when,
                description="Movies/Games",
            ))
        if day.day == 1:
            transactions.append(Transaction(
                amount=1800,
                type=TransactionType.EXPENSE,
                category=Category.RENT,
                date=when,
                description="Monthly Rent",
            ))

    return sorted(transactions, key=lambda t: t.date, reverse=True)
