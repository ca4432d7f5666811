"""
models/transaction.py
---------------------
Domain model for financial transactions (expenses and income).
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional

from utils.errors import ValidationError


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Category(str, Enum):
    SALARY = "Salary"
    FREELANCE = "Freelance"
    INVESTMENTS = "Investments"
    RENT = "Rent"
    GROCERIES = "Groceries"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"
    TRANSPORT = "Transport"
    HEALTH = "Health"
    OTHER = "Other"


DEFAULT_DESCRIPTION = "No description"

# bounds of the NUMERIC(14,2) amount column
MIN_AMOUNT = 0.01
MAX_AMOUNT = 999_999_999_999.99


@dataclass(frozen=True)
class Transaction:
    """
    Represents a single financial transaction.

    Records are never changed in place; an edit is a delete plus a new record.

    Attributes:
        amount: Positive amount; the sign comes from `type` when aggregated.
        type: Income or expense.
        category: One of the fixed categories.
        date: When the transaction happened.
        description: Free text note.
        id: Store-assigned identifier (None until the store saves it).
    """
    amount: float
    type: TransactionType
    category: Category
    date: datetime = field(default_factory=datetime.now)
    description: str = ""
    id: Optional[str] = None

    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def day(self) -> date:
        """Calendar day of the transaction (time of day dropped)."""
        if isinstance(self.date, datetime):
            return self.date.date()
        return self.date

    def __str__(self) -> str:
        sign = "-" if self.is_expense() else "+"
        return f"{sign}{self.amount:.2f} | {self.category.value} | {self.day}"


# ── Input parsing ─────────────────────────────────────────

def parse_amount(raw: str) -> float:
    """
    Parse a user-typed amount.

    Raises:
        ValidationError: If the text is empty or not a number, or the amount
            (rounded to cents) falls outside MIN_AMOUNT..MAX_AMOUNT.
    """
    text = (raw or "").strip().replace(",", "")
    if not text:
        raise ValidationError("Amount is required.")
    try:
        amount = float(text)
    except ValueError:
        raise ValidationError(f"'{raw}' is not a valid amount.") from None
    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError("Amount must be greater than zero.")
    amount = round(amount, 2)
    if amount < MIN_AMOUNT:
        raise ValidationError(f"Amount must be at least {MIN_AMOUNT:.2f}.")
    if amount > MAX_AMOUNT:
        raise ValidationError(f"Amount must not exceed {MAX_AMOUNT:,.2f}.")
    return amount


def parse_type(raw: str) -> TransactionType:
    try:
        return TransactionType(raw.strip().lower())
    except ValueError:
        raise ValidationError("Type must be 'income' or 'expense'.") from None


def parse_category(raw: str) -> Category:
    """Match a category name case-insensitively."""
    wanted = raw.strip().lower()
    for category in Category:
        if category.value.lower() == wanted:
            return category
    options = ", ".join(c.value for c in Category)
    raise ValidationError(f"Unknown category '{raw}'. Choose one of: {options}.")


def new_transaction(
    tx_type: str,
    amount: str,
    category: str = Category.OTHER.value,
    description: str = "",
    when: Optional[datetime] = None,
) -> Transaction:
    """Validate raw form fields and build an unsaved Transaction."""
    return Transaction(
        amount=parse_amount(amount),
        type=parse_type(tx_type),
        category=parse_category(category),
        date=when or datetime.now(),
        description=description.strip() or DEFAULT_DESCRIPTION,
    )
