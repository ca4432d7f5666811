"""
Shared fixtures for FinSight tests.

No test touches PostgreSQL, Gemini or Razorpay: repositories and gateways
are replaced by the in-memory fakes below.
"""

from dataclasses import replace
from datetime import date, datetime, time

import pytest

from models.transaction import Category, Transaction, TransactionType
from models.user import Session, User

TODAY = date(2024, 5, 20)


def tx(amount, tx_type="expense", category="Other", day=TODAY, description="", hour=12):
    """Build a transaction on `day` at `hour`."""
    return Transaction(
        amount=amount,
        type=TransactionType(tx_type),
        category=Category(category),
        date=datetime.combine(day, time(hour=hour)),
        description=description,
    )


class FakeTransactionRepository:
    """In-memory stand-in for TransactionRepository."""

    def __init__(self):
        self.rows: dict[str, list[Transaction]] = {}
        self._next_id = 1

    def add(self, user_id, transaction):
        saved = replace(transaction, id=str(self._next_id))
        self._next_id += 1
        self.rows.setdefault(user_id, []).append(saved)
        return saved

    def replace_all(self, user_id, transactions):
        self.rows[user_id] = []
        for t in transactions:
            self.add(user_id, t)
        return len(transactions)

    def list_for_user(self, user_id):
        return sorted(self.rows.get(user_id, []), key=lambda t: (t.date, int(t.id)), reverse=True)

    def delete(self, transaction_id, user_id):
        rows = self.rows.get(user_id, [])
        for t in rows:
            if t.id == transaction_id:
                rows.remove(t)
                return True
        return False


class FakeUserRepository:
    """Records preference and plan updates."""

    def __init__(self, preferences=None):
        self.preferences = preferences
        self.updates: list[tuple] = []

    def get_preferences(self, telegram_id):
        return self.preferences

    def update_field(self, telegram_id, column, value):
        self.updates.append((telegram_id, column, value))
        return True


class FakeGateway:
    """Payment gateway returning canned responses."""

    def __init__(self, payment=None):
        self.payment = payment or {"status": "captured"}
        self.checkouts: list[dict] = []

    def create_checkout(self, options):
        self.checkouts.append(options)
        return {"id": "plink_1", "short_url": "https://rzp.io/i/test"}

    def fetch_payment(self, payment_id):
        return self.payment


@pytest.fixture
def session():
    return Session(user=User(id="42", name="Ada", email="ada@example.com"))


@pytest.fixture
def anonymous():
    return Session()


@pytest.fixture
def repo():
    return FakeTransactionRepository()


@pytest.fixture
def sample():
    """The salary / groceries / entertainment scenario on a single day."""
    return [
        tx(100, "income", "Salary"),
        tx(40, "expense", "Groceries"),
        tx(10, "expense", "Entertainment"),
    ]
