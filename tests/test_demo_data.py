"""
Tests for the sample history generator.
"""

import random
from datetime import date, timedelta

from models.transaction import Category, TransactionType
from services.demo_data import generate_demo_transactions

TODAY = date(2024, 3, 15)


def generate(seed=7, days=60):
    return generate_demo_transactions(days=days, rng=random.Random(seed), today=TODAY)


class TestDemoData:
    """Tests for generate_demo_transactions()."""

    def test_newest_first_within_window(self):
        txs = generate()
        dates = [t.date for t in txs]
        assert dates == sorted(dates, reverse=True)
        assert all(TODAY - timedelta(days=59) <= t.day <= TODAY for t in txs)

    def test_salary_every_fourteen_days(self):
        salaries = [t for t in generate() if t.category is Category.SALARY]
        assert [t.day for t in salaries] == [TODAY - timedelta(days=i) for i in (0, 14, 28, 42, 56)]
        assert all(3500 <= t.amount <= 4000 and t.type is TransactionType.INCOME for t in salaries)

    def test_rent_on_first_of_month(self):
        rent = [t for t in generate() if t.category is Category.RENT]
        assert [t.day for t in rent] == [date(2024, 3, 1), date(2024, 2, 1)]
        assert all(t.amount == 1800 for t in rent)

    def test_amount_ranges(self):
        for t in generate(seed=1):
            if t.category is Category.GROCERIES:
                assert 15 <= t.amount <= 95
            elif t.category is Category.ENTERTAINMENT:
                assert 10 <= t.amount <= 50
            assert t.amount > 0

    def test_seeded_runs_repeat(self):
        assert generate(seed=3) == generate(seed=3)

    def test_unsaved(self):
        assert all(t.id is None for t in generate())
