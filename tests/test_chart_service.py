"""
Tests for chart rendering (PNG output only, not pixels).
"""

import pytest

from conftest import TODAY
from models.app_state import Theme
from models.transaction import TransactionType
from services.aggregation import category_totals, daily_balances
from services.chart_service import ChartService

PNG_MAGIC = b"\x89PNG"


@pytest.mark.parametrize("theme", [Theme.DARK, Theme.LIGHT])
class TestChartService:
    """Every chart renders in both themes."""

    def test_balance_trend(self, theme, sample):
        buf = ChartService(theme).balance_trend(daily_balances(sample, today=TODAY), "USD")
        assert buf.read(4) == PNG_MAGIC

    def test_daily_bars(self, theme, sample):
        buf = ChartService(theme).daily_bars(daily_balances(sample, today=TODAY), "EUR")
        assert buf.read(4) == PNG_MAGIC

    def test_doughnut(self, theme, sample):
        totals = category_totals(sample, TransactionType.INCOME)
        buf = ChartService(theme).category_pie(totals, "INR", "Income Sources", doughnut=True)
        assert buf.read(4) == PNG_MAGIC

    def test_empty_pie_is_skipped(self, theme):
        assert ChartService(theme).category_pie([], "USD", "Expenses") is None
