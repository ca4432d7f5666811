"""
Tests for plan pricing and the currency table.
"""

import pytest

from models.currency import CURRENCIES, EXCHANGE_RATES, currency_symbol, get_currency, rate_for
from models.plan import BASE_PLANS, get_plan
from services.pricing_service import convert_price, localized_plans, price_plan, to_minor_units


class TestConvertPrice:
    """Tests for convert_price()."""

    def test_inr_to_usd(self):
        assert convert_price(99, "USD") == pytest.approx(99 / 83.5)
        assert convert_price(99, "USD") == pytest.approx(1.1856, abs=1e-4)

    def test_reference_currency_is_identity(self):
        assert convert_price(99, "INR") == 99
        assert convert_price(999, "inr") == 999

    def test_converts_through_usd_pivot(self):
        assert convert_price(83.5, "EUR") == pytest.approx(0.92)
        assert convert_price(999, "JPY") == pytest.approx(999 / 83.5 * 150)

    def test_unknown_currency_uses_identity_rate(self):
        assert convert_price(99, "XYZ") == pytest.approx(99 / 83.5)

    def test_zero_price_stays_zero(self):
        assert convert_price(0, "EUR") == 0


class TestPlans:
    """Tests for the plan catalog and localized prices."""

    def test_free_plan_is_always_zero(self):
        for code in ("USD", "INR", "JPY", "XYZ"):
            assert price_plan(get_plan("free"), code).price == 0

    def test_localized_plans_keep_catalog_order(self):
        priced = localized_plans("USD")
        assert [p.plan.id for p in priced] == ["free", "pro_monthly", "pro_yearly"]
        assert priced[1].price == pytest.approx(99 / 83.5)
        assert priced[2].price == pytest.approx(999 / 83.5)
        assert all(p.currency == "USD" for p in priced)

    def test_only_yearly_is_recommended(self):
        assert [p.id for p in BASE_PLANS if p.recommended] == ["pro_yearly"]

    def test_unknown_plan(self):
        assert get_plan("enterprise") is None

    def test_minor_units_round(self):
        assert to_minor_units(1.1856) == 119
        assert to_minor_units(99) == 9900
        assert to_minor_units(0) == 0


class TestCurrencyTable:
    """Tests for the currency lookup table."""

    def test_every_currency_has_a_rate(self):
        assert {c.code for c in CURRENCIES} <= set(EXCHANGE_RATES)

    def test_forty_currencies(self):
        assert len(CURRENCIES) == 40

    def test_lookup_is_case_insensitive(self):
        assert get_currency(" eur ").symbol == "€"

    def test_symbol_falls_back_to_dollar(self):
        assert currency_symbol("GBP") == "£"
        assert currency_symbol("XYZ") == "$"

    def test_rate_for_unknown_is_one(self):
        assert rate_for("INR") == 83.5
        assert rate_for("XYZ") == 1
