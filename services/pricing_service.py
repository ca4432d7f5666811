"""
services/pricing_service.py
---------------------------
Localizes subscription prices. Base prices are fixed in the reference
currency and converted through the USD pivot:

    price = base / rate[reference] * rate[target]

Unknown currency codes use the identity rate instead of failing.
"""

from models.currency import rate_for
from models.plan import BASE_PLANS, REFERENCE_CURRENCY, Plan, PricedPlan


def convert_price(
    base_price: float,
    target_currency: str,
    reference_currency: str = REFERENCE_CURRENCY,
) -> float:
    """Convert a reference-currency price into `target_currency`."""
    if base_price == 0:
        return 0.0
    if target_currency.strip().upper() == reference_currency.strip().upper():
        return float(base_price)
    price_in_pivot = base_price / rate_for(reference_currency)
    return price_in_pivot * rate_for(target_currency)


def price_plan(plan: Plan, currency: str) -> PricedPlan:
    """Price one plan in `currency`; the free plan is always 0."""
    if plan.is_free:
        return PricedPlan(plan=plan, price=0.0, currency=currency)
    return PricedPlan(plan=plan, price=convert_price(plan.base_price, currency), currency=currency)


def localized_plans(currency: str) -> list[PricedPlan]:
    """The whole catalog priced in `currency`, in catalog order."""
    return [price_plan(plan, currency) for plan in BASE_PLANS]


def to_minor_units(price: float) -> int:
    """Gateway amount: the price in the currency's smallest unit, rounded."""
    return int(round(price * 100))
