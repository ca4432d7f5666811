"""
models/plan.py
--------------
Subscription plan catalog. Base prices are fixed in the reference
currency; localized prices are computed on demand by the pricing service.
"""

from dataclasses import dataclass, field
from typing import Optional

REFERENCE_CURRENCY = "INR"
FREE_PLAN_ID = "free"


@dataclass(frozen=True)
class Plan:
    """
    A subscription tier.

    Attributes:
        id: 'free', 'pro_monthly' or 'pro_yearly'.
        name: Display name.
        base_price: Price in REFERENCE_CURRENCY.
        period: Billing period suffix ('/mo', '/yr').
        features: Marketing bullet list.
        recommended: Highlighted as best value.
    """
    id: str
    name: str
    base_price: float
    period: str
    features: tuple[str, ...] = field(default_factory=tuple)
    recommended: bool = False

    @property
    def is_free(self) -> bool:
        return self.id == FREE_PLAN_ID


@dataclass(frozen=True)
class PricedPlan:
    """A catalog plan with its price in one display currency."""
    plan: Plan
    price: float
    currency: str


BASE_PLANS: tuple[Plan, ...] = (
    Plan(
        id=FREE_PLAN_ID,
        name="Starter",
        base_price=0,
        period="/mo",
        features=(
            "Basic Income & Expense Tracking",
            "Last 30 Days History",
            "Standard Charts",
            "Community Support",
        ),
    ),
    Plan(
        id="pro_monthly",
        name="Pro Monthly",
        base_price=99,
        period="/mo",
        features=(
            "AI Financial Insights",
            "Unlimited History",
            "Export to CSV",
            "Multi-currency Support",
            "Priority Support",
        ),
    ),
    Plan(
        id="pro_yearly",
        name="Pro Yearly",
        base_price=999,
        period="/yr",
        features=(
            "All Pro Features",
            "Save ~15%",
            "Early Access to Beta Features",
            "Dedicated Account Manager",
        ),
        recommended=True,
    ),
)


def get_plan(plan_id: str) -> Optional[Plan]:
    for plan in BASE_PLANS:
        if plan.id == plan_id:
            return plan
    return None
