"""
Tests for the /confirm_payment command replies.
"""

import asyncio
from types import SimpleNamespace

import pytest

from conftest import FakeGateway, FakeUserRepository
from handlers import subscription_handler
from handlers.common import STATE_KEY
from models.app_state import AppState
from security import auth, rate_limiter
from security.auth import SESSION_KEY
from services.payment_service import PaymentService


class FakeMessage:
    def __init__(self):
        self.replies: list[str] = []

    async def reply_text(self, text, **kwargs):
        self.replies.append(text)


def run_confirm(session, state, payment, args=("pay_1",)):
    """Run the handler for user 42 and return what the bot replied."""
    message = FakeMessage()
    update = SimpleNamespace(
        effective_user=SimpleNamespace(id=42, username="ada", first_name="Ada"),
        message=message,
    )
    context = SimpleNamespace(args=list(args), user_data={SESSION_KEY: session, STATE_KEY: state})
    subscription_handler._payment_service = PaymentService(
        gateway=FakeGateway(payment), user_repo=FakeUserRepository()
    )
    asyncio.run(subscription_handler.confirm_payment_command(update, context))
    return message.replies


@pytest.fixture(autouse=True)
def open_bot(monkeypatch):
    monkeypatch.setattr(auth, "ALLOWED_USER_IDS", [])
    monkeypatch.setattr(rate_limiter, "RATE_LIMIT_MESSAGES", 1000)
    monkeypatch.setattr(subscription_handler, "_payment_service", None)


class TestConfirmPaymentCommand:
    """Tests for confirm_payment_command()."""

    def test_success_notice(self, session):
        payment = {"status": "captured", "amount": 99900, "currency": "INR",
                   "notes": {"plan_id": "pro_yearly", "user_id": "42"}}
        replies = run_confirm(session, AppState(selected_plan="pro_yearly"), payment)
        assert replies == ["🎉 Successfully upgraded to Pro Yearly!"]
        assert session.user.plan == "pro_yearly"

    def test_failure_shows_gateway_text(self, session):
        payment = {"status": "failed", "error_description": "Card declined by bank",
                   "notes": {"plan_id": "pro_monthly", "user_id": "42"}}
        replies = run_confirm(session, AppState(selected_plan="pro_monthly"), payment)
        assert replies == ["❌ Payment Failed: Card declined by bank"]
        assert session.user.plan == "free"

    def test_missing_payment_id(self, session):
        replies = run_confirm(session, AppState(), {"status": "captured"}, args=())
        assert replies == ["⚠️ Usage: /confirm_payment <payment id>"]

    def test_requires_sign_in(self, anonymous):
        replies = run_confirm(anonymous, AppState(), {"status": "captured"})
        assert replies == ["🔒 Please sign in first with /start."]
