"""
services/payment_service.py
---------------------------
Subscription checkout through the Razorpay payment gateway.

Flow:
    1. start_checkout() prices the plan in the user's currency and asks the
       gateway for a hosted payment link.
    2. The user pays on the gateway's page.
    3. confirm() looks the payment up; on success the plan is applied to the
       session and saved, on failure the gateway's own error text is raised.
"""

from typing import Optional, Protocol

import razorpay
from razorpay.errors import BadRequestError, GatewayError, ServerError

from config import RAZORPAY_KEY_ID, RAZORPAY_KEY_SECRET
from models.app_state import AppState
from models.plan import Plan, get_plan
from models.user import Session
from repositories.user_repo import UserRepository
from services.pricing_service import price_plan, to_minor_units
from utils.errors import NotAuthenticatedError, PaymentError, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)

MERCHANT_NAME = "FinSight AI"
_PAID_STATUSES = {"captured", "authorized"}
_GATEWAY_ERRORS = (BadRequestError, GatewayError, ServerError)


class PaymentGateway(Protocol):
    def create_checkout(self, options: dict) -> dict: ...

    def fetch_payment(self, payment_id: str) -> dict: ...


class RazorpayGateway:
    """
    Thin wrapper over the Razorpay SDK client.

    SDK failures are re-raised as PaymentError carrying the gateway's message.
    """

    def __init__(self, key_id: str = RAZORPAY_KEY_ID, key_secret: str = RAZORPAY_KEY_SECRET):
        self.client = razorpay.Client(auth=(key_id, key_secret))

    def create_checkout(self, options: dict) -> dict:
        data = {
            "amount": options["amount"],
            "currency": options["currency"],
            "description": options["description"],
            "customer": options.get("prefill", {}),
            "notes": options.get("notes", {}),
        }
        try:
            return self.client.payment_link.create(data)
        except _GATEWAY_ERRORS as e:
            logger.error(f"Razorpay payment link failed: {e}")
            raise PaymentError(str(e)) from e

    def fetch_payment(self, payment_id: str) -> dict:
        try:
            return self.client.payment.fetch(payment_id)
        except _GATEWAY_ERRORS as e:
            logger.error(f"Razorpay payment lookup {payment_id} failed: {e}")
            raise PaymentError(str(e)) from e


class PaymentService:
    """Builds checkout requests and applies paid plans."""

    def __init__(self, gateway: Optional[PaymentGateway] = None,
                 user_repo: Optional[UserRepository] = None):
        self.gateway = gateway if gateway is not None else RazorpayGateway()
        self.user_repo = user_repo if user_repo is not None else UserRepository()

    def _upgradable_plan(self, session: Session, plan_id: str) -> Plan:
        if not session.is_authenticated:
            raise NotAuthenticatedError("Sign in to subscribe.")
        plan = get_plan(plan_id)
        if plan is None:
            raise ValidationError(f"Unknown plan '{plan_id}'.")
        if plan.is_free:
            raise ValidationError("The Starter plan is free, nothing to pay.")
        if session.user.plan == plan.id:
            raise ValidationError(f"You are already on {plan.name}.")
        return plan

    def checkout_options(self, session: Session, plan_id: str, currency: str) -> dict:
        """
        Widget parameters for a plan: amount in the smallest currency unit,
        currency code, merchant name, description and prefilled customer.
        """
        plan = self._upgradable_plan(session, plan_id)
        priced = price_plan(plan, currency)
        return {
            "amount": to_minor_units(priced.price),
            "currency": currency,
            "name": MERCHANT_NAME,
            "description": f"Subscription for {plan.name}",
            "prefill": {"name": session.user.name, "email": session.user.email},
            "notes": {"plan_id": plan.id, "user_id": session.user.id},
        }

    def start_checkout(self, session: Session, state: AppState, plan_id: str) -> str:
        """
        Open a checkout for `plan_id` in the state's currency.

        Returns:
            The hosted payment URL.
        """
        options = self.checkout_options(session, plan_id, state.currency)
        link = self.gateway.create_checkout(options)
        state.selected_plan = plan_id
        logger.info(
            f"Checkout {link.get('id')} opened for user {session.user.id}: "
            f"{plan_id} {options['amount']} {options['currency']}"
        )
        return link.get("short_url", "")

    def confirm(self, session: Session, state: AppState, payment_id: str) -> Plan:
        """
        Apply the plan paid for by `payment_id`.

        The plan comes from the payment's own notes; the pending checkout is
        only used when the gateway did not carry them. The payment must belong
        to the signed-in user and cover the plan's price in its currency.

        Raises:
            NotAuthenticatedError: If nobody is signed in.
            ValidationError: If there is no checkout to confirm.
            PaymentError: If the payment failed, belongs to someone else or
                does not match the plan's price.
        """
        if not session.is_authenticated:
            raise NotAuthenticatedError("Sign in to subscribe.")
        payment = self.gateway.fetch_payment(payment_id)
        notes = payment.get("notes") or {}
        plan_id = notes.get("plan_id") or state.selected_plan
        plan = get_plan(plan_id) if plan_id else None
        if plan is None:
            raise ValidationError("No checkout in progress. Start one with /subscribe.")

        if str(notes.get("user_id")) != session.user.id:
            logger.warning(f"User {session.user.id} tried to confirm payment {payment_id} of another account")
            raise PaymentError("This payment was not made from your account.")

        if payment.get("status") not in _PAID_STATUSES:
            state.selected_plan = None
            description = payment.get("error_description") or f"Payment {payment.get('status', 'failed')}."
            logger.warning(f"Payment {payment_id} for user {session.user.id} failed: {description}")
            raise PaymentError(description)

        currency = payment.get("currency") or state.currency
        expected = to_minor_units(price_plan(plan, currency).price)
        if payment.get("amount") != expected:
            logger.warning(
                f"Payment {payment_id} amount {payment.get('amount')} {currency} "
                f"does not match {plan.id} ({expected})"
            )
            raise PaymentError(f"The amount paid does not match the {plan.name} price.")

        session.apply_plan(plan.id)
        self.user_repo.update_field(int(session.user.id), "plan", plan.id)
        state.selected_plan = None
        logger.info(f"User {session.user.id} upgraded to {plan.id} (payment {payment_id})")
        return plan
