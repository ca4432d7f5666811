"""
utils/errors.py
---------------
Exception hierarchy shared by services and handlers.
Handlers catch these at the edge and turn them into a user-visible notice.
"""


class FinSightError(Exception):
    """Base class for all expected application errors."""


class ValidationError(FinSightError):
    """User input rejected before anything was written."""


class NotAuthenticatedError(FinSightError):
    """The operation requires a signed-in user."""


class TransactionNotFoundError(FinSightError):
    """The id is not part of the current user's collection."""

    def __init__(self, transaction_id: str):
        super().__init__(f"Transaction #{transaction_id} not found.")
        self.transaction_id = transaction_id


class PaymentError(FinSightError):
    """
    The payment gateway reported a failure.

    ``description`` is the gateway's own error text, shown to the user as-is.
    """

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class InsightsBusyError(FinSightError):
    """An insights request is already running for this user."""
