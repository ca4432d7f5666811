"""
services/transaction_store.py
-----------------------------
The signed-in user's transaction collection.

Consumers register with `subscribe(on_snapshot)` and receive the full,
ordered collection (newest first) immediately and after every successful
change. The returned callable removes the subscription.
"""

from typing import Callable, Optional

from models.transaction import Transaction
from models.user import Session
from repositories.transaction_repo import TransactionRepository
from utils.errors import NotAuthenticatedError, TransactionNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

SnapshotListener = Callable[[list[Transaction]], None]


class TransactionStore:
    """
    Add/remove operations scoped to one session, with push-based snapshots.

    Args:
        session: Identity the collection belongs to.
        repo: Backing storage (defaults to PostgreSQL).
    """

    def __init__(self, session: Session, repo: Optional[TransactionRepository] = None):
        self.session = session
        self.repo = repo if repo is not None else TransactionRepository()
        self._listeners: list[SnapshotListener] = []

    def _user_id(self) -> str:
        if not self.session.is_authenticated:
            raise NotAuthenticatedError("Sign in to manage transactions.")
        return self.session.user.id

    def snapshot(self) -> list[Transaction]:
        """Current collection, newest first."""
        return self.repo.list_for_user(self._user_id())

    def subscribe(self, on_snapshot: SnapshotListener) -> Callable[[], None]:
        """
        Register a listener and deliver the current snapshot to it right away.

        Returns:
            A callable that stops further deliveries to this listener.
        """
        current = self.snapshot()
        self._listeners.append(on_snapshot)
        on_snapshot(current)

        def unsubscribe() -> None:
            if on_snapshot in self._listeners:
                self._listeners.remove(on_snapshot)

        return unsubscribe

    def add(self, transaction: Transaction) -> Transaction:
        """
        Persist a new transaction; the store assigns its id.

        Raises:
            NotAuthenticatedError: If nobody is signed in.
        """
        saved = self.repo.add(self._user_id(), transaction)
        self._publish()
        return saved

    def remove(self, transaction_id: str) -> None:
        """
        Delete one of the current user's transactions.

        Raises:
            NotAuthenticatedError: If nobody is signed in.
            TransactionNotFoundError: If the id is not in this user's collection.
        """
        if not self.repo.delete(transaction_id, self._user_id()):
            raise TransactionNotFoundError(transaction_id)
        self._publish()

    def replace_all(self, transactions: list[Transaction]) -> int:
        """Overwrite the collection (demo reset)."""
        count = self.repo.replace_all(self._user_id(), transactions)
        self._publish()
        return count

    def close(self) -> None:
        """Tear down every subscription (logout)."""
        self._listeners.clear()

    def _publish(self) -> None:
        if not self._listeners:
            return
        current = self.snapshot()
        for listener in list(self._listeners):
            listener(current)
