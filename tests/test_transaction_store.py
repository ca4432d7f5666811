"""
Tests for the transaction store and the dashboard controller that
subscribes to it.
"""

import pytest

from conftest import TODAY, tx
from services.dashboard_service import DashboardController
from services.transaction_store import TransactionStore
from utils.errors import NotAuthenticatedError, TransactionNotFoundError


class TestTransactionStore:
    """Tests for TransactionStore."""

    def test_subscribe_delivers_current_snapshot_immediately(self, session, repo):
        repo.add("42", tx(10))
        store = TransactionStore(session, repo)
        received = []
        store.subscribe(received.append)
        assert len(received) == 1
        assert [t.amount for t in received[0]] == [10]

    def test_add_assigns_id_and_pushes_snapshot(self, session, repo):
        store = TransactionStore(session, repo)
        received = []
        store.subscribe(received.append)

        saved = store.add(tx(25, "income", "Freelance"))

        assert saved.id is not None
        assert len(received) == 2
        assert received[-1][0].id == saved.id

    def test_remove_pushes_snapshot(self, session, repo):
        store = TransactionStore(session, repo)
        saved = store.add(tx(25))
        received = []
        store.subscribe(received.append)

        store.remove(saved.id)

        assert received[-1] == []

    def test_remove_unknown_id_fails(self, session, repo):
        store = TransactionStore(session, repo)
        with pytest.raises(TransactionNotFoundError):
            store.remove("999")

    def test_cannot_remove_another_users_transaction(self, session, repo):
        other = repo.add("7", tx(5))
        store = TransactionStore(session, repo)
        with pytest.raises(TransactionNotFoundError):
            store.remove(other.id)
        assert repo.list_for_user("7") == [other]

    def test_unauthenticated_operations_fail(self, anonymous, repo):
        store = TransactionStore(anonymous, repo)
        with pytest.raises(NotAuthenticatedError):
            store.add(tx(10))
        with pytest.raises(NotAuthenticatedError):
            store.remove("1")
        with pytest.raises(NotAuthenticatedError):
            store.subscribe(lambda snapshot: None)

    def test_unsubscribe_stops_deliveries(self, session, repo):
        store = TransactionStore(session, repo)
        received = []
        unsubscribe = store.subscribe(received.append)
        unsubscribe()
        store.add(tx(10))
        assert len(received) == 1

    def test_close_drops_every_listener(self, session, repo):
        store = TransactionStore(session, repo)
        first, second = [], []
        store.subscribe(first.append)
        store.subscribe(second.append)
        store.close()
        store.add(tx(10))
        assert len(first) == 1 and len(second) == 1

    def test_replace_all(self, session, repo):
        store = TransactionStore(session, repo)
        store.add(tx(1))
        count = store.replace_all([tx(2), tx(3)])
        assert count == 2
        assert sorted(t.amount for t in store.snapshot()) == [2, 3]


class TestDashboardController:
    """Tests for DashboardController."""

    def test_recomputes_on_every_snapshot(self, session, repo, sample):
        store = TransactionStore(session, repo)
        controller = DashboardController(store, today=lambda: TODAY)
        assert controller.data.summary.balance == 0
        assert len(controller.data.daily) == 7

        for t in sample:
            store.add(t)

        assert controller.data.summary.balance == 50
        assert len(controller.data.daily) == 60
        assert len(controller.transactions) == 3

    def test_close_stops_updates(self, session, repo):
        store = TransactionStore(session, repo)
        controller = DashboardController(store, today=lambda: TODAY)
        controller.close()
        store.add(tx(10, "income", "Salary"))
        assert controller.data.summary.total_income == 0
