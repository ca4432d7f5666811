"""
repositories/transaction_repo.py
--------------------------------
Data access layer for income/expense transactions.
All SQL queries related to the `transactions` table live here.
"""

from dataclasses import replace

from psycopg2 import extras

from db.connection import get_connection, release_connection
from models.transaction import Category, Transaction, TransactionType
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, date, amount, type, category, description"


class TransactionRepository:
    """Repository for CRUD operations on the transactions table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, user_id: str, transaction: Transaction) -> Transaction:
        """
        Insert a new transaction for a user.

        Returns:
            A copy of the transaction carrying its store-assigned id.
        """
        sql = """
            INSERT INTO transactions (user_id, date, amount, type, category, description)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING id;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    int(user_id), transaction.date, transaction.amount,
                    transaction.type.value, transaction.category.value,
                    transaction.description,
                ))
                new_id = str(cur.fetchone()[0])
            conn.commit()
            logger.info(f"Added {transaction.type.value} #{new_id} for user {user_id}")
            return replace(transaction, id=new_id)
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add transaction for user {user_id}: {e}")
            raise
        finally:
            release_connection(conn)

    def replace_all(self, user_id: str, transactions: list[Transaction]) -> int:
        """
        Swap a user's whole collection for `transactions` in one commit.

        Returns:
            Number of rows inserted.
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM transactions WHERE user_id = %s;", (int(user_id),))
                extras.execute_values(
                    cur,
                    "INSERT INTO transactions (user_id, date, amount, type, category, description) VALUES %s",
                    [
                        (int(user_id), t.date, t.amount, t.type.value, t.category.value, t.description)
                        for t in transactions
                    ],
                )
            conn.commit()
            logger.info(f"Replaced collection of user {user_id} with {len(transactions)} transactions")
            return len(transactions)
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to replace transactions for user {user_id}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def list_for_user(self, user_id: str) -> list[Transaction]:
        """All of a user's transactions, newest first."""
        sql = f"SELECT {_COLUMNS} FROM transactions WHERE user_id = %s ORDER BY date DESC, id DESC;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (int(user_id),))
                return [self._row_to_transaction(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, transaction_id: str, user_id: str) -> bool:
        """
        Delete a transaction by ID, scoped to a user.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM transactions WHERE id = %s AND user_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (int(transaction_id), int(user_id)))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted transaction #{transaction_id} for user {user_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete transaction #{transaction_id}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_transaction(row: tuple) -> Transaction:
        """Convert a database row tuple to a Transaction domain object."""
        return Transaction(
            id=str(row[0]),
            date=row[1],
            amount=float(row[2]),
            type=TransactionType(row[3]),
            category=Category(row[4]),
            description=row[5] or "",
        )
