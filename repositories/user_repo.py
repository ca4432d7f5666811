"""
repositories/user_repo.py
--------------------------
Data access layer for user records and their dashboard preferences.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def ensure_user(self, telegram_id: int, name: Optional[str] = None) -> User:
        """
        Insert a user if they don't exist, or return the existing record.
        Uses PostgreSQL's ON CONFLICT (upsert) for atomicity.

        Args:
            telegram_id: The Telegram user ID.
            name: Display name from Telegram.
        """
        sql = """
            INSERT INTO users (telegram_id, name)
            VALUES (%s, %s)
            ON CONFLICT (telegram_id) DO UPDATE SET name = EXCLUDED.name
            RETURNING telegram_id, name, email, plan, created_at, picture;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (telegram_id, name))
                row = cur.fetchone()
            conn.commit()
            return self._row_to_user(row)
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to ensure user {telegram_id}: {e}")
            raise
        finally:
            release_connection(conn)

    def get_preferences(self, telegram_id: int) -> Optional[dict]:
        """
        Fetch stored display preferences.

        Returns:
            {'currency': str, 'theme': str} or None for an unknown user.
        """
        sql = "SELECT currency, theme FROM users WHERE telegram_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (telegram_id,))
                row = cur.fetchone()
                if row:
                    return {"currency": row[0], "theme": row[1]}
                return None
        finally:
            release_connection(conn)

    def update_field(self, telegram_id: int, column: str, value: str) -> bool:
        """
        Update one of the user's mutable columns (plan, currency, theme).

        Returns:
            True if the user row exists and was updated.
        """
        if column not in {"plan", "currency", "theme"}:
            raise ValueError(f"Column '{column}' is not updatable.")
        sql = f"UPDATE users SET {column} = %s WHERE telegram_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (value, telegram_id))
                updated = cur.rowcount > 0
            conn.commit()
            if updated:
                logger.info(f"User {telegram_id}: {column} -> {value}")
            return updated
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update {column} for user {telegram_id}: {e}")
            raise
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        return User(
            id=str(row[0]),
            name=row[1] or "",
            email=row[2] or "",
            plan=row[3],
            member_since=row[4],
            picture=row[5],
        )
