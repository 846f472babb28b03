"""
User and login-session repositories.
"""

import uuid
from typing import Any, Dict, Optional

from .base import BaseRepository, Row


def public_user(row: Row) -> Dict[str, Any]:
    """Strip credentials before a user leaves the data layer."""
    return {"id": row["id"], "username": row["username"], "email": row["email"]}


class UserRepository(BaseRepository):
    """
    Repository for registered users.
    """

    def insert_user(self, username: str, email: str, password_hash: str) -> Row:
        """
        Insert a new user.

        Raises:
            ValueError: If the email is already registered.
        """
        with self.transaction() as rows:
            normalized = email.strip().lower()
            if any(row["email"] == normalized for row in rows.values()):
                raise ValueError(f"Email '{normalized}' already registered")

            user_id = self._allocate_id()
            rows[user_id] = {
                "id": user_id,
                "username": username,
                "email": normalized,
                "password_hash": password_hash,
            }
            return dict(rows[user_id])

    def get_by_email(self, email: str) -> Optional[Row]:
        normalized = email.strip().lower()
        with self.read() as rows:
            for row in rows.values():
                if row["email"] == normalized:
                    return dict(row)
        return None


class SessionRepository(BaseRepository):
    """
    Repository for login sessions, keyed by bearer token.
    """

    def create_session(self, user_id: str) -> str:
        token = uuid.uuid4().hex
        with self.transaction() as rows:
            rows[token] = {"token": token, "user_id": user_id}
        return token

    def get_user_id(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        with self.read() as rows:
            row = rows.get(token)
            return row["user_id"] if row else None

    def delete_session(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self.transaction() as rows:
            return rows.pop(token, None) is not None
