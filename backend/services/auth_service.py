"""
Login, signup and logout against the user and session repositories.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from werkzeug.security import check_password_hash, generate_password_hash

from data_access.repositories import SessionRepository, UserRepository, public_user
from .errors import EmailAlreadyExistsError, InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthService:
    """
    Token-based authentication. Each login or signup opens a session whose
    token identifies the user on later calls.
    """

    def __init__(self, users: UserRepository, sessions: SessionRepository):
        self.users = users
        self.sessions = sessions

    def login(self, email: str, password: str) -> Tuple[Dict[str, Any], str]:
        user = self.users.get_by_email(email or "")
        if user is None or not check_password_hash(user["password_hash"], password or ""):
            logger.warning("Failed login for %s", email)
            raise InvalidCredentialsError()

        token = self.sessions.create_session(user["id"])
        logger.info("User %s logged in", user["username"])
        return public_user(user), token

    def signup(self, username: str, email: str, password: str) -> Tuple[Dict[str, Any], str]:
        if not username or not username.strip():
            raise ValueError("Username is required")
        if not email or "@" not in email:
            raise ValueError("A valid email is required")
        if not password:
            raise ValueError("Password is required")

        if self.users.get_by_email(email) is not None:
            raise EmailAlreadyExistsError()

        user = self.users.insert_user(username.strip(), email, generate_password_hash(password))
        token = self.sessions.create_session(user["id"])
        logger.info("User %s signed up", user["username"])
        return public_user(user), token

    def logout(self, token: Optional[str]) -> None:
        if self.sessions.delete_session(token):
            logger.info("Session closed")

    def get_current_user(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        user_id = self.sessions.get_user_id(token)
        if user_id is None:
            return None
        user = self.users.get(user_id)
        return public_user(user) if user else None
