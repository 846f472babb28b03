"""
Top scores and score submission.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from data_access.repositories import LeaderboardRepository
from domain.constants import VALID_MODES
from .auth_service import AuthService
from .errors import NotAuthenticatedError

logger = logging.getLogger(__name__)


def _validate_mode(mode: Optional[str]) -> None:
    if mode is not None and mode not in VALID_MODES:
        raise ValueError(f"Unknown game mode '{mode}'")


class LeaderboardService:
    def __init__(self, leaderboard: LeaderboardRepository, auth: AuthService, limit: int = 10):
        self.leaderboard = leaderboard
        self.auth = auth
        self.limit = limit

    def get_top_scores(self, mode: Optional[str] = None) -> List[Dict[str, Any]]:
        """Best scores first, at most `limit` of them, optionally for one mode."""
        _validate_mode(mode)
        return self.leaderboard.get_top_entries(mode=mode, limit=self.limit)

    def submit_score(self, token: Optional[str], score: int, mode: str) -> Dict[str, Any]:
        """
        Record a finished game for the logged-in user.

        Raises:
            NotAuthenticatedError: If token does not belong to a live session.
            ValueError: For a negative score or unknown mode.
        """
        user = self.auth.get_current_user(token)
        if user is None:
            raise NotAuthenticatedError("Must be logged in to submit score")

        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            raise ValueError("Score must be a non-negative integer")
        if mode is None:
            raise ValueError("Game mode is required")
        _validate_mode(mode)

        today = datetime.now(timezone.utc).date().isoformat()
        entry = self.leaderboard.insert_entry(user["username"], score, mode, today)
        logger.info("Recorded score %d (%s) for %s", score, mode, user["username"])
        return entry
