"""
DataStore - owns every repository for one process or session.

Created explicitly at start-up, passed to whatever needs it, and closed at
shutdown. Nothing here is a module-level singleton.
"""

import logging
from dataclasses import dataclass, field

from .repositories import (
    ActivePlayerRepository,
    LeaderboardRepository,
    SessionRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class DataStore:
    users: UserRepository = field(default_factory=UserRepository)
    sessions: SessionRepository = field(default_factory=SessionRepository)
    leaderboard: LeaderboardRepository = field(default_factory=LeaderboardRepository)
    active_players: ActivePlayerRepository = field(default_factory=ActivePlayerRepository)
    closed: bool = False

    @classmethod
    def create(cls, seed: bool = True) -> "DataStore":
        """Build a store, optionally filled with the demo users, scores and players."""
        store = cls()
        if seed:
            from .seed_data import seed_store
            seed_store(store)
        logger.info(
            "Data store ready: %d users, %d leaderboard entries, %d active players",
            store.users.count(), store.leaderboard.count(), store.active_players.count(),
        )
        return store

    def close(self) -> None:
        """Drop every row; the store must not be used afterwards."""
        for repository in (self.users, self.sessions, self.leaderboard, self.active_players):
            repository.clear()
        self.closed = True
        logger.info("Data store closed")
