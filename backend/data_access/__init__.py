"""
Data access layer for users, sessions, leaderboard entries and active players.

Repositories are in-memory and owned by a DataStore that callers create and
pass around explicitly.
"""

from .store import DataStore
from .repositories import (
    BaseRepository,
    UserRepository,
    SessionRepository,
    LeaderboardRepository,
    ActivePlayerRepository,
    public_user,
    snake_from_row,
)

__all__ = [
    'DataStore',
    'BaseRepository',
    'UserRepository',
    'SessionRepository',
    'LeaderboardRepository',
    'ActivePlayerRepository',
    'public_user',
    'snake_from_row',
]
