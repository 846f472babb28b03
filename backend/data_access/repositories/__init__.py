"""
Repository pattern implementations for data access.

This module provides a clean abstraction over the in-memory stores
with transactional writes and copy-out reads.
"""

from .base import BaseRepository
from .user_repository import UserRepository, SessionRepository, public_user
from .leaderboard_repository import LeaderboardRepository
from .active_player_repository import ActivePlayerRepository, snake_from_row

__all__ = [
    'BaseRepository',
    'UserRepository',
    'SessionRepository',
    'public_user',
    'LeaderboardRepository',
    'ActivePlayerRepository',
    'snake_from_row',
]
