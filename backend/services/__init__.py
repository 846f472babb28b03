"""
Services built around the game core: authentication, leaderboard and
spectator simulation.
"""

from .errors import (
    ServiceError,
    InvalidCredentialsError,
    EmailAlreadyExistsError,
    NotAuthenticatedError,
    NotFoundError,
)
from .auth_service import AuthService
from .leaderboard_service import LeaderboardService
from .spectator_service import SpectatorArena, state_from_player

__all__ = [
    'ServiceError',
    'InvalidCredentialsError',
    'EmailAlreadyExistsError',
    'NotAuthenticatedError',
    'NotFoundError',
    'AuthService',
    'LeaderboardService',
    'SpectatorArena',
    'state_from_player',
]
