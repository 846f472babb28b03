"""
Human-controlled player: buffers the most recent direction from input.
"""

import logging
from typing import Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_DIRECTIONS
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

# Arrow keys and WASD
KEY_MAP = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}


class HumanPlayer(Player):
    """
    Holds the latest requested direction until the driver asks for a move.

    The request is kept after being read, matching a held key: the engine
    ignores it once it equals the current direction.
    """

    def __init__(self, player_id: str = "0"):
        super().__init__(player_id)
        self.next_direction: Optional[str] = None

    def request(self, direction: str) -> None:
        if not isinstance(direction, str) or direction not in VALID_DIRECTIONS:
            raise ValueError(f"Invalid direction '{direction}'")
        self.next_direction = direction

    def press_key(self, key: str) -> bool:
        """Translate a key name into a direction request. Returns False for unmapped keys."""
        direction = KEY_MAP.get(key)
        if direction is None:
            logger.debug("Ignoring unmapped key %r", key)
            return False
        self.next_direction = direction
        return True

    def get_move(self, game_state: GameState) -> Optional[str]:
        return self.next_direction
