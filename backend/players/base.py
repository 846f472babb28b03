"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player proposes the next direction for its snake given the current
    game state. Returning None keeps the current direction.
    """

    def __init__(self, player_id: str = "0"):
        self.player_id = player_id

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "up", "down", "left", "right", or None
        """
        raise NotImplementedError
