"""
Repository for players currently on the spectator board.
"""

import copy
from typing import Any, Dict, List, Optional, Tuple

from .base import BaseRepository, Row


class ActivePlayerRepository(BaseRepository):
    """
    Repository for active players:
    {id, username, score, position, direction, snake}, positions as {x, y}.
    """

    def upsert_player(
        self,
        player_id: str,
        username: str,
        score: int,
        direction: str,
        snake: List[Tuple[int, int]],
    ) -> Row:
        with self.transaction() as rows:
            rows[player_id] = {
                "id": player_id,
                "username": username,
                "score": score,
                "position": {"x": snake[0][0], "y": snake[0][1]},
                "direction": direction,
                "snake": [{"x": x, "y": y} for x, y in snake],
            }
            return copy.deepcopy(rows[player_id])

    def update_player(self, player_id: str, **updates: Any) -> bool:
        """
        Merge updates into an existing player. Returns False if the player
        is not on the board.
        """
        with self.transaction() as rows:
            row = rows.get(player_id)
            if row is None:
                return False
            row.update(updates)
            return True

    def list_players(self) -> List[Row]:
        return self.all()

    def get_player(self, player_id: str) -> Optional[Row]:
        return self.get(player_id)

    def remove_player(self, player_id: str) -> bool:
        with self.transaction() as rows:
            return rows.pop(player_id, None) is not None


def snake_from_row(row: Dict[str, Any]) -> List[Tuple[int, int]]:
    return [(segment["x"], segment["y"]) for segment in row["snake"]]
