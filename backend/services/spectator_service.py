"""
Spectator arena: autoplayed snakes for the active players on the board.

Each active player gets an independent GameState. A tick advances every
live snake once; snakes never interact, so the order does not matter.
"""

import logging
import random
import threading
from typing import Any, Dict, List, Optional

from data_access.repositories import ActivePlayerRepository, snake_from_row
from domain.constants import GRID_SIZE, WALLS, GridSize
from domain.engine import advance
from domain.game_state import GameState
from domain.placement import place_food
from players.autoplay import choose_direction

logger = logging.getLogger(__name__)


def state_from_player(row: Dict[str, Any], mode: str = WALLS, grid_size: GridSize = GRID_SIZE, rng=None) -> GameState:
    """Start a game from a stored snake, score and heading."""
    snake = tuple(snake_from_row(row))
    return GameState(
        snake=snake,
        direction=row["direction"],
        food=place_food(snake, grid_size, rng),
        score=row["score"],
        game_over=False,
        mode=mode,
        grid_size=grid_size,
    )


class SpectatorArena:
    """
    Drives the spectated snakes.

    The arena owns its states; the repository is updated after every tick so
    list/watch calls see fresh scores and positions. One re-entrant lock covers
    sync and tick, so concurrent requests never advance the same snake twice.
    """

    def __init__(self, active_players: ActivePlayerRepository, mode: str = WALLS, rng=None):
        self.active_players = active_players
        self.mode = mode
        self.rng = rng if rng is not None else random
        self.states: Dict[str, GameState] = {}
        self._lock = threading.RLock()

    def sync(self) -> None:
        """Start games for newly listed players and forget removed ones."""
        with self._lock:
            rows = {row["id"]: row for row in self.active_players.list_players()}

            for player_id in list(self.states):
                if player_id not in rows:
                    del self.states[player_id]

            for player_id, row in rows.items():
                if player_id not in self.states:
                    self.states[player_id] = state_from_player(row, self.mode, rng=self.rng)
                    logger.info("Spectating %s (%s)", row["username"], player_id)

    def active_players_list(self) -> List[Dict[str, Any]]:
        with self._lock:
            self.sync()
            return self.active_players.list_players()

    def watch(self, player_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            self.sync()
            return self.active_players.get_player(player_id)

    def state_for(self, player_id: str) -> Optional[GameState]:
        with self._lock:
            self.sync()
            return self.states.get(player_id)

    def remove(self, player_id: str) -> bool:
        """Stop spectating a player. Returns False if they were not listed."""
        with self._lock:
            removed = self.active_players.remove_player(player_id)
            self.states.pop(player_id, None)
        if removed:
            logger.info("Stopped spectating %s", player_id)
        return removed

    def tick(self) -> Dict[str, GameState]:
        """
        Advance every live snake one step with the autoplay heuristic.

        Returns the states after the tick, keyed by player id.
        """
        with self._lock:
            self.sync()
            for player_id, state in list(self.states.items()):
                if state.game_over:
                    continue

                direction = choose_direction(
                    state.snake, state.food, state.direction, state.mode, state.grid_size
                )
                new_state = advance(state, direction, rng=self.rng)
                self.states[player_id] = new_state

                if new_state.game_over:
                    logger.info("Spectated snake %s is out with score %d", player_id, new_state.score)

                self.active_players.update_player(
                    player_id,
                    score=new_state.score,
                    direction=new_state.direction,
                    position={"x": new_state.head[0], "y": new_state.head[1]},
                    snake=[{"x": x, "y": y} for x, y in new_state.snake],
                )
            return dict(self.states)
