import argparse
import json
import logging
import random
import threading
import time
import uuid
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional

from dotenv import load_dotenv

from config import Settings
from domain.constants import BASE_TICK_MS, SPEED, SPEED_BOOST_MULTIPLIER, VALID_MODES, WALLS
from domain.engine import advance, create_initial_state
from domain.game_state import GameState
from players import Player, create_player, AVAILABLE_VARIANTS

logger = logging.getLogger(__name__)

# Most recent states kept per session for replay
HISTORY_LIMIT = 1000


def tick_interval_ms(
    state: GameState,
    base_ms: int = BASE_TICK_MS,
    speed_multiplier: float = SPEED_BOOST_MULTIPLIER,
) -> float:
    """Delay before the next tick; shorter while a speed boost is active."""
    if state.has_active_boost(SPEED):
        return base_ms * speed_multiplier
    return base_ms


class GameSession:
    """
    Drives one game:
      - Owns the current GameState and the player feeding it directions
      - Owns the clock (an injectable sleep) that paces ticks
      - Keeps a bounded history of the latest states for replay
      - Serializes ticks so concurrent callers never advance from the same state
      - Reports score changes and the game-over transition via callbacks
    """
    def __init__(
        self,
        mode: str = WALLS,
        player: Optional[Player] = None,
        game_id: Optional[str] = None,
        rng=None,
        sleep: Callable[[float], None] = time.sleep,
        on_score_change: Optional[Callable[[int], None]] = None,
        on_game_over: Optional[Callable[[int], None]] = None,
        state: Optional[GameState] = None,
        base_tick_ms: int = BASE_TICK_MS,
        speed_multiplier: float = SPEED_BOOST_MULTIPLIER,
        history_limit: Optional[int] = HISTORY_LIMIT,
    ):
        if mode not in VALID_MODES:
            raise ValueError(f"Unknown game mode '{mode}'")

        self.mode = mode
        self.player = player
        self.game_id = game_id or str(uuid.uuid4())
        self.rng = rng if rng is not None else random
        self.sleep = sleep
        self.on_score_change = on_score_change
        self.on_game_over = on_game_over
        self.base_tick_ms = base_tick_ms
        self.speed_multiplier = speed_multiplier
        self.history_limit = history_limit
        self._lock = threading.Lock()

        self.state = state if state is not None else create_initial_state(mode, rng=self.rng)
        self.tick_count = 0
        self.history: Deque[GameState] = deque([self.state], maxlen=history_limit)
        logger.info("Game %s started in %s mode", self.game_id, self.mode)

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def tick(self, direction: Optional[str] = None, player: Optional[Player] = None) -> GameState:
        """
        Execute one tick:
          1) If the game is over, do nothing
          2) Use the explicit direction, else ask `player` (or the session player)
          3) Advance the state and record it
          4) Fire the score / game-over callbacks

        Steps 1-3 run under the session lock; callbacks fire after it is released.
        """
        with self._lock:
            if self.state.game_over:
                logger.debug("Game %s is already over. No more ticks.", self.game_id)
                return self.state

            player = player or self.player
            if direction is None and player is not None:
                direction = player.get_move(self.state)

            previous = self.state
            current = advance(previous, direction, rng=self.rng)
            self.state = current
            self.tick_count += 1
            self.history.append(current)
            tick_count = self.tick_count

        if current.score != previous.score:
            logger.debug("Game %s score %d -> %d", self.game_id, previous.score, current.score)
            if self.on_score_change:
                self.on_score_change(current.score)

        if current.game_over:
            logger.info(
                "Game %s over after %d ticks with score %d",
                self.game_id, tick_count, current.score,
            )
            if self.on_game_over:
                self.on_game_over(current.score)

        return current

    def run(self, max_ticks: Optional[int] = None) -> GameState:
        """Tick until the game ends or max_ticks is reached, pacing with the clock."""
        ticks = 0
        while not self.state.game_over and (max_ticks is None or ticks < max_ticks):
            self.tick()
            ticks += 1
            if not self.state.game_over:
                delay = tick_interval_ms(self.state, self.base_tick_ms, self.speed_multiplier)
                self.sleep(delay / 1000.0)
        return self.state

    def reset(self) -> GameState:
        """Start over with a fresh state in the same mode."""
        with self._lock:
            self.state = create_initial_state(self.mode, rng=self.rng)
            self.tick_count = 0
            self.history = deque([self.state], maxlen=self.history_limit)
        logger.info("Game %s reset", self.game_id)
        return self.state

    def summary(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "mode": self.mode,
            "ticks": self.tick_count,
            "score": self.state.score,
            "length": len(self.state.snake),
            "game_over": self.state.game_over,
        }

    def serialize_history(self) -> List[Dict[str, Any]]:
        """Convert the recorded states (oldest first) to JSON-friendly dicts."""
        with self._lock:
            states = list(self.history)
        return [state.to_dict() for state in states]

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.state.print_board() + "\n")


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(game_params: argparse.Namespace) -> Dict[str, Any]:
    """
    Runs a single computer-controlled game to completion.

    Args:
        game_params: An object (like argparse.Namespace) containing game settings
                     (mode, player, max_ticks, seed, delay_ms, show_board).

    Returns:
        A dictionary summarizing the game (game_id, mode, ticks, score, length, game_over).
    """
    seed = getattr(game_params, "seed", None)
    rng = random.Random(seed) if seed is not None else random.Random()

    player_key = getattr(game_params, "player", None) or "autoplay"
    if player_key == "human":
        raise ValueError("A human player cannot drive a headless simulation.")
    player = create_player(player_key, "0", rng=rng)

    delay_ms = getattr(game_params, "delay_ms", 0)
    show_board = getattr(game_params, "show_board", False)

    session = GameSession(
        mode=game_params.mode,
        player=player,
        rng=rng,
        sleep=time.sleep if delay_ms else (lambda _seconds: None),
        base_tick_ms=delay_ms or BASE_TICK_MS,
    )

    max_ticks = getattr(game_params, "max_ticks", None)
    while not session.game_over and (max_ticks is None or session.tick_count < max_ticks):
        session.run(max_ticks=1)
        if show_board:
            session.print_board()

    return session.summary()


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    load_dotenv()
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Run a computer-controlled snake game and print its summary."
    )
    parser.add_argument("--mode", type=str, choices=sorted(VALID_MODES), default=WALLS,
                        help="Boundary policy: walls (fatal) or passthrough (wrap)")
    parser.add_argument("--player", type=str, choices=[v for v in AVAILABLE_VARIANTS if v != "human"],
                        default="autoplay", help="Which computer player drives the snake")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int, default=None,
                        help="Stop after this many ticks even if the snake is alive")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for food/boost/penalty placement")
    parser.add_argument("--delay-ms", dest="delay_ms", type=int, default=0,
                        help="Base delay between ticks in milliseconds (0 runs flat out)")
    parser.add_argument("--show-board", dest="show_board", action="store_true",
                        help="Print the board after every tick")

    args = parser.parse_args()

    result = run_simulation(args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
