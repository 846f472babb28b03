"""
Runtime settings read from the environment.

Entry points call load_dotenv() first so a local .env file can supply these.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from domain.constants import BASE_TICK_MS, SPECTATOR_TICK_MS, SPEED_BOOST_MULTIPLIER

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
]


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


@dataclass
class Settings:
    base_tick_ms: int = BASE_TICK_MS
    speed_boost_multiplier: float = SPEED_BOOST_MULTIPLIER
    spectator_tick_ms: int = SPECTATOR_TICK_MS
    leaderboard_limit: int = 10
    max_games: int = 100
    seed: Optional[int] = None
    cors_allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
        if origins_env:
            origins = [o.strip() for o in origins_env.split(",") if o.strip()]
        else:
            origins = list(DEFAULT_CORS_ORIGINS)

        seed_env = os.getenv("SNAKE_SEED")

        return cls(
            base_tick_ms=_int_env("SNAKE_BASE_TICK_MS", BASE_TICK_MS),
            speed_boost_multiplier=_float_env("SNAKE_SPEED_BOOST_MULTIPLIER", SPEED_BOOST_MULTIPLIER),
            spectator_tick_ms=_int_env("SNAKE_SPECTATOR_TICK_MS", SPECTATOR_TICK_MS),
            leaderboard_limit=_int_env("SNAKE_LEADERBOARD_LIMIT", 10),
            max_games=_int_env("SNAKE_MAX_GAMES", 100),
            seed=int(seed_env) if seed_env else None,
            cors_allowed_origins=origins,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
