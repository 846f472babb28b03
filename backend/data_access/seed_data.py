"""
Demo data loaded into a fresh DataStore.
"""

from functools import lru_cache

from werkzeug.security import generate_password_hash

from domain.constants import DOWN, PASSTHROUGH, RIGHT, WALLS

DEFAULT_PASSWORD = "password"

SEED_USERS = [
    {"username": "SnakeMaster", "email": "master@snake.io"},
    {"username": "CyberViper", "email": "viper@snake.io"},
    {"username": "NeonSerpent", "email": "neon@snake.io"},
]

SEED_LEADERBOARD = [
    {"username": "SnakeMaster", "score": 8500, "mode": WALLS, "date": "2025-11-25"},
    {"username": "CyberViper", "score": 7200, "mode": PASSTHROUGH, "date": "2025-11-25"},
    {"username": "NeonSerpent", "score": 6800, "mode": WALLS, "date": "2025-11-24"},
    {"username": "GridGhost", "score": 5900, "mode": PASSTHROUGH, "date": "2025-11-24"},
    {"username": "ByteBoa", "score": 5400, "mode": WALLS, "date": "2025-11-23"},
]

SEED_ACTIVE_PLAYERS = [
    {
        "player_id": "2",
        "username": "CyberViper",
        "score": 450,
        "direction": RIGHT,
        "snake": [(10, 10), (9, 10), (8, 10)],
    },
    {
        "player_id": "3",
        "username": "NeonSerpent",
        "score": 320,
        "direction": DOWN,
        "snake": [(15, 15), (15, 14), (15, 13)],
    },
]


@lru_cache(maxsize=1)
def _default_password_hash() -> str:
    return generate_password_hash(DEFAULT_PASSWORD)


def seed_store(store) -> None:
    for user in SEED_USERS:
        store.users.insert_user(user["username"], user["email"], _default_password_hash())
    for entry in SEED_LEADERBOARD:
        store.leaderboard.insert_entry(**entry)
    for player in SEED_ACTIVE_PLAYERS:
        store.active_players.upsert_player(**player)
