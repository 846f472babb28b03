"""
Registry for player kinds.

Maps player keys (e.g., 'autoplay', 'random', 'human') to player classes so
drivers and the CLI can build players by name.
"""

from typing import Dict, Optional, Type

from .base import Player
from .autoplay import AutoplayPlayer
from .human_player import HumanPlayer
from .random_player import RandomPlayer


PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "autoplay": AutoplayPlayer,
    "random": RandomPlayer,
    "human": HumanPlayer,
}

# Canonical list of available player keys (for API exposure)
AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        variant_key: One of 'autoplay', 'random', 'human'. If None or empty,
            returns the autoplay player.

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = "autoplay"

    variant_key = variant_key.strip()

    if variant_key not in PLAYER_VARIANTS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANTS[variant_key]


def list_variants() -> list:
    """
    Return metadata about all available player kinds.

    Returns:
        List of dicts with 'key' and 'description' for each kind.
    """
    return [
        {"key": "autoplay", "description": "Greedy one-step lookahead toward the food"},
        {"key": "random", "description": "Random direction among the safe ones"},
        {"key": "human", "description": "Follows the latest direction requested by input"},
    ]


def create_player(variant_key: Optional[str] = None, player_id: str = "0", rng=None) -> Player:
    """
    Build a player by key. Only the random player draws from `rng`.
    """
    player_cls = get_player_class(variant_key)
    if player_cls is RandomPlayer:
        return RandomPlayer(player_id, rng=rng)
    return player_cls(player_id)
