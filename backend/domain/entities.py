"""
Board pickups and the boosts a snake is currently benefiting from.
"""

from dataclasses import dataclass
from typing import Any, Dict

from .geometry import Position


def position_to_dict(position: Position) -> Dict[str, int]:
    return {"x": position[0], "y": position[1]}


@dataclass(frozen=True)
class Boost:
    """
    A boost lying on the board.

    Attributes:
        position: cell the boost occupies
        kind: 'speed' or 'points'
        duration: ticks the boost stays active once collected
    """
    position: Position
    kind: str
    duration: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": position_to_dict(self.position),
            "type": self.kind,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class Penalty:
    """A hazard that subtracts `points` (a negative number) when eaten."""
    position: Position
    points: int

    def to_dict(self) -> Dict[str, Any]:
        return {"position": position_to_dict(self.position), "points": self.points}


@dataclass(frozen=True)
class ActiveBoost:
    kind: str
    remaining: int

    def tick(self) -> "ActiveBoost":
        return ActiveBoost(self.kind, self.remaining - 1)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "remaining": self.remaining}
