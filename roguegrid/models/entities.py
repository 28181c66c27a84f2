"""In-memory entity records for a game session.

Positions on these records must always agree with the grid markers; only the
session mutates them (see ``GameSession.move_player`` and friends).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ItemKind(str, Enum):
    HEALTH_POTION = "HP"
    SWORD = "SW"


@dataclass
class Player:
    x: int = 0
    y: int = 0
    health: int = 100
    max_health: int = 100
    attack_power: int = 10

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def health_ratio(self) -> float:
        return self.health / self.max_health if self.max_health > 0 else 0.0

    def to_dict(self):
        return {
            "x": self.x,
            "y": self.y,
            "health": self.health,
            "max_health": self.max_health,
            "attack_power": self.attack_power,
            "health_ratio": self.health_ratio,
        }


@dataclass
class Enemy:
    x: int
    y: int
    health: int = 30
    max_health: int = 30

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def health_ratio(self) -> float:
        return self.health / self.max_health if self.max_health > 0 else 0.0

    def to_dict(self):
        return {
            "x": self.x,
            "y": self.y,
            "health": self.health,
            "max_health": self.max_health,
            "health_ratio": self.health_ratio,
        }


@dataclass
class Item:
    x: int
    y: int
    kind: ItemKind

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self):
        return {"x": self.x, "y": self.y, "kind": self.kind.value}


__all__ = ["Player", "Enemy", "Item", "ItemKind"]
