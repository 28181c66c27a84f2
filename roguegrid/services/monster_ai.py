"""Enemy action selection and execution.

Each enemy picks one action per turn:
{
  'type': 'attack' | 'pursue' | 'wander' | 'rest',
}

- attack: the player is within Chebyshev distance 1 (diagonals count).
- pursue: the player is within Euclidean ``AGGRO_RANGE``; follow the BFS path,
  falling back to a random step when no path exists or its next cell is taken.
- wander / rest: out of range; a ``WANDER_CHANCE`` roll decides between a
  random step and staying put.

Melee reach, aggro range and travel cost deliberately use three different
metrics.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from roguegrid import rules
from roguegrid.dungeon import CARDINALS, ENEMY, PLAYER, WALL
from roguegrid.models import Enemy

from .combat_service import enemy_attack
from .pathfinding import find_path

if TYPE_CHECKING:  # pragma: no cover
    from roguegrid.game.session import GameSession

Action = Dict[str, Any]


def chebyshev(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def euclidean(a: Tuple[int, int], b: Tuple[int, int]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def can_enemy_move_to(session: "GameSession", x: int, y: int) -> bool:
    grid = session.grid
    if not grid.in_bounds(x, y):
        return False
    return grid[x, y] not in (WALL, ENEMY, PLAYER)


def select_action(enemy: Enemy, session: "GameSession") -> Action:
    player = session.player
    if chebyshev(enemy.pos, player.pos) <= 1:
        return {"type": "attack"}
    if euclidean(enemy.pos, player.pos) <= rules.AGGRO_RANGE:
        return {"type": "pursue"}
    if session.rng.random() < rules.WANDER_CHANCE:
        return {"type": "wander"}
    return {"type": "rest"}


def random_step(enemy: Enemy, session: "GameSession") -> bool:
    """Step to the first passable cardinal cell in shuffled order."""
    directions = list(CARDINALS)
    session.rng.shuffle(directions)
    for dx, dy in directions:
        nx, ny = enemy.x + dx, enemy.y + dy
        if can_enemy_move_to(session, nx, ny):
            session.move_enemy(enemy, nx, ny)
            return True
    return False


def pursue(enemy: Enemy, session: "GameSession") -> bool:
    path = find_path(session.grid, enemy.pos, session.player.pos)
    if path and len(path) > 1:
        nx, ny = path[1]
        if can_enemy_move_to(session, nx, ny):
            session.move_enemy(enemy, nx, ny)
            return True
    return random_step(enemy, session)


def take_turn(enemy: Enemy, session: "GameSession") -> Optional[str]:
    """Run one enemy's turn. Returns an event line when something visible happened."""
    action = select_action(enemy, session)
    kind = action["type"]
    if kind == "attack":
        damage = enemy_attack(enemy, session.player)
        return f"enemy at {enemy.x},{enemy.y} hits you for {damage}"
    if kind == "pursue":
        pursue(enemy, session)
    elif kind == "wander":
        random_step(enemy, session)
    return None


__all__ = ["select_action", "take_turn", "pursue", "random_step", "can_enemy_move_to", "chebyshev", "euclidean"]
