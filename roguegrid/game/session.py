"""Game session and turn engine.

A ``GameSession`` owns the grid, the entity records and the random source for
one game. All mutations that touch both the grid and an entity record go
through the session's ``move_*``/``remove_*`` helpers so the two never drift.

Turn order for a movement input:
    item pickup -> player move -> every enemy acts (list order) -> outcome check
An attack input resolves the player's strike and the outcome check only.
"""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from roguegrid.dungeon import ENEMY, FLOOR, PLAYER, WALL, DungeonConfig, Grid, generate
from roguegrid.logging_utils import log
from roguegrid.models import Enemy, Item, ItemKind, Player
from roguegrid.services import combat_service, monster_ai
from roguegrid.services.spawn_service import place_entities


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self):
        return _DELTAS[self]

    @classmethod
    def parse(cls, value) -> Optional["Direction"]:
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

ATTACK = "attack"

# Input vocabulary: four directions plus one attack action
KEYMAP: Dict[str, Any] = {
    "w": Direction.UP,
    "up": Direction.UP,
    "arrowup": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "arrowdown": Direction.DOWN,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "arrowleft": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
    "arrowright": Direction.RIGHT,
    " ": ATTACK,
    "space": ATTACK,
    "attack": ATTACK,
}


class GameOutcome(str, Enum):
    ONGOING = "none"
    VICTORY = "victory"
    DEFEAT = "defeat"


@dataclass
class TurnResult:
    outcome: GameOutcome
    acted: bool
    events: List[str] = field(default_factory=list)

    @property
    def terminal(self) -> bool:
        return self.outcome is not GameOutcome.ONGOING

    def to_dict(self):
        return {
            "outcome": self.outcome.value,
            "terminal": self.terminal,
            "acted": self.acted,
            "events": list(self.events),
        }


class GameSession:
    def __init__(
        self,
        grid: Grid,
        player: Player,
        enemies: List[Enemy],
        items: List[Item],
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        metrics: Optional[Dict[str, Any]] = None,
    ):
        self.grid = grid
        self.player = player
        self.enemies = enemies
        self.items = items
        self.rng = rng or random.Random(seed)
        self.seed = seed
        self.metrics = metrics or {}
        self.outcome = GameOutcome.ONGOING
        self.turn = 0
        # serialises inputs when a transport interleaves handlers
        self.lock = threading.Lock()

    # ------------------------------------------------------------------
    # Grid + record mutations (always together)
    # ------------------------------------------------------------------
    def move_player(self, x: int, y: int) -> None:
        self.grid[self.player.pos] = FLOOR
        self.player.x, self.player.y = x, y
        self.grid[x, y] = PLAYER

    def move_enemy(self, enemy: Enemy, x: int, y: int) -> None:
        self.grid[enemy.pos] = FLOOR
        enemy.x, enemy.y = x, y
        self.grid[x, y] = ENEMY

    def remove_enemy(self, enemy: Enemy) -> None:
        self.enemies.remove(enemy)
        self.grid[enemy.pos] = FLOOR

    def take_item_at(self, x: int, y: int) -> Optional[Item]:
        for i, item in enumerate(self.items):
            if item.pos == (x, y):
                return self.items.pop(i)
        return None

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------
    def can_player_move_to(self, x: int, y: int) -> bool:
        if not self.grid.in_bounds(x, y):
            return False
        return self.grid[x, y] not in (WALL, ENEMY)

    def handle_key(self, key: str) -> TurnResult:
        """Translate a raw key name into a turn. Unknown keys are ignored."""
        action = KEYMAP.get(key if key == " " else str(key).strip().lower())
        if action is None:
            return self._noop()
        if action == ATTACK:
            return self.handle_attack_input()
        return self.handle_directional_input(action)

    def handle_directional_input(self, direction) -> TurnResult:
        direction = Direction.parse(direction)
        if direction is None or self.outcome is not GameOutcome.ONGOING:
            return self._noop()
        dx, dy = direction.delta
        nx, ny = self.player.x + dx, self.player.y + dy
        if not self.can_player_move_to(nx, ny):
            return self._noop()

        events: List[str] = []
        item = self.take_item_at(nx, ny)
        if item is not None:
            events.append(combat_service.apply_item(item, self.player))
            log.info(event="item_picked", kind=item.kind.value, x=nx, y=ny)
        self.move_player(nx, ny)
        for enemy in list(self.enemies):
            line = monster_ai.take_turn(enemy, self)
            if line:
                events.append(line)
        return self._end_turn(events)

    def handle_attack_input(self) -> TurnResult:
        if self.outcome is not GameOutcome.ONGOING:
            return self._noop()
        events = combat_service.player_attack(self)
        if not events:
            events.append("no enemies in reach")
        return self._end_turn(events)

    def _noop(self) -> TurnResult:
        return TurnResult(self.outcome, acted=False)

    def _end_turn(self, events: List[str]) -> TurnResult:
        self.turn += 1
        self.outcome = self.check_state()
        if self.outcome is not GameOutcome.ONGOING:
            events.append("victory! every enemy is defeated" if self.outcome is GameOutcome.VICTORY else "defeat! you have fallen")
            log.info(event="game_over", outcome=self.outcome.value, turn=self.turn, seed=self.seed)
        return TurnResult(self.outcome, acted=True, events=events)

    def check_state(self) -> GameOutcome:
        if self.player.health <= 0:
            return GameOutcome.DEFEAT
        if not self.enemies:
            return GameOutcome.VICTORY
        return GameOutcome.ONGOING

    # ------------------------------------------------------------------
    # Read-only accessors for renderers / UI text
    # ------------------------------------------------------------------
    def tiles(self) -> List[str]:
        return self.grid.rows()

    def enemies_view(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.enemies]

    def items_view(self) -> List[Dict[str, Any]]:
        return [i.to_dict() for i in self.items]

    def game_info(self) -> Dict[str, Any]:
        return {
            "health": self.player.health,
            "max_health": self.player.max_health,
            "attack_power": self.player.attack_power,
            "enemies": len(self.enemies),
            "potions": sum(1 for i in self.items if i.kind is ItemKind.HEALTH_POTION),
            "swords": sum(1 for i in self.items if i.kind is ItemKind.SWORD),
        }

    def snapshot(self) -> Dict[str, Any]:
        return {
            "width": self.grid.width,
            "height": self.grid.height,
            "tiles": self.tiles(),
            "player": self.player.to_dict(),
            "enemies": self.enemies_view(),
            "items": self.items_view(),
            "info": self.game_info(),
            "outcome": self.outcome.value,
            "turn": self.turn,
            "seed": self.seed,
        }


def generate_map(seed: Optional[int] = None, config: Optional[DungeonConfig] = None) -> GameSession:
    """Generate a map, place entities and return a ready session.

    ``seed=None`` picks a random seed (recorded on the session); 0 is a valid
    deterministic seed.
    """
    if seed is None:
        seed = random.randint(1, 1_000_000)
    rng = random.Random(seed)
    result = generate(rng=rng, config=config)
    placement = place_entities(result.grid, rng)
    session = GameSession(
        result.grid,
        placement.player,
        placement.enemies,
        placement.items,
        rng=rng,
        seed=seed,
        metrics=result.metrics,
    )
    log.info(event="session_started", seed=seed, enemies=len(session.enemies), items=len(session.items))
    return session


__all__ = ["GameSession", "GameOutcome", "TurnResult", "Direction", "KEYMAP", "generate_map"]
