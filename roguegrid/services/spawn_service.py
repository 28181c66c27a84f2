"""Entity placement service.

Draws positions without replacement from a shuffled pool of FLOOR cells, so no
two placed entities or items ever share a cell. When the pool runs dry the
remaining entities are simply not placed.
"""

from __future__ import annotations

import random
from typing import List, NamedTuple, Optional

from roguegrid import rules
from roguegrid.dungeon import ENEMY, PLAYER, Grid
from roguegrid.logging_utils import log
from roguegrid.models import Enemy, Item, ItemKind, Player


class Placement(NamedTuple):
    player: Player
    enemies: List[Enemy]
    items: List[Item]


def place_entities(grid: Grid, rng: Optional[random.Random] = None) -> Placement:
    """Populate ``grid`` with the player, enemies and items.

    Order of draws: player, enemies, swords, potions. Player and enemy cells
    are marked on the grid; items are returned only.
    """
    rng = rng or random
    pool = grid.floor_cells()
    rng.shuffle(pool)

    player = Player(health=rules.PLAYER_HEALTH, max_health=rules.PLAYER_HEALTH, attack_power=rules.PLAYER_ATTACK)
    if pool:
        player.x, player.y = pool.pop()
        grid[player.pos] = PLAYER

    enemies: List[Enemy] = []
    for _ in range(rules.ENEMY_COUNT):
        if not pool:
            break
        x, y = pool.pop()
        enemies.append(Enemy(x, y, health=rules.ENEMY_HEALTH, max_health=rules.ENEMY_HEALTH))
        grid[x, y] = ENEMY

    items: List[Item] = []
    for kind, count in ((ItemKind.SWORD, rules.SWORD_COUNT), (ItemKind.HEALTH_POTION, rules.POTION_COUNT)):
        for _ in range(count):
            if not pool:
                break
            x, y = pool.pop()
            items.append(Item(x, y, kind))

    log.debug(event="entities_placed", enemies=len(enemies), items=len(items), spare=len(pool))
    return Placement(player, enemies, items)


__all__ = ["place_entities", "Placement"]
