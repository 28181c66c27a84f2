"""Combat and item effects.

Responsibilities:
    * Enemy melee against the player (fixed damage, health floored at 0).
    * Player area attack over the 8 surrounding cells.
    * Item effects on pickup (potions heal up to max, swords raise attack).

Removal of defeated enemies goes through the session so the grid marker and
the enemy list change together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from roguegrid import rules
from roguegrid.logging_utils import log
from roguegrid.models import Enemy, Item, ItemKind, Player

if TYPE_CHECKING:  # pragma: no cover
    from roguegrid.game.session import GameSession

# Row-major (dy, dx) scan around the attacker, centre excluded
ATTACK_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


def enemy_attack(enemy: Enemy, player: Player, damage: int = rules.ENEMY_DAMAGE) -> int:
    player.health = max(0, player.health - damage)
    log.debug(event="enemy_attack", x=enemy.x, y=enemy.y, damage=damage, player_hp=player.health)
    return damage


def player_attack(session: "GameSession") -> List[str]:
    """Hit the first enemy (list order) on each neighbouring cell.

    Returns event lines; an empty list means nothing was in reach.
    """
    player = session.player
    events: List[str] = []
    for dx, dy in ATTACK_OFFSETS:
        tx, ty = player.x + dx, player.y + dy
        for enemy in session.enemies:
            if enemy.pos != (tx, ty):
                continue
            enemy.health -= player.attack_power
            events.append(f"you hit the enemy at {tx},{ty} for {player.attack_power}")
            log.debug(event="player_attack", x=tx, y=ty, damage=player.attack_power, enemy_hp=enemy.health)
            if enemy.health <= 0:
                session.remove_enemy(enemy)
                events.append(f"the enemy at {tx},{ty} is defeated")
                log.info(event="enemy_defeated", x=tx, y=ty, remaining=len(session.enemies))
            break
    return events


def apply_item(item: Item, player: Player) -> str:
    if item.kind is ItemKind.HEALTH_POTION:
        player.health = min(player.max_health, player.health + rules.POTION_HEAL)
        return f"you drink a health potion ({player.health}/{player.max_health})"
    player.attack_power += rules.SWORD_BONUS
    return f"you pick up a sword (attack {player.attack_power})"


__all__ = ["enemy_attack", "player_attack", "apply_item", "ATTACK_OFFSETS"]
