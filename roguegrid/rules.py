"""Gameplay constants.

Difficulty is fixed; these numbers are shared by spawning, combat and enemy AI.
"""

PLAYER_HEALTH = 100
PLAYER_ATTACK = 10

ENEMY_COUNT = 10
ENEMY_HEALTH = 30
ENEMY_DAMAGE = 5

SWORD_COUNT = 2
SWORD_BONUS = 5
POTION_COUNT = 10
POTION_HEAL = 20

# Euclidean radius inside which an enemy pursues the player
AGGRO_RANGE = 10.0
# Chance per turn that an idle (out of range) enemy takes a random step
WANDER_CHANCE = 0.3
