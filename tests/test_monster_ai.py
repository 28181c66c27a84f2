from roguegrid.dungeon import ENEMY, FLOOR
from roguegrid.services import monster_ai

from tests.game_test_utils import build_session, markers_match_records, open_rows


def test_distance_helpers():
    assert monster_ai.chebyshev((0, 0), (3, -2)) == 3
    assert monster_ai.euclidean((0, 0), (3, 4)) == 5.0


def test_diagonal_neighbour_attacks():
    s = build_session(open_rows(5, 5), player=(2, 2), enemies=[(3, 3)])
    enemy = s.enemies[0]
    assert monster_ai.select_action(enemy, s) == {"type": "attack"}
    line = monster_ai.take_turn(enemy, s)
    assert s.player.health == 95
    assert "hits you for 5" in line
    assert enemy.pos == (3, 3)


def test_pursuit_steps_along_shortest_path():
    s = build_session(open_rows(5, 5), player=(4, 4), enemies=[(0, 0)])
    enemy = s.enemies[0]
    assert monster_ai.select_action(enemy, s) == {"type": "pursue"}
    assert monster_ai.take_turn(enemy, s) is None
    assert enemy.pos == (1, 0)
    assert s.grid[0, 0] is FLOOR and s.grid[1, 0] is ENEMY
    assert markers_match_records(s)


def test_pursuit_without_path_falls_back_to_random_step():
    s = build_session(["--W-"], player=(3, 0), enemies=[(0, 0)])
    enemy = s.enemies[0]
    assert monster_ai.select_action(enemy, s) == {"type": "pursue"}
    monster_ai.take_turn(enemy, s)
    assert enemy.pos == (1, 0)


def test_boxed_in_enemy_stays_put():
    s = build_session(["-----"], player=(4, 0), enemies=[(0, 0), (1, 0)])
    first = s.enemies[0]
    assert monster_ai.pursue(first, s) is False
    assert first.pos == (0, 0)
    assert markers_match_records(s)


def test_out_of_range_enemy_wanders_on_low_roll():
    s = build_session(open_rows(30, 1), player=(0, 0), enemies=[(29, 0)])
    enemy = s.enemies[0]
    s.rng.random = lambda: 0.0
    assert monster_ai.select_action(enemy, s) == {"type": "wander"}
    monster_ai.take_turn(enemy, s)
    assert enemy.pos == (28, 0)


def test_out_of_range_enemy_rests_on_high_roll():
    s = build_session(open_rows(30, 1), player=(0, 0), enemies=[(29, 0)])
    enemy = s.enemies[0]
    s.rng.random = lambda: 0.99
    assert monster_ai.select_action(enemy, s) == {"type": "rest"}
    monster_ai.take_turn(enemy, s)
    assert enemy.pos == (29, 0)


def test_enemy_never_steps_onto_player_or_wall():
    s = build_session(["W-W", "---"], player=(1, 1), enemies=[(1, 0)])
    assert not monster_ai.can_enemy_move_to(s, 1, 1)
    assert not monster_ai.can_enemy_move_to(s, 0, 0)
    assert not monster_ai.can_enemy_move_to(s, 1, -1)
    assert monster_ai.can_enemy_move_to(s, 0, 1)
