"""
project: RogueGrid
module: game_api.py

Game session HTTP API.

Each browser session owns one game, tracked by an id stored in the Flask
session cookie. Responses carry the full snapshot so a client can redraw the
map, health bars and info panel from a single payload.
"""

import threading
import uuid

from flask import Blueprint, current_app, jsonify, request, session

from roguegrid.dungeon import DungeonConfig
from roguegrid.game import Direction, GameSession, generate_map
from roguegrid.logging_utils import log

# Simple in-process registry game_id -> GameSession. Locked because
# Flask-SocketIO may interleave handlers across greenlets/threads.
_sessions = {}
_sessions_lock = threading.Lock()


def start_game(game_id: str, seed=None) -> GameSession:
    cfg = current_app.config
    config = DungeonConfig.from_env(width=cfg.get("ROGUEGRID_MAP_WIDTH"), height=cfg.get("ROGUEGRID_MAP_HEIGHT"))
    game = generate_map(seed=seed, config=config)
    cap = cfg.get("ROGUEGRID_MAX_SESSIONS", 64)
    with _sessions_lock:
        # a restarted game counts as the newest entry
        _sessions.pop(game_id, None)
        _sessions[game_id] = game
        while len(_sessions) > cap:
            oldest = next(iter(_sessions.keys()))
            if oldest == game_id:
                break
            _sessions.pop(oldest, None)
    log.info(event="game_created", game_id=game_id, seed=game.seed)
    return game


def get_game(game_id):
    if not game_id:
        return None
    with _sessions_lock:
        return _sessions.get(game_id)


def drop_game(game_id) -> None:
    with _sessions_lock:
        _sessions.pop(game_id, None)


def _parse_seed(payload):
    """Return (seed, error). Missing/null seed means random."""
    raw = payload.get("seed")
    if raw is None:
        return None, None
    if isinstance(raw, bool) or not isinstance(raw, int):
        return None, "seed must be an integer"
    return raw, None


def _current_game():
    return get_game(session.get("game_id"))


def _no_game():
    return jsonify({"error": "no active game"}), 404


def _turn_response(game: GameSession, result):
    data = result.to_dict()
    data["state"] = game.snapshot()
    return jsonify(data)


bp_game = Blueprint("game", __name__)


@bp_game.route("/api/game/new", methods=["POST"])
def new_game():
    """Start a fresh game for this browser session.

    Body: { 'seed': <int, optional> }
    """
    payload = request.get_json(silent=True) or {}
    seed, err = _parse_seed(payload)
    if err:
        return jsonify({"error": err}), 400
    game_id = session.get("game_id") or uuid.uuid4().hex
    session["game_id"] = game_id
    game = start_game(game_id, seed=seed)
    return jsonify(game.snapshot())


@bp_game.route("/api/game/state")
def game_state():
    game = _current_game()
    if game is None:
        return _no_game()
    return jsonify(game.snapshot())


@bp_game.route("/api/game/info")
def game_info():
    game = _current_game()
    if game is None:
        return _no_game()
    return jsonify(game.game_info())


@bp_game.route("/api/game/metrics")
def game_metrics():
    game = _current_game()
    if game is None:
        return _no_game()
    return jsonify({"seed": game.seed, "metrics": game.metrics})


@bp_game.route("/api/game/input", methods=["POST"])
def game_input():
    """Raw key input (w/a/s/d, arrows, space). Unknown keys are a no-op."""
    game = _current_game()
    if game is None:
        return _no_game()
    payload = request.get_json(silent=True) or {}
    key = payload.get("key")
    if not isinstance(key, str):
        return jsonify({"error": "key must be a string"}), 400
    with game.lock:
        result = game.handle_key(key)
    return _turn_response(game, result)


@bp_game.route("/api/game/move", methods=["POST"])
def game_move():
    game = _current_game()
    if game is None:
        return _no_game()
    payload = request.get_json(silent=True) or {}
    direction = Direction.parse(payload.get("direction"))
    if direction is None:
        return jsonify({"error": "direction must be one of up, down, left, right"}), 400
    with game.lock:
        result = game.handle_directional_input(direction)
    return _turn_response(game, result)


@bp_game.route("/api/game/attack", methods=["POST"])
def game_attack():
    game = _current_game()
    if game is None:
        return _no_game()
    with game.lock:
        result = game.handle_attack_input()
    return _turn_response(game, result)
