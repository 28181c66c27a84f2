"""
project: RogueGrid
module: __init__.py

Flask application factory and Socket.IO wiring.

The game core (``roguegrid.dungeon``, ``roguegrid.services``,
``roguegrid.game``) has no web dependencies; this module only builds the thin
HTTP/Socket.IO surface that exposes a single-player session per browser
session. Configuration is sourced from environment variables (optionally via
a ``.env`` file) with development defaults.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_socketio import SocketIO

from roguegrid.dungeon.config import env_int

# Load .env if present so SECRET_KEY and friends can be supplied without
# exporting shell variables during development.
load_dotenv()

# Handlers in roguegrid.websockets register against this instance at import.
socketio = SocketIO()


def create_app(config: dict | None = None) -> Flask:
    """Build the Flask app, register the game blueprint and bind Socket.IO."""
    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        # read-only installs still work; only file logging needs the folder
        pass

    app.config.update(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
        ROGUEGRID_MAX_SESSIONS=env_int("ROGUEGRID_MAX_SESSIONS", 64),
    )
    if config:
        app.config.update(config)

    from roguegrid.routes.game_api import bp_game

    app.register_blueprint(bp_game)

    # Import websocket handlers so their event decorators register (side-effect)
    from roguegrid.websockets import game as _ws_game  # noqa: F401

    socketio.init_app(
        app,
        async_mode=os.getenv("SOCKETIO_ASYNC_MODE") or None,
        cors_allowed_origins=os.getenv("CORS_ALLOWED_ORIGINS", "*"),
    )

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal error", "error_id": error_id}), 500

    return app


__all__ = ["create_app", "socketio"]
