"""
project: RogueGrid
module: server.py

Server bootstrap.

Builds the Flask app, wires file/console logging into the instance folder and
hands control to Flask-SocketIO's runner.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from roguegrid import create_app, socketio


def start_server(host="0.0.0.0", port=5000, debug: bool = False):
    """Start the Socket.IO server.

    When debug=True, Flask's debugger and reloader provide verbose tracebacks.
    """
    app = create_app()
    configure_logging(app.instance_path)
    try:
        print(f"[INFO] Starting Socket.IO server on {host}:{port} (async_mode={socketio.async_mode})")
        # Let Flask-SocketIO choose appropriate server (eventlet/gevent/werkzeug)
        socketio.run(app, host=host, port=port, debug=debug, allow_unsafe_werkzeug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def configure_logging(log_dir: str, level=logging.INFO) -> str:
    """Configure logging to both console and a rotating file in ``log_dir``.

    The file is ``<log_dir>/app.log`` with a few backups. Calling this again
    replaces the previous handlers instead of stacking duplicates. Returns the
    log file path.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "app.log")
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    root = logging.getLogger()
    root.setLevel(level)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(level)
    file_handler.setFormatter(fmt)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
