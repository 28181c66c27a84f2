import logging
import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from roguegrid import create_app, logging_utils  # noqa: E402
from roguegrid.routes import game_api  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "ROGUEGRID_MAP_WIDTH": 40,
            "ROGUEGRID_MAP_HEIGHT": 24,
        }
    )
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _clear_game_registry():
    """Games registered by one test must not leak into the next."""
    with game_api._sessions_lock:
        game_api._sessions.clear()
    yield
    with game_api._sessions_lock:
        game_api._sessions.clear()


@pytest.fixture(autouse=True)
def _quiet_structured_log(monkeypatch):
    # CLI tests change the threshold; restore it for every test
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["warn"])
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    yield


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    # pytest attaches and detaches its own capture handlers per phase
    saved = [h for h in root.handlers if not type(h).__module__.startswith("_pytest")]
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in saved and not type(h).__module__.startswith("_pytest"):
            root.removeHandler(h)
            h.close()
    for h in saved:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
