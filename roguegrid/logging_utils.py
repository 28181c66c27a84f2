"""Game event log for RogueGrid.

Dungeon generation and the turn engine report what happened as one line per
event, e.g. ``event=room_placed`` or ``event=enemy_attack``, rather than going
through the stdlib ``logging`` tree (which ``roguegrid.server`` configures for
Flask and Werkzeug only). Lines are key=value by default or compact JSON when
``ROGUEGRID_LOG_JSON`` is set, so a seeded replay can be diffed line by line.

Thresholds: ``ROGUEGRID_LOG_LEVEL`` (debug/info/warn/error) at import, or
``set_level`` from the CLI ``--log-level`` flag. ``play`` and ``generate``
default to ``warn`` so the terminal map is not interleaved with events.
Error lines go to stderr.

Usage:
    from roguegrid.logging_utils import log
    log.info(event="map_generated", rooms=7, connected=True)

Fields set to None are dropped; other values are stringified with spaces
replaced by underscores. Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("ROGUEGRID_LOG_LEVEL", "info"), 20)
JSON_MODE = os.getenv("ROGUEGRID_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        try:
            return json.dumps(rec, separators=(",", ":"), default=repr)
        except (TypeError, ValueError):
            return json.dumps({"level": level, "ts": int(time.time()), "error": "json_encode_failed"})
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "roguegrid"

    def enabled_for(self, lvl: str) -> bool:
        return LEVELS[lvl] >= CURRENT_LEVEL

    def _log(self, lvl: str, **fields):
        if not self.enabled_for(lvl):
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stdout if lvl != "error" else sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


def set_level(level: str) -> None:
    """Change the process-wide threshold (used by the CLI ``--log-level`` flag)."""
    global CURRENT_LEVEL
    CURRENT_LEVEL = LEVELS.get(level, CURRENT_LEVEL)


log = get_logger("roguegrid")
