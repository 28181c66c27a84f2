"""Read-only render helpers shared by the CLI, the Textual client and the API.

Draw order mirrors a layered renderer: floor/walls, then items, then enemies,
then the player on top.
"""

from __future__ import annotations

from typing import Dict, List

from roguegrid.dungeon import ENEMY, FLOOR, PLAYER, WALL, Grid
from roguegrid.models import ItemKind

GLYPHS: Dict[object, str] = {
    WALL: "#",
    FLOOR: ".",
    PLAYER: "@",
    ENEMY: "E",
    ItemKind.HEALTH_POTION: "!",
    ItemKind.SWORD: "/",
}

# Rich markup colours used by the terminal client
STYLES: Dict[str, str] = {
    "#": "grey50",
    ".": "grey23",
    "@": "bold yellow",
    "E": "bold red",
    "!": "green",
    "/": "cyan",
}


def render_grid(grid: Grid) -> str:
    """ASCII for a bare map (tile markers only, no item overlay)."""
    return "\n".join("".join(GLYPHS[t] for t in row) for row in grid.cells)


def _layers(session) -> List[List[str]]:
    grid = session.grid
    canvas = [[GLYPHS[WALL] if t is WALL else GLYPHS[FLOOR] for t in row] for row in grid.cells]
    for item in session.items:
        canvas[item.y][item.x] = GLYPHS[item.kind]
    for enemy in session.enemies:
        canvas[enemy.y][enemy.x] = GLYPHS[ENEMY]
    player = session.player
    canvas[player.y][player.x] = GLYPHS[PLAYER]
    return canvas


def render_ascii(session) -> str:
    return "\n".join("".join(row) for row in _layers(session))


def render_markup(session) -> str:
    """Rich console markup of the map; runs of equal glyphs share one tag."""
    lines = []
    for row in _layers(session):
        parts = []
        run_ch, run_len = row[0], 0
        for ch in row + [None]:
            if ch == run_ch:
                run_len += 1
                continue
            parts.append(f"[{STYLES[run_ch]}]{run_ch * run_len}[/]")
            run_ch, run_len = ch, 1
        lines.append("".join(parts))
    return "\n".join(lines)


def health_bar(current: int, maximum: int, width: int = 10) -> str:
    """Proportional bar, e.g. ``health_bar(15, 30, 10) == '#####-----'``."""
    if width <= 0:
        return ""
    ratio = 0.0 if maximum <= 0 else max(0.0, min(1.0, current / maximum))
    filled = round(ratio * width)
    return "#" * filled + "-" * (width - filled)


__all__ = ["GLYPHS", "render_grid", "render_ascii", "render_markup", "health_bar"]
