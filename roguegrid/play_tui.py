"""Textual terminal client for a single local game.

Panels:
 - Map (coloured glyphs, player on top)
 - Stats (health bar, attack, enemies and items left)
 - Event Log (one line per turn event)

Run with: `python run.py play [--seed N]`
"""

from __future__ import annotations

from typing import Optional

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Log, Static

from roguegrid.dungeon import DungeonConfig
from roguegrid.game import GameOutcome, GameSession, generate_map
from roguegrid.game.view import health_bar, render_markup


class RogueGridApp(App):
    """Play one dungeon in the terminal.

    Every key press is forwarded to ``GameSession.handle_key`` so the terminal
    client and the web transports share the same input vocabulary. Once the
    game is won or lost, movement keys are ignored until ``n`` starts a new map.
    """

    CSS = """
    Screen { layout: vertical; }
    .panel { border: tall $primary; padding: 0 1; }
    .panel-title { content-align: center middle; text-style: bold; }
    #map-panel { width: 3fr; }
    #side-panel { width: 1fr; }
    #log-panel { height: 8; }
    """

    BINDINGS = [
        ("w", "play_key('w')", "Up"),
        ("a", "play_key('a')", "Left"),
        ("s", "play_key('s')", "Down"),
        ("d", "play_key('d')", "Right"),
        ("up", "play_key('up')", "Up"),
        ("down", "play_key('down')", "Down"),
        ("left", "play_key('left')", "Left"),
        ("right", "play_key('right')", "Right"),
        ("space", "play_key('space')", "Attack"),
        ("n", "new_game", "New Game"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, seed: Optional[int] = None) -> None:
        super().__init__()
        self.seed = seed
        self.game: GameSession = generate_map(seed=seed, config=DungeonConfig.from_env())

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Header(show_clock=False)
        with Horizontal():
            with Vertical(id="map-panel", classes="panel"):
                self.map_view = Static("", id="map")
                yield self.map_view
            with Vertical(id="side-panel", classes="panel"):
                yield Static("Stats", classes="panel-title")
                self.stats_view = Static("", id="stats")
                yield self.stats_view
        with Vertical(id="log-panel", classes="panel"):
            self.event_log = Log()
            # movement keys belong to the game, not log scrolling
            self.event_log.can_focus = False
            yield self.event_log
        yield Footer()

    def on_mount(self) -> None:
        self.title = "RogueGrid"
        self._announce_game()
        self.refresh_view()

    def _announce_game(self) -> None:
        self.sub_title = f"seed {self.game.seed}"
        self.event_log.write_line(f"new dungeon (seed {self.game.seed}); defeat every enemy")

    def stats_text(self) -> str:
        info = self.game.game_info()
        lines = [
            f"HP  {health_bar(info['health'], info['max_health'])} {info['health']}/{info['max_health']}",
            f"ATK {info['attack_power']}",
            f"Enemies left: {info['enemies']}",
            f"Potions: {info['potions']}  Swords: {info['swords']}",
            f"Turn: {self.game.turn}",
        ]
        if self.game.outcome is GameOutcome.VICTORY:
            lines.append("[bold green]VICTORY[/]  (n: new game)")
        elif self.game.outcome is GameOutcome.DEFEAT:
            lines.append("[bold red]DEFEAT[/]  (n: new game)")
        return "\n".join(lines)

    def refresh_view(self) -> None:
        self.map_view.update(render_markup(self.game))
        self.stats_view.update(self.stats_text())

    def action_play_key(self, key: str) -> None:
        result = self.game.handle_key(key)
        if not result.acted:
            return
        for line in result.events:
            self.event_log.write_line(line)
        self.refresh_view()

    def action_new_game(self) -> None:
        # a fixed --seed only applies to the first map
        self.game = generate_map(config=DungeonConfig.from_env())
        self.event_log.clear()
        self._announce_game()
        self.refresh_view()


def run_play_tui(seed: Optional[int] = None) -> None:  # pragma: no cover (interactive)
    app = RogueGridApp(seed=seed)
    app.run()
