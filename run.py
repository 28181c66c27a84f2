"""RogueGrid CLI entry point.

Provides subcommands for running the Socket.IO server, playing a game in the
terminal and printing a generated map. Accepts configuration via flags and
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    RogueGrid

    Run the Flask-SocketIO game server, play a dungeon in the terminal, or print
    a generated map. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                                 Bind address for the web server (default: 0.0.0.0)
          PORT                                 Port for the web server (default: 5000)
          ROGUEGRID_MAP_WIDTH                  Map width in cells (default: 40)
          ROGUEGRID_MAP_HEIGHT                 Map height in cells (default: 24)
          ROGUEGRID_LOG_LEVEL                  debug | info | warn | error (default: info)
          ROGUEGRID_LOG_JSON                   Emit structured logs as JSON when 1
          ROGUEGRID_ENABLE_GENERATION_METRICS  Collect generation metrics (default: 1)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Play a reproducible dungeon in the terminal
          python run.py play --seed 42

          # Print a small map with its generation metrics
          python run.py generate --seed 7 --width 30 --height 15 --metrics

          # Load variables from .env then run the server
          python run.py --env-file .env server

        Terminal controls:
          w a s d / arrows   Move
          space              Attack adjacent enemies
          n                  New game
          q                  Quit
        """
    )

    parser = argparse.ArgumentParser(
        prog="RogueGrid",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["debug", "info", "warn", "error"],
        default=None,
        help="Structured log threshold (default: env ROGUEGRID_LOG_LEVEL or info)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"RogueGrid {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the Socket.IO web server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the real-time Flask/Socket.IO server",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # play subcommand (Textual)
    play_parser = subparsers.add_parser(
        "play",
        help="Play a dungeon in the terminal (Textual UI)",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Launch the terminal client for a single local game.",
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for the first map (default: random)")
    play_parser.set_defaults(command="play")

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a map and print it as ASCII",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a map with entities placed and print it to stdout.",
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed (default: random)")
    gen_parser.add_argument("--width", type=int, default=None, help="Map width (default: env ROGUEGRID_MAP_WIDTH or 40)")
    gen_parser.add_argument("--height", type=int, default=None, help="Map height (default: env ROGUEGRID_MAP_HEIGHT or 24)")
    gen_parser.add_argument("--metrics", action="store_true", help="Also print generation metrics as JSON")
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "server"
    return args


def _banner(mode: str, rows) -> str:
    title = f"{Fore.CYAN}{Style.BRIGHT}RogueGrid{Style.RESET_ALL}" if _COLOR_ENABLED else "RogueGrid"

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [divider, f"  {title}", divider, f"  {label('Mode:'):12} {value(mode.upper())}"]
    for name, val in rows:
        lines.append(f"  {label(name + ':'):12} {value(val)}")
    lines.extend([divider, ""])
    return "\n".join(lines)


def _run_generate(args) -> int:
    from roguegrid.dungeon import DungeonConfig
    from roguegrid.game import generate_map
    from roguegrid.game.view import render_ascii

    try:
        config = DungeonConfig.from_env(width=args.width, height=args.height)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    game = generate_map(seed=args.seed, config=config)
    print(f"seed={game.seed} size={game.grid.width}x{game.grid.height}")
    print(render_ascii(game))
    if args.metrics:
        print(json.dumps(game.metrics, indent=2, sort_keys=True))
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    # Load .env if requested; otherwise a default .env when present (no error if missing)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    from roguegrid import logging_utils
    from roguegrid.logging_utils import log

    mode = (getattr(args, "command", None) or "server").lower()
    if args.log_level:
        logging_utils.set_level(args.log_level)
    elif mode in ("play", "generate") and not os.getenv("ROGUEGRID_LOG_LEVEL"):
        # keep terminal output to the map itself
        logging_utils.set_level("warn")

    if mode == "generate":
        return _run_generate(args)

    if mode == "play":
        from roguegrid.play_tui import run_play_tui

        run_play_tui(seed=args.seed)
        return 0

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoint only after environment is ready
    from roguegrid import server

    print(
        _banner(
            mode,
            [
                ("Host", host),
                ("Port", port),
                ("Map", f"{os.getenv('ROGUEGRID_MAP_WIDTH', '40')}x{os.getenv('ROGUEGRID_MAP_HEIGHT', '24')}"),
                ("WebSockets", "enabled"),
                ("Debug", "YES" if debug else "NO"),
            ],
        )
    )
    info_prefix = f"{Fore.CYAN}[INFO]{Style.RESET_ALL}" if _COLOR_ENABLED else "[INFO]"
    print(f"{info_prefix} Listening for connections... Press Ctrl+C to stop.")
    log.info(event="startup", mode=mode, host=host, port=port, debug=debug)
    server.start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
