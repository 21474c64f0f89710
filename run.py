"""Cognitive Assessment Suite CLI entry point.

Provides subcommands for running the Socket.IO server and for previewing
generated puzzles without starting it. Accepts configuration via flags and
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import random
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except (AttributeError, ValueError):  # pragma: no cover - environment dependent
    _COLOR_ENABLED = False


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()

PREVIEW_GAMES = ("maze", "path", "bubble")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Cognitive Assessment Suite

    Run the real-time Flask-SocketIO server for the maze, arrow path and
    numerical sort games, or preview a generated puzzle as JSON. Configuration
    can be provided via CLI flags or environment variables. If both are
    present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                    Bind address for the web server (default: 0.0.0.0)
          PORT                    Port for the web server (default: 5000)
          SECRET_KEY              Flask session signing key
          MAZE_MAX_ATTEMPTS       Candidate mazes tried per level (default: 500)
          MAZE_STRICT_GENERATION  Fail instead of relaxing walls (default: 0)
          GAME_TIMERS_ENABLED     Run countdown timers (default: 1)
          COGSUITE_LOG_LEVEL      debug|info|warn|error (default: info)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Run the server on a custom port
          python run.py server --port 8080

          # Load variables from .env then run the server
          python run.py --env-file .env server

          # Print a reproducible hard maze
          python run.py preview maze --level 2 --seed 42
        """
    )

    parser = argparse.ArgumentParser(
        prog="cogsuite",
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
        "--version",
        action="version",
        version=f"Cognitive Assessment Suite {__version__}",
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

    # preview subcommand
    preview_parser = subparsers.add_parser(
        "preview",
        help="Generate one puzzle and print it as JSON",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Generate a puzzle offline and print it as JSON.

              maze    --level is the tier index (0 Easy, 1 Medium, 2 Hard)
              path    --level is the puzzle level (grid grows at 11 and 21)
              bubble  --level is the difficulty (1 practice, 2 assessment)
            """
        ),
    )
    preview_parser.add_argument("game", choices=PREVIEW_GAMES, help="Which game to preview")
    preview_parser.add_argument("--level", type=int, default=None, help="Level / tier / difficulty")
    preview_parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible puzzle")
    preview_parser.set_defaults(command="preview")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    args = parser.parse_args(argv)
    return args


def preview(game: str, level=None, seed=None) -> dict:
    """Build the preview payload for ``game``."""
    from cogsuite.games.bubbles import generate_bubble_set
    from cogsuite.games.config import MAZE_LEVELS
    from cogsuite.games.maze import generate_playable_maze
    from cogsuite.games.path_puzzle import generate_for_level
    from cogsuite.games.path_validator import validate_path
    from cogsuite.games.reachability import reachable

    rng = random.Random(seed)
    if game == "maze":
        idx = 0 if level is None else level
        if not 0 <= idx < len(MAZE_LEVELS):
            raise ValueError(f"maze level must be in [0, {len(MAZE_LEVELS) - 1}]")
        lvl = MAZE_LEVELS[idx]
        result = generate_playable_maze(lvl.grid_size, lvl.wall_count, rng=rng)
        inst = result.instance
        return {
            "game": game,
            "level": lvl.to_dict(),
            "maze": inst.to_dict(include_walls=True),
            "start_to_key": reachable(inst.grid_size, inst.walls, inst.start, inst.key),
            "key_to_door": reachable(inst.grid_size, inst.walls, inst.key, inst.door),
            "metrics": result.metrics,
        }
    if game == "path":
        grid = generate_for_level(1 if level is None else level, rng)
        return {"game": game, "grid": grid.to_dict(), "check": validate_path(grid).to_dict()}
    if game == "bubble":
        bubbles = generate_bubble_set(1 if level is None else level, rng)
        return {"game": game, "bubbles": [b.to_dict(reveal=True) for b in bubbles]}
    raise ValueError(f"unknown game '{game}'")


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()

    if mode == "preview":
        try:
            data = preview(args.game, level=args.level, seed=args.seed)
        except ValueError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return 2
        print(json.dumps(data, indent=2, sort_keys=True))
        return 0

    # Resolve configuration from CLI flags or env vars
    env_host = os.getenv("HOST", "0.0.0.0")
    env_port = int(os.getenv("PORT", "5000"))

    host = getattr(args, "host", None) or env_host
    port = int(getattr(args, "port", None) or env_port)
    debug = bool(getattr(args, "debug", False))

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    just_fix_windows_console()

    # Import server entrypoints only after environment is ready
    from cogsuite.logging_utils import log
    from cogsuite.server import start_server

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Cognitive Assessment Suite{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "Cognitive Assessment Suite"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    timers = os.getenv("GAME_TIMERS_ENABLED", "1").lower() in ("1", "true", "yes", "on")
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Version:'):12} {value(__version__)}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Debug:'):12} {value('YES' if debug else 'NO')}",
        f"  {label('Timers:'):12} {value('enabled' if timers else 'disabled')}",
        divider,
        "",
    ]
    print("\n".join(lines))
    log.info(event="startup", mode=mode, host=host, port=port, debug=debug)

    start_server(host=host, port=port, debug=debug)
    return 0


def _cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(_cli())
