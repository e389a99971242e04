"""Chunk World CLI entry point.

Provides subcommands for running the chunk HTTP server and for inspecting
generated chunks from a terminal. Accepts configuration via flags and
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
try:
    _COLOR_ENABLED = sys.stdout.isatty()
except Exception:  # pragma: no cover - environment dependent
    _COLOR_ENABLED = False


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.0.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Chunk World Generation Server

    Serve deterministic maze chunks over HTTP, or render them in the terminal.
    Configuration can be provided via CLI flags or environment variables. If
    both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                      Bind address for the web server (default: 0.0.0.0)
          PORT                      Port for the web server (default: 5000)
          CHUNK_SIZE                Tiles per chunk side (default: 10)
          WORLD_EXTENT              Max |x| and |y| chunk coordinate (default: 4)
          CHUNK_DECORATION_CHANCE   Per-floor-cell decoration probability (default: 0.1)
          CHUNK_DECORATION_PALETTE  Comma separated decoration values (default: 2,3,4,5)
          CHUNK_CACHE_MAX           Cached chunks kept in memory (default: 256)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Run the server on a custom port
          python run.py server --port 4000

          # Print chunk (0, 0) of world "semilla"
          python run.py render semilla 0 0

          # Print the pre-decoration floor plan of an edge chunk
          python run.py render semilla 4 -2 --structure

          # Print the whole world as one mosaic
          python run.py world semilla
        """
    )

    parser = argparse.ArgumentParser(
        prog="chunkworld",
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
        version=f"Chunk World Server {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the chunk HTTP server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask chunk generation server",
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

    render_parser = subparsers.add_parser(
        "render",
        help="Print a single chunk",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Print one chunk as ASCII art.

            Legend:  .  floor    #  wall    +  door
                     a  hazard   b  treasure   c  foliage
            """
        ),
    )
    render_parser.add_argument("seed", help="World seed")
    render_parser.add_argument("x", type=int, help="Chunk x coordinate")
    render_parser.add_argument("y", type=int, help="Chunk y coordinate")
    render_parser.add_argument(
        "--structure",
        action="store_true",
        help="Show the floor plan before the decoration pass",
    )
    render_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the HTTP payload ({\"chunk\": [...]}) instead of ASCII",
    )
    render_parser.set_defaults(command="render")

    world_parser = subparsers.add_parser(
        "world",
        help="Print every chunk of the world as one mosaic",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    world_parser.add_argument("seed", help="World seed")
    world_parser.set_defaults(command="world")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    args = parser.parse_args(argv)
    return args


def _generator_config():
    from chunkworld import create_app
    from chunkworld.chunks import GeneratorConfig

    return GeneratorConfig.from_mapping(create_app().config)


def _run_render(args) -> int:
    from chunkworld.chunks import ChunkGenerator
    from chunkworld.chunks.render import render_grid, to_rows

    cfg = _generator_config()
    outputs = ChunkGenerator(args.seed, args.x, args.y, cfg).run()
    if args.as_json:
        print(json.dumps({"chunk": outputs.tiles}))
        return 0
    grid = outputs.structure if args.structure else to_rows(outputs.tiles, cfg.size)
    print(render_grid(grid))
    return 0


def _run_world(args) -> int:
    from chunkworld.chunks.render import render_world

    print(render_world(args.seed, _generator_config()))
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()

    try:
        if mode == "render":
            return _run_render(args)
        if mode == "world":
            return _run_world(args)
    except ValueError as exc:
        print(f"[ERROR] Invalid generator configuration: {exc}", file=sys.stderr)
        return 2

    env_host = os.getenv("HOST", "0.0.0.0")
    env_port = int(os.getenv("PORT", "5000"))
    host = getattr(args, "host", None) or env_host
    port = int(getattr(args, "port", None) or env_port)
    debug = bool(getattr(args, "debug", False))

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from chunkworld.server import start_server

    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Chunk World Server Bootup{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "Chunk World Server Bootup"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Mode:'):12} {value(mode.upper())}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Extent:'):12} {value(os.getenv('WORLD_EXTENT', '4'))}",
        f"  {label('Chunk size:'):12} {value(os.getenv('CHUNK_SIZE', '10'))}",
        divider,
        "",
    ]
    print("\n".join(lines))

    try:
        start_server(host=host, port=port, debug=debug)
    except ValueError as exc:
        print(f"[ERROR] Invalid generator configuration: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
