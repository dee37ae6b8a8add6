"""
Command line entry point.

    bloomsnake serve [--host H] [--port P] [--weights FILE] [--debug-dump]
    bloomsnake move STATE.json [--weights FILE]
    bloomsnake dump STATE.json [--weights FILE]
    bloomsnake weights [--weights FILE]
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from bloomsnake.config import ServerConfig, Weights, dump_weights, load_weights
from bloomsnake.logs import setup_logger
from bloomsnake.render import render_board, render_grid
from bloomsnake.server import run_server
from bloomsnake.snake import Snake, decide
from bloomsnake.snapshot import GameSnapshot


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Influence-grid Battlesnake")
    parser.add_argument(
        "--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--log-file", default=None, help="Also append logs to this file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the Battlesnake HTTP server")
    serve.add_argument("--host", default=None, help="Bind address (default: $HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: $PORT or 8000)")
    serve.add_argument("--weights", default=None, help="YAML/JSON file with weight overrides")
    serve.add_argument(
        "--debug-dump", action="store_true", help="Log the board and influence grid every turn"
    )

    move = subparsers.add_parser("move", help="Print the move for a saved game state")
    move.add_argument("state", help="Path to a Battlesnake move request JSON")
    move.add_argument("--weights", default=None, help="YAML/JSON file with weight overrides")

    dump = subparsers.add_parser("dump", help="Print the board, influence grid and scores")
    dump.add_argument("state", help="Path to a Battlesnake move request JSON")
    dump.add_argument("--weights", default=None, help="YAML/JSON file with weight overrides")

    weights = subparsers.add_parser("weights", help="Print the effective weights as JSON")
    weights.add_argument("--weights", default=None, help="YAML/JSON file with weight overrides")

    return parser.parse_args(argv)


def _load_snapshot(path: str) -> GameSnapshot:
    try:
        with open(path) as f:
            game_state = json.load(f)
    except FileNotFoundError:
        raise ValueError(f"File not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")
    return GameSnapshot.from_game_state(game_state)


def _weights(path) -> Weights:
    return load_weights(path) if path else Weights()


def serve(args):
    config = ServerConfig.from_env()
    config = ServerConfig(
        host=args.host or config.host,
        port=args.port or config.port,
        weights_path=args.weights or config.weights_path,
        debug_dump=args.debug_dump or config.debug_dump,
    )
    snake = Snake(weights=config.load_weights(), debug_dump=config.debug_dump)
    run_server(snake.handlers(), host=config.host, port=config.port)


def move(args):
    snapshot = _load_snapshot(args.state)
    print(decide(snapshot, _weights(args.weights)).move)


def dump(args):
    snapshot = _load_snapshot(args.state)
    decision = decide(snapshot, _weights(args.weights))
    print(f"turn {snapshot.turn} ({snapshot.width}x{snapshot.height})")
    print(render_board(snapshot))
    print()
    print(render_grid(decision.grid))
    print()
    for direction, score in decision.scores.items():
        marker = " <" if direction == decision.move else ""
        print(f"{direction:>5}: {score}{marker}")


def show_weights(args):
    print(dump_weights(_weights(args.weights)))


COMMANDS = {
    "serve": serve,
    "move": move,
    "dump": dump,
    "weights": show_weights,
}


def main(argv=None):
    load_dotenv()
    args = parse_args(argv)
    setup_logger(getattr(logging, args.log_level), args.log_file)
    try:
        COMMANDS[args.command](args)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
