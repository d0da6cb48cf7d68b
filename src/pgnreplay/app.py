"""Command-line entry point: print a PGN game's tags and final position."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pgnreplay.config import ReplayOptions
from pgnreplay.core.enums import AmbiguityPolicy
from pgnreplay.core.errors import MoveError
from pgnreplay.notation.fen import board_to_placement
from pgnreplay.notation.pgn import SEVEN_TAG_ROSTER, parse_pgn_game
from pgnreplay.replay import replay_game

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_MISSING_TAG = "NOT GIVEN"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnreplay",
        description="Replay a PGN game and print its final FEN piece placement.",
    )
    parser.add_argument("path", type=Path, help="PGN file holding one game")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail on moves more than one piece could make instead of taking the first",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _read_pgn(path: Path) -> str:
    """Decode a PGN file as UTF-8, falling back to Latin-1 exports."""
    data = path.read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        _LOGGER.debug("%s is not UTF-8; decoding as Latin-1", path)
        return data.decode("latin-1")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=_LOG_FORMAT)

    if args.strict:
        options = ReplayOptions(ambiguity=AmbiguityPolicy.STRICT)
    else:
        try:
            options = ReplayOptions.from_env()
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    try:
        pgn_text = _read_pgn(args.path)
    except OSError as exc:
        print(f"error: cannot read {args.path}: {exc}", file=sys.stderr)
        return 1

    try:
        game = parse_pgn_game(pgn_text)
        placement = board_to_placement(replay_game(game, options))
    except MoveError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: invalid PGN in {args.path}: {exc}", file=sys.stderr)
        return 1

    _LOGGER.info("Replayed %d plies from %s", len(game.moves), args.path)
    for tag in SEVEN_TAG_ROSTER:
        value = game.tag(tag)
        if value is None and tag == "Result":
            value = game.result
        print(f"{tag}: {_MISSING_TAG if value is None else value}")
    print("Final Position:")
    print(placement)
    return 0


if __name__ == "__main__":
    sys.exit(main())
