"""Notation package: SAN parsing, FEN placement and PGN extraction."""

from pgnreplay.notation.fen import (
    INITIAL_PLACEMENT,
    board_from_placement,
    board_to_placement,
    start_from_fen,
)
from pgnreplay.notation.models import (
    CastleMove,
    Disambiguation,
    ParsedMove,
    PgnGame,
    StandardMove,
)
from pgnreplay.notation.pgn import (
    SEVEN_TAG_ROSTER,
    list_moves,
    parse_pgn_game,
    tag_value,
)
from pgnreplay.notation.san import parse_san

__all__ = [
    "INITIAL_PLACEMENT",
    "SEVEN_TAG_ROSTER",
    "CastleMove",
    "Disambiguation",
    "ParsedMove",
    "PgnGame",
    "StandardMove",
    "board_from_placement",
    "board_to_placement",
    "list_moves",
    "parse_pgn_game",
    "parse_san",
    "start_from_fen",
    "tag_value",
]
