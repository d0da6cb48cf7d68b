"""Replay a SAN move list onto a board and encode the final position."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pgnreplay.config import ReplayOptions
from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color
from pgnreplay.core.errors import MoveError
from pgnreplay.core.executor import execute_castle, execute_move
from pgnreplay.core.piece import Piece
from pgnreplay.core.resolver import resolve_origin
from pgnreplay.core.types import square_name
from pgnreplay.notation.fen import board_to_placement, start_from_fen
from pgnreplay.notation.models import CastleMove, ParsedMove, PgnGame
from pgnreplay.notation.pgn import parse_pgn_game
from pgnreplay.notation.san import parse_san

_LOGGER = logging.getLogger(__name__)


def apply_san(
    board: Board,
    san: str,
    color: Color,
    options: ReplayOptions | None = None,
) -> ParsedMove:
    """Parse, resolve and execute one SAN token for *color*."""
    opts = options or ReplayOptions()
    move = parse_san(san, color)

    if isinstance(move, CastleMove):
        execute_castle(board, move)
        _LOGGER.debug("%s castles %s", color, move.side.name.lower())
        return move

    origin = resolve_origin(board, move, opts.ambiguity)
    execute_move(
        board, origin, move.destination, Piece(color, move.piece_type), move
    )
    _LOGGER.debug(
        "%s %s: %s -> %s",
        color,
        san,
        square_name(origin),
        square_name(move.destination),
    )
    return move


def replay_moves(
    moves: Iterable[str],
    *,
    board: Board | None = None,
    first_color: Color = Color.WHITE,
    options: ReplayOptions | None = None,
) -> Board:
    """Play *moves* in order, alternating colors, and return the board.

    *board* defaults to the standard initial position and is mutated in
    place. The first error aborts the replay; it propagates with its ``ply``
    (0-based) and ``token`` set.
    """
    current = Board.initial() if board is None else board
    color = first_color
    for ply, san in enumerate(moves):
        try:
            apply_san(current, san, color, options)
        except MoveError as exc:
            exc.ply = ply
            exc.token = san
            _LOGGER.error("Replay aborted at ply %d (%r): %s", ply, san, exc.message)
            raise
        color = color.opposite
    return current


def replay_game(game: PgnGame, options: ReplayOptions | None = None) -> Board:
    """Replay the mainline of an already parsed game.

    Games carrying ``[SetUp "1"]`` and a ``FEN`` tag start from that
    position instead of the standard one.
    """
    board: Board | None = None
    first_color = Color.WHITE
    fen = game.tag("FEN")
    if game.tag("SetUp") == "1" and fen is not None:
        board, first_color = start_from_fen(fen)
    return replay_moves(
        game.moves, board=board, first_color=first_color, options=options
    )


def final_position(pgn_text: str, options: ReplayOptions | None = None) -> str:
    """FEN piece placement reached at the end of a PGN game's mainline."""
    return board_to_placement(replay_game(parse_pgn_game(pgn_text), options))
