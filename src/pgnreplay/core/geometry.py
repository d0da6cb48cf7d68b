"""Per-piece geometric move validation.

Validators answer one question: can a piece of a given kind travel from
*origin* to *destination* on the current board? Occupancy matters only for the
squares strictly between the two (and for the square a pawn double-steps
over). King safety is not considered.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color, PieceType
from pgnreplay.core.types import Square, file_of, make_square, on_board, rank_of

Validator: TypeAlias = Callable[[Board, Square, Square, Color, bool], bool]

_PAWN_HOME_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _deltas(origin: Square, destination: Square) -> tuple[int, int]:
    return (
        file_of(destination) - file_of(origin),
        rank_of(destination) - rank_of(origin),
    )


def ray_is_clear(
    board: Board, origin: Square, step: tuple[int, int], steps: int
) -> bool:
    """Whether the ``steps - 1`` squares walked from *origin* along *step* are empty.

    The square reached after the last step (the destination) is not inspected.
    """
    step_file, step_rank = step
    file, rank = file_of(origin), rank_of(origin)
    for i in range(1, steps):
        f = file + step_file * i
        r = rank + step_rank * i
        if not on_board(f, r) or not board.is_empty(make_square(f, r)):
            return False
    return True


def _slide(
    board: Board,
    origin: Square,
    destination: Square,
    *,
    straight: bool,
    diagonal: bool,
) -> bool:
    df, dr = _deltas(origin, destination)
    if df == 0 and dr == 0:
        return False
    if df == 0 or dr == 0:
        if not straight:
            return False
    elif abs(df) == abs(dr):
        if not diagonal:
            return False
    else:
        return False
    return ray_is_clear(board, origin, (_sign(df), _sign(dr)), max(abs(df), abs(dr)))


def pawn_path(
    board: Board, origin: Square, destination: Square, color: Color, is_capture: bool
) -> bool:
    """Forward advance (single, or double from home rank), or a diagonal capture."""
    df, dr = _deltas(origin, destination)
    forward = color.forward
    if is_capture:
        return abs(df) == 1 and dr == forward
    if df != 0:
        return False
    if dr == forward:
        return True
    return (
        dr == 2 * forward
        and rank_of(origin) == _PAWN_HOME_RANK[color]
        and ray_is_clear(board, origin, (0, forward), 2)
    )


def knight_path(
    board: Board, origin: Square, destination: Square, color: Color, is_capture: bool
) -> bool:
    df, dr = _deltas(origin, destination)
    return {abs(df), abs(dr)} == {1, 2}


def bishop_path(
    board: Board, origin: Square, destination: Square, color: Color, is_capture: bool
) -> bool:
    return _slide(board, origin, destination, straight=False, diagonal=True)


def rook_path(
    board: Board, origin: Square, destination: Square, color: Color, is_capture: bool
) -> bool:
    return _slide(board, origin, destination, straight=True, diagonal=False)


def queen_path(
    board: Board, origin: Square, destination: Square, color: Color, is_capture: bool
) -> bool:
    return _slide(board, origin, destination, straight=True, diagonal=True)


def king_path(
    board: Board, origin: Square, destination: Square, color: Color, is_capture: bool
) -> bool:
    df, dr = _deltas(origin, destination)
    return max(abs(df), abs(dr)) == 1


VALIDATORS: dict[PieceType, Validator] = {
    PieceType.PAWN: pawn_path,
    PieceType.KNIGHT: knight_path,
    PieceType.BISHOP: bishop_path,
    PieceType.ROOK: rook_path,
    PieceType.QUEEN: queen_path,
    PieceType.KING: king_path,
}


def is_valid_path(
    board: Board,
    origin: Square,
    destination: Square,
    piece_type: PieceType,
    color: Color,
    is_capture: bool = False,
) -> bool:
    """Dispatch to the validator for *piece_type*."""
    return VALIDATORS[piece_type](board, origin, destination, color, is_capture)
