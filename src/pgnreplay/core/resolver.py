"""Origin resolution: which square does a SAN move start from?"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pgnreplay.core.board import Board
from pgnreplay.core.enums import AmbiguityPolicy, DisambiguationKind, PieceType
from pgnreplay.core.errors import AmbiguousMoveError, OriginNotFoundError
from pgnreplay.core.geometry import is_valid_path
from pgnreplay.core.types import (
    Square,
    file_of,
    make_square,
    on_board,
    rank_of,
    scan_order,
    square_name,
)
from pgnreplay.notation.models import StandardMove

_LOGGER = logging.getLogger(__name__)


def _file_squares(file: int) -> list[Square]:
    return [make_square(file, rank) for rank in range(7, -1, -1)]


def _rank_squares(rank: int) -> list[Square]:
    return [make_square(file, rank) for file in range(8)]


def _matching(board: Board, move: StandardMove, squares: Iterable[Square]) -> list[Square]:
    return [
        sq
        for sq in squares
        if board.holds(sq, move.color, move.piece_type)
        and is_valid_path(
            board, sq, move.destination, move.piece_type, move.color, move.is_capture
        )
    ]


def _pawn_push_candidates(board: Board, move: StandardMove) -> list[Square]:
    file = file_of(move.destination)
    forward = move.color.forward
    one_back = rank_of(move.destination) - forward
    if not on_board(file, one_back):
        return []
    single = make_square(file, one_back)
    if board.holds(single, move.color, PieceType.PAWN):
        return [single]
    two_back = one_back - forward
    if board.is_empty(single) and on_board(file, two_back):
        return _matching(board, move, [make_square(file, two_back)])
    return []


def _pawn_capture_candidates(board: Board, move: StandardMove, file: int) -> list[Square]:
    rank = rank_of(move.destination) - move.color.forward
    if not on_board(file, rank):
        return []
    return _matching(board, move, [make_square(file, rank)])


def find_candidates(board: Board, move: StandardMove) -> list[Square]:
    """Every square, in scan order, from which *move* could have been played."""
    hint = move.disambiguation
    kind = hint.kind
    is_pawn = move.piece_type == PieceType.PAWN

    if kind == DisambiguationKind.SQUARE:
        return [hint.square]
    if kind == DisambiguationKind.RANK:
        assert hint.rank is not None
        return _matching(board, move, _rank_squares(hint.rank))
    if kind == DisambiguationKind.FILE:
        assert hint.file is not None
        if is_pawn and move.is_capture:
            return _pawn_capture_candidates(board, move, hint.file)
        return _matching(board, move, _file_squares(hint.file))
    if is_pawn and not move.is_capture:
        return _pawn_push_candidates(board, move)
    return _matching(board, move, scan_order())


def resolve_origin(
    board: Board,
    move: StandardMove,
    policy: AmbiguityPolicy = AmbiguityPolicy.FIRST_MATCH,
) -> Square:
    """Find the origin square of *move* on *board*.

    A full-square disambiguation is trusted as written. Otherwise the
    candidates are searched in scan order (rank 8 to 1, file a to h); with
    :attr:`AmbiguityPolicy.FIRST_MATCH` the first one wins, with
    :attr:`AmbiguityPolicy.STRICT` more than one raises
    :class:`AmbiguousMoveError`.
    """
    if move.disambiguation.kind == DisambiguationKind.SQUARE:
        return move.disambiguation.square

    candidates = find_candidates(board, move)
    target = square_name(move.destination)
    piece = f"{str(move.color)} {move.piece_type.name.lower()}"
    if not candidates:
        raise OriginNotFoundError(f"No {piece} can reach {target}")
    if len(candidates) > 1:
        names = ", ".join(square_name(sq) for sq in candidates)
        if policy == AmbiguityPolicy.STRICT:
            raise AmbiguousMoveError(
                f"Several {piece}s can reach {target}: {names}"
            )
        _LOGGER.warning(
            "Ambiguous %s to %s from %s; using %s",
            piece,
            target,
            names,
            square_name(candidates[0]),
        )
    return candidates[0]
