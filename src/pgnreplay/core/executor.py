"""Board mutation for resolved moves."""

from __future__ import annotations

from pgnreplay.core.board import Board
from pgnreplay.core.enums import CastleSide, Color, PieceType
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import (
    A1, A8, C1, C8, D1, D8, E1, E8, F1, F8, G1, G8, H1, H8,
    Square,
    file_of,
    make_square,
    on_board,
    rank_of,
)
from pgnreplay.notation.models import CastleMove, StandardMove

# (color, side) -> ((king_from, king_to), (rook_from, rook_to))
CASTLE_SQUARES: dict[
    tuple[Color, CastleSide], tuple[tuple[Square, Square], tuple[Square, Square]]
] = {
    (Color.WHITE, CastleSide.KINGSIDE): ((E1, G1), (H1, F1)),
    (Color.WHITE, CastleSide.QUEENSIDE): ((E1, C1), (A1, D1)),
    (Color.BLACK, CastleSide.KINGSIDE): ((E8, G8), (H8, F8)),
    (Color.BLACK, CastleSide.QUEENSIDE): ((E8, C8), (A8, D8)),
}


def execute_move(
    board: Board,
    origin: Square,
    destination: Square,
    piece: Piece,
    move: StandardMove | None = None,
) -> Piece | None:
    """Relocate *piece* from *origin* to *destination* and return what it captured.

    A capture onto an empty square takes the pawn standing one rank behind
    the destination (en passant). A promotion writes the promoted piece
    instead of *piece*.
    """
    captured = board[destination]
    if move is not None and move.is_capture and captured is None:
        file = file_of(destination)
        rank = rank_of(destination) - piece.color.forward
        if on_board(file, rank):
            passed = make_square(file, rank)
            captured = board[passed]
            board[passed] = None

    placed = piece
    if move is not None and move.promotion is not None:
        placed = Piece(piece.color, move.promotion)

    board[origin] = None
    board[destination] = placed
    return captured


def execute_castle(board: Board, move: CastleMove) -> None:
    """Move the king, then the rook, between their fixed castling squares."""
    (king_from, king_to), (rook_from, rook_to) = CASTLE_SQUARES[(move.color, move.side)]
    execute_move(board, king_from, king_to, Piece(move.color, PieceType.KING))
    execute_move(board, rook_from, rook_to, Piece(move.color, PieceType.ROOK))
