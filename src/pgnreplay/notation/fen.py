"""FEN piece-placement parsing and serialization."""

from __future__ import annotations

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import make_square

INITIAL_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_to_placement(board: Board) -> str:
    """Serialise *board* to the FEN piece-placement field."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def board_from_placement(placement: str) -> Board:
    """Parse a FEN piece-placement field into a :class:`Board`."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def start_from_fen(fen: str) -> tuple[Board, Color]:
    """Board and side to move from a full FEN record.

    Only the placement and side-to-move fields are read; castling rights,
    en passant and the clocks are accepted but ignored.
    """
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")
    board = board_from_placement(parts[0])
    side_part = parts[1] if len(parts) > 1 else "w"
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")
    return board, side
