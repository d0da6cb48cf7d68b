"""Core domain layer: board model, origin resolution and move execution.

Quick start::

    from pgnreplay.core import Board, Color, Piece, execute_move, resolve_origin
    from pgnreplay.notation import parse_san, board_to_placement

    board = Board.initial()
    move = parse_san("Nf3", Color.WHITE)
    origin = resolve_origin(board, move)
    execute_move(board, origin, move.destination, Piece(Color.WHITE, move.piece_type), move)
    print(board_to_placement(board))
"""

from pgnreplay.core.board import Board
from pgnreplay.core.enums import (
    AmbiguityPolicy,
    CastleSide,
    CheckState,
    Color,
    DisambiguationKind,
    PieceType,
)
from pgnreplay.core.errors import (
    AmbiguousMoveError,
    MoveError,
    MoveFormatError,
    OriginNotFoundError,
    UnsupportedMoveError,
)
from pgnreplay.core.executor import CASTLE_SQUARES, execute_castle, execute_move
from pgnreplay.core.geometry import is_valid_path, ray_is_clear
from pgnreplay.core.piece import Piece
from pgnreplay.core.resolver import find_candidates, resolve_origin
from pgnreplay.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "AmbiguityPolicy",
    "CastleSide",
    "CheckState",
    "Color",
    "DisambiguationKind",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    # Errors
    "AmbiguousMoveError",
    "MoveError",
    "MoveFormatError",
    "OriginNotFoundError",
    "UnsupportedMoveError",
    # Resolution / execution
    "CASTLE_SQUARES",
    "execute_castle",
    "execute_move",
    "find_candidates",
    "is_valid_path",
    "ray_is_clear",
    "resolve_origin",
]
