"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from pgnreplay.core.enums import Color, PieceType
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import Square, make_square, scan_order

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board; a cell is either ``None`` or a :class:`Piece`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is not None and not isinstance(piece, Piece):
            raise TypeError(f"Board cells hold Piece or None, got {piece!r}")
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def holds(self, sq: Square, color: Color, piece_type: PieceType) -> bool:
        """Whether *sq* holds *color*'s *piece_type*."""
        piece = self._squares[sq]
        return (
            piece is not None
            and piece.color == color
            and piece.piece_type == piece_type
        )

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*, in scan order."""
        return [sq for sq in scan_order() if self.holds(sq, color, piece_type)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
