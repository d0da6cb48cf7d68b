"""Piece value object and letter tables."""

from __future__ import annotations

from dataclasses import dataclass

from pgnreplay.core.enums import Color, PieceType

# Uppercase letter ↔ piece type, as written in SAN and in white FEN pieces.
PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
LETTER_PIECES: dict[str, PieceType] = {v: k for k, v in PIECE_LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = PIECE_LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        piece_type = LETTER_PIECES.get(char.upper()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type)
