"""Core enumerations for the replay domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction pawns of this color advance in."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CheckState(IntEnum):
    """Check marker written after a SAN move."""

    NONE = 0
    CHECK = 1
    MATE = 2


class CastleSide(IntEnum):
    """Which rook the king castles with."""

    KINGSIDE = 0
    QUEENSIDE = 1


class DisambiguationKind(IntEnum):
    """Shape of the origin hint carried by a SAN move."""

    NONE = 0
    FILE = 1
    RANK = 2
    SQUARE = 3


class AmbiguityPolicy(IntEnum):
    """What the origin resolver does when several pieces fit a move."""

    FIRST_MATCH = 0
    STRICT = 1
