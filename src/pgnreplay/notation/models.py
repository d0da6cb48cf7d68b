"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from pgnreplay.core.enums import (
    CastleSide,
    CheckState,
    Color,
    DisambiguationKind,
    PieceType,
)
from pgnreplay.core.types import FILE_NAMES, RANK_NAMES, Square, make_square


@dataclass(frozen=True, slots=True)
class Disambiguation:
    """Origin hint written between the piece letter and the destination."""

    file: int | None = None
    rank: int | None = None

    @property
    def kind(self) -> DisambiguationKind:
        if self.file is not None and self.rank is not None:
            return DisambiguationKind.SQUARE
        if self.file is not None:
            return DisambiguationKind.FILE
        if self.rank is not None:
            return DisambiguationKind.RANK
        return DisambiguationKind.NONE

    @property
    def square(self) -> Square:
        """Origin square of a fully disambiguated move."""
        if self.file is None or self.rank is None:
            raise ValueError(f"Disambiguation {self} is not a full square")
        return make_square(self.file, self.rank)

    def __str__(self) -> str:
        text = ""
        if self.file is not None:
            text += FILE_NAMES[self.file]
        if self.rank is not None:
            text += RANK_NAMES[self.rank]
        return text


@dataclass(frozen=True, slots=True)
class StandardMove:
    """Any SAN move other than castling."""

    color: Color
    piece_type: PieceType
    destination: Square
    is_capture: bool = False
    check: CheckState = CheckState.NONE
    disambiguation: Disambiguation = field(default_factory=Disambiguation)
    promotion: PieceType | None = None


@dataclass(frozen=True, slots=True)
class CastleMove:
    """``O-O`` or ``O-O-O`` for one side."""

    color: Color
    side: CastleSide
    check: CheckState = CheckState.NONE


ParsedMove: TypeAlias = StandardMove | CastleMove


@dataclass(slots=True)
class PgnGame:
    """Structured PGN payload: tag pairs, mainline SAN tokens and result.

    *result* is the termination marker (``1-0``, ``0-1``, ``1/2-1/2``, ``*``)
    or ``None`` when the game gives none.
    """

    headers: dict[str, str]
    moves: list[str]
    result: str | None = None

    def tag(self, name: str) -> str | None:
        """Value of tag *name*, or ``None`` when the game does not carry it."""
        return self.headers.get(name)
