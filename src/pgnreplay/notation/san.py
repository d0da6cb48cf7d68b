"""SAN (Standard Algebraic Notation) token parsing."""

from __future__ import annotations

from pgnreplay.core.enums import CastleSide, CheckState, Color, PieceType
from pgnreplay.core.errors import MoveFormatError, UnsupportedMoveError
from pgnreplay.core.piece import LETTER_PIECES
from pgnreplay.core.types import FILE_NAMES, RANK_NAMES, parse_square
from pgnreplay.notation.models import (
    CastleMove,
    Disambiguation,
    ParsedMove,
    StandardMove,
)

_CASTLES: dict[str, CastleSide] = {
    "O-O": CastleSide.KINGSIDE,
    "0-0": CastleSide.KINGSIDE,
    "O-O-O": CastleSide.QUEENSIDE,
    "0-0-0": CastleSide.QUEENSIDE,
}
_PROMOTION_PIECES: dict[str, PieceType] = {
    letter: piece_type
    for letter, piece_type in LETTER_PIECES.items()
    if piece_type not in (PieceType.PAWN, PieceType.KING)
}


def _split_check(text: str) -> tuple[str, CheckState]:
    if text.endswith("+"):
        return text[:-1], CheckState.CHECK
    if text.endswith("#"):
        return text[:-1], CheckState.MATE
    return text, CheckState.NONE


def _parse_disambiguation(text: str, san: str) -> Disambiguation:
    if not text:
        return Disambiguation()
    if len(text) == 2:
        if text[0] in FILE_NAMES and text[1] in RANK_NAMES:
            return Disambiguation(FILE_NAMES.index(text[0]), RANK_NAMES.index(text[1]))
    elif len(text) == 1:
        if text in FILE_NAMES:
            return Disambiguation(file=FILE_NAMES.index(text))
        if text in RANK_NAMES:
            return Disambiguation(rank=RANK_NAMES.index(text))
    raise MoveFormatError(f"Invalid disambiguation {text!r} in move {san!r}")


def _split_promotion(text: str, san: str) -> tuple[str, PieceType | None]:
    idx = text.find("=")
    if idx < 0:
        return text, None
    letter = text[idx + 1 : idx + 2]
    if not letter:
        raise UnsupportedMoveError(f"Promotion without a piece letter: {san!r}")
    promotion = _PROMOTION_PIECES.get(letter)
    if promotion is None:
        raise UnsupportedMoveError(f"Cannot promote to {letter!r}: {san!r}")
    return text[:idx] + text[idx + 2 :], promotion


def parse_san(san: str, color: Color) -> ParsedMove:
    """Parse one SAN token played by *color* into a move descriptor.

    Annotation marks (``!``/``?``) are ignored. Castling tokens short-circuit
    into a :class:`CastleMove`; everything else becomes a
    :class:`StandardMove` whose destination is the last two characters left
    after the check, capture and promotion markers are removed.
    """
    clean = san.replace("!", "").replace("?", "")
    body, check = _split_check(clean)

    # Castling
    side = _CASTLES.get(body)
    if side is not None:
        return CastleMove(color, side, check)
    if body[:1] in ("O", "0"):
        raise UnsupportedMoveError(f"Malformed castling move: {san!r}")

    # Capture marker
    is_capture = "x" in body
    body = body.replace("x", "")

    # Promotion
    body, promotion = _split_promotion(body, san)

    # Destination (last two chars)
    if len(body) < 2:
        raise MoveFormatError(f"Missing destination square in move {san!r}")
    try:
        destination = parse_square(body[-2:])
    except ValueError:
        raise MoveFormatError(f"Invalid destination square in move {san!r}") from None
    prefix = body[:-2]

    # Piece type
    piece_type = PieceType.PAWN
    if prefix and prefix[0].isupper():
        letter_type = LETTER_PIECES.get(prefix[0])
        if letter_type is None:
            raise MoveFormatError(f"Unknown piece letter {prefix[0]!r} in move {san!r}")
        piece_type = letter_type
        prefix = prefix[1:]

    disambiguation = _parse_disambiguation(prefix, san)

    if promotion is not None and piece_type != PieceType.PAWN:
        raise UnsupportedMoveError(f"Only pawns can promote: {san!r}")

    return StandardMove(
        color=color,
        piece_type=piece_type,
        destination=destination,
        is_capture=is_capture,
        check=check,
        disambiguation=disambiguation,
        promotion=promotion,
    )
