"""Exceptions raised while parsing, resolving and replaying SAN moves."""

from __future__ import annotations


class MoveError(ValueError):
    """Base class for a SAN move that cannot be replayed.

    ``token`` and ``ply`` are filled in by the replay loop, so a caller that
    catches the error knows which move of the game aborted the replay.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        ply: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.ply = ply

    def __str__(self) -> str:
        if self.ply is None:
            return self.message
        return f"ply {self.ply} ({self.token!r}): {self.message}"


class MoveFormatError(MoveError):
    """Token does not decompose into piece, destination and disambiguation."""


class UnsupportedMoveError(MoveError):
    """Malformed castling or promotion syntax."""


class OriginNotFoundError(MoveError):
    """No square holds a piece that can make the written move."""


class AmbiguousMoveError(MoveError):
    """Several squares hold a piece that can make the written move."""
