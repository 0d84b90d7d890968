"""Exceptions raised while turning movetext into a position."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pgn2fen.core.types import Square, square_name

if TYPE_CHECKING:
    from pgn2fen.core.enums import Color


class NotationError(ValueError):
    """Base class for every movetext conversion failure."""


class MoveNotFoundError(NotationError):
    """The movetext ends before the requested move."""

    def __init__(self, move_number: int, side: Color) -> None:
        self.move_number = move_number
        self.side = side
        super().__init__(f"Move number {move_number} by {side.name.lower()} does not exist")


class MalformedTokenError(NotationError):
    """A move token does not have any recognised SAN shape."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Malformed move token: {raw!r}")


class AmbiguousOriginError(NotationError):
    """No single origin square could be resolved for a move token."""

    def __init__(self, raw: str, candidates: list[Square] | tuple[Square, ...] = ()) -> None:
        self.raw = raw
        self.candidates = tuple(candidates)
        if self.candidates:
            names = ", ".join(square_name(sq) for sq in self.candidates)
            detail = f"candidates {names}"
        else:
            detail = "no piece can reach the destination"
        super().__init__(f"Cannot resolve origin of {raw!r}: {detail}")
