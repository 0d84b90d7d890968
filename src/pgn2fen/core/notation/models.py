"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from pgn2fen.core.enums import MoveClass, PieceType
from pgn2fen.core.types import Square, file_of, make_square, rank_of


@dataclass(frozen=True, slots=True)
class MoveToken:
    """A single SAN move pulled from movetext, with its derived fields.

    ``raw`` keeps the text exactly as it was read (annotation glyphs already
    dropped); everything else is derived from it once, at parse time.
    """

    raw: str
    move_class: MoveClass
    to_sq: Square | None = None
    capture: bool = False
    promotion: PieceType | None = None
    from_file: int | None = None
    from_rank: int | None = None

    @property
    def piece_type(self) -> PieceType:
        return self.move_class.piece_type

    @property
    def is_castle(self) -> bool:
        return self.move_class.is_castle

    @property
    def from_sq(self) -> Square | None:
        """Origin square when the token spells it out in full."""
        if self.from_file is None or self.from_rank is None:
            return None
        return make_square(self.from_file, self.from_rank)

    def matches_origin(self, sq: Square) -> bool:
        """Whether *sq* agrees with the token's file/rank hints."""
        if self.from_file is not None and file_of(sq) != self.from_file:
            return False
        if self.from_rank is not None and rank_of(sq) != self.from_rank:
            return False
        return True

    def __str__(self) -> str:
        return self.raw
