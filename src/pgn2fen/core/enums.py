"""Core enumerations and flags for the board engine."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Rank index of the back rank (0 for White, 7 for Black)."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_direction(self) -> int:
        """Rank delta of a pawn push."""
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


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def both(cls, color: Color) -> CastlingRights:
        """Both rights of *color*."""
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class MoveClass(Enum):
    """Closed set of move token shapes the engine dispatches on."""

    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()
    CASTLE_KINGSIDE = auto()
    CASTLE_QUEENSIDE = auto()

    @property
    def is_castle(self) -> bool:
        return self in (MoveClass.CASTLE_KINGSIDE, MoveClass.CASTLE_QUEENSIDE)

    @property
    def piece_type(self) -> PieceType:
        """Type of the piece that moves (the king for castling)."""
        return _MOVING_PIECE[self]


_MOVING_PIECE: dict[MoveClass, PieceType] = {
    MoveClass.PAWN: PieceType.PAWN,
    MoveClass.KNIGHT: PieceType.KNIGHT,
    MoveClass.BISHOP: PieceType.BISHOP,
    MoveClass.ROOK: PieceType.ROOK,
    MoveClass.QUEEN: PieceType.QUEEN,
    MoveClass.KING: PieceType.KING,
    MoveClass.CASTLE_KINGSIDE: PieceType.KING,
    MoveClass.CASTLE_QUEENSIDE: PieceType.KING,
}
