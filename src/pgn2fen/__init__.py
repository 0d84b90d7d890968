"""pgn2fen: FEN of the position after a given move of a PGN game."""

from pgn2fen.converter import fen_after_move, parse_side, position_after_move, target_ply
from pgn2fen.core import (
    STARTING_FEN,
    AmbiguousOriginError,
    Color,
    MalformedTokenError,
    MoveNotFoundError,
    NotationError,
)

__version__ = "1.0.0"

__all__ = [
    "STARTING_FEN",
    "AmbiguousOriginError",
    "Color",
    "MalformedTokenError",
    "MoveNotFoundError",
    "NotationError",
    "fen_after_move",
    "parse_side",
    "position_after_move",
    "target_ply",
]
