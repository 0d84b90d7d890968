"""Core domain layer: board state, SAN tokens and FEN, no external dependencies.

Quick start::

    from pgn2fen.core import Position, apply_move, tokenize, position_to_fen

    pos = Position()
    for token in tokenize("1. e4 c5 2. Nf3"):
        apply_move(pos, token)
    print(position_to_fen(pos))
"""

from pgn2fen.core.board import Board
from pgn2fen.core.engine import apply_move, resolve_origin
from pgn2fen.core.enums import CastlingRights, Color, MoveClass, PieceType
from pgn2fen.core.errors import (
    AmbiguousOriginError,
    MalformedTokenError,
    MoveNotFoundError,
    NotationError,
)
from pgn2fen.core.notation import (
    STARTING_FEN,
    MoveToken,
    parse_token,
    position_from_fen,
    position_to_fen,
    tokenize,
)
from pgn2fen.core.piece import Piece
from pgn2fen.core.position import Position
from pgn2fen.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveClass",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "MoveToken",
    "Piece",
    "Position",
    # Engine
    "apply_move",
    "resolve_origin",
    # Errors
    "AmbiguousOriginError",
    "MalformedTokenError",
    "MoveNotFoundError",
    "NotationError",
    # Notation
    "STARTING_FEN",
    "parse_token",
    "position_from_fen",
    "position_to_fen",
    "tokenize",
]
