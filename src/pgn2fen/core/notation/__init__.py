"""Notation package: movetext tokenizing, SAN tokens and FEN."""

from pgn2fen.core.notation.fen import (
    STARTING_FEN,
    placement_to_fen,
    position_from_fen,
    position_to_fen,
)
from pgn2fen.core.notation.models import MoveToken
from pgn2fen.core.notation.san import parse_token
from pgn2fen.core.notation.tokenizer import iter_raw_tokens, tokenize

__all__ = [
    "STARTING_FEN",
    "MoveToken",
    "iter_raw_tokens",
    "parse_token",
    "placement_to_fen",
    "position_from_fen",
    "position_to_fen",
    "tokenize",
]
