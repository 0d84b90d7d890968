"""Drive the tokenizer and the board engine up to a requested move."""

from __future__ import annotations

import logging

from pgn2fen.core.engine import apply_move
from pgn2fen.core.enums import Color
from pgn2fen.core.errors import MoveNotFoundError
from pgn2fen.core.notation import position_to_fen, tokenize
from pgn2fen.core.position import Position

_LOGGER = logging.getLogger(__name__)

_SIDE_NAMES: dict[str, Color] = {
    "w": Color.WHITE,
    "white": Color.WHITE,
    "b": Color.BLACK,
    "black": Color.BLACK,
}


def parse_side(text: str) -> Color:
    """Parse ``w``/``white``/``b``/``black`` (any case) into a :class:`Color`."""
    try:
        return _SIDE_NAMES[text.strip().lower()]
    except KeyError:
        raise ValueError(f"Invalid side: {text!r}") from None


def target_ply(move_number: int, side: Color = Color.WHITE) -> int:
    """Half-move index reached after *side*'s move number *move_number*."""
    if move_number < 1:
        raise ValueError(f"Invalid move number: {move_number}")
    return 2 * move_number - (1 if side == Color.WHITE else 0)


def position_after_move(
    movetext: str, move_number: int, side: Color = Color.WHITE
) -> Position:
    """Replay *movetext* until *side* has played move *move_number*.

    Tokens after the target are never read.

    Raises:
        ValueError: ``move_number`` is not positive.
        MoveNotFoundError: the movetext ends before the requested move.
        MalformedTokenError: a token on the way has no SAN shape.
        AmbiguousOriginError: a moving piece could not be located.
    """
    goal = target_ply(move_number, side)
    position = Position()
    _LOGGER.debug("Replaying to ply %d (move %d by %s)", goal, move_number, side)

    for token in tokenize(movetext):
        apply_move(position, token)
        if position.ply == goal:
            return position

    _LOGGER.info("Movetext ended after %d plies, wanted %d", position.ply, goal)
    raise MoveNotFoundError(move_number, side)


def fen_after_move(movetext: str, move_number: int, side: Color = Color.WHITE) -> str:
    """FEN of the position after *side*'s move number *move_number*."""
    return position_to_fen(position_after_move(movetext, move_number, side))
