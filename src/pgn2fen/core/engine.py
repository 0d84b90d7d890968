"""Board engine: applies one SAN token per ply to a :class:`Position`.

There is no move generator here. Origins are recovered from board geometry:
pawns by looking behind the destination, pieces by scanning outward from the
destination with their direction tables (see :mod:`pgn2fen.core.geometry`).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pgn2fen.core.board import Board
from pgn2fen.core.enums import CastlingRights, Color, MoveClass, PieceType
from pgn2fen.core.errors import AmbiguousOriginError
from pgn2fen.core.geometry import is_pinned, origin_candidates
from pgn2fen.core.notation.models import MoveToken
from pgn2fen.core.piece import Piece
from pgn2fen.core.position import Position
from pgn2fen.core.types import Square, file_of, make_square, rank_of

_LOGGER = logging.getLogger(__name__)

# Rank index a pawn lands on after a double push.
_DOUBLE_PUSH_RANK: dict[Color, int] = {Color.WHITE: 3, Color.BLACK: 4}

# move class -> (king to file, rook from file, rook to file)
_CASTLE_FILES: dict[MoveClass, tuple[int, int, int]] = {
    MoveClass.CASTLE_KINGSIDE: (6, 7, 5),
    MoveClass.CASTLE_QUEENSIDE: (2, 0, 3),
}
_KING_HOME_FILE = 4


def resolve_origin(board: Board, color: Color, token: MoveToken) -> Square:
    """Find the single square *color*'s piece moves from for a piece token."""
    assert token.to_sq is not None
    piece = Piece(color, token.piece_type)

    full_origin = token.from_sq
    if full_origin is not None:
        if board[full_origin] != piece:
            raise AmbiguousOriginError(token.raw)
        return full_origin

    candidates = [
        sq
        for sq in origin_candidates(board, token.to_sq, piece)
        if token.matches_origin(sq)
    ]
    if len(candidates) > 1:
        # SAN leaves out hints that would only separate a pinned piece.
        free = [sq for sq in candidates if not is_pinned(board, sq, token.to_sq, color)]
        if free:
            candidates = free
    if len(candidates) != 1:
        raise AmbiguousOriginError(token.raw, candidates)
    return candidates[0]


def _apply_pawn(position: Position, token: MoveToken) -> None:
    assert token.to_sq is not None
    board = position.board
    color = position.side_to_move
    to_sq = token.to_sq
    to_file = file_of(to_sq)
    from_rank = rank_of(to_sq) - color.pawn_direction
    if not 0 <= from_rank < 8:
        raise AmbiguousOriginError(token.raw)

    next_en_passant: Square | None = None
    if token.capture:
        assert token.from_file is not None
        from_sq = make_square(token.from_file, from_rank)
        if not board.holds(from_sq, color, PieceType.PAWN):
            raise AmbiguousOriginError(token.raw)
        if to_sq == position.en_passant and board.is_empty(to_sq):
            board[make_square(to_file, from_rank)] = None
    else:
        from_sq = make_square(to_file, from_rank)
        if not board.holds(from_sq, color, PieceType.PAWN):
            if rank_of(to_sq) != _DOUBLE_PUSH_RANK[color] or not board.is_empty(from_sq):
                raise AmbiguousOriginError(token.raw)
            start_sq = make_square(to_file, from_rank - color.pawn_direction)
            if not board.holds(start_sq, color, PieceType.PAWN):
                raise AmbiguousOriginError(token.raw)
            next_en_passant = from_sq
            from_sq = start_sq

    if token.from_rank is not None and rank_of(from_sq) != token.from_rank:
        raise AmbiguousOriginError(token.raw)
    board.move_piece(from_sq, to_sq)
    if token.promotion is not None:
        board[to_sq] = Piece(color, token.promotion)

    position.touch_corners(to_sq)
    position.end_move(reset_clock=True, en_passant=next_en_passant)


def _apply_piece(position: Position, token: MoveToken) -> None:
    assert token.to_sq is not None
    color = position.side_to_move
    from_sq = resolve_origin(position.board, color, token)
    captured = position.board.move_piece(from_sq, token.to_sq)

    if token.piece_type == PieceType.KING:
        position.revoke_castling(CastlingRights.both(color))
    position.touch_corners(from_sq, token.to_sq)
    position.end_move(reset_clock=token.capture or captured is not None)


def _apply_castle(position: Position, token: MoveToken) -> None:
    board = position.board
    color = position.side_to_move
    rank = color.home_rank
    king_to_file, rook_from_file, rook_to_file = _CASTLE_FILES[token.move_class]

    king_from = make_square(_KING_HOME_FILE, rank)
    rook_from = make_square(rook_from_file, rank)
    if not board.holds(king_from, color, PieceType.KING):
        raise AmbiguousOriginError(token.raw)
    if not board.holds(rook_from, color, PieceType.ROOK):
        raise AmbiguousOriginError(token.raw)

    board.move_piece(king_from, make_square(king_to_file, rank))
    board.move_piece(rook_from, make_square(rook_to_file, rank))
    position.revoke_castling(CastlingRights.both(color))
    position.end_move(reset_clock=False)


_HANDLERS: dict[MoveClass, Callable[[Position, MoveToken], None]] = {
    MoveClass.PAWN: _apply_pawn,
    MoveClass.KNIGHT: _apply_piece,
    MoveClass.BISHOP: _apply_piece,
    MoveClass.ROOK: _apply_piece,
    MoveClass.QUEEN: _apply_piece,
    MoveClass.KING: _apply_piece,
    MoveClass.CASTLE_KINGSIDE: _apply_castle,
    MoveClass.CASTLE_QUEENSIDE: _apply_castle,
}


def apply_move(position: Position, token: MoveToken) -> None:
    """Advance *position* by exactly one ply.

    Raises:
        AmbiguousOriginError: the moving piece cannot be located.
    """
    mover = position.side_to_move
    _HANDLERS[token.move_class](position, token)
    _LOGGER.debug("ply %d (%s): %s", position.ply, mover, token.raw)
