"""Direction tables and board scans used to locate moving pieces.

Every non-pawn piece moves symmetrically, so the squares that can reach a
destination are found by scanning *outward from the destination* with the same
direction table the piece moves by.
"""

from __future__ import annotations

from collections.abc import Iterator

from pgn2fen.core.board import Board
from pgn2fen.core.enums import Color, PieceType
from pgn2fen.core.piece import Piece
from pgn2fen.core.types import Square, file_of, is_on_board, make_square, rank_of

Direction = tuple[int, int]

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Direction, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS

# piece type -> (directions, sliding)
MOVEMENT: dict[PieceType, tuple[tuple[Direction, ...], bool]] = {
    PieceType.KNIGHT: (KNIGHT_OFFSETS, False),
    PieceType.BISHOP: (BISHOP_DIRS, True),
    PieceType.ROOK: (ROOK_DIRS, True),
    PieceType.QUEEN: (QUEEN_DIRS, True),
    PieceType.KING: (KING_OFFSETS, False),
}

_SLIDERS_BY_LINE: dict[bool, tuple[PieceType, ...]] = {
    True: (PieceType.BISHOP, PieceType.QUEEN),
    False: (PieceType.ROOK, PieceType.QUEEN),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def ray(sq: Square, direction: Direction) -> Iterator[Square]:
    """Squares from *sq* (exclusive) along *direction*, nearest first."""
    df, dr = direction
    f, r = file_of(sq) + df, rank_of(sq) + dr
    while is_on_board(f, r):
        yield make_square(f, r)
        f += df
        r += dr


def first_occupied(board: Board, sq: Square, direction: Direction) -> Square | None:
    """First occupied square along *direction* from *sq*, if any."""
    for target in ray(sq, direction):
        if not board.is_empty(target):
            return target
    return None


def scan(
    board: Board, sq: Square, directions: tuple[Direction, ...], sliding: bool
) -> Iterator[Square]:
    """Yield the occupied squares visible from *sq*, one per direction at most.

    Sliding directions stop at the first occupied square; fixed offsets look at
    exactly one square. Order follows *directions*.
    """
    for direction in directions:
        if sliding:
            hit = first_occupied(board, sq, direction)
        else:
            f, r = file_of(sq) + direction[0], rank_of(sq) + direction[1]
            hit = make_square(f, r) if is_on_board(f, r) else None
            if hit is not None and board.is_empty(hit):
                hit = None
        if hit is not None:
            yield hit


def origin_candidates(board: Board, to_sq: Square, piece: Piece) -> list[Square]:
    """Squares holding *piece* that can move to *to_sq* by geometry alone."""
    directions, sliding = MOVEMENT[piece.piece_type]
    return [sq for sq in scan(board, to_sq, directions, sliding) if board[sq] == piece]


def is_pinned(board: Board, sq: Square, to_sq: Square, color: Color) -> bool:
    """Whether moving *color*'s piece from *sq* to *to_sq* uncovers its king.

    Only absolute pins by enemy sliders are considered; moving along the pin
    line is allowed.
    """
    king_sq = board.king_square(color)
    if king_sq is None or king_sq == sq:
        return False

    df = file_of(sq) - file_of(king_sq)
    dr = rank_of(sq) - rank_of(king_sq)
    if df and dr and abs(df) != abs(dr):
        return False
    direction = (_sign(df), _sign(dr))

    if first_occupied(board, king_sq, direction) != sq:
        return False
    attacker_sq = first_occupied(board, sq, direction)
    if attacker_sq is None:
        return False
    attacker = board[attacker_sq]
    assert attacker is not None
    if attacker.color == color:
        return False
    if attacker.piece_type not in _SLIDERS_BY_LINE[bool(direction[0] and direction[1])]:
        return False

    for line_sq in ray(king_sq, direction):
        if line_sq == to_sq:
            return False
        if line_sq == attacker_sq:
            break
    return True
