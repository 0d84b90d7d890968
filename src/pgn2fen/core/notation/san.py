"""SAN (Standard Algebraic Notation) token parsing."""

from __future__ import annotations

import re

from pgn2fen.core.enums import MoveClass, PieceType
from pgn2fen.core.errors import MalformedTokenError
from pgn2fen.core.notation.models import MoveToken
from pgn2fen.core.piece import piece_type_from_letter
from pgn2fen.core.types import (
    FILE_NAMES,
    RANK_NAMES,
    file_of,
    make_square,
    parse_square,
    rank_of,
)

_CASTLES: dict[str, MoveClass] = {
    "O-O": MoveClass.CASTLE_KINGSIDE,
    "O-O-O": MoveClass.CASTLE_QUEENSIDE,
}

_PIECE_CLASSES: dict[str, MoveClass] = {
    "N": MoveClass.KNIGHT,
    "B": MoveClass.BISHOP,
    "R": MoveClass.ROOK,
    "Q": MoveClass.QUEEN,
    "K": MoveClass.KING,
}

# e4, exd5, e8=Q, exd8=N (the '=' is optional: e8Q)
_PAWN_RE = re.compile(
    r"^(?P<file>[a-h])(?:(?P<capture>x)(?P<to_file>[a-h]))?(?P<to_rank>[1-8])"
    r"(?:=?(?P<promotion>[NBRQ]))?$"
)

# e2e4, e2-e4, e5xd6, e7-e8=Q
_LONG_PAWN_RE = re.compile(
    r"^(?P<from>[a-h][1-8])(?P<sep>[x-])?(?P<to>[a-h][1-8])(?:=?(?P<promotion>[NBRQ]))?$"
)

# Nf3, Nbd7, R1e2, Qxf3, Qf5g4, Qf5-g4
_PIECE_RE = re.compile(
    r"^(?P<piece>[NBRQK])(?P<file>[a-h])?(?P<rank>[1-8])?(?P<sep>[x-])?(?P<to>[a-h][1-8])$"
)


def _parse_long_pawn(raw: str) -> MoveToken:
    match = _LONG_PAWN_RE.match(raw)
    if match is None:
        raise MalformedTokenError(raw)

    from_sq = parse_square(match["from"])
    to_sq = parse_square(match["to"])
    file_delta = abs(file_of(to_sq) - file_of(from_sq))
    capture = file_delta == 1
    if file_delta > 1 or (match["sep"] == "x" and not capture):
        raise MalformedTokenError(raw)

    promotion: PieceType | None = None
    if match["promotion"]:
        promotion = piece_type_from_letter(match["promotion"])
    return MoveToken(
        raw=raw,
        move_class=MoveClass.PAWN,
        to_sq=to_sq,
        capture=capture,
        promotion=promotion,
        from_file=file_of(from_sq),
        from_rank=rank_of(from_sq),
    )


def _parse_pawn(raw: str) -> MoveToken:
    if len(raw) > 2 and raw[1] in RANK_NAMES and (raw[2] in FILE_NAMES or raw[2] in "x-"):
        return _parse_long_pawn(raw)

    match = _PAWN_RE.match(raw)
    if match is None:
        raise MalformedTokenError(raw)

    file_idx = FILE_NAMES.index(match["file"])
    to_rank = RANK_NAMES.index(match["to_rank"])
    promotion: PieceType | None = None
    if match["promotion"]:
        promotion = piece_type_from_letter(match["promotion"])

    if match["capture"]:
        to_file = FILE_NAMES.index(match["to_file"])
        if abs(to_file - file_idx) != 1:
            raise MalformedTokenError(raw)
        return MoveToken(
            raw=raw,
            move_class=MoveClass.PAWN,
            to_sq=make_square(to_file, to_rank),
            capture=True,
            promotion=promotion,
            from_file=file_idx,
        )

    return MoveToken(
        raw=raw,
        move_class=MoveClass.PAWN,
        to_sq=make_square(file_idx, to_rank),
        promotion=promotion,
    )


def _parse_piece(raw: str) -> MoveToken:
    match = _PIECE_RE.match(raw)
    if match is None:
        raise MalformedTokenError(raw)

    return MoveToken(
        raw=raw,
        move_class=_PIECE_CLASSES[match["piece"]],
        to_sq=parse_square(match["to"]),
        capture=match["sep"] == "x",
        from_file=FILE_NAMES.index(match["file"]) if match["file"] else None,
        from_rank=RANK_NAMES.index(match["rank"]) if match["rank"] else None,
    )


def parse_token(raw: str) -> MoveToken:
    """Parse one cleaned SAN token (no move numbers, no check/annotation glyphs)."""
    if not raw:
        raise MalformedTokenError(raw)

    lead = raw[0]
    if lead == "O":
        try:
            return MoveToken(raw=raw, move_class=_CASTLES[raw])
        except KeyError:
            raise MalformedTokenError(raw) from None
    if lead in FILE_NAMES:
        return _parse_pawn(raw)
    if lead in _PIECE_CLASSES:
        return _parse_piece(raw)
    raise MalformedTokenError(raw)
