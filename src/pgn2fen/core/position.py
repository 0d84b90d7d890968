"""Position: complete game state (board + metadata)."""

from __future__ import annotations

from pgn2fen.core.board import Board
from pgn2fen.core.enums import CastlingRights, Color
from pgn2fen.core.types import Square, make_square, square_name


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    ``ply`` counts the half-moves applied since the starting position.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "ply",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        ply: int = 0,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.ply = ply

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
        make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
        make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
        make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
    }

    def revoke_castling(self, rights: CastlingRights) -> None:
        """Drop *rights*; rights are never granted back."""
        self.castling &= ~rights

    def touch_corners(self, *squares: Square) -> None:
        """Revoke the right tied to every rook corner among *squares*."""
        for sq in squares:
            right = self._ROOK_CORNERS.get(sq)
            if right is not None:
                self.revoke_castling(right)

    # ── Ply bookkeeping ──────────────────────────────────────────────────

    def end_move(self, *, reset_clock: bool, en_passant: Square | None = None) -> None:
        """Close the current ply and hand the move to the other side."""
        self.en_passant = en_passant
        if reset_clock:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite
        self.ply += 1

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            ply=self.ply,
        )

    def __repr__(self) -> str:
        ep = square_name(self.en_passant) if self.en_passant is not None else "-"
        return (
            f"Position(ply={self.ply}, side={self.side_to_move.name.lower()}, "
            f"castling={self.castling!r}, ep={ep}, "
            f"halfmove={self.halfmove_clock}, fullmove={self.fullmove_number})"
        )
