"""Tests for the board engine (applying SAN tokens to a Position)."""

from collections.abc import Callable

import pytest

from pgn2fen.core.engine import apply_move, resolve_origin
from pgn2fen.core.enums import CastlingRights, Color, PieceType
from pgn2fen.core.errors import AmbiguousOriginError
from pgn2fen.core.notation import parse_token, position_from_fen, position_to_fen, tokenize
from pgn2fen.core.piece import Piece
from pgn2fen.core.position import Position
from pgn2fen.core.types import (
    C1, C2, C3, C6, D4, D5, D6, E1, E2, E3, E4, E5, F1, F5, G1, H1, H8,
    parse_square,
)

Play = Callable[..., Position]


class TestPawnMoves:
    def test_single_push(self, play: Play) -> None:
        pos = play("1. e3")
        assert pos.board[E3] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board.is_empty(E2)
        assert pos.en_passant is None

    def test_double_push_sets_en_passant(self, play: Play) -> None:
        pos = play("1. e4")
        assert pos.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.en_passant == E3

    def test_black_double_push(self, play: Play) -> None:
        pos = play("1. e4 c5")
        assert pos.en_passant == C6

    def test_push_after_single_step(self, play: Play) -> None:
        pos = play("1. e3 a6 2. e4")
        assert pos.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.en_passant is None

    def test_long_algebraic_pawn_moves(self, play: Play) -> None:
        long_form = play("1. e2-e4 d7-d5 2. e4xd5")
        assert position_to_fen(long_form) == position_to_fen(play("1. e4 d5 2. exd5"))

    def test_long_algebraic_wrong_origin_raises(self, play: Play) -> None:
        with pytest.raises(AmbiguousOriginError):
            play("1. e3-e4")

    def test_missing_pawn_raises(self, play: Play) -> None:
        with pytest.raises(AmbiguousOriginError):
            play("1. e5")

    def test_blocked_double_push_raises(self, play: Play) -> None:
        pos = position_from_fen("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1")
        with pytest.raises(AmbiguousOriginError):
            apply_move(pos, parse_token("e4"))

    def test_capture(self, play: Play) -> None:
        pos = play("1. e4 d5 2. exd5")
        assert pos.board[D5] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board.is_empty(E4)
        assert pos.halfmove_clock == 0

    def test_en_passant_capture(self, play: Play) -> None:
        pos = play("1. e4 a6 2. e5 d5 3. exd6")
        assert pos.board[D6] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board.is_empty(D5)
        assert pos.board.is_empty(E5)
        assert pos.halfmove_clock == 0
        assert position_to_fen(pos) == (
            "rnbqkbnr/1pp1pppp/p2P4/8/8/8/PPPP1PPP/RNBQKBNR b KQkq - 0 3"
        )

    def test_promotion_capturing_corner_rook(self) -> None:
        pos = position_from_fen("r3k2r/6P1/8/8/8/8/8/4K3 w kq - 0 1")
        apply_move(pos, parse_token("gxh8=Q"))
        assert pos.board[H8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert pos.castling == CastlingRights.BLACK_QUEENSIDE
        assert position_to_fen(pos) == "r3k2Q/8/8/8/8/8/8/4K3 b q - 0 1"

    def test_black_underpromotion(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/p7/4K3 b - - 3 40")
        apply_move(pos, parse_token("a1=N"))
        assert pos.board[parse_square("a1")] == Piece(Color.BLACK, PieceType.KNIGHT)
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 41


class TestPieceMoves:
    def test_knight_development(self, play: Play) -> None:
        pos = play("1. Nf3")
        assert pos.board[parse_square("f3")] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert pos.board.is_empty(G1)
        assert pos.halfmove_clock == 1

    def test_file_hint(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/8/K1N3N1 w - - 0 1")
        apply_move(pos, parse_token("Nce2"))
        assert pos.board.is_empty(C1)
        assert pos.board[G1] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_rank_hint(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/R7/4R2K w - - 0 1")
        apply_move(pos, parse_token("R1e2"))
        assert pos.board.is_empty(E1)
        assert pos.board[parse_square("a2")] == Piece(Color.WHITE, PieceType.ROOK)

    def test_full_origin(self) -> None:
        pos = position_from_fen("7k/8/8/5Q1Q/8/8/8/K7 w - - 0 1")
        apply_move(pos, parse_token("Qf5g4"))
        assert pos.board.is_empty(F5)
        assert pos.board[parse_square("h5")] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_full_origin_must_hold_piece(self) -> None:
        pos = position_from_fen("7k/8/8/5Q1Q/8/8/8/K7 w - - 0 1")
        with pytest.raises(AmbiguousOriginError):
            apply_move(pos, parse_token("Qe5g4"))

    def test_missing_hint_is_ambiguous(self) -> None:
        pos = position_from_fen("7k/8/8/8/8/8/8/K1N3N1 w - - 0 1")
        with pytest.raises(AmbiguousOriginError) as excinfo:
            apply_move(pos, parse_token("Ne2"))
        assert sorted(excinfo.value.candidates) == [C1, G1]

    def test_no_candidate(self, play: Play) -> None:
        with pytest.raises(AmbiguousOriginError) as excinfo:
            play("1. Nd4")
        assert excinfo.value.candidates == ()

    def test_pinned_piece_is_skipped(self) -> None:
        pos = position_from_fen("4k3/8/8/8/4r3/8/2N1N3/4K3 w - - 0 1")
        assert resolve_origin(pos.board, Color.WHITE, parse_token("Nd4")) == C2

    def test_capture_resets_clock(self, play: Play) -> None:
        pos = play("1. Nf3 d5 2. Nc3 d4 3. Nxd4")
        assert pos.board[D4] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert pos.board[C3] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert pos.halfmove_clock == 0

    def test_capture_without_marker_still_resets_clock(self) -> None:
        pos = position_from_fen("4k3/8/8/3p4/8/8/8/3RK3 w - - 7 30")
        apply_move(pos, parse_token("Rd5"))
        assert pos.halfmove_clock == 0


class TestCastlingRights:
    def test_rook_leaving_corner(self, play: Play) -> None:
        pos = play("1. h4 a5 2. Rh3 Ra6")
        assert pos.castling == (CastlingRights.WHITE_QUEENSIDE | CastlingRights.BLACK_KINGSIDE)

    def test_king_move_revokes_both(self, play: Play) -> None:
        pos = play("1. e4 e5 2. Ke2")
        assert pos.castling == CastlingRights.BLACK_BOTH

    def test_white_kingside(self, play: Play) -> None:
        pos = play("1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5 4. O-O")
        assert pos.board[G1] == Piece(Color.WHITE, PieceType.KING)
        assert pos.board[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert pos.board.is_empty(E1)
        assert pos.board.is_empty(H1)
        assert pos.castling == CastlingRights.BLACK_BOTH
        assert position_to_fen(pos) == (
            "r1bqk1nr/pppp1ppp/2n5/2b1p3/2B1P3/5N2/PPPP1PPP/RNBQ1RK1 b kq - 5 4"
        )

    def test_black_queenside(self) -> None:
        pos = position_from_fen("r3k3/8/8/8/8/8/8/4K3 b q - 0 1")
        apply_move(pos, parse_token("O-O-O"))
        assert position_to_fen(pos) == "2kr4/8/8/8/8/8/8/4K3 w - - 1 2"

    def test_castle_without_king_raises(self) -> None:
        pos = position_from_fen("r3k3/8/8/8/8/8/8/3K4 w - - 0 1")
        with pytest.raises(AmbiguousOriginError):
            apply_move(pos, parse_token("O-O"))

    def test_rights_never_increase(self, play: Play, opera_game: str) -> None:
        pos = Position()
        previous = pos.castling
        for token in tokenize(opera_game):
            apply_move(pos, token)
            assert pos.castling & ~previous == CastlingRights.NONE
            previous = pos.castling


class TestPlyBookkeeping:
    def test_side_and_counters(self, play: Play) -> None:
        pos = play("1. e4 c5 2. Nf3")
        assert pos.ply == 3
        assert pos.side_to_move == Color.BLACK
        assert pos.fullmove_number == 2

    def test_halfmove_clock_rules(self, opera_game: str) -> None:
        pos = Position()
        for token in tokenize(opera_game):
            before = pos.halfmove_clock
            target = pos.board[token.to_sq] if token.to_sq is not None else None
            apply_move(pos, token)
            if token.piece_type == PieceType.PAWN or token.capture or target is not None:
                assert pos.halfmove_clock == 0
            else:
                assert pos.halfmove_clock == before + 1

    def test_en_passant_lives_one_ply(self, opera_game: str) -> None:
        pos = Position()
        for token in tokenize(opera_game):
            apply_move(pos, token)
            if pos.en_passant is not None:
                assert token.piece_type == PieceType.PAWN and not token.capture
        assert pos.en_passant is None

    def test_en_passant_cleared_by_next_move(self, play: Play) -> None:
        pos = play("1. e4")
        assert pos.en_passant == E3
        apply_move(pos, parse_token("Nf6"))
        assert pos.en_passant is None

    def test_copy_is_a_snapshot(self, play: Play) -> None:
        pos = play("1. e4")
        snapshot = pos.copy()
        apply_move(pos, parse_token("e5"))
        assert snapshot.ply == 1
        assert snapshot.en_passant == E3
        assert snapshot.board[E5] is None
        assert "ply=1" in repr(snapshot)
