"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from pgn2fen.core.engine import apply_move
from pgn2fen.core.notation import tokenize
from pgn2fen.core.position import Position

OPERA_GAME = """\
[Event "Paris"]
[Site "Paris FRA"]
[Date "1858.??.??"]
[White "Paul Morphy"]
[Black "Duke Karl / Count Isouard"]
[Result "1-0"]

1. e4 e5 2. Nf3 d6 3. d4 Bg4 {This is a weak move already.} 4. dxe5 Bxf3
5. Qxf3 dxe5 6. Bc4 Nf6 7. Qb3 Qe7 8. Nc3 c6 9. Bg5 b5 (9... Qb4+ 10. Qxb4)
10. Nxb5 cxb5 11. Bxb5+ Nbd7 12. O-O-O Rd8 13. Rxd7 Rxd7 14. Rd1 Qe6
15. Bxd7+ Nxd7 16. Qb8+! Nxb8 17. Rd8# 1-0
"""

OPERA_FINAL_FEN = "1n1Rkb1r/p4ppp/4q3/4p1B1/4P3/8/PPP2PPP/2K5 b k - 1 17"


@pytest.fixture
def opera_game() -> str:
    """Morphy's Opera game with tags, a comment and a variation."""
    return OPERA_GAME


@pytest.fixture
def opera_final_fen() -> str:
    return OPERA_FINAL_FEN


@pytest.fixture
def play() -> Callable[..., Position]:
    """Replay movetext (optionally on top of *position*) and return the result."""

    def _play(movetext: str, position: Position | None = None) -> Position:
        pos = position if position is not None else Position()
        for token in tokenize(movetext):
            apply_move(pos, token)
        return pos

    return _play
