"""Movetext tokenizer: turns raw PGN movetext into a lazy stream of moves.

Tag pairs, ``;`` comments, ``{}`` comments, ``()`` variations, move-number
labels, NAGs, result markers and annotation glyphs are all discarded. What is
left is split on whitespace into SAN tokens.
"""

from __future__ import annotations

from collections.abc import Iterator

from pgn2fen.core.notation.models import MoveToken
from pgn2fen.core.notation.san import parse_token

_MOVE_CHARS = frozenset("abcdefghRNBQKxO-=")
_LINE_SKIPPERS = frozenset("[;")
_ANNOTATION_GLYPHS = "+#!?"
_STRUCTURE_CHARS = frozenset("[;({")
_ZERO_CASTLES: dict[str, str] = {"0-0": "O-O", "0-0-0": "O-O-O"}


def _skip_line(text: str, idx: int) -> int:
    end = text.find("\n", idx)
    return len(text) if end < 0 else end + 1


def _skip_separator(text: str, idx: int) -> int:
    if idx < len(text) and text[idx].isspace():
        return idx + 1
    return idx


def _skip_variation(text: str, idx: int) -> int:
    """Index just past the ``)`` matching the ``(`` at *idx*."""
    depth = 0
    total = len(text)
    while idx < total:
        ch = text[idx]
        idx += 1
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                break
        elif ch == "{":
            # braces may hide parentheses
            idx = _skip_comment(text, idx - 1)
    return idx


def _skip_comment(text: str, idx: int) -> int:
    end = text.find("}", idx + 1)
    return len(text) if end < 0 else end + 1


def _read_numeric(text: str, idx: int) -> tuple[int, str | None]:
    """Consume a digit-led word at *idx*.

    Returns the index to resume from and, for ``0-0``/``0-0-0``, the castling
    token it stands for. Move-number labels (``12.``, ``12...``) lose their dots
    and one following separator; anything else digit-led (``1-0``, ``1/2-1/2``)
    is dropped whole.
    """
    total = len(text)
    end = idx
    while end < total and text[end].isdigit():
        end += 1

    if end < total and text[end] == ".":
        while end < total and text[end] == ".":
            end += 1
        return _skip_separator(text, end), None

    while end < total and not text[end].isspace() and text[end] not in _STRUCTURE_CHARS:
        end += 1
    word = text[idx:end].rstrip(_ANNOTATION_GLYPHS)
    return end, _ZERO_CASTLES.get(word)


def iter_raw_tokens(text: str) -> Iterator[str]:
    """Yield cleaned SAN strings from *text* in order, one per ply."""
    pending: list[str] = []
    idx = 0
    total = len(text)

    while idx < total:
        ch = text[idx]

        if ch.isspace() or ch in _STRUCTURE_CHARS:
            if pending:
                yield "".join(pending)
                pending.clear()
            if ch in _LINE_SKIPPERS:
                idx = _skip_line(text, idx)
            elif ch == "(":
                idx = _skip_separator(text, _skip_variation(text, idx))
            elif ch == "{":
                idx = _skip_separator(text, _skip_comment(text, idx))
            else:
                idx += 1
            continue

        if ch == "$":
            idx += 1
            while idx < total and text[idx].isdigit():
                idx += 1
            continue

        if ch.isdigit():
            if pending:
                pending.append(ch)
                idx += 1
            else:
                idx, castle = _read_numeric(text, idx)
                if castle is not None:
                    yield castle
            continue

        if ch in _MOVE_CHARS:
            pending.append(ch)
        idx += 1

    if pending:
        yield "".join(pending)


def tokenize(text: str) -> Iterator[MoveToken]:
    """Lazily parse *text* into :class:`MoveToken` objects.

    Parsing happens as tokens are pulled, so a malformed token past the point
    the caller stops at is never looked at.
    """
    for raw in iter_raw_tokens(text):
        yield parse_token(raw)
