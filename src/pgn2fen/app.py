"""Command-line entry point: ``pgn2fen INPUT MOVE [w|b] [OUTPUT]``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pgn2fen.converter import fen_after_move, parse_side
from pgn2fen.core.enums import Color
from pgn2fen.core.errors import NotationError

_LOGGER = logging.getLogger(__name__)

_EPILOG = """\
example, with game.pgn containing "1. e4 c5 2. Nf3 d6":
  pgn2fen game.pgn 2      -> rnbqkbnr/pp1ppppp/8/2p5/4P3/5N2/PPPP1PPP/RNBQKB1R b KQkq - 1 2
  pgn2fen game.pgn 2 b    -> rnbqkbnr/pp2pppp/3p4/2p5/4P3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 0 3
"""


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid move number {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"invalid move number {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgn2fen",
        description="Print the FEN of the position reached after a given move of a PGN game.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="PGN file with a single game, or '-' for stdin")
    parser.add_argument("move", type=_positive_int, help="move number")
    parser.add_argument(
        "side",
        nargs="?",
        default=None,
        help="position after (w)hite or (b)lack move, defaults to w",
    )
    parser.add_argument("output", nargs="?", default=None, help="output file, defaults to stdout")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress to stderr (-vv for every ply)",
    )
    return parser


def _resolve_side_and_output(
    parser: argparse.ArgumentParser, side_arg: str | None, output_arg: str | None
) -> tuple[Color, str | None]:
    # A lone third argument longer than one character is the output path.
    if side_arg is not None and len(side_arg) > 1 and output_arg is None:
        return Color.WHITE, side_arg
    if side_arg is None:
        return Color.WHITE, output_arg
    if len(side_arg) != 1:
        parser.error(f"invalid side {side_arg!r}")
    try:
        return parse_side(side_arg), output_arg
    except ValueError:
        parser.error(f"invalid side {side_arg!r}")


def configure_logging(verbosity: int) -> None:
    """Route log records to stderr at a level picked by ``-v`` count."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    # Non-ASCII text only lives in tags and comments, which are skipped anyway;
    # Latin-1 exports must not abort the run.
    return Path(source).read_text(encoding="utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Run the converter; return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    side, output = _resolve_side_and_output(parser, args.side, args.output)

    try:
        movetext = _read_input(args.input)
    except OSError as exc:
        print(f"pgn2fen: error: cannot read {args.input!r}: {exc.strerror}", file=sys.stderr)
        return 1

    try:
        fen = fen_after_move(movetext, args.move, side)
    except NotationError as exc:
        print(f"pgn2fen: error: {exc}", file=sys.stderr)
        return 1
    _LOGGER.info("Move %d by %s: %s", args.move, side, fen)

    if output is None:
        sys.stdout.write(fen + "\n")
        return 0
    try:
        Path(output).write_text(fen + "\n", encoding="utf-8")
    except OSError as exc:
        print(f"pgn2fen: error: cannot write {output!r}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
