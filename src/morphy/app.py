"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from morphy.core.move import Move
from morphy.core.moves import try_move
from morphy.core.notation import DecodeError, decode, encode
from morphy.core.position import Position
from morphy.core.types import square_name
from morphy.game.settings import SessionSettings

_LOGGER = logging.getLogger(__name__)


def _build_parser(settings: SessionSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morphy", description="Decode, encode and play through FEN positions."
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_decode = sub.add_parser("decode", help="show the fields of a FEN string")
    p_decode.add_argument("fen", nargs="?", default=settings.start_fen)

    p_encode = sub.add_parser("encode", help="decode and re-encode a FEN string")
    p_encode.add_argument("fen", nargs="?", default=settings.start_fen)

    p_move = sub.add_parser("move", help="apply pseudo-legal moves, e.g. e2e4")
    p_move.add_argument("fen")
    p_move.add_argument("moves", nargs="+")
    return parser


def _describe(pos: Position) -> str:
    ep = square_name(pos.en_passant) if pos.en_passant is not None else "-"
    lines = [
        repr(pos),
        f"side to move:    {pos.side_to_move.name.lower()}",
        f"castling:        {pos.castling_str}",
        f"en passant:      {ep}",
        f"halfmove clock:  {pos.halfmove_clock}",
        f"fullmove number: {pos.fullmove_number}",
    ]
    return "\n".join(lines)


def _run_moves(pos: Position, moves: list[str]) -> int:
    for text in moves:
        try:
            move = Move.from_uci(text)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        outcome = try_move(pos, move.from_sq, move.to_sq)
        pos = outcome.position
        status = "" if outcome.applied else "  (rejected)"
        print(f"{move.uci}: {encode(pos)}{status}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the ``morphy`` command line tool."""
    settings = SessionSettings()
    args = _build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        pos = decode(args.fen)
    except DecodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    _LOGGER.debug("Decoded %s", args.fen)

    if args.command == "decode":
        print(_describe(pos))
    elif args.command == "encode":
        print(encode(pos))
    else:
        return _run_moves(pos, args.moves)
    return 0


if __name__ == "__main__":
    sys.exit(main())
