"""Core domain layer: positions, FEN codec and move application, stdlib only.

Quick start::

    from morphy.core import STARTING_FEN, apply_move, decode, encode, parse_square

    pos = decode(STARTING_FEN)
    pos = apply_move(pos, parse_square("e2"), parse_square("e4"))
    print(encode(pos))
"""

from morphy.core.enums import Color, PieceType
from morphy.core.move import Move
from morphy.core.moves import MoveOutcome, apply_move, is_pseudo_legal, replay, try_move
from morphy.core.notation import (
    STARTING_FEN,
    DecodeError,
    DecodeErrorKind,
    EncodeError,
    decode,
    encode,
    is_valid_fen,
)
from morphy.core.piece import Piece
from morphy.core.position import Position, pack_board, unpack_board
from morphy.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Move",
    "MoveOutcome",
    "Piece",
    "Position",
    "pack_board",
    "unpack_board",
    # Move application
    "apply_move",
    "is_pseudo_legal",
    "replay",
    "try_move",
    # Notation
    "STARTING_FEN",
    "DecodeError",
    "DecodeErrorKind",
    "EncodeError",
    "decode",
    "encode",
    "is_valid_fen",
]
