"""Notation package: FEN decoding and encoding."""

from morphy.core.notation.errors import DecodeError, DecodeErrorKind, EncodeError
from morphy.core.notation.fen import STARTING_FEN, decode, encode, is_valid_fen

__all__ = [
    "STARTING_FEN",
    "DecodeError",
    "DecodeErrorKind",
    "EncodeError",
    "decode",
    "encode",
    "is_valid_fen",
]
