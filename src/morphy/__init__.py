"""morphy: FEN encoding/decoding and a pseudo-legal position model."""

from morphy.core import (
    STARTING_FEN,
    Color,
    DecodeError,
    DecodeErrorKind,
    Move,
    Piece,
    PieceType,
    Position,
    apply_move,
    decode,
    encode,
    try_move,
)

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "Color",
    "DecodeError",
    "DecodeErrorKind",
    "Move",
    "Piece",
    "PieceType",
    "Position",
    "apply_move",
    "decode",
    "encode",
    "try_move",
    "__version__",
]
