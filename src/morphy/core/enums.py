"""Core enumerations for the position model."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. Values are the high bits of the packed piece code."""

    WHITE = 8
    BLACK = 16

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def fen_char(self) -> str:
        """Side-to-move letter, ``w`` or ``b``."""
        return "w" if self is Color.WHITE else "b"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds. Values are the low bits of the packed piece code."""

    PAWN = 1
    ROOK = 3
    KNIGHT = 4
    BISHOP = 5
    KING = 6
    QUEEN = 7
