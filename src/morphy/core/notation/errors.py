"""Structured errors raised by the FEN codec."""

from __future__ import annotations

from enum import Enum


class DecodeErrorKind(Enum):
    """Which FEN field (or structural rule) rejected the input."""

    UNEXPECTED_CHARACTER = "unexpected character in piece placement"
    INVALID_RANK_WIDTH = "rank does not describe exactly 8 squares"
    INVALID_SIDE_TO_MOVE = "side to move must be 'w' or 'b'"
    MISSING_SEPARATOR = "expected a single space between fields"
    INVALID_CASTLING_FIELD = "castling field must be [K-][Q-][k-][q-]"
    INVALID_EN_PASSANT_SQUARE = "en-passant target must be '-' or [a-h][36]"
    INVALID_HALFMOVE_CLOCK = "halfmove clock must be a decimal integer"
    INVALID_FULLMOVE_COUNTER = "fullmove counter must be a positive integer"
    TRAILING_INPUT = "unexpected input after the fullmove counter"


class DecodeError(ValueError):
    """A FEN string could not be decoded.

    Attributes:
        kind: The rule that rejected the input.
        index: Cursor index of the offending character, or ``len(text)``
            when the input ended early.
        text: The full input that was being decoded.
    """

    def __init__(self, kind: DecodeErrorKind, index: int, text: str) -> None:
        self.kind = kind
        self.index = index
        self.text = text
        found = repr(text[index]) if index < len(text) else "end of input"
        super().__init__(f"Invalid FEN at index {index} ({found}): {kind.value}")


class EncodeError(TypeError):
    """A Position holds a value the encoder has no FEN spelling for."""
