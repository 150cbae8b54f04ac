"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from morphy.core.types import Square, is_valid_square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable from/to square pair."""

    from_sq: Square
    to_sq: Square

    def __post_init__(self) -> None:
        for sq in (self.from_sq, self.to_sq):
            if not is_valid_square(sq):
                raise ValueError(f"Square out of range: {sq}")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation, e.g. ``e2e4``."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        if len(text) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))
