"""PositionHistory: the current position plus every position before it."""

from __future__ import annotations

import logging

from morphy.core.moves import try_move
from morphy.core.notation import decode, encode
from morphy.core.position import Position
from morphy.core.types import Square, square_name
from morphy.game.settings import SessionSettings

_LOGGER = logging.getLogger(__name__)


class PositionHistory:
    """Ordered list of positions; the last one is the current position.

    Positions are immutable, so the history simply holds references.
    """

    __slots__ = ("_positions", "_max_history", "_start_fen")

    def __init__(self, settings: SessionSettings | None = None) -> None:
        settings = settings if settings is not None else SessionSettings()
        self._max_history = settings.max_history
        self._start_fen = settings.start_fen
        self._positions: list[Position] = [Position.empty()]

    # ── Setup ────────────────────────────────────────────────────────────

    def load(self, fen: str | None = None) -> Position:
        """Replace the history with the position decoded from *fen*.

        On :class:`~morphy.core.notation.DecodeError` the history is left
        untouched and the error propagates.
        """
        text = fen if fen is not None else self._start_fen
        position = decode(text)
        self._positions = [position]
        _LOGGER.info("Loaded position %s", text)
        return position

    # ── Moves ────────────────────────────────────────────────────────────

    def submit(self, from_sq: Square, to_sq: Square) -> bool:
        """Apply a pseudo-legal move. Returns True if it was accepted."""
        outcome = try_move(self.current, from_sq, to_sq)
        if not outcome.applied:
            _LOGGER.debug(
                "Rejected move %s%s", square_name(from_sq), square_name(to_sq)
            )
            return False
        self._positions.append(outcome.position)
        if self._max_history is not None and len(self._positions) > self._max_history:
            del self._positions[: len(self._positions) - self._max_history]
        return True

    def undo(self) -> Position | None:
        """Drop the current position. Returns the new current one, or None."""
        if len(self._positions) < 2:
            return None
        self._positions.pop()
        return self.current

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def current(self) -> Position:
        return self._positions[-1]

    @property
    def positions(self) -> tuple[Position, ...]:
        return tuple(self._positions)

    @property
    def fen(self) -> str:
        return encode(self.current)

    @property
    def ply_count(self) -> int:
        """Number of moves that can still be undone."""
        return len(self._positions) - 1
