"""Two-click move selection: pair square clicks into from/to moves."""

from __future__ import annotations

import logging
from enum import IntEnum, auto

from morphy.core.move import Move
from morphy.core.position import Position
from morphy.core.types import Square, is_valid_square, square_name

_LOGGER = logging.getLogger(__name__)


class SelectionState(IntEnum):
    """States of the click-pairing machine."""

    READY = auto()
    MOVING = auto()


class SquareSelector:
    """Turns a stream of square clicks into :class:`Move` objects.

    In ``READY`` a click on an occupied square arms the selector; clicks on
    empty squares are ignored. In ``MOVING`` clicking the armed square again
    cancels, and any other square completes the move.
    """

    __slots__ = ("_state", "_from_sq")

    def __init__(self) -> None:
        self._state = SelectionState.READY
        self._from_sq: Square | None = None

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def pending(self) -> Square | None:
        """The armed origin square, if any."""
        return self._from_sq

    def reset(self) -> None:
        self._state = SelectionState.READY
        self._from_sq = None

    def select(self, position: Position, sq: Square) -> Move | None:
        """Feed one click; returns a move when a from/to pair completes."""
        if not is_valid_square(sq):
            raise ValueError(f"Square out of range: {sq}")

        if self._state == SelectionState.READY:
            if not position.is_empty(sq):
                self._state = SelectionState.MOVING
                self._from_sq = sq
                _LOGGER.debug("Selected %s", square_name(sq))
            return None

        from_sq = self._from_sq
        self.reset()
        if from_sq is None or from_sq == sq:
            _LOGGER.debug("Selection cancelled")
            return None
        return Move(from_sq, sq)
