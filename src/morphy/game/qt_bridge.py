"""Qt bridge that publishes position changes to the rendering layer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from morphy.core.notation import DecodeError
from morphy.core.position import Position
from morphy.game.history import PositionHistory
from morphy.game.selection import SquareSelector
from morphy.game.settings import SessionSettings

_LOGGER = logging.getLogger(__name__)


class PositionSession(QObject):
    """Owns the displayed position and reports every change as a signal.

    The board view connects ``position_changed`` to repaint, and forwards
    square clicks to :meth:`click_square`. Decode failures are reported
    through ``decode_failed`` and never replace the displayed position.
    """

    position_changed = pyqtSignal(object, str)
    decode_failed = pyqtSignal(str, int, str)
    move_rejected = pyqtSignal(int, int)
    selection_changed = pyqtSignal(int)
    click_failed = pyqtSignal(int, str)

    def __init__(
        self,
        settings: SessionSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else SessionSettings()
        self._history = PositionHistory(self._settings)
        self._selector = SquareSelector()

    @property
    def history(self) -> PositionHistory:
        return self._history

    @property
    def position(self) -> Position:
        return self._history.current

    def start(self) -> None:
        """Load the configured start position."""
        self.load_fen(self._settings.start_fen)

    @pyqtSlot(str)
    def load_fen(self, fen: str) -> None:
        try:
            self._history.load(fen)
        except DecodeError as exc:
            _LOGGER.warning("Could not load FEN %r: %s", fen, exc)
            self.decode_failed.emit(fen, exc.index, str(exc))
            return
        self._clear_selection()
        self._publish()

    @pyqtSlot(int)
    def click_square(self, sq: int) -> None:
        before = self._selector.pending
        try:
            move = self._selector.select(self._history.current, sq)
        except ValueError as exc:
            _LOGGER.warning("Ignoring click on square %d: %s", sq, exc)
            self.click_failed.emit(sq, str(exc))
            return
        if move is None:
            after = self._selector.pending
            if after != before:
                self.selection_changed.emit(-1 if after is None else after)
            return

        self.selection_changed.emit(-1)
        if self._history.submit(move.from_sq, move.to_sq):
            self._publish()
        else:
            self.move_rejected.emit(move.from_sq, move.to_sq)

    @pyqtSlot()
    def undo(self) -> None:
        if self._history.undo() is not None:
            self._clear_selection()
            self._publish()

    def _clear_selection(self) -> None:
        if self._selector.pending is not None:
            self._selector.reset()
            self.selection_changed.emit(-1)

    def _publish(self) -> None:
        self.position_changed.emit(self._history.current, self._history.fen)
