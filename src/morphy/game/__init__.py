"""Session layer: history, click selection and the Qt signal bridge.

Quick start::

    from morphy.core.types import E2, E4
    from morphy.game import PositionHistory

    history = PositionHistory()
    history.load()
    history.submit(E2, E4)

The PyQt6 ``PositionSession`` lives in :mod:`morphy.game.qt_bridge`.
"""

from morphy.game.history import PositionHistory
from morphy.game.selection import SelectionState, SquareSelector
from morphy.game.settings import SessionSettings

__all__ = [
    "PositionHistory",
    "SelectionState",
    "SessionSettings",
    "SquareSelector",
]
