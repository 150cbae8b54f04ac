"""Tests for PositionHistory."""

import pytest

from morphy.core.enums import Color
from morphy.core.notation import STARTING_FEN, DecodeError, DecodeErrorKind
from morphy.core.position import Position
from morphy.core.types import D1, E2, E4, E5, E7, F3, G1
from morphy.game.history import PositionHistory
from morphy.game.settings import SessionSettings


class TestHistorySetup:
    def test_empty_before_load(self) -> None:
        history = PositionHistory()
        assert history.current == Position.empty()
        assert history.ply_count == 0

    def test_load_default_start(self) -> None:
        history = PositionHistory()
        history.load()
        assert history.fen == STARTING_FEN

    def test_load_custom_start_from_settings(self) -> None:
        fen = "8/8/4k3/8/8/4K3/8/8 w ---- - 0 1"
        history = PositionHistory(SessionSettings(start_fen=fen))
        history.load()
        assert history.fen == fen

    def test_failed_load_keeps_current_position(self) -> None:
        history = PositionHistory()
        history.load()
        history.submit(E2, E4)
        before = history.positions
        with pytest.raises(DecodeError) as excinfo:
            history.load("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX w KQkq - 0 1")
        assert excinfo.value.kind is DecodeErrorKind.UNEXPECTED_CHARACTER
        assert history.positions == before

    def test_load_resets_history(self) -> None:
        history = PositionHistory()
        history.load()
        history.submit(E2, E4)
        history.load()
        assert history.ply_count == 0


class TestHistoryMoves:
    def test_submit_appends(self) -> None:
        history = PositionHistory()
        history.load()
        assert history.submit(E2, E4)
        assert history.ply_count == 1
        assert history.current.side_to_move == Color.BLACK

    def test_rejected_submit_keeps_history(self) -> None:
        history = PositionHistory()
        history.load()
        assert not history.submit(D1, E2)
        assert history.ply_count == 0

    def test_undo(self) -> None:
        history = PositionHistory()
        history.load()
        history.submit(E2, E4)
        restored = history.undo()
        assert restored is not None
        assert history.fen == STARTING_FEN

    def test_undo_empty_returns_none(self) -> None:
        history = PositionHistory()
        history.load()
        assert history.undo() is None

    def test_max_history_trims_oldest(self) -> None:
        history = PositionHistory(SessionSettings(max_history=2))
        history.load()
        history.submit(E2, E4)
        history.submit(E7, E5)
        history.submit(G1, F3)
        assert len(history.positions) == 2
        assert history.current.fullmove_number == 2


class TestSessionSettings:
    def test_defaults(self) -> None:
        settings = SessionSettings()
        assert settings.start_fen == STARTING_FEN
        assert settings.max_history is None
        assert settings.log_level == "WARNING"

    def test_max_history_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="max_history"):
            SessionSettings(max_history=0)
