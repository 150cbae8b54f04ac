"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass

from morphy.core.notation import STARTING_FEN


@dataclass
class SessionSettings:
    """All user-configurable session settings."""

    # Position loaded when a session starts
    start_fen: str = STARTING_FEN

    # History
    max_history: int | None = None  # None = keep every position

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_history is not None and self.max_history < 1:
            raise ValueError(f"max_history must be >= 1: {self.max_history}")
