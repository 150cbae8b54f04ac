"""Pseudo-legal move application.

A move is accepted when the origin holds a piece and the destination is
empty or holds a piece of the other color. Piece movement rules, checks,
castling rights and en-passant targets are not considered.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from morphy.core.enums import Color
from morphy.core.move import Move
from morphy.core.position import Position
from morphy.core.types import Square, is_valid_square


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :func:`try_move`: the next position and whether it changed."""

    position: Position
    applied: bool


def is_pseudo_legal(position: Position, from_sq: Square, to_sq: Square) -> bool:
    """Whether moving *from_sq* → *to_sq* passes the occupancy-color rule."""
    for sq in (from_sq, to_sq):
        if not is_valid_square(sq):
            raise ValueError(f"Square out of range: {sq}")
    mover = position.board[from_sq]
    if mover is None:
        return False
    target = position.board[to_sq]
    return target is None or target.color != mover.color


def try_move(position: Position, from_sq: Square, to_sq: Square) -> MoveOutcome:
    """Apply a pseudo-legal move, reporting whether it was accepted.

    Rejected moves return the input position unchanged with
    ``applied=False``; they are not errors.
    """
    if not is_pseudo_legal(position, from_sq, to_sq):
        return MoveOutcome(position, False)

    board = list(position.board)
    board[to_sq] = board[from_sq]
    board[from_sq] = None

    mover = position.side_to_move
    next_position = position.replace(
        board=tuple(board),
        side_to_move=mover.opposite,
        halfmove_clock=position.halfmove_clock + 1,
        fullmove_number=position.fullmove_number + (1 if mover is Color.BLACK else 0),
    )
    return MoveOutcome(next_position, True)


def apply_move(position: Position, from_sq: Square, to_sq: Square) -> Position:
    """Return the position after moving *from_sq* → *to_sq* (or *position*)."""
    return try_move(position, from_sq, to_sq).position


def replay(start: Position, moves: Iterable[Move]) -> list[Position]:
    """Fold *moves* over *start*, returning every intermediate position.

    The first element is *start*; rejected moves repeat the previous
    position so the result always has ``len(moves) + 1`` entries.
    """
    positions = [start]
    for move in moves:
        positions.append(apply_move(positions[-1], move.from_sq, move.to_sq))
    return positions
