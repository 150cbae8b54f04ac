"""Position: complete board state (placement + metadata) as a value object."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from morphy.core.enums import Color, PieceType
from morphy.core.piece import EMPTY_CODE, Piece
from morphy.core.types import Square, is_valid_square, make_square, rank_of

Board = tuple[Piece | None, ...]

_EMPTY_BOARD: Board = (None,) * 64

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# Ranks a pawn skips over on a double step (zero-based: "3" and "6").
EN_PASSANT_RANKS = (2, 5)


@dataclass(frozen=True, slots=True)
class Position:
    """Full board state: placement, side to move, castling, en passant, clocks.

    Positions are immutable. Every transformation (see
    :func:`morphy.core.moves.apply_move`) returns a new instance, so callers
    can keep earlier positions around as history without copying.
    """

    board: Board = _EMPTY_BOARD
    side_to_move: Color = Color.WHITE
    white_can_castle_kingside: bool = False
    white_can_castle_queenside: bool = False
    black_can_castle_kingside: bool = False
    black_can_castle_queenside: bool = False
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        board = self.board
        if not isinstance(board, tuple):
            board = tuple(board)
            object.__setattr__(self, "board", board)
        if len(board) != 64:
            raise ValueError(f"Board must have 64 squares, got {len(board)}")
        for sq, piece in enumerate(board):
            if piece is not None and not isinstance(piece, Piece):
                raise ValueError(f"Invalid board entry on square {sq}: {piece!r}")
        if not isinstance(self.side_to_move, Color):
            raise ValueError(f"Invalid side to move: {self.side_to_move!r}")
        if self.en_passant is not None:
            if not is_valid_square(self.en_passant):
                raise ValueError(f"En-passant square out of range: {self.en_passant}")
            if rank_of(self.en_passant) not in EN_PASSANT_RANKS:
                raise ValueError(
                    f"En-passant square must lie on rank 3 or 6: {self.en_passant}"
                )
        if self.halfmove_clock < 0:
            raise ValueError(f"Halfmove clock must be >= 0: {self.halfmove_clock}")
        if self.fullmove_number < 1:
            raise ValueError(f"Fullmove number must be >= 1: {self.fullmove_number}")

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Position:
        """Empty board, White to move, no rights; the default before any FEN."""
        return cls()

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        board: list[Piece | None] = [None] * 64
        for f, pt in enumerate(_BACK_RANK):
            board[make_square(f, 0)] = Piece(Color.WHITE, pt)
            board[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            board[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            board[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return cls(
            board=tuple(board),
            white_can_castle_kingside=True,
            white_can_castle_queenside=True,
            black_can_castle_kingside=True,
            black_can_castle_queenside=True,
        )

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            raise ValueError(f"Square out of range: {sq}")
        return self.board[sq]

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    @property
    def castling_str(self) -> str:
        """Four-character castling field, one letter or ``-`` per right."""
        return (
            ("K" if self.white_can_castle_kingside else "-")
            + ("Q" if self.white_can_castle_queenside else "-")
            + ("k" if self.black_can_castle_kingside else "-")
            + ("q" if self.black_can_castle_queenside else "-")
        )

    # ── Copy-on-write ────────────────────────────────────────────────────

    def replace(self, **changes: Any) -> Position:
        """Return a copy with *changes* applied (invariants re-checked)."""
        return dataclasses.replace(self, **changes)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = [str(p) if p else "." for p in self.board[row * 8 : row * 8 + 8]]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def pack_board(position: Position) -> tuple[int, ...]:
    """Compact 64-int form of the board using :attr:`Piece.code`."""
    return tuple(EMPTY_CODE if p is None else p.code for p in position.board)


def unpack_board(codes: Iterable[int]) -> Board:
    """Inverse of :func:`pack_board`; raises ValueError on unknown codes."""
    board = tuple(Piece.from_code(code) for code in codes)
    if len(board) != 64:
        raise ValueError(f"Packed board must have 64 codes, got {len(board)}")
    return board
