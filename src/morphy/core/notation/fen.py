"""FEN parsing and serialization.

The decoder is a single left-to-right pass over the text with one cursor
and at most one character of lookahead. Each field either consumes its
characters or raises :class:`DecodeError` pointing at the first character
it could not accept; nothing after a failing field is examined.

Castling is read as four fixed positions (``KQkq`` with ``-`` standing in
for each missing right); a lone ``-`` is also accepted and means no rights.
Apart from that shorthand, which encodes as ``----``, every accepted string
satisfies ``encode(decode(text)) == text``.
"""

from __future__ import annotations

import logging

from morphy.core.enums import Color
from morphy.core.notation.errors import DecodeError, DecodeErrorKind, EncodeError
from morphy.core.piece import PIECE_CHARS, Piece
from morphy.core.position import EN_PASSANT_RANKS, Position
from morphy.core.types import FILES, Square, make_square, square_name

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_DIGITS = "0123456789"
_RUN_DIGITS = "12345678"
_CASTLING_LETTERS = "KQkq"
_EN_PASSANT_DIGITS = "".join(str(rank + 1) for rank in EN_PASSANT_RANKS)


class _FenReader:
    """Cursor over a FEN string; raises DecodeError at the cursor."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self, offset: int = 0) -> str:
        """Character at the cursor (plus *offset*), or ``""`` past the end."""
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else ""

    def advance(self) -> str:
        ch = self.peek()
        self.pos += 1
        return ch

    def fail(self, kind: DecodeErrorKind, offset: int = 0) -> DecodeError:
        return DecodeError(kind, min(self.pos + offset, len(self.text)), self.text)

    def separator(self) -> None:
        if self.peek() != " ":
            raise self.fail(DecodeErrorKind.MISSING_SEPARATOR)
        self.pos += 1

    def number(self, kind: DecodeErrorKind, first_digits: str) -> int:
        """Read ``<first digit> {<digit>}`` with positional accumulation."""
        ch = self.peek()
        if not ch or ch not in first_digits:
            raise self.fail(kind)
        value = int(self.advance())
        while self.peek() and self.peek() in _DIGITS:
            if value == 0:
                # "00" / "07" would not survive a round trip
                raise self.fail(kind)
            value = value * 10 + int(self.advance())
        return value


def decode(text: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises:
        DecodeError: if any field is malformed; ``kind`` and ``index``
            identify the field and character that were rejected.
    """
    reader = _FenReader(text)
    try:
        board = _read_placement(reader)
        reader.separator()
        side = _read_side(reader)
        reader.separator()
        castling = _read_castling(reader)
        reader.separator()
        ep = _read_en_passant(reader)
        reader.separator()
        halfmove = reader.number(DecodeErrorKind.INVALID_HALFMOVE_CLOCK, _DIGITS)
        reader.separator()
        fullmove = reader.number(
            DecodeErrorKind.INVALID_FULLMOVE_COUNTER, _DIGITS[1:]
        )
        if reader.peek():
            raise reader.fail(DecodeErrorKind.TRAILING_INPUT)
    except DecodeError as exc:
        _LOGGER.debug("Rejected FEN %r: %s", text, exc)
        raise

    return Position(
        board=tuple(board),
        side_to_move=side,
        white_can_castle_kingside=castling[0],
        white_can_castle_queenside=castling[1],
        black_can_castle_kingside=castling[2],
        black_can_castle_queenside=castling[3],
        en_passant=ep,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )


def _read_placement(reader: _FenReader) -> list[Piece | None]:
    board: list[Piece | None] = []
    for row in range(8):
        if row:
            ch = reader.peek()
            if ch == "/":
                reader.advance()
            elif ch in (" ", ""):
                # fewer than 8 ranks
                raise reader.fail(DecodeErrorKind.INVALID_RANK_WIDTH)
            elif ch in _RUN_DIGITS or ch in PIECE_CHARS:
                raise reader.fail(DecodeErrorKind.INVALID_RANK_WIDTH)
            else:
                raise reader.fail(DecodeErrorKind.UNEXPECTED_CHARACTER)
        _read_rank(reader, board)
    ch = reader.peek()
    if ch and (ch == "/" or ch in _RUN_DIGITS or ch in PIECE_CHARS):
        # ninth rank, or an overfilled last rank
        raise reader.fail(DecodeErrorKind.INVALID_RANK_WIDTH)
    if ch and ch != " ":
        raise reader.fail(DecodeErrorKind.UNEXPECTED_CHARACTER)
    return board


def _read_rank(reader: _FenReader, board: list[Piece | None]) -> None:
    filled = 0
    previous_was_run = False
    while filled < 8:
        ch = reader.peek()
        if ch and ch in _RUN_DIGITS:
            if previous_was_run:
                raise reader.fail(DecodeErrorKind.UNEXPECTED_CHARACTER)
            run = int(ch)
            if filled + run > 8:
                raise reader.fail(DecodeErrorKind.INVALID_RANK_WIDTH)
            board.extend([None] * run)
            filled += run
            previous_was_run = True
        elif ch and ch in PIECE_CHARS:
            board.append(Piece.from_char(ch))
            filled += 1
            previous_was_run = False
        elif ch in ("/", " ", ""):
            raise reader.fail(DecodeErrorKind.INVALID_RANK_WIDTH)
        else:
            raise reader.fail(DecodeErrorKind.UNEXPECTED_CHARACTER)
        reader.advance()


def _read_side(reader: _FenReader) -> Color:
    ch = reader.peek()
    if ch == "w":
        side = Color.WHITE
    elif ch == "b":
        side = Color.BLACK
    else:
        raise reader.fail(DecodeErrorKind.INVALID_SIDE_TO_MOVE)
    reader.advance()
    return side


def _read_castling(reader: _FenReader) -> tuple[bool, bool, bool, bool]:
    if reader.peek() == "-" and reader.peek(1) in (" ", ""):
        # lone "-": no rights at all, re-encoded as "----"
        reader.advance()
        return False, False, False, False
    rights: list[bool] = []
    for letter in _CASTLING_LETTERS:
        ch = reader.peek()
        if ch == letter:
            rights.append(True)
        elif ch == "-":
            rights.append(False)
        else:
            raise reader.fail(DecodeErrorKind.INVALID_CASTLING_FIELD)
        reader.advance()
    return rights[0], rights[1], rights[2], rights[3]


def _read_en_passant(reader: _FenReader) -> Square | None:
    ch = reader.peek()
    if ch == "-":
        reader.advance()
        return None
    if not ch or ch not in FILES:
        raise reader.fail(DecodeErrorKind.INVALID_EN_PASSANT_SQUARE)
    digit = reader.peek(1)
    if not digit or digit not in _EN_PASSANT_DIGITS:
        raise reader.fail(DecodeErrorKind.INVALID_EN_PASSANT_SQUARE, offset=1)
    reader.advance()
    reader.advance()
    return make_square(FILES.index(ch), int(digit) - 1)


def is_valid_fen(text: str) -> bool:
    """Whether *text* decodes without error."""
    try:
        decode(text)
    except DecodeError:
        return False
    return True


def encode(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN.

    Raises:
        EncodeError: if a board entry is neither a :class:`Piece` nor None.
    """
    # 1. Board
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for sq in range(row * 8, row * 8 + 8):
            piece = pos.board[sq]
            if piece is None:
                empty += 1
                continue
            if not isinstance(piece, Piece):
                raise EncodeError(
                    f"Unrecognised board entry on {square_name(sq)}: {piece!r}"
                )
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    if not isinstance(pos.side_to_move, Color):
        raise EncodeError(f"Unrecognised side to move: {pos.side_to_move!r}")

    # 3. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {pos.side_to_move.fen_char} {pos.castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
