"""Tests for the Piece value object."""

import pytest

from morphy.core.enums import Color, PieceType
from morphy.core.piece import Piece


class TestPieceChars:
    def test_from_char_white(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_from_char_black(self) -> None:
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    @pytest.mark.parametrize("char", list("pnbrqkPNBRQK"))
    def test_str_inverts_from_char(self, char: str) -> None:
        assert str(Piece.from_char(char)) == char

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("X")

    def test_symbol(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"

    def test_requires_color_and_kind(self) -> None:
        with pytest.raises(ValueError):
            Piece(None, PieceType.PAWN)  # type: ignore[arg-type]


class TestPackedCodes:
    def test_white_king_code(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).code == 8 + 6

    def test_black_pawn_code(self) -> None:
        assert Piece(Color.BLACK, PieceType.PAWN).code == 16 + 1

    def test_zero_is_empty(self) -> None:
        assert Piece.from_code(0) is None

    def test_from_code_inverts_code(self) -> None:
        for color in Color:
            for kind in PieceType:
                piece = Piece(color, kind)
                assert Piece.from_code(piece.code) == piece

    @pytest.mark.parametrize("code", [8, 16, 2, 18, 24, 25, 41, -1])
    def test_unknown_code_raises(self, code: int) -> None:
        with pytest.raises(ValueError, match="Invalid packed piece code"):
            Piece.from_code(code)


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_fen_char(self) -> None:
        assert Color.WHITE.fen_char == "w"
        assert Color.BLACK.fen_char == "b"
