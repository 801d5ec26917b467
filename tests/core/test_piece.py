"""Tests for the Piece value object."""

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidNotationError
from chessrules.core.piece import Piece


class TestFenChars:
    def test_white_is_uppercase(self) -> None:
        assert Piece(PieceType.KNIGHT, Color.WHITE).to_fen_char() == "N"
        assert Piece(PieceType.KING, Color.WHITE).to_fen_char() == "K"

    def test_black_is_lowercase(self) -> None:
        assert Piece(PieceType.QUEEN, Color.BLACK).to_fen_char() == "q"
        assert str(Piece(PieceType.PAWN, Color.BLACK)) == "p"

    def test_from_fen_char(self) -> None:
        assert Piece.from_fen_char("B") == Piece(PieceType.BISHOP, Color.WHITE)
        assert Piece.from_fen_char("r") == Piece(PieceType.ROOK, Color.BLACK)

    def test_from_invalid_char_raises(self) -> None:
        with pytest.raises(InvalidNotationError):
            Piece.from_fen_char("x")


class TestMovedFlag:
    def test_new_piece_has_not_moved(self) -> None:
        assert not Piece(PieceType.ROOK, Color.WHITE).has_moved

    def test_moved_returns_flagged_copy(self) -> None:
        rook = Piece(PieceType.ROOK, Color.WHITE)
        moved = rook.moved()
        assert moved.has_moved
        assert not rook.has_moved

    def test_clone_preserves_flag(self) -> None:
        king = Piece(PieceType.KING, Color.BLACK).moved()
        clone = king.clone()
        assert clone is not king
        assert clone.has_moved
        assert clone == king

    def test_equality_ignores_flag(self) -> None:
        fresh = Piece(PieceType.PAWN, Color.WHITE)
        assert fresh == fresh.moved()
        assert hash(fresh) == hash(fresh.moved())


class TestDisplay:
    def test_name_and_value(self) -> None:
        knight = Piece(PieceType.KNIGHT, Color.WHITE)
        assert knight.name == "Knight"
        assert knight.value == 3
        assert Piece(PieceType.QUEEN, Color.BLACK).value == 9
        assert Piece(PieceType.KING, Color.BLACK).value == 0

    def test_symbol(self) -> None:
        assert Piece(PieceType.KING, Color.WHITE).symbol == "♔"
        assert Piece(PieceType.PAWN, Color.BLACK).symbol == "♟"
