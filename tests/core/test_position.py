"""Tests for Position coordinates."""

import pytest

from chessrules.core.errors import InvalidNotationError, OutOfRangeError
from chessrules.core.position import ALL_POSITIONS, Position, in_bounds


class TestConstruction:
    def test_corners_to_algebraic(self) -> None:
        assert Position(0, 0).to_algebraic() == "a1"
        assert Position(7, 7).to_algebraic() == "h8"
        assert Position(0, 7).to_algebraic() == "h1"
        assert Position(7, 0).to_algebraic() == "a8"

    def test_from_algebraic(self) -> None:
        assert Position.from_algebraic("e4") == Position(3, 4)
        assert str(Position.from_algebraic("c7")) == "c7"

    @pytest.mark.parametrize("row, col", [(8, 0), (0, 8), (-1, 3), (3, -1)])
    def test_out_of_range_raises(self, row: int, col: int) -> None:
        with pytest.raises(OutOfRangeError):
            Position(row, col)

    @pytest.mark.parametrize("text", ["", "e", "e44", "e9", "i1", "a0", "E4"])
    def test_invalid_notation_raises(self, text: str) -> None:
        with pytest.raises(InvalidNotationError):
            Position.from_algebraic(text)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            Position(9, 9)
        with pytest.raises(ValueError):
            Position.from_algebraic("zz")


class TestQueries:
    def test_equality_and_hash(self) -> None:
        squares = {Position(3, 4), Position.from_algebraic("e4")}
        assert len(squares) == 1

    def test_is_valid(self) -> None:
        assert Position(5, 2).is_valid()

    def test_in_bounds(self) -> None:
        assert in_bounds(0, 7)
        assert not in_bounds(8, 0)
        assert not in_bounds(0, -1)

    def test_offset(self) -> None:
        a1 = Position(0, 0)
        assert a1.offset(1, 1) == Position.from_algebraic("b2")
        assert a1.offset(-1, 0) is None
        assert a1.offset(0, 8) is None

    def test_index_roundtrip(self) -> None:
        assert Position.from_algebraic("a1").index == 0
        assert Position.from_algebraic("h8").index == 63
        for pos in ALL_POSITIONS:
            assert Position.from_index(pos.index) == pos

    def test_immutable(self) -> None:
        pos = Position(1, 1)
        with pytest.raises(AttributeError):
            pos.row = 2  # type: ignore[misc]
