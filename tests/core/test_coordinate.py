"""Tests for Coordinate."""

import pytest

from chessmate.core.coordinate import OFF_BOARD, Coordinate, coerce


class TestValid:
    def test_corners(self) -> None:
        assert Coordinate(0, 0).valid()
        assert Coordinate(7, 7).valid()
        assert Coordinate(0, 7).valid()

    def test_out_of_range(self) -> None:
        assert not Coordinate(-1, 0).valid()
        assert not Coordinate(0, 8).valid()
        assert not Coordinate(8, 3).valid()

    def test_off_board_sentinel(self) -> None:
        assert not OFF_BOARD.valid()


class TestAlgebraic:
    def test_to_algebraic(self) -> None:
        assert Coordinate(0, 0).to_algebraic() == "a1"
        assert Coordinate(4, 3).to_algebraic() == "e4"
        assert Coordinate(7, 7).to_algebraic() == "h8"

    def test_from_algebraic(self) -> None:
        assert Coordinate.from_algebraic("e4") == Coordinate(4, 3)
        assert Coordinate.from_algebraic("h1") == Coordinate(7, 0)

    def test_every_square_maps_back(self) -> None:
        for file in range(8):
            for rank in range(8):
                coord = Coordinate(file, rank)
                assert Coordinate.from_algebraic(coord.to_algebraic()) == coord

    @pytest.mark.parametrize("code", ["", "e", "e44", "i1", "a0", "a9", "E4"])
    def test_malformed_name(self, code: str) -> None:
        with pytest.raises(ValueError):
            Coordinate.from_algebraic(code)

    def test_off_board_has_no_name(self) -> None:
        with pytest.raises(ValueError):
            OFF_BOARD.to_algebraic()
        assert str(OFF_BOARD) == "-"

    def test_str(self) -> None:
        assert str(Coordinate(2, 5)) == "c6"


class TestHelpers:
    def test_offset(self) -> None:
        assert Coordinate(4, 1).offset(0, 2) == Coordinate(4, 3)
        assert not Coordinate(0, 0).offset(-1, 0).valid()

    def test_hashable_value(self) -> None:
        assert len({Coordinate(1, 1), Coordinate(1, 1), Coordinate(2, 1)}) == 2

    def test_coerce(self) -> None:
        assert coerce("b3") == Coordinate(1, 2)
        coord = Coordinate(3, 3)
        assert coerce(coord) is coord
