"""Tests for side and piece-kind enums."""

from kingtaker.core.enums import Color, PieceType


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite is Color.BLACK
        assert Color.BLACK.opposite is Color.WHITE

    def test_pawns_advance_toward_opponent(self) -> None:
        assert Color.WHITE.forward == 1
        assert Color.BLACK.forward == -1

    def test_str(self) -> None:
        assert str(Color.WHITE) == "white"
        assert f"{Color.BLACK}" == "black"


class TestPieceType:
    def test_king_is_last(self) -> None:
        assert max(PieceType) is PieceType.KING
        assert len(PieceType) == 6
