"""Tests for Board."""

import pytest

from kingtaker.core.board import Board
from kingtaker.core.enums import Color, PieceType
from kingtaker.core.piece import Piece
from kingtaker.core.types import parse_square


class TestBoardInitial:
    def test_thirty_two_pieces(self) -> None:
        board = Board.initial()
        assert len(board) == 32
        assert len(board.active_pieces()) == 32
        assert board.captured_pieces() == []

    def test_kings(self) -> None:
        board = Board.initial()
        white_king = board.piece_at(*parse_square("e1"))
        black_king = board.piece_at(*parse_square("e8"))
        assert white_king is not None and black_king is not None
        assert (white_king.color, white_king.piece_type) == (Color.WHITE, PieceType.KING)
        assert (black_king.color, black_king.piece_type) == (Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = "rnbqkbnr"
        for column, char in enumerate(expected):
            assert str(board.piece_at(1, column)) == char.upper()
            assert str(board.piece_at(8, column)) == char

    def test_pawns(self) -> None:
        board = Board.initial()
        assert len([p for p in board.active_pieces(Color.WHITE) if p.row == 2]) == 8
        assert len([p for p in board.active_pieces(Color.BLACK) if p.row == 7]) == 8
        assert all(p.piece_type == PieceType.PAWN for p in board.active_pieces() if p.row in (2, 7))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(3, 7):
            for column in range(8):
                assert board.piece_at(row, column) is None

    def test_id_order(self) -> None:
        board = Board.initial()
        assert str(board.piece(0)) == "R"
        assert str(board.piece(4)) == "K"
        assert str(board.piece(8)) == "P"
        assert str(board.piece(16)) == "r"
        assert str(board.piece(24)) == "p"

    def test_off_board_query_is_empty(self) -> None:
        board = Board.initial()
        assert board.piece_at(0, 0) is None
        assert board.piece_id_at(9, 3) is None
        assert not board.is_occupied(1, 8)


class TestBoardConstruction:
    def test_rejects_shared_square(self) -> None:
        with pytest.raises(ValueError):
            Board([Piece(Color.WHITE, PieceType.KING, 1, 4), Piece(Color.BLACK, PieceType.KING, 1, 4)])

    def test_rejects_off_board_piece(self) -> None:
        with pytest.raises(ValueError):
            Board([Piece(Color.WHITE, PieceType.KING, 0, 4)])

    def test_captured_piece_does_not_occupy(self) -> None:
        board = Board.from_pieces(
            [
                Piece(Color.WHITE, PieceType.KING, 1, 4),
                Piece(Color.BLACK, PieceType.QUEEN, 1, 4, captured=True),
            ]
        )
        assert board.piece_id_at(1, 4) == 0
        assert [str(p) for p in board.captured_pieces()] == ["q"]


class TestBoardMutation:
    def test_relocate(self) -> None:
        board = Board.initial()
        pid = board.piece_id_at(2, 4)
        assert pid is not None
        board.relocate(pid, 3, 4)
        assert board.piece_at(2, 4) is None
        assert board.piece_id_at(3, 4) == pid
        assert board.piece(pid).square == (3, 4)

    def test_relocate_onto_occupied_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(ValueError):
            board.relocate(0, 2, 0)

    def test_capture_keeps_coordinates(self) -> None:
        board = Board.initial()
        pid = board.piece_id_at(7, 3)
        assert pid is not None
        board.capture(pid)
        piece = board.piece(pid)
        assert piece.captured
        assert piece.square == (7, 3)
        assert board.piece_at(7, 3) is None
        assert pid not in board.active_ids()
        assert board.captured_pieces() == [piece]

    def test_capture_twice_raises(self) -> None:
        board = Board.initial()
        board.capture(5)
        with pytest.raises(ValueError):
            board.capture(5)

    def test_restore(self) -> None:
        board = Board.initial()
        before = board.snapshot()
        board.capture(20)
        board.restore(20, 8, 4)
        assert board.snapshot() == before
        assert board.captured_pieces() == []

    def test_restore_active_piece_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(ValueError):
            board.restore(3, 1, 3)

    def test_has_captured(self) -> None:
        board = Board.initial()
        assert not board.has_captured(PieceType.KING)
        board.capture(board.piece_id_at(8, 4))  # type: ignore[arg-type]
        assert board.has_captured(PieceType.KING)


class TestBoardCopy:
    def test_copy_is_independent(self) -> None:
        b1 = Board.initial()
        b2 = b1.copy()
        b2.relocate(b2.piece_id_at(2, 0), 3, 0)  # type: ignore[arg-type]
        assert b1.piece_at(2, 0) is not None
        assert b1 != b2

    def test_copy_equal(self) -> None:
        b1 = Board.initial()
        assert b1.copy() == b1


class TestBoardRepr:
    def test_repr_initial(self) -> None:
        lines = repr(Board.initial()).split("\n")
        assert lines[0] == "8 r n b q k b n r"
        assert lines[2] == "6 . . . . . . . ."
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"
