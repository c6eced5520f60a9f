"""Move legality rules: per-piece geometry and path blocking."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kingtaker.core.enums import Color, PieceType
from kingtaker.core.types import Coordinate, is_on_board

if TYPE_CHECKING:
    from kingtaker.core.board import Board
    from kingtaker.core.move import Move
    from kingtaker.core.piece import Piece

logger = logging.getLogger(__name__)

KNIGHT_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {(-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1)}
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_blocked(
    board: Board,
    source: Coordinate,
    target: Coordinate,
    step: tuple[int, int],
) -> bool:
    """Whether any square strictly between *source* and *target* is occupied.

    Walks from one *step* past the source.  Leaving the board without
    reaching the target counts as not blocked.
    """
    row_step, column_step = step
    row = source[0] + row_step
    column = source[1] + column_step
    while (row, column) != target:
        if not is_on_board(row, column):
            break
        if board.is_occupied(row, column):
            return True
        row += row_step
        column += column_step
    return False


class MoveValidator:
    """Static legality checker that operates on a :class:`Board`.

    Only geometry and turn order are enforced; whether a move leaves the
    mover's own king capturable is not considered.
    """

    @staticmethod
    def is_legal(
        board: Board,
        move: Move,
        side_to_move: Color | None,
        strict_turn: bool = True,
    ) -> bool:
        """Validate *move* on *board*.

        With ``strict_turn`` the moving piece must belong to *side_to_move*;
        without it only the geometry is checked (destination highlighting).
        """
        piece = board.piece_at(move.source_row, move.source_column)
        if piece is None:
            logger.debug("Rejected %s: no piece on source square", move)
            return False

        if strict_turn and piece.color != side_to_move:
            logger.debug(
                "Rejected %s: not %s's turn (side to move: %s)",
                move,
                piece.color,
                side_to_move,
            )
            return False

        if not is_on_board(move.target_row, move.target_column):
            logger.debug("Rejected %s: target off the board", move)
            return False

        target = board.piece_at(move.target_row, move.target_column)
        if target is not None and target.color == piece.color:
            return False

        return MoveValidator._is_valid_geometry(board, piece, target, move)

    # ── Per-piece geometry ───────────────────────────────────────────────

    @staticmethod
    def _is_valid_geometry(
        board: Board,
        piece: Piece,
        target: Piece | None,
        move: Move,
    ) -> bool:
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            return MoveValidator._is_valid_pawn_move(piece, target, move)
        if ptype == PieceType.KNIGHT:
            return MoveValidator._is_valid_knight_move(move)
        if ptype == PieceType.BISHOP:
            return MoveValidator._is_valid_bishop_move(board, move)
        if ptype == PieceType.ROOK:
            return MoveValidator._is_valid_rook_move(board, move)
        if ptype == PieceType.QUEEN:
            return MoveValidator._is_valid_bishop_move(
                board, move
            ) or MoveValidator._is_valid_rook_move(board, move)
        if ptype == PieceType.KING:
            return MoveValidator._is_valid_king_move(move)
        raise ValueError(f"Unknown piece type: {ptype!r}")

    @staticmethod
    def _is_valid_pawn_move(piece: Piece, target: Piece | None, move: Move) -> bool:
        try:
            forward = Color(piece.color).forward
        except ValueError:
            raise ValueError(f"Unknown piece color: {piece.color!r}") from None

        if move.target_row - move.source_row != forward:
            return False
        column_diff = move.target_column - move.source_column
        if target is None:
            return column_diff == 0
        # Target is known to be an opponent piece here.
        return abs(column_diff) == 1

    @staticmethod
    def _is_valid_knight_move(move: Move) -> bool:
        diff = (move.target_row - move.source_row, move.target_column - move.source_column)
        return diff in KNIGHT_OFFSETS

    @staticmethod
    def _is_valid_bishop_move(board: Board, move: Move) -> bool:
        row_diff = move.target_row - move.source_row
        column_diff = move.target_column - move.source_column
        if row_diff == 0 or abs(row_diff) != abs(column_diff):
            return False
        step = (_sign(row_diff), _sign(column_diff))
        return not is_path_blocked(board, move.source, move.target, step)

    @staticmethod
    def _is_valid_rook_move(board: Board, move: Move) -> bool:
        row_diff = move.target_row - move.source_row
        column_diff = move.target_column - move.source_column
        if (row_diff == 0) == (column_diff == 0):
            return False
        step = (_sign(row_diff), _sign(column_diff))
        return not is_path_blocked(board, move.source, move.target, step)

    @staticmethod
    def _is_valid_king_move(move: Move) -> bool:
        row_diff = abs(move.target_row - move.source_row)
        column_diff = abs(move.target_column - move.source_column)
        return max(row_diff, column_diff) == 1
