"""Static evaluation: material plus a centre-weighted placement table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingtaker.core.enums import Color, PieceType
from kingtaker.core.types import ROW_1, is_on_board

if TYPE_CHECKING:
    from kingtaker.game.state import GameState

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 10,
    PieceType.KNIGHT: 30,
    PieceType.BISHOP: 30,
    PieceType.ROOK: 50,
    PieceType.QUEEN: 90,
    PieceType.KING: 99999,
}

# Indexed [row - 1][column]; row 1 first.
POSITION_WEIGHTS: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 1, 1),
    (2, 2, 2, 2, 2, 2, 2, 2),
    (2, 2, 3, 3, 3, 3, 2, 2),
    (2, 2, 3, 4, 4, 3, 2, 2),
    (2, 2, 3, 4, 4, 3, 2, 2),
    (2, 2, 3, 3, 3, 3, 2, 2),
    (2, 2, 2, 2, 2, 2, 2, 2),
    (1, 1, 1, 1, 1, 1, 1, 1),
)

# Score of any already-decided position, whoever won.  Lower than every
# material balance the table above can produce.
TERMINAL_SCORE = -999_999_999


def piece_value(piece_type: PieceType) -> int:
    try:
        return PIECE_VALUES[piece_type]
    except KeyError:
        raise ValueError(f"Unknown piece type: {piece_type!r}") from None


def position_weight(row: int, column: int) -> int:
    if not is_on_board(row, column):
        raise ValueError(f"Coordinate off the board: ({row}, {column})")
    return POSITION_WEIGHTS[row - ROW_1][column]


def evaluate(state: GameState) -> int:
    """Score the position from the point of view of the side to move."""
    if state.is_game_over:
        return TERMINAL_SCORE

    side = state.side_to_move
    if side is None:
        raise RuntimeError(f"Cannot evaluate a game in phase {state.phase.name}")

    totals = {Color.WHITE: 0, Color.BLACK: 0}
    for piece in state.active_pieces():
        if piece.color not in totals:
            raise ValueError(f"Unknown piece color: {piece.color!r}")
        totals[piece.color] += piece_value(piece.piece_type) + position_weight(
            piece.row, piece.column
        )
    return totals[side] - totals[side.opposite]
