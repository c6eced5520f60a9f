"""Core domain layer — board model and move legality, no external dependencies.

Quick start::

    from kingtaker.core import Board, Color, Move, MoveValidator

    board = Board.initial()
    MoveValidator.is_legal(board, Move.parse("e2-e3"), Color.WHITE)
"""

from kingtaker.core.board import Board
from kingtaker.core.enums import Color, PieceType
from kingtaker.core.move import Move
from kingtaker.core.piece import Piece
from kingtaker.core.rules import MoveValidator, is_path_blocked
from kingtaker.core.types import (
    COLUMNS,
    ROWS,
    Coordinate,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "COLUMNS",
    "ROWS",
    "Coordinate",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveValidator",
    "Piece",
    "is_path_blocked",
]
