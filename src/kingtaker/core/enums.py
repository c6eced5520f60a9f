"""Side and piece-kind enumerations."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """The two sides.  White starts on rows 1-2 and always moves first."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row step of this side's pawns: +1 for white, -1 for black."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return "white" if self is Color.WHITE else "black"


class PieceType(IntEnum):
    """Piece kinds.  Only the king is special: losing it ends the game."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
