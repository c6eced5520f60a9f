"""Piece record."""

from __future__ import annotations

from dataclasses import dataclass

from kingtaker.core.enums import Color, PieceType
from kingtaker.core.types import Coordinate

_CHARS: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "P",
    (Color.WHITE, PieceType.KNIGHT): "N",
    (Color.WHITE, PieceType.BISHOP): "B",
    (Color.WHITE, PieceType.ROOK): "R",
    (Color.WHITE, PieceType.QUEEN): "Q",
    (Color.WHITE, PieceType.KING): "K",
    (Color.BLACK, PieceType.PAWN): "p",
    (Color.BLACK, PieceType.KNIGHT): "n",
    (Color.BLACK, PieceType.BISHOP): "b",
    (Color.BLACK, PieceType.ROOK): "r",
    (Color.BLACK, PieceType.QUEEN): "q",
    (Color.BLACK, PieceType.KING): "k",
}

_BY_CHAR: dict[str, tuple[Color, PieceType]] = {v: k for k, v in _CHARS.items()}


@dataclass(slots=True)
class Piece:
    """A piece and its current placement.

    The shape never changes after creation; only the coordinates and the
    ``captured`` flag do.  A captured piece keeps its last coordinates so
    that an undo can put it back.
    """

    color: Color
    piece_type: PieceType
    row: int
    column: int
    captured: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter code (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, row: int, column: int) -> Piece:
        """Create a piece from its letter code, e.g. 'N' → white knight."""
        try:
            color, ptype = _BY_CHAR[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, row, column)

    @property
    def square(self) -> Coordinate:
        return self.row, self.column
