"""Board - arena of pieces on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable

from kingtaker.core.enums import Color, PieceType
from kingtaker.core.piece import Piece
from kingtaker.core.types import COLUMNS, ROW_1, ROW_2, ROW_7, ROW_8, is_on_board

PieceSnapshot = tuple[Color, PieceType, int, int, bool]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Fixed piece table indexed by piece id, plus an occupancy grid.

    Pieces are never removed from the table: capturing only flips the
    ``captured`` flag and clears the grid cell, so undo can bring a piece
    back by id.  The grid holds the id of the non-captured piece on every
    square, which keeps "piece at location" queries O(1).
    """

    __slots__ = ("_pieces", "_grid", "_captured")

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        self._pieces: list[Piece] = list(pieces)
        self._grid: list[int | None] = [None] * 64
        # Ids of captured pieces, in capture order.
        self._captured: list[int] = []

        for pid, piece in enumerate(self._pieces):
            if not is_on_board(piece.row, piece.column):
                raise ValueError(f"Piece {piece} placed off the board: {piece.square}")
            if piece.captured:
                self._captured.append(pid)
                continue
            idx = self._index(piece.row, piece.column)
            if self._grid[idx] is not None:
                raise ValueError(f"Two pieces share square {piece.square}")
            self._grid[idx] = pid

    @staticmethod
    def _index(row: int, column: int) -> int:
        return (row - ROW_1) * 8 + column

    # -- Element access -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._pieces)

    def piece(self, pid: int) -> Piece:
        return self._pieces[pid]

    def piece_id_at(self, row: int, column: int) -> int | None:
        """Id of the non-captured piece on the square (None if empty/off-board)."""
        if not is_on_board(row, column):
            return None
        return self._grid[self._index(row, column)]

    def piece_at(self, row: int, column: int) -> Piece | None:
        pid = self.piece_id_at(row, column)
        return None if pid is None else self._pieces[pid]

    def is_occupied(self, row: int, column: int) -> bool:
        return self.piece_id_at(row, column) is not None

    # -- Query helpers ------------------------------------------------------

    def active_ids(self) -> list[int]:
        """Ids of non-captured pieces in ascending id order."""
        return [pid for pid, piece in enumerate(self._pieces) if not piece.captured]

    def active_pieces(self, color: Color | None = None) -> list[Piece]:
        return [
            piece
            for piece in self._pieces
            if not piece.captured and (color is None or piece.color == color)
        ]

    def captured_pieces(self) -> list[Piece]:
        return [self._pieces[pid] for pid in self._captured]

    def has_captured(self, piece_type: PieceType) -> bool:
        """Whether any piece of *piece_type* has been captured."""
        return any(self._pieces[pid].piece_type == piece_type for pid in self._captured)

    def snapshot(self) -> tuple[PieceSnapshot, ...]:
        """Full value image of the arena, for comparisons."""
        return tuple(
            (p.color, p.piece_type, p.row, p.column, p.captured) for p in self._pieces
        )

    # -- Mutation -----------------------------------------------------------

    def relocate(self, pid: int, row: int, column: int) -> None:
        """Move non-captured piece *pid* to an empty square."""
        piece = self._pieces[pid]
        if piece.captured:
            raise ValueError(f"Cannot relocate captured piece {pid}")
        if not is_on_board(row, column):
            raise ValueError(f"Target off the board: ({row}, {column})")
        idx = self._index(row, column)
        occupant = self._grid[idx]
        if occupant is not None and occupant != pid:
            raise ValueError(f"Square ({row}, {column}) already holds piece {occupant}")

        self._grid[self._index(piece.row, piece.column)] = None
        self._grid[idx] = pid
        piece.row = row
        piece.column = column

    def capture(self, pid: int) -> None:
        """Take piece *pid* off the grid; it keeps its coordinates."""
        piece = self._pieces[pid]
        if piece.captured:
            raise ValueError(f"Piece {pid} is already captured")
        self._grid[self._index(piece.row, piece.column)] = None
        piece.captured = True
        self._captured.append(pid)

    def restore(self, pid: int, row: int, column: int) -> None:
        """Return captured piece *pid* to ``(row, column)``."""
        piece = self._pieces[pid]
        if not piece.captured:
            raise ValueError(f"Piece {pid} is not captured")
        idx = self._index(row, column)
        if self._grid[idx] is not None:
            raise ValueError(f"Cannot restore piece {pid}: ({row}, {column}) is occupied")
        self._captured.remove(pid)
        piece.captured = False
        piece.row = row
        piece.column = column
        self._grid[idx] = pid

    # -- Copying / factories ------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._pieces = [
            Piece(p.color, p.piece_type, p.row, p.column, p.captured)
            for p in self._pieces
        ]
        b._grid = self._grid.copy()
        b._captured = self._captured.copy()
        return b

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> Board:
        """Board for a custom position; ids follow the iteration order."""
        return cls(pieces)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout, 32 pieces."""
        pieces: list[Piece] = []
        for color, back_row, pawn_row in (
            (Color.WHITE, ROW_1, ROW_2),
            (Color.BLACK, ROW_8, ROW_7),
        ):
            for column, ptype in zip(COLUMNS, _BACK_RANK):
                pieces.append(Piece(color, ptype, back_row, column))
            for column in COLUMNS:
                pieces.append(Piece(color, PieceType.PAWN, pawn_row, column))
        return cls(pieces)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(ROW_8, ROW_1 - 1, -1):
            cells = []
            for column in COLUMNS:
                p = self.piece_at(row, column)
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
