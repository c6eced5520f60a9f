"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from kingtaker.core.types import Coordinate, parse_square, square_name


@dataclass(slots=True)
class Move:
    """A source → target step of a single piece.

    ``captured_piece`` holds the board id of the piece taken by this move.
    It is filled in by :meth:`GameState.apply_move` and consumed by
    :meth:`GameState.undo_move`; it plays no part in equality.
    """

    source_row: int
    source_column: int
    target_row: int
    target_column: int
    captured_piece: int | None = field(default=None, compare=False)

    @property
    def source(self) -> Coordinate:
        return self.source_row, self.source_column

    @property
    def target(self) -> Coordinate:
        return self.target_row, self.target_column

    def clone(self) -> Move:
        """Independent copy, including the recorded capture."""
        return replace(self)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        try:
            return (
                f"{square_name(self.source_row, self.source_column)}-"
                f"{square_name(self.target_row, self.target_column)}"
            )
        except ValueError:
            return (
                f"({self.source_row},{self.source_column})-"
                f"({self.target_row},{self.target_column})"
            )

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse ``'e2-e3'`` or ``'e2e3'``."""
        compact = text.strip().replace("-", "")
        if len(compact) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        source_row, source_column = parse_square(compact[:2])
        target_row, target_column = parse_square(compact[2:])
        return cls(source_row, source_column, target_row, target_column)
