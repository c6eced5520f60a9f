"""Coordinate constants and helpers.

Rows are numbered 1–8 (white starts on rows 1–2), columns 0–7 (A–H).
A square is addressed as a ``(row, column)`` pair.
"""

from __future__ import annotations

from typing import TypeAlias

Coordinate: TypeAlias = tuple[int, int]

ROW_1, ROW_2, ROW_3, ROW_4, ROW_5, ROW_6, ROW_7, ROW_8 = range(1, 9)
COLUMN_A, COLUMN_B, COLUMN_C, COLUMN_D, COLUMN_E, COLUMN_F, COLUMN_G, COLUMN_H = range(8)

ROWS: range = range(ROW_1, ROW_8 + 1)
COLUMNS: range = range(COLUMN_A, COLUMN_H + 1)


def is_on_board(row: int, column: int) -> bool:
    """Whether ``(row, column)`` lies on the 8×8 grid."""
    return ROW_1 <= row <= ROW_8 and COLUMN_A <= column <= COLUMN_H


def square_name(row: int, column: int) -> str:
    """Human-readable name, e.g. ``(2, 4)`` → ``'e2'``."""
    if not is_on_board(row, column):
        raise ValueError(f"Coordinate off the board: ({row}, {column})")
    return chr(ord("a") + column) + str(row)


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. ``'e2'`` → ``(2, 4)``."""
    if len(name) != 2 or name[0].lower() not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return int(name[1]), ord(name[0].lower()) - ord("a")
