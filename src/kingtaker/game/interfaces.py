"""Game phase and move-source interfaces.

The loop depends on the ``PlayerHandler`` protocol only, never on a
concrete interactive or engine-driven implementation.
"""

from __future__ import annotations

from enum import IntEnum, auto
from typing import TYPE_CHECKING, Protocol

from kingtaker.core.enums import Color

if TYPE_CHECKING:
    from kingtaker.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of a game.

    ``NOT_STARTED`` until both sides have a move source, then the two turn
    states alternate until a king is captured.  The ended states are
    terminal for the live game.
    """

    NOT_STARTED = auto()
    TURN_WHITE = auto()
    TURN_BLACK = auto()
    ENDED_WHITE_WON = auto()
    ENDED_BLACK_WON = auto()

    @classmethod
    def turn_of(cls, color: Color) -> GamePhase:
        if color == Color.WHITE:
            return cls.TURN_WHITE
        if color == Color.BLACK:
            return cls.TURN_BLACK
        raise ValueError(f"Invalid color: {color!r}")

    @classmethod
    def won_by(cls, color: Color) -> GamePhase:
        if color == Color.WHITE:
            return cls.ENDED_WHITE_WON
        if color == Color.BLACK:
            return cls.ENDED_BLACK_WON
        raise ValueError(f"Invalid color: {color!r}")

    @property
    def is_over(self) -> bool:
        return self in (GamePhase.ENDED_WHITE_WON, GamePhase.ENDED_BLACK_WON)

    @property
    def side_to_move(self) -> Color | None:
        if self == GamePhase.TURN_WHITE:
            return Color.WHITE
        if self == GamePhase.TURN_BLACK:
            return Color.BLACK
        return None

    @property
    def winner(self) -> Color | None:
        if self == GamePhase.ENDED_WHITE_WON:
            return Color.WHITE
        if self == GamePhase.ENDED_BLACK_WON:
            return Color.BLACK
        return None


# ── Move sources ─────────────────────────────────────────────────────────────


class PlayerHandler(Protocol):
    """A source of moves for one side (interactive or engine-driven)."""

    def propose_move(self) -> Move | None:
        """Non-blocking poll; ``None`` means no move is ready yet."""
        ...

    def on_move_applied(self, move: Move) -> None:
        """Called after any move (either side's) has been applied."""
        ...
