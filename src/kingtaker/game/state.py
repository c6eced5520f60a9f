"""Game state machine: owns the board and the game phase."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from kingtaker.core.board import Board, PieceSnapshot
from kingtaker.core.enums import Color, PieceType
from kingtaker.core.rules import MoveValidator
from kingtaker.game.interfaces import GamePhase

if TYPE_CHECKING:
    from kingtaker.core.move import Move
    from kingtaker.core.piece import Piece


class GameState:
    """Applies and reverts moves and advances the turn/outcome phase.

    The phase is read-only from the outside; only the methods below change
    it.  Every query and transition runs under :attr:`lock`, a reentrant
    lock that the search also holds for its whole duration.  A reader on
    another thread therefore never sees a position the search is only
    trying out.  Hold the lock yourself to make several queries in a row
    consistent, or before touching :attr:`board` directly.
    """

    __slots__ = ("_board", "_phase", "_lock")

    def __init__(
        self,
        board: Board | None = None,
        phase: GamePhase = GamePhase.NOT_STARTED,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._phase = phase
        self._lock = threading.RLock()

    # ── Query surface ────────────────────────────────────────────────────

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def board(self) -> Board:
        """The live board; not guarded, see :attr:`lock`."""
        return self._board

    @property
    def phase(self) -> GamePhase:
        with self._lock:
            return self._phase

    @property
    def side_to_move(self) -> Color | None:
        return self.phase.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_over

    @property
    def winner(self) -> Color | None:
        return self.phase.winner

    def active_pieces(self) -> list[Piece]:
        with self._lock:
            return self._board.active_pieces()

    def captured_pieces(self) -> list[Piece]:
        with self._lock:
            return self._board.captured_pieces()

    def piece_at(self, row: int, column: int) -> Piece | None:
        with self._lock:
            return self._board.piece_at(row, column)

    def is_piece_at(self, row: int, column: int) -> bool:
        with self._lock:
            return self._board.is_occupied(row, column)

    def is_legal(self, move: Move, strict_turn: bool = True) -> bool:
        """Legality of *move* in the current position."""
        with self._lock:
            return MoveValidator.is_legal(
                self._board, move, self._phase.side_to_move, strict_turn
            )

    def snapshot(self) -> tuple[GamePhase, tuple[PieceSnapshot, ...]]:
        """Consistent ``(phase, board snapshot)`` pair for a front end."""
        with self._lock:
            return self._phase, self._board.snapshot()

    # ── Transitions ──────────────────────────────────────────────────────

    def start(self) -> None:
        """Begin play with white to move."""
        with self._lock:
            if self._phase != GamePhase.NOT_STARTED:
                raise RuntimeError(f"Game already started (phase: {self._phase.name})")
            self._phase = GamePhase.TURN_WHITE

    def apply_move(self, move: Move) -> bool:
        """Apply a validated move, recording any capture on *move*.

        Caller is responsible for the legality check.
        """
        with self._lock:
            board = self._board
            mover_id = board.piece_id_at(move.source_row, move.source_column)
            if mover_id is None:
                raise ValueError(f"Cannot apply {move}: source square is empty")
            mover = board.piece(mover_id)

            move.captured_piece = None
            target_id = board.piece_id_at(move.target_row, move.target_column)
            if target_id is not None:
                if board.piece(target_id).color == mover.color:
                    raise ValueError(f"Cannot apply {move}: target holds an own piece")
                board.capture(target_id)
                move.captured_piece = target_id

            board.relocate(mover_id, move.target_row, move.target_column)
            return True

    def undo_move(self, move: Move) -> None:
        """Revert *move*, which must be the last one applied.

        The phase becomes the turn of the piece that was moved back.  This
        only holds for walking back a single ply.  A move that cannot be
        reverted raises ``ValueError`` and leaves the board untouched.
        """
        with self._lock:
            board = self._board
            mover_id = board.piece_id_at(move.target_row, move.target_column)
            if mover_id is None:
                raise ValueError(f"Cannot undo {move}: target square is empty")
            captured_id = move.captured_piece
            if captured_id is not None and not board.piece(captured_id).captured:
                raise ValueError(f"Cannot undo {move}: piece {captured_id} is not captured")

            board.relocate(mover_id, move.source_row, move.source_column)
            if captured_id is not None:
                board.restore(captured_id, move.target_row, move.target_column)

            self._phase = GamePhase.turn_of(board.piece(mover_id).color)

    def advance_turn(self) -> None:
        """Hand the turn over, or end the game once a king is captured.

        Runs right after a move, so the current turn still names the side
        that moved; that side is the winner.
        """
        with self._lock:
            phase = self._phase
            if phase.is_over:
                return
            if phase == GamePhase.NOT_STARTED:
                raise RuntimeError("Cannot advance the turn of a game that has not started")

            mover = phase.side_to_move
            assert mover is not None
            if self._board.has_captured(PieceType.KING):
                self._phase = GamePhase.won_by(mover)
            else:
                self._phase = GamePhase.turn_of(mover.opposite)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        with self._lock:
            return f"GameState(phase={self._phase.name})\n{self._board!r}"
