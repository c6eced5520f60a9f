"""GameLoop: polls the active side, applies its moves, alternates turns.

The loop is the only writer of the live :class:`GameState`.  It is meant
to run on one dedicated thread; move sources only propose moves.  Each
turn is applied under the state's lock.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from kingtaker.core.enums import Color
from kingtaker.core.move import Move
from kingtaker.game.interfaces import GamePhase, PlayerHandler
from kingtaker.game.state import GameState

logger = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameState"], None]
PhaseCallback = Callable[[GamePhase], None]
GameOverCallback = Callable[[GamePhase], None]


class IllegalMoveError(RuntimeError):
    """A move source handed the loop a move that fails validation."""

    def __init__(self, move: Move, phase: GamePhase) -> None:
        super().__init__(f"Provided move was invalid: {move} (phase: {phase.name})")
        self.move = move
        self.phase = phase


@dataclass(slots=True, frozen=True)
class LoopSettings:
    """Polling intervals of the game loop, in seconds."""

    poll_interval_s: float = 0.1
    player_wait_s: float = 1.0


@dataclass
class LoopEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Loop ─────────────────────────────────────────────────────────────────────


class GameLoop:
    """Runs a game between two :class:`PlayerHandler` move sources.

    An invalid move from a move source is fatal: :class:`IllegalMoveError`
    propagates out of :meth:`run` and the move is never applied.
    """

    __slots__ = ("_state", "_settings", "_players", "_stop", "events")

    def __init__(
        self,
        state: GameState | None = None,
        settings: LoopSettings | None = None,
    ) -> None:
        self._state = state if state is not None else GameState()
        self._settings = settings if settings is not None else LoopSettings()
        self._players: dict[Color, PlayerHandler] = {}
        self._stop = threading.Event()
        self.events = LoopEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> LoopSettings:
        return self._settings

    @property
    def active_player(self) -> PlayerHandler | None:
        color = self._state.side_to_move
        return None if color is None else self._players.get(color)

    def player(self, color: Color) -> PlayerHandler | None:
        return self._players.get(color)

    @property
    def players_ready(self) -> bool:
        return Color.WHITE in self._players and Color.BLACK in self._players

    # ── Control ──────────────────────────────────────────────────────────

    def set_player(self, color: Color, handler: PlayerHandler) -> None:
        """Attach the move source for *color*."""
        if not isinstance(color, Color):
            raise ValueError(f"Invalid color: {color!r}")
        self._players[color] = handler

    def stop(self) -> None:
        """Ask :meth:`run` to return at the next poll."""
        self._stop.set()

    @property
    def is_stopped(self) -> bool:
        return self._stop.is_set()

    def run(self) -> GamePhase:
        """Play until a king is captured or :meth:`stop` is called."""
        if not self.players_ready:
            logger.info("Waiting for players")
        while not self.players_ready:
            if self._stop.wait(self._settings.player_wait_s):
                return self._state.phase

        if self._state.phase == GamePhase.NOT_STARTED:
            self._state.start()
            self._emit_phase(self._state.phase)
        logger.info("Starting game flow")

        while not self._state.is_game_over:
            if self.play_turn() is None:
                return self._state.phase

        logger.info("Game ended: %s won", self._state.winner)
        return self._state.phase

    def play_turn(self) -> Move | None:
        """Wait for the active side's move, apply it and pass the turn.

        Returns the applied move, or ``None`` when stopped while waiting.
        """
        if self._state.is_game_over:
            raise RuntimeError("Game is already over")
        if not self.players_ready:
            raise RuntimeError("Both players must be attached before playing")
        player = self.active_player
        if player is None:
            raise RuntimeError(f"No player for phase {self._state.phase.name}")

        move = self._wait_for_move(player)
        if move is None:
            return None

        # Readers must not see the board moved while the turn is unchanged.
        with self._state.lock:
            if not self._state.apply_move(move):
                raise RuntimeError(f"Move {move} was valid, but failed to execute")
            for color in (Color.WHITE, Color.BLACK):
                self._players[color].on_move_applied(move)
            self._emit_move(move)
            self._state.advance_turn()
            phase = self._state.phase

        self._emit_phase(phase)
        if phase.is_over:
            self._emit_game_over(phase)
        return move

    # ── Internal helpers ─────────────────────────────────────────────────

    def _wait_for_move(self, player: PlayerHandler) -> Move | None:
        while not self._stop.is_set():
            move = player.propose_move()
            if move is None:
                self._stop.wait(self._settings.poll_interval_s)
                continue
            if not self._state.is_legal(move, strict_turn=True):
                logger.error("Provided move was invalid: %s", move)
                raise IllegalMoveError(move, self._state.phase)
            return move
        return None

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_game_over(self, phase: GamePhase) -> None:
        for cb in self.events.on_game_over:
            cb(phase)
