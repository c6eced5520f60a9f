"""Concrete move sources."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable

from kingtaker.engine import DefaultEngine
from kingtaker.engine.search import IEngine, SearchLimits, SearchResult

if TYPE_CHECKING:
    from kingtaker.core.move import Move
    from kingtaker.game.state import GameState

logger = logging.getLogger(__name__)


class InteractivePlayer:
    """A human participant whose moves come from a front end.

    The front end calls :meth:`submit_move` (from any thread) and the game
    loop picks the move up on its next poll.  ``awaiting_move`` tells the
    front end when it should let the user drag pieces; submissions made
    while it is ``False`` are dropped.

    Args:
        name: Display name.
        on_move_applied: ``(Move) -> None``, called after every applied
            move, e.g. to trigger a redraw.
    """

    __slots__ = ("_name", "_on_move_applied", "_lock", "_pending", "_awaiting")

    def __init__(
        self,
        name: str = "Player",
        on_move_applied: Callable[[Move], None] | None = None,
    ) -> None:
        self._name = name
        self._on_move_applied = on_move_applied
        self._lock = threading.Lock()
        self._pending: Move | None = None
        self._awaiting = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def awaiting_move(self) -> bool:
        with self._lock:
            return self._awaiting

    def submit_move(self, move: Move) -> bool:
        """Hand over the user's move; replaces any move not yet picked up.

        Only accepted while the loop is waiting on this player.  Returns
        ``False`` and drops *move* otherwise.
        """
        with self._lock:
            if not self._awaiting:
                logger.debug("%s: ignoring %s, not this player's turn", self._name, move)
                return False
            self._pending = move
            return True

    def propose_move(self) -> Move | None:
        with self._lock:
            move, self._pending = self._pending, None
            self._awaiting = move is None
            return move

    def on_move_applied(self, move: Move) -> None:
        with self._lock:
            self._awaiting = False
            self._pending = None
        if self._on_move_applied is not None:
            self._on_move_applied(move)


class AIPlayer:
    """An engine-driven participant.

    ``propose_move`` runs the whole search synchronously on the caller's
    thread, mutating *state* in place and restoring it before returning.
    The state's lock is held for the whole search.

    Args:
        state: The live game the engine searches.
        engine: Searcher to use; defaults to :data:`DefaultEngine`.
        limits: Search depth.
        name: Display name.
    """

    __slots__ = ("_state", "_engine", "_limits", "_name", "_last_result")

    def __init__(
        self,
        state: GameState,
        engine: IEngine | None = None,
        limits: SearchLimits | None = None,
        name: str = "Engine",
    ) -> None:
        self._state = state
        self._engine = engine if engine is not None else DefaultEngine()
        self._limits = limits if limits is not None else SearchLimits()
        self._name = name
        self._last_result: SearchResult | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @property
    def last_result(self) -> SearchResult | None:
        return self._last_result

    def propose_move(self) -> Move | None:
        logger.info("%s thinking (depth %d)", self._name, self._limits.max_depth)
        with self._state.lock:
            self._last_result = self._engine.search(self._state, self._limits)
        return self._last_result.best_move

    def on_move_applied(self, move: Move) -> None:
        logger.debug("%s saw %s", self._name, move)
