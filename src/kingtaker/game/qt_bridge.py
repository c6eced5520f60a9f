"""Qt bridge to run the game loop in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from kingtaker.core.move import Move
from kingtaker.game.interfaces import GamePhase
from kingtaker.game.loop import GameLoop
from kingtaker.game.state import GameState


class GameLoopWorker(QObject):
    """Thread-affine wrapper that runs a :class:`GameLoop` and re-emits its
    events as Qt signals.

    Intended use: ``worker.moveToThread(thread)`` and connect
    ``thread.started`` to :meth:`run`.  Slots connected to the signals run
    on the receiver's thread.  They may query the loop's :class:`GameState`
    from there: its queries wait out any search in progress.
    """

    move_applied = pyqtSignal(object)
    phase_changed = pyqtSignal(int)
    game_over = pyqtSignal(int)
    loop_error = pyqtSignal(str)
    finished = pyqtSignal(int)

    __slots__ = ("_loop",)

    def __init__(self, loop: GameLoop) -> None:
        super().__init__()
        self._loop = loop
        loop.events.on_move.append(self._on_move)
        loop.events.on_phase_changed.append(self._on_phase_changed)
        loop.events.on_game_over.append(self._on_game_over)

    @property
    def loop(self) -> GameLoop:
        return self._loop

    @pyqtSlot()
    def run(self) -> None:
        """Run the loop to completion on the current thread.

        Any failure, an :class:`IllegalMoveError` included, ends the run and
        is reported on ``loop_error`` instead of ``finished``.
        """
        try:
            phase = self._loop.run()
        except Exception as exc:
            self.loop_error.emit(str(exc))
            return
        self.finished.emit(int(phase))

    @pyqtSlot()
    def stop(self) -> None:
        """Request the loop to stop at its next poll."""
        self._loop.stop()

    # ── Loop event adapters ──────────────────────────────────────────────

    def _on_move(self, move: Move, _state: GameState) -> None:
        self.move_applied.emit(move.clone())

    def _on_phase_changed(self, phase: GamePhase) -> None:
        self.phase_changed.emit(int(phase))

    def _on_game_over(self, phase: GamePhase) -> None:
        self.game_over.emit(int(phase))
