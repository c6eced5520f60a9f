"""Tests for the Qt game-loop worker."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from kingtaker.core.enums import Color
from kingtaker.core.move import Move
from kingtaker.game.interfaces import GamePhase
from kingtaker.game.loop import GameLoop, LoopSettings
from kingtaker.game.qt_bridge import GameLoopWorker


class _ScriptedPlayer:
    def __init__(self, *script: str) -> None:
        self._script = [Move.parse(s) for s in script]

    def propose_move(self) -> Move | None:
        return self._script.pop(0) if self._script else None

    def on_move_applied(self, move: Move) -> None:
        pass


class _BrokenPlayer:
    def propose_move(self) -> Move | None:
        raise RuntimeError("move source crashed")

    def on_move_applied(self, move: Move) -> None:
        pass


def _make_worker(white, black) -> GameLoopWorker:
    loop = GameLoop(settings=LoopSettings(poll_interval_s=0.0, player_wait_s=0.0))
    loop.set_player(Color.WHITE, white)
    loop.set_player(Color.BLACK, black)
    return GameLoopWorker(loop)


@pytest.mark.usefixtures("qapp")
class TestGameLoopWorker:
    def test_emits_moves_and_game_over(self) -> None:
        worker = _make_worker(
            _ScriptedPlayer("e2-e3", "d1-h5", "h5-e8"),
            _ScriptedPlayer("f7-f6", "a7-a6"),
        )
        moves = QSignalSpy(worker.move_applied)
        phases = QSignalSpy(worker.phase_changed)
        over = QSignalSpy(worker.game_over)
        finished = QSignalSpy(worker.finished)
        errors = QSignalSpy(worker.loop_error)

        worker.run()

        assert len(moves) == 5
        assert str(moves[4][0]) == "h5-e8"
        assert phases[0][0] == int(GamePhase.TURN_WHITE)
        assert len(over) == 1
        assert over[0][0] == int(GamePhase.ENDED_WHITE_WON)
        assert len(finished) == 1
        assert finished[0][0] == int(GamePhase.ENDED_WHITE_WON)
        assert len(errors) == 0

    def test_emits_error_on_illegal_move(self) -> None:
        worker = _make_worker(_ScriptedPlayer("a1-a5"), _ScriptedPlayer())
        errors = QSignalSpy(worker.loop_error)
        finished = QSignalSpy(worker.finished)

        worker.run()

        assert len(errors) == 1
        assert "a1-a5" in errors[0][0]
        assert len(finished) == 0

    def test_any_loop_failure_is_reported(self) -> None:
        worker = _make_worker(_BrokenPlayer(), _ScriptedPlayer())
        errors = QSignalSpy(worker.loop_error)
        finished = QSignalSpy(worker.finished)

        worker.run()

        assert len(errors) == 1
        assert errors[0][0] == "move source crashed"
        assert len(finished) == 0

    def test_stop_slot_stops_loop(self) -> None:
        worker = _make_worker(_ScriptedPlayer(), _ScriptedPlayer())
        finished = QSignalSpy(worker.finished)

        worker.stop()
        worker.run()

        assert worker.loop.is_stopped
        assert len(finished) == 1
        assert finished[0][0] == int(GamePhase.TURN_WHITE)

    def test_emitted_move_is_a_copy(self) -> None:
        worker = _make_worker(_ScriptedPlayer("e2-e3"), _ScriptedPlayer())
        moves = QSignalSpy(worker.move_applied)

        worker.loop.state.start()
        applied = worker.loop.play_turn()

        assert len(moves) == 1
        assert moves[0][0] == applied
        assert moves[0][0] is not applied
