"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from kingtaker.core.board import Board
from kingtaker.core.piece import Piece
from kingtaker.core.types import parse_square
from kingtaker.game.interfaces import GamePhase
from kingtaker.game.state import GameState

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def started_state() -> GameState:
    """Standard opening layout, white to move."""
    state = GameState()
    state.start()
    return state


def _make_state(
    placement: dict[str, str],
    phase: GamePhase = GamePhase.TURN_WHITE,
) -> GameState:
    pieces = []
    for name, char in placement.items():
        row, column = parse_square(name)
        pieces.append(Piece.from_char(char, row, column))
    return GameState(Board.from_pieces(pieces), phase)


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory: state from ``{"e1": "K", "e8": "k", ...}``; ids follow key order."""
    return _make_state
