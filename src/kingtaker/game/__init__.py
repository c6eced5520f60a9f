"""Game management layer — state machine, move sources, game loop.

Quick start::

    from kingtaker.core import Color
    from kingtaker.game import AIPlayer, GameLoop, InteractivePlayer

    loop = GameLoop()
    loop.set_player(Color.WHITE, InteractivePlayer("Alice"))
    loop.set_player(Color.BLACK, AIPlayer(loop.state))
    loop.run()
"""

from kingtaker.game.interfaces import GamePhase, PlayerHandler
from kingtaker.game.loop import (
    GameLoop,
    IllegalMoveError,
    LoopEvents,
    LoopSettings,
)
from kingtaker.game.player import AIPlayer, InteractivePlayer
from kingtaker.game.qt_bridge import GameLoopWorker
from kingtaker.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "PlayerHandler",
    # Concrete
    "AIPlayer",
    "GameLoop",
    "GameLoopWorker",
    "GameState",
    "IllegalMoveError",
    "InteractivePlayer",
    "LoopEvents",
    "LoopSettings",
]
