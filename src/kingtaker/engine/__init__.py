"""Search engine package: negamax searcher and static evaluation."""

from kingtaker.engine.evaluation import (
    PIECE_VALUES,
    POSITION_WEIGHTS,
    TERMINAL_SCORE,
    evaluate,
)
from kingtaker.engine.negamax import NegamaxEngine, generate_moves
from kingtaker.engine.search import IEngine, SearchLimits, SearchResult

DefaultEngine: type[IEngine] = NegamaxEngine

__all__ = [
    "DefaultEngine",
    "IEngine",
    "NegamaxEngine",
    "PIECE_VALUES",
    "POSITION_WEIGHTS",
    "SearchLimits",
    "SearchResult",
    "TERMINAL_SCORE",
    "evaluate",
    "generate_moves",
]
