"""Fixed-depth negamax search with alpha-beta pruning."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import TYPE_CHECKING

from kingtaker.core.move import Move
from kingtaker.core.rules import MoveValidator
from kingtaker.core.types import COLUMNS, ROWS
from kingtaker.engine.evaluation import evaluate
from kingtaker.engine.search import IEngine, SearchLimits, SearchResult

if TYPE_CHECKING:
    from kingtaker.game.state import GameState

logger = logging.getLogger(__name__)

_INF_SCORE = 1_000_000_000


def generate_moves(state: GameState) -> list[Move]:
    """Every legal move of the side to move.

    Brute force: each active piece of that side (ascending piece id) is
    tried against all 64 squares, rows then columns ascending.  The order
    is part of the engine's tie-breaking and must stay stable.
    """
    side = state.side_to_move
    if side is None:
        return []

    board = state.board
    moves: list[Move] = []
    for pid in board.active_ids():
        piece = board.piece(pid)
        if piece.color != side:
            continue
        for row in ROWS:
            for column in COLUMNS:
                move = Move(piece.row, piece.column, row, column)
                if MoveValidator.is_legal(board, move, side, strict_turn=True):
                    moves.append(move)
    return moves


class NegamaxEngine(IEngine):
    """Plain searcher: full-width, no move ordering, no tables.

    Every move tried is applied to the live state and undone before the
    call returns.  The state's lock is held throughout, so other threads
    only ever observe the position as it was before the search.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    def search(self, state: GameState, limits: SearchLimits) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")
        with state.lock:
            return self._search_root(state, limits)

    def _search_root(self, state: GameState, limits: SearchLimits) -> SearchResult:
        if state.side_to_move is None and not state.is_game_over:
            raise RuntimeError(f"Cannot search a game in phase {state.phase.name}")

        self._nodes = 0
        started = perf_counter()
        logger.debug("Searching %s to depth %d", state.phase.name, limits.max_depth)

        best_move: Move | None = None
        best_score = -_INF_SCORE
        for move in generate_moves(state):
            self._make_move(state, move)
            score = -self._negamax(state, limits.max_depth - 1, -_INF_SCORE, _INF_SCORE)
            state.undo_move(move)

            if best_move is None or score > best_score:
                best_score = score
                best_move = move

        if best_move is None:
            return SearchResult(None, evaluate(state), 0, self._nodes)

        logger.info(
            "Best move %s (score %d, %d nodes, %.3fs)",
            best_move,
            best_score,
            self._nodes,
            perf_counter() - started,
        )
        chosen = best_move.clone()
        chosen.captured_piece = None
        return SearchResult(chosen, best_score, limits.max_depth, self._nodes)

    def _negamax(self, state: GameState, depth: int, alpha: int, beta: int) -> int:
        self._nodes += 1
        if depth == 0 or state.is_game_over:
            return evaluate(state)

        for move in generate_moves(state):
            self._make_move(state, move)
            score = -self._negamax(state, depth - 1, -beta, -alpha)
            state.undo_move(move)

            if score >= beta:
                return beta
            if score > alpha:
                alpha = score

        return alpha

    @staticmethod
    def _make_move(state: GameState, move: Move) -> None:
        state.apply_move(move)
        state.advance_turn()
