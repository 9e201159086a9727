"""
Depth-limited adversarial search for the computer's move.

Two interchangeable strategies share one evaluation policy, one cutoff test
and one root loop; they differ only in how a child subtree is scored.
"""
from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional, Type

from divgame.moves import apply_move, is_terminal, legal_moves
from divgame.types import (
    TERMINAL_THRESHOLD,
    GameState,
    Player,
    Score,
    SearchResult,
    SearchStats,
    SearchStrategy,
)

INF = float("inf")

# Scores a child subtree: (child, remaining depth, alpha at the root) -> value
ChildScorer = Callable[[GameState, int, float], float]


def evaluate(state: GameState) -> Score:
    """Relative score from the computer's point of view."""
    return state.computer_score - state.human_score


def is_cutoff(state: GameState, depth: int) -> bool:
    return depth <= 0 or is_terminal(state)


def _check_root(state: GameState, max_depth: int) -> None:
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")
    if state.whose_turn is not Player.COMPUTER:
        raise ValueError("select_move called on a state where the human is to move")
    if state.number <= TERMINAL_THRESHOLD:
        raise ValueError(f"select_move called on a finished game (number={state.number})")


def _search_root(
    state: GameState,
    max_depth: int,
    stats: SearchStats,
    score_child: ChildScorer,
) -> Optional[SearchResult]:
    """Expand the root in ascending divisor order and keep the first best child.

    The root is always expanded, so ``max_depth == 0`` acts as a one-ply search.
    """
    _check_root(state, max_depth)
    start = time.perf_counter()
    stats.nodes_visited += 1

    moves: List[int] = legal_moves(state.number)
    best: Optional[SearchResult] = None
    best_score = -INF
    alpha = -INF
    for m in moves:
        child = apply_move(state, m)
        sc = score_child(child, max(max_depth - 1, 0), alpha)
        # Strict comparison keeps the lowest divisor on ties.
        if sc > best_score:
            best_score = sc
            best = SearchResult(state=child, move=m, score=int(sc), stats=stats)
        if best_score > alpha:
            alpha = best_score

    stats.elapsed_ms = (time.perf_counter() - start) * 1000.0
    return best


class MinimaxSearch:
    """Plain minimax: full tree down to the depth limit, no pruning."""

    name = "minimax"

    def __init__(self) -> None:
        self.last_stats = SearchStats()

    def select_move(self, state: GameState, max_depth: int) -> Optional[SearchResult]:
        stats = SearchStats()
        self.last_stats = stats

        def mm(pos: GameState, d: int) -> float:
            stats.nodes_visited += 1
            if is_cutoff(pos, d):
                return evaluate(pos)
            children = [mm(apply_move(pos, m), d - 1) for m in legal_moves(pos.number)]
            if pos.whose_turn is Player.COMPUTER:
                return max(children)
            return min(children)

        return _search_root(state, max_depth, stats, lambda child, d, _alpha: mm(child, d))


class AlphaBetaSearch:
    """Minimax with alpha-beta pruning; picks the same move as MinimaxSearch."""

    name = "alphabeta"

    def __init__(self) -> None:
        self.last_stats = SearchStats()

    def select_move(self, state: GameState, max_depth: int) -> Optional[SearchResult]:
        stats = SearchStats()
        self.last_stats = stats

        def ab(pos: GameState, d: int, a: float, b: float) -> float:
            stats.nodes_visited += 1
            if is_cutoff(pos, d):
                return evaluate(pos)
            if pos.whose_turn is Player.COMPUTER:
                val = -INF
                for m in legal_moves(pos.number):
                    sc = ab(apply_move(pos, m), d - 1, a, b)
                    if sc > val:
                        val = sc
                    if val > a:
                        a = val
                    if a >= b:
                        break
                return val
            val = INF
            for m in legal_moves(pos.number):
                sc = ab(apply_move(pos, m), d - 1, a, b)
                if sc < val:
                    val = sc
                if val < b:
                    b = val
                if a >= b:
                    break
            return val

        return _search_root(state, max_depth, stats, lambda child, d, alpha: ab(child, d, alpha, INF))


STRATEGIES: Dict[str, Type[SearchStrategy]] = {
    MinimaxSearch.name: MinimaxSearch,
    AlphaBetaSearch.name: AlphaBetaSearch,
}


def get_search_strategy(name: str = "minimax") -> SearchStrategy:
    """Factory for a search strategy by registry name."""
    key = name.strip().lower().replace("-", "")
    try:
        return STRATEGIES[key]()
    except KeyError:
        raise ValueError(f"unknown search algorithm {name!r}; choose from {sorted(STRATEGIES)}") from None


__all__ = [
    "SearchStrategy",
    "MinimaxSearch",
    "AlphaBetaSearch",
    "STRATEGIES",
    "get_search_strategy",
    "evaluate",
    "is_cutoff",
]
