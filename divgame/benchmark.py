"""
Side-by-side comparison of the search strategies: chosen move, nodes visited
and wall-clock time.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

import numpy as np

from divgame.search import AlphaBetaSearch, MinimaxSearch, get_search_strategy
from divgame.types import GameState, Player, SearchResult, SearchStats


@dataclass
class StrategyComparison:
    """Minimax and alpha-beta run on the same root state."""
    state: GameState
    max_depth: int
    minimax: Optional[SearchResult]
    alphabeta: Optional[SearchResult]
    minimax_stats: SearchStats
    alphabeta_stats: SearchStats

    @property
    def same_move(self) -> bool:
        if self.minimax is None or self.alphabeta is None:
            return self.minimax is None and self.alphabeta is None
        return self.minimax.move == self.alphabeta.move and self.minimax.score == self.alphabeta.score

    @property
    def node_ratio(self) -> float:
        """Alpha-beta nodes as a fraction of minimax nodes."""
        if self.minimax_stats.nodes_visited == 0:
            return 1.0
        return self.alphabeta_stats.nodes_visited / self.minimax_stats.nodes_visited


def compare_strategies(state: GameState, max_depth: int) -> StrategyComparison:
    mm = MinimaxSearch()
    ab = AlphaBetaSearch()
    mm_result = mm.select_move(state, max_depth)
    ab_result = ab.select_move(state, max_depth)
    return StrategyComparison(
        state=state,
        max_depth=max_depth,
        minimax=mm_result,
        alphabeta=ab_result,
        minimax_stats=mm.last_stats,
        alphabeta_stats=ab.last_stats,
    )


@dataclass
class BenchmarkResult:
    """Per-state measurements for one algorithm."""
    algorithm: str
    start_numbers: np.ndarray
    nodes: np.ndarray
    elapsed_ms: np.ndarray
    moves: np.ndarray  # 0 where no move was found

    def summary(self) -> Dict[str, float]:
        if self.nodes.size == 0:
            return {"runs": 0, "mean_nodes": 0.0, "median_nodes": 0.0, "max_nodes": 0, "mean_ms": 0.0}
        return {
            "runs": int(self.nodes.size),
            "mean_nodes": float(np.mean(self.nodes)),
            "median_nodes": float(np.median(self.nodes)),
            "max_nodes": int(np.max(self.nodes)),
            "mean_ms": float(np.mean(self.elapsed_ms)),
        }


def benchmark_strategies(
    start_numbers: Iterable[int],
    max_depth: int,
    algorithms: Sequence[str] = ("minimax", "alphabeta"),
) -> Dict[str, BenchmarkResult]:
    """Run each algorithm from a fresh computer-to-move state for every start number."""
    numbers = np.asarray(list(start_numbers), dtype=np.int64)
    results: Dict[str, BenchmarkResult] = {}
    for name in algorithms:
        strategy = get_search_strategy(name)
        nodes = np.zeros(numbers.size, dtype=np.int64)
        elapsed = np.zeros(numbers.size, dtype=np.float64)
        moves = np.zeros(numbers.size, dtype=np.int8)
        for i, n in enumerate(numbers):
            state = GameState(number=int(n), whose_turn=Player.COMPUTER)
            result = strategy.select_move(state, max_depth)
            nodes[i] = strategy.last_stats.nodes_visited
            elapsed[i] = strategy.last_stats.elapsed_ms
            moves[i] = result.move if result is not None else 0
        results[strategy.name] = BenchmarkResult(strategy.name, numbers, nodes, elapsed, moves)
    return results
