"""
Search engine facade used by the game session.
Picks the strategy from configuration and logs the statistics of each search.
"""
from __future__ import annotations

import logging
from typing import Optional

from config import EngineSettings, get_engine_settings
from divgame.search import get_search_strategy
from divgame.types import GameState, SearchResult, SearchStats, SearchStrategy

logger = logging.getLogger(__name__)


class SearchEngine:
    """Runs the configured search strategy for the computer's turn."""

    def __init__(self, algorithm: Optional[str] = None, depth: Optional[int] = None,
                 settings: Optional[EngineSettings] = None) -> None:
        settings = settings or get_engine_settings()
        self.strategy: SearchStrategy = get_search_strategy(algorithm or settings.algorithm)
        self.depth: int = depth if depth is not None else settings.default_depth
        if self.depth < 0:
            raise ValueError(f"search depth must be non-negative, got {self.depth}")

    @property
    def algorithm(self) -> str:
        return self.strategy.name

    @property
    def last_stats(self) -> SearchStats:
        return self.strategy.last_stats

    def set_algorithm(self, algorithm: str) -> None:
        self.strategy = get_search_strategy(algorithm)

    def select_move(self, state: GameState, max_depth: Optional[int] = None) -> Optional[SearchResult]:
        """Search from ``state`` and return the chosen successor, or None if the computer cannot move."""
        depth = self.depth if max_depth is None else max_depth
        result = self.strategy.select_move(state, depth)
        stats = self.strategy.last_stats
        if result is None:
            logger.info("AI (%s) found no move from %d", self.algorithm, state.number)
        else:
            logger.info(
                "AI (%s) divides %d by %d: visited %d nodes in %.2f ms",
                self.algorithm, state.number, result.move, stats.nodes_visited, stats.elapsed_ms,
            )
        return result


def get_engine(algorithm: Optional[str] = None, depth: Optional[int] = None) -> SearchEngine:
    """Get a new search engine instance."""
    return SearchEngine(algorithm=algorithm, depth=depth)
