"""Division game package: move rules and the minimax / alpha-beta AI.

Usage examples:
    from divgame import GameState, Player, legal_moves, apply_move
    from divgame import AlphaBetaSearch, get_search_strategy
    from divgame import GameSession
"""
from __future__ import annotations

# Types
from .types import (
    DIVISORS,
    TERMINAL_THRESHOLD,
    GameState,
    Player,
    SearchResult,
    SearchStats,
    SearchStrategy,
    create_game_state,
)

# Rules
from .moves import (
    IllegalMoveError,
    legal_moves,
    has_legal_move,
    apply_move,
    is_terminal,
)

# Search
from .search import (
    MinimaxSearch,
    AlphaBetaSearch,
    STRATEGIES,
    get_search_strategy,
    evaluate,
)
from .engine import SearchEngine, get_engine
from .benchmark import compare_strategies, benchmark_strategies

# Orchestration
from .session import GameSession, MoveRecord, Outcome, random_start_number

__version__ = "1.0.0"
