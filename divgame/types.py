"""
Type definitions and protocols for the division game.

This module provides:
- The immutable GameState value threaded through rules and search
- Result and statistics records produced by the search engine
- Protocol definitions for interchangeable search strategies
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

# Basic type aliases
Move = int  # A divisor drawn from DIVISORS
Score = int  # computer_score - human_score

DIVISORS = (2, 3, 4)
TERMINAL_THRESHOLD = 10


class Player(Enum):
    """Side to move."""

    HUMAN = "human"
    COMPUTER = "computer"

    @property
    def opponent(self) -> Player:
        return Player.COMPUTER if self is Player.HUMAN else Player.HUMAN


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of the game.

    Every move produces a new GameState; earlier ones stay untouched so they
    can be kept for history and logging.
    """
    number: int
    human_score: int = 0
    computer_score: int = 0
    whose_turn: Player = Player.HUMAN

    def __post_init__(self) -> None:
        """Validate the game state after initialization."""
        if not isinstance(self.number, int) or self.number <= 0:
            raise ValueError(f"number must be a positive integer, got {self.number!r}")
        if self.human_score < 0 or self.computer_score < 0:
            raise ValueError("scores must be non-negative")
        if not isinstance(self.whose_turn, Player):
            raise ValueError(f"whose_turn must be a Player, got {self.whose_turn!r}")

    @property
    def is_computer_turn(self) -> bool:
        return self.whose_turn is Player.COMPUTER


@dataclass
class SearchStats:
    """Counters for a single select_move call."""
    nodes_visited: int = 0
    elapsed_ms: float = 0.0


@dataclass(frozen=True)
class SearchResult:
    """Successor chosen by a search strategy.

    ``state`` is the GameState reached by dividing the root number by
    ``move``; ``score`` is its backed-up evaluation.
    """
    state: GameState
    move: Move
    score: Score
    stats: SearchStats

    @property
    def nodes_visited(self) -> int:
        return self.stats.nodes_visited

    @property
    def elapsed_ms(self) -> float:
        return self.stats.elapsed_ms


class SearchStrategy(Protocol):
    """Protocol for move-selection strategies."""

    name: str
    last_stats: SearchStats

    def select_move(self, state: GameState, max_depth: int) -> Optional[SearchResult]:
        """Pick the computer's move from ``state`` searching ``max_depth`` ply."""
        ...


def create_game_state(number: int, first_player: Player = Player.HUMAN) -> GameState:
    """Create a fresh game state with zero scores."""
    return GameState(number=number, human_score=0, computer_score=0, whose_turn=first_player)
