"""
Game session management: turn order, move history and end-of-game result.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from config import DivGameConfig, START_DIVISOR, get_config
from divgame.engine import SearchEngine
from divgame.moves import apply_move, has_legal_move, is_terminal, pass_turn, winner
from divgame.types import GameState, Move, Player, SearchResult, create_game_state

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """A move was requested after the game ended."""


class NotYourTurnError(RuntimeError):
    """A move was requested for the side that is not on turn."""


class Outcome(Enum):
    COMPUTER_WINS = "Computer wins!"
    HUMAN_WINS = "You win!"
    DRAW = "It's a draw!"


@dataclass(frozen=True)
class MoveRecord:
    """One line of the move log."""
    actor: str
    divisor: Move
    result: int
    human_score: int
    computer_score: int

    def __str__(self) -> str:
        return (f"{self.actor} divided by {self.divisor}, result: {self.result} | "
                f"Human: {self.human_score}, Computer: {self.computer_score}")


def random_start_number(rng: Optional[random.Random] = None,
                        low: int = 20000, high: int = 30000) -> int:
    """Uniform number in [low, high] divisible by 2, 3 and 4 (rejection sampling)."""
    rng = rng or random.Random()
    if -(-low // START_DIVISOR) * START_DIVISOR > high:
        raise ValueError(f"no multiple of {START_DIVISOR} in [{low}, {high}]")
    while True:
        n = rng.randint(low, high)
        if n % START_DIVISOR == 0:
            return n


class GameSession:
    """Holds the current state and drives turns between the human and the AI."""

    def __init__(self, state: GameState, engine: Optional[SearchEngine] = None) -> None:
        self.state = state
        self.engine = engine or SearchEngine()
        self.history: List[MoveRecord] = []
        self.states: List[GameState] = [state]
        self.game_over = is_terminal(state)

    @classmethod
    def new(cls, config: Optional[DivGameConfig] = None, rng: Optional[random.Random] = None,
            first_player: Optional[Player] = None, start_number: Optional[int] = None,
            engine: Optional[SearchEngine] = None) -> 'GameSession':
        """Start a game with a random qualifying number and zero scores."""
        config = config or get_config()
        rules = config.rules
        if first_player is None:
            first_player = Player(rules.first_player)
        if start_number is None:
            start_number = random_start_number(rng, rules.start_min, rules.start_max)
        engine = engine or SearchEngine(settings=config.engine)
        session = cls(create_game_state(start_number, first_player), engine)
        logger.info("New game: number=%d, %s moves first, algorithm=%s, depth=%d",
                    start_number, first_player.value, engine.algorithm, engine.depth)
        return session

    # ------------------------------------------------------------------
    # Turn handling
    # ------------------------------------------------------------------
    def _require_turn(self, player: Player) -> None:
        if self.game_over:
            raise GameOverError("the game is over")
        if self.state.whose_turn is not player:
            raise NotYourTurnError(f"it is the {self.state.whose_turn.value}'s turn")

    def _record(self, actor: str, divisor: Move) -> None:
        s = self.state
        record = MoveRecord(actor, divisor, s.number, s.human_score, s.computer_score)
        self.history.append(record)
        self.states.append(s)
        logger.info("%s", record)
        self._check_game_end()

    def _check_game_end(self) -> None:
        if is_terminal(self.state):
            self.game_over = True
            logger.info("Game over at %d: %s", self.state.number, self.result_message())

    def human_move(self, divisor: Move) -> GameState:
        """Apply the human's divisor; IllegalMoveError leaves the state unchanged."""
        self._require_turn(Player.HUMAN)
        self.state = apply_move(self.state, divisor)
        self._record("Player", divisor)
        return self.state

    def computer_move(self) -> Optional[SearchResult]:
        """Let the engine move; None means the computer had to skip or the game ended."""
        self._require_turn(Player.COMPUTER)
        result = self.engine.select_move(self.state)
        if result is None:
            self._handle_stuck()
            return None
        self.state = result.state
        self._record("Computer", result.move)
        return result

    def _handle_stuck(self) -> None:
        # The opponent's mobility decides between skipping and ending the game.
        if has_legal_move(self.state.number):
            self.skip_turn()
        else:
            self.game_over = True
            logger.info("No valid moves for either player. %s", self.result_message())

    def skip_turn(self) -> GameState:
        if self.game_over:
            raise GameOverError("the game is over")
        logger.info("%s has no valid moves, skipping", self.state.whose_turn.value)
        self.state = pass_turn(self.state)
        self.states.append(self.state)
        return self.state

    # ------------------------------------------------------------------
    # Result
    # ------------------------------------------------------------------
    @property
    def is_over(self) -> bool:
        return self.game_over

    def is_human_turn(self) -> bool:
        return self.state.whose_turn is Player.HUMAN

    def outcome(self) -> Outcome:
        side = winner(self.state)
        if side is Player.COMPUTER:
            return Outcome.COMPUTER_WINS
        if side is Player.HUMAN:
            return Outcome.HUMAN_WINS
        return Outcome.DRAW

    def result_message(self) -> str:
        return self.outcome().value
