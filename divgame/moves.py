from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from divgame.types import DIVISORS, TERMINAL_THRESHOLD, GameState, Move, Player


class IllegalMoveError(ValueError):
    """Raised when a divisor does not evenly divide the current number."""

    def __init__(self, number: int, move: object) -> None:
        self.number = number
        self.move = move
        super().__init__(f"{move!r} is not a legal divisor of {number}; legal: {legal_moves(number)}")


def legal_moves(number: int) -> List[Move]:
    """Divisors from DIVISORS that divide ``number`` evenly, in ascending order."""
    return [d for d in DIVISORS if number % d == 0]


def has_legal_move(number: int) -> bool:
    return any(number % d == 0 for d in DIVISORS)


def apply_move(state: GameState, move: Move) -> GameState:
    """Divide the state's number by ``move`` and return the successor state.

    Scoring depends only on the parity of the new number, whoever moved:
    an even result costs the computer a point (never below zero), an odd
    result gives the human a point.
    """
    if move not in legal_moves(state.number):
        raise IllegalMoveError(state.number, move)

    new_number = state.number // move
    human_score = state.human_score
    computer_score = state.computer_score
    if new_number % 2 == 0:
        computer_score = max(0, computer_score - 1)
    else:
        human_score += 1

    return replace(
        state,
        number=new_number,
        human_score=human_score,
        computer_score=computer_score,
        whose_turn=state.whose_turn.opponent,
    )


def is_terminal(state: GameState) -> bool:
    """Game over: number at or below the threshold, or no divisor applies.

    Divisibility does not depend on the mover, so one check covers both sides.
    """
    return state.number <= TERMINAL_THRESHOLD or not has_legal_move(state.number)


def pass_turn(state: GameState) -> GameState:
    """Hand the move to the other side without changing number or scores."""
    return replace(state, whose_turn=state.whose_turn.opponent)


def winner(state: GameState) -> Optional[Player]:
    """Side ahead on score, or None for a draw."""
    if state.computer_score > state.human_score:
        return Player.COMPUTER
    if state.human_score > state.computer_score:
        return Player.HUMAN
    return None
