"""
Command-line interface for playing the division game against the AI.
"""
from __future__ import annotations

import argparse
import random
import time
from typing import Callable, List, Optional

from config import DivGameConfig, get_config, load_config_from_file, setup_logging
from divgame.benchmark import compare_strategies
from divgame.engine import SearchEngine
from divgame.moves import IllegalMoveError, legal_moves
from divgame.search import STRATEGIES
from divgame.session import GameSession
from divgame.types import Player


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Divide the number by 2, 3 or 4 against a minimax AI"
    )
    parser.add_argument(
        "--algorithm", "-a",
        choices=sorted(STRATEGIES),
        default=None,
        help="Search algorithm for the AI (default: from config)",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=None,
        help="Search depth in ply (default: from config)",
    )
    parser.add_argument(
        "--first", "-f",
        choices=[p.value for p in Player],
        default=None,
        help="Who moves first (default: from config)",
    )
    parser.add_argument(
        "--start", "-s",
        type=int,
        default=None,
        help="Starting number instead of a random one",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the starting number",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to a JSON configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Compare minimax and alpha-beta before each AI move",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> DivGameConfig:
    """Load the configuration and apply command-line overrides."""
    config = load_config_from_file(args.config) if args.config else get_config()
    updates = {"engine": {}, "rules": {}, "logging": {}}
    if args.algorithm:
        updates["engine"]["algorithm"] = args.algorithm
    if args.depth is not None:
        updates["engine"]["default_depth"] = args.depth
    if args.first:
        updates["rules"]["first_player"] = args.first
    if args.log_level:
        updates["logging"]["log_level"] = args.log_level
    config.update_from_dict(updates)
    return config


def render_state(session: GameSession) -> str:
    s = session.state
    lines = [
        f"Current Number: {s.number}",
        f"Human Score: {s.human_score}",
        f"Computer Score: {s.computer_score}",
    ]
    if session.is_over:
        lines.append(f"Game Over! {session.result_message()}")
    else:
        lines.append("Computer's Turn..." if s.is_computer_turn else "Your Turn")
    return "\n".join(lines)


def prompt_divisor(session: GameSession, read: Callable[[str], str] = input) -> Optional[int]:
    """Ask for a divisor until a legal one is given; None on 'q'."""
    options = legal_moves(session.state.number)
    while True:
        raw = read(f"Divide {session.state.number} by {options} (q to quit): ").strip().lower()
        if raw in ("q", "quit", "exit"):
            return None
        try:
            divisor = int(raw)
        except ValueError:
            print("Invalid move!")
            continue
        if divisor in options:
            return divisor
        print("Invalid move!")


def play(session: GameSession, config: DivGameConfig, compare: bool = False,
         read: Callable[[str], str] = input) -> GameSession:
    """Run the interactive loop until the game ends or the player quits."""
    print(render_state(session))
    while not session.is_over:
        if session.is_human_turn():
            divisor = prompt_divisor(session, read)
            if divisor is None:
                break
            try:
                session.human_move(divisor)
            except IllegalMoveError as e:
                print(e)
                continue
            print(session.history[-1])
        else:
            if config.ui.ai_delay_ms:
                time.sleep(config.ui.ai_delay_ms / 1000.0)
            if compare:
                cmp = compare_strategies(session.state, session.engine.depth)
                print(f"minimax: {cmp.minimax_stats.nodes_visited} nodes, "
                      f"{cmp.minimax_stats.elapsed_ms:.2f} ms | "
                      f"alphabeta: {cmp.alphabeta_stats.nodes_visited} nodes, "
                      f"{cmp.alphabeta_stats.elapsed_ms:.2f} ms")
            result = session.computer_move()
            if result is None:
                print("Computer can't move.")
            else:
                print(session.history[-1])
                if config.ui.show_stats:
                    print(f"AI ({session.engine.algorithm}) visited {result.nodes_visited} "
                          f"nodes in {result.elapsed_ms:.2f} ms")
        print(render_state(session))
    return session


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = build_config(args)
    setup_logging(config.logging.log_level)

    rng = random.Random(args.seed)
    engine = SearchEngine(settings=config.engine)
    session = GameSession.new(config, rng=rng, start_number=args.start, engine=engine)
    play(session, config, compare=args.compare)


if __name__ == "__main__":
    main()
