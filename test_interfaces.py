import logging

import pytest

from divgame.engine import SearchEngine, get_engine
from divgame.search import STRATEGIES, AlphaBetaSearch, MinimaxSearch, get_search_strategy
from divgame.types import GameState, Player


def test_strategy_factory():
    assert isinstance(get_search_strategy("minimax"), MinimaxSearch)
    assert isinstance(get_search_strategy("alphabeta"), AlphaBetaSearch)
    assert isinstance(get_search_strategy("Alpha-Beta"), AlphaBetaSearch)
    assert sorted(STRATEGIES) == ["alphabeta", "minimax"]
    with pytest.raises(ValueError):
        get_search_strategy("negamax")


def test_strategies_share_the_select_move_contract():
    state = GameState(number=24000, whose_turn=Player.COMPUTER)
    for name in STRATEGIES:
        strat = get_search_strategy(name)
        assert strat.name == name
        result = strat.select_move(state, 3)
        assert result.move in (2, 3, 4)
        assert result.state.number * result.move == state.number
        assert result.state.whose_turn is Player.HUMAN
        assert isinstance(result.score, int)


def test_engine_uses_requested_algorithm_and_depth():
    engine = SearchEngine(algorithm="alphabeta", depth=3)
    assert engine.algorithm == "alphabeta"
    assert engine.depth == 3
    result = engine.select_move(GameState(number=24, whose_turn=Player.COMPUTER))
    assert result.move == 3
    engine.set_algorithm("minimax")
    assert engine.algorithm == "minimax"
    assert engine.select_move(GameState(number=24, whose_turn=Player.COMPUTER), 5).move == 3
    assert engine.last_stats.nodes_visited == 7


def test_engine_defaults_from_settings():
    engine = get_engine()
    assert engine.algorithm in STRATEGIES
    assert engine.depth >= 1
    with pytest.raises(ValueError):
        SearchEngine(depth=-1)


def test_engine_logs_search_statistics(caplog):
    caplog.set_level(logging.INFO, logger="divgame.engine")
    engine = SearchEngine(algorithm="alphabeta", depth=5)
    engine.select_move(GameState(number=24, whose_turn=Player.COMPUTER))
    assert any("AI (alphabeta) divides 24 by 3" in r.getMessage() for r in caplog.records)

    caplog.clear()
    assert engine.select_move(GameState(number=25, whose_turn=Player.COMPUTER)) is None
    assert any("found no move" in r.getMessage() for r in caplog.records)
