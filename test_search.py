import pytest

from divgame.moves import is_terminal
from divgame.search import AlphaBetaSearch, MinimaxSearch, evaluate, is_cutoff
from divgame.types import GameState, Player


def computer_state(number, human=0, computer=0):
    return GameState(number=number, human_score=human, computer_score=computer, whose_turn=Player.COMPUTER)


def search_both(state, depth):
    mm, ab = MinimaxSearch(), AlphaBetaSearch()
    return mm.select_move(state, depth), mm.last_stats, ab.select_move(state, depth), ab.last_stats


def test_evaluate_is_relative_score():
    assert evaluate(computer_state(24, human=2, computer=5)) == 3
    assert evaluate(computer_state(24, human=4, computer=1)) == -3


def test_cutoff():
    assert is_cutoff(computer_state(24), 0)
    assert is_cutoff(computer_state(8), 3)
    assert not is_cutoff(computer_state(24), 1)


def test_scenario_24_picks_three():
    # /2 leads to 12 where the human can reach 3 (odd): worst case -1.
    # /3 and /4 end the game at 0; the lower divisor wins the tie.
    for strategy in (MinimaxSearch(), AlphaBetaSearch()):
        result = strategy.select_move(computer_state(24), 5)
        assert result.move == 3
        assert result.score == 0
        assert result.state == GameState(number=8, human_score=0, computer_score=0, whose_turn=Player.HUMAN)
        assert result.nodes_visited == 7
        assert result.stats is strategy.last_stats


def test_tie_break_prefers_lowest_divisor():
    for strategy in (MinimaxSearch(), AlphaBetaSearch()):
        result = strategy.select_move(computer_state(24), 1)
        assert result.move == 2
        assert result.score == 0
        assert strategy.last_stats.nodes_visited == 4


def test_strictly_better_higher_divisor_is_chosen():
    # 30/2 = 15 (odd, human +1) scores -1; 30/3 = 10 (even) scores 0.
    for strategy in (MinimaxSearch(), AlphaBetaSearch()):
        result = strategy.select_move(computer_state(30), 1)
        assert result.move == 3
        assert result.score == 0


def test_alphabeta_prunes_at_48():
    mm_result, mm_stats, ab_result, ab_stats = search_both(computer_state(48), 2)
    assert mm_result.move == ab_result.move == 2
    assert mm_stats.nodes_visited == 12
    assert ab_stats.nodes_visited == 9


def test_no_legal_move_returns_none():
    for strategy in (MinimaxSearch(), AlphaBetaSearch()):
        assert strategy.select_move(computer_state(25), 5) is None
        assert strategy.last_stats.nodes_visited == 1


def test_depth_zero_behaves_like_one_ply():
    for strategy in (MinimaxSearch(), AlphaBetaSearch()):
        zero = strategy.select_move(computer_state(30), 0)
        one = strategy.select_move(computer_state(30), 1)
        assert zero.move == one.move
        assert zero.score == one.score


@pytest.mark.parametrize("state, depth", [
    (GameState(number=24, whose_turn=Player.HUMAN), 3),
    (computer_state(8), 3),
    (computer_state(24), -1),
])
def test_preconditions_fail_fast(state, depth):
    for strategy in (MinimaxSearch(), AlphaBetaSearch()):
        with pytest.raises(ValueError):
            strategy.select_move(state, depth)


def test_counters_reset_per_call():
    strategy = MinimaxSearch()
    strategy.select_move(computer_state(24000), 5)
    first = strategy.last_stats.nodes_visited
    strategy.select_move(computer_state(24000), 5)
    assert strategy.last_stats.nodes_visited == first
    assert strategy.last_stats.elapsed_ms >= 0.0


def test_alphabeta_matches_minimax_small_numbers():
    total_mm = total_ab = 0
    for n in range(11, 400):
        for human, computer in ((0, 0), (2, 1), (0, 3)):
            state = computer_state(n, human, computer)
            if is_terminal(state):
                continue
            for depth in range(1, 6):
                mm_result, mm_stats, ab_result, ab_stats = search_both(state, depth)
                assert ab_result.move == mm_result.move
                assert ab_result.score == mm_result.score
                assert ab_result.state == mm_result.state
                assert ab_stats.nodes_visited <= mm_stats.nodes_visited
                total_mm += mm_stats.nodes_visited
                total_ab += ab_stats.nodes_visited
    assert total_ab < total_mm


def test_alphabeta_matches_minimax_start_range():
    for n in range(20004, 30000, 12 * 41):
        for depth in (5, 7):
            mm_result, mm_stats, ab_result, ab_stats = search_both(computer_state(n), depth)
            assert ab_result.move == mm_result.move
            assert ab_result.score == mm_result.score
            assert ab_stats.nodes_visited <= mm_stats.nodes_visited
