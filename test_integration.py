from __future__ import annotations

import config
from config import DivGameConfig, EngineSettings, UISettings
from divgame.cli import build_config, parse_args, play, render_state
from divgame.engine import SearchEngine
from divgame.session import GameSession
from divgame.types import GameState, Player


def scripted(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def quiet_config():
    return DivGameConfig(engine=EngineSettings(algorithm="alphabeta"), ui=UISettings(ai_delay_ms=0))


def test_end_to_end_human_finishes_game(capsys):
    session = GameSession(GameState(number=24), SearchEngine(algorithm="alphabeta", depth=5))
    play(session, quiet_config(), read=scripted("x", "5", "3"))
    out = capsys.readouterr().out
    assert out.count("Invalid move!") == 2
    assert "Player divided by 3, result: 8 | Human: 0, Computer: 0" in out
    assert "Game Over! It's a draw!" in out


def test_end_to_end_computer_moves_with_comparison(capsys):
    session = GameSession(GameState(number=24, whose_turn=Player.COMPUTER),
                          SearchEngine(algorithm="alphabeta", depth=5))
    play(session, quiet_config(), compare=True)
    out = capsys.readouterr().out
    assert "minimax: 7 nodes" in out
    assert "Computer divided by 3, result: 8" in out
    assert "AI (alphabeta) visited 7 nodes" in out
    assert session.is_over


def test_quit_leaves_game_running():
    session = GameSession(GameState(number=24000), SearchEngine(depth=3))
    play(session, quiet_config(), read=scripted("q"))
    assert not session.is_over
    assert session.history == []


def test_render_state():
    session = GameSession(GameState(number=360, human_score=1), SearchEngine(depth=3))
    text = render_state(session)
    assert "Current Number: 360" in text
    assert "Human Score: 1" in text
    assert text.endswith("Your Turn")


def test_command_line_overrides():
    config.reset_config()
    try:
        args = parse_args(["--algorithm", "alphabeta", "--depth", "4", "--first", "computer", "--start", "48"])
        cfg = build_config(args)
        assert cfg.engine.algorithm == "alphabeta"
        assert cfg.engine.default_depth == 4
        assert cfg.rules.first_player == "computer"
        session = GameSession.new(cfg, start_number=args.start)
        assert session.state == GameState(number=48, whose_turn=Player.COMPUTER)
    finally:
        config.reset_config()
