"""Tests for the top-level package API."""

import chesscore
from chesscore import GamePhase, GameStateMachine, MoveOutcome


def test_new_game_is_ready() -> None:
    game = chesscore.new_game()
    assert isinstance(game, GameStateMachine)
    assert game.phase == GamePhase.READY


def test_new_game_uses_config() -> None:
    config = chesscore.EngineConfig(chesscore.ScoreTable(pawn=2.0))
    game = chesscore.new_game(config)
    assert game.config is config
    assert game.score().white == 46.0


def test_quick_start() -> None:
    game = chesscore.new_game()
    game.start()
    assert isinstance(game.submit_move("e2", "e4"), MoveOutcome)
