"""chesscore — a deterministic chess rule engine.

Quick start::

    import chesscore

    game = chesscore.new_game()
    game.start()
    outcome = game.submit_move("e2", "e4")
    if not outcome.ok:
        print(outcome)
"""

from chesscore.config import DEFAULT_SCORE_TABLE, EngineConfig, ScoreTable
from chesscore.core import Color, GameEndReason, GamePhase, GameResult, Outcome, Piece, PieceType
from chesscore.errors import (
    ChessError,
    CorruptStateError,
    InvalidNotationError,
    MalformedSquareError,
    MoveError,
    MoveErrorKind,
)
from chesscore.game import (
    GameSnapshot,
    GameStateMachine,
    MoveOutcome,
    play,
    snapshot_from_dict,
    snapshot_to_dict,
)

__version__ = "0.1.0"


def new_game(config: EngineConfig | None = None) -> GameStateMachine:
    """A fresh game in the :attr:`GamePhase.READY` state."""
    return GameStateMachine(config)


__all__ = [
    "DEFAULT_SCORE_TABLE",
    "ChessError",
    "Color",
    "CorruptStateError",
    "EngineConfig",
    "GameEndReason",
    "GamePhase",
    "GameResult",
    "GameSnapshot",
    "GameStateMachine",
    "InvalidNotationError",
    "MalformedSquareError",
    "MoveError",
    "MoveErrorKind",
    "MoveOutcome",
    "Outcome",
    "Piece",
    "PieceType",
    "ScoreTable",
    "new_game",
    "play",
    "snapshot_from_dict",
    "snapshot_to_dict",
]
