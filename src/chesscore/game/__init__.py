"""Game layer — the state machine, snapshots and the text command front-end.

Quick start::

    from chesscore.game import GameStateMachine

    game = GameStateMachine()
    game.start()
    game.submit_move("e2", "e4")
"""

from chesscore.game.commands import CommandResult, parse_command, play
from chesscore.game.snapshot import GameSnapshot, snapshot_from_dict, snapshot_to_dict
from chesscore.game.state_machine import GameStateMachine, MoveOutcome, MoveResult

__all__ = [
    "CommandResult",
    "GameSnapshot",
    "GameStateMachine",
    "MoveOutcome",
    "MoveResult",
    "parse_command",
    "play",
    "snapshot_from_dict",
    "snapshot_to_dict",
]
