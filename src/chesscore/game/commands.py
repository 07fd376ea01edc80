"""Text command front-end for a game.

Commands (case-insensitive)::

    start
    move e2 e4
    promote queen        # or q, rook, r, bishop, b, knight, n
    status               # material score
    end
"""

from __future__ import annotations

from typing import TypeAlias

from chesscore.core.enums import GamePhase, GameResult
from chesscore.core.score import Score
from chesscore.errors import InvalidNotationError, MoveError
from chesscore.game.state_machine import GameStateMachine, MoveOutcome

CommandResult: TypeAlias = MoveOutcome | MoveError | GamePhase | GameResult | Score

_ARITY: dict[str, int] = {
    "start": 0,
    "move": 2,
    "promote": 1,
    "status": 0,
    "end": 0,
}


def parse_command(text: str) -> tuple[str, list[str]]:
    """Split *text* into a command name and its arguments."""
    tokens = text.split()
    if not tokens:
        raise InvalidNotationError("Empty command")
    name, args = tokens[0].lower(), tokens[1:]
    arity = _ARITY.get(name)
    if arity is None:
        raise InvalidNotationError(f"Unknown command: {tokens[0]!r}")
    if len(args) != arity:
        raise InvalidNotationError(
            f"Command {name!r} takes {arity} argument(s), got {len(args)}"
        )
    return name, args


def play(game: GameStateMachine, text: str) -> CommandResult:
    """Run one text command against *game*."""
    name, args = parse_command(text)
    match name:
        case "start":
            return game.start()
        case "move":
            return game.submit_move(args[0].lower(), args[1].lower())
        case "promote":
            return game.submit_promotion(args[0])
        case "status":
            return game.score()
        case "end":
            return game.end()
    raise AssertionError(f"unhandled command {name!r}")
