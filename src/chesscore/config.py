"""Engine configuration: material values used for scoring."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ScoreTable:
    """Material value per piece type. Kings are never scored.

    Args:
        pawn: Value of a pawn alone on its file.
        stacked_pawn: Value of each pawn on a file holding two or more
            pawns of the same color.
    """

    pawn: float = 1.0
    knight: float = 2.5
    bishop: float = 3.0
    rook: float = 5.0
    queen: float = 9.0
    stacked_pawn: float = 0.5


DEFAULT_SCORE_TABLE = ScoreTable()


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Per-game settings passed to :class:`~chesscore.game.GameStateMachine`."""

    score_table: ScoreTable = field(default=DEFAULT_SCORE_TABLE)
