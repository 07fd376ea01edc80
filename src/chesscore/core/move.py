"""Move value object and the record of a committed move."""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.core.enums import MoveFlag
from chesscore.core.piece import Piece
from chesscore.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single candidate move."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def is_castling(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A committed move as it happened on the board."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    captured_on: Square | None = None
    changed_squares: tuple[Square, ...] = ()

    @property
    def source(self) -> Square:
        return self.move.from_sq

    @property
    def target(self) -> Square:
        return self.move.to_sq

    @property
    def flag(self) -> MoveFlag:
        return self.move.flag

    def __str__(self) -> str:
        sep = "x" if self.captured is not None else "-"
        return (
            f"{self.piece}{square_name(self.source)}{sep}{square_name(self.target)}"
        )
