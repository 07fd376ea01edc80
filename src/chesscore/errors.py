"""Error types shared by the core and game layers.

Recoverable failures of a game operation are *returned* as :class:`MoveError`
values so callers can re-render and re-prompt.  Exceptions are reserved for
malformed input at the notation boundary and for broken engine invariants.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MoveErrorKind(StrEnum):
    """Why a game operation was rejected."""

    ILLEGAL_MOVE = "illegal_move"
    PROMOTION_REQUIRED = "promotion_required"
    INVALID_PROMOTION_CHOICE = "invalid_promotion_choice"
    GAME_OVER = "game_over"
    MALFORMED_SQUARE = "malformed_square"


@dataclass(frozen=True, slots=True)
class MoveError:
    """A rejected operation. The game state is left untouched."""

    kind: MoveErrorKind
    message: str = ""

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}" if self.message else str(self.kind)


class ChessError(Exception):
    """Base class for chesscore exceptions."""


class MalformedSquareError(ChessError, ValueError):
    """Square name or index outside the 8x8 grid."""


class InvalidNotationError(ChessError, ValueError):
    """Unparseable FEN, snapshot payload or text command."""


class CorruptStateError(ChessError, RuntimeError):
    """An engine invariant does not hold (missing king, stray promotion)."""
