"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color. White always moves first."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Rank index (0-7) of the back rank."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_direction(self) -> int:
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class GamePhase(IntEnum):
    """Finite-state-machine states of a game."""

    READY = 0
    RUNNING = 1
    AWAITING_PROMOTION = 2
    FINISHED = 3

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS

    @property
    def winner(self) -> Color | None:
        if self == GameResult.WHITE_WINS:
            return Color.WHITE
        if self == GameResult.BLACK_WINS:
            return Color.BLACK
        return None


class GameEndReason(StrEnum):
    """Why a finished game ended."""

    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    KING_CAPTURED = "king_captured"
    ENDED = "ended"


class Outcome(StrEnum):
    """Result of a game from one side's point of view."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"
    UNDECIDED = "undecided"
