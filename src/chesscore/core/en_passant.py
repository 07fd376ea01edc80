"""En-passant vulnerability bookkeeping (valid for exactly one move)."""

from __future__ import annotations

from chesscore.core.enums import Color, MoveFlag
from chesscore.core.move import Move
from chesscore.core.types import Square, file_of, make_square, rank_of


class EnPassantTracker:
    """Remembers the square skipped by the latest pawn double step."""

    __slots__ = ("target", "owner")

    def __init__(self, target: Square | None = None, owner: Color | None = None) -> None:
        self.target = target
        # Color of the pawn that double-stepped; inferred from the rank if missing.
        if target is not None and owner is None:
            owner = Color.WHITE if rank_of(target) == 2 else Color.BLACK
        self.owner = owner if target is not None else None

    def record_move(self, move: Move, color: Color) -> None:
        """Set the target after a double step, clear it after anything else."""
        if move.flag == MoveFlag.DOUBLE_PAWN:
            self.target = make_square(
                file_of(move.from_sq),
                (rank_of(move.from_sq) + rank_of(move.to_sq)) // 2,
            )
            self.owner = color
        else:
            self.clear()

    def clear(self) -> None:
        self.target = None
        self.owner = None

    def capturable_by(self, color: Color) -> Square | None:
        """The target square if a pawn of *color* may capture onto it."""
        if self.target is None or self.owner == color:
            return None
        return self.target

    @staticmethod
    def capture_square(target: Square, from_sq: Square) -> Square:
        """Where the captured pawn stands: target's file, capturer's rank."""
        return make_square(file_of(target), rank_of(from_sq))

    def copy(self) -> EnPassantTracker:
        return EnPassantTracker(self.target, self.owner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnPassantTracker):
            return NotImplemented
        return (self.target, self.owner) == (other.target, other.owner)

    def __repr__(self) -> str:
        return f"EnPassantTracker(target={self.target!r}, owner={self.owner!r})"
