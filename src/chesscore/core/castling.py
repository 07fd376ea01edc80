"""Castling rights bookkeeping and the castling legality predicate."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chesscore.core.board import Board
from chesscore.core.check import CheckDetector
from chesscore.core.enums import Color, PieceType
from chesscore.core.move import Move
from chesscore.core.piece import Piece
from chesscore.core.types import Square, make_square

_KING_FILE = 4
_ROOK_A_FILE = 0
_ROOK_H_FILE = 7


@dataclass(frozen=True, slots=True)
class CastlingRights:
    """Which of one side's castling pieces have left their home squares."""

    king_moved: bool = False
    rook_a_moved: bool = False
    rook_h_moved: bool = False

    def allows(self, kingside: bool) -> bool:
        if self.king_moved:
            return False
        return not (self.rook_h_moved if kingside else self.rook_a_moved)

    @classmethod
    def lost(cls) -> CastlingRights:
        return cls(True, True, True)


@dataclass(frozen=True, slots=True)
class CastlingPath:
    """Squares involved in castling toward one rook."""

    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]
    king_path: tuple[Square, ...]  # current, transit, destination


def castling_path(color: Color, kingside: bool) -> CastlingPath:
    """King and rook squares for castling on *color*'s home rank."""
    r = color.home_rank
    if kingside:
        return CastlingPath(
            king_from=make_square(_KING_FILE, r),
            king_to=make_square(6, r),
            rook_from=make_square(_ROOK_H_FILE, r),
            rook_to=make_square(5, r),
            between=(make_square(5, r), make_square(6, r)),
            king_path=(make_square(4, r), make_square(5, r), make_square(6, r)),
        )
    return CastlingPath(
        king_from=make_square(_KING_FILE, r),
        king_to=make_square(2, r),
        rook_from=make_square(_ROOK_A_FILE, r),
        rook_to=make_square(3, r),
        between=(make_square(1, r), make_square(2, r), make_square(3, r)),
        king_path=(make_square(4, r), make_square(3, r), make_square(2, r)),
    )



class CastlingTracker:
    """Per-color "has moved" flags. Flags are monotonic: set, never cleared."""

    __slots__ = ("_rights",)

    def __init__(self, rights: dict[Color, CastlingRights] | None = None) -> None:
        self._rights: dict[Color, CastlingRights] = {
            Color.WHITE: CastlingRights(),
            Color.BLACK: CastlingRights(),
        }
        if rights:
            self._rights.update(rights)

    def rights(self, color: Color) -> CastlingRights:
        return self._rights[color]

    def as_dict(self) -> dict[Color, CastlingRights]:
        return dict(self._rights)

    def copy(self) -> CastlingTracker:
        return CastlingTracker(self._rights)

    # -- Bookkeeping --------------------------------------------------------

    def record_move(self, move: Move) -> None:
        """Update flags for a committed move.

        Leaving a home square marks that piece as moved; arriving on a rook
        home square means the rook there (if any) was captured.
        """
        for sq in (move.from_sq, move.to_sq):
            for color in Color:
                self._mark_square(color, sq)

    def _mark_square(self, color: Color, sq: Square) -> None:
        rank = color.home_rank
        current = self._rights[color]
        if sq == make_square(_KING_FILE, rank):
            updated = replace(current, king_moved=True)
        elif sq == make_square(_ROOK_A_FILE, rank):
            updated = replace(current, rook_a_moved=True)
        elif sq == make_square(_ROOK_H_FILE, rank):
            updated = replace(current, rook_h_moved=True)
        else:
            return
        self._rights[color] = updated

    # -- Legality -----------------------------------------------------------

    def can_castle(self, board: Board, color: Color, kingside: bool) -> bool:
        """Is castling toward the chosen rook legal right now?"""
        if not self._rights[color].allows(kingside):
            return False

        path = castling_path(color, kingside)
        if board[path.king_from] != Piece(color, PieceType.KING):
            return False
        if board[path.rook_from] != Piece(color, PieceType.ROOK):
            return False
        if any(not board.is_empty(sq) for sq in path.between):
            return False

        opponent = color.opposite
        for sq in path.king_path:
            # Evaluate each square with the king standing on it.
            scratch = board.copy()
            scratch.remove(path.king_from)
            scratch.place(sq, Piece(color, PieceType.KING))
            if CheckDetector.is_attacked(scratch, sq, opponent):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CastlingTracker):
            return NotImplemented
        return self._rights == other._rights

    def __repr__(self) -> str:
        return f"CastlingTracker({self._rights!r})"
