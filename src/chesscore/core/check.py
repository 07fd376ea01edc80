"""Attack and check detection on a bare :class:`Board`."""

from __future__ import annotations

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceType
from chesscore.core.geometry import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_CAPTURES,
    ROOK_RAYS,
)
from chesscore.core.types import Square

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


class CheckDetector:
    """Static attack queries.

    Attacks follow the geometric move rules and ignore whether the attacker
    is itself pinned: a pinned piece still gives check.
    """

    @staticmethod
    def is_attacked(board: Board, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        # A pawn of by_color attacks sq iff a pawn of the other color on sq
        # would attack the pawn's square.
        for from_sq in PAWN_CAPTURES[int(by_color.opposite)][sq]:
            piece = board[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.PAWN
            ):
                return True

        for from_sq in KNIGHT_TARGETS[sq]:
            piece = board[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.KNIGHT
            ):
                return True

        for from_sq in KING_TARGETS[sq]:
            piece = board[from_sq]
            if (
                piece is not None
                and piece.color == by_color
                and piece.piece_type == PieceType.KING
            ):
                return True

        return _ray_hits(board, BISHOP_RAYS[sq], by_color, _DIAGONAL_SLIDERS) or (
            _ray_hits(board, ROOK_RAYS[sq], by_color, _STRAIGHT_SLIDERS)
        )

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        Raises :class:`~chesscore.errors.CorruptStateError` when *color*
        does not have exactly one king.
        """
        king_sq = board.king_square(color)
        return CheckDetector.is_attacked(board, king_sq, color.opposite)


def _ray_hits(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    sliders: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in sliders:
                return True
            break
    return False
