"""Pawn promotion: detection and the pending-choice gate."""

from __future__ import annotations

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceType
from chesscore.core.piece import Piece
from chesscore.core.types import Square, rank_of
from chesscore.errors import CorruptStateError

PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class PromotionHandler:
    """Tracks a pawn waiting on the last rank for its new piece type."""

    __slots__ = ("square", "color")

    def __init__(self, square: Square | None = None, color: Color | None = None) -> None:
        self.square = square
        self.color = color if square is not None else None

    @property
    def pending(self) -> bool:
        return self.square is not None

    @staticmethod
    def is_promotion(piece: Piece, target: Square) -> bool:
        """Does *piece* moving to *target* reach its last rank as a pawn?"""
        return (
            piece.piece_type == PieceType.PAWN
            and rank_of(target) == piece.color.opposite.home_rank
        )

    @staticmethod
    def is_valid_choice(kind: PieceType) -> bool:
        return kind in PROMOTION_CHOICES

    def begin(self, square: Square, color: Color) -> None:
        self.square = square
        self.color = color

    def complete(self, board: Board, kind: PieceType) -> Piece:
        """Replace the waiting pawn with *kind* and clear the pending state.

        The caller validates *kind* with :meth:`is_valid_choice` first.
        """
        if self.square is None or self.color is None:
            raise CorruptStateError("No promotion is pending")
        pawn = board[self.square]
        if pawn != Piece(self.color, PieceType.PAWN):
            raise CorruptStateError(
                f"Expected a {self.color.name} pawn awaiting promotion on {self.square}"
            )
        promoted = Piece(self.color, kind)
        board.place(self.square, promoted)
        self.square = None
        self.color = None
        return promoted
