"""Tests for PromotionHandler."""

import pytest

from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceType
from chesscore.core.piece import Piece
from chesscore.core.promotion import PromotionHandler
from chesscore.core.types import A1, A7, A8, E4
from chesscore.errors import CorruptStateError

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)


class TestDetection:
    def test_last_rank_per_color(self) -> None:
        assert PromotionHandler.is_promotion(WHITE_PAWN, A8)
        assert not PromotionHandler.is_promotion(WHITE_PAWN, A1)
        assert PromotionHandler.is_promotion(BLACK_PAWN, A1)
        assert not PromotionHandler.is_promotion(BLACK_PAWN, A8)

    def test_only_pawns(self) -> None:
        assert not PromotionHandler.is_promotion(Piece(Color.WHITE, PieceType.ROOK), A8)

    @pytest.mark.parametrize("kind", [PieceType.PAWN, PieceType.KING])
    def test_invalid_choices(self, kind: PieceType) -> None:
        assert not PromotionHandler.is_valid_choice(kind)


class TestComplete:
    def test_replaces_pawn_and_clears(self) -> None:
        board = Board()
        board.place(A8, WHITE_PAWN)
        handler = PromotionHandler()
        handler.begin(A8, Color.WHITE)
        assert handler.pending
        promoted = handler.complete(board, PieceType.KNIGHT)
        assert promoted == Piece(Color.WHITE, PieceType.KNIGHT)
        assert board[A8] == promoted
        assert not handler.pending

    def test_without_pending_is_corrupt(self) -> None:
        with pytest.raises(CorruptStateError):
            PromotionHandler().complete(Board(), PieceType.QUEEN)

    def test_missing_pawn_is_corrupt(self) -> None:
        board = Board()
        board.place(E4, WHITE_PAWN)
        handler = PromotionHandler(A7, Color.WHITE)
        with pytest.raises(CorruptStateError):
            handler.complete(board, PieceType.QUEEN)
