"""Tests for Position apply/simulate."""

import pytest

from chesscore.core.enums import Color, MoveFlag, PieceType
from chesscore.core.move import Move
from chesscore.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chesscore.core.piece import Piece
from chesscore.core.position import Position, starting_position
from chesscore.core.rules import Rules
from chesscore.core.types import D5, D7, E1, E2, E3, E4, G1, F3
from chesscore.errors import CorruptStateError


class TestApply:
    def test_double_step_sets_en_passant(self) -> None:
        pos = starting_position()
        record = pos.apply(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        assert pos.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.board[E2] is None
        assert pos.en_passant.target == E3
        assert record.captured is None
        assert record.changed_squares == (E2, E4)

    def test_next_move_clears_en_passant(self) -> None:
        pos = starting_position()
        pos.apply(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        pos.apply(Move(D7, D5, MoveFlag.DOUBLE_PAWN))
        assert pos.en_passant.target is not None
        assert pos.en_passant.owner == Color.BLACK
        pos.apply(Move(G1, F3))
        assert pos.en_passant.target is None

    def test_capture_recorded(self) -> None:
        pos, _ = position_from_fen("4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1")
        record = pos.apply(Move(E4, D5))
        assert record.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert record.captured_on == D5
        assert pos.board.count(Color.BLACK, PieceType.PAWN) == 0

    def test_king_move_loses_castling(self) -> None:
        pos, _ = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        pos.apply(Move(E1, E2))
        assert "KQ" not in position_to_fen(pos, Color.BLACK)
        assert pos.castling.rights(Color.WHITE).king_moved

    def test_empty_source_is_corrupt(self) -> None:
        with pytest.raises(CorruptStateError):
            starting_position().apply(Move(E4, E3))


class TestSimulate:
    def test_live_position_untouched(self) -> None:
        pos = starting_position()
        before = pos.copy()
        scratch = pos.simulate(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        assert scratch[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert pos == before

    def test_every_legal_move_leaves_position_intact(self, kiwipete: Position) -> None:
        before = kiwipete.copy()
        for move in Rules.legal_moves(kiwipete, Color.WHITE):
            kiwipete.simulate(move)
        assert kiwipete == before


class TestCopy:
    def test_copy_is_deep(self) -> None:
        pos, _ = position_from_fen(STARTING_FEN)
        clone = pos.copy()
        clone.apply(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        assert pos.board[E2] is not None
        assert pos.en_passant.target is None
        assert pos != clone

    def test_starting_position_matches_fen(self) -> None:
        pos, side = position_from_fen(STARTING_FEN)
        assert side == Color.WHITE
        assert pos == starting_position()
