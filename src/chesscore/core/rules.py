"""High-level chess rules: legal-move filtering, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.core.check import CheckDetector
from chesscore.core.enums import Color
from chesscore.core.move_generator import MoveGenerator
from chesscore.core.types import Square

if TYPE_CHECKING:
    from chesscore.core.move import Move
    from chesscore.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_in_check(position: Position, color: Color) -> bool:
        return CheckDetector.is_in_check(position.board, color)

    @staticmethod
    def legal_moves_from(position: Position, source: Square) -> list[Move]:
        """Candidates from *source* that do not leave the mover in check."""
        piece = position.board[source]
        if piece is None:
            return []
        gen = MoveGenerator(position)
        return [
            move
            for move in gen.candidate_moves(source)
            if not CheckDetector.is_in_check(position.simulate(move), piece.color)
        ]

    @staticmethod
    def legal_targets(position: Position, source: Square) -> set[Square]:
        return {move.to_sq for move in Rules.legal_moves_from(position, source)}

    @staticmethod
    def legal_moves(position: Position, color: Color) -> list[Move]:
        """All strictly legal moves for *color*."""
        legal: list[Move] = []
        for sq, _piece in position.board.all_pieces_of(color):
            legal.extend(Rules.legal_moves_from(position, sq))
        return legal

    @staticmethod
    def has_legal_move(position: Position, color: Color) -> bool:
        return any(
            Rules.legal_moves_from(position, sq)
            for sq, _piece in position.board.all_pieces_of(color)
        )

    @staticmethod
    def is_checkmate(position: Position, color: Color) -> bool:
        if not Rules.is_in_check(position, color):
            return False
        return not Rules.has_legal_move(position, color)

    @staticmethod
    def is_stalemate(position: Position, color: Color) -> bool:
        if Rules.is_in_check(position, color):
            return False
        return not Rules.has_legal_move(position, color)
