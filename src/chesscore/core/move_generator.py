"""Geometric (pseudo-legal) move generation.

Candidates here may still leave the mover's own king in check; that filter
lives in :mod:`chesscore.core.rules`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.core.enums import Color, MoveFlag, PieceType
from chesscore.core.geometry import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_CAPTURES,
    QUEEN_RAYS,
    ROOK_RAYS,
)
from chesscore.core.move import Move
from chesscore.core.piece import Piece
from chesscore.core.types import Square, rank_of

if TYPE_CHECKING:
    from chesscore.core.position import Position


class MoveGenerator:
    """Generates candidate moves for the pieces of a :class:`Position`."""

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def candidate_moves(self, source: Square) -> list[Move]:
        """Geometrically valid moves of the piece on *source* (empty if none)."""
        piece = self._board[source]
        if piece is None:
            return []

        moves: list[Move] = []
        match piece.piece_type:
            case PieceType.PAWN:
                self._gen_pawn(source, piece.color, moves)
            case PieceType.KNIGHT:
                self._gen_steps(source, piece.color, KNIGHT_TARGETS[source], moves)
            case PieceType.BISHOP:
                self._gen_sliding(source, piece.color, BISHOP_RAYS[source], moves)
            case PieceType.ROOK:
                self._gen_sliding(source, piece.color, ROOK_RAYS[source], moves)
            case PieceType.QUEEN:
                self._gen_sliding(source, piece.color, QUEEN_RAYS[source], moves)
            case PieceType.KING:
                self._gen_steps(source, piece.color, KING_TARGETS[source], moves)
                self._gen_castling(source, piece.color, moves)
        return moves

    def candidate_targets(self, source: Square) -> set[Square]:
        return {move.to_sq for move in self.candidate_moves(source)}

    def pseudo_legal_moves(self, color: Color) -> list[Move]:
        """Candidate moves for every piece of *color*."""
        moves: list[Move] = []
        for sq, _piece in self._board.all_pieces_of(color):
            moves.extend(self.candidate_moves(sq))
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step = 8 * color.pawn_direction
        last_rank = color.opposite.home_rank
        start_rank = color.home_rank + color.pawn_direction

        one_step = sq + step
        if 0 <= one_step < 64 and board.is_empty(one_step):
            if rank_of(one_step) == last_rank:
                moves.append(Move(sq, one_step, MoveFlag.PROMOTION))
            else:
                moves.append(Move(sq, one_step))
                two_step = one_step + step
                if rank_of(sq) == start_rank and board.is_empty(two_step):
                    moves.append(Move(sq, two_step, MoveFlag.DOUBLE_PAWN))

        ep_target = self._pos.en_passant.capturable_by(color)
        for cap_sq in PAWN_CAPTURES[int(color)][sq]:
            target = board[cap_sq]
            if target is not None:
                if target.color == color:
                    continue
                flag = (
                    MoveFlag.PROMOTION
                    if rank_of(cap_sq) == last_rank
                    else MoveFlag.NORMAL
                )
                moves.append(Move(sq, cap_sq, flag))
            elif cap_sq == ep_target and self._ep_victim_present(sq, cap_sq, color):
                moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))

    def _ep_victim_present(self, sq: Square, target: Square, color: Color) -> bool:
        victim_sq = self._pos.en_passant.capture_square(target, sq)
        return self._board[victim_sq] == Piece(color.opposite, PieceType.PAWN)

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        castling = self._pos.castling
        if castling.can_castle(self._board, color, kingside=True):
            moves.append(Move(king_sq, king_sq + 2, MoveFlag.CASTLE_KINGSIDE))
        if castling.can_castle(self._board, color, kingside=False):
            moves.append(Move(king_sq, king_sq - 2, MoveFlag.CASTLE_QUEENSIDE))
