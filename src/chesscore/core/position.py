"""Position — board plus the special-rule state move generation depends on."""

from __future__ import annotations

from chesscore.core.board import Board
from chesscore.core.castling import CastlingTracker, castling_path
from chesscore.core.en_passant import EnPassantTracker
from chesscore.core.enums import MoveFlag
from chesscore.core.move import Move, MoveRecord
from chesscore.core.piece import Piece
from chesscore.core.types import Square
from chesscore.errors import CorruptStateError


class Position:
    """Board + castling rights + en-passant target.

    Side to move is owned by the game state machine, not by the position:
    move generation is keyed on the color of the piece being moved.
    """

    __slots__ = ("board", "castling", "en_passant")

    def __init__(
        self,
        board: Board | None = None,
        castling: CastlingTracker | None = None,
        en_passant: EnPassantTracker | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.castling = castling if castling is not None else CastlingTracker()
        self.en_passant = en_passant if en_passant is not None else EnPassantTracker()

    # ── Core move operations ─────────────────────────────────────────────

    def apply(self, move: Move) -> MoveRecord:
        """Commit a validated *move* and update the trackers."""
        piece = self.board[move.from_sq]
        if piece is None:
            raise CorruptStateError(f"No piece on {move.from_sq}")

        captured, captured_on, changed = _relocate(self.board, move)

        self.castling.record_move(move)
        self.en_passant.record_move(move, piece.color)

        return MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            captured_on=captured_on,
            changed_squares=changed,
        )

    def simulate(self, move: Move) -> Board:
        """Board after *move* on a scratch copy; the live board is untouched."""
        scratch = self.board.copy()
        _relocate(scratch, move)
        return scratch

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(self.board.copy(), self.castling.copy(), self.en_passant.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.castling == other.castling
            and self.en_passant == other.en_passant
        )

    def __repr__(self) -> str:
        return repr(self.board)


def _relocate(
    board: Board, move: Move
) -> tuple[Piece | None, Square | None, tuple[Square, ...]]:
    """Move pieces on *board*; return captured piece, its square, changed squares."""
    mover = board[move.from_sq]
    assert mover is not None
    capture_sq: Square | None = move.to_sq

    if move.flag == MoveFlag.EN_PASSANT:
        capture_sq = EnPassantTracker.capture_square(move.to_sq, move.from_sq)
        captured = board.remove(capture_sq)
        board.move(move.from_sq, move.to_sq)
        return captured, capture_sq, (move.from_sq, move.to_sq, capture_sq)

    captured = board.move(move.from_sq, move.to_sq)
    if captured is None:
        capture_sq = None

    if move.is_castling:
        path = castling_path(mover.color, move.flag == MoveFlag.CASTLE_KINGSIDE)
        board.move(path.rook_from, path.rook_to)
        return None, None, (move.from_sq, move.to_sq, path.rook_from, path.rook_to)

    return captured, capture_sq, (move.from_sq, move.to_sq)


def starting_position() -> Position:
    return Position(Board.initial())