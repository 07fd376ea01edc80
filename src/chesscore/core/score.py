"""Material score per color, recomputed from the board on demand."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from chesscore.config import DEFAULT_SCORE_TABLE, ScoreTable
from chesscore.core.board import Board
from chesscore.core.enums import Color, PieceType
from chesscore.core.types import file_of


@dataclass(frozen=True, slots=True)
class Score:
    """Material of both sides."""

    white: float
    black: float

    def of(self, color: Color) -> float:
        return self.white if color == Color.WHITE else self.black

    @property
    def leader(self) -> Color | None:
        """Side ahead on material, ``None`` when level."""
        if self.white > self.black:
            return Color.WHITE
        if self.black > self.white:
            return Color.BLACK
        return None


class ScoreCalculator:
    """Sums piece values; pawns sharing a file with their own kind count less."""

    __slots__ = ("_table",)

    def __init__(self, table: ScoreTable = DEFAULT_SCORE_TABLE) -> None:
        self._table = table

    @property
    def table(self) -> ScoreTable:
        return self._table

    def value_of(self, piece_type: PieceType) -> float:
        """Value of a single piece counted on its own."""
        table = self._table
        match piece_type:
            case PieceType.PAWN:
                return table.pawn
            case PieceType.KNIGHT:
                return table.knight
            case PieceType.BISHOP:
                return table.bishop
            case PieceType.ROOK:
                return table.rook
            case PieceType.QUEEN:
                return table.queen
            case PieceType.KING:
                return 0.0
        raise ValueError(f"Unknown piece type: {piece_type!r}")

    def score(self, board: Board, color: Color) -> float:
        total = 0.0
        pawns_per_file: Counter[int] = Counter()
        for sq, piece in board.all_pieces_of(color):
            if piece.piece_type == PieceType.PAWN:
                pawns_per_file[file_of(sq)] += 1
            else:
                total += self.value_of(piece.piece_type)

        for count in pawns_per_file.values():
            per_pawn = self._table.pawn if count == 1 else self._table.stacked_pawn
            total += per_pawn * count
        return total

    def scores(self, board: Board) -> Score:
        return Score(
            white=self.score(board, Color.WHITE),
            black=self.score(board, Color.BLACK),
        )
