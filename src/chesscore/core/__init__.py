"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesscore.core import Rules, position_from_fen, STARTING_FEN, parse_square

    pos, side = position_from_fen(STARTING_FEN)
    for move in Rules.legal_moves(pos, side):
        print(move)
"""

from chesscore.core.enums import (
    Color,
    GameEndReason,
    GamePhase,
    GameResult,
    MoveFlag,
    Outcome,
    PieceType,
)
from chesscore.core.board import Board
from chesscore.core.castling import CastlingRights, CastlingTracker
from chesscore.core.check import CheckDetector
from chesscore.core.en_passant import EnPassantTracker
from chesscore.core.move import Move, MoveRecord
from chesscore.core.move_generator import MoveGenerator
from chesscore.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chesscore.core.piece import Piece, parse_piece_type
from chesscore.core.position import Position
from chesscore.core.promotion import PROMOTION_CHOICES, PromotionHandler
from chesscore.core.rules import Rules
from chesscore.core.score import Score, ScoreCalculator
from chesscore.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameEndReason",
    "GamePhase",
    "GameResult",
    "MoveFlag",
    "Outcome",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "CastlingTracker",
    "CheckDetector",
    "EnPassantTracker",
    "Move",
    "MoveGenerator",
    "MoveRecord",
    "PROMOTION_CHOICES",
    "Piece",
    "Position",
    "PromotionHandler",
    "Rules",
    "Score",
    "ScoreCalculator",
    "parse_piece_type",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
