"""GameStateMachine — orchestrates one game from setup to its result.

States::

    READY --start--> RUNNING(white)
    RUNNING(T) --submit_move--> RUNNING(other T) | AWAITING_PROMOTION | FINISHED
    AWAITING_PROMOTION --submit_promotion--> RUNNING(other T) | FINISHED
    RUNNING / AWAITING_PROMOTION --end--> FINISHED

Mutating calls return a :class:`MoveOutcome` on success and a
:class:`~chesscore.errors.MoveError` on a recoverable failure; the game is
left untouched in the latter case.

Thread-safety: one instance models one game and assumes exclusive,
non-reentrant access.  Callers serialize concurrent requests per game.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from chesscore.config import EngineConfig
from chesscore.core.board import Board
from chesscore.core.castling import CastlingTracker
from chesscore.core.en_passant import EnPassantTracker
from chesscore.core.enums import (
    Color,
    GameEndReason,
    GamePhase,
    GameResult,
    Outcome,
    PieceType,
)
from chesscore.core.move import MoveRecord
from chesscore.core.notation import position_from_fen
from chesscore.core.piece import Piece, parse_piece_type
from chesscore.core.position import Position
from chesscore.core.promotion import PromotionHandler
from chesscore.core.rules import Rules
from chesscore.core.score import Score, ScoreCalculator
from chesscore.core.types import Square, square_name, to_square
from chesscore.errors import (
    CorruptStateError,
    InvalidNotationError,
    MalformedSquareError,
    MoveError,
    MoveErrorKind,
)
from chesscore.game.snapshot import GameSnapshot

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What a successful move or promotion did to the game."""

    record: MoveRecord | None
    changed_squares: tuple[Square, ...]
    captured: Piece | None
    promoted_to: Piece | None
    check: bool
    checkmate: bool
    stalemate: bool
    phase: GamePhase
    result: GameResult
    side_to_move: Color

    @property
    def ok(self) -> bool:
        return True

    @property
    def game_over(self) -> bool:
        return self.phase == GamePhase.FINISHED


MoveResult: TypeAlias = MoveOutcome | MoveError


class GameStateMachine:
    """A single game: position, turn, phase, pending promotion, result."""

    __slots__ = (
        "config",
        "_position",
        "_side_to_move",
        "_phase",
        "_result",
        "_end_reason",
        "_promotion",
        "_scorer",
        "_history",
    )

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        position: Position | None = None,
        side_to_move: Color = Color.WHITE,
        phase: GamePhase = GamePhase.READY,
        result: GameResult = GameResult.IN_PROGRESS,
        end_reason: GameEndReason | None = None,
        promotion: PromotionHandler | None = None,
    ) -> None:
        self.config = config if config is not None else EngineConfig()
        self._position = position if position is not None else Position()
        self._side_to_move = side_to_move
        self._phase = phase
        self._result = result
        self._end_reason = end_reason
        self._promotion = promotion if promotion is not None else PromotionHandler()
        self._scorer = ScoreCalculator(self.config.score_table)
        self._history: list[MoveRecord] = []
        self._check_invariants()

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_snapshot(
        cls, snapshot: GameSnapshot, config: EngineConfig | None = None
    ) -> GameStateMachine:
        """Rebuild a game from :meth:`snapshot` output."""
        board = Board()
        for sq, piece in snapshot.board:
            board.place(sq, piece)
        castling = CastlingTracker(
            {color: snapshot.castling_rights(color) for color in Color}
        )
        position = Position(board, castling, EnPassantTracker(snapshot.en_passant))
        promotion = PromotionHandler()
        if snapshot.pending_promotion is not None:
            promotion.begin(snapshot.pending_promotion, snapshot.side_to_move)
        return cls(
            config,
            position=position,
            side_to_move=snapshot.side_to_move,
            phase=snapshot.phase,
            result=snapshot.result,
            end_reason=snapshot.end_reason,
            promotion=promotion,
        )

    @classmethod
    def from_fen(cls, fen: str, config: EngineConfig | None = None) -> GameStateMachine:
        """A running game set up from a FEN string."""
        position, side = position_from_fen(fen)
        return cls(config, position=position, side_to_move=side, phase=GamePhase.RUNNING)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def end_reason(self) -> GameEndReason | None:
        return self._end_reason

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def pending_promotion(self) -> tuple[Square, Color] | None:
        if not self._promotion.pending:
            return None
        assert self._promotion.square is not None and self._promotion.color is not None
        return self._promotion.square, self._promotion.color

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.FINISHED

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def board(self) -> Board:
        """A copy of the current board."""
        return self._position.board.copy()

    def piece_at(self, square: Square | str) -> Piece | None:
        return self._position.board[to_square(square)]

    def is_in_check(self, color: Color | None = None) -> bool:
        color = self._side_to_move if color is None else color
        return Rules.is_in_check(self._position, color)

    def legal_targets(self, source: Square | str) -> set[Square]:
        """Check-filtered destinations for the piece on *source*.

        Empty unless the game is running and the piece belongs to the side
        to move.
        """
        sq = to_square(source)
        piece = self._position.board[sq]
        if (
            self._phase != GamePhase.RUNNING
            or piece is None
            or piece.color != self._side_to_move
        ):
            return set()
        return Rules.legal_targets(self._position, sq)

    def score(self) -> Score:
        return self._scorer.scores(self._position.board)

    def outcome(self, color: Color) -> Outcome:
        """Result from *color*'s point of view."""
        if self._phase != GamePhase.FINISHED:
            return Outcome.UNDECIDED
        if self._result == GameResult.DRAW:
            return Outcome.DRAW
        return Outcome.WIN if self._result.winner == color else Outcome.LOSE

    # ── Transitions ──────────────────────────────────────────────────────

    def start(self) -> GamePhase | MoveError:
        if self._phase == GamePhase.FINISHED:
            return self._reject(MoveErrorKind.GAME_OVER, "game is over")
        if self._phase != GamePhase.READY:
            return self._reject(MoveErrorKind.ILLEGAL_MOVE, "game already started")
        self._phase = GamePhase.RUNNING
        _LOGGER.debug("Game started, %s to move", self._side_to_move)
        return self._phase

    def submit_move(self, source: Square | str, destination: Square | str) -> MoveResult:
        try:
            from_sq = to_square(source)
            to_sq = to_square(destination)
        except MalformedSquareError as exc:
            return self._reject(MoveErrorKind.MALFORMED_SQUARE, str(exc))

        if self._phase == GamePhase.FINISHED:
            return self._reject(MoveErrorKind.GAME_OVER, "game is over")
        if self._phase == GamePhase.AWAITING_PROMOTION:
            return self._reject(
                MoveErrorKind.PROMOTION_REQUIRED, "choose a promotion piece first"
            )
        if self._phase != GamePhase.RUNNING:
            return self._reject(MoveErrorKind.ILLEGAL_MOVE, "game has not started")

        mover = self._side_to_move
        piece = self._position.board[from_sq]
        if piece is None:
            return self._reject(
                MoveErrorKind.ILLEGAL_MOVE, f"no piece on {square_name(from_sq)}"
            )
        if piece.color != mover:
            return self._reject(
                MoveErrorKind.ILLEGAL_MOVE, f"it is {mover}'s turn"
            )

        move = next(
            (
                m
                for m in Rules.legal_moves_from(self._position, from_sq)
                if m.to_sq == to_sq
            ),
            None,
        )
        if move is None:
            return self._reject(
                MoveErrorKind.ILLEGAL_MOVE,
                f"{piece} cannot move {square_name(from_sq)}-{square_name(to_sq)}",
            )

        record = self._position.apply(move)
        self._history.append(record)
        _LOGGER.debug("Committed %s", record)

        opponent = mover.opposite
        if record.captured == Piece(opponent, PieceType.KING):
            self._finish(GameResult.win_for(mover), GameEndReason.KING_CAPTURED)
            return self._outcome(record, record.changed_squares, record.captured)

        if PromotionHandler.is_promotion(piece, to_sq):
            self._promotion.begin(to_sq, mover)
            self._phase = GamePhase.AWAITING_PROMOTION
            _LOGGER.debug("%s pawn on %s awaits promotion", mover, square_name(to_sq))
            return self._outcome(record, record.changed_squares, record.captured)

        self._conclude_turn(mover)
        return self._outcome(record, record.changed_squares, record.captured)

    def submit_promotion(self, kind: PieceType | str) -> MoveResult:
        if self._phase == GamePhase.FINISHED:
            return self._reject(MoveErrorKind.GAME_OVER, "game is over")
        if self._phase != GamePhase.AWAITING_PROMOTION:
            return self._reject(
                MoveErrorKind.INVALID_PROMOTION_CHOICE, "no promotion is pending"
            )
        try:
            piece_type = parse_piece_type(kind)
        except InvalidNotationError as exc:
            return self._reject(MoveErrorKind.INVALID_PROMOTION_CHOICE, str(exc))
        if not PromotionHandler.is_valid_choice(piece_type):
            return self._reject(
                MoveErrorKind.INVALID_PROMOTION_CHOICE,
                f"cannot promote to {piece_type}",
            )

        square = self._promotion.square
        assert square is not None
        promoted = self._promotion.complete(self._position.board, piece_type)
        _LOGGER.debug("Promoted on %s to %s", square_name(square), piece_type)

        self._conclude_turn(self._side_to_move)
        return self._outcome(None, (square,), None, promoted)

    def end(self) -> GameResult | MoveError:
        """Stop the game; the side ahead on material wins, level is a draw."""
        if self._phase == GamePhase.FINISHED:
            return self._reject(MoveErrorKind.GAME_OVER, "game is over")
        if self._phase == GamePhase.READY:
            return self._reject(MoveErrorKind.ILLEGAL_MOVE, "game has not started")
        self._promotion = PromotionHandler()
        leader = self.score().leader
        result = GameResult.DRAW if leader is None else GameResult.win_for(leader)
        self._finish(result, GameEndReason.ENDED)
        return result

    # ── Snapshot ─────────────────────────────────────────────────────────

    def snapshot(self) -> GameSnapshot:
        castling = self._position.castling
        return GameSnapshot(
            board=tuple(self._position.board.occupied()),
            side_to_move=self._side_to_move,
            castling=(castling.rights(Color.WHITE), castling.rights(Color.BLACK)),
            en_passant=self._position.en_passant.target,
            phase=self._phase,
            result=self._result,
            end_reason=self._end_reason,
            pending_promotion=self._promotion.square,
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _conclude_turn(self, mover: Color) -> None:
        """Hand the turn over unless the opponent is mated or stalemated."""
        opponent = mover.opposite
        if Rules.is_checkmate(self._position, opponent):
            self._finish(GameResult.win_for(mover), GameEndReason.CHECKMATE)
        elif Rules.is_stalemate(self._position, opponent):
            self._finish(GameResult.DRAW, GameEndReason.STALEMATE)
        else:
            self._phase = GamePhase.RUNNING
            self._side_to_move = opponent

    def _finish(self, result: GameResult, reason: GameEndReason) -> None:
        self._phase = GamePhase.FINISHED
        self._result = result
        self._end_reason = reason
        _LOGGER.info("Game finished: %s (%s)", result.name, reason)

    def _outcome(
        self,
        record: MoveRecord | None,
        changed: tuple[Square, ...],
        captured: Piece | None,
        promoted_to: Piece | None = None,
    ) -> MoveOutcome:
        checkmate = self._end_reason == GameEndReason.CHECKMATE
        stalemate = self._end_reason == GameEndReason.STALEMATE
        check = checkmate
        if self._end_reason is None:
            # Awaiting promotion: the turn has not passed yet.
            checked = (
                self._side_to_move.opposite
                if self._phase == GamePhase.AWAITING_PROMOTION
                else self._side_to_move
            )
            check = Rules.is_in_check(self._position, checked)
        return MoveOutcome(
            record=record,
            changed_squares=changed,
            captured=captured,
            promoted_to=promoted_to,
            check=check,
            checkmate=checkmate,
            stalemate=stalemate,
            phase=self._phase,
            result=self._result,
            side_to_move=self._side_to_move,
        )

    def _reject(self, kind: MoveErrorKind, message: str) -> MoveError:
        _LOGGER.debug("Rejected (%s): %s", kind, message)
        return MoveError(kind, message)

    def _check_invariants(self) -> None:
        if (self._phase == GamePhase.AWAITING_PROMOTION) != self._promotion.pending:
            raise CorruptStateError(
                "Pending promotion must exist exactly while awaiting promotion"
            )
        if self._phase in (GamePhase.RUNNING, GamePhase.AWAITING_PROMOTION):
            for color in Color:
                self._position.board.king_square(color)
        if (self._phase == GamePhase.FINISHED) != (
            self._result != GameResult.IN_PROGRESS
        ):
            raise CorruptStateError("Only a finished game carries a result")
