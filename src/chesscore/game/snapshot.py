"""Serializable game snapshot and its JSON-friendly dict form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chesscore.core.castling import CastlingRights
from chesscore.core.enums import Color, GameEndReason, GamePhase, GameResult
from chesscore.core.piece import Piece
from chesscore.core.types import Square, parse_square, square_name
from chesscore.errors import ChessError, InvalidNotationError


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Everything needed to rebuild a game with identical future behaviour.

    ``pending_promotion`` is set only while ``phase`` is
    :attr:`GamePhase.AWAITING_PROMOTION`; the promoting side is
    ``side_to_move``.
    """

    board: tuple[tuple[Square, Piece], ...]
    side_to_move: Color
    castling: tuple[CastlingRights, CastlingRights]  # indexed by Color
    en_passant: Square | None
    phase: GamePhase
    result: GameResult = GameResult.IN_PROGRESS
    end_reason: GameEndReason | None = None
    pending_promotion: Square | None = None

    def castling_rights(self, color: Color) -> CastlingRights:
        return self.castling[int(color)]


_RIGHTS_FIELDS = ("king_moved", "rook_a_moved", "rook_h_moved")


def snapshot_to_dict(snapshot: GameSnapshot) -> dict[str, Any]:
    """Plain-data form: square names, FEN piece letters, lowercase enum names."""
    return {
        "board": {square_name(sq): str(piece) for sq, piece in snapshot.board},
        "side_to_move": str(snapshot.side_to_move),
        "castling": {
            str(color): {
                name: getattr(snapshot.castling_rights(color), name)
                for name in _RIGHTS_FIELDS
            }
            for color in Color
        },
        "en_passant": _name_or_none(snapshot.en_passant),
        "phase": snapshot.phase.name.lower(),
        "result": snapshot.result.name.lower(),
        "end_reason": (
            str(snapshot.end_reason) if snapshot.end_reason is not None else None
        ),
        "pending_promotion": _name_or_none(snapshot.pending_promotion),
    }


def snapshot_from_dict(data: dict[str, Any]) -> GameSnapshot:
    """Inverse of :func:`snapshot_to_dict`."""
    try:
        board = tuple(
            sorted(
                (parse_square(name), Piece.from_char(char))
                for name, char in data["board"].items()
            )
        )
        castling = tuple(
            CastlingRights(**{f: bool(data["castling"][str(c)][f]) for f in _RIGHTS_FIELDS})
            for c in Color
        )
        end_reason = data.get("end_reason")
        return GameSnapshot(
            board=board,
            side_to_move=Color[data["side_to_move"].upper()],
            castling=(castling[0], castling[1]),
            en_passant=_square_or_none(data.get("en_passant")),
            phase=GamePhase[data["phase"].upper()],
            result=GameResult[data.get("result", "in_progress").upper()],
            end_reason=GameEndReason(end_reason) if end_reason is not None else None,
            pending_promotion=_square_or_none(data.get("pending_promotion")),
        )
    except ChessError as exc:
        raise InvalidNotationError(f"Invalid snapshot: {exc}") from exc
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise InvalidNotationError(f"Invalid snapshot: {exc!r}") from exc


def _name_or_none(sq: Square | None) -> str | None:
    return square_name(sq) if sq is not None else None


def _square_or_none(name: str | None) -> Square | None:
    return parse_square(name) if name is not None else None
