"""FEN parsing and serialization."""

from __future__ import annotations

from chesscore.core.board import Board
from chesscore.core.castling import CastlingRights, CastlingTracker
from chesscore.core.en_passant import EnPassantTracker
from chesscore.core.enums import Color
from chesscore.core.piece import Piece
from chesscore.core.position import Position
from chesscore.core.types import Square, make_square, parse_square, rank_of, square_name
from chesscore.errors import InvalidNotationError, MalformedSquareError

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def position_from_fen(fen: str) -> tuple[Position, Color]:
    """Parse a FEN string into a :class:`Position` and the side to move.

    Halfmove and fullmove counters are accepted but not tracked.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise InvalidNotationError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]
    board = _parse_placement(placement, fen)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InvalidNotationError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = _parse_castling(castling_part)

    # 4. En passant
    en_passant = EnPassantTracker()
    if ep_part != "-":
        try:
            ep: Square = parse_square(ep_part)
        except MalformedSquareError as exc:
            raise InvalidNotationError(str(exc)) from None
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_ep_rank:
            raise InvalidNotationError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        en_passant = EnPassantTracker(ep, side.opposite)

    return Position(board, castling, en_passant), side


def position_to_fen(position: Position, side_to_move: Color = Color.WHITE) -> str:
    """Serialise a :class:`Position` to FEN (counters are written as ``0 1``)."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = position.board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if side_to_move == Color.WHITE else "b"

    castling_str = ""
    for color, (king_char, queen_char) in ((Color.WHITE, "KQ"), (Color.BLACK, "kq")):
        rights = position.castling.rights(color)
        if rights.allows(kingside=True):
            castling_str += king_char
        if rights.allows(kingside=False):
            castling_str += queen_char
    castling_str = castling_str or "-"

    target = position.en_passant.target
    ep_str = square_name(target) if target is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 1"


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidNotationError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise InvalidNotationError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise InvalidNotationError(f"Invalid FEN rank width: {fen!r}")
                board.place(make_square(file, rank), Piece.from_char(ch))
                file += 1
            if file > 8:
                raise InvalidNotationError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise InvalidNotationError(f"Invalid FEN rank width: {fen!r}")
    return board


def _parse_castling(castling_part: str) -> CastlingTracker:
    """Map FEN availability letters onto "has moved" flags.

    A side with no letters is treated as having moved its king.
    """
    if castling_part == "-":
        castling_part = ""
    elif len(set(castling_part)) != len(castling_part) or any(
        ch not in "KQkq" for ch in castling_part
    ):
        raise InvalidNotationError(f"Invalid FEN castling field: {castling_part!r}")

    rights: dict[Color, CastlingRights] = {}
    for color, (king_char, queen_char) in ((Color.WHITE, "KQ"), (Color.BLACK, "kq")):
        kingside = king_char in castling_part
        queenside = queen_char in castling_part
        if not (kingside or queenside):
            rights[color] = CastlingRights.lost()
        else:
            rights[color] = CastlingRights(
                king_moved=False,
                rook_a_moved=not queenside,
                rook_h_moved=not kingside,
            )
    return CastlingTracker(rights)
