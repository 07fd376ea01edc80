"""Tests for square names, pieces and FEN."""

import pytest

from chesscore.core.enums import Color, PieceType
from chesscore.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chesscore.core.piece import Piece, parse_piece_type
from chesscore.core.types import A1, D6, E4, H8, parse_square, square_name, to_square
from chesscore.errors import InvalidNotationError, MalformedSquareError


class TestSquares:
    def test_names(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"
        assert square_name(E4) == "e4"

    def test_parse(self) -> None:
        assert parse_square("e4") == E4
        assert parse_square("h8") == H8

    @pytest.mark.parametrize("name", ["i1", "a9", "a0", "e", "e44", "E4", ""])
    def test_malformed(self, name: str) -> None:
        with pytest.raises(MalformedSquareError):
            parse_square(name)

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_square("z9")

    def test_to_square_accepts_index_or_name(self) -> None:
        assert to_square(28) == to_square("e4") == E4

    @pytest.mark.parametrize("value", [-1, 64, True, 3.0])
    def test_to_square_rejects(self, value: object) -> None:
        with pytest.raises(MalformedSquareError):
            to_square(value)  # type: ignore[arg-type]


class TestPiece:
    def test_fen_chars(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_bad_char(self) -> None:
        with pytest.raises(InvalidNotationError):
            Piece.from_char("x")

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("queen", PieceType.QUEEN), ("N", PieceType.KNIGHT), (" Rook ", PieceType.ROOK)],
    )
    def test_parse_piece_type(self, text: str, expected: PieceType) -> None:
        assert parse_piece_type(text) == expected

    def test_parse_piece_type_rejects(self) -> None:
        with pytest.raises(InvalidNotationError):
            parse_piece_type("dragon")


class TestFen:
    def test_starting_round_trip(self) -> None:
        pos, side = position_from_fen(STARTING_FEN)
        assert side == Color.WHITE
        assert position_to_fen(pos, side) == STARTING_FEN

    def test_partial_castling(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R b Kq - 0 1"
        pos, side = position_from_fen(fen)
        white = pos.castling.rights(Color.WHITE)
        black = pos.castling.rights(Color.BLACK)
        assert white.allows(kingside=True) and not white.allows(kingside=False)
        assert black.allows(kingside=False) and not black.allows(kingside=True)
        assert position_to_fen(pos, side) == fen

    def test_no_castling_marks_king_moved(self) -> None:
        pos, _ = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert pos.castling.rights(Color.WHITE).king_moved
        assert pos.castling.rights(Color.BLACK).king_moved

    def test_en_passant_target(self) -> None:
        pos, _ = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        assert pos.en_passant.target == D6
        assert pos.en_passant.owner == Color.BLACK

    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/8/8/8/8/8 w - - 0 1",
            "9/8/8/8/8/8/8/8 w - - 0 1",
            "8/8/8/8/8/8/8/8 x - - 0 1",
            "8/8/8/8/8/8/8/8 w KK - 0 1",
            "8/8/8/8/8/8/8/8 w - e4 0 1",
            "8/8/8/8/8/8/8/8 w - d3 0 1",
            "8/8/8/8/8/8/8/8",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(InvalidNotationError):
            position_from_fen(fen)
