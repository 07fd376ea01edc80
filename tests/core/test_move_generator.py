"""Move generation: per-piece geometry, special moves and perft counts.

Perft reference values: https://www.chessprogramming.org/Perft_Results
(the positions and depths below contain no promotions, which this engine
resolves as a separate step rather than as four distinct moves).
"""

import pytest

from chesscore.core.enums import Color, MoveFlag
from chesscore.core.check import CheckDetector
from chesscore.core.move_generator import MoveGenerator
from chesscore.core.notation import STARTING_FEN, position_from_fen
from chesscore.core.position import Position
from chesscore.core.rules import Rules
from chesscore.core.types import parse_square


def perft(position: Position, color: Color, depth: int) -> int:
    """Count leaf nodes at *depth*, applying moves to copies."""
    if depth == 0:
        return 1
    nodes = 0
    for move in Rules.legal_moves(position, color):
        child = position.copy()
        child.apply(move)
        nodes += perft(child, color.opposite, depth - 1)
    return nodes


def targets(fen: str, square: str) -> set[str]:
    pos, _ = position_from_fen(fen)
    gen = MoveGenerator(pos)
    return {
        "abcdefgh"[sq & 7] + str((sq >> 3) + 1)
        for sq in gen.candidate_targets(parse_square(square))
    }


# ── Starting position ────────────────────────────────────────────────────────


class TestPerftStarting:
    def test_depth_1(self) -> None:
        pos, side = position_from_fen(STARTING_FEN)
        assert perft(pos, side, 1) == 20

    def test_depth_2(self) -> None:
        pos, side = position_from_fen(STARTING_FEN)
        assert perft(pos, side, 2) == 400

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        pos, side = position_from_fen(STARTING_FEN)
        assert perft(pos, side, 3) == 8_902


# ── Kiwipete (castling, en passant, pins) ────────────────────────────────────

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestPerftKiwipete:
    def test_depth_1(self) -> None:
        pos, side = position_from_fen(KIWIPETE)
        assert perft(pos, side, 1) == 48

    @pytest.mark.slow
    def test_depth_2(self) -> None:
        pos, side = position_from_fen(KIWIPETE)
        assert perft(pos, side, 2) == 2_039


# ── Position 3: en-passant discovered-check edge cases ──────────────────────

POS3 = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1"


class TestPerftPos3:
    def test_depth_1(self) -> None:
        pos, side = position_from_fen(POS3)
        assert perft(pos, side, 1) == 14

    def test_depth_2(self) -> None:
        pos, side = position_from_fen(POS3)
        assert perft(pos, side, 2) == 191

    @pytest.mark.slow
    def test_depth_3(self) -> None:
        pos, side = position_from_fen(POS3)
        assert perft(pos, side, 3) == 2_812


# ── Piece geometry ───────────────────────────────────────────────────────────


class TestPieceGeometry:
    def test_empty_square_has_no_moves(self) -> None:
        assert targets(STARTING_FEN, "e4") == set()

    def test_knight_from_corner(self) -> None:
        assert targets("4k3/8/8/8/8/8/8/N3K3 w - - 0 1", "a1") == {"b3", "c2"}

    def test_knight_skips_own_pieces(self) -> None:
        assert targets(STARTING_FEN, "g1") == {"f3", "h3"}

    def test_rook_stops_before_own_and_on_enemy(self) -> None:
        fen = "4k3/8/8/8/p2R1P2/8/8/4K3 w - - 0 1"
        assert targets(fen, "d4") == {
            "a4", "b4", "c4", "e4",
            "d1", "d2", "d3", "d5", "d6", "d7", "d8",
        }

    def test_bishop_blocked(self) -> None:
        assert targets(STARTING_FEN, "c1") == set()

    def test_queen_combines_lines(self) -> None:
        fen = "4k3/8/8/8/3Q4/8/8/4K3 w - - 0 1"
        assert len(targets(fen, "d4")) == 27

    def test_king_steps(self) -> None:
        assert targets("4k3/8/8/8/8/8/8/K7 w - - 0 1", "a1") == {"a2", "b1", "b2"}

    def test_never_contains_source(self) -> None:
        pos, side = position_from_fen(KIWIPETE)
        gen = MoveGenerator(pos)
        for sq, _piece in pos.board.all_pieces_of(side):
            assert sq not in gen.candidate_targets(sq)


class TestPawnMoves:
    def test_single_and_double_step(self) -> None:
        assert targets(STARTING_FEN, "e2") == {"e3", "e4"}
        assert targets(STARTING_FEN, "d7") == {"d6", "d5"}

    def test_double_step_only_from_start_rank(self) -> None:
        assert targets("4k3/8/8/8/8/4P3/8/4K3 w - - 0 1", "e3") == {"e4"}

    def test_double_step_blocked_by_intermediate(self) -> None:
        assert targets("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1", "e2") == set()

    def test_double_step_blocked_by_destination(self) -> None:
        assert targets("4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1", "e2") == {"e3"}

    def test_diagonal_only_onto_enemy(self) -> None:
        fen = "4k3/8/8/8/8/3p1P2/4P3/4K3 w - - 0 1"
        assert targets(fen, "e2") == {"e3", "e4", "d3"}

    def test_en_passant_offered_to_enemy_only(self) -> None:
        fen = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"
        pos, _ = position_from_fen(fen)
        moves = MoveGenerator(pos).candidate_moves(parse_square("e5"))
        ep = [m for m in moves if m.flag == MoveFlag.EN_PASSANT]
        assert [str(m) for m in ep] == ["e5d6"]

    def test_promotion_flag(self) -> None:
        pos, _ = position_from_fen("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        moves = MoveGenerator(pos).candidate_moves(parse_square("a7"))
        assert [(str(m), m.flag) for m in moves] == [("a7a8", MoveFlag.PROMOTION)]


class TestLegalFilter:
    def test_pinned_piece_cannot_leave_line(self) -> None:
        # White bishop on e2 pinned by the rook on e8.
        pos, _ = position_from_fen("4r1k1/8/8/8/8/8/4B3/4K3 w - - 0 1")
        assert Rules.legal_targets(pos, parse_square("e2")) == set()

    def test_no_legal_move_leaves_mover_in_check(self, kiwipete: Position) -> None:
        for color in Color:
            for move in Rules.legal_moves(kiwipete, color):
                board = kiwipete.simulate(move)
                assert not CheckDetector.is_in_check(board, color), str(move)

    def test_simulate_leaves_live_board_untouched(self, kiwipete: Position) -> None:
        before = kiwipete.copy()
        for move in Rules.legal_moves(kiwipete, Color.WHITE):
            kiwipete.simulate(move)
        assert kiwipete == before
