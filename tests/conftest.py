"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesscore.core.notation import position_from_fen
from chesscore.core.position import Position
from chesscore.game.state_machine import GameStateMachine

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


@pytest.fixture
def game() -> GameStateMachine:
    """A started game from the standard setup."""
    g = GameStateMachine()
    g.start()
    return g


@pytest.fixture
def kiwipete() -> Position:
    pos, _side = position_from_fen(KIWIPETE)
    return pos
