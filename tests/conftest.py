"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessmate.core.board import Board
from chessmate.core.enums import Color, PieceKind
from chessmate.core.pieces import Piece

Put = Callable[[PieceKind, Color, str], Piece]


@pytest.fixture
def board() -> Board:
    """An empty board."""
    return Board.new_blank()


@pytest.fixture
def standard_board() -> Board:
    return Board.new_standard()


@pytest.fixture
def put(board: Board) -> Put:
    """Place a new piece on the ``board`` fixture by square name."""

    def _put(kind: PieceKind, color: Color, square: str) -> Piece:
        return board.create(kind, color, square)

    return _put
