"""High-level chess rules: legal move listing, checkmate and stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmate.core.enums import Color, GameResult

if TYPE_CHECKING:
    from chessmate.core.board import Board
    from chessmate.core.moves import Move


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def legal_moves(board: Board, color: Color) -> list[Move]:
        """Every legal move available to *color*."""
        legal: list[Move] = []
        for piece in board.pieces(color):
            legal.extend(piece.legal_moves(board).values())
        return legal

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return board.in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        return board.in_check(color) and board.in_mate(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        return not board.in_check(color) and board.in_mate(color)

    @staticmethod
    def game_result(board: Board, to_move: Color) -> GameResult:
        """Determine the result with *to_move* about to play."""
        if not board.in_mate(to_move):
            return GameResult.IN_PROGRESS
        if board.in_check(to_move):
            return (
                GameResult.BLACK_WINS
                if to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
