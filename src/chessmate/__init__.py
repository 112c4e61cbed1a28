"""chessmate: a two-player chess rules engine."""

from chessmate.core import Board, Color, Coordinate, PieceKind, Rules

__all__ = ["Board", "Color", "Coordinate", "PieceKind", "Rules"]

__version__ = "0.1.0"
