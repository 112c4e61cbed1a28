"""Core domain layer: chess rules with zero external dependencies.

Quick start::

    from chessmate.core import Board, Color

    board = Board.new_standard()
    pawn = board["e2"]
    for square, move in pawn.legal_moves(board).items():
        print(square, move)
    board.in_mate(Color.WHITE)
"""

from chessmate.core.board import BACK_RANK, Board
from chessmate.core.coordinate import BOARD_SIZE, OFF_BOARD, Coordinate
from chessmate.core.enums import Color, GameResult, PieceKind
from chessmate.core.errors import InvalidOperationError
from chessmate.core.moves import (
    DEFAULT_PROMOTION,
    CaptureAndPromote,
    CapturingMove,
    CastlingMove,
    ComplexMove,
    EnPassantCapture,
    EnPassantIndicate,
    EnPassantMove,
    Move,
    MoveAndPromote,
    PromotingMove,
    SimpleMove,
    StandardMove,
)
from chessmate.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessmate.core.pieces import (
    Bishop,
    King,
    Knight,
    Pawn,
    Piece,
    Queen,
    Rook,
    make_piece,
)
from chessmate.core.rules import Rules
from chessmate.core.serialization import (
    PieceRecord,
    board_from_records,
    board_to_records,
    piece_to_record,
)

__all__ = [
    # Enums / errors
    "Color",
    "GameResult",
    "InvalidOperationError",
    "PieceKind",
    # Coordinates
    "BOARD_SIZE",
    "OFF_BOARD",
    "Coordinate",
    # Pieces
    "Bishop",
    "King",
    "Knight",
    "Pawn",
    "Piece",
    "Queen",
    "Rook",
    "make_piece",
    # Moves
    "DEFAULT_PROMOTION",
    "CaptureAndPromote",
    "CapturingMove",
    "CastlingMove",
    "ComplexMove",
    "EnPassantCapture",
    "EnPassantIndicate",
    "EnPassantMove",
    "Move",
    "MoveAndPromote",
    "PromotingMove",
    "SimpleMove",
    "StandardMove",
    # Board / rules
    "BACK_RANK",
    "Board",
    "Rules",
    # Notation / records
    "STARTING_PLACEMENT",
    "PieceRecord",
    "board_from_placement",
    "board_from_records",
    "board_to_placement",
    "board_to_records",
    "piece_to_record",
]
