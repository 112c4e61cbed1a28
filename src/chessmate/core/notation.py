"""FEN piece-placement parsing and serialisation.

Only the first FEN field is handled; side to move, castling and en-passant
state live on the pieces themselves (move counters and pawn flags).
"""

from __future__ import annotations

from chessmate.core.board import Board
from chessmate.core.coordinate import BOARD_SIZE, Coordinate
from chessmate.core.enums import Color, PieceKind

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

# FEN character -> (Color, PieceKind)
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.WHITE, PieceKind.PAWN),
    "N": (Color.WHITE, PieceKind.KNIGHT),
    "B": (Color.WHITE, PieceKind.BISHOP),
    "R": (Color.WHITE, PieceKind.ROOK),
    "Q": (Color.WHITE, PieceKind.QUEEN),
    "K": (Color.WHITE, PieceKind.KING),
    "p": (Color.BLACK, PieceKind.PAWN),
    "n": (Color.BLACK, PieceKind.KNIGHT),
    "b": (Color.BLACK, PieceKind.BISHOP),
    "r": (Color.BLACK, PieceKind.ROOK),
    "q": (Color.BLACK, PieceKind.QUEEN),
    "k": (Color.BLACK, PieceKind.KING),
}


def board_from_placement(placement: str) -> Board:
    """Build a :class:`Board` from a FEN placement field.

    Pawns away from their starting rank are marked as having moved so they
    do not get a double step.
    """
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    board = Board.new_blank()
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
                continue
            if file >= BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
            try:
                color, kind = _CHAR_MAP[ch]
            except KeyError:
                raise ValueError(f"Invalid piece character: {ch!r}") from None
            piece = board.create(kind, color, Coordinate(file, rank))
            if kind is PieceKind.PAWN and rank != color.home_rank + color.forward:
                piece.move_count = 1
            file += 1
        if file != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise the board's occupancy to a FEN placement field."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            piece = board[Coordinate(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece.symbol
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
