"""Piece records for persistence layers.

A board serializes to a flat list of records, one per piece, live pieces of
both colors first and captured ones after::

    {"kind": "pawn", "color": "white", "position": "e4",
     "move_count": 1, "captured": False, "en_passant_capturable": True}

Only pawns carry ``en_passant_capturable``. Mapping the records to JSON or any
other encoding is left to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NotRequired, TypedDict

from chessmate.core.board import Board
from chessmate.core.coordinate import Coordinate
from chessmate.core.enums import Color, PieceKind
from chessmate.core.pieces import Pawn, Piece

_LOGGER = logging.getLogger(__name__)


class PieceRecord(TypedDict):
    kind: str
    color: str
    position: str
    move_count: int
    captured: bool
    en_passant_capturable: NotRequired[bool]


def piece_to_record(piece: Piece) -> PieceRecord:
    record: PieceRecord = {
        "kind": str(piece.kind),
        "color": str(piece.color),
        "position": piece.position.to_algebraic(),
        "move_count": piece.move_count,
        "captured": piece.captured,
    }
    if isinstance(piece, Pawn):
        record["en_passant_capturable"] = piece.en_passant_capturable
    return record


def board_to_records(board: Board) -> list[PieceRecord]:
    """Serialize every piece, captured ones included."""
    return [
        piece_to_record(piece)
        for piece in board.all_pieces() + board.captured_pieces()
    ]


def board_from_records(records: Iterable[PieceRecord]) -> Board:
    """Rebuild a board from :func:`board_to_records` output.

    Captured pieces are placed and removed before live pieces go down, since
    a captured piece's last square is usually held by its captor.
    """
    records = list(records)
    board = Board.new_blank()
    ordered = sorted(records, key=lambda r: not r["captured"])
    for record in ordered:
        kind = PieceKind.from_token(record["kind"])
        color = Color.from_token(record["color"])
        position = Coordinate.from_algebraic(record["position"])

        piece = board.create(kind, color, position)
        piece.move_count = int(record["move_count"])
        if isinstance(piece, Pawn):
            piece.en_passant_capturable = bool(
                record.get("en_passant_capturable", False)
            )
        if record["captured"]:
            board.remove(position)

    _LOGGER.debug("Rebuilt board from %d records", len(records))
    return board
