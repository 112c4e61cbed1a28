"""Board - piece placement, rosters and check detection."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from chessmate.core.coordinate import BOARD_SIZE, Coordinate, coerce
from chessmate.core.enums import Color, PieceKind
from chessmate.core.errors import InvalidOperationError
from chessmate.core.pieces import Piece, Rook, make_piece

_LOGGER = logging.getLogger(__name__)

_COLOR_COUNT = 2

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 grid with per-color rosters and king references.

    The grid and the rosters hold the same :class:`Piece` objects. Captured
    pieces leave both and are kept in a separate list so moves can restore
    them and serialization can report them.
    """

    __slots__ = ("_grid", "_rosters", "_kings", "_captured", "_probing")

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # [color] -> live pieces of that color.
        self._rosters: list[list[Piece]] = [[] for _ in range(_COLOR_COUNT)]
        # [color] -> king, set once.
        self._kings: list[Piece | None] = [None] * _COLOR_COUNT
        self._captured: list[Piece] = []
        self._probing = 0

    # -- Factory ------------------------------------------------------------

    @classmethod
    def new_blank(cls) -> Board:
        return cls()

    @classmethod
    def new_standard(cls) -> Board:
        """Standard 32-piece starting position."""
        b = cls()
        for file, kind in enumerate(BACK_RANK):
            b.create(kind, Color.WHITE, Coordinate(file, 0))
            b.create(kind, Color.BLACK, Coordinate(file, 7))
        for file in range(BOARD_SIZE):
            b.create(PieceKind.PAWN, Color.WHITE, Coordinate(file, 1))
            b.create(PieceKind.PAWN, Color.BLACK, Coordinate(file, 6))
        return b

    def create_piece(self, kind: PieceKind, color: Color) -> Piece:
        """Make a piece for this board without placing it."""
        return make_piece(kind, color)

    def create(
        self, kind: PieceKind, color: Color, position: Coordinate | str
    ) -> Piece:
        """Make a piece and place it on *position*."""
        piece = self.create_piece(kind, color)
        self.place(position, piece)
        return piece

    # -- Element access -----------------------------------------------------

    def __getitem__(self, position: Coordinate | str) -> Piece | None:
        return self.occupant_at(position)

    def __setitem__(self, position: Coordinate | str, piece: Piece | None) -> None:
        """Raw grid write used by moves; rosters are left untouched."""
        coord = self._checked(position)
        self._grid[coord.rank][coord.file] = piece
        if piece is not None:
            piece.position = coord

    def occupant_at(self, position: Coordinate | str) -> Piece | None:
        coord = self._checked(position)
        return self._grid[coord.rank][coord.file]

    def is_empty(self, position: Coordinate | str) -> bool:
        return self.occupant_at(position) is None

    @staticmethod
    def _checked(position: Coordinate | str) -> Coordinate:
        coord = coerce(position)
        if not coord.valid():
            raise IndexError(f"Position is out of bounds: {coord!r}")
        return coord

    # -- Rosters ------------------------------------------------------------

    def pieces(self, color: Color) -> list[Piece]:
        """Live pieces of *color*."""
        return list(self._rosters[color])

    def all_pieces(self) -> list[Piece]:
        return self.pieces(Color.WHITE) + self.pieces(Color.BLACK)

    def captured_pieces(self) -> list[Piece]:
        return list(self._captured)

    def king(self, color: Color) -> Piece:
        king = self._kings[color]
        if king is None:
            raise InvalidOperationError(f"No {color} king on board")
        return king

    def king_position(self, color: Color) -> Coordinate:
        return self.king(color).position

    # -- Mutation -----------------------------------------------------------

    def place(self, position: Coordinate | str, piece: Piece) -> None:
        """Register *piece* in its roster and put it on *position*."""
        coord = self._checked(position)
        if self._grid[coord.rank][coord.file] is not None:
            raise InvalidOperationError(f"Cannot place on {coord}: square is occupied")
        roster = self._rosters[piece.color]
        if piece in roster:
            raise InvalidOperationError(f"{piece!r} is already on the board")
        if piece.kind is PieceKind.KING:
            current = self._kings[piece.color]
            if current is not None and current is not piece:
                raise InvalidOperationError(f"Cannot create a second {piece.color} king")
            self._kings[piece.color] = piece

        if piece in self._captured:
            self._captured.remove(piece)
        piece.captured = False
        self[coord] = piece
        roster.append(piece)
        _LOGGER.debug("Placed %r", piece)

    def remove(self, position: Coordinate | str) -> Piece:
        """Capture the piece on *position* and return it."""
        piece = self.occupant_at(position)
        if piece is None:
            raise InvalidOperationError(f"No piece to remove at {coerce(position)}")
        self.capture(piece)
        _LOGGER.debug("Removed %r", piece)
        return piece

    def capture(self, piece: Piece) -> None:
        """Mark *piece* captured and take it off the grid and its roster."""
        if piece.kind is PieceKind.KING:
            raise InvalidOperationError("Cannot capture a king")
        self.detach(piece)
        piece.captured = True
        self._captured.append(piece)

    def restore(self, piece: Piece) -> None:
        """Undo :meth:`capture`, returning *piece* to its last square."""
        self.place(piece.position, piece)

    def detach(self, piece: Piece) -> None:
        """Take a live piece off the grid and its roster without capturing it."""
        self._rosters[piece.color].remove(piece)
        coord = piece.position
        if self._grid[coord.rank][coord.file] is piece:
            self._grid[coord.rank][coord.file] = None

    def reset_en_passant(self, color: Color) -> None:
        """Clear the en-passant flag of every pawn of *color*.

        Called at the start of *color*'s turn: a double step may only be
        answered on the very next opponent move.
        """
        for piece in self._rosters[color]:
            if piece.kind is PieceKind.PAWN:
                piece.en_passant_capturable = False

    # -- Attack detection ---------------------------------------------------

    @property
    def probing(self) -> bool:
        """True while an attack probe has a decoy on the board."""
        return self._probing > 0

    @contextmanager
    def _decoy_at(self, position: Coordinate, color: Color) -> Iterator[None]:
        """Temporarily put a fabricated *color* piece on *position*.

        The decoy belongs to no roster. Sliding pieces stop on it and capture
        logic treats it as an enemy, so empty and occupied squares are probed
        the same way.
        """
        original = self._grid[position.rank][position.file]
        decoy = Rook(color, position)
        self._grid[position.rank][position.file] = decoy
        self._probing += 1
        try:
            yield
        finally:
            self._probing -= 1
            self._grid[position.rank][position.file] = original

    def attackers(self, color: Color, position: Coordinate | str) -> set[Piece]:
        """Pieces of *color* that can move to *position*, empty or not."""
        coord = self._checked(position)
        square = coord.to_algebraic()
        with self._decoy_at(coord, color.opposite):
            return {
                piece
                for piece in list(self._rosters[color])
                if square in piece.enumerate_moves(self)
            }

    def attacked(self, color: Color, position: Coordinate | str) -> bool:
        """Whether any piece of *color* can move to *position*."""
        coord = self._checked(position)
        square = coord.to_algebraic()
        with self._decoy_at(coord, color.opposite):
            return any(
                square in piece.enumerate_moves(self)
                for piece in list(self._rosters[color])
            )

    def in_check(self, color: Color) -> bool:
        return self.attacked(color.opposite, self.king_position(color))

    def checking_pieces(self, color: Color) -> set[Piece]:
        """Enemy pieces currently attacking *color*'s king."""
        return self.attackers(color.opposite, self.king_position(color))

    def in_mate(self, color: Color) -> bool:
        """Whether *color* has no legal move (checkmate or stalemate)."""
        for piece in list(self._rosters[color]):
            if any(move.is_legal() for move in piece.enumerate_moves(self).values()):
                return False
        _LOGGER.debug("%s has no legal moves", color)
        return True

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._grid[rank][file]
                row.append(p.symbol if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
