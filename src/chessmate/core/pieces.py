"""Piece hierarchy and per-piece move enumeration."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from chessmate.core.coordinate import OFF_BOARD, Coordinate
from chessmate.core.enums import Color, PieceKind
from chessmate.core.moves import (
    CaptureAndPromote,
    CapturingMove,
    CastlingMove,
    EnPassantCapture,
    EnPassantMove,
    Move,
    MoveAndPromote,
    StandardMove,
)

if TYPE_CHECKING:
    from chessmate.core.board import Board

Offsets = tuple[tuple[int, int], ...]

KNIGHT_OFFSETS: Offsets = (
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
)
KING_OFFSETS: Offsets = (
    (0, 1),
    (-1, 0),
    (1, 0),
    (0, -1),
    (-1, 1),
    (1, 1),
    (-1, -1),
    (1, -1),
)
ROOK_DIRS: Offsets = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: Offsets = ((1, 1), (-1, 1), (-1, -1), (1, -1))
QUEEN_DIRS: Offsets = ROOK_DIRS + BISHOP_DIRS

# King squares that must be safe while castling: its own and the two it crosses.
_CASTLING_PATH_LENGTH = 3


class Piece:
    """Mutable piece identity: color, square, move counter, capture flag.

    Equality is identity; two pawns of the same color are different pieces.
    """

    kind: ClassVar[PieceKind]
    letter: ClassVar[str]

    __slots__ = ("color", "position", "move_count", "captured")

    def __init__(self, color: Color, position: Coordinate = OFF_BOARD) -> None:
        self.color = color
        self.position = position
        self.move_count = 0
        self.captured = False

    @property
    def has_moved(self) -> bool:
        return self.move_count > 0

    @property
    def symbol(self) -> str:
        """FEN letter, uppercase for white."""
        return self.letter.upper() if self.color is Color.WHITE else self.letter

    def enumerate_moves(self, board: Board) -> dict[str, Move]:
        """Structurally valid moves keyed by destination square name.

        Read-only: neither the board nor the piece is modified. Moves may still
        leave the king in check; see :meth:`legal_moves`.
        """
        raise NotImplementedError

    def legal_moves(self, board: Board) -> dict[str, Move]:
        """Enumerated moves that do not leave the own king attacked."""
        return {
            square: move
            for square, move in self.enumerate_moves(board).items()
            if move.is_legal()
        }

    # -- Shared movement patterns --------------------------------------------

    def _step(self, board: Board, offsets: Offsets) -> dict[str, Move]:
        moves: dict[str, Move] = {}
        for df, dr in offsets:
            coord = self.position.offset(df, dr)
            if not coord.valid():
                continue
            target = board.occupant_at(coord)
            if target is None:
                moves[coord.to_algebraic()] = StandardMove(board, self, coord)
            elif target.color != self.color:
                moves[coord.to_algebraic()] = CapturingMove(board, self, target)
        return moves

    def _slide(self, board: Board, directions: Offsets) -> dict[str, Move]:
        moves: dict[str, Move] = {}
        for df, dr in directions:
            coord = self.position.offset(df, dr)
            while coord.valid():
                target = board.occupant_at(coord)
                if target is None:
                    moves[coord.to_algebraic()] = StandardMove(board, self, coord)
                    coord = coord.offset(df, dr)
                    continue
                if target.color != self.color:
                    moves[coord.to_algebraic()] = CapturingMove(board, self, target)
                else:
                    self._blocked_by_friend(board, target, dr, moves)
                break
        return moves

    def _blocked_by_friend(
        self, board: Board, friend: Piece, dr: int, moves: dict[str, Move]
    ) -> None:
        """Hook for sliding pieces that interact with a friendly blocker."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color}, {self.position})"

    def __str__(self) -> str:
        return self.symbol


class Rook(Piece):
    """Slides along ranks and files; also generates castling.

    A castling move is keyed at the king's destination square. When that
    square is also a plain rook destination (h1-g1, a8-c8 and so on), the
    castling entry replaces the plain rook move, which is then not offered.
    """

    kind = PieceKind.ROOK
    letter = "r"
    __slots__ = ()

    def enumerate_moves(self, board: Board) -> dict[str, Move]:
        return self._slide(board, ROOK_DIRS)

    def _blocked_by_friend(
        self, board: Board, friend: Piece, dr: int, moves: dict[str, Move]
    ) -> None:
        # Never evaluated during an attack probe: castling cannot capture, and
        # probing would recurse through the enemy rooks.
        if dr != 0 or friend.kind is not PieceKind.KING or board.probing:
            return
        if self.has_moved or friend.has_moved:
            return
        gap = friend.position.file - self.position.file
        if abs(gap) < _CASTLING_PATH_LENGTH:
            return
        step = -1 if gap > 0 else 1
        enemy = self.color.opposite
        for i in range(_CASTLING_PATH_LENGTH):
            if board.attacked(enemy, friend.position.offset(i * step, 0)):
                return
        # Keyed at the king's destination; replaces the rook's plain move there.
        king_end = friend.position.offset(2 * step, 0)
        moves[king_end.to_algebraic()] = CastlingMove(board, self, friend)


class Bishop(Piece):
    kind = PieceKind.BISHOP
    letter = "b"
    __slots__ = ()

    def enumerate_moves(self, board: Board) -> dict[str, Move]:
        return self._slide(board, BISHOP_DIRS)


class Queen(Piece):
    kind = PieceKind.QUEEN
    letter = "q"
    __slots__ = ()

    def enumerate_moves(self, board: Board) -> dict[str, Move]:
        return self._slide(board, QUEEN_DIRS)


class Knight(Piece):
    kind = PieceKind.KNIGHT
    letter = "n"
    __slots__ = ()

    def enumerate_moves(self, board: Board) -> dict[str, Move]:
        return self._step(board, KNIGHT_OFFSETS)


class King(Piece):
    kind = PieceKind.KING
    letter = "k"
    __slots__ = ()

    def enumerate_moves(self, board: Board) -> dict[str, Move]:
        return self._step(board, KING_OFFSETS)


class Pawn(Piece):
    kind = PieceKind.PAWN
    letter = "p"
    __slots__ = ("en_passant_capturable",)

    def __init__(self, color: Color, position: Coordinate = OFF_BOARD) -> None:
        super().__init__(color, position)
        self.en_passant_capturable = False

    def enumerate_moves(self, board: Board) -> dict[str, Move]:
        moves: dict[str, Move] = {}
        forward = self.color.forward
        last_rank = self.color.last_rank

        one = self.position.offset(0, forward)
        if one.valid() and board.is_empty(one):
            if one.rank == last_rank:
                moves[one.to_algebraic()] = MoveAndPromote(board, self, one)
            else:
                moves[one.to_algebraic()] = StandardMove(board, self, one)

            two = one.offset(0, forward)
            if not self.has_moved and two.valid() and board.is_empty(two):
                moves[two.to_algebraic()] = EnPassantMove(board, self, two)

        for df in (-1, 1):
            diagonal = self.position.offset(df, forward)
            if not diagonal.valid():
                continue
            target = board.occupant_at(diagonal)
            if target is not None:
                if target.color == self.color:
                    continue
                if diagonal.rank == last_rank:
                    moves[diagonal.to_algebraic()] = CaptureAndPromote(
                        board, self, target
                    )
                else:
                    moves[diagonal.to_algebraic()] = CapturingMove(
                        board, self, target
                    )
                continue

            neighbour = board.occupant_at(self.position.offset(df, 0))
            if (
                isinstance(neighbour, Pawn)
                and neighbour.color != self.color
                and neighbour.en_passant_capturable
            ):
                moves[diagonal.to_algebraic()] = EnPassantCapture(
                    board, self, neighbour
                )
        return moves


PIECE_CLASSES: dict[PieceKind, type[Piece]] = {
    cls.kind: cls for cls in (Pawn, Knight, Bishop, Rook, Queen, King)
}


def make_piece(kind: PieceKind, color: Color) -> Piece:
    """Create an unplaced piece of *kind*."""
    try:
        cls = PIECE_CLASSES[kind]
    except KeyError:
        raise ValueError(f"Unrecognized piece kind: {kind!r}") from None
    return cls(color)
