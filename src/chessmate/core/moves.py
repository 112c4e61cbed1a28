"""Reversible move commands.

Every move is bound to a :class:`~chessmate.core.board.Board` and the piece
that acts. ``execute`` applies it, ``reverse`` undoes it exactly. Composite
moves (castling, en passant, promotion) are ordered lists of simple moves that
are undone in reverse order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from chessmate.core.coordinate import Coordinate
from chessmate.core.enums import PieceKind
from chessmate.core.errors import InvalidOperationError

if TYPE_CHECKING:
    from chessmate.core.board import Board
    from chessmate.core.pieces import Pawn, Piece, Rook

DEFAULT_PROMOTION = PieceKind.QUEEN

_PROMOTION_KINDS: frozenset[PieceKind] = frozenset(
    {PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP, PieceKind.KNIGHT}
)


class Move(ABC):
    """Base command: ``execute`` / ``reverse`` / ``is_legal``."""

    __slots__ = ("board", "piece")

    def __init__(self, board: Board, piece: Piece) -> None:
        self.board = board
        self.piece = piece

    @abstractmethod
    def execute(self) -> Coordinate:
        """Apply the move and return the acting piece's destination."""

    @abstractmethod
    def reverse(self) -> Coordinate:
        """Undo the move and return the acting piece's prior square."""

    @property
    def captures_king(self) -> bool:
        return False

    @contextmanager
    def applied(self) -> Iterator[Coordinate]:
        """Execute on entry; always reverse on exit."""
        destination = self.execute()
        try:
            yield destination
        finally:
            self.reverse()

    def is_legal(self) -> bool:
        """Whether the move leaves its own king out of check.

        A move that captures the enemy king only shows up while probing for
        attacks and is never executed, so it counts as legal.
        """
        if self.captures_king:
            return True
        color = self.piece.color
        with self.applied():
            return not self.board.in_check(color)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.piece!r})"


# ── Simple moves ─────────────────────────────────────────────────────────────


class SimpleMove(Move):
    """A single atomic state change."""

    __slots__ = ()


class StandardMove(SimpleMove):
    """Move a piece onto an empty square."""

    __slots__ = ("start", "end")

    def __init__(
        self,
        board: Board,
        piece: Piece,
        end: Coordinate,
        start: Coordinate | None = None,
    ) -> None:
        if board.occupant_at(end) is not None:
            raise InvalidOperationError(
                f"Cannot move to {end}: square is occupied"
            )
        super().__init__(board, piece)
        self.start = piece.position if start is None else start
        self.end = end

    def execute(self) -> Coordinate:
        self.board[self.start] = None
        self.board[self.end] = self.piece
        self.piece.move_count += 1
        return self.end

    def reverse(self) -> Coordinate:
        self.board[self.end] = None
        self.board[self.start] = self.piece
        self.piece.move_count -= 1
        return self.start

    def __repr__(self) -> str:
        return f"StandardMove({self.piece!r}, {self.start}->{self.end})"


class CapturingMove(SimpleMove):
    """Move a piece onto an enemy piece, capturing it."""

    __slots__ = ("target", "start", "end")

    def __init__(
        self,
        board: Board,
        piece: Piece,
        target: Piece,
        start: Coordinate | None = None,
    ) -> None:
        if target.color == piece.color:
            raise InvalidOperationError(
                f"{piece!r} cannot capture a piece of its own color"
            )
        super().__init__(board, piece)
        self.target = target
        self.start = piece.position if start is None else start
        self.end = target.position

    @property
    def captures_king(self) -> bool:
        return self.target.kind is PieceKind.KING

    def execute(self) -> Coordinate:
        if self.captures_king:
            raise InvalidOperationError("Cannot capture a king")
        self.board[self.start] = None
        self.board.capture(self.target)
        self.board[self.end] = self.piece
        self.piece.move_count += 1
        return self.end

    def reverse(self) -> Coordinate:
        self.board[self.end] = None
        self.board.restore(self.target)
        self.board[self.start] = self.piece
        self.piece.move_count -= 1
        return self.start

    def __repr__(self) -> str:
        return f"CapturingMove({self.piece!r}x{self.target!r})"


class PromotingMove(SimpleMove):
    """Swap a pawn for a new piece of the same color on the same square."""

    __slots__ = ("square", "promoted")

    def __init__(
        self,
        board: Board,
        pawn: Pawn,
        square: Coordinate | None = None,
        kind: PieceKind = DEFAULT_PROMOTION,
    ) -> None:
        if kind not in _PROMOTION_KINDS:
            raise ValueError(f"Cannot promote to {kind}")
        super().__init__(board, pawn)
        self.square = pawn.position if square is None else square
        self.promoted = board.create_piece(kind, pawn.color)

    def execute(self) -> Coordinate:
        self.board.detach(self.piece)
        self.promoted.move_count = self.piece.move_count
        self.board.place(self.square, self.promoted)
        return self.square

    def reverse(self) -> Coordinate:
        self.board.detach(self.promoted)
        self.board.place(self.square, self.piece)
        return self.square


class EnPassantIndicate(SimpleMove):
    """Set (or clear) a pawn's ``en_passant_capturable`` flag."""

    __slots__ = ("value", "_previous")

    def __init__(self, board: Board, pawn: Pawn, value: bool = True) -> None:
        super().__init__(board, pawn)
        self.value = value
        self._previous = pawn.en_passant_capturable

    def execute(self) -> Coordinate:
        self._previous = self.piece.en_passant_capturable
        self.piece.en_passant_capturable = self.value
        return self.piece.position

    def reverse(self) -> Coordinate:
        self.piece.en_passant_capturable = self._previous
        return self.piece.position


# ── Composite moves ──────────────────────────────────────────────────────────


class ComplexMove(Move):
    """Ordered sequence of sub-moves, undone back to front."""

    __slots__ = ("moves",)

    def __init__(self, board: Board, piece: Piece, *moves: Move) -> None:
        super().__init__(board, piece)
        self.moves: tuple[Move, ...] = moves

    @property
    def captures_king(self) -> bool:
        return any(move.captures_king for move in self.moves)

    def execute(self) -> Coordinate:
        done: list[Move] = []
        try:
            for move in self.moves:
                destination = move.execute()
                done.append(move)
        except Exception:
            for move in reversed(done):
                move.reverse()
            raise
        return destination

    def reverse(self) -> Coordinate:
        for move in reversed(self.moves):
            prior = move.reverse()
        return prior

    def __repr__(self) -> str:
        inner = ", ".join(repr(move) for move in self.moves)
        return f"{type(self).__name__}[{inner}]"


class CastlingMove(ComplexMove):
    """Slide the rook next to the king, then jump the king over it."""

    __slots__ = ()

    def __init__(self, board: Board, rook: Rook, king: Piece) -> None:
        if king.position.rank != rook.position.rank:
            raise InvalidOperationError(
                "King and rook must share a rank to castle"
            )
        if king.move_count > 0 or rook.move_count > 0:
            raise InvalidOperationError(
                "King and rook cannot castle once either has moved"
            )

        step = -1 if rook.position.file < king.position.file else 1
        rook_end = king.position.offset(step, 0)
        king_end = king.position.offset(2 * step, 0)

        super().__init__(
            board,
            rook,
            StandardMove(board, rook, rook_end),
            StandardMove(board, king, king_end),
        )


class EnPassantMove(ComplexMove):
    """Pawn double step that leaves the pawn capturable en passant."""

    __slots__ = ()

    def __init__(self, board: Board, pawn: Pawn, end: Coordinate) -> None:
        super().__init__(
            board,
            pawn,
            StandardMove(board, pawn, end),
            EnPassantIndicate(board, pawn),
        )


class EnPassantCapture(ComplexMove):
    """Capture the adjacent pawn, then step onto the square behind it."""

    __slots__ = ()

    def __init__(self, board: Board, pawn: Pawn, target: Pawn) -> None:
        behind = target.position.offset(0, pawn.color.forward)
        super().__init__(
            board,
            pawn,
            CapturingMove(board, pawn, target),
            StandardMove(board, pawn, behind, start=target.position),
        )


class CaptureAndPromote(ComplexMove):
    __slots__ = ()

    def __init__(self, board: Board, pawn: Pawn, target: Piece) -> None:
        super().__init__(
            board,
            pawn,
            CapturingMove(board, pawn, target),
            PromotingMove(board, pawn, target.position),
        )


class MoveAndPromote(ComplexMove):
    __slots__ = ()

    def __init__(self, board: Board, pawn: Pawn, end: Coordinate) -> None:
        super().__init__(
            board,
            pawn,
            StandardMove(board, pawn, end),
            PromotingMove(board, pawn, end),
        )
