"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. Also used to index the board's per-color arrays."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank step of a pawn advancing for this side."""
        return 1 if self is Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        return 0 if self is Color.WHITE else 7

    @property
    def last_rank(self) -> int:
        """Rank on which this side's pawns promote."""
        return 7 if self is Color.WHITE else 0

    @classmethod
    def from_token(cls, token: str) -> Color:
        """Parse a lowercase token, e.g. ``'white'``."""
        try:
            return cls[token.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unrecognized color: {token!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def from_token(cls, token: str) -> PieceKind:
        """Parse a lowercase token, e.g. ``'knight'``."""
        try:
            return cls[token.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unrecognized piece kind: {token!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
