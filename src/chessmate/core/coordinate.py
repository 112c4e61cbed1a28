"""Board coordinates and algebraic square names.

Files and ranks are zero-based::

    a1 = (0, 0), h1 = (7, 0), a8 = (0, 7), h8 = (7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable (file, rank) pair; may lie off the board."""

    file: int
    rank: int

    def valid(self) -> bool:
        """Whether both components lie on the board."""
        return 0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE

    def offset(self, df: int, dr: int) -> Coordinate:
        return Coordinate(self.file + df, self.rank + dr)

    def to_algebraic(self) -> str:
        """Square name, e.g. ``Coordinate(4, 3)`` → ``'e4'``."""
        if not self.valid():
            raise ValueError(f"Off-board coordinate has no square name: {self!r}")
        return _FILES[self.file] + _RANKS[self.rank]

    @classmethod
    def from_algebraic(cls, code: str) -> Coordinate:
        """Parse a square name, e.g. ``'e4'`` → ``Coordinate(4, 3)``."""
        if len(code) != 2 or code[0] not in _FILES or code[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {code!r}")
        return cls(_FILES.index(code[0]), _RANKS.index(code[1]))

    def __str__(self) -> str:
        return self.to_algebraic() if self.valid() else "-"


OFF_BOARD = Coordinate(-1, -1)


def coerce(position: Coordinate | str) -> Coordinate:
    """Accept either a :class:`Coordinate` or an algebraic square name."""
    if isinstance(position, str):
        return Coordinate.from_algebraic(position)
    return position
