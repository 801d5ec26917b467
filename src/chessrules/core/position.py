"""Position - an immutable board coordinate.

Layout:
    row 0 = rank 1, row 7 = rank 8
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.errors import InvalidNotationError, OutOfRangeError

FILES = "abcdefgh"
RANKS = "12345678"


def in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the board."""
    return 0 <= row < 8 and 0 <= col < 8


@dataclass(frozen=True, slots=True)
class Position:
    """A square on the board, addressed by ``(row, col)``."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not in_bounds(self.row, self.col):
            raise OutOfRangeError(
                f"Position out of range: ({self.row}, {self.col})"
            )

    @classmethod
    def from_algebraic(cls, text: str) -> Position:
        """Parse a square name, e.g. ``'e4'`` -> ``Position(3, 4)``."""
        if not text or len(text) != 2:
            raise InvalidNotationError(f"Invalid square name: {text!r}")
        col = ord(text[0]) - ord("a")
        row = ord(text[1]) - ord("1")
        if not in_bounds(row, col):
            raise InvalidNotationError(f"Invalid square name: {text!r}")
        return cls(row, col)

    @classmethod
    def from_index(cls, index: int) -> Position:
        return cls(index >> 3, index & 7)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Grid index 0-63 (a1=0, h1=7, a8=56)."""
        return self.row * 8 + self.col

    @property
    def file_char(self) -> str:
        return FILES[self.col]

    @property
    def rank_char(self) -> str:
        return RANKS[self.row]

    def is_valid(self) -> bool:
        return in_bounds(self.row, self.col)

    def offset(self, d_row: int, d_col: int) -> Position | None:
        """The square ``(d_row, d_col)`` away, or ``None`` if off-board."""
        row = self.row + d_row
        col = self.col + d_col
        if not in_bounds(row, col):
            return None
        return Position(row, col)

    # ── Serialisation ────────────────────────────────────────────────────

    def to_algebraic(self) -> str:
        return FILES[self.col] + RANKS[self.row]

    def __str__(self) -> str:
        return self.to_algebraic()

    def __repr__(self) -> str:
        return f"Position({self.to_algebraic()})"


ALL_POSITIONS: tuple[Position, ...] = tuple(Position.from_index(i) for i in range(64))
