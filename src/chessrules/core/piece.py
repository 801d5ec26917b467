"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidNotationError

# FEN character ↔ (PieceType, Color)
_CHAR_MAP: dict[str, tuple[PieceType, Color]] = {
    "P": (PieceType.PAWN, Color.WHITE),
    "N": (PieceType.KNIGHT, Color.WHITE),
    "B": (PieceType.BISHOP, Color.WHITE),
    "R": (PieceType.ROOK, Color.WHITE),
    "Q": (PieceType.QUEEN, Color.WHITE),
    "K": (PieceType.KING, Color.WHITE),
    "p": (PieceType.PAWN, Color.BLACK),
    "n": (PieceType.KNIGHT, Color.BLACK),
    "b": (PieceType.BISHOP, Color.BLACK),
    "r": (PieceType.ROOK, Color.BLACK),
    "q": (PieceType.QUEEN, Color.BLACK),
    "k": (PieceType.KING, Color.BLACK),
}

_FEN_CHARS: dict[tuple[PieceType, Color], str] = {v: k for k, v in _CHAR_MAP.items()}

_UNICODE: dict[tuple[PieceType, Color], str] = {
    (PieceType.PAWN, Color.WHITE): "♙",
    (PieceType.KNIGHT, Color.WHITE): "♘",
    (PieceType.BISHOP, Color.WHITE): "♗",
    (PieceType.ROOK, Color.WHITE): "♖",
    (PieceType.QUEEN, Color.WHITE): "♕",
    (PieceType.KING, Color.WHITE): "♔",
    (PieceType.PAWN, Color.BLACK): "♟",
    (PieceType.KNIGHT, Color.BLACK): "♞",
    (PieceType.BISHOP, Color.BLACK): "♝",
    (PieceType.ROOK, Color.BLACK): "♜",
    (PieceType.QUEEN, Color.BLACK): "♛",
    (PieceType.KING, Color.BLACK): "♚",
}

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    ``has_moved`` travels with the occupant of a square: the board swaps in
    :meth:`moved` copies rather than flipping a flag in place. It is left
    out of equality so two white knights always compare equal.
    """

    piece_type: PieceType
    color: Color
    has_moved: bool = field(default=False, compare=False)

    # ── Serialisation ────────────────────────────────────────────────────

    def to_fen_char(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.piece_type, self.color)]

    def __str__(self) -> str:
        return self.to_fen_char()

    @classmethod
    def from_fen_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            ptype, color = _CHAR_MAP[char]
        except KeyError:
            raise InvalidNotationError(f"Invalid piece character: {char!r}") from None
        return cls(ptype, color)

    # ── Copies ───────────────────────────────────────────────────────────

    def clone(self) -> Piece:
        return replace(self)

    def moved(self) -> Piece:
        """Copy of this piece flagged as having moved."""
        if self.has_moved:
            return self
        return replace(self, has_moved=True)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.piece_type, self.color)]

    @property
    def name(self) -> str:
        """Capitalised type name, e.g. ``'Knight'``."""
        return self.piece_type.name.capitalize()

    @property
    def value(self) -> int:
        """Conventional material value in pawns."""
        return PIECE_VALUES[self.piece_type]
