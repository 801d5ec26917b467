"""Move value object and long-algebraic construction."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidNotationError
from chessrules.core.piece import Piece
from chessrules.core.position import Position

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_TYPES: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}

# Tokens compared after "-" has been stripped and the text lowercased.
_KINGSIDE_TOKENS = frozenset({"oo", "00"})
_QUEENSIDE_TOKENS = frozenset({"ooo", "000"})

KING_HOME_COL = 4
KINGSIDE_KING_COL = 6
QUEENSIDE_KING_COL = 2


@dataclass(slots=True)
class Move:
    """A transition from one square to another.

    ``is_en_passant`` may be filled in by the board while it validates the
    move, and ``captured_piece`` is snapshotted when the move is applied.
    Once a move sits in a board's history it is treated as read-only.
    """

    from_pos: Position
    to_pos: Position
    promotion: PieceType | None = None
    is_castling: bool = False
    is_en_passant: bool = False
    captured_piece: Piece | None = field(default=None, compare=False)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def castle(cls, color: Color, kingside: bool) -> Move:
        """Castling move for *color*, seeded from the king's home square."""
        row = color.home_row
        to_col = KINGSIDE_KING_COL if kingside else QUEENSIDE_KING_COL
        return cls(
            Position(row, KING_HOME_COL),
            Position(row, to_col),
            is_castling=True,
        )

    @classmethod
    def from_long_algebraic(cls, text: str, color: Color) -> Move:
        """Parse ``e2e4``, ``e7e8q``, ``e2-e4`` or a castling token.

        *color* picks the home rank for castling tokens.
        """
        clean = text.strip().lower().replace("-", "").replace("x", "")

        if clean in _KINGSIDE_TOKENS:
            return cls.castle(color, kingside=True)
        if clean in _QUEENSIDE_TOKENS:
            return cls.castle(color, kingside=False)

        promotion: PieceType | None = None
        if len(clean) == 5:
            promotion = _PROMO_TYPES.get(clean[4])
            clean = clean[:4]

        if len(clean) != 4:
            raise InvalidNotationError(f"Invalid move notation: {text!r}")

        return cls(
            Position.from_algebraic(clean[:2]),
            Position.from_algebraic(clean[2:]),
            promotion,
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None or self.is_en_passant

    @property
    def is_kingside_castle(self) -> bool:
        return self.is_castling and self.to_pos.col == KINGSIDE_KING_COL

    # ── Display ──────────────────────────────────────────────────────────

    def to_long_algebraic(self) -> str:
        """``e2e4`` / ``e7e8q``; castling is written ``O-O`` / ``O-O-O``."""
        if self.is_castling:
            return "O-O" if self.is_kingside_castle else "O-O-O"
        return self.uci

    @property
    def uci(self) -> str:
        """Pure coordinate notation, castling included (``e1g1``)."""
        base = f"{self.from_pos.to_algebraic()}{self.to_pos.to_algebraic()}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    def __str__(self) -> str:
        return self.uci
