"""Notation package: FEN / SAN / free-text move parsing and serialization."""

from chessrules.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    castling_rights,
)
from chessrules.core.notation.san import (
    move_to_san,
    move_to_san_with_suffix,
    parse_san,
)
from chessrules.core.notation.text import match_legal_move, parse_move_text

__all__ = [
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "castling_rights",
    "move_to_san",
    "move_to_san_with_suffix",
    "parse_san",
    "match_legal_move",
    "parse_move_text",
]
