"""Free-text move input: user typing and external engine replies."""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.errors import InvalidNotationError
from chessrules.core.move import Move
from chessrules.core.notation.san import parse_san

_LOGGER = logging.getLogger(__name__)


def parse_move_text(board: Board, text: str) -> Move | None:
    """Decode *text* as SAN, falling back to long algebraic.

    The result is not guaranteed to be legal; hand it to
    :meth:`Board.make_move`. Returns ``None`` when neither notation fits.
    """
    text = text.strip()
    if not text:
        return None

    move = parse_san(board, text)
    if move is not None:
        return move

    try:
        return Move.from_long_algebraic(text, board.current_turn)
    except InvalidNotationError:
        _LOGGER.debug("Unrecognised move text: %r", text)
        return None


def match_legal_move(board: Board, text: str) -> Move | None:
    """Find the legal move named by an external reply.

    Accepts coordinate form (``e2e4``, ``e1g1``, ``e7e8q``), castling
    tokens and SAN, case-insensitively for the coordinate forms.
    """
    reply = text.strip().lower().replace("-", "")
    if not reply:
        return None

    legal = board.legal_moves()
    for move in legal:
        long_form = move.to_long_algebraic().lower().replace("-", "")
        if reply in (move.uci, long_form):
            return move

    move = parse_san(board, text.strip())
    if move is not None and board.is_valid_move(move, board.current_turn):
        return move
    return None
