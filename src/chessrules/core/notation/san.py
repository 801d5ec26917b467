"""SAN (Standard Algebraic Notation) conversion and parsing."""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.enums import PieceType
from chessrules.core.errors import InvalidNotationError
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.position import FILES, RANKS, Position

_LOGGER = logging.getLogger(__name__)

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}

_KINGSIDE_TOKENS = ("O-O", "0-0", "o-o")
_QUEENSIDE_TOKENS = ("O-O-O", "0-0-0", "o-o-o")


def move_to_san(board: Board, move: Move) -> str:
    """SAN for *move* on *board* (the position before the move).

    Check and mate markers are not added here; see
    :func:`move_to_san_with_suffix`.
    """
    if move.is_castling:
        return "O-O" if move.is_kingside_castle else "O-O-O"

    piece = board[move.from_pos]
    if piece is None:
        raise ValueError(f"No piece on {move.from_pos}")

    # A diagonal pawn step is always a capture, en passant included.
    is_capture = (
        move.is_capture
        or board[move.to_pos] is not None
        or (piece.piece_type == PieceType.PAWN and move.from_pos.col != move.to_pos.col)
    )
    san = ""

    if piece.piece_type == PieceType.PAWN:
        if is_capture:
            san += move.from_pos.file_char
    else:
        san += _SAN_PIECE[piece.piece_type]
        san += _disambiguation(board, move, piece)

    if is_capture:
        san += "x"

    san += move.to_pos.to_algebraic()

    if move.promotion is not None:
        san += "=" + _SAN_PIECE[move.promotion]

    return san


def move_to_san_with_suffix(board: Board, move: Move) -> str:
    """SAN plus ``+`` or ``#``, found by playing *move* on a copy of *board*."""
    san = move_to_san(board, move)

    scratch = board.copy()
    replay = Move(
        move.from_pos,
        move.to_pos,
        move.promotion,
        is_castling=move.is_castling,
        is_en_passant=move.is_en_passant,
    )
    if not scratch.make_move(replay):
        return san

    opponent = scratch.current_turn
    if scratch.is_checkmate(opponent):
        san += "#"
    elif scratch.is_in_check(opponent):
        san += "+"
    return san


def parse_san(board: Board, san: str) -> Move | None:
    """Match *san* against the legal moves of the side to move.

    Returns ``None`` when the text is not SAN or names no legal move, so
    callers can fall back to another notation.
    """
    clean = san.strip().rstrip("+#!?")
    color = board.current_turn

    if clean in _KINGSIDE_TOKENS:
        return Move.castle(color, kingside=True)
    if clean in _QUEENSIDE_TOKENS:
        return Move.castle(color, kingside=False)

    # Promotion
    promotion: PieceType | None = None
    if "=" in clean:
        clean, _, promo_text = clean.partition("=")
        promotion = _SAN_PIECE_REV.get(promo_text.upper())
        if promotion is None or promotion == PieceType.KING:
            return None

    # Piece type
    if clean and clean[0] in _SAN_PIECE_REV:
        piece_type = _SAN_PIECE_REV[clean[0]]
        clean = clean[1:]
    else:
        piece_type = PieceType.PAWN

    is_capture = "x" in clean
    clean = clean.replace("x", "")

    # Destination (last two chars)
    if len(clean) < 2:
        return None
    try:
        to_pos = Position.from_algebraic(clean[-2:])
    except InvalidNotationError:
        _LOGGER.debug("Not a SAN destination: %r", san)
        return None

    # Disambiguation
    from_col: int | None = None
    from_row: int | None = None
    for ch in clean[:-2]:
        if ch in FILES:
            from_col = FILES.index(ch)
        elif ch in RANKS:
            from_row = RANKS.index(ch)
        else:
            return None

    # A bare pawn destination ("e4") is a push, never a capture.
    if piece_type == PieceType.PAWN and not is_capture and from_col is None:
        from_col = to_pos.col

    for m in board.legal_moves(color):
        p = board[m.from_pos]
        if p is None or p.piece_type != piece_type:
            continue
        if m.to_pos != to_pos or m.is_castling:
            continue
        if from_col is not None and m.from_pos.col != from_col:
            continue
        if from_row is not None and m.from_pos.row != from_row:
            continue
        if is_capture and not m.is_capture:
            continue
        if promotion is not None and m.promotion != promotion:
            continue
        return m

    return None


def _disambiguation(board: Board, move: Move, piece: Piece) -> str:
    rivals = [
        m.from_pos
        for m in board.legal_moves(piece.color)
        if m.to_pos == move.to_pos
        and m.from_pos != move.from_pos
        and not m.is_castling
        and (p := board[m.from_pos]) is not None
        and p.piece_type == piece.piece_type
    ]
    if not rivals:
        return ""
    if all(r.col != move.from_pos.col for r in rivals):
        return move.from_pos.file_char
    if all(r.row != move.from_pos.row for r in rivals):
        return move.from_pos.rank_char
    return move.from_pos.to_algebraic()
