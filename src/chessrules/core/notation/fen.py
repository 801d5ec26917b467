"""FEN parsing and serialization."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidNotationError
from chessrules.core.piece import Piece
from chessrules.core.position import Position

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Castling letter -> (color, rook column)
_CASTLING_ROOKS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}


def board_from_fen(fen: str) -> Board:
    """Parse a FEN string into a :class:`Board`.

    ``has_moved`` is reconstructed from the castling field: kings and rooks
    keep it ``False`` only while a castling right still names them, and
    pawns off their starting rank count as moved.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise InvalidNotationError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise InvalidNotationError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 2. Castling
    rights: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in _CASTLING_ROOKS or ch in rights:
                raise InvalidNotationError(
                    f"Invalid FEN castling field: {castling_part!r}"
                )
            rights.add(ch)

    # 3. En passant
    ep: Position | None = None
    if ep_part != "-":
        ep = Position.from_algebraic(ep_part)
        expected_row = 5 if side == Color.WHITE else 2
        if ep.row != expected_row:
            raise InvalidNotationError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 4. Clocks (optional; the halfmove clock is not tracked)
    try:
        halfmove = int(parts[4]) if len(parts) > 4 else 0
        fullmove = int(parts[5]) if len(parts) > 5 else 1
    except ValueError:
        raise InvalidNotationError(f"Invalid FEN move counters: {fen!r}") from None
    if halfmove < 0:
        raise InvalidNotationError(f"Invalid FEN halfmove clock: {parts[4]!r}")
    if fullmove < 1:
        raise InvalidNotationError(f"Invalid FEN fullmove number: {parts[5]!r}")

    board = Board.empty(side, ep, fullmove)

    # 5. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidNotationError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    for rank_idx, rank_text in enumerate(ranks):
        row = 7 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise InvalidNotationError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise InvalidNotationError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_fen_char(ch)
                pos = Position(row, col)
                if _starts_moved(piece, pos, rights):
                    piece = piece.moved()
                board.place(pos, piece)
                col += 1
            if col > 8:
                raise InvalidNotationError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise InvalidNotationError(f"Invalid FEN rank width: {fen!r}")

    return board


def board_to_fen(board: Board, include_en_passant: bool = False) -> str:
    """Serialise *board* to FEN.

    The en-passant field is written as ``-`` unless *include_en_passant* is
    set, since some strict FEN consumers reject positions that carry one.
    The halfmove clock is always ``0``.
    """
    # 1. Board
    rows: list[str] = []
    for row in range(7, -1, -1):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[Position(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += piece.to_fen_char()
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if board.current_turn == Color.WHITE else "b"

    # 3. Castling
    castling_str = castling_rights(board) or "-"

    # 4. En passant
    ep = board.en_passant_target
    ep_str = ep.to_algebraic() if include_en_passant and ep is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 {board.fullmove_number}"


def castling_rights(board: Board) -> str:
    """Castling availability (``"KQkq"`` subset) from unmoved kings and rooks."""
    rights = ""
    for letter, (color, rook_col) in _CASTLING_ROOKS.items():
        row = color.home_row
        king = board[Position(row, 4)]
        rook = board[Position(row, rook_col)]
        if (
            _is_unmoved(king, PieceType.KING, color)
            and _is_unmoved(rook, PieceType.ROOK, color)
        ):
            rights += letter
    return rights


def _is_unmoved(piece: Piece | None, piece_type: PieceType, color: Color) -> bool:
    return (
        piece is not None
        and piece.piece_type == piece_type
        and piece.color == color
        and not piece.has_moved
    )


def _starts_moved(piece: Piece, pos: Position, rights: set[str]) -> bool:
    home_row = piece.color.home_row
    if piece.piece_type == PieceType.PAWN:
        return pos.row != home_row + piece.color.pawn_direction
    if piece.piece_type == PieceType.KING:
        if pos != Position(home_row, 4):
            return True
        return not any(
            _CASTLING_ROOKS[letter][0] == piece.color for letter in rights
        )
    if piece.piece_type == PieceType.ROOK:
        return not any(
            (piece.color, pos.col) == _CASTLING_ROOKS[letter] and pos.row == home_row
            for letter in rights
        )
    return False
