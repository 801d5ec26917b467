"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessrules.core import Board, parse_move_text

    board = Board()
    move = parse_move_text(board, "Nf3")
    if move is not None and board.make_move(move):
        print(board.to_fen())
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.errors import InvalidNotationError, OutOfRangeError
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    match_legal_move,
    move_to_san,
    move_to_san_with_suffix,
    parse_move_text,
    parse_san,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position, in_bounds
from chessrules.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Errors
    "InvalidNotationError",
    "OutOfRangeError",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "in_bounds",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "match_legal_move",
    "move_to_san",
    "move_to_san_with_suffix",
    "parse_move_text",
    "parse_san",
]
