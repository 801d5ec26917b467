"""High-level rules: game result and material balance."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Only checkmate and stalemate end a game here; repetition and
    move-count draws are not tracked.
    """

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Result for the side to move: mate, stalemate or still playing."""
        gen = MoveGenerator(board)
        side = board.current_turn

        if gen.has_legal_move(side):
            return GameResult.IN_PROGRESS
        if gen.is_in_check(side):
            return (
                GameResult.BLACK_WINS if side == Color.WHITE else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate

    @staticmethod
    def is_game_over(board: Board) -> bool:
        return Rules.game_result(board) != GameResult.IN_PROGRESS

    @staticmethod
    def material_balance(board: Board) -> int:
        """White material minus Black material, in pawns."""
        return board.material_value(Color.WHITE) - board.material_value(Color.BLACK)
