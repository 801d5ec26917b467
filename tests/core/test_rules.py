"""Tests for Rules and the board's check, mate and stalemate queries."""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult
from chessrules.core.notation import STARTING_FEN, board_from_fen
from chessrules.core.rules import Rules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = board_from_fen(STARTING_FEN)
        assert not board.is_in_check(Color.WHITE)
        assert not board.is_in_check(Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        # After 1.f3 e5 2.g4 Qh4# white is in check
        assert board_from_fen(FOOLS_MATE).is_in_check(Color.WHITE)


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = board_from_fen(FOOLS_MATE)
        assert board.is_checkmate(Color.WHITE)
        assert not board.is_stalemate(Color.WHITE)
        assert Rules.game_result(board) == GameResult.BLACK_WINS
        assert Rules.is_game_over(board)

    def test_scholars_mate(self, start_board: Board, play) -> None:
        play(start_board, "e4", "e5", "Bc4", "Nc6", "Qh5", "Nf6", "Qxf7")
        assert start_board.is_checkmate(Color.BLACK)
        assert start_board.legal_moves(Color.BLACK) == []
        assert not start_board.is_checkmate(Color.WHITE)
        assert Rules.game_result(start_board) == GameResult.WHITE_WINS

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        board = board_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert board.is_checkmate(Color.BLACK)
        assert Rules.game_result(board) == GameResult.WHITE_WINS

    def test_not_checkmate_when_can_escape(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert board.is_in_check(Color.WHITE)
        assert not board.is_checkmate(Color.WHITE)
        assert Rules.game_result(board) == GameResult.IN_PROGRESS

    def test_not_checkmate_when_checker_can_be_captured(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/3q4/R3K3 w - - 0 1")
        assert board.is_in_check(Color.WHITE)
        assert not board.is_checkmate(Color.WHITE)


class TestStalemate:
    def test_king_trapped(self) -> None:
        # Black king on h8, white K on f6, white Q on g6
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert board.is_stalemate(Color.BLACK)
        assert not board.is_checkmate(Color.BLACK)
        assert Rules.game_result(board) == GameResult.DRAW

    def test_king_blocked_by_pawn(self) -> None:
        board = board_from_fen("7k/7P/6K1/8/8/8/8/8 b - - 0 1")
        assert board.is_stalemate(Color.BLACK)

    def test_not_stalemate_when_has_moves(self) -> None:
        board = board_from_fen("7k/8/5K2/8/8/8/8/8 b - - 0 1")
        assert not board.is_stalemate(Color.BLACK)
        assert not Rules.is_game_over(board)

    def test_stalemate_is_per_side(self) -> None:
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert not board.is_stalemate(Color.WHITE)


class TestMaterial:
    def test_start_is_balanced(self, start_board: Board) -> None:
        assert Rules.material_balance(start_board) == 0

    def test_extra_queen(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/3QK3 w - - 0 1")
        assert board.material_value(Color.WHITE) == 9
        assert board.material_value(Color.BLACK) == 0
        assert Rules.material_balance(board) == 9

    def test_balance_after_capture(self, start_board: Board, play) -> None:
        play(start_board, "e4", "d5", "exd5")
        assert Rules.material_balance(start_board) == 1
