"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.notation import board_from_fen, parse_move_text

PlayFn = Callable[..., Board]


def _play(board: Board, *moves: str) -> Board:
    for text in moves:
        move = parse_move_text(board, text)
        assert move is not None, f"Unparsable move {text!r}"
        assert board.make_move(move), f"Illegal move {text!r}\n{board!r}"
    return board


@pytest.fixture
def start_board() -> Board:
    """Fresh board in the standard starting position."""
    return Board()


@pytest.fixture
def board_from() -> Callable[[str], Board]:
    """Factory fixture building a board from FEN."""
    return board_from_fen


@pytest.fixture
def play() -> PlayFn:
    """Play moves (SAN or long algebraic) on a board, asserting each one."""
    return _play
