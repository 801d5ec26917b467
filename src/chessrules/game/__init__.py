"""Game session layer — one game's board, history and result.

Quick start::

    from chessrules.game import GameState

    game = GameState()
    game.setup()
    game.submit("e4")
    game.submit_engine_move("e7e5")
"""

from chessrules.game.state import GamePhase, GameState, MoveRecord

__all__ = [
    "GamePhase",
    "GameState",
    "MoveRecord",
]
