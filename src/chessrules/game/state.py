"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, auto

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.move import Move
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    match_legal_move,
    move_to_san_with_suffix,
    parse_move_text,
)
from chessrules.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Lifecycle states of a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    san: str
    fen_after: str
    was_check: bool = False
    was_capture: bool = False


@dataclass
class GameState:
    """One game: the board, its phase and result, and annotated history.

    This is a pure data/logic class — no threading, no I/O. Moves arrive
    either as :class:`Move` objects, as user text (SAN or long algebraic)
    or as replies from an external move-suggestion service.
    """

    include_en_passant: bool = False
    board: Board = field(default_factory=Board, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self.board = board_from_fen(self.start_fen)
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord | None:
        """Play *move* if legal; ``None`` (and no change) otherwise."""
        if self.phase == GamePhase.GAME_OVER:
            return None
        if not self.board.is_valid_move(move, self.board.current_turn):
            _LOGGER.debug("Illegal move %s", move)
            return None

        piece = self.board[move.from_pos]
        if (
            move.promotion is None
            and piece is not None
            and piece.piece_type == PieceType.PAWN
            and move.to_pos.row == piece.color.opposite.home_row
        ):
            move.promotion = PieceType.QUEEN

        san = move_to_san_with_suffix(self.board, move)
        self.board.make_move(move)

        record = MoveRecord(
            move=move,
            san=san,
            fen_after=self.fen(),
            was_check=self.board.is_in_check(self.board.current_turn),
            was_capture=move.is_capture,
        )
        self.move_history.append(record)
        self._check_game_over()
        return record

    def submit(self, text: str) -> MoveRecord | None:
        """Play a move typed as SAN (``Nf3``) or long algebraic (``g1f3``)."""
        move = parse_move_text(self.board, text)
        if move is None:
            return None
        return self.apply_move(move)

    def submit_engine_move(self, text: str) -> MoveRecord | None:
        """Play the move named by an external suggestion service."""
        move = match_legal_move(self.board, text)
        if move is None:
            _LOGGER.warning("Suggested move %r matches no legal move", text)
            return None
        return self.apply_move(move)

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        board = board_from_fen(self.start_fen)
        for kept in self.move_history:
            board.make_move(_replay_copy(kept.move))
        self.board = board

        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE
        self._check_game_over()
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.board.current_turn

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return self.board.fullmove_number

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return self.board.legal_moves()

    def fen(self) -> str:
        return self.board.to_fen(include_en_passant=self.include_en_passant)

    def san_history(self) -> list[str]:
        return [record.san for record in self.move_history]

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER


def _replay_copy(move: Move) -> Move:
    return Move(
        move.from_pos,
        move.to_pos,
        move.promotion,
        is_castling=move.is_castling,
        is_en_passant=move.is_en_passant,
    )
