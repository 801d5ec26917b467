"""Board - piece placement, side to move and move history on an 8x8 grid."""

from __future__ import annotations

import logging

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.position import ALL_POSITIONS, Position

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable game board: the chess state machine.

    Holds the 64-square grid, the side to move, the append-only move
    history and the en-passant target. :meth:`make_move` is the only
    operation that changes game state; every query (legality, check,
    mate, FEN) leaves the board untouched.
    """

    __slots__ = ("_squares", "_turn", "_history", "_en_passant", "_ply_offset")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self._turn = Color.WHITE
        self._history: list[Move] = []
        self._en_passant: Position | None = None
        # Plies played before this board took over (non-zero for FEN setups).
        self._ply_offset = 0

        for col in range(8):
            self._squares[Position(1, col).index] = Piece(PieceType.PAWN, Color.WHITE)
            self._squares[Position(6, col).index] = Piece(PieceType.PAWN, Color.BLACK)
        for col, ptype in enumerate(_BACK_RANK):
            self._squares[Position(0, col).index] = Piece(ptype, Color.WHITE)
            self._squares[Position(7, col).index] = Piece(ptype, Color.BLACK)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(
        cls,
        side_to_move: Color = Color.WHITE,
        en_passant_target: Position | None = None,
        fullmove_number: int = 1,
    ) -> Board:
        """Board with no pieces, ready for :meth:`place` calls."""
        board = cls.__new__(cls)
        board._squares = [None] * 64
        board._turn = side_to_move
        board._history = []
        board._en_passant = en_passant_target
        board._ply_offset = (fullmove_number - 1) * 2 + int(side_to_move)
        return board

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        from chessrules.core.notation.fen import board_from_fen

        return board_from_fen(fen)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[pos.index]

    def piece_at(self, pos: Position) -> Piece | None:
        return self._squares[pos.index]

    def place(self, pos: Position, piece: Piece | None) -> None:
        """Put *piece* on *pos* (or clear it) without any rule checks."""
        self._squares[pos.index] = piece

    def pieces(self, color: Color) -> list[tuple[Position, Piece]]:
        """``(position, piece)`` pairs for every piece of *color*."""
        return [
            (ALL_POSITIONS[idx], piece)
            for idx, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def king_position(self, color: Color) -> Position | None:
        for idx, piece in enumerate(self._squares):
            if (
                piece is not None
                and piece.piece_type == PieceType.KING
                and piece.color == color
            ):
                return ALL_POSITIONS[idx]
        return None

    # -- Game state ---------------------------------------------------------

    @property
    def current_turn(self) -> Color:
        return self._turn

    @property
    def en_passant_target(self) -> Position | None:
        """Square skipped by a pawn's double step on the previous move."""
        return self._en_passant

    @property
    def move_history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def ply_count(self) -> int:
        return self._ply_offset + len(self._history)

    @property
    def fullmove_number(self) -> int:
        return self.ply_count // 2 + 1

    # -- Moves --------------------------------------------------------------

    def is_valid_move(self, move: Move, color: Color) -> bool:
        """Whether *color* may legally play *move* in this position."""
        return MoveGenerator(self).is_legal(move, color)

    def make_move(self, move: Move) -> bool:
        """Validate and apply *move* for the side to move.

        Returns ``False`` and leaves the board untouched when the move is
        illegal.
        """
        color = self._turn
        if not self.is_valid_move(move, color):
            _LOGGER.debug("Rejected move %s for %s", move, color)
            return False

        piece = self[move.from_pos]
        assert piece is not None

        if move.is_en_passant:
            capture_pos = Position(move.from_pos.row, move.to_pos.col)
            move.captured_piece = self[capture_pos]
            self.place(capture_pos, None)
        else:
            move.captured_piece = self[move.to_pos]

        if move.is_castling:
            self._castle(move, piece)
        else:
            placed = piece.moved()
            if (
                piece.piece_type == PieceType.PAWN
                and move.to_pos.row == color.opposite.home_row
            ):
                if move.promotion is None:
                    move.promotion = PieceType.QUEEN
                placed = Piece(move.promotion, color, has_moved=True)
            self.place(move.from_pos, None)
            self.place(move.to_pos, placed)

        self._en_passant = None
        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.to_pos.row - move.from_pos.row) == 2
        ):
            self._en_passant = Position(
                (move.from_pos.row + move.to_pos.row) // 2, move.from_pos.col
            )

        self._history.append(move)
        self._turn = color.opposite
        return True

    def simulate(self, move: Move) -> Board:
        """Scratch board with *move*'s pieces relocated, rules unchecked.

        Only the grid changes: side to move, en-passant target and history
        are carried over as they are.
        """
        scratch = Board.empty(self._turn, self._en_passant)
        scratch._squares = self._squares.copy()

        piece = scratch[move.from_pos]
        scratch.place(move.from_pos, None)
        scratch.place(move.to_pos, piece)
        if move.is_en_passant:
            scratch.place(Position(move.from_pos.row, move.to_pos.col), None)
        if move.is_castling:
            rook_from, rook_to = _rook_squares(move)
            scratch.place(rook_to, scratch[rook_from])
            scratch.place(rook_from, None)
        return scratch

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """Every legal move for *color* (default: side to move)."""
        return MoveGenerator(self).generate_legal_moves(
            self._turn if color is None else color
        )

    def has_legal_move(self, color: Color) -> bool:
        return MoveGenerator(self).has_legal_move(color)

    # -- Check / terminal states --------------------------------------------

    def is_square_attacked(self, pos: Position, by_color: Color) -> bool:
        return MoveGenerator(self).is_square_attacked(pos, by_color)

    def is_in_check(self, color: Color) -> bool:
        return MoveGenerator(self).is_in_check(color)

    def is_checkmate(self, color: Color) -> bool:
        gen = MoveGenerator(self)
        return gen.is_in_check(color) and not gen.has_legal_move(color)

    def is_stalemate(self, color: Color) -> bool:
        gen = MoveGenerator(self)
        return not gen.is_in_check(color) and not gen.has_legal_move(color)

    # -- Serialisation / copying --------------------------------------------

    def to_fen(self, include_en_passant: bool = False) -> str:
        from chessrules.core.notation.fen import board_to_fen

        return board_to_fen(self, include_en_passant=include_en_passant)

    def copy(self) -> Board:
        """Deep copy: fresh pieces, same turn, history and en-passant target."""
        b = Board.empty(self._turn, self._en_passant)
        b._squares = [p.clone() if p is not None else None for p in self._squares]
        b._history = self._history.copy()
        b._ply_offset = self._ply_offset
        return b

    def material_value(self, color: Color) -> int:
        """Sum of conventional piece values for *color* (king counts 0)."""
        return sum(piece.value for _, piece in self.pieces(color))

    # -- Private helpers ----------------------------------------------------

    def _castle(self, move: Move, king: Piece) -> None:
        rook_from, rook_to = _rook_squares(move)
        rook = self[rook_from]
        self.place(move.from_pos, None)
        self.place(move.to_pos, king.moved())
        self.place(rook_from, None)
        self.place(rook_to, rook.moved() if rook is not None else None)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self._turn == other._turn
            and self._en_passant == other._en_passant
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = []
            for col in range(8):
                p = self[Position(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def _rook_squares(move: Move) -> tuple[Position, Position]:
    """Rook origin and destination for a castling *move*."""
    row = move.from_pos.row
    if move.to_pos.col == 6:
        return Position(row, 7), Position(row, 5)
    return Position(row, 0), Position(row, 3)
