"""Movement geometry, attack detection and legal move generation."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import (
    KING_HOME_COL,
    KINGSIDE_KING_COL,
    QUEENSIDE_KING_COL,
    Move,
)
from chessrules.core.piece import Piece
from chessrules.core.position import ALL_POSITIONS, Position

if TYPE_CHECKING:
    from chessrules.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_SLIDING_TYPES = frozenset({PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN})
_KINGSIDE_ROOK_COL = 7
_QUEENSIDE_ROOK_COL = 0


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Position, ...], ...]:
    targets: list[tuple[Position, ...]] = []
    for pos in ALL_POSITIONS:
        moves = [pos.offset(dr, dc) for dr, dc in offsets]
        targets.append(tuple(p for p in moves if p is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Position, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Position, ...], ...]] = []
    for pos in ALL_POSITIONS:
        square_rays: list[tuple[Position, ...]] = []
        for dr, dc in directions:
            ray: list[Position] = []
            step = pos.offset(dr, dc)
            while step is not None:
                ray.append(step)
                step = step.offset(dr, dc)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_RAYS: dict[PieceType, tuple[tuple[tuple[Position, ...], ...], ...]] = {
    PieceType.BISHOP: _build_rays(BISHOP_DIRS),
    PieceType.ROOK: _build_rays(ROOK_DIRS),
    PieceType.QUEEN: _build_rays(QUEEN_DIRS),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class MoveGenerator:
    """Answers legality questions for a :class:`Board`.

    Every check that needs to look one move ahead runs on a scratch board
    from :meth:`Board.simulate`; the board passed in is never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Legality -----------------------------------------------------------

    def is_legal(self, move: Move, color: Color) -> bool:
        """Full legality test for *move* played by *color*.

        Recomputes ``move.is_en_passant`` from the board, whatever the caller
        set, and flags ``move.is_castling`` for a king stepping two files off
        its home square (coordinate-form castling such as ``e1g1``).
        """
        board = self._board
        # Only pawn geometry against the en-passant target may set this.
        move.is_en_passant = False

        piece = board[move.from_pos]
        if piece is None or piece.color != color:
            return False

        target = board[move.to_pos]
        if target is not None and target.color == color:
            return False

        if not move.is_castling and self._is_castling_shape(piece, move):
            move.is_castling = True
        if move.is_castling:
            return self._is_castling_request(piece, move) and self.can_castle(
                color, move.to_pos.col == KINGSIDE_KING_COL
            )

        if not self._is_valid_promotion(piece, move):
            return False

        if not self.matches_geometry(piece, move):
            return False

        if not self.is_path_clear(move.from_pos, move.to_pos, piece.piece_type):
            return False

        return not self.leaves_king_in_check(move, color)

    def matches_geometry(self, piece: Piece, move: Move) -> bool:
        """Whether *move* fits *piece*'s movement pattern on this board."""
        d_row = move.to_pos.row - move.from_pos.row
        d_col = move.to_pos.col - move.from_pos.col
        ptype = piece.piece_type

        if ptype == PieceType.PAWN:
            return self._matches_pawn(piece, move, d_row, d_col)
        if ptype == PieceType.KNIGHT:
            return (abs(d_row), abs(d_col)) in ((2, 1), (1, 2))
        if ptype == PieceType.BISHOP:
            return d_row != 0 and abs(d_row) == abs(d_col)
        if ptype == PieceType.ROOK:
            return (d_row == 0) != (d_col == 0)
        if ptype == PieceType.QUEEN:
            if d_row == 0 and d_col == 0:
                return False
            return d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)
        if ptype == PieceType.KING:
            return max(abs(d_row), abs(d_col)) == 1
        return False

    def is_path_clear(
        self, from_pos: Position, to_pos: Position, piece_type: PieceType
    ) -> bool:
        """No piece stands strictly between *from_pos* and *to_pos*."""
        if piece_type == PieceType.KNIGHT:
            return True

        board = self._board
        step_row = _sign(to_pos.row - from_pos.row)
        step_col = _sign(to_pos.col - from_pos.col)
        row = from_pos.row + step_row
        col = from_pos.col + step_col
        while (row, col) != (to_pos.row, to_pos.col):
            if board[Position(row, col)] is not None:
                return False
            row += step_row
            col += step_col
        return True

    def leaves_king_in_check(self, move: Move, color: Color) -> bool:
        """Would *color*'s king stand in check after *move*?"""
        scratch = self._board.simulate(move)
        return MoveGenerator(scratch).is_in_check(color)

    def can_castle(self, color: Color, kingside: bool) -> bool:
        """Castling predicate: unmoved king and rook, empty and safe path."""
        board = self._board
        row = color.home_row
        king = board[Position(row, KING_HOME_COL)]
        if (
            king is None
            or king.piece_type != PieceType.KING
            or king.color != color
            or king.has_moved
        ):
            return False

        rook_col = _KINGSIDE_ROOK_COL if kingside else _QUEENSIDE_ROOK_COL
        rook = board[Position(row, rook_col)]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != color
            or rook.has_moved
        ):
            return False

        if self.is_in_check(color):
            return False

        between = range(5, 7) if kingside else range(1, 4)
        if any(board[Position(row, col)] is not None for col in between):
            return False

        transit = (5, 6) if kingside else (3, 2)
        opponent = color.opposite
        return not any(
            self.is_square_attacked(Position(row, col), opponent) for col in transit
        )

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked? ``False`` when there is no king."""
        king_pos = self._board.king_position(color)
        if king_pos is None:
            return False
        return self.is_square_attacked(king_pos, color.opposite)

    def is_square_attacked(self, pos: Position, by_color: Color) -> bool:
        """Is *pos* attacked by any piece of *by_color*?"""
        for from_pos, piece in self._board.pieces(by_color):
            if self.attacks(piece, from_pos, pos):
                return True
        return False

    def attacks(self, piece: Piece, from_pos: Position, target: Position) -> bool:
        """Does *piece* on *from_pos* attack *target*?

        Pawns attack their forward diagonals whether or not anything stands
        there; the other pieces reuse the movement geometry.
        """
        if from_pos == target:
            return False
        d_row = target.row - from_pos.row
        d_col = target.col - from_pos.col
        ptype = piece.piece_type

        if ptype == PieceType.PAWN:
            return d_row == piece.color.pawn_direction and abs(d_col) == 1
        if ptype == PieceType.KNIGHT:
            return (abs(d_row), abs(d_col)) in ((2, 1), (1, 2))
        if ptype == PieceType.KING:
            return max(abs(d_row), abs(d_col)) == 1

        straight = d_row == 0 or d_col == 0
        diagonal = abs(d_row) == abs(d_col)
        if ptype == PieceType.BISHOP and not diagonal:
            return False
        if ptype == PieceType.ROOK and not straight:
            return False
        if ptype == PieceType.QUEEN and not (straight or diagonal):
            return False
        return self.is_path_clear(from_pos, target, ptype)

    # -- Enumeration --------------------------------------------------------

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*."""
        moves: list[Move] = []
        for from_pos, piece in self._board.pieces(color):
            moves.extend(self._legal_moves_from(from_pos, piece, color))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        for from_pos, piece in self._board.pieces(color):
            for _ in self._legal_moves_from(from_pos, piece, color):
                return True
        return False

    # -- Private helpers ----------------------------------------------------

    def _legal_moves_from(
        self, from_pos: Position, piece: Piece, color: Color
    ) -> Iterator[Move]:
        board = self._board
        last_row = color.opposite.home_row

        for to_pos in self._candidate_targets(from_pos, piece):
            move = Move(from_pos, to_pos)
            if not self.is_legal(move, color):
                continue

            captured = board[to_pos]
            if move.is_en_passant:
                captured = board[Position(from_pos.row, to_pos.col)]

            if piece.piece_type == PieceType.PAWN and to_pos.row == last_row:
                for ptype in PROMOTION_TYPES:
                    yield Move(from_pos, to_pos, ptype, captured_piece=captured)
            else:
                move.captured_piece = captured
                yield move

        if piece.piece_type == PieceType.KING:
            for kingside in (True, False):
                castle = Move.castle(color, kingside)
                if castle.from_pos == from_pos and self.is_legal(castle, color):
                    yield castle

    def _candidate_targets(self, from_pos: Position, piece: Piece) -> list[Position]:
        """Squares *piece* could reach ignoring checks (a superset of legal)."""
        ptype = piece.piece_type
        if ptype == PieceType.KNIGHT:
            return list(_KNIGHT_TARGETS[from_pos.index])
        if ptype == PieceType.KING:
            return list(_KING_TARGETS[from_pos.index])
        if ptype == PieceType.PAWN:
            step = piece.color.pawn_direction
            offsets = ((step, 0), (2 * step, 0), (step, -1), (step, 1))
            candidates = [from_pos.offset(dr, dc) for dr, dc in offsets]
            return [p for p in candidates if p is not None]

        board = self._board
        targets: list[Position] = []
        for ray in _RAYS[ptype][from_pos.index]:
            for to_pos in ray:
                targets.append(to_pos)
                if board[to_pos] is not None:
                    break
        return targets

    def _matches_pawn(self, piece: Piece, move: Move, d_row: int, d_col: int) -> bool:
        board = self._board
        step = piece.color.pawn_direction
        target = board[move.to_pos]

        if d_col == 0:
            if target is not None:
                return False
            if d_row == step:
                return True
            start_row = piece.color.home_row + step
            if d_row == 2 * step and move.from_pos.row == start_row:
                middle = Position(move.from_pos.row + step, move.from_pos.col)
                return board[middle] is None
            return False

        if abs(d_col) != 1 or d_row != step:
            return False

        if target is not None:
            return target.color != piece.color

        ep_target = board.en_passant_target
        if ep_target is not None and move.to_pos == ep_target:
            victim = board[Position(move.from_pos.row, move.to_pos.col)]
            if (
                victim is not None
                and victim.piece_type == PieceType.PAWN
                and victim.color != piece.color
            ):
                move.is_en_passant = True
                return True
        return False

    @staticmethod
    def _is_valid_promotion(piece: Piece, move: Move) -> bool:
        if move.promotion is None:
            return True
        return (
            piece.piece_type == PieceType.PAWN
            and move.to_pos.row == piece.color.opposite.home_row
            and move.promotion in PROMOTION_TYPES
        )

    @staticmethod
    def _is_castling_shape(piece: Piece, move: Move) -> bool:
        home_row = piece.color.home_row
        return (
            piece.piece_type == PieceType.KING
            and move.from_pos == Position(home_row, KING_HOME_COL)
            and move.to_pos.row == home_row
            and move.to_pos.col in (KINGSIDE_KING_COL, QUEENSIDE_KING_COL)
        )

    def _is_castling_request(self, piece: Piece, move: Move) -> bool:
        return self._is_castling_shape(piece, move) and move.promotion is None
