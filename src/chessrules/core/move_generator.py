"""Pseudo-legal move generation, one generator per piece type."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.types import BOARD_SIZE, Position

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece


# Offsets are (d_row, d_col).
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

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, 1), (1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS
KING_OFFSETS: tuple[tuple[int, int], ...] = QUEEN_DIRS

# color -> (row direction, starting row, promotion row)
PAWN_RULES: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (1, 2, BOARD_SIZE),
    Color.BLACK: (-1, BOARD_SIZE - 1, 1),
}


class MoveGenerator:
    """Generates the geometrically possible moves of single pieces.

    Moves that would leave the mover's own king in check are *not* filtered
    out here; see :mod:`chessrules.core.legality`. The board is never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def piece_moves(self, position: Position) -> list[Move]:
        """Pseudo-legal moves of the piece on *position* (empty if none)."""
        piece = self._board[position]
        if piece is None:
            return []
        moves: list[Move] = []
        _GENERATORS[piece.piece_type](self, position, piece, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_sliding(
        self,
        sq: Position,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
        max_steps: int = BOARD_SIZE - 1,
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            to_sq = sq
            for _ in range(max_steps):
                to_sq = to_sq.offset(d_row, d_col)
                if not to_sq.is_on_board():
                    break
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_bishop(self, sq: Position, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece.color, BISHOP_DIRS, moves)

    def _gen_rook(self, sq: Position, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece.color, ROOK_DIRS, moves)

    def _gen_queen(self, sq: Position, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece.color, QUEEN_DIRS, moves)

    def _gen_king(self, sq: Position, piece: Piece, moves: list[Move]) -> None:
        self._gen_sliding(sq, piece.color, KING_OFFSETS, moves, max_steps=1)

    def _gen_knight(self, sq: Position, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        for d_row, d_col in KNIGHT_OFFSETS:
            to_sq = sq.offset(d_row, d_col)
            if not to_sq.is_on_board():
                continue
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq))

    def _gen_pawn(self, sq: Position, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        direction, start_row, promotion_row = PAWN_RULES[piece.color]

        one_step = sq.offset(direction, 0)
        if one_step.is_on_board() and board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, promotion_row, moves)
            if sq.row == start_row:
                two_step = one_step.offset(direction, 0)
                if two_step.is_on_board() and board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for d_col in (-1, 1):
            cap_sq = sq.offset(direction, d_col)
            if not cap_sq.is_on_board():
                continue
            target = board[cap_sq]
            if target is not None and target.color != piece.color:
                self._add_pawn_move(sq, cap_sq, promotion_row, moves)

    @staticmethod
    def _add_pawn_move(
        sq: Position, to_sq: Position, promotion_row: int, moves: list[Move]
    ) -> None:
        if to_sq.row == promotion_row:
            for pt in PROMOTION_TYPES:
                moves.append(Move(sq, to_sq, pt))
        else:
            moves.append(Move(sq, to_sq))


_GENERATORS: dict[
    PieceType, Callable[[MoveGenerator, Position, Piece, list[Move]], None]
] = {
    PieceType.KING: MoveGenerator._gen_king,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.PAWN: MoveGenerator._gen_pawn,
}
