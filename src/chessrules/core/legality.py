"""Legality filter: copy the board, apply the move, look for check.

Every candidate is simulated on a fresh, independent copy of the board, so
a speculative or malformed move can never corrupt the live position. The
copies carry no ``has_moved`` / en passant flags; only the geometry matters
for deciding whether a king is attacked.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.move import Move
    from chessrules.core.types import Position

_LOGGER = logging.getLogger(__name__)


def apply_unchecked(board: Board, move: Move, captured: Position | None = None) -> None:
    """Play *move* on *board* without any rule checks.

    Promotion replaces the pawn by a piece of the promoted type. *captured*,
    when given, is an extra square to empty (the pawn taken en passant).
    Raises ``ValueError`` if there is no piece on ``move.start`` and
    ``IndexError`` for off-board squares.
    """
    piece = board[move.start]
    if piece is None:
        raise ValueError(f"No piece on {move.start!r}")
    if move.promotion is not None:
        piece = Piece(
            piece.color,
            move.promotion,
            has_moved=piece.has_moved,
        )
    board[move.start] = None
    if captured is not None:
        board[captured] = None
    board[move.end] = piece


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by any opposing piece?

    A board without a king of *color* is never in check.
    """
    gen = MoveGenerator(board)
    for pos, piece in board.pieces(color.opposite):
        for move in gen.piece_moves(pos):
            target = board[move.end]
            if (
                target is not None
                and target.color == color
                and target.piece_type == PieceType.KING
            ):
                return True
    return False


def would_expose_king(
    board: Board, move: Move, color: Color, captured: Position | None = None
) -> bool:
    """Would playing *move* leave *color*'s king in check?

    A move that cannot even be applied to the scratch board counts as
    leaving the king in check.
    """
    scratch = board.copy()
    try:
        apply_unchecked(scratch, move, captured)
    except (ValueError, IndexError) as exc:
        _LOGGER.debug("Simulation of %r failed, treating as illegal: %s", move, exc)
        return True
    return is_in_check(scratch, color)


def legal_piece_moves(board: Board, position: Position) -> list[Move]:
    """Pseudo-legal moves of the piece on *position* that keep its king safe."""
    piece = board[position]
    if piece is None:
        return []
    return [
        move
        for move in MoveGenerator(board).piece_moves(position)
        if not would_expose_king(board, move, piece.color)
    ]


def has_legal_move(board: Board, color: Color) -> bool:
    """Does *color* have at least one ordinary legal move?

    Castling and en passant are not considered.
    """
    return any(legal_piece_moves(board, pos) for pos, _ in board.pieces(color))
