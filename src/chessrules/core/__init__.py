"""Core domain layer — board, pieces and per-piece move rules.

Quick start::

    from chessrules.core import Board, MoveGenerator, is_in_check
    from chessrules.core.types import E2

    board = Board.initial()
    for move in MoveGenerator(board).piece_moves(E2):
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus, PieceType
from chessrules.core.legality import (
    apply_unchecked,
    has_legal_move,
    is_in_check,
    legal_piece_moves,
    would_expose_king,
)
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Position, all_positions

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / constants
    "BOARD_SIZE",
    "PROMOTION_TYPES",
    "Position",
    "all_positions",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    # Legality
    "apply_unchecked",
    "has_legal_move",
    "is_in_check",
    "legal_piece_moves",
    "would_expose_king",
]
