"""chessrules — a chess rules engine.

Enumerates legal moves, applies them (castling, en passant and promotion
included) and classifies check, checkmate and stalemate.
"""

from chessrules.core import (
    BOARD_SIZE,
    PROMOTION_TYPES,
    Board,
    Color,
    GameStatus,
    Move,
    MoveGenerator,
    Piece,
    PieceType,
    Position,
)
from chessrules.game import Game, InvalidMoveError

__version__ = "0.1.0"

__all__ = [
    "BOARD_SIZE",
    "PROMOTION_TYPES",
    "Board",
    "Color",
    "Game",
    "GameStatus",
    "InvalidMoveError",
    "Move",
    "MoveGenerator",
    "Piece",
    "PieceType",
    "Position",
]
