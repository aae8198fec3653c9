"""Game layer — turn order, castling, en passant and game-state queries.

Quick start::

    from chessrules.game import Game
    from chessrules.core import Move, Position

    game = Game()
    game.make_move(Move(Position(2, 5), Position(4, 5)))
"""

from chessrules.game.game import Game, InvalidMoveError

__all__ = [
    "Game",
    "InvalidMoveError",
]
