"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Position
from chessrules.game.game import Game

_LETTERS: dict[str, PieceType] = {
    "k": PieceType.KING,
    "q": PieceType.QUEEN,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
    "r": PieceType.ROOK,
    "p": PieceType.PAWN,
}

BoardLoader = Callable[[str], Board]


def _load_board(diagram: str) -> Board:
    """Build a board from an 8-line diagram, row 8 first.

    Uppercase letters are white, lowercase black, ``.`` is an empty square.
    """
    lines = [line.strip() for line in diagram.strip().splitlines()]
    if len(lines) != 8 or any(len(line) != 8 for line in lines):
        raise ValueError(f"Diagram must be 8x8: {diagram!r}")
    board = Board()
    for i, line in enumerate(lines):
        row = 8 - i
        for col, ch in enumerate(line, start=1):
            if ch == ".":
                continue
            color = Color.WHITE if ch.isupper() else Color.BLACK
            board[Position(row, col)] = Piece(color, _LETTERS[ch.lower()])
    return board


@pytest.fixture
def load_board() -> BoardLoader:
    """Parse a text diagram into a :class:`Board`."""
    return _load_board


@pytest.fixture
def load_game() -> Callable[..., Game]:
    """Parse a text diagram into a :class:`Game` with the given side to move."""

    def _load(diagram: str, team_turn: Color = Color.WHITE) -> Game:
        return Game(_load_board(diagram), team_turn)

    return _load


@pytest.fixture
def game() -> Game:
    """A new game from the standard starting position."""
    return Game()
