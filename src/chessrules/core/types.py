"""Board coordinates.

Rows and columns are 1-indexed, matching over-the-board ranks and files:
row 1 is White's back rank, column 1 is the a-file.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, column) coordinate on the board."""

    row: int
    column: int

    def is_on_board(self) -> bool:
        return 1 <= self.row <= BOARD_SIZE and 1 <= self.column <= BOARD_SIZE

    def offset(self, d_row: int, d_col: int) -> Position:
        """Neighbouring coordinate; the result may lie off the board."""
        return Position(self.row + d_row, self.column + d_col)

    def __repr__(self) -> str:
        return f"Position({self.row}, {self.column})"


def all_positions() -> list[Position]:
    """Every square, row by row from row 1."""
    return [
        Position(row, col)
        for row in range(1, BOARD_SIZE + 1)
        for col in range(1, BOARD_SIZE + 1)
    ]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(1, c) for c in range(1, 9))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(2, c) for c in range(1, 9))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(3, c) for c in range(1, 9))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(4, c) for c in range(1, 9))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(5, c) for c in range(1, 9))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(6, c) for c in range(1, 9))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(7, c) for c in range(1, 9))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(8, c) for c in range(1, 9))
