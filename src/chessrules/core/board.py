"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Position

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


def _index(pos: Position) -> int:
    if not pos.is_on_board():
        raise IndexError(f"Position off the board: {pos!r}")
    return (pos.row - 1) * BOARD_SIZE + (pos.column - 1)


def _position(index: int) -> Position:
    return Position(index // BOARD_SIZE + 1, index % BOARD_SIZE + 1)


class Board:
    """Mutable 64-square board. Pure storage, no rules."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[_index(pos)]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        self._squares[_index(pos)] = piece

    def is_empty(self, pos: Position) -> bool:
        return self[pos] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Position, Piece]]:
        """Occupied squares (optionally only *color*'s), row by row from row 1."""
        for idx, piece in enumerate(self._squares):
            if piece is None:
                continue
            if color is not None and piece.color != color:
                continue
            yield _position(idx), piece

    def king_position(self, color: Color) -> Position | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        for pos, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return pos
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self, keep_state: bool = False) -> Board:
        """Independent copy with fresh pieces.

        Per-piece flags (``has_moved``, en passant) are dropped unless
        *keep_state* is true.
        """
        b = Board()
        b._squares = [
            None if piece is None else piece.copy(keep_state)
            for piece in self._squares
        ]
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)

    def reset(self) -> None:
        """Set up the standard starting position."""
        self.clear()
        for col, pt in enumerate(_BACK_RANK, start=1):
            self[Position(1, col)] = Piece(Color.WHITE, pt)
            self[Position(2, col)] = Piece(Color.WHITE, PieceType.PAWN)
            self[Position(7, col)] = Piece(Color.BLACK, PieceType.PAWN)
            self[Position(8, col)] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            cells = []
            for col in range(1, BOARD_SIZE + 1):
                p = self[Position(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
