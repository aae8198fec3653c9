"""Piece with its per-game runtime flags."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move

_LETTERS: dict[PieceType, str] = {
    PieceType.KING: "k",
    PieceType.QUEEN: "q",
    PieceType.BISHOP: "b",
    PieceType.KNIGHT: "n",
    PieceType.ROOK: "r",
    PieceType.PAWN: "p",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(slots=True)
class Piece:
    """A chess piece.

    Identity is ``(color, piece_type)``. The remaining fields are mutable
    game state and take no part in equality:

    * ``has_moved`` is set the first time the piece moves and never resets.
    * ``en_passant_move`` is the capture this pawn may play en passant, and
      ``en_passant_ply`` the game ply on which that capture may be played.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = field(default=False, compare=False)
    en_passant_move: Move | None = field(default=None, compare=False)
    en_passant_ply: int | None = field(default=None, compare=False)

    @property
    def en_passant_eligible(self) -> bool:
        return self.en_passant_move is not None

    def grant_en_passant(self, move: Move, ply: int) -> None:
        self.en_passant_move = move
        self.en_passant_ply = ply

    def clear_en_passant(self) -> None:
        self.en_passant_move = None
        self.en_passant_ply = None

    def copy(self, keep_state: bool = False) -> Piece:
        """Independent copy; runtime flags are reset unless *keep_state*."""
        if not keep_state:
            return Piece(self.color, self.piece_type)
        return Piece(
            self.color,
            self.piece_type,
            has_moved=self.has_moved,
            en_passant_move=self.en_passant_move,
            en_passant_ply=self.en_passant_ply,
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """One-letter code (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
