"""Game — turn order, special moves and terminal-state queries.

Owns the live :class:`Board` and the side to move. Move legality is
delegated to :mod:`chessrules.core.legality`; castling and en passant are
layered on top here because they depend on per-piece history flags.
"""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus, PieceType
from chessrules.core.legality import (
    apply_unchecked,
    has_legal_move,
    is_in_check,
    legal_piece_moves,
    would_expose_king,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import PAWN_RULES
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Position

_LOGGER = logging.getLogger(__name__)

# (rook start column, rook end column) keyed by the king's column step.
_CASTLING_ROOK_COLUMNS: dict[int, tuple[int, int]] = {
    1: (BOARD_SIZE, 6),
    -1: (1, 4),
}


class InvalidMoveError(Exception):
    """Raised by :meth:`Game.make_move` for a move that may not be played.

    Wrong side to move, impossible geometry and moves that leave the king in
    check are all reported the same way.
    """

    def __init__(self, move: Move) -> None:
        super().__init__(f"Invalid move: {move!r}")
        self.move = move


class Game:
    """A chess game: board, side to move and the rules that connect them.

    Thread-safety: none. Callers must serialise access to a single game.
    """

    __slots__ = ("_board", "_team_turn", "_ply")

    def __init__(
        self, board: Board | None = None, team_turn: Color = Color.WHITE
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._team_turn = team_turn
        self._ply = 0

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @board.setter
    def board(self, board: Board) -> None:
        for _, piece in board.pieces():
            piece.clear_en_passant()
        self._board = board

    @property
    def team_turn(self) -> Color:
        return self._team_turn

    @team_turn.setter
    def team_turn(self, color: Color) -> None:
        self._team_turn = color

    @property
    def ply(self) -> int:
        """Number of moves applied through :meth:`make_move`."""
        return self._ply

    @staticmethod
    def other_team(color: Color) -> Color:
        return color.opposite

    # ── Move queries ─────────────────────────────────────────────────────

    def valid_moves(self, position: Position) -> list[Move]:
        """Legal moves of the piece on *position*; empty if the square is empty."""
        piece = self._board[position]
        if piece is None:
            return []

        moves = legal_piece_moves(self._board, position)
        if piece.piece_type == PieceType.KING:
            moves.extend(self._castling_moves(position, piece))
        elif piece.piece_type == PieceType.PAWN:
            ep_move = self._en_passant_move(position, piece)
            if ep_move is not None and not would_expose_king(
                self._board, ep_move, piece.color, _en_passant_victim(ep_move)
            ):
                moves.append(ep_move)
        return moves

    # ── Move application ─────────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Validate and play *move*, then pass the turn.

        Raises :class:`InvalidMoveError` without touching the game if the
        move is not legal for the side to move.
        """
        if not (move.start.is_on_board() and move.end.is_on_board()):
            _LOGGER.debug("Rejected off-board %r", move)
            raise InvalidMoveError(move)
        piece = self._board[move.start]
        if (
            piece is None
            or piece.color != self._team_turn
            or move not in self.valid_moves(move.start)
        ):
            _LOGGER.debug("Rejected %r (%s to move)", move, self._team_turn)
            raise InvalidMoveError(move)

        captured: Position | None = None
        if move == self._en_passant_move(move.start, piece):
            captured = _en_passant_victim(move)
        self._expire_en_passant(piece.color)

        apply_unchecked(self._board, move, captured)
        moved = self._board[move.end]
        assert moved is not None
        moved.has_moved = True

        if (
            piece.piece_type == PieceType.PAWN
            and abs(move.end.row - move.start.row) == 2
        ):
            self._grant_en_passant(move.end, piece.color)
        elif (
            piece.piece_type == PieceType.KING
            and abs(move.end.column - move.start.column) == 2
        ):
            self._move_castling_rook(move)

        self._ply += 1
        self._team_turn = self._team_turn.opposite
        _LOGGER.debug("Played %r, %s to move", move, self._team_turn)

    # ── State queries ────────────────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        return is_in_check(self._board, color)

    def is_in_checkmate(self, color: Color) -> bool:
        if not self.is_in_check(color):
            return False
        return not has_legal_move(self._board, color)

    def is_in_stalemate(self, color: Color) -> bool:
        if self.is_in_check(color):
            return False
        return all(
            not self.valid_moves(pos) for pos, _ in list(self._board.pieces(color))
        )

    def status(self, color: Color | None = None) -> GameStatus:
        """Classify the position for *color* (default: the side to move).

        Purely a query; a finished game still accepts moves.
        """
        if color is None:
            color = self._team_turn
        if self.is_in_checkmate(color):
            return GameStatus.CHECKMATE
        if self.is_in_check(color):
            return GameStatus.CHECK
        if self.is_in_stalemate(color):
            return GameStatus.STALEMATE
        return GameStatus.IN_PROGRESS

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        """Independent copy that keeps per-piece flags, turn and ply."""
        game = Game(self._board.copy(keep_state=True), self._team_turn)
        game._ply = self._ply
        return game

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        return self._team_turn == other._team_turn and self._board == other._board

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Game({self._team_turn} to move, ply {self._ply})\n{self._board!r}"

    # ── Castling ─────────────────────────────────────────────────────────

    def _castling_moves(self, king_sq: Position, king: Piece) -> list[Move]:
        if king.has_moved or self.is_in_check(king.color):
            return []
        moves: list[Move] = []
        for rook_col in (1, BOARD_SIZE):
            move = self._castle_toward(king_sq, king, Position(king_sq.row, rook_col))
            if move is not None:
                moves.append(move)
        return moves

    def _castle_toward(
        self, king_sq: Position, king: Piece, rook_sq: Position
    ) -> Move | None:
        board = self._board
        rook = board[rook_sq]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != king.color
            or rook.has_moved
        ):
            return None

        distance = abs(rook_sq.column - king_sq.column)
        if distance < 3:
            return None
        step = 1 if rook_sq.column > king_sq.column else -1

        # Every square between king and rook must be empty and safe.
        for i in range(1, distance):
            sq = king_sq.offset(0, i * step)
            if not board.is_empty(sq):
                return None
            if would_expose_king(board, Move(king_sq, sq), king.color):
                return None
        return Move(king_sq, king_sq.offset(0, 2 * step))

    def _move_castling_rook(self, king_move: Move) -> None:
        step = 1 if king_move.end.column > king_move.start.column else -1
        rook_from_col, rook_to_col = _CASTLING_ROOK_COLUMNS[step]
        row = king_move.start.row
        rook_move = Move(Position(row, rook_from_col), Position(row, rook_to_col))
        apply_unchecked(self._board, rook_move)
        rook = self._board[rook_move.end]
        assert rook is not None
        rook.has_moved = True
        _LOGGER.debug("Castling rook %r", rook_move)

    # ── En passant ───────────────────────────────────────────────────────

    def _en_passant_move(self, position: Position, piece: Piece) -> Move | None:
        """The capture *piece* may play en passant right now, if any."""
        move = piece.en_passant_move
        if (
            move is None
            or piece.en_passant_ply != self._ply
            or move.start != position
            or not self._board.is_empty(move.end)
        ):
            return None
        victim = self._board[_en_passant_victim(move)]
        if (
            victim is None
            or victim.piece_type != PieceType.PAWN
            or victim.color == piece.color
        ):
            return None
        return move

    def _grant_en_passant(self, pawn_sq: Position, pawn_color: Color) -> None:
        """Give opposing pawns beside a double-stepped pawn the right to take it.

        The right is only usable on the very next ply.
        """
        for d_col in (-1, 1):
            neighbour_sq = pawn_sq.offset(0, d_col)
            if not neighbour_sq.is_on_board():
                continue
            neighbour = self._board[neighbour_sq]
            if (
                neighbour is None
                or neighbour.piece_type != PieceType.PAWN
                or neighbour.color == pawn_color
            ):
                continue
            direction = PAWN_RULES[neighbour.color][0]
            capture = Move(
                neighbour_sq, Position(neighbour_sq.row + direction, pawn_sq.column)
            )
            neighbour.grant_en_passant(capture, self._ply + 1)
            _LOGGER.debug("En passant available: %r", capture)

    def _expire_en_passant(self, color: Color) -> None:
        for _, piece in self._board.pieces(color):
            piece.clear_en_passant()


def _en_passant_victim(move: Move) -> Position:
    """Square of the pawn taken by an en passant *move*."""
    return Position(move.start.row, move.end.column)
