"""Tests for Position, Move and Piece value objects."""

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.piece import Piece
from chessrules.core.types import A1, A8, E2, E4, H1, H8, Position, all_positions


class TestPosition:
    def test_named_squares(self) -> None:
        assert A1 == Position(1, 1)
        assert H1 == Position(1, 8)
        assert A8 == Position(8, 1)
        assert H8 == Position(8, 8)
        assert E4 == Position(4, 5)

    def test_equality_and_hash(self) -> None:
        assert Position(3, 4) == Position(3, 4)
        assert len({Position(3, 4), Position(3, 4), Position(4, 3)}) == 2

    @pytest.mark.parametrize(
        ("row", "col", "expected"),
        [(1, 1, True), (8, 8, True), (0, 4, False), (9, 4, False), (4, 0, False)],
    )
    def test_is_on_board(self, row: int, col: int, expected: bool) -> None:
        assert Position(row, col).is_on_board() is expected

    def test_offset(self) -> None:
        assert E2.offset(2, 0) == E4
        assert not A1.offset(-1, 0).is_on_board()

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            E2.row = 3  # type: ignore[misc]

    def test_all_positions(self) -> None:
        squares = all_positions()
        assert len(squares) == 64
        assert len(set(squares)) == 64
        assert squares[0] == A1
        assert squares[-1] == H8


class TestMove:
    def test_equality(self) -> None:
        assert Move(E2, E4) == Move(E2, E4)
        assert Move(E2, E4) != Move(E2, E4, PieceType.QUEEN)

    def test_promotion_flag(self) -> None:
        assert Move(E2, E4, PieceType.KNIGHT).is_promotion
        assert not Move(E2, E4).is_promotion

    @pytest.mark.parametrize("ptype", [PieceType.KING, PieceType.PAWN])
    def test_invalid_promotion(self, ptype: PieceType) -> None:
        with pytest.raises(ValueError):
            Move(E2, E4, ptype)

    def test_promotion_order(self) -> None:
        assert PROMOTION_TYPES == (
            PieceType.QUEEN,
            PieceType.ROOK,
            PieceType.BISHOP,
            PieceType.KNIGHT,
        )


class TestPiece:
    def test_equality_ignores_flags(self) -> None:
        moved = Piece(Color.WHITE, PieceType.ROOK, has_moved=True)
        assert moved == Piece(Color.WHITE, PieceType.ROOK)
        assert moved != Piece(Color.BLACK, PieceType.ROOK)

    def test_copy_resets_flags(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN, has_moved=True)
        pawn.grant_en_passant(Move(Position(4, 4), Position(3, 5)), 3)
        clone = pawn.copy()
        assert clone == pawn
        assert not clone.has_moved
        assert not clone.en_passant_eligible

    def test_copy_keep_state(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN, has_moved=True)
        capture = Move(Position(4, 4), Position(3, 5))
        pawn.grant_en_passant(capture, 3)
        clone = pawn.copy(keep_state=True)
        assert clone.has_moved
        assert clone.en_passant_move == capture
        assert clone.en_passant_ply == 3

    def test_clear_en_passant(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        pawn.grant_en_passant(Move(Position(5, 5), Position(6, 4)), 1)
        assert pawn.en_passant_eligible
        pawn.clear_en_passant()
        assert not pawn.en_passant_eligible
        assert pawn.en_passant_ply is None

    def test_display(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.KNIGHT)) == "n"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"

    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE


class TestPackageExports:
    def test_quick_start_imports(self) -> None:
        from chessrules.core import Board, MoveGenerator, is_in_check
        from chessrules.core.types import E2 as e2

        board = Board.initial()
        assert len(MoveGenerator(board).piece_moves(e2)) == 2
        assert not is_in_check(board, Color.WHITE)
