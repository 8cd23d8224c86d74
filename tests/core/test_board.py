"""Tests for Board."""

import pytest

from clickchess.core.board import Board
from clickchess.core.enums import Color, MoveFlag, PieceType
from clickchess.core.move import Move
from clickchess.core.piece import Piece
from clickchess.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    D4, E2, E4, E5,
    Square,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(PieceType.KING, Color.WHITE, E1)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(PieceType.KING, Color.BLACK, E8)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(pt, Color.WHITE, sq), f"Mismatch at {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(pt, Color.BLACK, sq), f"Mismatch at {sq}"

    def test_sixteen_pieces_per_side(self) -> None:
        board = Board.initial()
        assert board.count(Color.WHITE) == 16
        assert board.count(Color.BLACK) == 16

    def test_one_king_per_side(self) -> None:
        board = Board.initial()
        assert len(board.kings(Color.WHITE)) == 1
        assert len(board.kings(Color.BLACK)) == 1

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board[Square(file, rank)] is None

    def test_castling_rights_only_on_rooks_and_kings(self) -> None:
        board = Board.initial()
        for piece in board.pieces():
            assert piece.castling_right == (
                piece.piece_type in (PieceType.ROOK, PieceType.KING)
            )
            assert not piece.just_double_stepped


class TestBoardOperations:
    def test_place_and_get(self) -> None:
        board = Board()
        piece = Piece(PieceType.PAWN, Color.WHITE, E2)
        board.place(E4, piece)
        assert board.get(E4) is piece
        assert piece.position == E4
        assert board.is_empty(E2)

    def test_place_on_occupied_square_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(ValueError, match="occupied"):
            board.place(E1, Piece(PieceType.QUEEN, Color.WHITE, E1))

    def test_remove_returns_piece(self) -> None:
        board = Board.initial()
        piece = board.remove(E2)
        assert piece is not None and piece.piece_type == PieceType.PAWN
        assert board.is_empty(E2)
        assert board.remove(E4) is None

    def test_move_unchecked_returns_displaced(self) -> None:
        board = Board.initial()
        captured = board.move_unchecked(D1, D8)
        assert captured is not None and captured.color == Color.BLACK
        queen = board[D8]
        assert queen is not None and queen.position == D8
        assert board.is_empty(D1)

    def test_move_unchecked_from_empty_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="No piece on e4"):
            board.move_unchecked(E4, E5)

    @pytest.mark.parametrize("bad", [(8, 0), (0, 8), (-1, 3), (3, -1)])
    def test_off_board_square_raises(self, bad: tuple[int, int]) -> None:
        board = Board()
        with pytest.raises(ValueError, match="off board"):
            board.get(Square(*bad))

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy.remove(E1)
        assert board != copy
        assert board[E1] == Piece(PieceType.KING, Color.WHITE, E1)

    def test_copy_does_not_share_pieces(self) -> None:
        board = Board.initial()
        copy = board.copy()
        king = copy[E1]
        assert king is not None
        king.castling_right = False
        original = board[E1]
        assert original is not None and original.castling_right

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="No WHITE king"):
            board.king_square(Color.WHITE)

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.pieces()) == []

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "K" in text
        assert "a b c d e f g h" in text


class TestMakeUnmake:
    def test_normal_move_round_trip(self) -> None:
        board = Board.initial()
        before = board.copy()
        board.make_move(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        assert board != before
        board.unmake_move()
        assert board == before
        assert board.history_size == 0

    def test_capture_round_trip(self, board_factory) -> None:
        board = board_factory("Ke1", "ke8", "Qd1", "nd4")
        before = board.copy()
        board.make_move(Move(D1, D4))
        assert board.count(Color.BLACK) == 1
        board.unmake_move()
        assert board == before

    def test_double_step_sets_flag_and_clears_others(self, board_factory) -> None:
        board = board_factory("Ke1", "ke8", "Pe2", "pd4")
        black_pawn = board[D4]
        assert black_pawn is not None
        black_pawn.just_double_stepped = True

        board.make_move(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        white_pawn = board[E4]
        assert white_pawn is not None and white_pawn.just_double_stepped
        assert not black_pawn.just_double_stepped

        board.unmake_move()
        assert black_pawn.just_double_stepped
        pawn = board[E2]
        assert pawn is not None and not pawn.just_double_stepped

    def test_any_move_clears_stale_flags(self, board_factory) -> None:
        board = board_factory("Ke1", "ke8", "Pe4", "pa7")
        pawn = board[E4]
        assert pawn is not None
        pawn.just_double_stepped = True
        board.make_move(Move(E8, D8))
        assert not pawn.just_double_stepped

    def test_king_move_clears_castling_right(self) -> None:
        board = Board.initial()
        board.remove(E2)
        board.make_move(Move(E1, E2))
        king = board[E2]
        assert king is not None and not king.castling_right
        board.unmake_move()
        king = board[E1]
        assert king is not None and king.castling_right

    def test_unmake_empty_history_raises(self) -> None:
        with pytest.raises(ValueError, match="No move to undo"):
            Board.initial().unmake_move()
