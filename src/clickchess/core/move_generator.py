"""Pseudo-legal move generation and attack sets, per piece kind."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from clickchess.core.board import (
    KING_HOME_FILE,
    KINGSIDE_ROOK_OFFSET,
    QUEENSIDE_ROOK_OFFSET,
)
from clickchess.core.enums import Color, PieceType
from clickchess.core.types import BOARD_SIZE, Square, is_on_board

if TYPE_CHECKING:
    from clickchess.core.board import Board
    from clickchess.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: BOARD_SIZE - 2}
BACK_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: BOARD_SIZE - 1}


class MoveGenerator:
    """Computes pseudo-legal destinations for the pieces on a :class:`Board`.

    Check-agnostic: moves that leave the mover's own king attacked are
    still returned (see :mod:`clickchess.core.legality`).  The board is
    never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(
        self, sq: Square, *, include_castling: bool = True
    ) -> set[Square]:
        """Destinations for the piece on *sq* (empty set for an empty square)."""
        piece = self._board.get(sq)
        if piece is None:
            return set()
        targets = _GENERATORS[piece.piece_type](self, piece)
        if include_castling and piece.is_king:
            targets |= self._castling_targets(piece)
        return targets

    def attacked_squares(self, sq: Square) -> set[Square]:
        """Squares the piece on *sq* attacks.

        Same as the pseudo-legal moves without castling, except that pawns
        attack both forward diagonals whatever stands there and never
        attack by pushing.
        """
        piece = self._board.get(sq)
        if piece is None:
            return set()
        if piece.is_pawn:
            f, r = piece.position
            dr = piece.color.pawn_direction
            return {
                Square(f + df, r + dr)
                for df in (-1, 1)
                if is_on_board(f + df, r + dr)
            }
        return _GENERATORS[piece.piece_type](self, piece)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece) -> set[Square]:
        board = self._board
        f, r = piece.position
        dr = piece.color.pawn_direction
        moves: set[Square] = set()

        if not is_on_board(f, r + dr):
            return moves

        one_step = Square(f, r + dr)
        if board.is_empty(one_step):
            moves.add(one_step)
            if r == PAWN_START_RANK[piece.color]:
                two_step = Square(f, r + 2 * dr)
                if board.is_empty(two_step):
                    moves.add(two_step)

        for df in (-1, 1):
            if not is_on_board(f + df, r):
                continue
            cap_sq = Square(f + df, r + dr)
            target = board.get(cap_sq)
            if target is not None:
                if target.color != piece.color:
                    moves.add(cap_sq)
                continue
            # En passant: the enemy pawn beside us has just double-stepped
            beside = board.get(Square(f + df, r))
            if (
                beside is not None
                and beside.is_pawn
                and beside.color != piece.color
                and beside.just_double_stepped
            ):
                moves.add(cap_sq)
        return moves

    def _gen_knight(self, piece: Piece) -> set[Square]:
        return self._gen_offsets(piece, KNIGHT_OFFSETS)

    def _gen_bishop(self, piece: Piece) -> set[Square]:
        return self._gen_sliding(piece, BISHOP_DIRS)

    def _gen_rook(self, piece: Piece) -> set[Square]:
        return self._gen_sliding(piece, ROOK_DIRS)

    def _gen_queen(self, piece: Piece) -> set[Square]:
        return self._gen_sliding(piece, QUEEN_DIRS)

    def _gen_king(self, piece: Piece) -> set[Square]:
        return self._gen_offsets(piece, KING_OFFSETS)

    def _gen_offsets(
        self, piece: Piece, offsets: tuple[tuple[int, int], ...]
    ) -> set[Square]:
        board = self._board
        f, r = piece.position
        moves: set[Square] = set()
        for df, dr in offsets:
            if not is_on_board(f + df, r + dr):
                continue
            to_sq = Square(f + df, r + dr)
            target = board.get(to_sq)
            if target is None or target.color != piece.color:
                moves.add(to_sq)
        return moves

    def _gen_sliding(
        self, piece: Piece, directions: tuple[tuple[int, int], ...]
    ) -> set[Square]:
        board = self._board
        moves: set[Square] = set()
        for df, dr in directions:
            af, ar = piece.position.file + df, piece.position.rank + dr
            while is_on_board(af, ar):
                to_sq = Square(af, ar)
                target = board.get(to_sq)
                if target is None:
                    moves.add(to_sq)
                else:
                    if target.color != piece.color:
                        moves.add(to_sq)
                    break
                af += df
                ar += dr
        return moves

    def _castling_targets(self, king: Piece) -> set[Square]:
        # Imported here: the check detector builds on this generator.
        from clickchess.core.check import is_in_check, is_square_attacked

        if not king.castling_right:
            return set()
        if king.position != Square(KING_HOME_FILE, BACK_RANK[king.color]):
            return set()
        if is_in_check(self._board, king.color):
            return set()

        targets: set[Square] = set()
        opponent = king.color.opposite
        for rook_offset, step in ((KINGSIDE_ROOK_OFFSET, 1), (QUEENSIDE_ROOK_OFFSET, -1)):
            if self._castle_path_clear(king, rook_offset):
                passed = king.position.offset(step, 0)
                landing = king.position.offset(2 * step, 0)
                if not is_square_attacked(
                    self._board, passed, opponent
                ) and not is_square_attacked(self._board, landing, opponent):
                    targets.add(landing)
        return targets

    def _castle_path_clear(self, king: Piece, rook_offset: int) -> bool:
        """Rook present with its right, every square in between empty."""
        f, r = king.position
        if not is_on_board(f + rook_offset, r):
            return False
        rook = self._board.get(Square(f + rook_offset, r))
        if (
            rook is None
            or not rook.is_rook
            or rook.color != king.color
            or not rook.castling_right
        ):
            return False
        step = 1 if rook_offset > 0 else -1
        return all(
            self._board.is_empty(Square(f + df, r))
            for df in range(step, rook_offset, step)
        )


_GENERATORS: dict[PieceType, Callable[[MoveGenerator, Piece], set[Square]]] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}
