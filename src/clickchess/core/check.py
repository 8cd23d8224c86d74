"""Check detection: is a square, or a side's king, attacked."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clickchess.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from clickchess.core.board import Board
    from clickchess.core.enums import Color
    from clickchess.core.types import Square


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Castling never attacks, so it is not generated here.
    """
    gen = MoveGenerator(board)
    return any(
        sq in gen.attacked_squares(piece.position) for piece in board.pieces(by_color)
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    return is_square_attacked(board, board.king_square(color), color.opposite)
