"""Legality filter: drop pseudo-legal moves that expose the mover's king.

Each candidate is played on the real board with
:meth:`~clickchess.core.board.Board.make_move` and reverted with
:meth:`~clickchess.core.board.Board.unmake_move` before the next one is
tried, so the board is left exactly as it was found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clickchess.core.check import is_in_check
from clickchess.core.move import classify_move
from clickchess.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from clickchess.core.board import Board
    from clickchess.core.enums import Color
    from clickchess.core.types import Square


def legal_moves(board: Board, sq: Square) -> set[Square]:
    """Destinations of the piece on *sq* that keep its own king safe."""
    piece = board.get(sq)
    if piece is None:
        return set()

    color = piece.color
    legal: set[Square] = set()
    for to_sq in MoveGenerator(board).pseudo_legal_moves(sq):
        board.make_move(classify_move(board, sq, to_sq))
        try:
            if not is_in_check(board, color):
                legal.add(to_sq)
        finally:
            board.unmake_move()
    return legal


def all_legal_moves(board: Board, color: Color) -> dict[Square, set[Square]]:
    """Legal destinations for every piece of *color* that has any."""
    result: dict[Square, set[Square]] = {}
    for piece in list(board.pieces(color)):
        moves = legal_moves(board, piece.position)
        if moves:
            result[piece.position] = moves
    return result


def has_legal_move(board: Board, color: Color) -> bool:
    """Whether *color* has at least one legal move."""
    return any(legal_moves(board, piece.position) for piece in list(board.pieces(color)))
