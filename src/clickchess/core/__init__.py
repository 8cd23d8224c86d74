"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from clickchess.core import Board, legal_moves, parse_square

    board = Board.initial()
    legal_moves(board, parse_square("e2"))   # {e3, e4}
"""

from clickchess.core.board import Board
from clickchess.core.check import is_in_check, is_square_attacked
from clickchess.core.enums import Color, GameStatus, MoveFlag, PieceType
from clickchess.core.legality import all_legal_moves, has_legal_move, legal_moves
from clickchess.core.move import Move, classify_move
from clickchess.core.move_generator import MoveGenerator
from clickchess.core.piece import Piece
from clickchess.core.rules import Outcome, Rules
from clickchess.core.types import (
    BOARD_SIZE,
    Square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Outcome",
    "Piece",
    "Rules",
    "classify_move",
    # Rule functions
    "all_legal_moves",
    "has_legal_move",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
]
