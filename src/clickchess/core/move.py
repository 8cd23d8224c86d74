"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from clickchess.core.enums import MoveFlag
from clickchess.core.types import Square

if TYPE_CHECKING:
    from clickchess.core.board import Board


@dataclass(frozen=True, slots=True)
class Move:
    """A single move from one square to another."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


def classify_move(board: Board, from_sq: Square, to_sq: Square) -> Move:
    """Build the :class:`Move` for a destination picked on *board*.

    A king stepping two files castles, a pawn stepping two ranks is a double
    step, and a pawn moving diagonally onto an empty square captures en passant.
    """
    piece = board.get(from_sq)
    if piece is None:
        raise ValueError(f"No piece on {from_sq}")

    df = to_sq.file - from_sq.file
    if piece.is_king and from_sq.rank == to_sq.rank:
        if df == 2:
            return Move(from_sq, to_sq, MoveFlag.CASTLE_KINGSIDE)
        if df == -2:
            return Move(from_sq, to_sq, MoveFlag.CASTLE_QUEENSIDE)

    if piece.is_pawn:
        if abs(to_sq.rank - from_sq.rank) == 2:
            return Move(from_sq, to_sq, MoveFlag.DOUBLE_PAWN)
        if df != 0 and board.is_empty(to_sq):
            return Move(from_sq, to_sq, MoveFlag.EN_PASSANT)

    return Move(from_sq, to_sq)
