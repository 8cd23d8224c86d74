"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from clickchess.core.check import is_in_check
from clickchess.core.enums import Color, GameStatus
from clickchess.core.legality import has_legal_move

if TYPE_CHECKING:
    from clickchess.core.board import Board


@dataclass(frozen=True, slots=True)
class Outcome:
    """Game outcome.  ``mated`` is the checkmated side, if any."""

    status: GameStatus = GameStatus.IN_PROGRESS
    mated: Color | None = None

    @classmethod
    def in_progress(cls) -> Outcome:
        return cls()

    @classmethod
    def checkmate(cls, mated: Color) -> Outcome:
        return cls(GameStatus.CHECKMATE, mated)

    @classmethod
    def stalemate(cls) -> Outcome:
        return cls(GameStatus.STALEMATE)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def winner(self) -> Color | None:
        return self.mated.opposite if self.mated is not None else None

    def __str__(self) -> str:
        if self.status == GameStatus.CHECKMATE:
            assert self.mated is not None
            return f"checkmate, {self.mated.opposite} wins"
        if self.status == GameStatus.STALEMATE:
            return "stalemate"
        return "in progress"


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    A side with no legal move at all is checkmated when in check and
    stalemated otherwise.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return is_in_check(board, color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not is_in_check(board, color):
            return False
        return not has_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if is_in_check(board, color):
            return False
        return not has_legal_move(board, color)

    @staticmethod
    def outcome(board: Board, to_move: Color) -> Outcome:
        """Determine the outcome with *to_move* about to play."""
        if has_legal_move(board, to_move):
            return Outcome.in_progress()
        if is_in_check(board, to_move):
            return Outcome.checkmate(to_move)
        return Outcome.stalemate()
