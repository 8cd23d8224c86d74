"""Game state machine — whose turn it is, the selection, move application."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from clickchess.core.board import Board
from clickchess.core.check import is_in_check
from clickchess.core.enums import Color, MoveFlag, PieceType
from clickchess.core.legality import legal_moves
from clickchess.core.move import Move, classify_move
from clickchess.core.rules import Outcome, Rules
from clickchess.core.types import Square, is_on_board
from clickchess.game.interfaces import ClickResult, GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    color: Color
    piece_type: PieceType
    captured: PieceType | None = None
    was_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
SelectionCallback = Callable[[Square | None, frozenset[Square]], None]
GameOverCallback = Callable[[Outcome], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── State machine ────────────────────────────────────────────────────────────


@dataclass
class GameState:
    """Two-player game driven by board clicks.

    ``WAITING_FOR_SELECTION`` -> (click own piece) -> ``PIECE_SELECTED`` ->
    (click highlighted square) -> ``WAITING_FOR_SELECTION`` for the other
    side, or ``GAME_OVER`` once checkmate / stalemate is reached.  Any other
    click while a piece is selected just drops the selection.

    This is a pure logic class — no threading, no UI.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.WAITING_FOR_SELECTION, init=False)
    selection: Square | None = field(default=None, init=False)
    legal_moves_for_selection: set[Square] = field(default_factory=set, init=False)
    outcome: Outcome = field(default_factory=Outcome.in_progress, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    events: GameEvents = field(default_factory=GameEvents, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def new_game(
        self, board: Board | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Start (or restart) a game, by default from the standard setup."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.selection = None
        self.legal_moves_for_selection = set()
        self.move_history.clear()
        self.outcome = Rules.outcome(self.board, side_to_move)
        self.phase = (
            GamePhase.GAME_OVER
            if self.outcome.is_over
            else GamePhase.WAITING_FOR_SELECTION
        )
        _LOGGER.info("New game, %s to move (%s)", side_to_move, self.outcome)

    # ── Renderer-facing queries ──────────────────────────────────────────

    def current_board(self) -> Board:
        """Snapshot of the board for rendering; changes to it are not seen."""
        return self.board.copy()

    def highlighted_squares(self) -> frozenset[Square]:
        """Legal destinations of the selected piece."""
        return frozenset(self.legal_moves_for_selection)

    def king_in_check(self, color: Color) -> bool:
        return is_in_check(self.board, color)

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    # ── Input ────────────────────────────────────────────────────────────

    def handle_square_click(self, file: int, rank: int) -> ClickResult:
        """Advance the state machine for a click on ``(file, rank)``."""
        if not is_on_board(file, rank):
            raise ValueError(f"Square off board: {(file, rank)}")
        sq = Square(file, rank)

        if self.phase == GamePhase.GAME_OVER:
            return ClickResult.IGNORED

        if self.phase == GamePhase.PIECE_SELECTED:
            if sq in self.legal_moves_for_selection:
                self._apply(sq)
                return ClickResult.MOVED
            self._set_selection(None)
            return ClickResult.DESELECTED

        piece = self.board.get(sq)
        if piece is None or piece.color != self.side_to_move:
            return ClickResult.IGNORED
        self._set_selection(sq)
        return ClickResult.SELECTED

    def undo_last_move(self) -> Move | None:
        """Take back the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        self.board.unmake_move()
        self.side_to_move = record.color
        self.outcome = Outcome.in_progress()
        self._set_selection(None)
        _LOGGER.debug("Undid %s %s", record.color, record.move)
        return record.move

    # ── Internal ─────────────────────────────────────────────────────────

    def _set_selection(self, sq: Square | None) -> None:
        self.selection = sq
        if sq is None:
            self.legal_moves_for_selection = set()
            self.phase = (
                GamePhase.GAME_OVER
                if self.outcome.is_over
                else GamePhase.WAITING_FOR_SELECTION
            )
        else:
            self.legal_moves_for_selection = legal_moves(self.board, sq)
            self.phase = GamePhase.PIECE_SELECTED
            _LOGGER.debug(
                "Selected %s with %d legal moves",
                sq,
                len(self.legal_moves_for_selection),
            )
        highlighted = self.highlighted_squares()
        for cb in self.events.on_selection_changed:
            cb(sq, highlighted)

    def _apply(self, to_sq: Square) -> None:
        """Play the selected piece to *to_sq*; the move is known to be legal."""
        from_sq = self.selection
        assert from_sq is not None
        piece = self.board.get(from_sq)
        assert piece is not None and piece.color == self.side_to_move

        move = classify_move(self.board, from_sq, to_sq)
        if move.flag == MoveFlag.EN_PASSANT:
            captured: PieceType | None = PieceType.PAWN
        else:
            target = self.board.get(to_sq)
            captured = target.piece_type if target is not None else None

        mover = self.side_to_move
        self.board.make_move(move)
        self.side_to_move = mover.opposite
        _LOGGER.debug("%s %s", mover, move)

        record = MoveRecord(
            move=move,
            color=mover,
            piece_type=piece.piece_type,
            captured=captured,
            was_check=is_in_check(self.board, self.side_to_move),
        )
        self.move_history.append(record)
        self.outcome = Rules.outcome(self.board, self.side_to_move)
        self._set_selection(None)

        for cb in self.events.on_move:
            cb(record, self)

        if self.outcome.is_over:
            _LOGGER.info("Game over: %s", self.outcome)
            for cb in self.events.on_game_over:
                cb(self.outcome)
