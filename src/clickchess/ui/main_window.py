"""MainWindow — top-level window wiring the game state to the board."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from clickchess.core.enums import Color, GameStatus
from clickchess.core.rules import Outcome
from clickchess.game.interfaces import ClickResult
from clickchess.game.state import GameState, MoveRecord
from clickchess.ui.board.board_view import BoardView
from clickchess.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: the board plus a one-line status bar."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chess Game")
        self.resize(600, 640)

        self._settings = settings if settings is not None else AppSettings()
        self._state = GameState()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self.new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView()
        self.setCentralWidget(self._board_view)

        self._status_label = QLabel()
        status = QStatusBar()
        status.addWidget(self._status_label, stretch=1)
        self.setStatusBar(status)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new = QAction("&New Game", self)
        self._act_new.setShortcut(QKeySequence.StandardKey.New)
        menu_game.addAction(self._act_new)

        self._act_undo = QAction("&Undo Move", self)
        self._act_undo.setShortcut(QKeySequence.StandardKey.Undo)
        menu_game.addAction(self._act_undo)

        self._act_flip = QAction("&Flip Board", self)
        self._act_flip.setShortcut("F")
        menu_game.addAction(self._act_flip)

        menu_game.addSeparator()
        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut(QKeySequence.StandardKey.Quit)
        menu_game.addAction(self._act_quit)

    def _connect_signals(self) -> None:
        self._act_new.triggered.connect(self.new_game)
        self._act_undo.triggered.connect(self.undo_move)
        self._act_flip.triggered.connect(self.flip_board)
        self._act_quit.triggered.connect(self.close)
        self._board_view.board_scene.square_clicked.connect(self._on_square_clicked)

        self._state.events.on_move.append(self._on_move)
        self._state.events.on_game_over.append(self._on_game_over)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(s.board_theme)
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_flipped(s.flipped)

    # ── Actions ──────────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    def new_game(self) -> None:
        self._state.new_game()
        self._refresh()

    def undo_move(self) -> None:
        if self._state.undo_last_move() is not None:
            self._refresh()

    def flip_board(self) -> None:
        scene = self._board_view.board_scene
        self._settings.flipped = not scene.is_flipped()
        scene.set_flipped(self._settings.flipped)

    # ── Game callbacks ───────────────────────────────────────────────────

    def _on_square_clicked(self, file: int, rank: int) -> None:
        if self._state.handle_square_click(file, rank) != ClickResult.IGNORED:
            self._refresh()

    def _on_move(self, record: MoveRecord, _state: GameState) -> None:
        _LOGGER.debug(
            "Move %d: %s%s",
            self._state.ply_count,
            record.move,
            " (capture)" if record.was_capture else "",
        )

    def _on_game_over(self, outcome: Outcome) -> None:
        _LOGGER.info("Game finished: %s", outcome)

    # ── Rendering ────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        """Hand the current state to the renderer and update the status bar."""
        state = self._state
        board = state.current_board()
        check_squares = [
            board.king_square(color)
            for color in (Color.WHITE, Color.BLACK)
            if state.king_in_check(color)
        ]
        self._board_view.board_scene.render_board(
            board,
            state.highlighted_squares(),
            check_squares,
            state.selection,
        )
        self._status_label.setText(self._status_text())

    def _status_text(self) -> str:
        state = self._state
        outcome = state.outcome
        if outcome.status == GameStatus.CHECKMATE:
            return f"Checkmate: {str(outcome.winner).capitalize()} wins"
        if outcome.status == GameStatus.STALEMATE:
            return "Stalemate, draw"
        text = f"{str(state.side_to_move).capitalize()} to move"
        if state.king_in_check(state.side_to_move):
            text += ", check"
        return text
