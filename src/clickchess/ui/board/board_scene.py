"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from clickchess.core.types import BOARD_SIZE, Square
from clickchess.ui.resources import piece_font, piece_glyph
from clickchess.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from clickchess.core.board import Board


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights and pieces, and turns
    mouse presses into board coordinates.

    Signals:
        square_clicked(int, int): file and rank of a press inside the board.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 75  # px per square, 600 px board

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False
        self._show_coordinates = True
        self._show_legal_moves = True

        self._selected: Square | None = None
        self._highlighted: frozenset[Square] = frozenset()
        self._check_squares: frozenset[Square] = frozenset()

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def render_board(
        self,
        board: Board,
        highlighted: Iterable[Square] = (),
        check_squares: Iterable[Square] = (),
        selected: Square | None = None,
    ) -> None:
        """Redraw pieces and overlays for *board*."""
        self._board = board
        self._highlighted = frozenset(highlighted)
        self._check_squares = frozenset(check_squares)
        self._selected = selected
        self._sync_pieces()
        self._sync_highlights()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move highlights."""
        self._show_legal_moves = visible
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._sync_highlights()

    def _draw_board(self) -> None:
        """Draw or redraw the squares and coordinates."""
        self._clear_items(list(self._square_items.values()))
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 7))

        for r in range(BOARD_SIZE):
            for f in range(BOARD_SIZE):
                vf, vr = self._visual_coords(f, r)
                is_light = (f + r) % 2 == 1
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(vf * t, vr * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[Square(f, r)] = rect

                coord_color = (
                    self._theme.coord_dark if not is_light else self._theme.coord_light
                )
                # Rank numbers (left edge)
                if vf == 0:
                    self._add_coord(str(r + 1), font, coord_color, vf * t + 2, vr * t + 1)
                # File letters (bottom edge)
                if vr == BOARD_SIZE - 1:
                    self._add_coord(
                        "abcdefgh"[f], font, coord_color, vf * t + t - 12, vr * t + t - 16
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece / highlight synchronisation ────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        self._clear_items(list(self._piece_items.values()))
        self._piece_items.clear()
        if self._board is None:
            return

        t = self.TILE
        font = piece_font(int(t * 0.8))
        for piece in self._board.pieces():
            item = QGraphicsSimpleTextItem(piece_glyph(piece.piece_type, piece.color))
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece_ink))
            vf, vr = self._visual_coords(*piece.position)
            bounds = item.boundingRect()
            item.setPos(
                vf * t + (t - bounds.width()) / 2, vr * t + (t - bounds.height()) / 2
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[piece.position] = item

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        if self._selected is not None:
            self._make_highlight(self._selected, self._theme.highlight_from)
        if self._show_legal_moves:
            for sq in self._highlighted:
                self._make_highlight(sq, self._theme.highlight_to)
        for sq in self._check_squares:
            self._make_highlight(sq, self._theme.highlight_check)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(*sq)
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        self._highlight_items.append(rect)
        return rect

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq.file, sq.rank)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        last = BOARD_SIZE - 1
        if self._flipped:
            return last - file, rank
        return file, last - rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        if pos.x() < 0 or pos.y() < 0:
            return None
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        last = BOARD_SIZE - 1
        if not (0 <= col <= last and 0 <= row <= last):
            return None
        if self._flipped:
            return Square(last - col, row)
        return Square(col, last - row)
