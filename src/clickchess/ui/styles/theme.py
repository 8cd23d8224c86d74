"""Visual theme constants and QSS styles for the board window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    highlight_check: QColor  # king in check
    coord_light: QColor  # coordinate text on light squares
    coord_dark: QColor  # coordinate text on dark squares
    piece_ink: QColor  # glyph colour for both sides

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # light brown
            dark_square=QColor(181, 136, 99),  # dark brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(207, 207, 207, 200),  # grey overlay
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            piece_ink=QColor(20, 20, 20),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel, QStatusBar {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
