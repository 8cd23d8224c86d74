"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from clickchess.ui.resources import PIECE_FONT_FAMILIES

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _check_piece_fonts() -> None:
    """Warn when no font able to draw the chess glyphs is installed."""
    from PyQt6.QtGui import QFontDatabase

    available = set(QFontDatabase.families())
    if not available.intersection(PIECE_FONT_FAMILIES):
        _LOGGER.warning(
            "None of the piece fonts %s is installed; glyphs may not render",
            ", ".join(PIECE_FONT_FAMILIES),
        )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from clickchess.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chess Game")
    app.setStyle("Fusion")
    _check_piece_fonts()
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from clickchess.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()

    return app.exec()
