"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from clickchess.core.board import Board
from clickchess.core.piece import Piece
from clickchess.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

BoardFactory = Callable[..., Board]


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


@pytest.fixture
def board_factory() -> BoardFactory:
    """Build a board from piece specs such as ``"Ke1"`` or ``"pd7"``.

    Uppercase letters are white, lowercase black.  Rooks and kings start
    with their castling right, like unmoved pieces.
    """

    def build(*specs: str) -> Board:
        board = Board()
        for spec in specs:
            sq = parse_square(spec[1:])
            board.place(sq, Piece.from_char(spec[0], sq))
        return board

    return build
