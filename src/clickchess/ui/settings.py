"""User-configurable UI settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from clickchess.ui.styles.theme import BoardTheme


@dataclass
class AppSettings:
    """All user-configurable settings."""

    board_theme: BoardTheme = field(default_factory=BoardTheme.default)
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False
