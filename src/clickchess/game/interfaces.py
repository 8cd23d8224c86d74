"""Enumerations shared by the game layer and its UI."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Finite-state-machine states of a game."""

    WAITING_FOR_SELECTION = auto()
    PIECE_SELECTED = auto()
    GAME_OVER = auto()


class ClickResult(IntEnum):
    """What a board click did to the game state."""

    IGNORED = auto()
    SELECTED = auto()
    DESELECTED = auto()
    MOVED = auto()
