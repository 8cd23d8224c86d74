"""Game management layer — turn / selection state machine.

Quick start::

    from clickchess.game import GameState

    gs = GameState()
    gs.new_game()
    gs.handle_square_click(4, 1)   # select the e2 pawn
    gs.handle_square_click(4, 3)   # play e2-e4
"""

from clickchess.game.interfaces import ClickResult, GamePhase
from clickchess.game.state import GameEvents, GameState, MoveRecord

__all__ = [
    "ClickResult",
    "GameEvents",
    "GamePhase",
    "GameState",
    "MoveRecord",
]
