"""Game management layer — players, game state machine, controller, session.

Quick start::

    from reversi.game import GameController, Player

    ctrl = GameController()
    ctrl.new_game([Player("Alice", "Black"), Player("Bob", "White")], 8)
    ctrl.submit_move((3, 2))

The Qt bridge lives in :mod:`reversi.game.qt_bridge` and is imported
explicitly so the rest of the package does not load PyQt6.
"""

from reversi.game.controller import GameController, GameEvents
from reversi.game.game import Game, new_game
from reversi.game.interfaces import GamePhase
from reversi.game.player import Player, assign_turn_order
from reversi.game.session import Session
from reversi.game.snapshot import GameSnapshot, PlayerSnapshot

__all__ = [
    # Enums
    "GamePhase",
    # Concrete
    "Game",
    "GameController",
    "GameEvents",
    "GameSnapshot",
    "Player",
    "PlayerSnapshot",
    "Session",
    "assign_turn_order",
    "new_game",
]
