"""Qt bridge exposing controller events as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from reversi.core.square import Square
from reversi.game.controller import GameController
from reversi.game.player import Player


class GameSignals(QObject):
    """Thread-affine adapter between a :class:`GameController` and Qt views.

    Moves arrive through the :meth:`submit_move` slot; every controller
    event is re-emitted as a signal carrying plain values where possible.
    """

    move_applied = pyqtSignal(int, int, int, int)  # x, y, player id, flipped count
    turn_changed = pyqtSignal(int)  # player id
    turn_passed = pyqtSignal(int)  # player id
    game_over = pyqtSignal(object)  # winning Player, or None on a tie
    move_rejected = pyqtSignal(int, int)  # x, y

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        events = controller.events
        events.on_move.append(self._on_move)
        events.on_turn.append(self._on_turn)
        events.on_pass.append(self._on_pass)
        events.on_game_over.append(self._on_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(int, int)
    def submit_move(self, x: int, y: int) -> None:
        """Forward a clicked square to the controller."""
        if not self._controller.submit_move((x, y)):
            self.move_rejected.emit(x, y)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, square: Square, player: Player, flipped: frozenset[Square]) -> None:
        self.move_applied.emit(square.x, square.y, player.id, len(flipped))

    def _on_turn(self, player: Player) -> None:
        self.turn_changed.emit(player.id)

    def _on_pass(self, player: Player) -> None:
        self.turn_passed.emit(player.id)

    def _on_game_over(self, winner: Player | None) -> None:
        self.game_over.emit(winner)
