"""GameController — drives a Game for an input/rendering layer.

Applies submitted moves, advances turns, passes automatically for players
without a legal move, and notifies listeners through simple callbacks so
the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from reversi.core.board import SquareRef
from reversi.core.errors import IllegalMove
from reversi.core.square import Square
from reversi.game.game import Game, new_game
from reversi.game.player import Player

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Player, frozenset[Square]], None]  # square, mover, flipped
TurnCallback = Callable[[Player], None]
PassCallback = Callable[[Player], None]
GameOverCallback = Callable[[Player | None], None]  # winner, None on a tie


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn: list[TurnCallback] = field(default_factory=list)
    on_pass: list[PassCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full game: validates moves, switches turns, notifies
    listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_game", "events")

    def __init__(self, game: Game | None = None) -> None:
        self._game = game
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game | None:
        return self._game

    @property
    def current_player(self) -> Player | None:
        if self._game is None or self._game.is_finished:
            return None
        return self._game.current_player

    @property
    def is_game_over(self) -> bool:
        return self._game is not None and self._game.is_finished

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, players: Iterable[Player], board_size: int) -> Game:
        """Start a game; players are put in turn order by disk label.

        Raises:
            InvalidConfiguration: If *board_size* cannot seat the players.
        """
        self._game = new_game(players, board_size)
        self._emit_turn(self._game.current_player)
        self._skip_passes()
        return self._game

    def submit_move(self, square: SquareRef) -> bool:
        """Play *square* for the current player. Returns True if applied."""
        game = self._game
        if game is None or game.is_finished:
            return False

        mover = game.current_player
        try:
            flipped = game.apply_move(square)
        except IllegalMove as exc:
            _LOGGER.warning("Rejected move by %s: %s", mover, exc)
            return False

        if isinstance(square, Square):
            placed = square
        else:
            placed = game.board[square]
        self._emit_move(placed, mover, flipped)

        self._advance()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _advance(self) -> None:
        game = self._game
        assert game is not None
        game.next_turn()
        if game.is_finished:
            self._emit_game_over(game.winning_player)
            return
        self._emit_turn(game.current_player)
        self._skip_passes()

    def _skip_passes(self) -> None:
        """Pass for every consecutive player who cannot move."""
        game = self._game
        assert game is not None
        while not game.is_finished and not game.has_legal_move():
            self._emit_pass(game.current_player)
            game.next_turn()
            if game.is_finished:
                self._emit_game_over(game.winning_player)
                return
            self._emit_turn(game.current_player)

    def _emit_move(self, square: Square, player: Player, flipped: frozenset[Square]) -> None:
        for cb in self.events.on_move:
            cb(square, player, flipped)

    def _emit_turn(self, player: Player) -> None:
        for cb in self.events.on_turn:
            cb(player)

    def _emit_pass(self, player: Player) -> None:
        _LOGGER.debug("%s passes", player)
        for cb in self.events.on_pass:
            cb(player)

    def _emit_game_over(self, winner: Player | None) -> None:
        for cb in self.events.on_game_over:
            cb(winner)
