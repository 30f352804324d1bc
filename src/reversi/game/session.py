"""Session — a run of games between the same players."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from reversi.config import DEFAULT_BOARD_SIZE, DEFAULT_DISK_LABELS, BoardSize
from reversi.game.game import Game, new_game
from reversi.game.player import Player
from reversi.game.snapshot import GameSnapshot, PlayerSnapshot

_LOGGER = logging.getLogger(__name__)


class Session:
    """Players, their win tallies, the current game and finished-game history.

    Args:
        players: Session participants in any order; each new game orders
            them by disk label.
    """

    __slots__ = ("_players", "_current_game", "_history")

    def __init__(self, players: Sequence[Player]) -> None:
        self._players: tuple[Player, ...] = tuple(players)
        self._current_game: Game | None = None
        self._history: list[str] = []

    @classmethod
    def for_names(
        cls,
        names: Sequence[str],
        disks: Sequence[str] = DEFAULT_DISK_LABELS,
    ) -> Session:
        """Session with one player per name, paired with *disks* in order."""
        if len(names) != len(disks):
            raise ValueError(f"Need one disk per player: {names!r} vs {disks!r}")
        return cls([Player(name, disk) for name, disk in zip(names, disks)])

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    @property
    def current_game(self) -> Game | None:
        return self._current_game

    @property
    def history(self) -> list[str]:
        """Summaries of finished games, oldest first."""
        return list(self._history)

    def create_game(self, board_size: int | BoardSize = DEFAULT_BOARD_SIZE) -> Game:
        """Start a new game, archiving the current one if it finished.

        Raises:
            InvalidConfiguration: If the size cannot seat the players.
        """
        squares = board_size.squares if isinstance(board_size, BoardSize) else board_size
        game = new_game(self._players, squares)
        previous = self._current_game
        if previous is not None and previous.is_finished:
            self._history.append(previous.summary())
        self._current_game = game
        _LOGGER.debug("Session game %d started", len(self._history) + 1)
        return game

    def is_game_active(self) -> bool:
        return self._current_game is not None and not self._current_game.is_finished

    def has_game_started(self) -> bool:
        """Whether at least one move has been played in the current game."""
        return self._current_game is not None and self._current_game.move_count >= 1

    def has_legal_move(self) -> bool:
        return self._current_game is not None and self._current_game.has_legal_move()

    # ── Persistence ──────────────────────────────────────────────────────

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible dict of the whole session."""
        game = self._current_game
        return {
            "players": [PlayerSnapshot.capture(p).to_dict() for p in self._players],
            "history": list(self._history),
            "game": game.snapshot().to_dict() if game is not None else None,
        }

    @classmethod
    def from_snapshot(cls, data: Mapping[str, Any]) -> Session:
        """Rebuild a session saved with :meth:`snapshot`.

        Raises:
            ValueError: Malformed or inconsistent data.
        """
        raw_players = data.get("players")
        raw_history = data.get("history")
        if not isinstance(raw_players, list) or not raw_players:
            raise ValueError("Invalid session snapshot: no players")
        if not isinstance(raw_history, list) or not all(
            isinstance(entry, str) for entry in raw_history
        ):
            raise ValueError("Invalid session snapshot: bad history")

        records = [PlayerSnapshot.from_dict(raw) for raw in raw_players]
        players: list[Player] = []
        for record in records:
            player = Player(record.name, record.disk)
            player.set_id(record.id)
            player.set_score(record.score)
            player.set_win_count(record.win_count)
            player.set_active(record.active)
            players.append(player)

        session = cls(players)
        session._history = list(raw_history)

        raw_game = data.get("game")
        if raw_game is not None:
            if not isinstance(raw_game, Mapping):
                raise ValueError("Invalid session snapshot: bad game")
            game_snapshot = GameSnapshot.from_dict(raw_game)
            by_id = {p.id: p for p in players}
            try:
                in_turn_order = [by_id[r.id] for r in game_snapshot.players]
            except KeyError as exc:
                raise ValueError(
                    f"Invalid session snapshot: game player {exc.args[0]!r} not in session"
                ) from None
            session._current_game = Game.from_snapshot(game_snapshot, in_turn_order)
        return session
