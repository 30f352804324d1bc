"""Player record and turn-order assignment."""

from __future__ import annotations

from collections.abc import Iterable


class Player:
    """A participant in a session of games.

    The id and win count persist across games; the score and the active
    flag belong to the current game and are written by
    :class:`~reversi.game.game.Game`.

    Args:
        name: Display name.
        disk: Disk designator, e.g. ``"Black"``. Turn order is decided by
            sorting on this label.
    """

    __slots__ = ("_name", "_disk", "_id", "_score", "_win_count", "_active")

    def __init__(self, name: str, disk: str) -> None:
        self._name = name
        self._disk = disk
        self._id = 0
        self._score = 0
        self._win_count = 0
        self._active = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def disk(self) -> str:
        return self._disk

    @property
    def id(self) -> int:
        """1-based turn-order id, 0 until assigned."""
        return self._id

    @property
    def score(self) -> int:
        return self._score

    @property
    def win_count(self) -> int:
        return self._win_count

    @property
    def active(self) -> bool:
        return self._active

    def set_id(self, player_id: int) -> None:
        self._id = player_id

    def set_score(self, score: int) -> None:
        self._score = score

    def set_active(self, active: bool) -> None:
        self._active = active

    def increment_win_count(self) -> None:
        self._win_count += 1

    def set_win_count(self, win_count: int) -> None:
        """Restore a saved tally."""
        self._win_count = win_count

    def reset_for_new_game(self) -> None:
        self._score = 0
        self._active = False

    def __str__(self) -> str:
        return f"{self._name} ({self._disk})"

    def __repr__(self) -> str:
        return f"Player({self._name!r}, {self._disk!r}, id={self._id})"


def assign_turn_order(players: Iterable[Player]) -> list[Player]:
    """Sort *players* by disk label and number them ``1..k``.

    Returns:
        The players in turn order.
    """
    ordered = sorted(players, key=lambda p: p.disk)
    for player_id, player in enumerate(ordered, start=1):
        player.set_id(player_id)
    return ordered
