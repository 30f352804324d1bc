"""Serializable game state for an external save/load layer.

Snapshots hold only plain values so they convert losslessly to and from
JSON-compatible dicts. The on-disk format is left to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from reversi.game.player import Player


def _require(data: Mapping[str, Any], key: str, kind: type | tuple[type, ...], what: str) -> Any:
    if key not in data:
        raise ValueError(f"Invalid {what} snapshot: missing {key!r}")
    value = data[key]
    # bool is an int subclass; keep the two apart.
    if (kind is int and isinstance(value, bool)) or not isinstance(value, kind):
        raise ValueError(f"Invalid {what} snapshot field {key!r}: {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class PlayerSnapshot:
    """Saved player record."""

    name: str
    disk: str
    id: int
    score: int
    win_count: int
    active: bool

    @classmethod
    def capture(cls, player: Player) -> PlayerSnapshot:
        return cls(
            name=player.name,
            disk=player.disk,
            id=player.id,
            score=player.score,
            win_count=player.win_count,
            active=player.active,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlayerSnapshot:
        return cls(
            name=_require(data, "name", str, "player"),
            disk=_require(data, "disk", str, "player"),
            id=_require(data, "id", int, "player"),
            score=_require(data, "score", int, "player"),
            win_count=_require(data, "win_count", int, "player"),
            active=_require(data, "active", bool, "player"),
        )


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Saved game: board text, counters, status and player records."""

    board: str
    board_size: int
    turn_count: int
    pass_count: int
    move_count: int
    finished: bool
    started_at: str  # ISO-8601
    players: tuple[PlayerSnapshot, ...]

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["players"] = [p.to_dict() for p in self.players]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameSnapshot:
        raw_players = _require(data, "players", (list, tuple), "game")
        players: list[PlayerSnapshot] = []
        for raw in raw_players:
            if not isinstance(raw, Mapping):
                raise ValueError(f"Invalid player snapshot: {raw!r}")
            players.append(PlayerSnapshot.from_dict(raw))
        return cls(
            board=_require(data, "board", str, "game"),
            board_size=_require(data, "board_size", int, "game"),
            turn_count=_require(data, "turn_count", int, "game"),
            pass_count=_require(data, "pass_count", int, "game"),
            move_count=_require(data, "move_count", int, "game"),
            finished=_require(data, "finished", bool, "game"),
            started_at=_require(data, "started_at", str, "game"),
            players=tuple(players),
        )
