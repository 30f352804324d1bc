"""Shared enums for the game layer."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Finite-state-machine states for a Reversi game."""

    IN_PROGRESS = auto()
    FINISHED = auto()
