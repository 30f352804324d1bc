"""Exception hierarchy for the rule engine."""

from __future__ import annotations


class ReversiError(Exception):
    """Base class for every error raised by the rule engine."""


class InvalidConfiguration(ReversiError, ValueError):
    """Board size and player list cannot form a valid game.

    Raised only while constructing a board or game; retrying with the same
    arguments fails the same way.
    """


class IllegalMove(ReversiError, ValueError):
    """A move was attempted at a non-legal square or by an unknown player.

    Legality is checked before anything is mutated, so the board is left
    exactly as it was.
    """
