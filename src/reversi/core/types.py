"""Coordinate type alias and grid helpers.

Board layout (column-major x, row-major y, origin top-left)::

    (0, 0) (1, 0) ... (n-1, 0)
    (0, 1) (1, 1) ... (n-1, 1)
    ...
    (0, n-1)      ... (n-1, n-1)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (x, y)

EMPTY = 0

# The 8-neighbourhood, row by row.
DIRECTIONS: tuple[Coord, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


def in_bounds(x: int, y: int, size: int) -> bool:
    """Whether ``(x, y)`` lies on a ``size`` x ``size`` board."""
    return 0 <= x < size and 0 <= y < size


def neighbor_coords(x: int, y: int, size: int) -> Iterator[Coord]:
    """Coordinates within Chebyshev distance 1 of ``(x, y)``, clipped at edges."""
    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < size and 0 <= ny < size:
            yield nx, ny


def player_letter(player_id: int) -> str:
    """Letter used for *player_id* in board text, e.g. 1 → 'A'."""
    if not (1 <= player_id <= 26):
        raise ValueError(f"Player id out of letter range: {player_id!r}")
    return chr(ord("A") + player_id - 1)


def player_token(player_id: int) -> str:
    """Board-text token for *player_id*: a letter up to 26, else ``[id]``."""
    if player_id > 26:
        return f"[{player_id}]"
    return player_letter(player_id)


def player_from_letter(letter: str) -> int:
    """Inverse of :func:`player_letter`, e.g. 'C' → 3."""
    if len(letter) != 1 or not ("A" <= letter <= "Z"):
        raise ValueError(f"Invalid player letter: {letter!r}")
    return ord(letter) - ord("A") + 1


def square_name(coord: Coord) -> str:
    """Human-readable name, e.g. (3, 2) → 'd3'.

    Columns run a, b, c, ... and rows are numbered from 1 at the top.
    Only meaningful for boards up to 26 columns wide.
    """
    x, y = coord
    return chr(ord("a") + x) + str(y + 1)


def parse_square(name: str) -> Coord:
    """Parse a square name, e.g. 'd3' → (3, 2)."""
    if len(name) < 2 or not ("a" <= name[0] <= "z") or not name[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    row = int(name[1:])
    if row < 1:
        raise ValueError(f"Invalid square name: {name!r}")
    return ord(name[0]) - ord("a"), row - 1
