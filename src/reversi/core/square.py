"""Square — a board coordinate with its occupant and filled neighbours."""

from __future__ import annotations

from reversi.core.types import EMPTY, Coord


class Square:
    """One cell of the board.

    The coordinates never change. The occupant starts as :data:`EMPTY` and
    is set by the owning :class:`~reversi.core.board.Board`. Occupied
    neighbours are stored by coordinate, so squares never hold references
    to each other.
    """

    __slots__ = ("x", "y", "_occupant", "_neighbors")

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._occupant = EMPTY
        self._neighbors: set[Coord] = set()

    @property
    def coord(self) -> Coord:
        return self.x, self.y

    @property
    def occupant(self) -> int:
        """Owning player id, or :data:`EMPTY`."""
        return self._occupant

    @property
    def is_empty(self) -> bool:
        return self._occupant == EMPTY

    @property
    def neighbors(self) -> frozenset[Coord]:
        """Coordinates of the occupied squares around this one."""
        return frozenset(self._neighbors)

    def set_occupant(self, player_id: int) -> None:
        self._occupant = player_id

    def add_neighbor(self, square: Square | None) -> None:
        """Record *square* as an occupied neighbour (``None`` is ignored)."""
        if square is not None:
            self._neighbors.add(square.coord)

    def __repr__(self) -> str:
        return f"Square({self.x}, {self.y}, occupant={self._occupant})"
