"""Tests for Square."""

from reversi.core.square import Square
from reversi.core.types import EMPTY


class TestSquare:
    def test_starts_empty(self) -> None:
        sq = Square(2, 5)
        assert sq.coord == (2, 5)
        assert sq.occupant == EMPTY
        assert sq.is_empty
        assert sq.neighbors == frozenset()

    def test_set_occupant(self) -> None:
        sq = Square(0, 0)
        sq.set_occupant(3)
        assert sq.occupant == 3
        assert not sq.is_empty

    def test_add_neighbor_stores_coordinate(self) -> None:
        sq = Square(1, 1)
        sq.add_neighbor(Square(0, 1))
        assert sq.neighbors == frozenset({(0, 1)})

    def test_add_neighbor_is_idempotent(self) -> None:
        sq = Square(1, 1)
        other = Square(2, 2)
        sq.add_neighbor(other)
        sq.add_neighbor(other)
        assert len(sq.neighbors) == 1

    def test_add_none_is_noop(self) -> None:
        sq = Square(1, 1)
        sq.add_neighbor(None)
        assert sq.neighbors == frozenset()

    def test_neighbors_view_is_read_only_copy(self) -> None:
        sq = Square(1, 1)
        view = sq.neighbors
        sq.add_neighbor(Square(1, 0))
        assert view == frozenset()
        assert sq.neighbors == frozenset({(1, 0)})

    def test_repr(self) -> None:
        assert "occupant=0" in repr(Square(4, 4))
