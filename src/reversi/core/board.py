"""Board — an n x n grid with incremental frontier and legal-move indexes."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TypeAlias

from reversi.core.errors import IllegalMove, InvalidConfiguration
from reversi.core.square import Square
from reversi.core.types import EMPTY, Coord, in_bounds, neighbor_coords, player_token

_LOGGER = logging.getLogger(__name__)

SquareRef: TypeAlias = Square | Coord


def _coord_of(square: SquareRef) -> Coord:
    if isinstance(square, Square):
        return square.coord
    x, y = square
    return x, y


def _validate(size: int, player_ids: tuple[int, ...]) -> None:
    count = len(player_ids)
    if count == 0:
        raise InvalidConfiguration("At least one player is required")
    if sorted(player_ids) != list(range(1, count + 1)):
        raise InvalidConfiguration(
            f"Player ids must be distinct and numbered 1..{count}: {player_ids!r}"
        )
    if size <= 0:
        raise InvalidConfiguration(f"Board size must be positive: {size!r}")
    if size % count != 0:
        raise InvalidConfiguration(
            f"Board size {size} is not a multiple of the player count {count}"
        )


class Board:
    """Mutable square board for ``k`` players.

    Besides the occupant grid the board keeps three caches up to date on
    every placement:

    * the score of each player,
    * the *frontier*: empty squares touching at least one disk,
    * the occupied-neighbour set of every square.

    Legal moves are held per player in an explicit index that is rebuilt
    only by :meth:`update_legal_moves`. Reads never recompute it.

    Args:
        size: Squares per side; must be a positive multiple of the number
            of players.
        player_ids: Player ids in turn order, exactly ``1..k`` in any order.

    Raises:
        InvalidConfiguration: If *size* and *player_ids* cannot form a game.
    """

    __slots__ = ("_size", "_player_ids", "_squares", "_scores", "_frontier", "_moves")

    def __init__(self, size: int, player_ids: Sequence[int]) -> None:
        self._setup(size, tuple(player_ids))
        self._seed()

    def _setup(self, size: int, player_ids: tuple[int, ...]) -> None:
        _validate(size, player_ids)
        self._size = size
        self._player_ids = player_ids
        self._squares: list[list[Square]] = [
            [Square(x, y) for x in range(size)] for y in range(size)
        ]
        # [player_id - 1] -> disks owned.
        self._scores: list[int] = [0] * len(player_ids)
        self._frontier: set[Coord] = set()
        # [player_id - 1] -> {destination: flanked squares}.
        self._moves: list[dict[Coord, frozenset[Coord]]] = [{} for _ in player_ids]

    def _seed(self) -> None:
        """Fill the central k x k block, one disk per player per row."""
        count = len(self._player_ids)
        origin = max(0, min(self._size // 2 - 1, self._size - count))
        for i in range(count):
            for j in range(count):
                player_id = self._player_ids[(count - 1 - i + j) % count]
                self._place(self._squares[origin + i][origin + j], player_id)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], player_ids: Sequence[int]) -> Board:
        """Rebuild a board from an occupant grid (``rows[y][x]``, 0 = empty).

        Caches are rebuilt from scratch; legal-move indexes start empty.
        """
        board = cls.__new__(cls)
        board._setup(len(rows), tuple(player_ids))
        valid = set(board._player_ids)
        for y, row in enumerate(rows):
            if len(row) != board._size:
                raise InvalidConfiguration(
                    f"Row {y} has {len(row)} squares, expected {board._size}"
                )
            for x, occupant in enumerate(row):
                if occupant == EMPTY:
                    continue
                if occupant not in valid:
                    raise InvalidConfiguration(
                        f"Unknown occupant {occupant!r} at ({x}, {y})"
                    )
                board._place(board._squares[y][x], occupant)
        return board

    # -- Element access -----------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def player_ids(self) -> tuple[int, ...]:
        return self._player_ids

    def square(self, x: int, y: int) -> Square:
        if not self.contains(x, y):
            raise IndexError(f"Square ({x}, {y}) is off a {self._size}x{self._size} board")
        return self._squares[y][x]

    def __getitem__(self, coord: Coord) -> Square:
        x, y = coord
        return self.square(x, y)

    def __iter__(self) -> Iterator[Square]:
        for row in self._squares:
            yield from row

    def contains(self, x: int, y: int) -> bool:
        return in_bounds(x, y, self._size)

    def rows(self) -> list[list[int]]:
        """Occupant grid, ``rows[y][x]``."""
        return [[sq.occupant for sq in row] for row in self._squares]

    @property
    def frontier(self) -> frozenset[Square]:
        """Empty squares adjacent to at least one occupied square."""
        return frozenset(self._squares[y][x] for x, y in self._frontier)

    def occupied_count(self) -> int:
        return sum(self._scores)

    def empty_count(self) -> int:
        return self._size * self._size - self.occupied_count()

    # -- Player queries -----------------------------------------------------

    def _has_player(self, player_id: int) -> bool:
        return 1 <= player_id <= len(self._player_ids)

    def score(self, player_id: int) -> int | None:
        """Disks owned by *player_id*, or ``None`` for an unknown id."""
        if not self._has_player(player_id):
            return None
        return self._scores[player_id - 1]

    def scores(self) -> dict[int, int]:
        return {pid: self._scores[pid - 1] for pid in self._player_ids}

    def legal_moves(self, player_id: int) -> frozenset[Square]:
        """Destinations found by the last :meth:`update_legal_moves` call."""
        if not self._has_player(player_id):
            return frozenset()
        return frozenset(self._squares[y][x] for x, y in self._moves[player_id - 1])

    def flanked_squares(self, square: SquareRef, player_id: int) -> frozenset[Square] | None:
        """Squares captured if *player_id* moved to *square*, or ``None``."""
        if not self._has_player(player_id):
            return None
        flanked = self._moves[player_id - 1].get(_coord_of(square))
        if flanked is None:
            return None
        return frozenset(self._squares[y][x] for x, y in flanked)

    def is_legal(self, square: SquareRef, player_id: int) -> bool:
        if not self._has_player(player_id):
            return False
        return _coord_of(square) in self._moves[player_id - 1]

    def has_legal_move(self, player_id: int) -> bool:
        if not self._has_player(player_id):
            return False
        return bool(self._moves[player_id - 1])

    def is_full(self) -> bool:
        """Whether no empty square borders a disk (board saturation)."""
        return not self._frontier

    # -- Mutation -----------------------------------------------------------

    def apply_move(self, square: SquareRef, player_id: int) -> frozenset[Square]:
        """Place *player_id*'s disk on *square* and flip the flanked runs.

        The move must be in the index built by the last
        :meth:`update_legal_moves` call for *player_id*.

        Returns:
            The squares that changed owner.

        Raises:
            IllegalMove: Unknown player id or a move not currently legal.
        """
        if not self._has_player(player_id):
            raise IllegalMove(f"Unknown player id: {player_id!r}")
        coord = _coord_of(square)
        flanked = self._moves[player_id - 1].get(coord)
        if flanked is None:
            raise IllegalMove(f"Illegal move for player {player_id} at {coord}")

        x, y = coord
        self._place(self._squares[y][x], player_id)

        flipped: list[Square] = []
        for fx, fy in flanked:
            target = self._squares[fy][fx]
            self._scores[target.occupant - 1] -= 1
            target.set_occupant(player_id)
            self._scores[player_id - 1] += 1
            flipped.append(target)

        for index in self._moves:
            index.pop(coord, None)

        _LOGGER.debug(
            "Player %d moved to %s, flipping %d disk(s)", player_id, coord, len(flipped)
        )
        return frozenset(flipped)

    def update_legal_moves(self, player_id: int) -> None:
        """Rebuild *player_id*'s legal-move index from the frontier.

        Unknown ids are ignored.
        """
        if not self._has_player(player_id):
            return

        size = self._size
        squares = self._squares
        found: dict[Coord, set[Coord]] = {}
        for ex, ey in self._frontier:
            for fx, fy in squares[ey][ex].neighbors:
                if squares[fy][fx].occupant == player_id:
                    continue
                dx, dy = fx - ex, fy - ey
                run: list[Coord] = [(fx, fy)]
                x, y = fx + dx, fy + dy
                while 0 <= x < size and 0 <= y < size:
                    occupant = squares[y][x].occupant
                    if occupant == EMPTY:
                        break
                    if occupant == player_id:
                        found.setdefault((ex, ey), set()).update(run)
                        break
                    run.append((x, y))
                    x += dx
                    y += dy

        self._moves[player_id - 1] = {
            coord: frozenset(flanked) for coord, flanked in found.items()
        }

    def _place(self, square: Square, player_id: int) -> None:
        """Occupy an empty square and extend the adjacency caches around it."""
        square.set_occupant(player_id)
        self._scores[player_id - 1] += 1
        self._frontier.discard(square.coord)
        for nx, ny in neighbor_coords(square.x, square.y, self._size):
            neighbor = self._squares[ny][nx]
            neighbor.add_neighbor(square)
            if neighbor.is_empty:
                self._frontier.add((nx, ny))

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Independent copy, including the current legal-move indexes."""
        board = Board.from_rows(self.rows(), self._player_ids)
        board._moves = [dict(index) for index in self._moves]
        return board

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            len(self._player_ids) == len(other._player_ids)
            and self.rows() == other.rows()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        lines = [
            " ".join(
                player_token(sq.occupant) if sq.occupant != EMPTY else "." for sq in row
            )
            for row in self._squares
        ]
        return "\n".join(lines)
