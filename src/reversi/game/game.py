"""Game — turn order, passes, termination and winner for one board."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from reversi.core.board import Board, SquareRef
from reversi.core.errors import IllegalMove
from reversi.core.notation import board_from_text, board_to_text
from reversi.core.square import Square
from reversi.game.interfaces import GamePhase
from reversi.game.player import Player, assign_turn_order
from reversi.game.snapshot import GameSnapshot, PlayerSnapshot

_LOGGER = logging.getLogger(__name__)

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class Game:
    """One game of Reversi between an ordered list of players.

    The game owns its :class:`Board`; the players are shared with the
    caller, and the game writes their score and active flag and credits
    the winner's session tally when the game ends.

    Thread-safety: none. Callers serialize :meth:`apply_move` and
    :meth:`next_turn` per game.

    Args:
        players: Players in turn order, with ids ``1..k`` already assigned
            (see :func:`new_game`).
        board_size: Squares per side.

    Raises:
        InvalidConfiguration: From :class:`Board` construction.
    """

    __slots__ = (
        "_players",
        "_board",
        "_turn_count",
        "_pass_count",
        "_move_count",
        "_phase",
        "_winning_player",
        "_started_at",
    )

    def __init__(self, players: Sequence[Player], board_size: int) -> None:
        self._players: tuple[Player, ...] = tuple(players)
        self._board = Board(board_size, [p.id for p in self._players])

        for player in self._players:
            player.set_active(False)

        self._started_at = datetime.now(timezone.utc)
        self._turn_count = 0
        self._pass_count = 0
        self._move_count = 0
        self._phase = GamePhase.IN_PROGRESS
        self._winning_player: Player | None = None

        self._board.update_legal_moves(self.current_player.id)
        self.current_player.set_active(True)
        self.score_snapshot()

        _LOGGER.info(
            "New %dx%d game: %s",
            board_size,
            board_size,
            ", ".join(str(p) for p in self._players),
        )

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    @property
    def board(self) -> Board:
        return self._board

    @property
    def board_size(self) -> int:
        return self._board.size

    @property
    def current_player(self) -> Player:
        return self._players[self._turn_count]

    @property
    def turn_count(self) -> int:
        return self._turn_count

    @property
    def pass_count(self) -> int:
        """Consecutive turns without a legal move."""
        return self._pass_count

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def started_at(self) -> datetime:
        return self._started_at

    @property
    def is_finished(self) -> bool:
        return self._phase == GamePhase.FINISHED

    @property
    def winning_player(self) -> Player | None:
        """The unique top scorer, or ``None`` on a tie."""
        return self._winning_player

    @property
    def has_winning_player(self) -> bool:
        return self._winning_player is not None

    # ── Turn handling ────────────────────────────────────────────────────

    def has_legal_move(self) -> bool:
        return self._board.has_legal_move(self.current_player.id)

    def legal_moves(self) -> frozenset[Square]:
        """Legal destinations for the current player."""
        return self._board.legal_moves(self.current_player.id)

    def apply_move(self, square: SquareRef) -> frozenset[Square]:
        """Play *square* for the current player; see :meth:`Board.apply_move`.

        Does not advance the turn.
        """
        if self.is_finished:
            raise IllegalMove("The game is finished")
        return self._board.apply_move(square, self.current_player.id)

    def next_turn(self) -> None:
        """Advance to the next player and check for the end of the game.

        Once the game is finished further calls are ignored.
        """
        if self.is_finished:
            _LOGGER.debug("next_turn ignored: game already finished")
            return

        self.current_player.set_active(False)

        self._turn_count = (self._turn_count + 1) % len(self._players)
        self._board.update_legal_moves(self.current_player.id)
        self.score_snapshot()

        if self._pass_count >= len(self._players) or self._board.is_full():
            self._phase = GamePhase.FINISHED
            if self._winning_player is not None:
                self._winning_player.increment_win_count()
            _LOGGER.info(
                "Game finished after %d moves; winner: %s",
                self._move_count,
                self._winning_player or "tie",
            )
            return

        self._phase = GamePhase.IN_PROGRESS
        self.current_player.set_active(True)

        if self.has_legal_move():
            self._pass_count = 0
        else:
            self._pass_count += 1
            _LOGGER.debug("%s has no legal move (pass %d)", self.current_player, self._pass_count)

        self._move_count += 1

    def score_snapshot(self) -> dict[int, int]:
        """Copy board scores into the players and pick the winner.

        Returns:
            Player id → score.
        """
        scores: dict[int, int] = {}
        leader: Player | None = None
        tied = False
        for player in self._players:
            score = self._board.score(player.id) or 0
            player.set_score(score)
            scores[player.id] = score
            if leader is None or score > leader.score:
                leader = player
                tied = False
            elif score == leader.score:
                tied = True
        self._winning_player = None if tied else leader
        return scores

    # ── Display ──────────────────────────────────────────────────────────

    def summary(self) -> str:
        """One-line record of the game, as kept in session history."""
        start = self._started_at.astimezone().strftime(_TIME_FORMAT)
        end = datetime.now().astimezone().strftime(_TIME_FORMAT)
        scores = ", ".join(f"{p}: {p.score}" for p in self._players)
        size = self.board_size
        return f"[ Start: {start} | End: {end} ] {scores} [ Board size: {size} × {size} ]"

    # ── Persistence ──────────────────────────────────────────────────────

    def snapshot(self) -> GameSnapshot:
        """Capture the full mutable state of the game."""
        # Player scores lag the board between apply_move and next_turn.
        self.score_snapshot()
        return GameSnapshot(
            board=board_to_text(self._board),
            board_size=self.board_size,
            turn_count=self._turn_count,
            pass_count=self._pass_count,
            move_count=self._move_count,
            finished=self.is_finished,
            started_at=self._started_at.isoformat(),
            players=tuple(PlayerSnapshot.capture(p) for p in self._players),
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: GameSnapshot,
        players: Sequence[Player] | None = None,
    ) -> Game:
        """Rebuild a game captured with :meth:`snapshot`.

        Args:
            snapshot: Saved state.
            players: Existing player objects to reuse, in the snapshot's
                order. Their records are overwritten from the snapshot.
                New players are created when omitted.

        Raises:
            ValueError: Inconsistent snapshot.
            InvalidConfiguration: Impossible board.
        """
        records = snapshot.players
        if not records:
            raise ValueError("Invalid game snapshot: no players")
        if players is None:
            players = [Player(r.name, r.disk) for r in records]
        elif len(players) != len(records):
            raise ValueError(
                f"Game snapshot has {len(records)} players, got {len(players)}"
            )
        for player, record in zip(players, records):
            player.set_id(record.id)
            player.set_win_count(record.win_count)
            player.set_active(record.active)

        board = board_from_text(snapshot.board, [r.id for r in records])
        if board.size != snapshot.board_size:
            raise ValueError(
                f"Invalid game snapshot: board is {board.size} wide, "
                f"expected {snapshot.board_size}"
            )
        if not (0 <= snapshot.turn_count < len(records)):
            raise ValueError(f"Invalid game snapshot turn count: {snapshot.turn_count!r}")
        if snapshot.pass_count < 0 or snapshot.move_count < 0:
            raise ValueError("Invalid game snapshot: negative counter")
        try:
            started_at = datetime.fromisoformat(snapshot.started_at)
        except ValueError:
            raise ValueError(
                f"Invalid game snapshot start time: {snapshot.started_at!r}"
            ) from None

        game = cls.__new__(cls)
        game._players = tuple(players)
        game._board = board
        game._turn_count = snapshot.turn_count
        game._pass_count = snapshot.pass_count
        game._move_count = snapshot.move_count
        game._phase = GamePhase.FINISHED if snapshot.finished else GamePhase.IN_PROGRESS
        game._winning_player = None
        game._started_at = started_at

        board.update_legal_moves(game.current_player.id)
        game.score_snapshot()
        return game


def new_game(players: Iterable[Player], board_size: int) -> Game:
    """Order *players* by disk label, reset their scores and start a game.

    Raises:
        InvalidConfiguration: If *board_size* cannot seat the players.
    """
    ordered = assign_turn_order(players)
    for player in ordered:
        player.reset_for_new_game()
    return Game(ordered, board_size)
