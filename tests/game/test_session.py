"""Tests for Session — repeated games between the same players."""

import json

import pytest

from reversi.config import BoardSize
from reversi.core.errors import InvalidConfiguration
from reversi.game.session import Session


def _finish(session: Session) -> None:
    """Helper: play a 2x2 game, which ends on its first turn change."""
    game = session.create_game(2)
    game.next_turn()
    assert game.is_finished


class TestSessionSetup:
    def test_for_names_pairs_default_disks(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        assert [str(p) for p in session.players] == ["Ada (Black)", "Bob (White)"]

    def test_for_names_custom_disks(self) -> None:
        session = Session.for_names(["a", "b", "c"], ["Red", "Green", "Blue"])
        assert [p.disk for p in session.players] == ["Red", "Green", "Blue"]

    def test_for_names_mismatch(self) -> None:
        with pytest.raises(ValueError, match="one disk per player"):
            Session.for_names(["Ada"])

    def test_no_game_yet(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        assert session.current_game is None
        assert not session.is_game_active()
        assert not session.has_game_started()
        assert not session.has_legal_move()
        assert session.history == []


class TestCreateGame:
    def test_default_size(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        game = session.create_game()
        assert game.board_size == 8
        assert session.current_game is game
        assert session.is_game_active()
        assert session.has_legal_move()

    def test_preset_size(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        assert session.create_game(BoardSize.small()).board_size == 6
        assert session.create_game(10).board_size == 10

    def test_invalid_size_keeps_current_game(self) -> None:
        session = Session.for_names(["a", "b", "c"], ["Red", "Green", "Blue"])
        game = session.create_game(6)
        with pytest.raises(InvalidConfiguration):
            session.create_game(8)
        assert session.current_game is game

    def test_started_after_first_turn(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        game = session.create_game()
        assert not session.has_game_started()
        game.apply_move((3, 2))
        game.next_turn()
        assert session.has_game_started()


class TestHistory:
    def test_finished_game_archived_on_next_create(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        _finish(session)
        assert session.history == []
        session.create_game()
        assert len(session.history) == 1
        assert "[ Board size: 2 × 2 ]" in session.history[0]

    def test_unfinished_game_not_archived(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        session.create_game()
        session.create_game()
        assert session.history == []

    def test_history_is_a_copy(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        session.history.append("bogus")
        assert session.history == []

    def test_ties_credit_no_wins(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        for _ in range(2):
            _finish(session)
        assert all(p.win_count == 0 for p in session.players)


class TestSessionSnapshot:
    def test_round_trip_through_json(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        _finish(session)
        game = session.create_game()
        game.apply_move((3, 2))
        game.next_turn()

        data = json.loads(json.dumps(session.snapshot()))
        restored = Session.from_snapshot(data)

        assert [str(p) for p in restored.players] == ["Ada (Black)", "Bob (White)"]
        assert restored.history == session.history
        restored_game = restored.current_game
        assert restored_game is not None
        assert restored_game.board == game.board
        assert restored_game.move_count == 1
        assert restored_game.current_player is restored.players[1]
        assert restored.is_game_active()

    def test_without_game(self) -> None:
        data = Session.for_names(["Ada", "Bob"]).snapshot()
        assert data["game"] is None
        assert Session.from_snapshot(data).current_game is None

    def test_rejects_missing_players(self) -> None:
        with pytest.raises(ValueError, match="no players"):
            Session.from_snapshot({"players": [], "history": []})

    def test_rejects_bad_history(self) -> None:
        data = Session.for_names(["Ada", "Bob"]).snapshot()
        data["history"] = [1]
        with pytest.raises(ValueError, match="history"):
            Session.from_snapshot(data)

    def test_rejects_unknown_game_player(self) -> None:
        session = Session.for_names(["Ada", "Bob"])
        session.create_game()
        data = session.snapshot()
        data["game"]["players"][1]["id"] = 7
        with pytest.raises(ValueError, match="not in session"):
            Session.from_snapshot(data)

    def test_round_trip_beyond_letter_ids(self) -> None:
        names = [f"p{i}" for i in range(27)]
        disks = [f"D{i:02d}" for i in range(27)]
        session = Session.for_names(names, disks)
        game = session.create_game(27)

        restored = Session.from_snapshot(json.loads(json.dumps(session.snapshot())))
        restored_game = restored.current_game
        assert restored_game is not None
        assert restored_game.board == game.board
        assert restored.snapshot() == session.snapshot()
