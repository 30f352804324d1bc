"""Tests for the board text form."""

import pytest

from reversi.core.board import Board
from reversi.core.errors import InvalidConfiguration
from reversi.core.notation import board_from_text, board_to_text

STANDARD = "8/8/8/3BA3/3AB3/8/8/8 2"


class TestBoardToText:
    def test_standard_opening(self) -> None:
        assert board_to_text(Board(8, [1, 2])) == STANDARD

    def test_large_board_opening(self) -> None:
        text = board_to_text(Board(10, [1, 2]))
        ranks = text.split()[0].split("/")
        assert ranks[4] == "4BA4"
        assert ranks[5] == "4AB4"
        assert ranks[0] == "10"

    def test_player_count_suffix(self) -> None:
        assert board_to_text(Board(6, [1, 2, 3])).endswith(" 3")

    def test_full_row(self) -> None:
        assert board_to_text(Board(2, [1, 2])) == "BA/AB 2"


class TestBoardFromText:
    def test_parses_standard(self) -> None:
        board = board_from_text(STANDARD)
        assert board.size == 8
        assert board.player_ids == (1, 2)
        assert board == Board(8, [1, 2])
        assert len(board.frontier) == 12

    def test_text_survives_reparse(self) -> None:
        text = "1BA1/BB2/A1B1/4 2"
        assert board_to_text(board_from_text(text)) == text

    def test_multi_digit_runs(self) -> None:
        board = board_from_text("10/10/10/10/4BA4/4AB4/10/10/10/10 2")
        assert board == Board(10, [1, 2])

    def test_custom_turn_order(self) -> None:
        board = board_from_text(STANDARD, [2, 1])
        assert board.player_ids == (2, 1)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "8/8/8/3BA3/3AB3/8/8/8",
            "8/8/8/3BA3/3AB3/8/8/8 2 extra",
            "8/8/8/3BA3/3AB3/8/8/8 x",
            "8/8/8/3BA3/3AB3/8/8/8 0",
            "8/8/8/3CA3/3AB3/8/8/8 2",
            "8/8/8/3BA4/3AB3/8/8/8 2",
            "8/8/8/3Ba3/3AB3/8/8/8 2",
        ],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            board_from_text(text)

    def test_rejects_id_count_mismatch(self) -> None:
        with pytest.raises(ValueError, match="ids were given"):
            board_from_text(STANDARD, [1, 2, 3])

    def test_impossible_board(self) -> None:
        with pytest.raises(InvalidConfiguration):
            board_from_text("3/3/3 2")

    @pytest.mark.parametrize("text", ["300000000 1", "2/300000000 2", "A999999999/2 2"])
    def test_rejects_oversized_run(self, text: str) -> None:
        with pytest.raises(ValueError, match="row width"):
            board_from_text(text)

    def test_bracketed_id_parsed(self) -> None:
        board = board_from_text("[2]1/2 2")
        assert board[0, 0].occupant == 2

    @pytest.mark.parametrize("text", ["[3]1/2 2", "[0]1/2 2", "[]1/2 2", "[1/2 2", "[x]1/2 2"])
    def test_rejects_bad_bracketed_id(self, text: str) -> None:
        with pytest.raises(ValueError, match="occupant"):
            board_from_text(text)


class TestManyPlayers:
    def test_ids_past_z_written_in_brackets(self) -> None:
        board = Board(27, range(1, 28))
        text = board_to_text(board)
        first_rank = text.split()[0].split("/")[0]
        assert first_rank.startswith("[27]ABC")
        assert text.endswith(" 27")

    def test_text_survives_reparse(self) -> None:
        board = Board(27, range(1, 28))
        restored = board_from_text(board_to_text(board))
        assert restored == board
        assert restored.scores() == board.scores()
