"""Tests for board-size presets."""

import pytest

from reversi.config import DEFAULT_BOARD_SIZE, DEFAULT_DISK_LABELS, BoardSize
from reversi.core.board import Board


class TestBoardSize:
    def test_presets(self) -> None:
        assert [s.squares for s in BoardSize.presets()] == [10, 8, 6]
        assert DEFAULT_BOARD_SIZE == BoardSize.standard()

    def test_str(self) -> None:
        assert str(BoardSize.standard()) == "Standard (8 × 8)"
        assert str(BoardSize(12)) == "Custom (12 × 12)"

    @pytest.mark.parametrize(
        ("squares", "players", "expected"),
        [(8, 2, True), (8, 4, True), (8, 3, False), (6, 3, True), (8, 0, False), (0, 2, False)],
    )
    def test_supports(self, squares: int, players: int, expected: bool) -> None:
        assert BoardSize(squares).supports(players) is expected

    def test_supported_presets_build(self) -> None:
        for size in BoardSize.presets():
            for count in range(1, 5):
                if size.supports(count):
                    Board(size.squares, list(range(1, count + 1)))

    def test_default_labels_sort_in_order(self) -> None:
        assert list(DEFAULT_DISK_LABELS) == sorted(DEFAULT_DISK_LABELS)
