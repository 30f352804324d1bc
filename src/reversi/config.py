"""Game presets: board sizes and default disk labels."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DISK_LABELS: tuple[str, ...] = ("Black", "White")


@dataclass(frozen=True, slots=True)
class BoardSize:
    """Immutable board-size choice.

    Args:
        squares: Squares per side.
        label: Display name of the preset.
    """

    squares: int
    label: str = "Custom"

    # Common presets
    @classmethod
    def small(cls) -> BoardSize:
        return cls(6, "Small")

    @classmethod
    def standard(cls) -> BoardSize:
        return cls(8, "Standard")

    @classmethod
    def large(cls) -> BoardSize:
        return cls(10, "Large")

    @classmethod
    def presets(cls) -> tuple[BoardSize, ...]:
        return (cls.large(), cls.standard(), cls.small())

    def supports(self, player_count: int) -> bool:
        """Whether this size can seat *player_count* players."""
        return player_count > 0 and self.squares > 0 and self.squares % player_count == 0

    def __str__(self) -> str:
        return f"{self.label} ({self.squares} × {self.squares})"


DEFAULT_BOARD_SIZE = BoardSize.standard()
