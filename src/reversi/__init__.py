"""Rule engine for Reversi generalized to any number of players."""

from reversi.config import DEFAULT_BOARD_SIZE, DEFAULT_DISK_LABELS, BoardSize
from reversi.core import Board, IllegalMove, InvalidConfiguration, ReversiError, Square
from reversi.game import Game, GameController, GamePhase, Player, Session, new_game

__all__ = [
    "DEFAULT_BOARD_SIZE",
    "DEFAULT_DISK_LABELS",
    "Board",
    "BoardSize",
    "Game",
    "GameController",
    "GamePhase",
    "IllegalMove",
    "InvalidConfiguration",
    "Player",
    "ReversiError",
    "Session",
    "Square",
    "new_game",
]
