"""Core domain layer — pure Reversi rules with zero external dependencies.

Quick start::

    from reversi.core import Board

    board = Board(8, [1, 2])
    board.update_legal_moves(1)
    for square in board.legal_moves(1):
        print(square.coord, len(board.flanked_squares(square, 1)))
"""

from reversi.core.board import Board, SquareRef
from reversi.core.errors import IllegalMove, InvalidConfiguration, ReversiError
from reversi.core.notation import board_from_text, board_to_text
from reversi.core.square import Square
from reversi.core.types import (
    DIRECTIONS,
    EMPTY,
    Coord,
    in_bounds,
    neighbor_coords,
    parse_square,
    player_from_letter,
    player_letter,
    player_token,
    square_name,
)

__all__ = [
    # Errors
    "IllegalMove",
    "InvalidConfiguration",
    "ReversiError",
    # Types / helpers
    "Coord",
    "DIRECTIONS",
    "EMPTY",
    "SquareRef",
    "in_bounds",
    "neighbor_coords",
    "parse_square",
    "player_from_letter",
    "player_letter",
    "player_token",
    "square_name",
    # Domain objects
    "Board",
    "Square",
    # Notation
    "board_from_text",
    "board_to_text",
]
