"""Compact text form of a board, in the spirit of FEN.

Rows are written from the top (``y = 0``) down and joined by ``/``. A run
of empty squares is written as its length, player ``p`` as the ``p``-th
capital letter, or as ``[p]`` beyond ``Z``. The player count follows after
a space::

    8/8/8/3BA3/3AB3/8/8/8 2
"""

from __future__ import annotations

from collections.abc import Sequence

from reversi.core.board import Board
from reversi.core.types import EMPTY, player_from_letter, player_token


def board_to_text(board: Board) -> str:
    """Serialise *board* to its text form."""
    rows: list[str] = []
    for occupants in board.rows():
        empty = 0
        row = ""
        for occupant in occupants:
            if occupant == EMPTY:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += player_token(occupant)
        if empty:
            row += str(empty)
        rows.append(row)
    return f"{'/'.join(rows)} {len(board.player_ids)}"


def _parse_rank(rank_text: str, size: int, count: int, text: str) -> list[int]:
    row: list[int] = []
    digits = ""

    def flush() -> None:
        nonlocal digits
        if digits:
            run = int(digits)
            if len(row) + run > size:
                raise ValueError(f"Invalid board text row width: {text!r}")
            row.extend([EMPTY] * run)
            digits = ""

    i = 0
    while i < len(rank_text):
        ch = rank_text[i]
        if ch.isdigit():
            digits += ch
            i += 1
            continue
        flush()
        if ch == "[":
            end = rank_text.find("]", i)
            number = rank_text[i + 1 : end] if end != -1 else ""
            if not number.isdigit():
                raise ValueError(f"Invalid board text occupant {rank_text[i:]!r}: {text!r}")
            occupant = int(number)
            i = end + 1
        else:
            occupant = player_from_letter(ch)
            i += 1
        if not (1 <= occupant <= count):
            raise ValueError(f"Invalid board text occupant {occupant!r}: {text!r}")
        if len(row) >= size:
            raise ValueError(f"Invalid board text row width: {text!r}")
        row.append(occupant)
    flush()

    if len(row) != size:
        raise ValueError(f"Invalid board text row width: {text!r}")
    return row


def board_from_text(text: str, player_ids: Sequence[int] | None = None) -> Board:
    """Parse the text form produced by :func:`board_to_text`.

    *player_ids* gives the turn order; it defaults to ``1..k``.

    Raises:
        ValueError: Malformed text.
        InvalidConfiguration: Well-formed text describing an impossible board.
    """
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Invalid board text (need 2 fields): {text!r}")
    placement, count_part = parts
    if not count_part.isdigit() or int(count_part) < 1:
        raise ValueError(f"Invalid board text player count: {count_part!r}")
    count = int(count_part)

    ranks = placement.split("/")
    size = len(ranks)
    rows = [_parse_rank(rank_text, size, count, text) for rank_text in ranks]

    if player_ids is None:
        player_ids = range(1, count + 1)
    elif len(player_ids) != count:
        raise ValueError(
            f"Board text has {count} players but {len(player_ids)} ids were given"
        )
    return Board.from_rows(rows, player_ids)
