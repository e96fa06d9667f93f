"""Coordinate notation, SGF export and text diagrams for ZenGo boards.

Internal coordinates are ``(x, y)`` with ``y = 0`` at the top edge. Human
notation follows the usual board labels: columns ``A``-``T`` without ``I``
and rows counted upward from the bottom edge, so on 19x19 ``(15, 3)`` is
``Q16``.
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

from zengo.core import BoardState, Coordinate, Stone

COLUMN_LABELS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"
SGF_LETTERS = "abcdefghijklmnopqrstuvwxyz"

_HUMAN_PATTERN = re.compile(r"^\s*([A-Za-z])\s*(\d{1,2})\s*$")


def _check_size(size: int) -> None:
    if not 1 <= size <= len(COLUMN_LABELS):
        raise ValueError(f"Notation supports board sizes 1-{len(COLUMN_LABELS)}, got {size}.")


def _check_coordinate(coord: Coordinate, size: int) -> None:
    _check_size(size)
    if not (0 <= coord.x < size and 0 <= coord.y < size):
        raise ValueError(f"Coordinate ({coord.x}, {coord.y}) is off a {size}x{size} board.")


def to_human_coordinate(coord: Coordinate, size: int) -> str:
    _check_coordinate(coord, size)
    return f"{COLUMN_LABELS[coord.x]}{size - coord.y}"


def from_human_coordinate(text: str, size: int) -> Optional[Coordinate]:
    """Parse labels such as ``Q16``; returns ``None`` when ``text`` is not one."""
    _check_size(size)
    match = _HUMAN_PATTERN.match(text)
    if match is None:
        return None
    column = match.group(1).upper()
    if column not in COLUMN_LABELS[:size]:
        return None
    row = int(match.group(2))
    if not 1 <= row <= size:
        return None
    return Coordinate(COLUMN_LABELS.index(column), size - row)


def to_sgf_coordinate(coord: Coordinate, size: int) -> str:
    _check_coordinate(coord, size)
    return f"{SGF_LETTERS[coord.x]}{SGF_LETTERS[coord.y]}"


def generate_sgf(history: Sequence[Coordinate], size: int, komi: float = 7.5) -> str:
    moves = []
    for i, move in enumerate(history):
        color = "B" if i % 2 == 0 else "W"
        moves.append(f";{color}[{to_sgf_coordinate(move, size)}]")
    return f"(;GM[1]FF[4]SZ[{size}]KM[{komi:g}]{''.join(moves)})"


def format_board(state: BoardState) -> str:
    symbols = {Stone.EMPTY: ".", Stone.BLACK: "X", Stone.WHITE: "O"}
    size = state.size
    _check_size(size)
    header = "   " + " ".join(COLUMN_LABELS[:size])
    lines = [header]
    for y in range(size):
        cells = []
        for x in range(size):
            symbol = symbols[Stone(int(state.board[y, x]))]
            if state.last_move == Coordinate(x, y):
                symbol = symbol.lower()  # last move shown in lower case
            cells.append(symbol)
        lines.append(f"{size - y:>2} " + " ".join(cells))
    return "\n".join(lines)
