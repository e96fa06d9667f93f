from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .state import BoardArray, Coordinate, Stone

DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(frozen=True)
class Group:
    color: Stone
    stones: Tuple[Coordinate, ...]
    liberties: int

    def __len__(self) -> int:
        return len(self.stones)

    def __contains__(self, coord: object) -> bool:
        return coord in self.stones


def neighbours(x: int, y: int, size: int) -> List[Coordinate]:
    result: List[Coordinate] = []
    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < size and 0 <= ny < size:
            result.append(Coordinate(nx, ny))
    return result


def find_group(board: BoardArray, start: Coordinate, color: Stone) -> Group:
    """Collect the stones connected to ``start`` and count their liberties.

    ``board`` is indexed ``[y, x]``. Visited cells and liberties are tracked
    by flat index ``y * size + x`` so shared liberties are counted once.
    """
    size = int(board.shape[0])
    if not (0 <= start.x < size and 0 <= start.y < size):
        raise ValueError(f"Coordinate ({start.x}, {start.y}) is off a {size}x{size} board.")
    if color == Stone.EMPTY or board[start.y, start.x] != int(color):
        raise ValueError(f"No {color.name} stone at ({start.x}, {start.y}).")

    flat = board.reshape(-1)
    visited = np.zeros(size * size, dtype=bool)
    visited[start.index(size)] = True
    queue = deque([start])
    members: List[Coordinate] = []

    while queue:
        current = queue.popleft()
        members.append(current)
        for n in neighbours(current.x, current.y, size):
            idx = n.index(size)
            if not visited[idx] and flat[idx] == int(color):
                visited[idx] = True
                queue.append(n)

    liberty_seen = np.zeros(size * size, dtype=bool)
    liberties = 0
    for stone in members:
        for n in neighbours(stone.x, stone.y, size):
            idx = n.index(size)
            if flat[idx] == Stone.EMPTY and not liberty_seen[idx]:
                liberty_seen[idx] = True
                liberties += 1

    return Group(color=color, stones=tuple(members), liberties=liberties)
