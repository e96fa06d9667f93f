from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from zengo.core import BoardState, Stone

DEFAULT_INFLUENCE_WEIGHTS = (6, 4, 2, 1)  # by Manhattan distance 0..3

BoardLike = Union[BoardState, np.ndarray]


def _as_grid(board: BoardLike) -> np.ndarray:
    grid = board.board if isinstance(board, BoardState) else np.asarray(board)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError(f"Board must be a square grid, got shape {grid.shape}.")
    return grid


def influence_kernel(weights: Sequence[int] = DEFAULT_INFLUENCE_WEIGHTS) -> np.ndarray:
    """Square kernel holding ``weights[d]`` at Manhattan distance ``d``."""
    radius = len(weights) - 1
    span = np.arange(-radius, radius + 1)
    distance = np.abs(span)[:, None] + np.abs(span)[None, :]
    kernel = np.zeros(distance.shape, dtype=np.int32)
    for d, weight in enumerate(weights):
        kernel[distance == d] = weight
    return kernel


def calculate_influence(
    board: BoardLike,
    weights: Sequence[int] = DEFAULT_INFLUENCE_WEIGHTS,
) -> np.ndarray:
    """Sum the decayed contributions of every stone, +black / -white."""
    grid = _as_grid(board)
    size = grid.shape[0]
    signs = np.zeros(grid.shape, dtype=np.int32)
    signs[grid == Stone.BLACK] = 1
    signs[grid == Stone.WHITE] = -1

    influence = np.zeros(grid.shape, dtype=np.int32)
    kernel = influence_kernel(weights)
    radius = len(weights) - 1
    for (ky, kx), weight in np.ndenumerate(kernel):
        if weight == 0:
            continue
        dy, dx = ky - radius, kx - radius
        if abs(dy) >= size or abs(dx) >= size:
            continue
        # Stones at (y, x) push onto (y + dy, x + dx).
        src_y = slice(max(0, -dy), size - max(0, dy))
        src_x = slice(max(0, -dx), size - max(0, dx))
        dst_y = slice(max(0, dy), size - max(0, -dy))
        dst_x = slice(max(0, dx), size - max(0, -dx))
        influence[dst_y, dst_x] += weight * signs[src_y, src_x]
    return influence


def influence_delta(previous: BoardLike, current: BoardLike, weights: Sequence[int] = DEFAULT_INFLUENCE_WEIGHTS) -> np.ndarray:
    prev_grid = _as_grid(previous)
    cur_grid = _as_grid(current)
    if prev_grid.shape != cur_grid.shape:
        raise ValueError(f"Board shapes differ: {prev_grid.shape} vs {cur_grid.shape}.")
    return calculate_influence(cur_grid, weights) - calculate_influence(prev_grid, weights)


def classify_territory(influence: np.ndarray, threshold: int = 2) -> np.ndarray:
    """Per cell +1 for black control, -1 for white, 0 when contested."""
    territory = np.zeros(influence.shape, dtype=np.int8)
    territory[influence > threshold] = 1
    territory[influence < -threshold] = -1
    return territory
