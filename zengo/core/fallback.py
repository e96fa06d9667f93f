from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .rules import play_move
from .state import BoardState, Coordinate, Stone

logger = logging.getLogger(__name__)

DEFAULT_RANDOM_ATTEMPTS = 50


def get_random_valid_move(
    state: BoardState,
    rng: Optional[np.random.Generator] = None,
    *,
    attempts: int = DEFAULT_RANDOM_ATTEMPTS,
) -> Optional[Coordinate]:
    """Return some legal move for the player to move, or ``None``.

    Random sampling is tried first; a row-major scan then settles crowded
    boards where random picks rarely land on a legal cell.
    """
    if state.is_game_over:
        return None

    rng = rng or np.random.default_rng()
    size = state.size
    for _ in range(attempts):
        x = int(rng.integers(size))
        y = int(rng.integers(size))
        if state.board[y, x] != Stone.EMPTY:
            continue
        if play_move(state, x, y).accepted:
            return Coordinate(x, y)

    logger.debug("Random sampling found no legal move after %d attempts; scanning board.", attempts)
    for coord in state.empty_cells():
        if play_move(state, coord.x, coord.y).accepted:
            return coord

    logger.warning("No legal move available for %s.", state.current_player.name)
    return None
