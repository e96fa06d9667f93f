from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .groups import find_group, neighbours
from .state import BoardState, Coordinate, Stone

logger = logging.getLogger(__name__)


class RejectReason(Enum):
    OCCUPIED = "occupied"
    SUICIDE = "suicide"
    GAME_OVER = "game-over"

    @property
    def message(self) -> str:
        return _REJECT_MESSAGES[self]


_REJECT_MESSAGES = {
    RejectReason.OCCUPIED: "cell occupied",
    RejectReason.SUICIDE: "suicide not allowed",
    RejectReason.GAME_OVER: "game already over",
}


@dataclass(frozen=True)
class MoveResult:
    """Outcome of :func:`play_move`.

    On acceptance ``state`` is the successor; on rejection it is the very
    state that was passed in and ``reason`` says why.
    """

    state: BoardState
    reason: Optional[RejectReason] = None
    captured: Tuple[Coordinate, ...] = ()

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def error(self) -> Optional[str]:
        return self.reason.message if self.reason is not None else None


def play_move(state: BoardState, x: int, y: int) -> MoveResult:
    if not state.in_bounds(x, y):
        raise ValueError(f"Coordinate ({x}, {y}) is off a {state.size}x{state.size} board.")
    if state.is_game_over:
        return _reject(state, RejectReason.GAME_OVER, x, y)
    if state.board[y, x] != Stone.EMPTY:
        return _reject(state, RejectReason.OCCUPIED, x, y)

    mover = state.current_player
    opponent = mover.opponent()
    board = state.board.copy()
    board[y, x] = mover

    captured: List[Coordinate] = []
    for n in neighbours(x, y, state.size):
        # An earlier capture in this loop may already have emptied the cell.
        if board[n.y, n.x] != opponent:
            continue
        group = find_group(board, n, opponent)
        if group.liberties == 0:
            for stone in group.stones:
                board[stone.y, stone.x] = Stone.EMPTY
            captured.extend(group.stones)

    own = find_group(board, Coordinate(x, y), mover)
    if own.liberties == 0 and not captured:
        return _reject(state, RejectReason.SUICIDE, x, y)

    board.flags.writeable = False
    move = Coordinate(x, y)
    successor = replace(
        state,
        board=board,
        current_player=opponent,
        move_history=state.move_history + (move,),
        last_move=move,
        captured_by_black=state.captured_by_black + (len(captured) if mover == Stone.BLACK else 0),
        captured_by_white=state.captured_by_white + (len(captured) if mover == Stone.WHITE else 0),
    )
    return MoveResult(state=successor, captured=tuple(captured))


def is_legal_move(state: BoardState, x: int, y: int) -> bool:
    return play_move(state, x, y).accepted


def legal_moves(state: BoardState) -> List[Coordinate]:
    if state.is_game_over:
        return []
    return [coord for coord in state.empty_cells() if play_move(state, coord.x, coord.y).accepted]


def legal_move_mask(state: BoardState) -> np.ndarray:
    mask = np.zeros(state.size * state.size, dtype=np.int8)
    for coord in legal_moves(state):
        mask[coord.index(state.size)] = 1
    return mask


def resign(state: BoardState) -> BoardState:
    return replace(state, is_game_over=True)


def _reject(state: BoardState, reason: RejectReason, x: int, y: int) -> MoveResult:
    logger.debug("Rejected %s move at (%d, %d): %s", state.current_player.name, x, y, reason.message)
    return MoveResult(state=state, reason=reason)
