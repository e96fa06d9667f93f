from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import torch

from zengo.core import BoardState, Stone

BOARD_CHANNELS = 4  # own stones, opponent stones, empty, last move
AUX_VECTOR_SIZE = 4  # player to move one-hot (2) + normalised captures (2)


def build_board_tensor(state: BoardState) -> np.ndarray:
    """Return board planes with shape (4, N, N), channel-first, from the mover's view."""
    size = state.size
    tensor = np.zeros((BOARD_CHANNELS, size, size), dtype=np.float32)
    mover = state.current_player
    tensor[0] = state.board == int(mover)
    tensor[1] = state.board == int(mover.opponent())
    tensor[2] = state.board == Stone.EMPTY
    if state.last_move is not None:
        tensor[3, state.last_move.y, state.last_move.x] = 1.0
    return tensor


def build_aux_vector(state: BoardState) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[0 if state.current_player == Stone.BLACK else 1] = 1.0
    cells = float(state.size * state.size)
    aux[2] = state.captured_by_black / cells
    aux[3] = state.captured_by_white / cells
    return aux


def state_to_numpy(state: BoardState) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(state), build_aux_vector(state)


def state_to_torch(
    state: BoardState,
    *,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float32,
) -> Tuple[torch.Tensor, torch.Tensor]:
    board_np, aux_np = state_to_numpy(state)
    board = torch.from_numpy(board_np).to(device=device, dtype=dtype)
    aux = torch.from_numpy(aux_np).to(device=device, dtype=dtype)
    return board, aux
