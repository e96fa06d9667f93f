"""Influence, scoring and feature extraction helpers for ZenGo."""

from .influence import (
    DEFAULT_INFLUENCE_WEIGHTS,
    calculate_influence,
    classify_territory,
    influence_delta,
    influence_kernel,
)
from .score import ScoreEstimate, estimate_score
from .observation import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    state_to_numpy,
    state_to_torch,
)

__all__ = [
    "DEFAULT_INFLUENCE_WEIGHTS",
    "calculate_influence",
    "classify_territory",
    "influence_delta",
    "influence_kernel",
    "ScoreEstimate",
    "estimate_score",
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_aux_vector",
    "state_to_numpy",
    "state_to_torch",
]
