"""Core Go rules for the ZenGo engine."""

from .state import DEFAULT_BOARD_SIZE, BoardState, Coordinate, Stone, create_board_state
from .groups import DIRECTIONS, Group, find_group, neighbours
from .rules import (
    MoveResult,
    RejectReason,
    is_legal_move,
    legal_move_mask,
    legal_moves,
    play_move,
    resign,
)
from .fallback import DEFAULT_RANDOM_ATTEMPTS, get_random_valid_move

__all__ = [
    "BoardState",
    "Coordinate",
    "Stone",
    "DEFAULT_BOARD_SIZE",
    "create_board_state",
    "DIRECTIONS",
    "Group",
    "find_group",
    "neighbours",
    "MoveResult",
    "RejectReason",
    "is_legal_move",
    "legal_move_mask",
    "legal_moves",
    "play_move",
    "resign",
    "DEFAULT_RANDOM_ATTEMPTS",
    "get_random_valid_move",
]
