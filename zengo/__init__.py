"""ZenGo Go rules engine and scoring heuristics."""

from . import core, features, env, evaluation
from .config import EngineConfig, load_engine_config
from .core import (
    BoardState,
    Coordinate,
    MoveResult,
    RejectReason,
    Stone,
    create_board_state,
    find_group,
    get_random_valid_move,
    legal_moves,
    play_move,
    resign,
)
from .env import ZenGoEnv
from .evaluation import EvaluationResult, evaluate_policies
from .features import (
    ScoreEstimate,
    build_aux_vector,
    build_board_tensor,
    calculate_influence,
    estimate_score,
    influence_delta,
    state_to_numpy,
    state_to_torch,
)
from .policies import InfluencePolicy, Policy, RandomPolicy, select_action

__all__ = [
    "core",
    "features",
    "env",
    "evaluation",
    "EngineConfig",
    "load_engine_config",
    "BoardState",
    "Coordinate",
    "MoveResult",
    "RejectReason",
    "Stone",
    "create_board_state",
    "find_group",
    "get_random_valid_move",
    "legal_moves",
    "play_move",
    "resign",
    "ZenGoEnv",
    "EvaluationResult",
    "evaluate_policies",
    "ScoreEstimate",
    "build_aux_vector",
    "build_board_tensor",
    "calculate_influence",
    "estimate_score",
    "influence_delta",
    "state_to_numpy",
    "state_to_torch",
    "InfluencePolicy",
    "Policy",
    "RandomPolicy",
    "select_action",
]
