from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from zengo.core import Stone
from zengo.env import ZenGoEnv
from zengo.policies import Policy, select_action


@dataclass
class EvaluationResult:
    games_played: int
    black_wins: int
    white_wins: int
    average_length: float

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)


def evaluate_policies(
    policy_black: Policy,
    policy_white: Policy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], ZenGoEnv]] = None,
    temperature: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> EvaluationResult:
    """Play ``episodes`` games and count wins by final score estimate."""
    env_factory = env_factory or ZenGoEnv
    rng = rng or np.random.default_rng()

    black_wins = 0
    white_wins = 0
    total_ply = 0

    for _ in range(episodes):
        env = env_factory()
        obs, info = env.reset()
        done = not info["legal_action_mask"].any()
        reward = 0.0

        while not done:
            state = env.state
            legal_mask = info["legal_action_mask"]
            policy = policy_black if state.current_player == Stone.BLACK else policy_white
            probs = policy.act(state, legal_mask) * legal_mask
            if probs.sum() <= 0:
                probs = legal_mask.astype(np.float32)
            probs = probs / probs.sum()
            action_index = select_action(probs, temperature, rng)
            obs, reward, terminated, truncated, info = env.step(action_index)
            done = terminated or truncated

        total_ply += env.state.ply_count
        if reward > 0:
            black_wins += 1
        else:
            white_wins += 1

    return EvaluationResult(
        games_played=episodes,
        black_wins=black_wins,
        white_wins=white_wins,
        average_length=total_ply / max(1, episodes),
    )
