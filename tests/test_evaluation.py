import numpy as np

from zengo import EngineConfig, ZenGoEnv
from zengo.evaluation import evaluate_policies
from zengo.policies import InfluencePolicy, RandomPolicy


def small_env() -> ZenGoEnv:
    return ZenGoEnv(config=EngineConfig(board_size=5), max_ply=20)


def test_evaluate_random_vs_random_small():
    policy_a = RandomPolicy()
    policy_b = RandomPolicy()
    result = evaluate_policies(
        policy_a,
        policy_b,
        episodes=2,
        env_factory=small_env,
        rng=np.random.default_rng(2),
    )
    assert result.games_played == 2
    assert result.black_wins + result.white_wins == 2
    assert 0 < result.average_length <= 20
    assert np.isclose(result.winrate_black() + result.winrate_white(), 1.0)


def test_influence_vs_random_runs():
    result = evaluate_policies(
        InfluencePolicy(EngineConfig(board_size=5)),
        RandomPolicy(),
        episodes=1,
        env_factory=small_env,
        temperature=0.0,
        rng=np.random.default_rng(4),
    )
    assert result.games_played == 1
