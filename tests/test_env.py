import numpy as np
import pytest

from zengo import EngineConfig, ZenGoEnv
from zengo.core import Coordinate


def test_reset_returns_valid_observation():
    env = ZenGoEnv(config=EngineConfig(board_size=9))
    obs, info = env.reset()

    assert obs["board"].shape == (4, 9, 9)
    assert obs["aux"].shape == (4,)
    assert info["legal_action_mask"].shape == (81,)
    assert info["legal_action_mask"].all()


def test_step_places_stone_and_updates_mask():
    env = ZenGoEnv(config=EngineConfig(board_size=9))
    obs, info = env.reset()
    action = Coordinate(4, 4).index(9)

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert next_info["legal_action_mask"][action] == 0
    assert env.state.ply_count == 1
    assert np.any(next_obs["board"] != obs["board"])


def test_illegal_action_raises_when_enforced():
    env = ZenGoEnv(config=EngineConfig(board_size=9))
    env.reset()
    env.step(0)
    with pytest.raises(ValueError):
        env.step(0)
    with pytest.raises(ValueError):
        env.step(81)


def test_illegal_action_ignored_when_not_enforced():
    env = ZenGoEnv(config=EngineConfig(board_size=9), enforce_legal_actions=False)
    env.reset()
    env.step(0)
    _, reward, terminated, truncated, info = env.step(0)
    assert env.state.ply_count == 1
    assert not terminated


def test_truncates_at_max_ply_with_score_reward():
    env = ZenGoEnv(config=EngineConfig(board_size=9), max_ply=2)
    env.reset()
    env.step(Coordinate(2, 2).index(9))
    _, reward, terminated, truncated, _ = env.step(Coordinate(6, 6).index(9))

    assert truncated
    assert not terminated
    assert reward == -1.0  # komi keeps white ahead


def test_render_ansi():
    env = ZenGoEnv(config=EngineConfig(board_size=5), render_mode="ansi")
    env.reset()
    env.step(0)
    text = env.render()
    assert "x" in text
    assert len(text.splitlines()) == 6


def test_reset_max_ply_option_lasts_one_episode():
    env = ZenGoEnv(config=EngineConfig(board_size=9), max_ply=10)
    env.reset(options={"max_ply": 1})
    _, _, _, truncated, _ = env.step(Coordinate(4, 4).index(9))
    assert truncated

    env.reset()
    _, _, _, truncated, _ = env.step(Coordinate(4, 4).index(9))
    assert not truncated
