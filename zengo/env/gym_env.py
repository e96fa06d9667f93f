from __future__ import annotations

import logging
from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from zengo.config import EngineConfig
from zengo.core import (
    BoardState,
    Coordinate,
    Stone,
    create_board_state,
    legal_move_mask,
    play_move,
)
from zengo.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    estimate_score,
)
from zengo.notation import format_board

logger = logging.getLogger(__name__)


class ZenGoEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        config: Optional[EngineConfig] = None,
        max_ply: Optional[int] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or EngineConfig()
        size = self.config.board_size
        self._max_ply = max_ply if max_ply is not None else 2 * size * size
        self._episode_max_ply = self._max_ply
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=(BOARD_CHANNELS, size, size), dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(size * size)

        self._state: BoardState = create_board_state(size)
        self._legal_mask = legal_move_mask(self._state)

    @property
    def state(self) -> BoardState:
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        # options["max_ply"] applies to this episode only
        self._episode_max_ply = (options or {}).get("max_ply", self._max_ply)
        self._state = create_board_state(self.config.board_size)
        self._legal_mask = legal_move_mask(self._state)
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        coord = Coordinate.from_index(int(action_index), self._state.size)
        result = play_move(self._state, coord.x, coord.y)
        if not result.accepted:
            if self._enforce_legal:
                raise ValueError(f"Illegal action {action_index}: {result.error}.")
            logger.debug("Ignoring illegal action %d (%s)", action_index, result.error)
        self._state = result.state
        self._legal_mask = legal_move_mask(self._state)

        terminated = self._state.is_game_over or not self._legal_mask.any()
        truncated = not terminated and self._state.ply_count >= self._episode_max_ply
        reward = self._compute_reward() if terminated or truncated else 0.0
        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        return self._legal_mask.copy()

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return format_board(self._state)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {"board": build_board_tensor(self._state), "aux": build_aux_vector(self._state)}

    def _build_info(self) -> Dict:
        return {"legal_action_mask": self.legal_action_mask(), "ply": self._state.ply_count}

    def _compute_reward(self) -> float:
        estimate = estimate_score(self._state, self.config)
        return 1.0 if estimate.leading_color == Stone.BLACK else -1.0
