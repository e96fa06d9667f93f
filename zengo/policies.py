from __future__ import annotations

from typing import Optional

import numpy as np

from zengo.config import EngineConfig
from zengo.core import BoardState, Coordinate, Stone, play_move
from zengo.features import estimate_score


class Policy:
    """Policy interface producing probabilities over the flat board cells."""

    def act(self, state: BoardState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    def act(self, state: BoardState, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits.astype(np.float32)
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)


class InfluencePolicy(Policy):
    """Greedy baseline: favour moves that most improve the mover's estimated lead.

    Leads move in half-point steps, so a jitter below ``tie_break`` only
    reorders cells whose estimates are equal.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        sharpness: float = 1.0,
        tie_break: float = 0.1,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.sharpness = sharpness
        self.tie_break = tie_break
        self.rng = rng or np.random.default_rng()

    def act(self, state: BoardState, legal_mask: np.ndarray) -> np.ndarray:
        indices = np.flatnonzero(legal_mask)
        result = np.zeros(legal_mask.shape, dtype=np.float32)
        if len(indices) == 0:
            return result

        mover = state.current_player
        scores = []
        for idx in indices:
            coord = Coordinate.from_index(int(idx), state.size)
            outcome = play_move(state, coord.x, coord.y)
            if not outcome.accepted:
                scores.append(-np.inf)
                continue
            estimate = estimate_score(outcome.state, self.config)
            lead = estimate.black_total - estimate.white_total
            scores.append(lead if mover == Stone.BLACK else -lead)

        scores = np.asarray(scores, dtype=np.float64)
        scores += self.rng.uniform(0.0, self.tie_break, size=len(scores))
        scores *= self.sharpness
        if not np.isfinite(scores).any():
            return result
        scores -= scores[np.isfinite(scores)].max()
        probs = np.exp(scores)
        probs /= probs.sum()
        result[indices] = probs
        return result


def select_action(
    probabilities: np.ndarray,
    temperature: float,
    rng: np.random.Generator,
) -> int:
    if probabilities.sum() <= 0:
        raise ValueError("Policy produced zero probability over legal actions.")
    probs = probabilities.astype(np.float64, copy=True)
    if temperature <= 1e-6:
        return int(np.argmax(probs))
    adjusted = probs ** (1.0 / temperature)
    adjusted /= adjusted.sum()
    return int(rng.choice(len(adjusted), p=adjusted))
