from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from zengo.config import EngineConfig
from zengo.core import BoardState, Stone

from .influence import calculate_influence, classify_territory


@dataclass(frozen=True)
class ScoreEstimate:
    leading_color: Stone
    margin: float
    black_total: float
    white_total: float

    def summary(self) -> str:
        side = "Black" if self.leading_color == Stone.BLACK else "White"
        return f"{side} +{self.margin:.1f}"


def estimate_score(state: BoardState, config: Optional[EngineConfig] = None) -> ScoreEstimate:
    """Rough lead from influence territory, prisoners and komi.

    No dead stones are removed, so this is only an estimate.
    """
    config = config or EngineConfig()
    influence = calculate_influence(state, config.influence_weights)
    territory = classify_territory(influence, config.territory_threshold)

    black_total = float((territory == 1).sum()) + state.captured_by_black
    white_total = float((territory == -1).sum()) + state.captured_by_white + config.komi

    diff = black_total - white_total
    return ScoreEstimate(
        leading_color=Stone.BLACK if diff > 0 else Stone.WHITE,
        margin=abs(diff),
        black_total=black_total,
        white_total=white_total,
    )
