from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Tuple, Union

import yaml

from zengo.core import DEFAULT_BOARD_SIZE, DEFAULT_RANDOM_ATTEMPTS


@dataclass
class EngineConfig:
    board_size: int = DEFAULT_BOARD_SIZE
    influence_weights: Tuple[int, ...] = (6, 4, 2, 1)
    territory_threshold: int = 2
    komi: float = 7.5
    random_attempts: int = DEFAULT_RANDOM_ATTEMPTS

    def __post_init__(self) -> None:
        self.influence_weights = tuple(int(w) for w in self.influence_weights)
        if self.board_size < 1:
            raise ValueError(f"board_size must be positive, got {self.board_size}")
        if not self.influence_weights:
            raise ValueError("influence_weights must not be empty")
        if self.territory_threshold < 0:
            raise ValueError("territory_threshold must be non-negative")
        if self.random_attempts < 0:
            raise ValueError("random_attempts must be non-negative")

    @classmethod
    def from_dict(cls, data: Dict) -> "EngineConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown engine config keys: {', '.join(unknown)}")
        return cls(**data)


def load_yaml_config(path: Union[str, Path]) -> Dict:
    path = Path(path)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_engine_config(path: Union[str, Path]) -> EngineConfig:
    return EngineConfig.from_dict(load_yaml_config(path))
