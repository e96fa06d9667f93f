#!/usr/bin/env python3
"""Pit two ZenGo policies against each other and report win rates."""

import argparse
import json
import logging

import numpy as np

from zengo import EngineConfig, ZenGoEnv, evaluate_policies, load_engine_config
from zengo.policies import InfluencePolicy, Policy, RandomPolicy


def build_policy(name: str, config: EngineConfig, seed: int) -> Policy:
    if name == "random":
        return RandomPolicy()
    return InfluencePolicy(config, rng=np.random.default_rng(seed))


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/engine.yaml")
    parser.add_argument("--board-size", type=int, default=None)
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--max-ply", type=int, default=None)
    parser.add_argument("--black", choices=["random", "influence"], default="influence")
    parser.add_argument("--white", choices=["random", "influence"], default="random")
    parser.add_argument("--temperature", type=float, default=1.0)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = load_engine_config(args.config)
    if args.board_size is not None:
        config.board_size = args.board_size

    def env_factory() -> ZenGoEnv:
        return ZenGoEnv(config=config, max_ply=args.max_ply)

    result = evaluate_policies(
        build_policy(args.black, config, args.seed),
        build_policy(args.white, config, args.seed + 1),
        episodes=args.episodes,
        env_factory=env_factory,
        temperature=args.temperature,
        rng=np.random.default_rng(args.seed + 2),
    )

    output = {
        "games": result.games_played,
        "black_wins": result.black_wins,
        "white_wins": result.white_wins,
        "average_length": result.average_length,
        "black_winrate": result.winrate_black(),
        "white_winrate": result.winrate_white(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
