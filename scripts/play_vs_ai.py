#!/usr/bin/env python3
"""Play Go against a ZenGo policy in the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np

from zengo import (
    BoardState,
    Coordinate,
    EngineConfig,
    InfluencePolicy,
    RandomPolicy,
    Stone,
    create_board_state,
    estimate_score,
    get_random_valid_move,
    load_engine_config,
    play_move,
    resign,
)
from zengo.core import legal_move_mask
from zengo.notation import format_board, from_human_coordinate, generate_sgf, to_human_coordinate
from zengo.policies import Policy, select_action

logger = logging.getLogger("play_vs_ai")


def propose_ai_move(
    policy: Policy,
    state: BoardState,
    *,
    excluded: Sequence[Coordinate],
    temperature: float,
    rng: np.random.Generator,
) -> Optional[Coordinate]:
    probs = policy.act(state, legal_move_mask(state)).astype(np.float64)
    for coord in excluded:
        probs[coord.index(state.size)] = 0.0
    if probs.sum() <= 0:
        return None
    probs /= probs.sum()
    return Coordinate.from_index(select_action(probs, temperature, rng), state.size)


def choose_ai_move(
    policy: Policy,
    state: BoardState,
    *,
    max_attempts: int,
    temperature: float,
    rng: np.random.Generator,
    config: EngineConfig,
) -> Optional[Coordinate]:
    """Ask the policy for a move, retrying with rejected candidates excluded.

    Falls back to a random legal move once the retries are spent.
    """
    rejected: List[Coordinate] = []
    for _ in range(max_attempts + 1):
        candidate = propose_ai_move(policy, state, excluded=rejected, temperature=temperature, rng=rng)
        if candidate is None:
            continue
        result = play_move(state, candidate.x, candidate.y)
        if result.accepted:
            return candidate
        logger.warning("AI proposed illegal move %s (%s), asking again.", candidate, result.error)
        rejected.append(candidate)

    logger.warning("AI exceeded %d attempts, falling back to a random legal move.", max_attempts)
    return get_random_valid_move(state, rng, attempts=config.random_attempts)


def print_status(state: BoardState, config: EngineConfig) -> None:
    print(format_board(state))
    estimate = estimate_score(state, config)
    print(
        f"手番: {state.current_player.name}  "
        f"アゲハマ B:{state.captured_by_black} W:{state.captured_by_white}  "
        f"形勢: {estimate.summary()}"
    )


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"ログを {path} に保存しました。")


def replay_logged_game(
    log_path: Path,
    *,
    verbose: bool = True,
    config: Optional[EngineConfig] = None,
) -> Dict[str, object]:
    config = config or EngineConfig()
    data = json.loads(log_path.read_text())
    size = int(data.get("metadata", {}).get("board_size", config.board_size))
    moves = data.get("moves", [])
    state = create_board_state(size)
    if verbose:
        print("ログリプレイを開始します。")
    for entry in moves:
        x, y = entry["move"]
        result = play_move(state, x, y)
        if not result.accepted:
            raise ValueError(f"Logged move {entry['move']} is illegal: {result.error}")
        state = result.state
        if verbose:
            print(f"{entry.get('actor', 'unknown')} ({entry.get('color', '?')}) の手: {to_human_coordinate(Coordinate(x, y), size)}")
            print(format_board(state))
    estimate = estimate_score(state, config)
    summary = {
        "moves": len(moves),
        "board": state.board.tolist(),
        "captured_by_black": state.captured_by_black,
        "captured_by_white": state.captured_by_white,
        "estimate": estimate.summary(),
    }
    if verbose:
        print("リプレイ終了。")
        print(f"形勢: {summary['estimate']}")
    return summary


def prompt_human_move(state: BoardState) -> str:
    while True:
        raw = input("着手 (例: D4, undo, resign, q で終了): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("ゲームを終了します。")
            sys.exit(0)
        if raw.lower() in {"undo", "resign"}:
            return raw.lower()
        if from_human_coordinate(raw, state.size) is not None:
            return raw
        print("座標を読めません。もう一度。")


def play_interactive(args: argparse.Namespace) -> None:
    config = load_engine_config(args.config) if args.config else EngineConfig()
    if args.board_size:
        config.board_size = args.board_size
    rng = np.random.default_rng(args.seed)
    policy: Policy = InfluencePolicy(config, rng=rng) if args.policy == "influence" else RandomPolicy()
    human_color = Stone.BLACK if args.human_color == "B" else Stone.WHITE

    state = create_board_state(config.board_size)
    snapshots: List[BoardState] = []
    log_records: List[Dict] = []

    while not state.is_game_over:
        print()
        print_status(state, config)

        if state.current_player == human_color:
            command = prompt_human_move(state)
            if command == "undo":
                if not snapshots:
                    print("戻せる手がありません。")
                    continue
                state = snapshots.pop()
                if state.current_player != human_color and snapshots:
                    state = snapshots.pop()
                log_records = log_records[: state.ply_count]
                continue
            if command == "resign":
                state = resign(state)
                break
            coord = from_human_coordinate(command, state.size)
            actor = "human"
        else:
            coord = choose_ai_move(
                policy,
                state,
                max_attempts=args.max_attempts,
                temperature=args.temperature,
                rng=rng,
                config=config,
            )
            if coord is None:
                print("打てる手がありません。終局します。")
                state = resign(state)
                break
            actor = "ai"
            print(f"AI の手: {to_human_coordinate(coord, state.size)}")

        result = play_move(state, coord.x, coord.y)
        if not result.accepted:
            print(f"着手できません: {result.error}")
            continue
        snapshots.append(state)
        log_records.append(
            {
                "move_index": state.ply_count,
                "actor": actor,
                "color": state.current_player.name,
                "move": [coord.x, coord.y],
                "captured": len(result.captured),
            }
        )
        state = result.state

    print("\n最終盤面:")
    print_status(state, config)

    if args.log_file:
        metadata = {
            "board_size": state.size,
            "human_color": args.human_color,
            "policy": args.policy,
            "temperature": args.temperature,
            "estimate": estimate_score(state, config).summary(),
            "sgf": generate_sgf(state.move_history, state.size, komi=config.komi),
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Go in the console against a ZenGo policy.")
    parser.add_argument("--config", type=str, default=None, help="Engine config YAML")
    parser.add_argument("--board-size", type=int, default=None)
    parser.add_argument("--human-color", choices=["B", "W"], default="B")
    parser.add_argument("--policy", choices=["influence", "random"], default="influence")
    parser.add_argument("--temperature", type=float, default=0.5)
    parser.add_argument("--max-attempts", type=int, default=3)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--log-level", type=str, default="WARNING")
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.replay_log:
        config = load_engine_config(args.config) if args.config else EngineConfig()
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet, config=config)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
