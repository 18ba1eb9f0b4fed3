#!/usr/bin/env python3
"""Play two opponents against each other and report win rates per side."""

import argparse
import json
import logging

import numpy as np
from tqdm.auto import trange

from notakto import MatchConfig, MinimaxPolicy, NotaktoEnv, RandomPolicy, load_match_config
from notakto.evaluation import evaluate_policies


def build_policy(spec: str, seed: int):
    if spec == "random":
        return RandomPolicy(np.random.default_rng(seed))
    return MinimaxPolicy(difficulty=int(spec), rng=np.random.default_rng(seed))


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--player-one", help="Difficulty level or 'random' (default: config difficulty)")
    parser.add_argument("--player-two", default="random", help="Difficulty level or 'random'")
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument("--temperature", type=float, default=1.0)
    parser.add_argument("--boards", type=int)
    parser.add_argument("--size", type=int)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = load_match_config(args.config)
    config = MatchConfig(
        number_of_boards=args.boards if args.boards is not None else config.number_of_boards,
        board_size=args.size if args.size is not None else config.board_size,
        difficulty=config.difficulty,
    )
    player_one = args.player_one if args.player_one is not None else str(config.difficulty)

    result = evaluate_policies(
        build_policy(player_one, args.seed),
        build_policy(args.player_two, args.seed + 1),
        episodes=args.episodes,
        env_factory=lambda: NotaktoEnv(
            number_of_boards=config.number_of_boards,
            board_size=config.board_size,
        ),
        rng=np.random.default_rng(args.seed),
        temperature=args.temperature,
        progress=lambda episodes: trange(episodes, desc="matches"),
    )

    output = {
        "games": result.games_played,
        "number_of_boards": config.number_of_boards,
        "board_size": config.board_size,
        "player_one": player_one,
        "player_two": args.player_two,
        "player_one_wins": result.player_one_wins,
        "player_two_wins": result.player_two_wins,
        "player_one_winrate": result.winrate_player_one(),
        "player_two_winrate": result.winrate_player_two(),
        "average_length": result.average_length,
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
