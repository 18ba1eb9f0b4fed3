#!/usr/bin/env python3
"""Play Notakto against the minimax opponent via the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from notakto import MatchConfig, NotaktoEnv, load_match_config
from notakto.core import PlayerSide, decode_move, encode_move
from notakto.search import find_best_move


def format_board(env: NotaktoEnv) -> str:
    state = env.state
    size = state.board_size
    header = "  ".join(f"#{i}".ljust(size) for i in range(state.number_of_boards))
    rows = [header]
    for r in range(size):
        parts = []
        for board in state.boards:
            cells = board[r * size:(r + 1) * size]
            parts.append("".join("X" if cell else "." for cell in cells))
        rows.append("  ".join(parts))
    return "\n".join(rows)


def prompt_human_move(env: NotaktoEnv, legal_mask: np.ndarray, *, can_undo: bool) -> str:
    size = env.state.board_size
    legal = {int(idx) for idx in np.flatnonzero(legal_mask)}
    print("Enter a move as 'board cell' (e.g. '0 4'), 'u' to undo, 's' to skip, 'q' to quit.")
    while True:
        raw = input("> ").strip().lower()
        if raw in {"q", "quit", "exit"}:
            print("Leaving the match.")
            sys.exit(0)
        if raw in {"u", "undo"}:
            if can_undo:
                return "undo"
            print("There are no moves to undo.")
            continue
        if raw in {"s", "skip"}:
            return "skip"
        parts = raw.split()
        if len(parts) != 2 or not all(part.isdigit() for part in parts):
            print("Please enter two numbers.")
            continue
        board_index, cell_index = (int(part) for part in parts)
        if cell_index >= size * size:
            print("Cell index out of range.")
            continue
        action_index = board_index * size * size + cell_index
        if action_index in legal:
            return str(action_index)
        print("That cell cannot be played. Try again.")


def is_human_turn(mode: str, current_player: PlayerSide, human_side: PlayerSide) -> bool:
    return mode == "pvp" or current_player == human_side


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Saved log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    metadata = data.get("metadata", {})
    config = MatchConfig(
        number_of_boards=metadata.get("number_of_boards", 3),
        board_size=metadata.get("board_size", 3),
        difficulty=metadata.get("difficulty", 1),
    )
    moves = data.get("moves", [])
    env = NotaktoEnv(number_of_boards=config.number_of_boards, board_size=config.board_size)
    env.reset()
    if verbose:
        print("Replaying logged match.")
        print(format_board(env))
    for entry in moves:
        idx = entry["action_index"]
        move = decode_move(idx, config.board_size)
        env.step(idx)
        if verbose:
            actor = entry.get("actor", "unknown")
            print(f"{actor} plays board {move.board_index}, cell {move.cell_index}")
            print(format_board(env))
    result = env.state.result
    summary = {
        "result": result.value,
        "moves": len(moves),
        "boards": env.state.boards.tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    config = load_match_config(args.config)
    overrides = {
        key: value
        for key, value in (
            ("number_of_boards", args.boards),
            ("board_size", args.size),
            ("difficulty", args.difficulty),
        )
        if value is not None
    }
    if overrides:
        config = MatchConfig(**{**config.to_dict(), **overrides})

    rng = np.random.default_rng(args.seed)
    env = NotaktoEnv(number_of_boards=config.number_of_boards, board_size=config.board_size)
    obs, info = env.reset()
    human_side = PlayerSide.ONE if args.human_side == "1" else PlayerSide.TWO
    log_records: List[Dict] = []

    terminated = False
    while not terminated:
        state = env.state
        legal_mask = info["legal_action_mask"]

        print("\nCurrent boards:")
        print(format_board(env))
        print(f"To move: player {int(state.current_player)}")

        if is_human_turn(args.mode, state.current_player, human_side):
            choice = prompt_human_move(env, legal_mask, can_undo=len(state.history) >= 3)
            if choice == "undo":
                obs, info = env.undo(2)
                del log_records[-2:]
                continue
            if choice == "skip":
                obs, info = env.skip()
                continue
            action_index = int(choice)
            actor = "human" if args.mode == "ai" else f"player{int(state.current_player)}"
        else:
            move = find_best_move(
                state.boards,
                config.difficulty,
                config.board_size,
                config.number_of_boards,
                rng=rng,
            )
            if move is None:
                break
            action_index = encode_move(move, config.board_size)
            actor = "ai"
            print(f"AI plays board {move.board_index}, cell {move.cell_index}")

        move = decode_move(action_index, config.board_size)
        log_records.append(
            {
                "move_index": len(log_records),
                "actor": actor,
                "player": int(state.current_player),
                "action_index": int(action_index),
                "board": move.board_index,
                "cell": move.cell_index,
            }
        )
        obs, reward, terminated, truncated, info = env.step(action_index)
        if truncated:
            terminated = True

    print("\nFinal boards:")
    print(format_board(env))
    result = env.state.result
    winner = result.winner
    if winner is not None and args.mode == "pvp":
        print(f"Player {int(winner)} wins!")
    elif winner is not None:
        print("You win!" if winner == human_side else "The computer wins.")

    if args.log_file:
        metadata = {
            **config.to_dict(),
            "mode": args.mode,
            "human_side": int(human_side),
            "seed": args.seed,
            "result": result.value,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Notakto in the console against the computer or another person.")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--boards", type=int)
    parser.add_argument("--size", type=int)
    parser.add_argument("--difficulty", type=int)
    parser.add_argument("--mode", choices=["ai", "pvp"], default="ai", help="Play the computer or another person")
    parser.add_argument("--human-side", choices=["1", "2"], default="1")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged match and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
