from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import numpy as np

from notakto.agents import Policy, select_action
from notakto.core import GameResult, PlayerSide
from notakto.env import NotaktoEnv


@dataclass
class EvaluationResult:
    games_played: int
    player_one_wins: int
    player_two_wins: int
    average_length: float

    def winrate_player_one(self) -> float:
        return self.player_one_wins / max(1, self.games_played)

    def winrate_player_two(self) -> float:
        return self.player_two_wins / max(1, self.games_played)


def play_match(
    env: NotaktoEnv,
    policy_one: Policy,
    policy_two: Policy,
    rng: np.random.Generator,
    *,
    temperature: float = 1.0,
) -> int:
    """Play one match to completion on a freshly reset env; return its length in plies."""
    obs, info = env.reset()
    terminated = False
    ply = 0

    while not terminated:
        state_snapshot = env.state.copy()
        legal_mask = info["legal_action_mask"]
        policy = policy_one if state_snapshot.current_player == PlayerSide.ONE else policy_two
        probs = policy.act(state_snapshot, legal_mask) * legal_mask
        if probs.sum() <= 0:
            probs = legal_mask.astype(np.float32)
        action_index = select_action(probs, temperature, rng)
        obs, reward, terminated, truncated, info = env.step(action_index)
        ply += 1
        if truncated:
            terminated = True
    return ply


def evaluate_policies(
    policy_one: Policy,
    policy_two: Policy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], NotaktoEnv]] = None,
    rng: Optional[np.random.Generator] = None,
    temperature: float = 1.0,
    progress: Optional[Callable[[int], Iterable[int]]] = None,
) -> EvaluationResult:
    env_factory = env_factory or NotaktoEnv
    rng = rng or np.random.default_rng()
    progress = progress or range

    player_one_wins = 0
    player_two_wins = 0
    total_ply = 0

    for _ in progress(episodes):
        env = env_factory()
        total_ply += play_match(env, policy_one, policy_two, rng, temperature=temperature)
        if env.state.result == GameResult.PLAYER_ONE_WIN:
            player_one_wins += 1
        elif env.state.result == GameResult.PLAYER_TWO_WIN:
            player_two_wins += 1

    average_length = total_ply / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        player_one_wins=player_one_wins,
        player_two_wins=player_two_wins,
        average_length=average_length,
    )
