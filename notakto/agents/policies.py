from __future__ import annotations

from typing import Optional

import numpy as np

from notakto.core import GameState, encode_move
from notakto.search import find_best_move


class Policy:
    """Policy interface producing action probabilities over legal moves."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return a copy of this policy with its own random stream."""
        return self


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits.astype(np.float32)
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)

    def spawn(self, seed: Optional[int] = None) -> "RandomPolicy":
        return RandomPolicy(np.random.default_rng(seed))


class MinimaxPolicy(Policy):
    """Puts all probability on the alpha-beta opponent's chosen move."""

    def __init__(self, difficulty: int = 1, rng: Optional[np.random.Generator] = None) -> None:
        self.difficulty = difficulty
        self.rng = rng or np.random.default_rng()

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        probs = np.zeros(legal_mask.shape, dtype=np.float32)
        move = find_best_move(
            state.boards,
            self.difficulty,
            state.board_size,
            state.number_of_boards,
            rng=self.rng,
        )
        if move is not None:
            probs[encode_move(move, state.board_size)] = 1.0
        return probs

    def spawn(self, seed: Optional[int] = None) -> "MinimaxPolicy":
        return MinimaxPolicy(self.difficulty, np.random.default_rng(seed))


def select_action(
    probabilities: np.ndarray,
    temperature: float,
    rng: np.random.Generator,
) -> int:
    if probabilities.sum() == 0:
        raise ValueError("Policy produced zero probability over legal actions.")
    probs = probabilities.astype(np.float64, copy=True)
    if temperature <= 1e-6:
        return int(np.argmax(probs))
    adjusted = probs ** (1.0 / temperature)
    adjusted /= adjusted.sum()
    return int(rng.choice(len(adjusted), p=adjusted))
