from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from notakto.core import (
    GameResult,
    GameState,
    apply_move,
    decode_move,
    encode_move,
    initialize_game_state,
    legal_moves,
    rollback,
    skip_turn,
)
from notakto.features import aux_vector_size, build_aux_vector, build_board_tensor


class NotaktoEnv(gym.Env):
    metadata = {"render_modes": []}

    def __init__(
        self,
        *,
        number_of_boards: int = 3,
        board_size: int = 3,
        enforce_legal_actions: bool = True,
    ) -> None:
        super().__init__()
        self._enforce_legal = enforce_legal_actions
        self._configure(number_of_boards, board_size)
        self._state = initialize_game_state(number_of_boards, board_size)

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        options = options or {}
        number_of_boards = options.get("number_of_boards", self._number_of_boards)
        board_size = options.get("board_size", self._board_size)
        # Build the state first so a rejected configuration leaves the env untouched.
        state = initialize_game_state(number_of_boards, board_size)
        if (number_of_boards, board_size) != (self._number_of_boards, self._board_size):
            self._configure(number_of_boards, board_size)
        self._state = state
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(int(action_index)):
            raise ValueError(f"Action index {action_index} out of bounds.")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        move = decode_move(int(action_index), self._board_size)
        self._state = apply_move(self._state, move)

        reward = self._compute_reward(self._state.result)
        terminated = self._state.is_terminal
        truncated = False
        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def undo(self, plies: int = 2):
        self._state = rollback(self._state, plies)
        return self._build_observation(), self._build_info()

    def skip(self):
        self._state = skip_turn(self._state)
        return self._build_observation(), self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self._state.is_terminal:
            return mask
        for move in legal_moves(self._state.boards, self._board_size):
            mask[encode_move(move, self._board_size)] = 1
        return mask

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _configure(self, number_of_boards: int, board_size: int) -> None:
        self._number_of_boards = number_of_boards
        self._board_size = board_size
        self.observation_space = spaces.Dict(
            {
                "boards": spaces.Box(
                    low=0.0,
                    high=1.0,
                    shape=(number_of_boards, board_size, board_size),
                    dtype=np.float32,
                ),
                "aux": spaces.Box(
                    low=0.0,
                    high=1.0,
                    shape=(aux_vector_size(number_of_boards),),
                    dtype=np.float32,
                ),
            }
        )
        self.action_space = spaces.Discrete(number_of_boards * board_size * board_size)

    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {
            "boards": build_board_tensor(self._state),
            "aux": build_aux_vector(self._state),
        }

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_player": int(self._state.current_player),
            "result": self._state.result,
        }

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.PLAYER_ONE_WIN:
            return 1.0
        if result == GameResult.PLAYER_TWO_WIN:
            return -1.0
        return 0.0
