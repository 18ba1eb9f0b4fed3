from __future__ import annotations

import numpy as np

from notakto.core import Cell, GameState, PlayerSide, is_dead


def aux_vector_size(number_of_boards: int) -> int:
    # side-to-move one-hot (2) + dead flag per board
    return 2 + number_of_boards


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return marks with shape (n, size, size) as float32."""
    size = state.board_size
    marked = np.asarray(state.boards) == Cell.MARKED
    return marked.reshape(state.number_of_boards, size, size).astype(np.float32)


def build_aux_vector(state: GameState) -> np.ndarray:
    aux = np.zeros((aux_vector_size(state.number_of_boards),), dtype=np.float32)
    aux[0 if state.current_player == PlayerSide.ONE else 1] = 1.0
    for index, board in enumerate(state.boards):
        aux[2 + index] = 1.0 if is_dead(board, state.board_size) else 0.0
    return aux
