from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

import numpy as np

from .patterns import cell_values, patterns_for
from .state import (
    BoardArray,
    BoardsArray,
    Cell,
    GameResult,
    GameState,
    Move,
    PlayerSide,
    Snapshot,
    freeze,
)

logger = logging.getLogger(__name__)

DEAD_CACHE_SIZE = 1 << 16


class IllegalMoveError(ValueError):
    pass


def initialize_game_state(number_of_boards: int = 3, board_size: int = 3) -> GameState:
    if number_of_boards < 1:
        raise ValueError(f"Number of boards must be positive, got {number_of_boards}.")
    if board_size < 1:
        raise ValueError(f"Board size must be positive, got {board_size}.")

    boards = freeze(np.zeros((number_of_boards, board_size * board_size), dtype=np.int8))
    return GameState(
        boards=boards,
        board_size=board_size,
        current_player=PlayerSide.ONE,
        history=[Snapshot(boards, PlayerSide.ONE)],
        ply_count=0,
        result=GameResult.ONGOING,
    )


def is_dead(board: BoardArray, size: int) -> bool:
    cells = np.ascontiguousarray(board, dtype=np.int8)
    if cells.shape != (size * size,):
        raise ValueError(f"Board of shape {cells.shape} does not match size {size}.")
    return _is_dead_cached(cells.tobytes(), size)


@lru_cache(maxsize=DEAD_CACHE_SIZE)
def _is_dead_cached(key: bytes, size: int) -> bool:
    cells = np.frombuffer(key, dtype=np.int8)
    for pattern in patterns_for(size):
        if np.all(cells[pattern] == Cell.MARKED):
            return True
    return False


def all_dead(boards: BoardsArray, size: int) -> bool:
    return all(is_dead(board, size) for board in boards)


def legal_moves(boards: BoardsArray, size: int) -> List[Move]:
    """Empty cells of live boards, central cells first.

    The sort is stable, so cells of equal value keep board-then-cell order.
    """
    values = cell_values(size)
    moves: List[Move] = []
    for board_index, board in enumerate(boards):
        if is_dead(board, size):
            continue
        for cell_index in np.flatnonzero(np.asarray(board) == Cell.EMPTY):
            moves.append(Move(board_index, int(cell_index)))
    moves.sort(key=lambda move: -values[move.cell_index])
    return moves


def place_mark(boards: BoardsArray, move: Move) -> BoardsArray:
    """Return a read-only copy of ``boards`` with the move's cell marked."""
    updated = np.array(boards, dtype=np.int8, copy=True)
    updated[move.board_index, move.cell_index] = Cell.MARKED
    return freeze(updated)


def encode_move(move: Move, size: int) -> int:
    return move.board_index * size * size + move.cell_index


def decode_move(index: int, size: int) -> Move:
    if index < 0:
        raise ValueError("Move index out of range.")
    board_index, cell_index = divmod(int(index), size * size)
    return Move(board_index, cell_index)


def apply_move(state: GameState, move: Move, *, in_place: bool = False) -> GameState:
    _validate_move(state, move)

    target = state if in_place else state.copy()
    mover = target.current_player
    boards = place_mark(target.boards, move)

    target.boards = boards
    target.ply_count += 1
    target.last_move = move

    if all_dead(boards, target.board_size):
        # Misère rule: whoever kills the last live board loses, and keeps the turn marker.
        target.result = GameResult.for_loser(mover)
        logger.info("Match over after %d plies: %s loses", target.ply_count, mover.name)
    else:
        target.current_player = mover.opponent

    target.history.append(Snapshot(boards, target.current_player))
    return target


def rollback(state: GameState, plies: int, *, in_place: bool = False) -> GameState:
    """Undo the last ``plies`` moves, dropping the matching history suffix."""
    if plies < 1 or plies >= len(state.history):
        raise ValueError(
            f"Cannot roll back {plies} plies with {len(state.history) - 1} moves played."
        )

    target = state if in_place else state.copy()
    del target.history[-plies:]
    snapshot = target.history[-1]
    target.boards = snapshot.boards
    target.current_player = snapshot.to_move
    target.ply_count = len(target.history) - 1
    target.result = GameResult.ONGOING
    target.last_move = _last_move_from_history(target.history)
    logger.debug("Rolled back %d plies to ply %d", plies, target.ply_count)
    return target


def skip_turn(state: GameState, *, in_place: bool = False) -> GameState:
    if state.is_terminal:
        raise IllegalMoveError("Cannot skip a turn in a finished match.")
    target = state if in_place else state.copy()
    target.current_player = target.current_player.opponent
    return target


def _validate_move(state: GameState, move: Move) -> None:
    if state.is_terminal:
        raise IllegalMoveError("Cannot apply a move to a finished match.")

    size = state.board_size
    if not 0 <= move.board_index < state.number_of_boards:
        raise IllegalMoveError(f"Board index {move.board_index} out of range.")
    if not 0 <= move.cell_index < size * size:
        raise IllegalMoveError(f"Cell index {move.cell_index} out of range.")

    board = state.boards[move.board_index]
    if is_dead(board, size):
        raise IllegalMoveError(f"Board {move.board_index} is already dead.")
    if board[move.cell_index] != Cell.EMPTY:
        raise IllegalMoveError(
            f"Cell {move.cell_index} on board {move.board_index} is already marked."
        )


def _last_move_from_history(history: List[Snapshot]) -> Optional[Move]:
    if len(history) < 2:
        return None
    changed = np.argwhere(history[-1].boards != history[-2].boards)
    if len(changed) != 1:
        return None
    board_index, cell_index = changed[0]
    return Move(int(board_index), int(cell_index))
