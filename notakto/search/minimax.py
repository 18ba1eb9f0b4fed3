from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from notakto.core import BoardsArray, Move, all_dead, legal_moves, place_mark

from .heuristic import score

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    nodes: int = 0


@dataclass
class SearchResult:
    best_moves: List[Move] = field(default_factory=list)
    best_score: float = -np.inf
    depth: int = 0
    moves_evaluated: int = 0
    nodes: int = 0


def search_depth(size: int, number_of_boards: int, difficulty: int) -> int:
    complexity = size * number_of_boards
    if complexity <= 9:
        return min(5, difficulty + 2)
    if complexity <= 16:
        return min(4, difficulty + 1)
    return min(3, difficulty)


def minimax(
    boards: BoardsArray,
    depth: int,
    maximizing: bool,
    size: int,
    alpha: float,
    beta: float,
    *,
    stats: Optional[SearchStats] = None,
) -> float:
    if stats is not None:
        stats.nodes += 1

    if all_dead(boards, size):
        return -np.inf if maximizing else np.inf

    if depth == 0:
        return float(score(boards, size))

    best_value = -np.inf if maximizing else np.inf
    for move in legal_moves(boards, size):
        child = place_mark(boards, move)
        value = minimax(child, depth - 1, not maximizing, size, alpha, beta, stats=stats)

        if maximizing:
            best_value = max(best_value, value)
            alpha = max(alpha, value)
        else:
            best_value = min(best_value, value)
            beta = min(beta, value)

        if beta <= alpha:
            break

    return best_value


def search(
    boards: BoardsArray,
    difficulty: int,
    size: int,
    number_of_boards: int,
    *,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """Score every root move and keep all moves tied for the best score.

    Stops as soon as a move scores ``+inf``.
    """
    boards = np.asarray(boards, dtype=np.int8)
    stats = stats if stats is not None else SearchStats()
    depth = search_depth(size, number_of_boards, difficulty)
    result = SearchResult(depth=depth)

    for move in legal_moves(boards, size):
        child = place_mark(boards, move)
        move_score = minimax(child, depth, False, size, -np.inf, np.inf, stats=stats)
        result.moves_evaluated += 1

        if move_score > result.best_score:
            result.best_score = move_score
            result.best_moves = [move]
        elif move_score == result.best_score:
            result.best_moves.append(move)

        if move_score == np.inf:
            break

    result.nodes = stats.nodes
    logger.debug(
        "Searched depth %d: %d root moves, %d nodes, best score %s shared by %d moves",
        depth,
        result.moves_evaluated,
        result.nodes,
        result.best_score,
        len(result.best_moves),
    )
    return result


def find_best_move(
    boards: BoardsArray,
    difficulty: int,
    size: int,
    number_of_boards: int,
    *,
    rng: Optional[np.random.Generator] = None,
) -> Optional[Move]:
    """Pick a move for the computer side, or ``None`` when no move is legal.

    Ties between equally scored moves are broken uniformly at random.
    """
    result = search(boards, difficulty, size, number_of_boards)
    if not result.best_moves:
        return None
    rng = rng or np.random.default_rng()
    return result.best_moves[int(rng.integers(len(result.best_moves)))]
