from __future__ import annotations

import numpy as np

from notakto.core import BoardsArray, Cell, is_dead, patterns_for

NEAR_DEATH_PENALTY = 10
TWO_AWAY_PENALTY = 1


def score(boards: BoardsArray, size: int) -> int:
    """Static evaluation used at the search horizon.

    Each live board loses ``NEAR_DEATH_PENALTY`` for the first line one mark
    short of completion (its scan stops there) and ``TWO_AWAY_PENALTY`` for
    every line two marks short seen before it. Dead boards score zero.
    """
    patterns = patterns_for(size)
    total = 0
    for board in boards:
        if is_dead(board, size):
            continue
        counts = np.count_nonzero(np.asarray(board)[patterns] == Cell.MARKED, axis=1)
        board_score = 0
        for count in counts:
            if count == size - 1:
                board_score -= NEAR_DEATH_PENALTY
                break
            if count == size - 2:
                board_score -= TWO_AWAY_PENALTY
        total += board_score
    return total
