import numpy as np

from notakto.search import NEAR_DEATH_PENALTY, score


def boards_from(*boards: str) -> np.ndarray:
    return np.array(
        [[1 if ch == "X" else 0 for ch in board if ch in "X."] for board in boards],
        dtype=np.int8,
    )


def test_empty_board_scores_zero() -> None:
    assert score(boards_from("... ... ..."), 3) == 0


def test_centre_mark_counts_every_line_through_it() -> None:
    # row 1, column 1 and both diagonals each hold one mark
    assert score(boards_from("... .X. ..."), 3) == -4


def test_near_death_line_dominates() -> None:
    assert score(boards_from("XX. ... ..."), 3) == -NEAR_DEATH_PENALTY


def test_two_away_lines_before_threat_still_count() -> None:
    # row 0, column 0, row 1 and column 1 are seen before the diagonal threat
    assert score(boards_from("X.. .X. ..."), 3) == -4 - NEAR_DEATH_PENALTY


def test_dead_boards_contribute_nothing() -> None:
    assert score(boards_from("XXX ... ...", "X.. ... ..."), 3) == -3


def test_scores_sum_over_boards() -> None:
    assert score(boards_from("XX. ... ...", "... .X. ..."), 3) == -NEAR_DEATH_PENALTY - 4


def test_four_by_four_threat() -> None:
    boards = np.zeros((1, 16), dtype=np.int8)
    boards[0, [0, 1, 2]] = 1
    assert score(boards, 4) == -NEAR_DEATH_PENALTY
