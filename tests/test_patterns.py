from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from notakto.core import PatternCatalog, cell_values, patterns_for


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
def test_pattern_count_and_shape(size: int) -> None:
    patterns = patterns_for(size)
    assert len(patterns) == 2 * size + 2
    for pattern in patterns:
        assert len(pattern) == size
        assert len(set(int(i) for i in pattern)) == size
        assert all(0 <= int(i) < size * size for i in pattern)


def test_three_by_three_lines_in_catalog_order() -> None:
    expected = [
        [0, 1, 2],
        [0, 3, 6],
        [3, 4, 5],
        [1, 4, 7],
        [6, 7, 8],
        [2, 5, 8],
        [0, 4, 8],
        [2, 4, 6],
    ]
    assert patterns_for(3).tolist() == expected


def test_patterns_are_memoized_and_read_only() -> None:
    first = patterns_for(4)
    assert patterns_for(4) is first
    with pytest.raises(ValueError):
        first[0, 0] = 99


def test_non_positive_size_rejected() -> None:
    catalog = PatternCatalog()
    with pytest.raises(ValueError):
        catalog.patterns_for(0)
    with pytest.raises(ValueError):
        catalog.cell_values(-1)


def test_concurrent_population_yields_one_table() -> None:
    catalog = PatternCatalog()
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: catalog.patterns_for(5), range(64)))
    assert all(result is results[0] for result in results)
    assert np.array_equal(results[0], PatternCatalog().patterns_for(5))
    assert catalog.cached_sizes() == (5,)


def test_cell_values_centre_first() -> None:
    values = cell_values(3)
    assert values[4] == 0.0
    assert [values[i] for i in (1, 3, 5, 7)] == [-1.0] * 4
    assert [values[i] for i in (0, 2, 6, 8)] == [-2.0] * 4


def test_cell_values_even_size() -> None:
    values = cell_values(4)
    assert values[5] == values[6] == values[9] == values[10] == -1.0
    assert values[0] == values[15] == -3.0
    assert cell_values(4) is values
