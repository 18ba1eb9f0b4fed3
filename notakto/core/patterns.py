"""Dead-line patterns and positional cell values, cached per board size."""

from __future__ import annotations

import threading
from typing import Dict, Tuple

import numpy as np
from numpy.typing import NDArray

PatternArray = NDArray[np.intp]


def build_patterns(size: int) -> PatternArray:
    """Return the ``2 * size + 2`` lines of a ``size x size`` board.

    Rows and columns are interleaved (row ``i`` then column ``i``), followed by
    the main diagonal and the anti-diagonal.
    """
    if size < 1:
        raise ValueError(f"Board size must be positive, got {size}.")
    patterns = []
    for i in range(size):
        patterns.append([i * size + j for j in range(size)])
        patterns.append([i + j * size for j in range(size)])
    patterns.append([i * (size + 1) for i in range(size)])
    patterns.append([(i + 1) * (size - 1) for i in range(size)])
    array = np.array(patterns, dtype=np.intp)
    array.flags.writeable = False
    return array


def build_cell_values(size: int) -> Tuple[float, ...]:
    if size < 1:
        raise ValueError(f"Board size must be positive, got {size}.")
    center = (size - 1) / 2
    values = []
    for index in range(size * size):
        row, col = divmod(index, size)
        values.append(-abs(row - center) - abs(col - center))
    return tuple(values)


class PatternCatalog:
    """Lazily populated per-size tables.

    Entries are pure functions of the size, so two threads racing to fill the
    same entry store equal values and either write may win.
    """

    def __init__(self) -> None:
        self._patterns: Dict[int, PatternArray] = {}
        self._cell_values: Dict[int, Tuple[float, ...]] = {}
        self._lock = threading.Lock()

    def patterns_for(self, size: int) -> PatternArray:
        patterns = self._patterns.get(size)
        if patterns is None:
            patterns = build_patterns(size)
            with self._lock:
                patterns = self._patterns.setdefault(size, patterns)
        return patterns

    def cell_values(self, size: int) -> Tuple[float, ...]:
        values = self._cell_values.get(size)
        if values is None:
            values = build_cell_values(size)
            with self._lock:
                values = self._cell_values.setdefault(size, values)
        return values

    def cached_sizes(self) -> Tuple[int, ...]:
        with self._lock:
            return tuple(sorted(self._patterns))


DEFAULT_CATALOG = PatternCatalog()


def patterns_for(size: int) -> PatternArray:
    return DEFAULT_CATALOG.patterns_for(size)


def cell_values(size: int) -> Tuple[float, ...]:
    return DEFAULT_CATALOG.cell_values(size)
