"""Alpha-beta search opponent."""

from .heuristic import NEAR_DEATH_PENALTY, TWO_AWAY_PENALTY, score
from .minimax import SearchResult, SearchStats, find_best_move, minimax, search, search_depth

__all__ = [
    "NEAR_DEATH_PENALTY",
    "TWO_AWAY_PENALTY",
    "score",
    "SearchResult",
    "SearchStats",
    "find_best_move",
    "minimax",
    "search",
    "search_depth",
]
