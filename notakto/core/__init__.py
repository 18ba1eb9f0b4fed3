"""Core game logic for Notakto."""

from .state import (
    BoardArray,
    BoardsArray,
    Cell,
    GameResult,
    GameState,
    Move,
    PlayerSide,
    Snapshot,
)
from .patterns import DEFAULT_CATALOG, PatternCatalog, cell_values, patterns_for
from .rules import (
    IllegalMoveError,
    all_dead,
    apply_move,
    decode_move,
    encode_move,
    initialize_game_state,
    is_dead,
    legal_moves,
    place_mark,
    rollback,
    skip_turn,
)

__all__ = [
    "BoardArray",
    "BoardsArray",
    "Cell",
    "GameResult",
    "GameState",
    "Move",
    "PlayerSide",
    "Snapshot",
    "DEFAULT_CATALOG",
    "PatternCatalog",
    "cell_values",
    "patterns_for",
    "IllegalMoveError",
    "all_dead",
    "apply_move",
    "decode_move",
    "encode_move",
    "initialize_game_state",
    "is_dead",
    "legal_moves",
    "place_mark",
    "rollback",
    "skip_turn",
]
