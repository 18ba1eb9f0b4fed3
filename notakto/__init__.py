"""Notakto rules engine and alpha-beta opponent."""

from . import agents, config, core, env, evaluation, features, search
from .agents import MinimaxPolicy, Policy, RandomPolicy, select_action
from .config import MatchConfig, load_match_config
from .core import (
    GameResult,
    GameState,
    IllegalMoveError,
    Move,
    PlayerSide,
    apply_move,
    initialize_game_state,
    is_dead,
    legal_moves,
    patterns_for,
    rollback,
    skip_turn,
)
from .env import NotaktoEnv
from .evaluation import EvaluationResult, evaluate_policies
from .search import find_best_move, minimax, score, search_depth

__all__ = [
    "agents",
    "config",
    "core",
    "env",
    "evaluation",
    "features",
    "search",
    "MinimaxPolicy",
    "Policy",
    "RandomPolicy",
    "select_action",
    "MatchConfig",
    "load_match_config",
    "GameResult",
    "GameState",
    "IllegalMoveError",
    "Move",
    "PlayerSide",
    "apply_move",
    "initialize_game_state",
    "is_dead",
    "legal_moves",
    "patterns_for",
    "rollback",
    "skip_turn",
    "NotaktoEnv",
    "EvaluationResult",
    "evaluate_policies",
    "find_best_move",
    "minimax",
    "score",
    "search_depth",
]
