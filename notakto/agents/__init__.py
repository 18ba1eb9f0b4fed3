"""Move-selection policies."""

from .policies import MinimaxPolicy, Policy, RandomPolicy, select_action

__all__ = ["MinimaxPolicy", "Policy", "RandomPolicy", "select_action"]
