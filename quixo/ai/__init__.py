"""Move selection strategies for Quixo."""

from .evaluation import GreedyWeights, evaluate_board, line_counts
from .policies import (
    GreedyPolicy,
    Policy,
    RandomPolicy,
    Strategy,
    StrategyConfig,
    ai_select_move,
    make_policy,
)

__all__ = [
    "GreedyWeights",
    "evaluate_board",
    "line_counts",
    "Policy",
    "RandomPolicy",
    "GreedyPolicy",
    "Strategy",
    "StrategyConfig",
    "make_policy",
    "ai_select_move",
]
