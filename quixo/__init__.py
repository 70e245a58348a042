"""Quixo rules engine and AI players."""

from . import ai, core, env, evaluation, game
from .ai import (
    GreedyPolicy,
    Policy,
    RandomPolicy,
    Strategy,
    StrategyConfig,
    ai_select_move,
    make_policy,
)
from .core import (
    Board,
    CellState,
    GameResult,
    IllegalMoveError,
    InvalidStateError,
    Move,
    OutOfRangeError,
    Player,
    apply_move,
    check_victory,
    enumerate_legal_moves,
    is_valid_move,
    legal_destinations,
    new_game,
)
from .env import QuixoEnv
from .evaluation import EvaluationResult, evaluate_policies, play_match
from .game import GameState, TurnController, TurnPhase

__all__ = [
    "ai",
    "core",
    "env",
    "evaluation",
    "game",
    "Board",
    "CellState",
    "GameResult",
    "Move",
    "Player",
    "OutOfRangeError",
    "IllegalMoveError",
    "InvalidStateError",
    "new_game",
    "legal_destinations",
    "is_valid_move",
    "apply_move",
    "check_victory",
    "enumerate_legal_moves",
    "Policy",
    "RandomPolicy",
    "GreedyPolicy",
    "Strategy",
    "StrategyConfig",
    "make_policy",
    "ai_select_move",
    "GameState",
    "TurnController",
    "TurnPhase",
    "QuixoEnv",
    "EvaluationResult",
    "evaluate_policies",
    "play_match",
]
