from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

import numpy as np

from quixo.core import (
    Board,
    InvalidStateError,
    Move,
    Player,
    check_victory,
    enumerate_legal_moves,
    is_terminal,
)

from .evaluation import GreedyWeights, evaluate_board


class Strategy(Enum):
    RANDOM = "random"
    GREEDY = "greedy"

    @staticmethod
    def parse(name: str) -> "Strategy":
        try:
            return Strategy(name.strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in Strategy)
            raise ValueError(f"Unknown strategy '{name}'; expected one of: {choices}.") from None


@dataclass
class StrategyConfig:
    strategy: Strategy = Strategy.RANDOM
    seed: Optional[int] = None
    weights: GreedyWeights = field(default_factory=GreedyWeights)


class Policy:
    """Chooses one legal move for a player on a board snapshot."""

    def select_move(self, board: Board, player: Player) -> Move:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return a copy of this policy with its own random state."""
        return self


def _require_playable(board: Board) -> None:
    if is_terminal(board):
        raise InvalidStateError("Cannot select a move on a board that already holds a complete line.")


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def select_move(self, board: Board, player: Player) -> Move:
        _require_playable(board)
        legal = enumerate_legal_moves(board, player)
        return legal[int(self.rng.integers(len(legal)))]

    def spawn(self, seed: Optional[int] = None) -> "RandomPolicy":
        return RandomPolicy(np.random.default_rng(seed))


class GreedyPolicy(Policy):
    """One-ply search: best static evaluation after each legal move.

    Winning moves are taken immediately, moves that hand the opponent the
    game are avoided, and equal scores keep the first move enumerated.
    """

    def __init__(self, weights: Optional[GreedyWeights] = None) -> None:
        self.weights = weights or GreedyWeights()

    def score_move(self, board: Board, player: Player, move: Move) -> float:
        after = board.with_move_applied(move, player)
        winner = check_victory(after, player)
        if winner == player:
            return float("inf")
        if winner is not None:
            return float("-inf")
        return evaluate_board(after, player, self.weights)

    def select_move(self, board: Board, player: Player) -> Move:
        _require_playable(board)
        legal = enumerate_legal_moves(board, player)
        best_move = legal[0]
        best_score = float("-inf")
        for move in legal:
            score = self.score_move(board, player, move)
            if score == float("inf"):
                return move
            if score > best_score:
                best_move, best_score = move, score
        return best_move

    def spawn(self, seed: Optional[int] = None) -> "GreedyPolicy":
        return GreedyPolicy(self.weights)


_POLICY_FACTORIES: Dict[Strategy, Callable[[StrategyConfig], Policy]] = {
    Strategy.RANDOM: lambda config: RandomPolicy(np.random.default_rng(config.seed)),
    Strategy.GREEDY: lambda config: GreedyPolicy(config.weights),
}


def make_policy(config: StrategyConfig) -> Policy:
    return _POLICY_FACTORIES[config.strategy](config)


def ai_select_move(board: Board, player: Player, config: Optional[StrategyConfig] = None) -> Move:
    return make_policy(config or StrategyConfig()).select_move(board, player)
