from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from tqdm.auto import trange

from quixo.ai import Policy
from quixo.core import GameResult, Player, encode_move
from quixo.env import QuixoEnv


@dataclass
class EvaluationResult:
    games_played: int
    player_a_wins: int
    player_b_wins: int
    draws: int
    average_length: float

    def winrate_player_a(self) -> float:
        return self.player_a_wins / max(1, self.games_played)

    def winrate_player_b(self) -> float:
        return self.player_b_wins / max(1, self.games_played)

    def as_dict(self) -> dict:
        return {
            "games": self.games_played,
            "player_a_wins": self.player_a_wins,
            "player_b_wins": self.player_b_wins,
            "draws": self.draws,
            "average_length": self.average_length,
            "player_a_winrate": self.winrate_player_a(),
            "player_b_winrate": self.winrate_player_b(),
        }


def play_match(
    policy_a: Policy,
    policy_b: Policy,
    *,
    env_factory: Optional[Callable[[], QuixoEnv]] = None,
) -> Tuple[GameResult, int]:
    """Play one game to completion; returns the result and its length in plies."""
    env = (env_factory or QuixoEnv)()
    env.reset()
    done = False
    ply = 0
    while not done:
        state = env.state
        policy = policy_a if state.current_player == Player.PLAYER_A else policy_b
        move = policy.select_move(state.board, state.current_player)
        _, _, terminated, truncated, _ = env.step(encode_move(move))
        ply += 1
        done = terminated or truncated
    return env.state.result, ply


def evaluate_policies(
    policy_a: Policy,
    policy_b: Policy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], QuixoEnv]] = None,
    progress: bool = False,
) -> EvaluationResult:
    player_a_wins = 0
    player_b_wins = 0
    draws = 0
    total_ply = 0

    for _ in trange(episodes, desc="Games", disable=not progress):
        result, ply = play_match(policy_a, policy_b, env_factory=env_factory)
        total_ply += ply
        if result == GameResult.PLAYER_A_WIN:
            player_a_wins += 1
        elif result == GameResult.PLAYER_B_WIN:
            player_b_wins += 1
        else:
            draws += 1

    return EvaluationResult(
        games_played=episodes,
        player_a_wins=player_a_wins,
        player_b_wins=player_b_wins,
        draws=draws,
        average_length=total_ply / max(1, episodes),
    )
