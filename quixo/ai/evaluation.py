from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from quixo.core import LINES, Board, Player


@dataclass
class GreedyWeights:
    three: float = 1.0
    four: float = 10.0
    five: float = 1000.0
    opponent_factor: float = 1.0

    def for_length(self, length: int) -> float:
        if length >= 5:
            return self.five
        if length == 4:
            return self.four
        if length == 3:
            return self.three
        return 0.0


def line_counts(board: Board, player: Player) -> np.ndarray:
    """``(12, 2)`` array of (own, opponent) cube counts per line."""
    grid = board.grid
    own = int(player.cell_state)
    opp = int(player.opponent.cell_state)
    counts = np.zeros((len(LINES), 2), dtype=np.int16)
    for index, (rows, cols) in enumerate(LINES):
        values = grid[rows, cols]
        counts[index, 0] = np.count_nonzero(values == own)
        counts[index, 1] = np.count_nonzero(values == opp)
    return counts


def evaluate_board(board: Board, player: Player, weights: GreedyWeights = GreedyWeights()) -> float:
    """Static score of ``board`` from ``player``'s point of view.

    Only lines still open to one side count: a line holding three or more
    of the player's cubes and none of the opponent's scores positively,
    the mirror case negatively.
    """
    score = 0.0
    for own, opp in line_counts(board, player):
        if opp == 0:
            score += weights.for_length(int(own))
        elif own == 0:
            score -= weights.opponent_factor * weights.for_length(int(opp))
    return score
