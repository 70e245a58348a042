from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from .rules import PERIMETER, destinations_from, is_legal_source
from .state import Board, IllegalMoveError, Move, Player


def _ordered_destinations(col: int, row: int) -> List[Tuple[int, int]]:
    return sorted(destinations_from(col, row), key=lambda pos: (pos[1], pos[0]))


# Every geometrically possible move, sources and destinations in row-major order.
ALL_MOVES: Tuple[Move, ...] = tuple(
    Move.between((col, row), destination)
    for col, row in PERIMETER
    for destination in _ordered_destinations(col, row)
)
ACTION_VECTOR_SIZE = len(ALL_MOVES)
_MOVE_INDEX: Dict[Move, int] = {move: index for index, move in enumerate(ALL_MOVES)}


def encode_move(move: Move) -> int:
    try:
        return _MOVE_INDEX[move]
    except KeyError:
        raise IllegalMoveError(f"Move {move} is not a perimeter slide.") from None


def decode_move(index: int) -> Move:
    if not 0 <= index < ACTION_VECTOR_SIZE:
        raise ValueError("Action index out of range.")
    return ALL_MOVES[index]


def enumerate_legal_moves(board: Board, player: Player) -> List[Move]:
    legal: List[Move] = []
    for col, row in PERIMETER:
        if not is_legal_source(board, col, row, player):
            continue
        for destination in _ordered_destinations(col, row):
            legal.append(Move.between((col, row), destination))
    return legal


def legal_move_mask(board: Board, player: Player) -> np.ndarray:
    mask = np.zeros(ACTION_VECTOR_SIZE, dtype=np.int8)
    for move in enumerate_legal_moves(board, player):
        mask[_MOVE_INDEX[move]] = 1
    return mask
