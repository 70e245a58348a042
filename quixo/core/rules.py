from __future__ import annotations

from functools import lru_cache
from typing import FrozenSet, List, Optional, Set, Tuple

import numpy as np

from .state import (
    BOARD_SIZE,
    EDGE,
    Board,
    CellState,
    GameResult,
    IllegalMoveError,
    Move,
    Player,
    Position,
    check_position,
    is_perimeter,
)

PERIMETER: Tuple[Position, ...] = tuple(
    (col, row) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE) if is_perimeter(col, row)
)


def _build_lines() -> Tuple[Tuple[np.ndarray, np.ndarray], ...]:
    idx = np.arange(BOARD_SIZE)
    lines = []
    for row in range(BOARD_SIZE):
        lines.append((np.full(BOARD_SIZE, row), idx))
    for col in range(BOARD_SIZE):
        lines.append((idx, np.full(BOARD_SIZE, col)))
    lines.append((idx, idx))
    lines.append((idx, idx[::-1]))
    return tuple(lines)


# (row indices, col indices) for the 5 rows, 5 columns and 2 diagonals.
LINES = _build_lines()


def new_game() -> Board:
    return Board.empty()


def is_legal_source(board: Board, col: int, row: int, mover: Player) -> bool:
    if not is_perimeter(col, row):
        return False
    state = board.cell_state(col, row)
    return state == CellState.EMPTY or state == mover.cell_state


def legal_sources(board: Board, mover: Player) -> List[Position]:
    return [(col, row) for col, row in PERIMETER if is_legal_source(board, col, row, mover)]


@lru_cache(maxsize=None)
def destinations_from(col: int, row: int) -> FrozenSet[Position]:
    """Ends of the source's row and column, the source itself excluded.

    A corner has two destinations, any other edge cell three. Interior
    cells can never be picked up and have none.
    """
    if not is_perimeter(col, row):
        return frozenset()
    ends: Set[Position] = {(0, row), (EDGE, row), (col, 0), (col, EDGE)}
    ends.discard((col, row))
    return frozenset(ends)


def legal_destinations(
    board: Board, col: int, row: int, mover: Optional[Player] = None
) -> FrozenSet[Position]:
    """Cells where the cube at ``(col, row)`` may re-enter the board.

    With ``mover`` given, a source the mover may not pick up yields no
    destinations.
    """
    check_position(col, row)
    if mover is not None and not is_legal_source(board, col, row, mover):
        return frozenset()
    return destinations_from(col, row)


def is_valid_move(move: Move, board: Board, is_player_a_turn: bool) -> bool:
    mover = Player.from_turn_flag(is_player_a_turn)
    check_position(move.source_col, move.source_row)
    check_position(move.dest_col, move.dest_row)
    if not is_legal_source(board, move.source_col, move.source_row, mover):
        return False
    return move.destination in destinations_from(move.source_col, move.source_row)


def apply_move(move: Move, board: Board, is_player_a_turn: bool) -> Board:
    if not is_valid_move(move, board, is_player_a_turn):
        mover = Player.from_turn_flag(is_player_a_turn)
        raise IllegalMoveError(f"Move {move} is not legal for {mover.name}.")
    return board.with_move_applied(move, Player.from_turn_flag(is_player_a_turn))


make_move = apply_move


def completed_lines(board: Board) -> List[Tuple[Player, int]]:
    """Every complete line as ``(owner, line index)``; indices follow ``LINES``."""
    grid = board.grid
    completed: List[Tuple[Player, int]] = []
    for index, (rows, cols) in enumerate(LINES):
        values = grid[rows, cols]
        first = int(values[0])
        if first != int(CellState.EMPTY) and np.all(values == first):
            completed.append((Player(first), index))
    return completed


def check_victory(board: Board, mover: Optional[Player] = None) -> Optional[Player]:
    """Winner of ``board`` right after ``mover`` played, if any.

    A player completing only the opponent's line loses. When the move
    leaves complete lines for both players the mover also loses. Without
    a known mover such a board has no winner (see ``game_outcome``).
    """
    owners = {player for player, _ in completed_lines(board)}
    if not owners:
        return None
    if len(owners) == 1:
        return owners.pop()
    if mover is None:
        return None
    return mover.opponent


def game_outcome(board: Board, mover: Optional[Player] = None) -> GameResult:
    winner = check_victory(board, mover)
    if winner is not None:
        return GameResult.for_winner(winner)
    if completed_lines(board):
        return GameResult.DRAW
    return GameResult.ONGOING


def is_terminal(board: Board) -> bool:
    return bool(completed_lines(board))
