from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

BOARD_SIZE = 5
EDGE = BOARD_SIZE - 1

BoardArray = NDArray[np.int8]

# Convenient tuple alias; always (col, row) in the public API.
Position = Tuple[int, int]


class QuixoError(Exception):
    """Base class for rule violations raised by the engine."""


class OutOfRangeError(QuixoError, IndexError):
    pass


class IllegalMoveError(QuixoError, ValueError):
    pass


class InvalidStateError(QuixoError, RuntimeError):
    pass


class CellState(IntEnum):
    EMPTY = 0
    OWNED_BY_A = 1
    OWNED_BY_B = 2

    @property
    def owner(self) -> Optional["Player"]:
        if self == CellState.EMPTY:
            return None
        return Player(int(self))


class Player(IntEnum):
    PLAYER_A = 1
    PLAYER_B = 2

    @property
    def cell_state(self) -> CellState:
        return CellState(int(self))

    @property
    def opponent(self) -> "Player":
        return Player.PLAYER_B if self == Player.PLAYER_A else Player.PLAYER_A

    @property
    def symbol(self) -> str:
        return _SYMBOLS[int(self)]

    @staticmethod
    def for_turn(turn: int) -> "Player":
        return Player.PLAYER_A if turn % 2 == 0 else Player.PLAYER_B

    @staticmethod
    def from_turn_flag(is_player_a_turn: bool) -> "Player":
        return Player.PLAYER_A if is_player_a_turn else Player.PLAYER_B


class GameResult(Enum):
    ONGOING = "ongoing"
    PLAYER_A_WIN = "player_a_win"
    PLAYER_B_WIN = "player_b_win"
    DRAW = "draw"

    @staticmethod
    def for_winner(player: Optional[Player]) -> "GameResult":
        if player is None:
            return GameResult.ONGOING
        return GameResult.PLAYER_A_WIN if player == Player.PLAYER_A else GameResult.PLAYER_B_WIN

    @property
    def winner(self) -> Optional[Player]:
        if self == GameResult.PLAYER_A_WIN:
            return Player.PLAYER_A
        if self == GameResult.PLAYER_B_WIN:
            return Player.PLAYER_B
        return None

    @property
    def is_terminal(self) -> bool:
        return self != GameResult.ONGOING


_SYMBOLS = {0: ".", 1: "X", 2: "O"}


@dataclass(frozen=True)
class Move:
    source_col: int
    source_row: int
    dest_col: int
    dest_row: int

    @property
    def source(self) -> Position:
        return (self.source_col, self.source_row)

    @property
    def destination(self) -> Position:
        return (self.dest_col, self.dest_row)

    @property
    def axis(self) -> Optional[str]:
        """``"row"`` or ``"column"`` for the line the cube slides along."""
        if self.source == self.destination:
            return None
        if self.source_row == self.dest_row:
            return "row"
        if self.source_col == self.dest_col:
            return "column"
        return None

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.source_col, self.source_row, self.dest_col, self.dest_row)

    @staticmethod
    def between(source: Position, destination: Position) -> "Move":
        return Move(source[0], source[1], destination[0], destination[1])

    def __str__(self) -> str:
        return f"({self.source_col},{self.source_row}) -> ({self.dest_col},{self.dest_row})"


@dataclass(frozen=True)
class MoveRecord:
    turn: int
    player: Player
    move: Move
    resulted_in: GameResult = GameResult.ONGOING


def check_position(col: int, row: int) -> None:
    if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise OutOfRangeError(f"Cell ({col},{row}) is outside the {BOARD_SIZE}x{BOARD_SIZE} board.")


def is_perimeter(col: int, row: int) -> bool:
    check_position(col, row)
    return col in (0, EDGE) or row in (0, EDGE)


class Board:
    """5x5 grid of cell owners.

    The grid is stored as ``int8`` indexed ``[row, col]`` and is
    write-protected: every transformation returns a new ``Board`` so the
    AI can explore hypothetical positions without touching the game's
    board.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Optional[BoardArray] = None) -> None:
        if grid is None:
            grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        else:
            grid = np.array(grid, dtype=np.int8, copy=True)
            if grid.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"Board grid must have shape ({BOARD_SIZE}, {BOARD_SIZE}), got {grid.shape}.")
            if not np.isin(grid, [int(state) for state in CellState]).all():
                raise ValueError("Board grid contains values outside the cell states.")
        grid.flags.writeable = False
        self._grid = grid

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[int]]) -> "Board":
        """Build a board from five rows, top row first."""
        return cls(np.array([list(row) for row in rows], dtype=np.int8))

    @property
    def grid(self) -> BoardArray:
        return self._grid

    is_perimeter = staticmethod(is_perimeter)

    def cell_state(self, col: int, row: int) -> CellState:
        check_position(col, row)
        return CellState(int(self._grid[row, col]))

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self._grid == int(state)))

    def copy(self) -> "Board":
        return Board(self._grid)

    def with_cell(self, col: int, row: int, state: CellState) -> "Board":
        check_position(col, row)
        grid = self._grid.copy()
        grid[row, col] = int(state)
        return Board(grid)

    def with_move_applied(self, move: Move, mover: Player) -> "Board":
        check_position(move.source_col, move.source_row)
        check_position(move.dest_col, move.dest_row)
        axis = move.axis
        if axis is None:
            raise IllegalMoveError(f"Move {move} does not slide along a row or a column.")

        grid = self._grid.copy()
        if axis == "row":
            line = grid[move.source_row, :]
            start, end = move.source_col, move.dest_col
        else:
            line = grid[:, move.source_col]
            start, end = move.source_row, move.dest_row

        # ``line`` is a view into ``grid``; shift the cubes toward the gap.
        if end > start:
            line[start:end] = line[start + 1 : end + 1].copy()
        else:
            line[end + 1 : start + 1] = line[end:start].copy()
        line[end] = int(mover.cell_state)
        return Board(grid)

    def render(self) -> str:
        return "\n".join("".join(_SYMBOLS[int(cell)] for cell in row) for row in self._grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(\n{self.render()}\n)"
