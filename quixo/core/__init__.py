"""Core game logic for Quixo."""

from .state import (
    BOARD_SIZE,
    Board,
    CellState,
    GameResult,
    IllegalMoveError,
    InvalidStateError,
    Move,
    MoveRecord,
    OutOfRangeError,
    Player,
    QuixoError,
    is_perimeter,
)
from .rules import (
    LINES,
    PERIMETER,
    apply_move,
    check_victory,
    completed_lines,
    game_outcome,
    is_legal_source,
    is_terminal,
    is_valid_move,
    legal_destinations,
    legal_sources,
    make_move,
    new_game,
)
from .moves import (
    ACTION_VECTOR_SIZE,
    ALL_MOVES,
    decode_move,
    encode_move,
    enumerate_legal_moves,
    legal_move_mask,
)

__all__ = [
    "BOARD_SIZE",
    "Board",
    "CellState",
    "GameResult",
    "Move",
    "MoveRecord",
    "Player",
    "QuixoError",
    "OutOfRangeError",
    "IllegalMoveError",
    "InvalidStateError",
    "is_perimeter",
    "LINES",
    "PERIMETER",
    "apply_move",
    "check_victory",
    "completed_lines",
    "game_outcome",
    "is_legal_source",
    "is_terminal",
    "is_valid_move",
    "legal_destinations",
    "legal_sources",
    "make_move",
    "new_game",
    "ACTION_VECTOR_SIZE",
    "ALL_MOVES",
    "decode_move",
    "encode_move",
    "enumerate_legal_moves",
    "legal_move_mask",
]
