import numpy as np
import pytest

from quixo.core import (
    ACTION_VECTOR_SIZE,
    ALL_MOVES,
    Board,
    CellState,
    IllegalMoveError,
    Move,
    Player,
    decode_move,
    encode_move,
    enumerate_legal_moves,
    is_valid_move,
    legal_move_mask,
    new_game,
)


def test_empty_board_has_44_moves() -> None:
    moves = enumerate_legal_moves(new_game(), Player.PLAYER_A)
    assert len(moves) == 44
    assert len(set(moves)) == 44
    assert ACTION_VECTOR_SIZE == 44
    assert set(moves) == set(ALL_MOVES)


def test_enumeration_order_is_row_major() -> None:
    moves = enumerate_legal_moves(new_game(), Player.PLAYER_B)
    assert moves[0] == Move(0, 0, 4, 0)
    assert moves[1] == Move(0, 0, 0, 4)
    assert moves[2] == Move(1, 0, 0, 0)
    assert moves[-1] == Move(4, 4, 0, 4)


def test_every_enumerated_move_is_valid() -> None:
    board = (
        new_game()
        .with_cell(0, 0, CellState.OWNED_BY_B)
        .with_cell(2, 0, CellState.OWNED_BY_A)
        .with_cell(4, 3, CellState.OWNED_BY_B)
    )
    moves = enumerate_legal_moves(board, Player.PLAYER_A)
    # Corner (0,0) and edge (4,3) belong to the opponent.
    assert len(moves) == 44 - 2 - 3
    for move in moves:
        assert is_valid_move(move, board, True)
        assert move.source != (0, 0)


def test_encode_decode_move() -> None:
    for index, move in enumerate(ALL_MOVES):
        assert encode_move(move) == index
    assert decode_move(0) == Move(0, 0, 4, 0)
    with pytest.raises(ValueError):
        decode_move(ACTION_VECTOR_SIZE)
    with pytest.raises(IllegalMoveError):
        encode_move(Move(2, 2, 2, 0))


def test_legal_move_mask_matches_enumeration() -> None:
    board = new_game().with_cell(4, 4, CellState.OWNED_BY_A)
    mask = legal_move_mask(board, Player.PLAYER_B)
    legal = enumerate_legal_moves(board, Player.PLAYER_B)
    assert mask.shape == (ACTION_VECTOR_SIZE,)
    assert np.count_nonzero(mask) == len(legal) == 42
    for move in legal:
        assert mask[encode_move(move)] == 1
