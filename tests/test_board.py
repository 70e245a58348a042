import numpy as np
import pytest

from quixo.core import Board, CellState, IllegalMoveError, Move, OutOfRangeError, Player

A = int(Player.PLAYER_A)
B = int(Player.PLAYER_B)


def test_empty_board_has_every_cell_empty() -> None:
    board = Board.empty()
    assert board.grid.shape == (5, 5)
    assert board.count(CellState.EMPTY) == 25
    for col in range(5):
        for row in range(5):
            assert board.cell_state(col, row) == CellState.EMPTY


def test_cell_state_uses_col_row_order() -> None:
    board = Board.empty().with_cell(3, 1, CellState.OWNED_BY_B)
    assert board.cell_state(3, 1) == CellState.OWNED_BY_B
    assert board.cell_state(1, 3) == CellState.EMPTY
    assert board.grid[1, 3] == B


@pytest.mark.parametrize("col,row", [(-1, 0), (0, -1), (5, 0), (0, 5), (7, 7)])
def test_cell_state_out_of_range(col: int, row: int) -> None:
    with pytest.raises(OutOfRangeError):
        Board.empty().cell_state(col, row)


def test_is_perimeter() -> None:
    assert Board.is_perimeter(0, 0)
    assert Board.is_perimeter(2, 0)
    assert Board.is_perimeter(4, 3)
    assert not Board.is_perimeter(2, 2)
    assert not Board.is_perimeter(1, 3)
    with pytest.raises(OutOfRangeError):
        Board.is_perimeter(5, 2)


def test_grid_is_read_only() -> None:
    board = Board.empty()
    with pytest.raises(ValueError):
        board.grid[0, 0] = A


def test_rejects_malformed_grid() -> None:
    with pytest.raises(ValueError):
        Board(np.zeros((4, 5), dtype=np.int8))
    with pytest.raises(ValueError):
        Board(np.full((5, 5), 3, dtype=np.int8))


def test_row_slide_toward_far_end() -> None:
    board = Board.from_rows(
        [
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
            [0, A, B, 0, B],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
        ]
    )
    after = board.with_move_applied(Move(0, 2, 4, 2), Player.PLAYER_A)
    assert after.grid[2].tolist() == [A, B, 0, B, A]
    # Source board is untouched.
    assert board.grid[2].tolist() == [0, A, B, 0, B]


def test_row_slide_toward_near_end() -> None:
    board = Board.from_rows(
        [
            [B, A, 0, B, A],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0],
        ]
    )
    after = board.with_move_applied(Move(2, 0, 0, 0), Player.PLAYER_A)
    assert after.grid[0].tolist() == [A, B, A, B, A]
    assert np.array_equal(after.grid[1:], board.grid[1:])


def test_column_slide() -> None:
    board = Board.from_rows(
        [
            [0, 0, 0, 0, 0],
            [0, 0, A, 0, 0],
            [0, 0, A, 0, 0],
            [0, 0, B, 0, 0],
            [0, 0, 0, 0, 0],
        ]
    )
    after = board.with_move_applied(Move(2, 0, 2, 4), Player.PLAYER_A)
    assert after.grid[:, 2].tolist() == [A, A, B, 0, A]

    back = board.with_move_applied(Move(2, 4, 2, 0), Player.PLAYER_B)
    assert back.grid[:, 2].tolist() == [B, 0, A, A, B]


def test_move_without_shared_axis_is_rejected() -> None:
    with pytest.raises(IllegalMoveError):
        Board.empty().with_move_applied(Move(0, 0, 4, 4), Player.PLAYER_A)
    with pytest.raises(IllegalMoveError):
        Board.empty().with_move_applied(Move(0, 0, 0, 0), Player.PLAYER_A)


def test_boards_compare_by_content() -> None:
    first = Board.empty().with_cell(0, 0, CellState.OWNED_BY_A)
    second = Board.empty().with_cell(0, 0, CellState.OWNED_BY_A)
    assert first == second
    assert first != Board.empty()
    assert first.copy() == first


def test_render_uses_player_symbols() -> None:
    board = Board.empty().with_cell(0, 0, CellState.OWNED_BY_A).with_cell(4, 4, CellState.OWNED_BY_B)
    lines = board.render().splitlines()
    assert lines[0] == "X...."
    assert lines[4] == "....O"
