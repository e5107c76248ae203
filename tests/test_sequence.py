import pytest

from connectn.errors import InvalidLengthError, PositionError
from connectn.game.board import Board
from connectn.utils import Direction, Token
from tests.helpers import A, B, fill


def test_horizontal_win(board):
    assert fill(board, [(A, 0), (A, 1), (A, 2)]) is False
    assert board.add_token(A, 3) is True
    assert board.check_horizontal_sequence(0, 3, 4)


def test_horizontal_win_completed_in_the_middle(board):
    fill(board, [(A, 0), (A, 1), (A, 3)])
    assert board.add_token(A, 2) is True


def test_horizontal_gap_is_not_a_win(board):
    assert fill(board, [(A, 0), (A, 1), (A, 3), (A, 4)]) is False
    assert board.is_winning_position(0, 4) is False
    assert board.add_token(A, 2) is True


def test_horizontal_win_against_right_edge(board):
    assert fill(board, [(A, 6), (A, 5), (A, 4), (A, 3)]) is True


def test_interrupted_horizontal_run(board):
    assert fill(board, [(A, 0), (A, 1), (B, 2), (A, 3), (A, 4), (A, 5)]) is False
    assert board.add_token(A, 6) is True


def test_vertical_win(board):
    results = [board.add_token(A, 0) for _ in range(4)]
    assert results == [False, False, False, True]
    assert [board.get_token(row, 0) for row in range(4)] == [A] * 4
    assert board.check_vertical_sequence(3, 0, 4)


def test_vertical_interrupted(board):
    assert fill(board, [(A, 0), (A, 0), (B, 0), (A, 0), (A, 0), (A, 0)]) is False


def test_positive_diagonal_win(board):
    placements = [
        (A, 0),
        (B, 1), (A, 1),
        (B, 2), (B, 2), (A, 2),
        (B, 3), (B, 3), (B, 3),
    ]
    assert fill(board, placements) is False
    assert board.add_token(A, 3) is True
    assert [board.get_token(i, i) for i in range(4)] == [A] * 4
    assert board.check_positive_diagonal_sequence(0, 0, 4)
    assert not board.check_negative_diagonal_sequence(0, 0, 4)


def test_positive_diagonal_with_mismatched_token(board):
    placements = [
        (A, 0),
        (B, 1), (A, 1),
        (B, 2), (B, 2), (B, 2),
        (B, 3), (B, 3), (B, 3),
    ]
    assert fill(board, placements) is False
    assert board.add_token(A, 3) is False
    assert board.get_token(2, 2) == B


def test_negative_diagonal_win(board):
    placements = [
        (A, 3),
        (B, 2), (A, 2),
        (B, 1), (B, 1), (A, 1),
        (B, 0), (B, 0), (B, 0),
    ]
    assert fill(board, placements) is False
    assert board.add_token(A, 0) is True
    assert board.check_negative_diagonal_sequence(3, 0, 4)
    assert board.check_negative_diagonal_sequence(0, 3, 4)
    assert not board.check_positive_diagonal_sequence(3, 0, 4)


def test_longer_run_counts_as_win(board):
    assert fill(board, [(A, 0), (A, 1), (A, 2), (A, 4), (A, 5)]) is False
    assert board.add_token(A, 3) is True


def test_empty_cell_is_never_part_of_a_sequence(board):
    fill(board, [(A, 0), (A, 1), (A, 2), (A, 3)])
    assert board.is_winning_position(1, 0) is False
    assert board.has_sequence(1, 1, 2) is False
    assert board.check_sequence(1, 1, 0, 1, 2) is False


def test_is_winning_position_is_stable(board):
    fill(board, [(A, 0), (A, 1), (A, 2), (A, 3)])
    first = board.is_winning_position(0, 1)
    second = board.is_winning_position(0, 1)
    assert first is second is True
    assert board.number_of_tokens == 4


def test_has_sequence_with_shorter_lengths(board):
    fill(board, [(A, 2), (A, 3), (B, 4), (A, 3)])
    assert board.has_sequence(0, 2, 2)
    assert not board.has_sequence(0, 2, 3)
    assert board.check_vertical_sequence(0, 3, 2)
    assert board.check_positive_diagonal_sequence(0, 2, 2)
    assert not board.has_sequence(0, 4, 2)


def test_sequence_longer_than_board_line():
    board = Board(4, 4, 4)
    fill(board, [(A, 0), (A, 1), (A, 2), (A, 3)])
    assert board.has_sequence(0, 0, 4)
    assert not board.has_sequence(0, 0, 5)


def test_connect_one_board():
    board = Board(1, 1, 1)
    assert board.add_token(A, 0) is True


@pytest.mark.parametrize("length", [1, 0, -3])
def test_length_below_minimum_is_rejected(board, length):
    board.add_token(A, 0)
    with pytest.raises(InvalidLengthError):
        board.has_sequence(0, 0, length)
    with pytest.raises(InvalidLengthError):
        board.check_sequence(0, 0, 1, 0, length)
    with pytest.raises(InvalidLengthError):
        board.check_horizontal_sequence(0, 0, length)


@pytest.mark.parametrize("row,col", [(-1, 0), (6, 0), (0, -1), (0, 7), (6, 7)])
def test_position_out_of_bounds(board, row, col):
    with pytest.raises(PositionError):
        board.is_winning_position(row, col)
    with pytest.raises(PositionError):
        board.has_sequence(row, col, 2)
    with pytest.raises(PositionError):
        board.check_vertical_sequence(row, col, 2)


def test_zero_step_is_rejected(board):
    board.add_token(A, 0)
    with pytest.raises(ValueError):
        board.check_sequence(0, 0, 0, 0, 2)


def test_get_sequence_returns_run_cells(board):
    fill(board, [(A, 0), (A, 1), (A, 2), (A, 3)])
    assert board.get_sequence(0, 3) == [(0, 0), (0, 1), (0, 2), (0, 3)]
    assert board.get_sequence(0, 3, 2) == [(0, 2), (0, 3)]
    assert board.get_sequence(1, 3) == []


def test_get_sequence_directions(board):
    fill(board, [(A, 0), (A, 0), (A, 1), (B, 1), (A, 2)])
    assert board.get_sequence_directions(0, 0, 2) == [Direction.VERTICAL, Direction.HORIZONTAL]
    assert board.get_sequence_directions(0, 0, 3) == [Direction.HORIZONTAL]
    assert board.get_sequence_directions(0, 0) == []
    assert board.get_sequence_directions(1, 1, 2) == []


def test_win_found_on_search_copy_only(board):
    fill(board, [(A, 0), (A, 1), (A, 2)])
    for col in board.get_valid_moves():
        branch = board.copy()
        if branch.add_token(Token.RED, col):
            assert col == 3
    assert board.number_of_tokens == 3
