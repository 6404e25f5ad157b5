# tests/test_saturators.py
import pytest

from SdQ_Board import SudokuBoard, UNSET_CELL
from SdQ_Coordinates import Structure
from SdQ_Saturators import Saturator, NakedSingle, HiddenSingle, UnsolvableSudokuError

from grids import GRID_9, TWO_SOLUTIONS_9, blanked


def test_saturator_is_abstract():
    with pytest.raises(TypeError):
        Saturator()


def test_naked_single_fills_the_last_cell():
    board = SudokuBoard.from_grid(blanked(GRID_9, (4, 4)))
    assert NakedSingle().saturate(board)
    assert board.isSolution()
    assert board.getCell(Structure.ROW, 4, 4) == 3
    assert not NakedSingle().saturate(board)


def test_naked_single_reports_no_change():
    board = SudokuBoard(2, 2)
    assert not NakedSingle().saturate(board)
    assert board.countUnset() == 16


def test_naked_single_raises_on_contradiction():
    board = SudokuBoard.from_grid([1, 2, 0, 0,
                                   0, 0, 3, 0,
                                   0, 0, 0, 0,
                                   0, 0, 0, 0], 2, 2)
    with pytest.raises(UnsolvableSudokuError):
        NakedSingle().saturate(board)


def test_hidden_single_in_a_row():
    board = SudokuBoard(2, 2)
    for col in range(3):
        board.removePossibility(Structure.ROW, 0, col, 4)
    assert HiddenSingle().saturate(board)
    assert board.getCell(Structure.ROW, 0, 3) == 4


def test_hidden_single_in_a_box():
    board = SudokuBoard(2, 2)
    for minor in range(1, 4):
        board.removePossibility(Structure.BOX, 3, minor, 2)
    assert HiddenSingle().saturate(board)
    assert board.getCell(Structure.ROW, 2, 2) == 2


def test_hidden_single_two_digits_confined_to_one_cell():
    board = SudokuBoard(2, 2)
    for col in range(1, 4):
        board.removePossibility(Structure.ROW, 0, col, 1)
        board.removePossibility(Structure.ROW, 0, col, 2)
    with pytest.raises(UnsolvableSudokuError):
        HiddenSingle().saturate(board)


def test_no_singles_in_a_deadly_rectangle():
    board = SudokuBoard.from_grid(TWO_SOLUTIONS_9)
    assert not NakedSingle().saturate(board)
    assert not HiddenSingle().saturate(board)
    assert board.getPossibilities(Structure.ROW, 0, 4) == [1, 5]
    assert board.getCell(Structure.ROW, 2, 6) == UNSET_CELL


def test_repr():
    assert repr(NakedSingle()) == "<class 'NakedSingle'>"
