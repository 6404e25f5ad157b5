# tests/test_solver.py
from itertools import permutations

import pytest

from SdQ_Board import SudokuBoard
from SdQ_Coordinates import Structure
from SdQ_Saturators import NakedSingle, HiddenSingle
from SdQ_Solver import SudokuSolver

from grids import GRID_9, PUZZLE_9, SOLUTION_9, TWO_SOLUTIONS_9, blanked, digits


UNSOLVABLE_4 = [1, 2, 0, 0,
                0, 0, 3, 0,
                0, 0, 0, 0,
                0, 0, 0, 0]


def _isValid(grid, boxRows, boxCols):
    numbers = boxRows * boxCols
    rows = [grid[r * numbers:(r + 1) * numbers] for r in range(numbers)]
    cols = [grid[c::numbers] for c in range(numbers)]
    boxes = [[grid[(b // boxRows * boxRows + m // boxCols) * numbers
                   + b % boxRows * boxCols + m % boxCols] for m in range(numbers)]
             for b in range(numbers)]
    digitSet = set(range(1, numbers + 1))
    return all(set(unit) == digitSet for unit in rows + cols + boxes)


def _flat(board):
    return board.grid_toArray().flatten().tolist()


def test_saturate_solves_a_single_gap(solver):
    board = SudokuBoard.from_grid(blanked(GRID_9, (8, 8)))
    result = solver.saturate(board)
    assert result.isSolution()
    assert _flat(result) == list(GRID_9)
    # the input is left untouched
    assert board.getCell(Structure.ROW, 8, 8) == -1


def test_saturate_stops_at_fixed_point(solver):
    board = SudokuBoard.from_grid(TWO_SOLUTIONS_9)
    result = solver.saturate(board)
    assert result == board
    assert result is not board


def test_saturate_unsolvable_returns_none(solver):
    assert solver.saturate(SudokuBoard.from_grid(UNSOLVABLE_4, 2, 2)) is None


def test_all_solutions_of_empty_4x4(solver):
    solutions = solver.findAllSolutions(SudokuBoard(2, 2))
    assert len(solutions) == 288
    assert len(set(solutions)) == 288
    assert all(_isValid(_flat(s), 2, 2) for s in solutions)


def test_backtracking_without_strategies():
    solutions = SudokuSolver().findAllSolutions(SudokuBoard(2, 2))
    assert len(solutions) == 288


def test_latin_squares_match_brute_force(solver):
    board = SudokuBoard.from_grid([1, 2, 3, 4] + [0] * 12, 1, 4)
    found = {tuple(_flat(s)) for s in solver.findAllSolutions(board)}

    expected = set()
    rows = list(permutations(range(1, 5)))
    for r1 in rows:
        for r2 in rows:
            for r3 in rows:
                grid = (1, 2, 3, 4) + r1 + r2 + r3
                if _isValid(list(grid), 1, 4):
                    expected.add(grid)

    assert len(expected) == 24
    assert found == expected


def test_results_are_deterministic(solver):
    board = SudokuBoard(2, 2)
    first = [str(s) for s in solver.findAllSolutions(board)]
    second = [str(s) for s in solver.findAllSolutions(board)]
    assert first == second
    assert solver.findFirstSolution(board) == solver.findFirstSolution(board)


def test_first_solution_takes_smallest_digit(solver):
    board = SudokuBoard.from_grid(TWO_SOLUTIONS_9)
    first = solver.findFirstSolution(board)
    assert _flat(first) == list(GRID_9)
    assert board.countUnset() == 4


def test_two_solutions(solver):
    solutions = sorted(solver.findAllSolutions(SudokuBoard.from_grid(TWO_SOLUTIONS_9)))
    assert len(solutions) == 2
    assert _flat(solutions[0]) == list(GRID_9)
    swapped = solutions[1]
    assert swapped.getCell(Structure.ROW, 0, 4) == 5
    assert swapped.getCell(Structure.ROW, 0, 6) == 1
    assert swapped.getCell(Structure.ROW, 2, 4) == 1
    assert swapped.getCell(Structure.ROW, 2, 6) == 5


def test_classical_puzzle(solver):
    board = SudokuBoard.from_grid(digits(PUZZLE_9))
    solution = solver.findFirstSolution(board)
    assert _flat(solution) == digits(SOLUTION_9)
    assert solver.findAllSolutions(board) == [solution]


def test_rectangular_boxes(solver):
    board = SudokuBoard(2, 3)
    board.setCell(Structure.ROW, 0, 0, 6)
    solution = solver.findFirstSolution(board)
    assert solution.isSolution()
    assert solution.getCell(Structure.ROW, 0, 0) == 6
    assert _isValid(_flat(solution), 2, 3)


def test_unsolvable_board(solver):
    board = SudokuBoard.from_grid(UNSOLVABLE_4, 2, 2)
    assert solver.findFirstSolution(board) is None
    assert solver.findAllSolutions(board) == []
    assert SudokuSolver().findAllSolutions(board) == []


def test_solved_board_is_its_own_solution(solver):
    board = SudokuBoard.from_grid(GRID_9)
    assert solver.findAllSolutions(board) == [board]


@pytest.mark.parametrize("progress", [True, False])
def test_progress_counter(progress, capsys):
    solver = SudokuSolver(progress=progress)
    assert solver.findFirstSolution(SudokuBoard(2, 2)).isSolution()
    assert capsys.readouterr().out == ""


def test_saturation_reaches_a_fixed_point(solver):
    # r4c4 and r8c8 are naked singles; the 1/5 rectangle needs a guess
    board = SudokuBoard.from_grid(blanked(TWO_SOLUTIONS_9, (4, 4), (8, 8)))
    assert board.countUnset() == 6

    result = solver.saturate(board)
    assert result != board
    assert result.countUnset() == 4
    assert result.getCell(Structure.ROW, 4, 4) == 3
    assert result.getCell(Structure.ROW, 8, 8) == 3
    assert not result.isSolution()

    assert solver.saturate(result) == result
    assert not NakedSingle().saturate(result.clone())
    assert not HiddenSingle().saturate(result.clone())
