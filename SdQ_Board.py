#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
SudoQ_Board

The intelligent Sudoku board: every cell knows whether it is fixed and which
digits are still possible for it.

@author: alexanderpfaff

"""

from __future__ import annotations
from functools import total_ordering
from typing import List, Optional, Tuple

import numpy as np

from utilFunX import SequenceLike, _digit_width, _grid_toFlat
from SdQ_Coordinates import Structure, indexTable, peerTable, structureNumber


UNSET_CELL: int = -1
"""Content of a cell that is not (yet) fixed to a digit."""



class InvalidSudokuError(Exception):
    """
    The attempted mutation made the board unsatisfiable, e.g. a cell has
    no possibilities left. The board that raised must be discarded.
    """


class IllegalOperationError(RuntimeError):
    """An already fixed cell was about to be overwritten."""



# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *
# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

@total_ordering
class SudokuBoard:
    """
        Provides a (boxRows x boxCols) X (boxRows x boxCols) Sudoku board,
        default setting: 3 x 3 boxes ==> classical 9 X 9 Sudoku.
        Box dimensions need not be equal (e.g. 2 x 3 boxes on a 6 X 6 board);
        the overall board is always square with NUMBERS = boxRows * boxCols
        rows, columns, boxes and digits.

        Cells are addressed as (struct, major, minor), see SdQ_Coordinates.
        Internally the board is stored as
           -- a boolean candidate matrix of shape (SIZE, NUMBERS): column d-1
              of row i is True iff digit d is still possible for cell i,
           -- a boolean vector of shape (SIZE,) marking fixed cells; a fixed
              cell has exactly one candidate left, viz. its value.

        Setting a cell removes its digit from the candidates of every other
        cell sharing a row, column or box with it; hence no two fixed cells
        of one structure ever hold the same digit.
    """

    def __init__(self, boxRows: int = 3, boxCols: int = 3) -> None:
        if not (isinstance(boxRows, (int, np.integer)) and isinstance(boxCols, (int, np.integer))):
            raise ValueError(f"Box dimensions must be integers; submitted: {type(boxRows)}, {type(boxCols)}")
        if boxRows < 1 or boxCols < 1:
            raise ValueError(f"Box dimensions must be positive; submitted: {boxRows} x {boxCols}")

        self.__BOX_ROWS: int = int(boxRows)
        self.__BOX_COLS: int = int(boxCols)
        self.__NUMBERS: int = self.__BOX_ROWS * self.__BOX_COLS
        self.__SIZE: int = self.__NUMBERS**2

        self._tables = indexTable(self.BOX_ROWS, self.BOX_COLS)
        self._peers = peerTable(self.BOX_ROWS, self.BOX_COLS)
        self._possible: np.ndarray = np.ones((self.SIZE, self.NUMBERS), dtype=bool)
        self._fixed: np.ndarray = np.zeros(self.SIZE, dtype=bool)
        self._lastCellSet: Optional[int] = None


    def __str__(self) -> str:
        """ single line representation; the rows are separated by a blank """
        return self._printHelper(" ", " ")

    def __repr__(self) -> str:
        return "<class 'SudokuBoard'>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return NotImplemented
        return self.compareTo(other) == 0

    def __lt__(self, other: SudokuBoard) -> bool:
        if not isinstance(other, SudokuBoard):
            return NotImplemented
        return self.compareTo(other) < 0

    def __hash__(self) -> int:
        return hash((self.NUMBERS, tuple(self._sortKey())))

    def __copy__(self) -> SudokuBoard:
        return self.clone()

    def __deepcopy__(self, memo) -> SudokuBoard:
        return self.clone()


    @property
    def BOX_ROWS(self) -> int:
        return self.__BOX_ROWS

    @property
    def BOX_COLS(self) -> int:
        return self.__BOX_COLS

    @property
    def NUMBERS(self) -> int:
        return self.__NUMBERS

    @property
    def SIZE(self) -> int:
        return self.__SIZE



# * * * * * * * * * * * * * *  INVENTORY  * * * * * * * * * * * * * * * * * * *

    """ 0.    CONSTRUCT """

    @classmethod
    def from_grid(cls, grid: SequenceLike, boxRows: int = 3, boxCols: int = 3) -> SudokuBoard:
        """
        Class method to instantiate a board from a nested (row-wise) or flat
        sequence of digits; 0, UNSET_CELL and None denote blank cells.
        Every given is entered via setCell, i.e. with full propagation.

        Raises
        ------
        ValueError
            Wrong number of cells or a digit outside 1 .. NUMBERS.
        InvalidSudokuError
            The givens contradict each other.
        """
        board = cls(boxRows, boxCols)
        values = _grid_toFlat(grid, board.NUMBERS)
        for index, value in enumerate(values):
            if value in (0, UNSET_CELL):
                continue
            board.setCell(Structure.ROW, index // board.NUMBERS, index % board.NUMBERS, int(value))
        return board


    def _quick_insert(self, seq: SequenceLike) -> None:
        """
        Fixes the given cells WITHOUT any validity check or propagation --
        use with caution: the result may hold duplicates that setCell would
        never admit. Blank entries (0, UNSET_CELL, None) are left untouched.
        """
        values = _grid_toFlat(seq, self.NUMBERS)
        for index, value in enumerate(values):
            if value in (0, UNSET_CELL):
                continue
            self._possible[index] = False
            self._possible[index, value - 1] = True
            self._fixed[index] = True
            self._lastCellSet = index


    def clone(self) -> SudokuBoard:
        """ deep copy: candidates and fixed markers are independent of this board """
        copy = SudokuBoard.__new__(SudokuBoard)
        copy.__dict__.update(self.__dict__)
        copy._possible = self._possible.copy()
        copy._fixed = self._fixed.copy()
        return copy



    """ A.    MUTATE """

    def setCell(self, struct: Structure, major: int, minor: int, number: int) -> None:
        """
        Fixes the cell (struct, major, minor) to {number}; this can be done
        exactly once per cell. The number is removed from the possibilities
        of all other cells sharing a structure with this cell.

        Raises
        ------
        IllegalOperationError
            The cell is already fixed (whatever {number} is).
        ValueError
            Coordinates out of range, or number not an integer in 1 .. NUMBERS.
        InvalidSudokuError
            {number} is not possible for this cell, or the propagation left
            another cell without possibilities.
        """
        index = self._index(struct, major, minor)

        if self._fixed[index]:
            raise IllegalOperationError("This cell is already fixed.")
        if number == UNSET_CELL:
            return
        if not isinstance(number, (int, np.integer)):
            raise ValueError(f"Cell values must be integers; submitted: {type(number)}")
        if not (1 <= number <= self.NUMBERS):
            raise ValueError(f"This sudoku only allows numbers between 1 and {self.NUMBERS}")
        if not self._possible[index, number - 1]:
            raise InvalidSudokuError(f"This cell cannot be set to {number}")

        self._possible[index] = False
        self._possible[index, number - 1] = True
        self._fixed[index] = True
        self._lastCellSet = index

        peers = self._peers[index]
        open_peers = peers[~self._fixed[peers]]
        self._possible[open_peers, number - 1] = False
        if not self._possible[open_peers].any(axis=1).all():
            raise InvalidSudokuError("The sudoku contains a cell with no possibilities left")


    def removePossibility(self, struct: Structure, major: int, minor: int, number: int) -> None:
        """
        Removes {number} from the possibilities of the cell; does nothing if
        the cell is already fixed.

        Raises
        ------
        ValueError
            Coordinates out of range, or number not an integer in 1 .. NUMBERS.
        InvalidSudokuError
            The last possibility of the cell was removed.
        """
        index = self._index(struct, major, minor)
        if not isinstance(number, (int, np.integer)):
            raise ValueError(f"Cell values must be integers; submitted: {type(number)}")
        if not (1 <= number <= self.NUMBERS):
            raise ValueError(f"This sudoku only allows numbers between 1 and {self.NUMBERS}")
        if self._fixed[index]:
            return

        self._possible[index, number - 1] = False
        if not self._possible[index].any():
            raise InvalidSudokuError("The sudoku contains a cell with no possibilities left")



    """ B.    QUERY """

    def getCell(self, struct: Structure, major: int, minor: int) -> int:
        """ returns the digit of the cell, UNSET_CELL if the cell is not fixed """
        index = self._index(struct, major, minor)
        if self._fixed[index]:
            return self._fixedValue(index)
        return UNSET_CELL


    def getPossibilities(self, struct: Structure, major: int, minor: int) -> Optional[List[int]]:
        """
        Returns the digits still possible for the cell in ascending order, or
        None if the cell is already fixed. The list may be changed freely.
        """
        index = self._index(struct, major, minor)
        if self._fixed[index]:
            return None
        return (np.flatnonzero(self._possible[index]) + 1).tolist()


    def getLastCellSet(self) -> Optional[Tuple[int, int]]:
        """ (row, column) of the cell fixed most recently, None if no cell was set """
        if self._lastCellSet is None:
            return None
        return (structureNumber(self._lastCellSet, Structure.ROW, self.BOX_ROWS, self.BOX_COLS),
                structureNumber(self._lastCellSet, Structure.COLUMN, self.BOX_ROWS, self.BOX_COLS))


    def isSolution(self) -> bool:
        """
        A board is solved iff every cell was fixed; uniqueness within rows,
        columns and boxes is not re-checked here since setCell maintains it.
        """
        return bool(self._fixed.all())


    def countUnset(self) -> int:
        """ number of cells not fixed yet """
        return int(self.SIZE - self._fixed.sum())


    def grid_toArray(self) -> np.ndarray:
        """
        returns the current board as (NUMBERS, NUMBERS) integer array,
        row-wise; blank cells hold UNSET_CELL
        """
        values = np.argmax(self._possible, axis=1) + 1
        values[~self._fixed] = UNSET_CELL
        return values.reshape(self.NUMBERS, self.NUMBERS)



    """ C.    COMPARE """

    def compareTo(self, other: SudokuBoard) -> int:
        """
        Compares two boards as if each were read as one number by
        concatenating its rows; a blank cell counts as larger than the
        highest digit. A board with fewer NUMBERS is always the smaller one.

        Returns
        -------
        int
            -1 if this board is smaller, 0 if equal, 1 if larger.
        """
        if self.NUMBERS != other.NUMBERS:
            return 1 if self.NUMBERS > other.NUMBERS else -1

        mine, theirs = self._sortKey(), other._sortKey()
        diff = np.flatnonzero(mine != theirs)
        if diff.size == 0:
            return 0
        first = diff[0]
        return 1 if mine[first] > theirs[first] else -1


    def _sortKey(self) -> np.ndarray:
        """ aux-method: row-major values with blanks mapped above every digit """
        values = np.argmax(self._possible, axis=1) + 1
        values[~self._fixed] = self.NUMBERS + 1
        return values



    """ D.    VISUAL """

    def prettyPrint(self) -> str:
        """ the board as rectangle, one row per line; blanks are dots """
        return self._printHelper(" ", "\n")

    def showBoard(self) -> None:
        """ prints out the current board """
        print(self.prettyPrint())


    def _printHelper(self, colSeparator: str, rowSeparator: str) -> str:
        """
        aux-method
        Joins the cells of each row with {colSeparator} and the rows with
        {rowSeparator}; every cell is right-justified to the width of the
        largest digit so that the columns line up.
        """
        width = _digit_width(self.NUMBERS)
        rows = []
        for values in self.grid_toArray():
            cells = ["." if v == UNSET_CELL else str(v) for v in values]
            rows.append(colSeparator.join(cell.rjust(width) for cell in cells))
        return rowSeparator.join(rows)



    """ E.    INTERNALS """

    def _index(self, struct: Structure, major: int, minor: int) -> int:
        if not (0 <= major < self.NUMBERS):
            raise ValueError(f"Invalid major coordinate {major} (choose 0 - {self.NUMBERS - 1})")
        if not (0 <= minor < self.NUMBERS):
            raise ValueError(f"Invalid minor coordinate {minor} (choose 0 - {self.NUMBERS - 1})")
        return int(self._tables[struct][major, minor])

    def _fixedValue(self, index: int) -> int:
        return int(np.argmax(self._possible[index])) + 1
