#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SudoQ_Session

Data model of a Sudoku game in progress: the givens, the user's (unchecked)
entries, an undo history, and the solver-backed helpers "suggest" and
"solve". Any board view can attach itself as observer.

@author: alexanderpfaff
"""

from __future__ import annotations
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Tuple, Union

import numpy as np

from SdQ_Board import SudokuBoard, UNSET_CELL, IllegalOperationError, InvalidSudokuError
from SdQ_Coordinates import Structure
from SdQ_FileParser import parseToBoard
from SdQ_Saturators import NakedSingle, HiddenSingle, UnsolvableSudokuError
from SdQ_Solver import SudokuSolver


log = logging.getLogger(__name__)



class SessionChange(Enum):
    """
    Kinds of notifications sent to observers:
        CELL     -- payload (row, col, old value, new value)
        FINISHED -- payload: the new "all cells filled" state
    """
    CELL = "cell"
    FINISHED = "finished"


Observer = Callable[[SessionChange, Any], None]



class GameSession:
    """
    Holds the board as the user sees it: a (NUMBERS, NUMBERS) array of
    entries (UNSET_CELL for blanks) addressed by (row, col), which -- unlike
    SudokuBoard -- may hold contradicting entries until it is checked.
    Cells given by the initial board are constants and cannot be edited.
    """

    def __init__(self, board: SudokuBoard) -> None:
        self.__BOX_ROWS: int = board.BOX_ROWS
        self.__BOX_COLS: int = board.BOX_COLS
        self.__NUMBERS: int = board.NUMBERS

        self._entries: np.ndarray = board.grid_toArray().copy()
        self._isConstant: np.ndarray = self._entries != UNSET_CELL
        self._history: List[np.ndarray] = []
        self._observers: List[Observer] = []

        self.solver: SudokuSolver = SudokuSolver()
        self.solver.addSaturator(HiddenSingle())
        self.solver.addSaturator(NakedSingle())


    @classmethod
    def fromFile(cls, path: Union[str, Path]) -> GameSession:
        """ starts a session on the Sudoku file at {path}; see SdQ_FileParser.parseToBoard """
        return cls(parseToBoard(path))

    def __repr__(self) -> str:
        return "<class 'GameSession'>"


    @property
    def BOX_ROWS(self) -> int:
        return self.__BOX_ROWS

    @property
    def BOX_COLS(self) -> int:
        return self.__BOX_COLS

    @property
    def NUMBERS(self) -> int:
        return self.__NUMBERS



    """ 0.    OBSERVERS """

    def addObserver(self, callback: Observer) -> None:
        self._observers.append(callback)

    def removeObserver(self, callback: Observer) -> None:
        self._observers.remove(callback)

    def _notify(self, change: SessionChange, payload: Any) -> None:
        for callback in list(self._observers):
            callback(change, payload)



    """ A.    QUERY """

    def getCell(self, row: int, col: int) -> int:
        self._checkIndex(row)
        self._checkIndex(col)
        return int(self._entries[row, col])

    def isCellModifiable(self, row: int, col: int) -> bool:
        self._checkIndex(row)
        self._checkIndex(col)
        return not bool(self._isConstant[row, col])

    def isFilled(self) -> bool:
        return not bool((self._entries == UNSET_CELL).any())

    def isSolution(self) -> bool:
        """ all cells filled, and no entry contradicts another one """
        if not self.isFilled():
            return False
        try:
            return self._toBoard().isSolution()
        except InvalidSudokuError as e:
            log.debug("Entries do not form a solution: %s", e)
            return False

    def grid_toArray(self) -> np.ndarray:
        return self._entries.copy()



    """ B.    EDIT """

    def updateCell(self, row: int, col: int, value: int) -> None:
        """
        Enters {value} (UNSET_CELL to clear) as the user's entry at (row, col);
        the change can be undone.

        Raises
        ------
        ValueError
            Coordinates or value out of range, or value not an integer.
        IllegalOperationError
            The cell holds a given.
        """
        self._checkIndex(row)
        self._checkIndex(col)
        if not isinstance(value, (int, np.integer)):
            raise ValueError(f"Cell values must be integers; submitted: {type(value)}")
        if value != UNSET_CELL and not (1 <= value <= self.NUMBERS):
            raise ValueError(f'The value "{value}" is not allowed in the current board.')
        if self._isConstant[row, col]:
            raise IllegalOperationError("This cell holds a given and cannot be changed.")
        if self._entries[row, col] == value:
            return

        newEntries = self._entries.copy()
        newEntries[row, col] = value
        self._apply(newEntries)


    def undo(self) -> bool:
        """
        Reverts the last recorded change (an edit, a suggestion or a solve).

        Returns
        -------
        bool
            False if there was nothing to undo.
        """
        if not self._history:
            return False
        self._apply(self._history.pop(), record=False)
        return True


    def solve(self) -> None:
        """
        Fills all cells with the first solution of the current entries.

        Raises
        ------
        InvalidSudokuError
            The current entries contradict each other.
        UnsolvableSudokuError
            The current entries cannot be completed.
        """
        solution = self.solver.findFirstSolution(self._toBoard())
        if solution is None:
            raise UnsolvableSudokuError("The current sudoku is not solvable.")
        self._apply(solution.grid_toArray())


    def suggestValue(self) -> Tuple[int, int, int]:
        """
        Fills exactly one empty cell with its value in the first solution of
        the current entries.

        Returns
        -------
        Tuple[int, int, int]
            (row, col, value) of the filled cell.

        Raises
        ------
        IllegalOperationError
            All cells are already filled.
        InvalidSudokuError, UnsolvableSudokuError
            As for solve().
        """
        if self.isFilled():
            raise IllegalOperationError("Cannot suggest a value if all cells are set.")

        board = self._toBoard()
        solution = self.solver.findFirstSolution(board)
        if solution is None:
            raise UnsolvableSudokuError("The current sudoku is not solvable.")

        # the cell fixed last during the search was empty in the entries
        row, col = solution.getLastCellSet()
        value = solution.getCell(Structure.ROW, row, col)
        board.setCell(Structure.ROW, row, col, value)
        self._apply(board.grid_toArray())
        log.debug("Suggested %d at r%dc%d", value, row, col)
        return row, col, value



    """ C.    INTERNALS """

    def _toBoard(self) -> SudokuBoard:
        """ builds an intelligent board from the entries; raises InvalidSudokuError on conflicts """
        return SudokuBoard.from_grid(self._entries, self.BOX_ROWS, self.BOX_COLS)


    def _apply(self, newEntries: np.ndarray, record: bool = True) -> None:
        """
        aux-method
        Replaces the entries, records the previous state in the history and
        notifies the observers about every changed cell.
        """
        oldEntries = self._entries
        changed = np.argwhere(oldEntries != newEntries)
        if changed.size == 0:
            return

        wasFilled = self.isFilled()
        if record:
            self._history.append(oldEntries)
        self._entries = newEntries.copy()

        for row, col in changed:
            self._notify(SessionChange.CELL,
                         (int(row), int(col), int(oldEntries[row, col]), int(newEntries[row, col])))
        if wasFilled != self.isFilled():
            self._notify(SessionChange.FINISHED, self.isFilled())


    def _checkIndex(self, index: int) -> None:
        if not (0 <= index < self.NUMBERS):
            raise ValueError(f'The index "{index}" is out of range for the current board size.')
