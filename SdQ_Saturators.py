#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SudoQ_Saturators

Solution strategies which bring a board a bit nearer towards its solution by
fixing cells that are forced by the current possibilities.

@author: alexanderpfaff
"""

from abc import ABC, abstractmethod

import numpy as np

from SdQ_Board import SudokuBoard, InvalidSudokuError, IllegalOperationError
from SdQ_Coordinates import Structure



class UnsolvableSudokuError(Exception):
    """ a solution strategy ran into a contradiction: the board has no solution """



class Saturator(ABC):
    """
    Common interface of all solution strategies.

    If a solvable board is passed to saturate(), the board is still
    solvable afterwards, since a strategy only performs deductions implied by
    the current possibilities.
    """

    @abstractmethod
    def saturate(self, board: SudokuBoard) -> bool:
        """
        Applies the strategy to {board}, which is changed in place.

        Returns
        -------
        bool
            True if the board was changed.

        Raises
        ------
        UnsolvableSudokuError
            The board turned out to be unsolvable.
        """

    def __repr__(self) -> str:
        return f"<class '{type(self).__name__}'>"



class NakedSingle(Saturator):
    """ fixes every cell that has exactly one possible digit left """

    def saturate(self, board: SudokuBoard) -> bool:
        modified = False
        struct = Structure.ROW

        for major in range(board.NUMBERS):
            for minor in range(board.NUMBERS):
                possibilities = board.getPossibilities(struct, major, minor)
                if possibilities is not None and len(possibilities) == 1:
                    try:
                        board.setCell(struct, major, minor, possibilities[0])
                    except (InvalidSudokuError, IllegalOperationError) as e:
                        raise UnsolvableSudokuError(str(e)) from e
                    modified = True

        return modified



class HiddenSingle(Saturator):
    """
    Traverses every row, column and box and fixes each digit that has only one
    possible cell left within the structure.
    """

    def saturate(self, board: SudokuBoard) -> bool:
        modified = False
        for struct in Structure:
            for major in range(board.NUMBERS):
                if self._saturateStructure(board, struct, major):
                    modified = True
        return modified


    def _saturateStructure(self, board: SudokuBoard, struct: Structure, major: int) -> bool:
        modified = False
        amounts = self._computeAmounts(board, struct, major)

        for minor in range(board.NUMBERS):
            modifiedCell = False
            possibilities = board.getPossibilities(struct, major, minor)
            if possibilities is None:
                continue

            for number in possibilities:
                if amounts[number - 1] != 1:
                    continue
                if modifiedCell:
                    # two digits can only go into this very cell
                    raise UnsolvableSudokuError(
                        f"Two digits are confined to one cell in {struct.name} {major}")
                try:
                    board.setCell(struct, major, minor, number)
                except (InvalidSudokuError, IllegalOperationError) as e:
                    raise UnsolvableSudokuError(str(e)) from e
                modifiedCell = True
                modified = True

        return modified


    @staticmethod
    def _computeAmounts(board: SudokuBoard, struct: Structure, major: int) -> np.ndarray:
        """
        For each digit (digit 1 at position 0) the number of cells of the
        structure it can still be placed in; fixed cells are not counted.
        """
        amounts = np.zeros(board.NUMBERS, dtype=int)
        for minor in range(board.NUMBERS):
            possibilities = board.getPossibilities(struct, major, minor)
            if possibilities is not None:
                amounts[np.asarray(possibilities) - 1] += 1
        return amounts
