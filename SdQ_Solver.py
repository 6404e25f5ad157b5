#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SudoQ_Solver

Backtracking solver: applies the registered solution strategies up to a
global fix point and branches on the most constrained cell whenever the
strategies get stuck.

@author: alexanderpfaff
"""

from __future__ import annotations
import logging
from typing import List, Optional

from tqdm import tqdm

from SdQ_Board import SudokuBoard, InvalidSudokuError
from SdQ_Coordinates import Structure
from SdQ_Saturators import Saturator, UnsolvableSudokuError


log = logging.getLogger(__name__)



class SudokuSolver:
    """
    Solves Sudokus by backtracking; registered Saturator objects speed up the
    search by sorting out unsolvable boards early.

    All public methods work on clones: the board passed in is never changed.
    The results are repeatable, i.e. for a given board and a given order of
    registered strategies always the same solution(s), in the same order, are
    computed.

    Parameters
    ----------
    progress : bool, default=False
        If True, a tqdm counter reports the number of boards explored.
    """

    def __init__(self, progress: bool = False) -> None:
        self._saturators: List[Saturator] = []
        self._progress: bool = progress

    def __repr__(self) -> str:
        return f"<class 'SudokuSolver'> saturators: {self._saturators}"


    def addSaturator(self, saturator: Saturator) -> None:
        """ registers a solution strategy, used in all following solution attempts """
        self._saturators.append(saturator)


    def saturate(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """
        Applies all registered strategies to a clone of {board} until a global
        fix point is reached.

        Returns
        -------
        Optional[SudokuBoard]
            The saturated clone, or None if the board is not solvable.
        """
        result = board.clone()
        try:
            self._saturateDirect(result)
        except UnsolvableSudokuError:
            return None
        return result


    def findFirstSolution(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """ returns one solution of {board}, None if there is none """
        solutions = self._solve(board, requestAll=False)
        return solutions[0] if solutions else None


    def findAllSolutions(self, board: SudokuBoard) -> List[SudokuBoard]:
        """ returns all solutions of {board}; an empty list if there are none """
        return self._solve(board, requestAll=True)



    def _saturateDirect(self, board: SudokuBoard) -> None:
        """
        aux-method
        Changes {board} in place by applying all strategies repeatedly as long
        as at least one of them still modifies it; a later strategy may
        enable an earlier one again.
        """
        saturated = False
        while not saturated:
            saturated = True
            for saturator in self._saturators:
                if saturator.saturate(board):
                    saturated = False


    def _generateCandidates(self, board: SudokuBoard) -> List[SudokuBoard]:
        """
        aux-method
        Finds the (first) cell with the fewest possibilities and returns one
        clone of {board} per possible digit, in ascending order, with the cell
        set to that digit; clones that become invalid are dropped.
        """
        struct = Structure.ROW
        minRow, minCol = 0, 0
        minValues: Optional[List[int]] = None

        for major in range(board.NUMBERS):
            for minor in range(board.NUMBERS):
                current = board.getPossibilities(struct, major, minor)
                if current is not None and (minValues is None or len(current) < len(minValues)):
                    minRow, minCol, minValues = major, minor, current

        if minValues is None:
            return []

        log.debug("Branching on r%dc%d over %s", minRow, minCol, minValues)
        candidates = []
        for number in minValues:
            candidate = board.clone()
            try:
                candidate.setCell(struct, minRow, minCol, number)
            except InvalidSudokuError:
                continue
            candidates.append(candidate)
        return candidates


    def _solve(self, board: SudokuBoard, requestAll: bool) -> List[SudokuBoard]:
        """
        aux-method
        Depth-first search over an explicit stack of candidate boards.

        Returns
        -------
        List[SudokuBoard]
            One or, if requested, all solutions; empty for unsolvable boards.
        """
        solutions: List[SudokuBoard] = []
        stack: List[SudokuBoard] = [board.clone()]

        with tqdm(desc="Exploring boards", unit=" boards",
                  disable=not self._progress, leave=False) as bar:
            while stack:
                current = stack.pop()
                bar.update(1)
                try:
                    self._saturateDirect(current)
                except UnsolvableSudokuError:
                    continue

                if current.isSolution():
                    solutions.append(current)
                    log.debug("Solution #%d found", len(solutions))
                    if not requestAll:
                        break
                else:
                    # smallest digit on top of the stack
                    stack.extend(reversed(self._generateCandidates(current)))

        return solutions
