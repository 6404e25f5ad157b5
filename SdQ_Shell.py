#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SudoQ_Shell

Line-oriented shell around the solver. Run with:
    python SdQ_Shell.py [puzzle.sud] [--progress] [--verbose]
or, once installed:
    sudoq-shell [puzzle.sud]

@author: alexanderpfaff
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from utilFunX import _tokenize, _strip_quotes
from SdQ_Board import SudokuBoard, InvalidSudokuError
from SdQ_FileParser import parseToBoard, SudokuParseError, SUDOKU_FILE_EXT
from SdQ_Saturators import NakedSingle, HiddenSingle
from SdQ_Solver import SudokuSolver


log = logging.getLogger(__name__)

PROMPT: str = "sudoku> "

HELP_TEXT: str = (
    "The sudoku shell is capable of solving every sudoku you load. You are not "
    "limited to standard 9 by 9 sudokus, but can load and solve sudokus of all "
    "sizes.\n\n"
    "Available commands:\n"
    f"input <path>  Loads a sudoku from a sudoku file (*{SUDOKU_FILE_EXT}) with the "
    "given absolute or relative path. Paths with spaces must be put in double "
    "quotes. The first line of the file gives the number of rows and columns of "
    "a box, separated by a space. Each following line holds one row of the "
    "sudoku as space separated list of its cells; empty cells are dots.\n"
    "first         Computes and prints the first found solution of the sudoku.\n"
    "all           Computes all solutions and prints them (one sudoku per line) "
    "in ascending order.\n"
    "saturate      Prints the sudoku with all strategies applied. Since no "
    "backtracking is done, the sudoku can, but need not be fully solved.\n"
    "print         Prints the currently loaded sudoku.\n"
    "help          Shows this help text.\n"
    "quit          Exits the program."
)



def default_solver(progress: bool = False) -> SudokuSolver:
    """ a solver with both strategies registered (naked single first) """
    solver = SudokuSolver(progress=progress)
    solver.addSaturator(NakedSingle())
    solver.addSaturator(HiddenSingle())
    return solver



class SudokuShell:
    """
    Interprets shell commands read from {stdin} and writes the answers to
    {stdout}; holds the currently loaded board between commands.
    """

    def __init__(self,
                 solver: Optional[SudokuSolver] = None,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None) -> None:
        self.solver: SudokuSolver = solver if solver is not None else default_solver()
        self.stdin: TextIO = stdin if stdin is not None else sys.stdin
        self.stdout: TextIO = stdout if stdout is not None else sys.stdout
        self.board: Optional[SudokuBoard] = None
        self._commands = {
            "input": self.inputSudoku,
            "print": self.printSudoku,
            "saturate": self.printSaturated,
            "first": self.printFirstSolution,
            "all": self.printAllSolutions,
            "help": self.printHelp,
            }

    def __repr__(self) -> str:
        return "<class 'SudokuShell'>"


    def run(self) -> None:
        """ reads and executes commands until EOF or quit """
        running = True
        while running:
            self._write(PROMPT, end="")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            running = self.processLine(line)


    def processLine(self, line: str) -> bool:
        """
        Executes one line of input.

        Returns
        -------
        bool
            False if the shell should terminate.
        """
        tokens = _tokenize(line)
        if not tokens:
            return True

        cmd, args = tokens[0].lower(), tokens[1:]
        if cmd == "quit":
            return False
        command = self._commands.get(cmd)
        if command is None:
            self._error(f'Unknown command "{cmd}"')
        else:
            command(args)
        return True



    """ COMMANDS """

    def inputSudoku(self, args: List[str]) -> None:
        if not args:
            self._error("No filename specified.")
            return

        path = Path(_strip_quotes(args[0]))
        self.board = None
        if not path.is_file():
            self._error(f'The file "{path.resolve()}" was not found.')
            return
        try:
            self.board = parseToBoard(path)
        except SudokuParseError as e:
            self._error(f"Unable to parse this file: {e} (at cell {e.offset})")
        except InvalidSudokuError:
            self._error("The file contains an invalid sudoku.")
        except OSError as e:
            self._error(f"Unable to read the file: {e}")


    def printSudoku(self, args: List[str]) -> None:
        if self._requireBoard():
            self._write(self.board.prettyPrint())


    def printSaturated(self, args: List[str]) -> None:
        if self._requireBoard():
            self._printOrUnsolvable(self.solver.saturate(self.board))


    def printFirstSolution(self, args: List[str]) -> None:
        if self._requireBoard():
            self._printOrUnsolvable(self.solver.findFirstSolution(self.board))


    def printAllSolutions(self, args: List[str]) -> None:
        if not self._requireBoard():
            return
        solutions = sorted(self.solver.findAllSolutions(self.board))
        if not solutions:
            self._error("The sudoku is not solvable.")
            return
        self._write("\n".join(str(solution) for solution in solutions))


    def printHelp(self, args: List[str]) -> None:
        self._write(HELP_TEXT)



    def _printOrUnsolvable(self, board: Optional[SudokuBoard]) -> None:
        if board is None:
            self._error("The sudoku is not solvable.")
        else:
            self._write(board.prettyPrint())

    def _requireBoard(self) -> bool:
        if self.board is None:
            self._error("No sudoku loaded. Please input a sudoku file first.")
            return False
        return True

    def _error(self, message: str) -> None:
        self._write(f"Error! {message}")

    def _write(self, text: str, end: str = "\n") -> None:
        print(text, end=end, file=self.stdout)



def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Interactive shell for solving generalized Sudokus.")
    parser.add_argument("sudoku", nargs="?", default=None,
                        help=f"Sudoku file (*{SUDOKU_FILE_EXT}) to load at start")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress counter while backtracking")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Verbose (DEBUG) logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    shell = SudokuShell(solver=default_solver(progress=args.progress))
    if args.sudoku:
        shell.inputSudoku([args.sudoku])
    shell.run()
    return 0



if __name__ == '__main__':
    sys.exit(main())
