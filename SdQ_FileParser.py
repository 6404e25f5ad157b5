#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SudoQ_FileParser

Reads and writes the plain-text Sudoku format:

    2 3
    . 2 . . 5 .
    4 . . . . 1
    ...

first line: box rows and box columns; then one line per board row with the
cells separated by whitespace, a dot for every blank cell.

@author: alexanderpfaff
"""

from __future__ import annotations
import logging
import warnings
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from utilFunX import _parse_int
from SdQ_Board import SudokuBoard, UNSET_CELL
from SdQ_Coordinates import Structure


log = logging.getLogger(__name__)

SUDOKU_FILE_EXT: str = ".sud"
BLANK_TOKEN: str = "."



class SudokuParseError(ValueError):
    """
    The data does not describe a board in the textual format.

    Attributes
    ----------
    offset : int
        Flat cell offset (row * numbers + column) at which parsing failed;
        0 for errors in the first line.
    """

    def __init__(self, message: str, offset: int = 0) -> None:
        super().__init__(message)
        self.offset: int = offset



def parseToBoard(path: Union[str, Path]) -> SudokuBoard:
    """
    Parses the Sudoku file at {path} to a board.

    Raises
    ------
    OSError
        The file cannot be read.
    SudokuParseError
        The file contents cannot be parsed, or are not UTF-8 text.
    InvalidSudokuError
        The givens of the file contradict each other.
    """
    path = Path(path)
    log.info("Reading %s", path)
    try:
        with path.open(encoding="utf-8") as f:
            return parseLines(f)
    except UnicodeDecodeError as e:
        raise SudokuParseError("The file is not a UTF-8 text file.", 0) from e



def parseLines(lines: Iterable[str]) -> SudokuBoard:
    """ parses the lines of a Sudoku file (see module docstring) to a board """
    it: Iterator[str] = iter(lines)

    header = next(it, None)
    if header is None:
        raise SudokuParseError("The file is empty.", 0)
    board = _createBoard(header.split())

    for rowIndex in range(board.NUMBERS):
        _appendRow(board, rowIndex, next(it, None))

    surplus = [line for line in it if line.strip()]
    if surplus:
        warnings.warn(f"Ignoring {len(surplus)} line(s) after the last board row.", UserWarning)
    return board



def formatBoard(board: SudokuBoard) -> str:
    """ returns the board in the textual file format, parseable by parseLines() """
    return f"{board.BOX_ROWS} {board.BOX_COLS}\n{board.prettyPrint()}\n"



def writeBoard(board: SudokuBoard, path: Union[str, Path]) -> None:
    """ writes the board in the textual file format to {path} """
    Path(path).write_text(formatBoard(board), encoding="utf-8")



def _createBoard(dimensions: List[str]) -> SudokuBoard:
    """
    aux-method
    Creates a new board from the box dimensions of the first line.
    """
    if len(dimensions) >= 2:
        rows, cols = _parse_int(dimensions[0]), _parse_int(dimensions[1])
        if rows is not None and cols is not None and rows > 0 and cols > 0:
            return SudokuBoard(rows, cols)
    raise SudokuParseError("The first line contains invalid dimensions.", 0)



def _appendRow(board: SudokuBoard, rowIndex: int, line: Union[str, None]) -> None:
    """
    aux-method
    Parses one row of the file and enters its givens into the board.
    """
    offset = rowIndex * board.NUMBERS
    if line is None:
        raise SudokuParseError("Invalid amount of lines.", offset)

    tokens = line.split()
    if len(tokens) != board.NUMBERS:
        raise SudokuParseError("Invalid line length.", offset)

    for col, token in enumerate(tokens):
        value = _parseCellValue(token, board.NUMBERS, offset + col)
        board.setCell(Structure.ROW, rowIndex, col, value)



def _parseCellValue(token: str, numbers: int, offset: int) -> int:
    if token == BLANK_TOKEN:
        return UNSET_CELL
    value = _parse_int(token)
    if value is None or not (1 <= value <= numbers):
        raise SudokuParseError("Invalid board data.", offset)
    return value
