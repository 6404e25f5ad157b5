#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SudoQ_Coordinates

The three addressing schemes of a (boxRows x boxCols) Sudoku: rows, columns
and boxes, each mapped onto one flat running index.

@author: alexanderpfaff

"""

from __future__ import annotations
from enum import Enum
from functools import lru_cache
from typing import Dict, Tuple

import numpy as np



class Structure(Enum):
    """
    Coordinate type of a cell address (struct, major, minor):

        ROW    -- major: row number, top-down (0 .. numbers-1);
                  minor: column number
        COLUMN -- major: column number, left to right (0 .. numbers-1);
                  minor: row number
        BOX    -- major: box number, left to right, top-down (0 .. numbers-1);
                  minor: position inside the box, left to right, top-down

    For a classical 9 X 9 Sudoku (boxRows = boxCols = 3):

                *************************************
                *  0 |  1 |  2 *  3 |  4 |  5 * ...
                *--------------*--------------*
                *  9 | 10 | 11 * 12 | 13 | 14 * ...
                *--------------*--------------*
                * 18 | 19 | 20 * 21 | 22 | 23 * ...
                *************************************

        flat index 21  <=>  (ROW, 2, 3)  <=>  (COLUMN, 3, 2)  <=>  (BOX, 1, 6)
    """
    ROW = 0
    COLUMN = 1
    BOX = 2



def _check_range(value: int, numbers: int, name: str) -> None:
    if not (0 <= value < numbers):
        raise ValueError(f"Invalid {name} {value} (choose 0 - {numbers - 1})")



def toFlatIndex(struct: Structure, major: int, minor: int,
                boxRows: int, boxCols: int) -> int:
    """
    Converts the address (struct, major, minor) to the flat running index
    (row-major, 0 .. numbers**2 - 1).

    Raises
    ------
    ValueError
        If major or minor lie outside 0 .. numbers-1.
    """
    numbers = boxRows * boxCols
    _check_range(major, numbers, "major coordinate")
    _check_range(minor, numbers, "minor coordinate")

    if struct is Structure.ROW:
        x, y = minor, major
    elif struct is Structure.COLUMN:
        x, y = major, minor
    elif struct is Structure.BOX:
        x = (major % boxRows) * boxCols + minor % boxCols
        y = (major // boxRows) * boxRows + minor // boxCols
    else:
        raise ValueError(f"Unexpected structure: {struct}")
    return y * numbers + x



def structureNumber(index: int, target: Structure,
                    boxRows: int, boxCols: int) -> int:
    """ returns the major coordinate of the cell {index} in the {target} system """
    numbers = boxRows * boxCols
    _check_range(index, numbers * numbers, "flat index")
    x = index % numbers
    y = index // numbers

    if target is Structure.ROW:
        return y
    if target is Structure.COLUMN:
        return x
    if target is Structure.BOX:
        return (y // boxRows) * boxRows + x // boxCols
    raise ValueError(f"Unexpected structure: {target}")



def toCoordinates(index: int, target: Structure,
                  boxRows: int, boxCols: int) -> Tuple[int, int]:
    """ inverse of toFlatIndex: returns (major, minor) of the cell {index} """
    numbers = boxRows * boxCols
    major = structureNumber(index, target, boxRows, boxCols)
    x = index % numbers
    y = index // numbers

    if target is Structure.ROW:
        return major, x
    if target is Structure.COLUMN:
        return major, y
    return major, (y % boxRows) * boxCols + x % boxCols



@lru_cache(maxsize=None)
def indexTable(boxRows: int, boxCols: int) -> Dict[Structure, np.ndarray]:
    """
    Lookup tables for all three coordinate systems:
        indexTable(r, c)[struct][major, minor] == toFlatIndex(struct, major, minor, r, c)

    The arrays are shared between all boards of the same dimensions and
    therefore read-only.
    """
    numbers = boxRows * boxCols
    tables: Dict[Structure, np.ndarray] = {}
    for struct in Structure:
        table = np.array([[toFlatIndex(struct, major, minor, boxRows, boxCols)
                           for minor in range(numbers)]
                          for major in range(numbers)],
                         dtype=np.intp).reshape(numbers, numbers)
        table.flags.writeable = False
        tables[struct] = table
    return tables



@lru_cache(maxsize=None)
def peerTable(boxRows: int, boxCols: int) -> Tuple[np.ndarray, ...]:
    """
    For each flat index the (sorted) flat indices of all other cells sharing
    a row, a column or a box with it.
    """
    numbers = boxRows * boxCols
    tables = indexTable(boxRows, boxCols)
    peers = []
    for index in range(numbers * numbers):
        shared = np.unique(np.concatenate([
            tables[struct][structureNumber(index, struct, boxRows, boxCols)]
            for struct in Structure
            ]))
        shared = shared[shared != index]
        shared.flags.writeable = False
        peers.append(shared)
    return tuple(peers)
