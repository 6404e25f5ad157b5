#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Oct 10 18:42:05 2026

@author: alexanderpfaff
"""

import re
from math import log10
from typing import List, Optional, Sequence, Union

import numpy as np


# Allows nested (row-wise) or flat input for convenience, e.g. [[1, 2], [.., ..]]
SequenceLike = Union[Sequence[int], Sequence[Sequence[int]], np.ndarray]


# splits on whitespace unless the whitespace sits inside a pair of double quotes
_TOKEN_SPLIT = re.compile(r'\s+(?=(?:[^"]*"[^"]*")*[^"]*$)')



def _digit_width(numbers: int) -> int:
    """
    Number of characters needed to print the largest digit of a board with
    {numbers} symbols; used to right-justify cells so that columns align.
    """
    return int(log10(numbers)) + 1



def _parse_int(token: str) -> Optional[int]:
    """
    Tries to parse a token as integer.

    Returns
    -------
    Optional[int]
        The parsed value, None if the token is not an integer literal.
    """
    try:
        return int(token)
    except ValueError:
        return None



def _tokenize(line: str) -> List[str]:
    """
    Splits a line of shell input into tokens. Whitespace inside double quotes
    does not split, so that file names containing blanks can be quoted:

        >>> _tokenize('input "my puzzles/a.sud"')
        ['input', '"my puzzles/a.sud"']
    """
    line = line.strip()
    if not line:
        return []
    return _TOKEN_SPLIT.split(line)



def _strip_quotes(token: str) -> str:
    """Removes one leading and one trailing double quote, if present."""
    return re.sub(r'^"|"$', "", token)



def _grid_toFlat(grid: SequenceLike, numbers: int) -> np.ndarray:
    """
    aux-method
    Converts a nested or flat grid into a flat integer array of size
    numbers**2; None entries are mapped to 0.

    Raises
    ------
    ValueError
        If the grid does not contain exactly numbers**2 cells.
    """
    if isinstance(grid, np.ndarray):
        arr = grid.flatten()
    else:
        flat = []
        for item in grid:
            if isinstance(item, (list, tuple, np.ndarray)):
                flat.extend(item)
            else:
                flat.append(item)
        arr = np.array([0 if v is None else v for v in flat])

    if arr.shape[0] != numbers**2:
        raise ValueError(f"The grid submitted does not contain the required number of cells: {numbers**2}")
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Invalid dtype: {arr.dtype}; expected integer cell values.")
    return arr.astype(np.int64)
