# tests/grids.py
# Shared test grids.

# valid classical grid, row-wise
GRID_9 = (7, 2, 4, 9, 1, 3, 5, 6, 8,
          5, 1, 9, 6, 8, 7, 3, 4, 2,
          3, 8, 6, 2, 5, 4, 1, 9, 7,
          2, 3, 1, 4, 7, 9, 6, 8, 5,
          4, 6, 7, 5, 3, 8, 2, 1, 9,
          8, 9, 5, 1, 6, 2, 7, 3, 4,
          1, 7, 8, 3, 4, 5, 9, 2, 6,
          9, 4, 3, 7, 2, 6, 8, 5, 1,
          6, 5, 2, 8, 9, 1, 4, 7, 3)

# unique solution, solvable by singles alone
PUZZLE_9 = ("530070000"
            "600195000"
            "098000060"
            "800060003"
            "400803001"
            "700020006"
            "060000280"
            "000419005"
            "000080079")

SOLUTION_9 = ("534678912"
              "672195348"
              "198342567"
              "859761423"
              "426853791"
              "713924856"
              "961537284"
              "287419635"
              "345286179")


def digits(s: str):
    return [int(c) for c in s]


def blanked(grid, *cells):
    """ copy of a flat grid with the given (row, col) cells set to 0 """
    out = list(grid)
    for r, c in cells:
        out[r * 9 + c] = 0
    return out


# GRID_9 with a swappable 1/5 rectangle (r0c4, r0c6, r2c4, r2c6) blanked:
# exactly two solutions
TWO_SOLUTIONS_9 = blanked(GRID_9, (0, 4), (0, 6), (2, 4), (2, 6))
