"""Backtracking enumeration of completed sudoku grids."""

from __future__ import annotations

from itertools import product

from sudokugraphs.commons import NS, N, Sudoku, copy_sudoku


def _cells():
    return product(range(N), repeat=2)


def is_possible(sudoku: Sudoku, x: int, y: int, k: int) -> bool:
    """Tell whether value ``k`` may be placed at cell (``x``, ``y``)."""
    if any(sudoku[i][y] == k or sudoku[x][i] == k for i in range(N)):
        return False
    x0 = (x // NS) * NS
    y0 = (y // NS) * NS
    return all(
        sudoku[x0 + i][y0 + j] != k for i, j in product(range(NS), repeat=2)
    )


def possible_values(sudoku: Sudoku, x: int, y: int) -> list[int]:
    """Return, in increasing order, the values allowed at cell (``x``, ``y``)."""
    return [k for k in range(1, N + 1) if is_possible(sudoku, x, y, k)]


def _validate(sudoku: Sudoku) -> None:
    if len(sudoku) != N or any(len(row) != N for row in sudoku):
        raise ValueError(f"sudoku must be {N}x{N}")
    if any(not 0 <= value <= N for row in sudoku for value in row):
        raise ValueError(f"cell values must lie in 0..{N}")


def _solve(grid: Sudoku, found: list[Sudoku]) -> bool:
    # Fill every cell that has a single candidate before branching.
    for i, j in _cells():
        if grid[i][j] == 0:
            candidates = possible_values(grid, i, j)
            if len(candidates) == 1:
                grid[i][j] = candidates[0]

    for i, j in _cells():
        if grid[i][j] != 0:
            continue
        candidates = possible_values(grid, i, j)
        if not candidates:
            return False
        if len(candidates) == 1:
            grid[i][j] = candidates[0]
            continue
        outcomes = []
        for value in candidates:
            branch = copy_sudoku(grid)
            branch[i][j] = value
            outcomes.append(_solve(branch, found))
        return any(outcomes)

    found.append(copy_sudoku(grid))
    return True


def find_solutions(sudoku: Sudoku, verbose: bool = False) -> list[Sudoku]:
    """Return every completion of ``sudoku`` reached by the search.

    Zeros mark empty cells. The input grid is left untouched. ``verbose``
    is accepted for symmetry with the graph search; storing solutions
    cannot fail here, so there is nothing to report.
    """
    _validate(sudoku)
    found: list[Sudoku] = []
    _solve(copy_sudoku(sudoku), found)
    return found