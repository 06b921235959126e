"""Shared constants and helpers for sudoku grids."""

from __future__ import annotations

import math

N = 3
"""Side length of a sudoku grid."""

NS = math.isqrt(N)
"""Side length of a sudoku box (integer square root of ``N``)."""

GRAPH_ORDER = N * N
"""Number of nodes in a graph built from a grid: one per cell."""

N_EDGES = math.ceil((N * N * (N + 1)) / 4.0)
"""Number of edges a complete labelled graph holds."""

Sudoku = list[list[int]]


def empty_sudoku() -> Sudoku:
    """Return an ``N`` x ``N`` grid filled with zeros."""
    return [[0] * N for _ in range(N)]


def copy_sudoku(grid: Sudoku) -> Sudoku:
    """Return an independent copy of ``grid``."""
    return [list(row) for row in grid]


def _separator_line() -> str:
    boxes = N // NS
    segments = []
    for k in range(boxes):
        segments.append("--" * NS)
        if k != boxes - 1:
            segments.append("+")
            if NS % 2 != 0:
                segments.append("-")
    return "".join(segments) + "\n"


def format_sudoku(grid: Sudoku) -> str:
    """Render ``grid`` as text with box separators, ending in a blank line."""
    out = []
    for i, row in enumerate(grid):
        cells = []
        for j, value in enumerate(row):
            cells.append(f"{value} ")
            if (j + 1) % NS == 0 and j != N - 1:
                cells.append("| ")
        out.append("".join(cells) + "\n")
        if (i + 1) % NS == 0 and i != N - 1:
            out.append(_separator_line())
    out.append("\n")
    return "".join(out)


def print_sudoku(grid: Sudoku) -> None:
    """Print ``grid`` in the layout of :func:`format_sudoku`."""
    print(format_sudoku(grid), end="")


def bubble_sort(values) -> tuple[list[int], list[int]]:
    """Sort ``values`` stably.

    Returns the sorted values and, for each position, the index the value
    held in the input, exactly as a bubble sort that swaps an index array
    alongside the values would produce.
    """
    items = list(values)
    order = sorted(range(len(items)), key=items.__getitem__)
    return [items[i] for i in order], order