"""Labelled graphs whose node degrees equal the values of a sudoku grid.

Every cell of a completed grid becomes a node labelled with the cell's
value. The search enumerates simple graphs in which each node has exactly
as many edges as its label and no edge joins two nodes of equal label.
"""

from __future__ import annotations

from collections.abc import Sequence

from sudokugraphs.binaryseq import generate_sequences
from sudokugraphs.commons import GRAPH_ORDER, N, Sudoku, copy_sudoku

Adjacency = list[list[bool]]

_HASH_MASK = 0xFFFFFFFF


def empty_adjm() -> Adjacency:
    """Return a ``GRAPH_ORDER`` x ``GRAPH_ORDER`` matrix with no edges."""
    return [[False] * GRAPH_ORDER for _ in range(GRAPH_ORDER)]


def set_edge(graph: Adjacency, i: int, j: int, x: bool) -> None:
    """Set or clear the edge between nodes ``i`` and ``j`` in both directions."""
    graph[i][j] = bool(x)
    graph[j][i] = bool(x)


def _normalise(graph: Adjacency) -> list[list[bool]]:
    return [[bool(cell) for cell in row] for row in graph]


def are_equal_adjm(a1: Adjacency, a2: Adjacency) -> bool:
    """Tell whether two adjacency matrices hold exactly the same edges."""
    return _normalise(a1) == _normalise(a2)


def are_equal_edges(m1: Sequence[Sequence[int]], m2: Sequence[Sequence[int]]) -> bool:
    """Tell whether every row of ``m1`` occurs in ``m2`` and vice versa."""
    rows1 = {tuple(row) for row in m1}
    rows2 = {tuple(row) for row in m2}
    return rows1 == rows2


def _degrees(graph: Adjacency) -> list[int]:
    return [sum(1 for cell in row if cell) for row in graph]


class GraphSet:
    """The graphs found for one sudoku grid, with the labels they are built on."""

    def __init__(self, sudoku: Sudoku, capacity: int = 10000) -> None:
        if len(sudoku) != N or any(len(row) != N for row in sudoku):
            raise ValueError(f"sudoku must be {N}x{N}")
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.sudoku = copy_sudoku(sudoku)
        self.capacity = capacity
        self.solutions: list[Adjacency] = []
        self.labels = [value for row in self.sudoku for value in row]
        self.k_bits_vct = [
            sum(1 for other in self.labels[c + 1:] if other != label)
            for c, label in enumerate(self.labels[:-1])
        ]

    @property
    def is_full(self) -> bool:
        """Tell whether the set has reached its capacity."""
        return len(self.solutions) >= self.capacity

    def search_graphs(
        self, graph: Adjacency | None = None, start: int = 0, verbose: bool = False
    ) -> None:
        """Extend ``graph`` row by row from ``start``, storing every complete graph."""
        if graph is None:
            graph = empty_adjm()
        if self.is_full:
            return

        degrees = _degrees(graph)
        if any(degree > label for degree, label in zip(degrees, self.labels)):
            return

        if degrees == self.labels:
            if verbose:
                count = len(self.solutions)
                if N == 3 or (N > 3 and count % 1000 == 0):
                    print(f"[VERBOSE] GRAPH {count}")
                if N == 3:
                    self.print_graph(graph)
            self.solutions.append(_normalise(graph))
            if self.is_full:
                return

        if start == GRAPH_ORDER - 1:
            return

        while True:
            left_edges = sum(1 for cell in graph[start][:start] if cell)
            needed = max(self.labels[start] - left_edges, 0)
            if needed:
                break
            start += 1
            if start == GRAPH_ORDER - 1:
                return

        k_bits = self.k_bits_vct[start]
        needed = min(needed, k_bits)

        for seq in generate_sequences(k_bits, needed):
            branch = _normalise(graph)
            self.apply_binary_seq(branch, seq, start)
            self.search_graphs(branch, start + 1, verbose)

    def apply_binary_seq(self, graph: Adjacency, bin_seq: Sequence[bool], idx: int) -> None:
        """Write ``bin_seq`` onto the edges from ``idx`` to later nodes of other labels."""
        targets = [
            j for j in range(idx + 1, GRAPH_ORDER) if self.labels[idx] != self.labels[j]
        ]
        if len(bin_seq) != len(targets):
            raise ValueError(
                f"sequence of length {len(bin_seq)} does not fit {len(targets)} edges"
            )
        for j, bit in zip(targets, bin_seq):
            set_edge(graph, idx, j, bit)

    def format_graph(self, graph: Adjacency) -> str:
        """Render ``graph`` with a header of labels and node numbers."""
        lines = [
            "         " + "".join(f"{label}," for label in self.labels),
            "         " + "".join(f"{(i + 1) % 10} " for i in range(GRAPH_ORDER)),
        ]
        for i, row in enumerate(graph):
            cells = []
            for j, cell in enumerate(row):
                if cell or i == j or self.labels[i] == self.labels[j]:
                    cells.append(f"{int(bool(cell))} ")
                else:
                    cells.append("  ")
            lines.append(f"({self.labels[i]}), {(i + 1) % 10} : " + "".join(cells))
        return "\n".join(lines) + "\n\n"

    def print_graph(self, graph: Adjacency) -> None:
        """Print ``graph`` in the layout of :meth:`format_graph`."""
        print(self.format_graph(graph), end="")

    def compare_set(self) -> int:
        """Count the stored graphs that differ from every earlier one."""
        seen = set()
        for graph in self.solutions:
            seen.add(tuple(tuple(row) for row in _normalise(graph)))
        return len(seen)

    def hash_code(self, idx: int) -> int:
        """Return a label-based fingerprint of stored graph ``idx``."""
        graph = self.solutions[idx]
        code = 0
        for i, row in enumerate(graph):
            edge_mult = 1
            for j, cell in enumerate(row):
                if cell:
                    edge_mult = (edge_mult * self.labels[j]) & _HASH_MASK
            code = (code + self.labels[i] * edge_mult) & _HASH_MASK
        return code

    def compare_equal_set(self, verbose: bool = False) -> int:
        """Count the stored graphs not equivalent to any earlier one.

        With ``verbose`` each representative is printed with its hash code.
        """
        uniques = 0
        for i, graph in enumerate(self.solutions):
            if any(self.are_equal_graph(i, j) for j in range(i)):
                continue
            uniques += 1
            if verbose:
                print(f"Unique {uniques}, hashCode = {self.hash_code(i)}")
                self.print_graph(graph)
        return uniques

    def take_mat_at(self, label: int, graph: Adjacency) -> list[tuple[int, ...]]:
        """Return, for each node labelled ``label``, its neighbours' labels sorted.

        Only the first ``label`` neighbours of a node are taken. The result
        holds ``N`` rows; rows beyond the nodes found are empty.
        """
        rows: list[tuple[int, ...]] = []
        for i, node_label in enumerate(self.labels):
            if node_label != label:
                continue
            if len(rows) == N:
                raise ValueError(f"more than {N} nodes carry label {label}")
            neighbours = [self.labels[j] for j, cell in enumerate(graph[i]) if cell]
            rows.append(tuple(sorted(neighbours[:label])))
        rows.extend(() for _ in range(N - len(rows)))
        return rows

    def are_equal_graph(self, idx1: int, idx2: int) -> bool:
        """Tell whether stored graphs ``idx1`` and ``idx2`` match label by label."""
        g1 = self.solutions[idx1]
        g2 = self.solutions[idx2]
        return all(
            are_equal_edges(self.take_mat_at(label, g1), self.take_mat_at(label, g2))
            for label in range(1, N + 1)
        )