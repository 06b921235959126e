# sudokugraphs

Explore the link between small sudoku grids and labelled graphs.

Each cell of a solved grid becomes a node labelled with the cell's value.
The package looks for every simple graph in which each node has exactly as
many edges as its label and no edge joins two nodes that carry the same
label. It then groups the graphs it found: two graphs fall together when,
for every label, the nodes with that label have the same sorted lists of
neighbour labels.

The grid size is the module constant `sudokugraphs.commons.N`, which is 3.
Boxes have side `NS`, the integer square root of `N` (1 for a 3 x 3 grid),
and graphs have `GRAPH_ORDER = N * N` nodes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
sudokugraphs
```

Solves the empty grid, takes the first solution found, prints it and an
empty adjacency matrix, searches for every matching graph (printing each
one as it is found), and reports how many graphs there are. It then prints
every graph that is not equivalent to an earlier one, with its hash code,
and the count of such graphs.

Options:

- `-q`, `--quiet`: skip the progress output of the sudoku and graph
  searches. The summary lines and the list of distinct graphs are still
  printed.
- `--binseqs N K`: instead of the graph search, print every sequence of `N`
  bits holding `K` ones, one per line as `0`/`1` digits, followed by
  `N = <count>`. Asking for more ones than positions, or for negative
  values, is reported as a usage error.

## Library use

```python
from sudokugraphs.commons import empty_sudoku, print_sudoku
from sudokugraphs.sudokugen import find_solutions
from sudokugraphs.graph import GraphSet, empty_adjm
from sudokugraphs.binaryseq import get_sequences, format_sequence

solutions = find_solutions(empty_sudoku(), verbose=False)
grid = solutions[0]
print_sudoku(grid)

graph_set = GraphSet(grid, capacity=10000)
graph_set.search_graphs(empty_adjm(), start=0, verbose=False)
print(len(graph_set.solutions))          # graphs found
print(graph_set.compare_set())           # graphs that differ edge by edge
print(graph_set.compare_equal_set(verbose=False))  # distinct classes

for seq in get_sequences(4, 2):
    print(format_sequence(seq))
```

`GraphSet` stores at most `capacity` graphs (10000 by default); the search
stops once `is_full` is true. `search_graphs` with no arguments starts from
an empty matrix at node 0.

Other helpers:

- `sudokugraphs.commons`: `copy_sudoku`, `format_sudoku`, `bubble_sort`
  (returns the sorted values and the original index of each)
- `sudokugraphs.sudokugen`: `is_possible`, `possible_values`;
  `find_solutions` raises `ValueError` for a grid of the wrong shape or with
  values outside `0..N`
- `sudokugraphs.binaryseq`: `n_choose_k`, `generate_sequences` (a generator,
  ones tried before zeros at each position)
- `sudokugraphs.bitfield`: `set_bit`, `clear_bit`, `is_bit_set` on 64-bit
  integers; indexes or fields outside 64 bits raise `ValueError`
- `sudokugraphs.graph`: `set_edge`, `are_equal_adjm`, `are_equal_edges`,
  and the `GraphSet` methods `apply_binary_seq`, `format_graph`,
  `print_graph`, `are_equal_graph`, `hash_code` and `take_mat_at`
- `sudokugraphs.cli`: `sudoku_graph_test`, `binseqs_demo`, `main`

## What it does not do

- The grid size is fixed by the constant `N`; there is no option to choose
  another size.
- Results are only printed or returned; nothing is saved to disk.
- The grouping of graphs compares neighbour-label lists per label. It is a
  heuristic, not a full graph isomorphism test.