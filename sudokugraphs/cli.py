"""Command line entry point: enumerate sudoku graphs or list binary sequences."""

from __future__ import annotations

import argparse

from sudokugraphs.binaryseq import format_sequence, get_sequences
from sudokugraphs.commons import NS, N, empty_sudoku, print_sudoku
from sudokugraphs.graph import GraphSet, empty_adjm
from sudokugraphs.sudokugen import find_solutions


def sudoku_graph_test(verbose: bool = True) -> int:
    """Build the graphs of the first sudoku found and report them.

    Returns the number of graphs that differ from one another.
    """
    if verbose:
        print(f"N = {N}\nNS = {NS}")

    solutions = find_solutions(empty_sudoku(), verbose)
    print(f"N SUDOKUS = {len(solutions)}\n")
    if not solutions:
        raise ValueError("no sudoku solution to build graphs from")

    base = solutions[0]
    graph_set = GraphSet(base)
    adjm = empty_adjm()

    print_sudoku(base)
    graph_set.print_graph(adjm)

    graph_set.search_graphs(adjm, 0, verbose)

    print(f"\n\nN GRAPHS = {len(graph_set.solutions)}\n")
    print("##########################################\n\nCOMPARE\n")

    uniques = graph_set.compare_equal_set(True)
    print(f"\n\nN UNIQUE GRAPHS!!!! = {uniques}\n")
    return uniques


def binseqs_demo(n: int, k: int) -> list[tuple[bool, ...]]:
    """Print every length-``n`` sequence with ``k`` ones, then their count."""
    sequences = get_sequences(n, k)
    for seq in sequences:
        print(format_sequence(seq))
    print(f"N = {len(sequences)}")
    return sequences


def main(argv: list[str] | None = None) -> int:
    """Run the graph enumeration, or list binary sequences with ``--binseqs``."""
    parser = argparse.ArgumentParser(
        prog="sudokugraphs",
        description="Enumerate degree-labelled graphs of a sudoku grid.",
    )
    parser.add_argument(
        "--binseqs",
        nargs=2,
        type=int,
        metavar=("N", "K"),
        help="list the sequences of N bits holding K ones",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="print less progress output"
    )
    args = parser.parse_args(argv)

    if args.binseqs is not None:
        n, k = args.binseqs
        try:
            binseqs_demo(n, k)
        except ValueError as exc:
            parser.error(str(exc))
        return 0

    sudoku_graph_test(not args.quiet)
    return 0