import pytest

from sudokugraphs.commons import GRAPH_ORDER
from sudokugraphs.graph import (
    GraphSet,
    are_equal_adjm,
    are_equal_edges,
    empty_adjm,
    set_edge,
)

LATIN = [[1, 2, 3], [2, 3, 1], [3, 1, 2]]


@pytest.fixture
def searched():
    gs = GraphSet(LATIN)
    gs.search_graphs(empty_adjm(), 0, False)
    return gs


def test_labels_follow_cells():
    gs = GraphSet(LATIN)
    assert gs.labels == [1, 2, 3, 2, 3, 1, 3, 1, 2]


def test_k_bits_vector():
    gs = GraphSet(LATIN)
    assert len(gs.k_bits_vct) == GRAPH_ORDER - 1
    assert gs.k_bits_vct[-1] == 1


def test_init_rejects_bad_shape():
    with pytest.raises(ValueError):
        GraphSet([[1, 2], [2, 1]])


def test_init_rejects_negative_capacity():
    with pytest.raises(ValueError):
        GraphSet(LATIN, -1)


def test_init_copies_sudoku():
    grid = [list(row) for row in LATIN]
    gs = GraphSet(grid)
    grid[0][0] = 9
    assert gs.sudoku[0][0] == 1


def test_set_edge_is_symmetric():
    graph = empty_adjm()
    set_edge(graph, 2, 5, True)
    assert graph[2][5] and graph[5][2]
    set_edge(graph, 5, 2, False)
    assert not graph[2][5] and not graph[5][2]


def test_are_equal_adjm():
    a = empty_adjm()
    b = empty_adjm()
    assert are_equal_adjm(a, b)
    set_edge(a, 0, 1, True)
    assert not are_equal_adjm(a, b)
    set_edge(b, 1, 0, True)
    assert are_equal_adjm(a, b)


def test_apply_binary_seq_sets_first_target():
    gs = GraphSet(LATIN)
    graph = empty_adjm()
    gs.apply_binary_seq(graph, (True, False, False, False, False, False), 0)
    assert graph[0][1] and graph[1][0]
    assert sum(graph[0]) == 1


def test_apply_binary_seq_skips_equal_labels():
    gs = GraphSet(LATIN)
    graph = empty_adjm()
    gs.apply_binary_seq(graph, (True,) * gs.k_bits_vct[0], 0)
    for j in range(GRAPH_ORDER):
        if gs.labels[j] == gs.labels[0]:
            assert not graph[0][j]
    assert sum(graph[0]) == gs.k_bits_vct[0]


def test_apply_binary_seq_wrong_length():
    gs = GraphSet(LATIN)
    with pytest.raises(ValueError):
        gs.apply_binary_seq(empty_adjm(), (True,), 0)


def test_search_finds_valid_graphs(searched):
    assert searched.solutions
    assert len(searched.solutions) <= searched.capacity
    for graph in searched.solutions:
        for i in range(GRAPH_ORDER):
            assert not graph[i][i]
            assert sum(graph[i]) == searched.labels[i]
            for j in range(GRAPH_ORDER):
                assert graph[i][j] == graph[j][i]
                if searched.labels[i] == searched.labels[j]:
                    assert not graph[i][j]


def test_search_respects_capacity_one():
    gs = GraphSet(LATIN, 1)
    gs.search_graphs(None, 0, False)
    assert len(gs.solutions) == 1
    assert gs.is_full


def test_search_respects_capacity_zero():
    gs = GraphSet(LATIN, 0)
    gs.search_graphs(None, 0, False)
    assert gs.solutions == []


def test_search_verbose_prints_each_graph(capsys):
    gs = GraphSet(LATIN, 2)
    gs.search_graphs(None, 0, True)
    out = capsys.readouterr().out
    assert out.count("[VERBOSE] GRAPH") == len(gs.solutions)


def test_compare_set_ignores_duplicates(searched):
    before = searched.compare_set()
    assert before <= len(searched.solutions)
    searched.solutions.append([list(row) for row in searched.solutions[0]])
    assert searched.compare_set() == before


def test_compare_equal_set_bounds(searched):
    uniques = searched.compare_equal_set(False)
    assert 1 <= uniques <= searched.compare_set()


def test_compare_equal_set_verbose_output(searched, capsys):
    uniques = searched.compare_equal_set(True)
    out = capsys.readouterr().out
    assert out.count("hashCode = ") == uniques
    assert f"Unique {uniques}, hashCode = " in out


def test_are_equal_graph_reflexive_and_symmetric(searched):
    last = len(searched.solutions) - 1
    assert searched.are_equal_graph(0, 0)
    assert searched.are_equal_graph(0, last) == searched.are_equal_graph(last, 0)


def test_take_mat_at_empty_graph():
    gs = GraphSet(LATIN)
    assert gs.take_mat_at(2, empty_adjm()) == [(), (), ()]


def test_take_mat_at_one_edge():
    gs = GraphSet(LATIN)
    graph = empty_adjm()
    set_edge(graph, 0, 1, True)
    assert gs.take_mat_at(1, graph) == [(2,), (), ()]
    assert gs.take_mat_at(2, graph) == [(1,), (), ()]


def test_take_mat_at_too_many_nodes():
    gs = GraphSet([[1, 1, 1], [1, 2, 3], [2, 3, 1]])
    with pytest.raises(ValueError):
        gs.take_mat_at(1, empty_adjm())


def test_are_equal_edges():
    m1 = [(1, 2), (3,), ()]
    assert are_equal_edges(m1, [(), (1, 2), (3,)])
    assert not are_equal_edges(m1, [(1, 3), (3,), ()])


def test_hash_code_of_empty_graph():
    gs = GraphSet(LATIN)
    gs.solutions.append(empty_adjm())
    assert gs.hash_code(0) == 18


def test_hash_code_equal_for_identical_graphs(searched):
    searched.solutions.append([list(row) for row in searched.solutions[0]])
    assert searched.hash_code(0) == searched.hash_code(len(searched.solutions) - 1)


def test_format_graph_header():
    gs = GraphSet(LATIN)
    lines = gs.format_graph(empty_adjm()).split("\n")
    assert lines[0] == "         1,2,3,2,3,1,3,1,2,"
    assert lines[1] == "         1 2 3 4 5 6 7 8 9 "
    assert lines[2].startswith("(1), 1 : ")
    assert len(lines) == 2 + GRAPH_ORDER + 2


def test_print_graph_matches_format(capsys):
    gs = GraphSet(LATIN)
    graph = empty_adjm()
    set_edge(graph, 0, 2, True)
    gs.print_graph(graph)
    assert capsys.readouterr().out == gs.format_graph(graph)