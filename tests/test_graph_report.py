import io

from adjacency_list_graph import AdjacencyListGraph
from adjacency_matrix_graph import AdjacencyMatrixGraph
from graph_builder import fill_graph
from graph_input import parse_rows
from graph_report import format_edge, format_edges, print_edges


def test_format_edge_is_one_indexed():
    assert format_edge((0, 1, 5)) == "1 2 5"


def test_single_edge_report_matches_for_both_graphs():
    rows = parse_rows("2 1\n1 2 5")
    for graph in (AdjacencyListGraph(), AdjacencyMatrixGraph()):
        assert format_edges(fill_graph(rows, graph)) == ["1 2 5"]


def test_print_edges_writes_one_line_per_edge():
    g = fill_graph(parse_rows("3 2\n2 3 7\n1 2 4"), AdjacencyMatrixGraph())
    out = io.StringIO()

    print_edges(g, out=out)

    assert set(out.getvalue().splitlines()) == {"1 2 4", "2 3 7"}


def test_sorted_output():
    g = fill_graph(parse_rows("4 3\n3 4 1\n1 2 4\n2 3 7"), AdjacencyListGraph())

    assert format_edges(g, sort=True) == ["1 2 4", "2 3 7", "3 4 1"]
