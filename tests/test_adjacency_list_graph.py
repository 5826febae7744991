"""
Unit tests for AdjacencyListGraph.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph
from graph import GraphContractError


def test_add_node_returns_sequential_ids():
    g = AdjacencyListGraph()

    assert [g.add_node() for _ in range(4)] == [0, 1, 2, 3]
    assert g.node_count() == 4


def test_add_nodes_and_edges():
    g = AdjacencyListGraph()
    a, b, c = g.add_node(), g.add_node(), g.add_node()

    g.add_edge(a, b, 1)
    g.add_edge(c, a, 2)
    g.add_edge(b, c, 3)

    assert g.edges() == {(0, 1, 1), (0, 2, 2), (1, 2, 3)}


def test_edge_is_visible_from_both_endpoints():
    g = AdjacencyListGraph()
    a, b = g.add_node(), g.add_node()

    g.add_edge(b, a, 9)

    assert g.get_edge_weight(a, b) == 9
    assert g.get_edge_weight(b, a) == 9
    assert g.get_node_edges(a) == g.get_node_edges(b) == {(0, 1, 9)}


def test_add_edge_overwrites_existing_weight():
    g = AdjacencyListGraph()
    a, b = g.add_node(), g.add_node()

    g.add_edge(a, b, 1)
    g.add_edge(b, a, 7)

    assert g.edges() == {(0, 1, 7)}
    assert g.get_edge_weight(a, b) == 7


def test_self_loop_reported_once():
    g = AdjacencyListGraph()
    a = g.add_node()

    g.add_edge(a, a, 4)
    g.add_edge(a, a, 5)

    assert g.edges() == {(0, 0, 5)}
    assert g.get_edge_weight(a, a) == 5


def test_missing_edge_weight_is_none():
    g = AdjacencyListGraph()
    a, b, c = g.add_node(), g.add_node(), g.add_node()
    g.add_edge(a, b, 2)

    assert g.get_edge_weight(a, c) is None
    assert g.get_edge_weight(c, b) is None
    assert g.get_node_edges(c) == set()


def test_add_edge_to_unknown_node_fails():
    g = AdjacencyListGraph()
    a = g.add_node()

    with pytest.raises(GraphContractError):
        g.add_edge(a, 1, 3)
    assert g.edges() == set()


def test_negative_weight_rejected():
    g = AdjacencyListGraph()
    a, b = g.add_node(), g.add_node()

    with pytest.raises(GraphContractError):
        g.add_edge(a, b, -1)
