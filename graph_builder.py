"""
Populate any Graph implementation from tokenized integer rows.
"""

from typing import List, Sequence, Tuple

from graph import Graph
from graph_input import GraphInputError


def _check_rows(rows: Sequence[Sequence[int]]) -> Tuple[int, List[Tuple[int, int, int]]]:
    """
    Validate the whole input and return (node_count, zero-based edges).

    Nothing is added to a graph until this has passed, so a bad row never
    leaves a half-built graph behind.
    """
    if not rows:
        raise GraphInputError("input is empty")

    header = rows[0]
    if len(header) != 2:
        raise GraphInputError(
            f"expected the first line to hold exactly two values, got {len(header)}"
        )
    node_count, edge_count = header

    edge_rows = rows[1:1 + edge_count]
    if len(edge_rows) < edge_count:
        raise GraphInputError(
            f"header announces {edge_count} edges but only {len(edge_rows)} lines follow"
        )

    edges: List[Tuple[int, int, int]] = []
    for line_no, row in enumerate(edge_rows, start=2):
        if len(row) != 3:
            raise GraphInputError(
                f"line {line_no}: expected exactly three values per edge, got {len(row)}"
            )
        a, b, weight = row
        for endpoint in (a, b):
            if not 1 <= endpoint <= node_count:
                raise GraphInputError(
                    f"line {line_no}: node {endpoint} outside 1..{node_count}"
                )
        # Input nodes are 1-indexed, graph nodes start at 0.
        edges.append((a - 1, b - 1, weight))

    return node_count, edges


def fill_graph(rows: Sequence[Sequence[int]], graph: Graph) -> Graph:
    """
    Add the announced nodes and edges to graph.

    Row 0 is [nodeCount, edgeCount]; rows 1..edgeCount are [a, b, weight]
    with 1-indexed endpoints. Rows beyond the last edge are ignored.
    Returns the same graph for chaining.
    """
    node_count, edges = _check_rows(rows)

    for _ in range(node_count):
        graph.add_node()

    for a, b, weight in edges:
        graph.add_edge(a, b, weight)

    return graph
