"""
Render a graph's edge set back into the 1-indexed text form.
"""

import sys
from typing import List, Optional, TextIO

from graph import Edge, Graph


def format_edge(edge: Edge) -> str:
    a, b, weight = edge
    return f"{a + 1} {b + 1} {weight}"


def format_edges(graph: Graph, sort: bool = False) -> List[str]:
    """
    One "a b weight" line per edge.

    Order follows graph.edges(), which is unordered; pass sort=True for
    stable output.
    """
    edges = sorted(graph.edges()) if sort else graph.edges()
    return [format_edge(edge) for edge in edges]


def print_edges(graph: Graph, out: Optional[TextIO] = None, sort: bool = False) -> None:
    out = out if out is not None else sys.stdout
    for line in format_edges(graph, sort=sort):
        print(line, file=out)
