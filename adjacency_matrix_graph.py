"""
Adjacency-matrix implementation of the undirected Graph interface.

Weights live in one flat numpy buffer of length N * N, read as an N x N
matrix: cell (row, col) sits at index row * N + col. A zero cell means
"no edge", so weight 0 cannot be stored as a real edge.
"""

from typing import Optional, Set

import numpy as np

from graph import Edge, Graph, Node, Weight


class AdjacencyMatrixGraph(Graph):
    """
    Undirected, weighted graph backed by a symmetric square weight matrix.

    The buffer is reallocated on every add_node, so adding a node costs
    O(N^2) and building N nodes costs O(N^3).
    """

    def __init__(self) -> None:
        self._node_count = 0
        self._links: np.ndarray = np.zeros(0, dtype=np.int64)

    def add_node(self) -> Node:
        """
        Grow the matrix from N x N to (N + 1) x (N + 1).

        Old row r is copied into the first N cells of new row r; the new
        last row and column stay zero.
        """
        n = self._node_count
        new_n = n + 1
        new_links = np.zeros(new_n * new_n, dtype=np.int64)

        for row in range(n):
            new_links[row * new_n:row * new_n + n] = self._links[row * n:(row + 1) * n]

        self._links = new_links
        self._node_count = new_n
        return n

    def add_edge(self, a: Node, b: Node, weight: Weight) -> None:
        self._require_nodes(a, b)
        self._require_weight(weight)

        n = self._node_count
        self._links[a * n + b] = weight
        self._links[b * n + a] = weight

    def node_count(self) -> int:
        return self._node_count

    def get_edge_weight(self, a: Node, b: Node) -> Optional[Weight]:
        if not (self.has_node(a) and self.has_node(b)):
            return None
        w = int(self._links[a * self._node_count + b])
        return w if w != 0 else None

    def edges(self) -> Set[Edge]:
        """
        Scan the buffer once and emit (row, col, w) for non-zero cells on or
        above the diagonal; the mirrored cell below it is skipped.
        """
        n = self._node_count
        result: Set[Edge] = set()
        for i in np.flatnonzero(self._links):
            row, col = divmod(int(i), n)
            if col >= row:
                result.add((row, col, int(self._links[i])))
        return result
