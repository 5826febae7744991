"""
Undirected, weighted graph abstraction.

Nodes are dense zero-based integers handed out by add_node().
Edges are undirected: (a, b, w) and (b, a, w) name the same edge.
"""

from abc import ABC, abstractmethod
from typing import Optional, Set, Tuple

Node = int
Weight = int
Edge = Tuple[Node, Node, Weight]

MAX_WEIGHT: Weight = 2**32 - 1


class GraphContractError(RuntimeError):
    """Raised when a caller breaks a Graph precondition (unknown node, bad weight)."""


class Graph(ABC):
    """Undirected, weighted graph over sequential integer nodes."""

    @abstractmethod
    def add_node(self) -> Node:
        """Create the next node and return its identifier."""
        raise NotImplementedError

    @abstractmethod
    def add_edge(self, a: Node, b: Node, weight: Weight) -> None:
        """
        Add or update the undirected edge a <-> b.

        Both nodes must already exist. An existing edge between the pair has
        its weight overwritten rather than duplicated.
        """
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Set[Edge]:
        """Return every edge, each unordered pair exactly once."""
        raise NotImplementedError

    @abstractmethod
    def node_count(self) -> int:
        raise NotImplementedError

    def get_node_edges(self, a: Node) -> Set[Edge]:
        """All edges with a as either endpoint."""
        return {e for e in self.edges() if e[0] == a or e[1] == a}

    def get_edge_weight(self, a: Node, b: Node) -> Optional[Weight]:
        """Weight of the edge between a and b, or None if there is none."""
        for x, y, w in self.edges():
            if (x, y) == (a, b) or (x, y) == (b, a):
                return w
        return None

    def has_node(self, a: Node) -> bool:
        return 0 <= a < self.node_count()

    def _require_nodes(self, a: Node, b: Node) -> None:
        for node in (a, b):
            if not self.has_node(node):
                raise GraphContractError(f"Tried to add edge to inexistent node {node}")

    def _require_weight(self, weight: Weight) -> None:
        if not 0 <= weight <= MAX_WEIGHT:
            raise GraphContractError(f"Edge weight must be in 0..{MAX_WEIGHT}, got {weight}")
