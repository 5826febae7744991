"""
Adjacency-list implementation of the undirected Graph interface.

Every node keeps the list of edges touching it; an edge is recorded under
both endpoints, oriented away from the owning node.
"""

from typing import Dict, List, Optional, Set

from graph import Edge, Graph, Node, Weight


class AdjacencyListGraph(Graph):
    """
    Undirected, weighted graph backed by a node -> [incident edges] mapping.
    """

    def __init__(self) -> None:
        self._next_node: Node = 0
        self._adj: Dict[Node, List[Edge]] = {}

    def add_node(self) -> Node:
        node = self._next_node
        self._adj[node] = []
        self._next_node += 1
        return node

    def add_edge(self, a: Node, b: Node, weight: Weight) -> None:
        """
        Upsert (a, b, weight) in a's list and (b, a, weight) in b's list.

        Finding the existing entry is a linear scan of the owner's list, so
        the cost is O(degree). A self loop ends up stored once.
        """
        self._require_nodes(a, b)
        self._require_weight(weight)

        for src, dst in ((a, b), (b, a)):
            incident = self._adj[src]
            for i, (_, other, _) in enumerate(incident):
                if other == dst:
                    incident[i] = (src, dst, weight)
                    break
            else:
                incident.append((src, dst, weight))

    def edges(self) -> Set[Edge]:
        # Each edge lives under both endpoints; keep the low -> high copy.
        return {e for incident in self._adj.values() for e in incident if e[0] <= e[1]}

    def node_count(self) -> int:
        return len(self._adj)

    def get_node_edges(self, a: Node) -> Set[Edge]:
        return {(min(x, y), max(x, y), w) for x, y, w in self._adj.get(a, [])}

    def get_edge_weight(self, a: Node, b: Node) -> Optional[Weight]:
        for _, other, w in self._adj.get(a, []):
            if other == b:
                return w
        return None
