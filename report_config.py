"""
Report configuration: which graph representations to build and print.

Loaded from a YAML file such as edge_report.yml:

    sort_edges: false
    verbose: false
    representations:
      - name: matrix
        kind: matrix
        title: "Edges from the adjacency-matrix graph:"
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Sequence

from adjacency_list_graph import AdjacencyListGraph
from adjacency_matrix_graph import AdjacencyMatrixGraph
from graph import Graph


GRAPH_KINDS: Dict[str, Callable[[], Graph]] = {
    "matrix": AdjacencyMatrixGraph,
    "list": AdjacencyListGraph,
}


@dataclass(frozen=True)
class RepresentationConfig:
    name: str
    kind: str
    title: str

    def build_graph(self) -> Graph:
        return GRAPH_KINDS[self.kind]()


@dataclass(frozen=True)
class ReportConfig:
    representations: Sequence[RepresentationConfig]
    sort_edges: bool = False
    verbose: bool = False


def default_config() -> ReportConfig:
    """Matrix graph first, then list graph."""
    return ReportConfig(
        representations=(
            RepresentationConfig("matrix", "matrix", "Edges from the adjacency-matrix graph:"),
            RepresentationConfig("list", "list", "Edges from the adjacency-list graph:"),
        )
    )


def load_config(path: Path) -> ReportConfig:
    import yaml  # type: ignore

    try:
        data = yaml.safe_load(Path(path).read_text()) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    entries = data.get("representations", [])
    if not isinstance(entries, list):
        raise ValueError(f"{path}: representations must be a list")

    representations = []
    for rep in entries:
        if not isinstance(rep, dict):
            raise ValueError(f"{path}: each representation must be a mapping, got {rep!r}")
        kind = rep.get("kind")
        if kind not in GRAPH_KINDS:
            raise ValueError(
                f"Unknown graph kind '{kind}', expected one of {sorted(GRAPH_KINDS)}"
            )
        representations.append(
            RepresentationConfig(
                name=rep.get("name", kind),
                kind=kind,
                title=rep.get("title", f"Edges from the {kind} graph:"),
            )
        )
    if not representations:
        raise ValueError(f"{path}: at least one representation is required")

    return ReportConfig(
        representations=representations,
        sort_edges=bool(data.get("sort_edges", False)),
        verbose=bool(data.get("verbose", False)),
    )
