"""
CLI: build every configured graph representation from an input file and
print each one's edges.

    python edge_report.py INPUT [--config edge_report.yml] [--sort] [--verbose]

Any bad input aborts with exit status 1 before anything is printed.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Tuple

from graph import Graph, GraphContractError
from graph_builder import fill_graph
from graph_input import GraphInputError, read_rows
from graph_report import print_edges
from report_config import ReportConfig, RepresentationConfig, default_config, load_config


def log(cfg: ReportConfig, message: str) -> None:
    if cfg.verbose:
        print(f"[edge_report] {message}", file=sys.stderr)


def build_graphs(
    rows: Sequence[Sequence[int]], cfg: ReportConfig
) -> List[Tuple[RepresentationConfig, Graph]]:
    built = []
    for rep in cfg.representations:
        graph = fill_graph(rows, rep.build_graph())
        log(cfg, f"built {rep.name} graph: {graph.node_count()} nodes, {len(graph.edges())} edges")
        built.append((rep, graph))
    return built


def run(input_path: Path, cfg: ReportConfig, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    rows = read_rows(input_path)
    log(cfg, f"read {len(rows)} lines from {input_path}")

    # Build everything first so a failure never leaves partial output.
    built = build_graphs(rows, cfg)
    for rep, graph in built:
        print(rep.title, file=out)
        print_edges(graph, out=out, sort=cfg.sort_edges)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build adjacency-list and adjacency-matrix graphs and print their edges."
    )
    parser.add_argument("input", type=Path, help="graph file: 'n m' header then m 'a b w' lines")
    parser.add_argument("--config", type=Path, default=None, help="YAML report configuration")
    parser.add_argument("--sort", action="store_true", help="print edges in sorted order")
    parser.add_argument("--verbose", action="store_true", help="status lines on stderr")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config) if args.config else default_config()
        if args.sort:
            cfg = replace(cfg, sort_edges=True)
        if args.verbose:
            cfg = replace(cfg, verbose=True)
        run(args.input, cfg)
    except (GraphInputError, GraphContractError, ValueError, OSError) as exc:
        raise SystemExit(f"[edge_report] error: {exc}") from exc


if __name__ == "__main__":
    main()
