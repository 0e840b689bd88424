"""sssp: single-source shortest paths with Dijkstra's algorithm.

Primary API:
    parse_graph() / read_graph() - Build a Graph from the adjacency-list format
    compute() - Run Dijkstra from a source, returning a DistanceTable
    path_to() - Rebuild one shortest path from a DistanceTable

Example:
    from sssp import compute, parse_graph, path_to

    parsed = parse_graph("0\\n3\\n1,3 2,3\\n\\n1,2\\n")
    table = compute(parsed.graph, parsed.source)
    table.distance(1)           # 3
    path_to(table, 2).render()  # "0 -> 2"
"""

from __future__ import annotations

from sssp import cli, logging
from sssp._version import __version__
from sssp.algorithms import INF, DistanceTable, Path, SpfStats, compute, iter_paths, path_to
from sssp.config import RunConfig, load_config
from sssp.exceptions import (
    AlgorithmError,
    ConfigError,
    GraphBuildError,
    InvalidEdgeTarget,
    InvalidSource,
    InvalidVertex,
    NegativeWeight,
    ParseError,
    SSSPError,
    VertexCountMismatch,
)
from sssp.graph import Edge, Graph, HeaderOrder, ParsedInput, parse_graph, read_graph

__all__ = [
    # Version
    "__version__",
    # Graph
    "Edge",
    "Graph",
    "HeaderOrder",
    "ParsedInput",
    "parse_graph",
    "read_graph",
    # Engine
    "INF",
    "DistanceTable",
    "SpfStats",
    "compute",
    "Path",
    "path_to",
    "iter_paths",
    # Configuration
    "RunConfig",
    "load_config",
    # Errors
    "SSSPError",
    "GraphBuildError",
    "ParseError",
    "VertexCountMismatch",
    "InvalidEdgeTarget",
    "NegativeWeight",
    "InvalidVertex",
    "InvalidSource",
    "AlgorithmError",
    "ConfigError",
    # Utilities
    "cli",
    "logging",
]
