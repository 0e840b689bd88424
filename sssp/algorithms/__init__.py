"""Shortest-path algorithms: the SPF engine and path reconstruction."""

from sssp.algorithms.paths import Path, iter_paths, path_to
from sssp.algorithms.spf import INF, DistanceTable, SpfStats, compute

__all__ = [
    "INF",
    "DistanceTable",
    "SpfStats",
    "compute",
    "Path",
    "path_to",
    "iter_paths",
]
