"""Shortest-path-first (SPF) engine.

Classic Dijkstra over a binary heap. The heap has no decrease-key, so an
improved distance pushes a fresh ``(distance, vertex)`` entry and the outdated
one is skipped when it is popped (lazy deletion).

Notes:
    Heap entries are ``(distance, vertex)`` tuples, so entries with equal
    distance pop in ascending vertex order. Predecessors only change on a
    strict improvement, which makes the result deterministic and the
    predecessor links a tree rooted at the source.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import List, Optional, Tuple, Union

from sssp.exceptions import InvalidSource, InvalidVertex
from sssp.graph.adjacency import Graph, Vertex
from sssp.logging import get_logger

logger = get_logger(__name__)

#: Distance of a vertex the source cannot reach.
INF = math.inf

#: A finite integer distance, or ``INF``.
Distance = Union[int, float]


@dataclass
class SpfStats:
    """Counters collected during one SPF run.

    Attributes:
        pops: Heap entries extracted, stale ones included.
        stale_pops: Extracted entries skipped because a shorter distance was
            already recorded.
        pushes: Heap entries inserted, the source entry included.
        relaxations: Edges that strictly improved a distance.
    """

    pops: int = 0
    stale_pops: int = 0
    pushes: int = 0
    relaxations: int = 0


@dataclass(frozen=True)
class DistanceTable:
    """Result of a single-source query.

    Attributes:
        source: Query source vertex.
        distances: Per-vertex distance from the source, ``INF`` if unreachable.
        predecessors: Per-vertex predecessor on the chosen shortest path;
            ``None`` for the source and for unreachable vertices.
        stats: Counters from the run that produced the table.
    """

    source: Vertex
    distances: Tuple[Distance, ...]
    predecessors: Tuple[Optional[Vertex], ...]
    stats: SpfStats = field(default_factory=SpfStats, compare=False)

    @property
    def n_vertices(self) -> int:
        return len(self.distances)

    def _check(self, v: Vertex) -> None:
        if not (isinstance(v, int) and not isinstance(v, bool)) or not (
            0 <= v < len(self.distances)
        ):
            raise InvalidVertex(f"vertex {v!r} outside [0, {len(self.distances)})")

    def distance(self, v: Vertex) -> Distance:
        """Return the shortest distance to ``v`` (``INF`` if unreachable)."""
        self._check(v)
        return self.distances[v]

    def predecessor(self, v: Vertex) -> Optional[Vertex]:
        """Return the predecessor of ``v`` on its shortest path, if any."""
        self._check(v)
        return self.predecessors[v]

    def is_reachable(self, v: Vertex) -> bool:
        self._check(v)
        return self.distances[v] != INF

    def reachable(self) -> List[Vertex]:
        """Return the reachable vertices in index order (source included)."""
        return [v for v, d in enumerate(self.distances) if d != INF]


def compute(graph: Graph, source: Vertex) -> DistanceTable:
    """Compute shortest distances and predecessors from ``source``.

    Args:
        graph: Graph with non-negative weights. Only read, never modified.
        source: Source vertex.

    Returns:
        Distance table covering every vertex of ``graph``.

    Raises:
        InvalidSource: If ``source`` is not a vertex of ``graph``.
    """
    if not graph.has_vertex(source):
        raise InvalidSource(
            f"source vertex {source!r} outside [0, {graph.n_vertices})"
        )

    adj = graph.adj
    dist: List[Distance] = [INF] * len(adj)
    pred: List[Optional[Vertex]] = [None] * len(adj)
    stats = SpfStats(pushes=1)

    dist[source] = 0
    min_pq: List[Tuple[int, Vertex]] = [(0, source)]

    while min_pq:
        current_dist, u = heappop(min_pq)
        stats.pops += 1
        if current_dist > dist[u]:
            stats.stale_pops += 1
            continue

        for v, w in adj[u]:
            candidate = current_dist + w
            if candidate < dist[v]:
                dist[v] = candidate
                pred[v] = u
                heappush(min_pq, (candidate, v))
                stats.relaxations += 1
                stats.pushes += 1

    logger.debug(
        f"SPF from {source}: {len(adj)} vertices, {stats.pops} pops "
        f"({stats.stale_pops} stale), {stats.relaxations} relaxations"
    )
    return DistanceTable(
        source=source,
        distances=tuple(dist),
        predecessors=tuple(pred),
        stats=stats,
    )
