"""Immutable weighted directed graph stored as adjacency lists.

Vertices are the integers ``0 .. n-1``. Each vertex owns an ordered tuple of
outgoing edges. Parallel edges and self-loops are kept as given. Targets must be
in range and weights must be non-negative; both are checked once, when the
graph is constructed, so algorithms can read edges without re-validating.

A ``Graph`` never changes after construction and may be shared between any
number of concurrent queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Sequence, Tuple

from sssp.exceptions import InvalidEdgeTarget, InvalidVertex, NegativeWeight, ParseError

Vertex = int
Weight = int
EdgeTuple = Tuple[Vertex, Vertex, Weight]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_weight(u: Vertex, v: object, w: object) -> Weight:
    """Return ``w`` as an int weight; integral floats such as ``2.0`` are accepted.

    The sign is checked on the value as given, before any conversion.
    """
    if _is_int(w):
        value = w
    elif isinstance(w, float):
        if w < 0:
            raise NegativeWeight(f"negative weight {w!r} on edge {u} -> {v}")
        if not w.is_integer():
            raise ParseError(f"weight {w!r} on edge {u} -> {v} is not an integer")
        value = int(w)
    else:
        raise ParseError(f"weight {w!r} on edge {u} -> {v} is not an integer")
    if value < 0:
        raise NegativeWeight(f"negative weight {w!r} on edge {u} -> {v}")
    return value


class Edge(NamedTuple):
    """Outgoing edge owned by its source vertex."""

    target: Vertex
    weight: Weight


@dataclass(frozen=True)
class Graph:
    """Directed graph with non-negative integer edge weights.

    Attributes:
        adj: Outgoing edges per vertex, indexed by vertex.
    """

    adj: Tuple[Tuple[Edge, ...], ...]

    def __post_init__(self) -> None:
        """Validate every edge against the vertex range and weight sign."""
        n = len(self.adj)
        for u, edges in enumerate(self.adj):
            for edge in edges:
                if not _is_int(edge.target) or not 0 <= edge.target < n:
                    raise InvalidEdgeTarget(
                        f"edge {u} -> {edge.target} points outside [0, {n})"
                    )
                if not _is_int(edge.weight):
                    raise ParseError(
                        f"weight {edge.weight!r} on edge {u} -> {edge.target} "
                        "is not an integer"
                    )
                if edge.weight < 0:
                    raise NegativeWeight(
                        f"negative weight {edge.weight} on edge {u} -> {edge.target}"
                    )

    @classmethod
    def from_adjacency(
        cls, adjacency: Sequence[Iterable[Tuple[Vertex, Weight]]]
    ) -> "Graph":
        """Build a graph from per-vertex lists of ``(target, weight)`` pairs.

        Example:
            >>> g = Graph.from_adjacency([[(1, 3), (2, 3)], [], [(1, 2)]])
            >>> g.n_vertices, g.n_edges
            (3, 3)

        Raises:
            InvalidEdgeTarget: If a target is not an int in ``[0, n)``.
            NegativeWeight: If a weight is below zero.
            ParseError: If a weight is not an integer; integral floats are
                converted, anything else (``2.5``, ``"3"``) is rejected.
        """
        return cls(
            tuple(
                tuple(Edge(v, _coerce_weight(u, v, w)) for v, w in edges)
                for u, edges in enumerate(adjacency)
            )
        )

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[EdgeTuple]) -> "Graph":
        """Build a graph with ``n`` vertices from ``(u, v, w)`` triples.

        Edges keep the order in which they are given within each source vertex.

        Raises:
            InvalidVertex: If ``n`` is negative or a source ``u`` is out of range.
        """
        if n < 0:
            raise InvalidVertex(f"vertex count must be non-negative, got {n}")
        adjacency = [[] for _ in range(n)]
        for u, v, w in edges:
            if not 0 <= u < n:
                raise InvalidVertex(f"edge source {u} outside [0, {n})")
            adjacency[u].append((v, w))
        return cls.from_adjacency(adjacency)

    @property
    def n_vertices(self) -> int:
        return len(self.adj)

    @property
    def n_edges(self) -> int:
        return sum(len(edges) for edges in self.adj)

    def __len__(self) -> int:
        return len(self.adj)

    def has_vertex(self, v: object) -> bool:
        """Return True if ``v`` is an integer vertex index of this graph."""
        return isinstance(v, int) and not isinstance(v, bool) and 0 <= v < len(self.adj)

    def neighbors(self, u: Vertex) -> Tuple[Edge, ...]:
        """Return the outgoing edges of ``u`` in insertion order."""
        if not self.has_vertex(u):
            raise InvalidVertex(f"vertex {u!r} outside [0, {len(self.adj)})")
        return self.adj[u]

    def out_degree(self, u: Vertex) -> int:
        return len(self.neighbors(u))

    def edges(self) -> Iterator[EdgeTuple]:
        """Yield every edge as ``(source, target, weight)``."""
        for u, edges in enumerate(self.adj):
            for v, w in edges:
                yield u, v, w
