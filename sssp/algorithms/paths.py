"""Path reconstruction from a :class:`~sssp.algorithms.spf.DistanceTable`.

Paths are not stored by the engine. They are rebuilt on demand by walking
predecessor links from the target back to the source and reversing the
result. The walk is an explicit loop, so path length is not limited by the
interpreter's recursion depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from sssp.algorithms.spf import Distance, DistanceTable
from sssp.exceptions import AlgorithmError
from sssp.graph.adjacency import Vertex


@dataclass(frozen=True)
class Path:
    """A single shortest path.

    Attributes:
        vertices: Vertex sequence from source to target, both included.
        cost: Sum of edge weights along the path.
    """

    vertices: Tuple[Vertex, ...]
    cost: Distance

    def __getitem__(self, idx: int) -> Vertex:
        return self.vertices[idx]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def src(self) -> Vertex:
        """Return the first vertex of the path (the query source)."""
        return self.vertices[0]

    @property
    def dst(self) -> Vertex:
        """Return the last vertex of the path (the target)."""
        return self.vertices[-1]

    def edges(self) -> List[Tuple[Vertex, Vertex]]:
        """Return consecutive ``(u, v)`` hops; empty for a one-vertex path."""
        return list(zip(self.vertices, self.vertices[1:]))

    def render(self, separator: str = " -> ") -> str:
        """Join the vertices, e.g. ``"0 -> 2 -> 1"``."""
        return separator.join(str(v) for v in self.vertices)


def path_to(table: DistanceTable, target: Vertex) -> Optional[Path]:
    """Rebuild the shortest path from the table's source to ``target``.

    Args:
        table: Result of :func:`~sssp.algorithms.spf.compute`.
        target: Destination vertex.

    Returns:
        The path, or ``None`` when ``target`` is unreachable.

    Raises:
        InvalidVertex: If ``target`` is outside the table's vertex range.
        AlgorithmError: If the predecessor chain does not lead back to the
            source.
    """
    if not table.is_reachable(target):
        return None

    chain: List[Vertex] = [target]
    current = target
    # A predecessor tree over n vertices has no chain longer than n.
    for _ in range(table.n_vertices):
        parent = table.predecessors[current]
        if parent is None:
            break
        chain.append(parent)
        current = parent
    else:
        raise AlgorithmError(f"predecessor chain from {target} contains a cycle")

    if current != table.source:
        raise AlgorithmError(
            f"predecessor chain from {target} ends at {current}, "
            f"not at source {table.source}"
        )
    chain.reverse()
    return Path(vertices=tuple(chain), cost=table.distances[target])


def iter_paths(table: DistanceTable) -> Iterator[Tuple[Vertex, Optional[Path]]]:
    """Yield ``(vertex, path or None)`` for every vertex in index order."""
    for v in range(table.n_vertices):
        yield v, path_to(table, v)
