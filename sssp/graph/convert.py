"""NetworkX interop for :class:`~sssp.graph.adjacency.Graph`.

``to_networkx`` exposes a graph to the NetworkX ecosystem (drawing, reference
algorithms). ``from_networkx`` imports any directed NetworkX graph, mapping its
node names to contiguous indices through a :class:`NodeMap`.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2)
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["B"]
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Tuple

import networkx as nx

from sssp.graph.adjacency import Graph, Vertex


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to vertex indices.
        to_name: Maps vertex indices back to original node names.
    """

    to_index: Dict[Hashable, Vertex] = field(default_factory=dict)
    to_name: Dict[Vertex, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        return cls(
            to_index={name: i for i, name in enumerate(names)},
            to_name={i: name for i, name in enumerate(names)},
        )

    def __len__(self) -> int:
        return len(self.to_index)


def to_networkx(graph: Graph, weight_attr: str = "weight") -> nx.MultiDiGraph:
    """Convert a graph to a ``networkx.MultiDiGraph``.

    Every vertex becomes an integer node (isolated vertices included) and every
    edge keeps its weight under ``weight_attr``. Parallel edges stay separate.
    """
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(range(graph.n_vertices))
    for u, v, w in graph.edges():
        nx_graph.add_edge(u, v, **{weight_attr: w})
    return nx_graph


def from_networkx(
    G: nx.DiGraph,
    weight_attr: str = "weight",
    default_weight: int = 1,
) -> Tuple[Graph, NodeMap]:
    """Convert a directed NetworkX graph into a graph plus its node mapping.

    Nodes are sorted by ``str`` for a deterministic index assignment. Missing
    weights fall back to ``default_weight``. Weights are never rounded: integral
    floats such as ``2.0`` are accepted, fractional ones are rejected.

    Args:
        G: ``nx.DiGraph`` or ``nx.MultiDiGraph``.
        weight_attr: Edge attribute holding the integer weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If ``G`` is not a directed NetworkX graph.
        NegativeWeight: If an edge carries a negative weight.
        ParseError: If an edge weight is not an integer (for example ``2.5``).
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph)):
        raise TypeError(
            f"Expected NetworkX DiGraph or MultiDiGraph, got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    adjacency: List[List[Tuple[Vertex, object]]] = [[] for _ in range(len(node_map))]
    for u, v, data in G.edges(data=True):
        adjacency[node_map.to_index[u]].append(
            (node_map.to_index[v], data.get(weight_attr, default_weight))
        )
    return Graph.from_adjacency(adjacency), node_map
