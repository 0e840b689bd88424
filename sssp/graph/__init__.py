"""Graph primitives and helpers.

This package provides the immutable adjacency-list `Graph`, the text-format
builder (`builder`) and NetworkX conversion helpers (`convert`).
"""

from sssp.graph.adjacency import Edge, Graph, Vertex, Weight
from sssp.graph.builder import HeaderOrder, ParsedInput, parse_graph, read_graph

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
    "Weight",
    "HeaderOrder",
    "ParsedInput",
    "parse_graph",
    "read_graph",
]
