"""Graph Builder: parse the adjacency-list text format into a ``Graph``.

Input layout::

    <source_vertex_index>
    <vertex_count N>
    <edges for vertex 0: "target,weight target,weight ...">
    ...
    <edges for vertex N-1>

The two header integers may also share the first line. Which of them comes
first is fixed by the caller through :class:`HeaderOrder`; it is never guessed
from the data. A vertex without outgoing edges is an empty line.

Parsing either returns a complete graph or raises a
:class:`~sssp.exceptions.GraphBuildError` subclass naming the line and token at
fault. Nothing is returned on failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from sssp.exceptions import (
    InvalidEdgeTarget,
    NegativeWeight,
    ParseError,
    VertexCountMismatch,
)
from sssp.graph.adjacency import Edge, Graph, Vertex
from sssp.logging import get_logger

logger = get_logger(__name__)


class HeaderOrder(str, Enum):
    """Order of the two header integers."""

    #: ``<source>`` then ``<vertex_count>`` (documented format).
    SOURCE_FIRST = "source-first"
    #: ``<vertex_count>`` then ``<source>`` (legacy layout).
    COUNT_FIRST = "count-first"

    @classmethod
    def from_string(cls, value: str) -> "HeaderOrder":
        """Parse ``source-first`` / ``count-first`` (underscores and case ignored)."""
        normalized = value.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Invalid header order '{value}'. Valid values: {valid}")


@dataclass(frozen=True)
class ParsedInput:
    """Result of parsing an input file.

    Attributes:
        source: Source vertex declared in the header (not range-checked here).
        graph: The parsed graph.
    """

    source: Vertex
    graph: Graph


def _parse_int(
    text: str, what: str, line_no: int, token: Optional[str] = None
) -> int:
    """Parse a base-10 integer; ``token`` is the input shown in errors."""
    # int() would also accept "1_000" and surrounding whitespace
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits.isdigit() or not digits.isascii():
        raise ParseError(
            f"{what} is not an integer",
            line=line_no,
            token=text if token is None else token,
        )
    return int(text)


def _split_header(lines: List[str]) -> Tuple[List[str], int]:
    """Return the two header tokens and the number of lines they occupy."""
    if not lines or not lines[0].strip():
        raise ParseError("missing header", line=1)
    first = lines[0].split()
    if len(first) == 2:
        return first, 1
    if len(first) > 2:
        raise ParseError(
            "header line must hold one or two integers", line=1, token=lines[0].strip()
        )
    if len(lines) < 2 or not lines[1].strip():
        raise ParseError("header is missing its second integer", line=2)
    second = lines[1].split()
    if len(second) != 1:
        raise ParseError(
            "second header line must hold exactly one integer",
            line=2,
            token=lines[1].strip(),
        )
    return [first[0], second[0]], 2


def _parse_header(
    lines: List[str], header_order: HeaderOrder
) -> Tuple[Vertex, int, int]:
    tokens, used = _split_header(lines)
    # (token, line number) for each header field
    fields = [(tokens[0], 1), (tokens[1], used)]
    if header_order is HeaderOrder.COUNT_FIRST:
        fields.reverse()
    (source_tok, source_line), (count_tok, count_line) = fields

    source = _parse_int(source_tok, "source vertex", source_line)
    n = _parse_int(count_tok, "vertex count", count_line)
    if n < 0:
        raise ParseError("vertex count is negative", line=count_line, token=count_tok)
    return source, n, used


def _parse_edge(token: str, n: int, line_no: int) -> Edge:
    parts = token.split(",")
    if len(parts) != 2:
        raise ParseError("edge must be 'target,weight'", line=line_no, token=token)
    target = _parse_int(parts[0], "edge target", line_no, token)
    weight = _parse_int(parts[1], "edge weight", line_no, token)
    if not 0 <= target < n:
        raise InvalidEdgeTarget(
            f"edge target outside [0, {n})", line=line_no, token=token
        )
    if weight < 0:
        raise NegativeWeight("edge weight is negative", line=line_no, token=token)
    return Edge(target, weight)


def parse_graph(
    text: str, header_order: HeaderOrder = HeaderOrder.SOURCE_FIRST
) -> ParsedInput:
    """Parse the adjacency-list text format.

    Args:
        text: Whole input, header included.
        header_order: Order of the source and vertex-count header fields.

    Returns:
        The declared source and the graph.

    Raises:
        ParseError: Malformed header or edge token.
        VertexCountMismatch: Number of vertex lines differs from the header.
        InvalidEdgeTarget: Edge target outside ``[0, N)``.
        NegativeWeight: Edge weight below zero.
    """
    lines = text.splitlines()
    source, n, used = _parse_header(lines, header_order)

    body = lines[used:]
    # Blank lines past the declared count are file-ending newlines, not vertices.
    while len(body) > n and not body[-1].strip():
        body.pop()
    if len(body) != n:
        raise VertexCountMismatch(expected=n, actual=len(body))

    adjacency: List[Tuple[Edge, ...]] = []
    for offset, raw in enumerate(body):
        line_no = used + offset + 1
        adjacency.append(tuple(_parse_edge(tok, n, line_no) for tok in raw.split()))

    graph = Graph(tuple(adjacency))
    logger.debug(
        f"Parsed graph: {graph.n_vertices} vertices, {graph.n_edges} edges, "
        f"declared source {source}"
    )
    return ParsedInput(source=source, graph=graph)


def read_graph(
    path: Union[str, Path], header_order: HeaderOrder = HeaderOrder.SOURCE_FIRST
) -> ParsedInput:
    """Read and parse an input file.

    Raises:
        OSError: If the file cannot be read.
        GraphBuildError: If its contents are invalid (see :func:`parse_graph`).
    """
    path = Path(path)
    logger.debug(f"Reading graph from {path}")
    return parse_graph(path.read_text(encoding="utf-8"), header_order=header_order)
