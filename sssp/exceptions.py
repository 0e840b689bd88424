"""Error types raised by sssp.

Graph construction errors carry the offending line number and token when they
come from parsing text, so callers can point users at the exact input that
needs fixing. Unreachable vertices are not errors; they are reported through
the distance table.
"""

from __future__ import annotations

from typing import Optional


class SSSPError(Exception):
    """Base class for all package-specific errors."""


class GraphBuildError(SSSPError, ValueError):
    """Raised when a graph cannot be built from its description.

    Attributes:
        line: 1-based input line number, when known.
        token: Offending input token, when known.
    """

    def __init__(
        self, message: str, line: Optional[int] = None, token: Optional[str] = None
    ) -> None:
        self.message = message
        self.line = line
        self.token = token
        super().__init__(self._render())

    def _render(self) -> str:
        where = []
        if self.line is not None:
            where.append(f"line {self.line}")
        if self.token is not None:
            where.append(f"token {self.token!r}")
        if not where:
            return self.message
        return f"{self.message} ({', '.join(where)})"


class ParseError(GraphBuildError):
    """Malformed header, malformed edge token or non-numeric field."""


class VertexCountMismatch(GraphBuildError):
    """Declared vertex count differs from the number of vertex lines."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"header declares {expected} vertices but {actual} vertex lines follow"
        )


class InvalidEdgeTarget(GraphBuildError):
    """Edge target index is negative or not below the vertex count."""


class NegativeWeight(GraphBuildError):
    """Edge weight is below zero."""


class InvalidVertex(SSSPError, ValueError):
    """Vertex index outside ``[0, n)``."""


class InvalidSource(InvalidVertex):
    """Source vertex index outside ``[0, n)``."""


class AlgorithmError(SSSPError, RuntimeError):
    """Raised when an internal invariant is violated at runtime."""


class ConfigError(SSSPError, ValueError):
    """Raised for invalid configuration files or values."""


__all__ = [
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
]
