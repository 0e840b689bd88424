"""Render query results as text lines or JSON-ready dictionaries.

Text format, one line per vertex in index order::

    <vertex> <distance> (<v1 -> v2 -> ... -> vk>)
    <vertex> inf (unreachable)
"""

from __future__ import annotations

from typing import Any, Dict, List

from sssp.algorithms.paths import iter_paths
from sssp.algorithms.spf import DistanceTable


def format_lines(
    table: DistanceTable,
    unreachable_label: str = "unreachable",
    separator: str = " -> ",
) -> List[str]:
    """Return one output line per vertex.

    Args:
        table: Query result.
        unreachable_label: Text shown in parentheses for unreachable vertices.
        separator: Text placed between path vertices.
    """
    lines = []
    for v, path in iter_paths(table):
        if path is None:
            lines.append(f"{v} inf ({unreachable_label})")
        else:
            lines.append(f"{v} {path.cost} ({path.render(separator)})")
    return lines


def render_text(table: DistanceTable, **kwargs: Any) -> str:
    """Return :func:`format_lines` joined with newlines, with a trailing newline."""
    lines = format_lines(table, **kwargs)
    return "\n".join(lines) + "\n" if lines else ""


def to_dict(table: DistanceTable) -> Dict[str, Any]:
    """Return a JSON-serializable summary; unreachable entries use ``None``."""
    vertices = []
    for v, path in iter_paths(table):
        vertices.append(
            {
                "vertex": v,
                "distance": None if path is None else path.cost,
                "path": None if path is None else list(path.vertices),
            }
        )
    return {"source": table.source, "vertices": vertices}
