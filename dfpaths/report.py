"""Plain-text reports over a graph and a finished depth-first search.

Every function here only reads from the graph or finder it is given.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from dfpaths.config import REPORT_CONFIG
from dfpaths.graph import GraphLike
from dfpaths.paths import NO_PREDECESSOR, DepthFirstPaths


def format_table(headers: List[str], rows: List[List[Any]], min_width: int = 8) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers.
        rows: Data rows; cells are converted with ``str``.
        min_width: Minimum column width.

    Returns:
        Formatted table string, or "" when there are no rows.
    """
    if not rows:
        return ""

    all_data = [[str(h) for h in headers]] + [[str(c) for c in row] for row in rows]
    col_widths = [
        max(max(len(row[i]) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        ).rstrip()

    lines = [format_row(all_data[0])]
    lines.append("-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in all_data[1:])
    return "\n".join(lines)


def format_path(path: Optional[Sequence[int]], separator: Optional[str] = None) -> str:
    """Join a path as ``0-2-3``; an absent path renders as the not-connected label."""
    if path is None:
        return REPORT_CONFIG.not_connected
    if separator is None:
        separator = REPORT_CONFIG.path_separator
    return separator.join(str(v) for v in path)


def format_paths(finder: DepthFirstPaths) -> str:
    """One line per vertex: ``"s to v:  <path>"`` or ``"s to v:  not connected"``."""
    s = finder.source
    lines = [
        f"{s} to {v}:  {format_path(finder.path_to(v))}"
        for v in range(finder.vertex_count)
    ]
    return "\n".join(lines)


def format_adjacency(graph: GraphLike) -> str:
    """Adjacency listing with one ``v: a->b->c`` line per vertex."""
    link = REPORT_CONFIG.adjacency_separator
    lines = ["Adjacency List:", "---------------"]
    for v in range(graph.vertex_count()):
        lines.append(f"{v}: " + link.join(str(w) for w in graph.neighbors(v)))
    return "\n".join(lines)


def format_state(finder: DepthFirstPaths) -> str:
    """Table of the per-vertex search state (``marked`` and ``edgeTo``).

    Vertices without a predecessor (the source and unreached vertices) show
    ``-`` in the ``edgeTo`` column.
    """
    visited = finder.visited
    edge_to = finder.predecessors
    rows = []
    for v in range(finder.vertex_count):
        pred = int(edge_to[v])
        rows.append(
            [
                v,
                str(bool(visited[v])).lower(),
                "-" if pred == NO_PREDECESSOR else pred,
            ]
        )
    return format_table(
        ["vertex", "marked", "edgeTo"], rows, min_width=REPORT_CONFIG.min_column_width
    )
