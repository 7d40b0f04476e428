"""Read and write graphs in the classic ``V``/``E``/edge-pairs text format.

The format is a whitespace separated token stream::

    6          # number of vertices V
    8          # number of edges E
    0 5        # E pairs "v w", one undirected edge each
    2 4
    ...

Tokens may be split across lines arbitrarily. Blank lines, lines starting
with the configured comment prefix, and trailing ``#`` comments are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from dfpaths.config import IO_CONFIG
from dfpaths.graph import Graph
from dfpaths.logging import get_logger
from dfpaths.types import AdjacencyOrder

logger = get_logger(__name__)


class GraphFormatError(ValueError):
    """Raised when a graph description cannot be parsed."""


def _tokens(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, token)`` for every token outside comments."""
    prefix = IO_CONFIG.comment_prefix
    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(prefix):
            continue
        stripped = stripped.split(prefix, 1)[0]
        for token in stripped.split():
            yield lineno, token


def _next_int(tokens: Iterator[Tuple[int, str]], what: str) -> int:
    try:
        lineno, token = next(tokens)
    except StopIteration:
        raise GraphFormatError(f"Unexpected end of input while reading {what}") from None
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(
            f"Line {lineno}: expected integer for {what}, got '{token}'"
        ) from None


def read_graph(
    lines: Iterable[str], order: Optional[AdjacencyOrder] = None
) -> Graph:
    """Build a `Graph` from lines in the ``V``/``E``/pairs format.

    Args:
        lines: Iterable of text lines (a list, an open file, ...).
        order: Neighbor ordering for the new graph. Defaults to
            ``IO_CONFIG.default_order``.

    Returns:
        The parsed graph.

    Raises:
        GraphFormatError: If a count or endpoint is missing or not an integer,
            or if a count is negative.
        InvalidVertexError: If an edge endpoint is out of range.
    """
    if order is None:
        order = IO_CONFIG.default_order

    tokens = _tokens(lines)
    vertex_count = _next_int(tokens, "number of vertices")
    if vertex_count < 0:
        raise GraphFormatError(
            f"Number of vertices must be non-negative, got {vertex_count}"
        )
    edge_count = _next_int(tokens, "number of edges")
    if edge_count < 0:
        raise GraphFormatError(f"Number of edges must be non-negative, got {edge_count}")

    graph = Graph(vertex_count, order=order)
    for i in range(edge_count):
        v = _next_int(tokens, f"edge {i} source")
        w = _next_int(tokens, f"edge {i} target")
        graph.add_edge(v, w)

    leftover = next(tokens, None)
    if leftover is not None:
        logger.warning(
            "Ignoring trailing input after %d edges (line %d)", edge_count, leftover[0]
        )

    logger.debug(
        "Parsed graph with %d vertices and %d edges (%s order)",
        vertex_count,
        edge_count,
        AdjacencyOrder(order).name,
    )
    return graph


def load_graph(
    path: Union[str, Path], order: Optional[AdjacencyOrder] = None
) -> Graph:
    """Read a graph description file.

    Args:
        path: File to read (UTF-8).
        order: Neighbor ordering, see `read_graph`.

    Returns:
        The parsed graph.
    """
    path = Path(path)
    logger.debug("Loading graph from %s", path)
    with path.open("r", encoding="utf-8") as fh:
        return read_graph(fh, order=order)


def graph_to_lines(graph: Graph) -> List[str]:
    """Serialize ``graph`` into the ``V``/``E``/pairs format.

    Returns:
        Lines without trailing newlines; ``read_graph`` accepts them back.
    """
    edges = list(graph.edges())
    lines = [str(graph.vertex_count()), str(len(edges))]
    lines.extend(f"{v} {w}" for v, w in edges)
    return lines
