"""Undirected graph over integer vertices.

`Graph` is the concrete data source consumed by the depth-first finder. Any
object satisfying `GraphLike` works as well: the finder only calls
``vertex_count()`` and ``neighbors(v)``.
"""

from __future__ import annotations

from bisect import insort
from collections import deque
from numbers import Integral
from typing import Iterator, List, Protocol, Sequence, Tuple, Union

from dfpaths.types import AdjacencyOrder, Vertex


class InvalidVertexError(ValueError):
    """Raised when a vertex id falls outside ``[0, vertex_count)``.

    Attributes:
        vertex: The offending vertex id.
        vertex_count: Number of vertices in the graph it was checked against.
    """

    def __init__(self, vertex: int, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"vertex {vertex} is not between 0 and {vertex_count - 1}")


class GraphLike(Protocol):
    """Minimal read interface the path finder needs from a graph."""

    def vertex_count(self) -> int: ...

    def neighbors(self, v: Vertex) -> Sequence[Vertex]: ...


def validate_vertex(v: Vertex, vertex_count: int) -> int:
    """Return ``v`` as a plain int if it is a valid vertex id.

    Args:
        v: Candidate vertex id.
        vertex_count: Number of vertices; valid ids are ``0..vertex_count-1``.

    Returns:
        ``int(v)``.

    Raises:
        TypeError: If ``v`` is not an integer (``bool`` is rejected too).
        InvalidVertexError: If ``v`` is out of range.
    """
    if isinstance(v, bool) or not isinstance(v, Integral):
        raise TypeError(f"vertex must be an int, got {type(v).__name__}")
    v = int(v)
    if v < 0 or v >= vertex_count:
        raise InvalidVertexError(v, vertex_count)
    return v


_Bucket = Union[List[Vertex], deque]


class Graph:
    """Undirected graph with ``V`` vertices named ``0..V-1``.

    Edges are stored as symmetric adjacency: ``add_edge(v, w)`` appends ``w``
    to ``v``'s neighbors and ``v`` to ``w``'s. Parallel edges and self loops
    are kept (a self loop lists ``v`` twice among its own neighbors).

    The neighbor order is fixed per graph by ``order``:
      - ``INSERTION``: edges in the order they were added.
      - ``LIFO``: most recently added first.
      - ``SORTED``: ascending vertex id.
    """

    def __init__(
        self, vertex_count: int, order: AdjacencyOrder = AdjacencyOrder.INSERTION
    ) -> None:
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, Integral):
            raise TypeError(
                f"vertex_count must be an int, got {type(vertex_count).__name__}"
            )
        if vertex_count < 0:
            raise ValueError(
                f"Number of vertices must be non-negative, got {vertex_count}"
            )
        self._order = AdjacencyOrder(order)
        self._edge_count = 0
        self._adj: List[_Bucket] = [
            deque() if self._order is AdjacencyOrder.LIFO else []
            for _ in range(int(vertex_count))
        ]

    @property
    def order(self) -> AdjacencyOrder:
        return self._order

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return len(self._adj)

    def edge_count(self) -> int:
        """Return the number of undirected edges added so far."""
        return self._edge_count

    def add_edge(self, v: Vertex, w: Vertex) -> None:
        """Add the undirected edge ``v-w``.

        Raises:
            InvalidVertexError: If either endpoint is out of range.
        """
        v = validate_vertex(v, len(self._adj))
        w = validate_vertex(w, len(self._adj))
        self._insert(v, w)
        self._insert(w, v)
        self._edge_count += 1

    def _insert(self, v: int, w: int) -> None:
        bucket = self._adj[v]
        if self._order is AdjacencyOrder.LIFO:
            bucket.appendleft(w)  # type: ignore[union-attr]
        elif self._order is AdjacencyOrder.SORTED:
            insort(bucket, w)  # type: ignore[arg-type]
        else:
            bucket.append(w)

    def neighbors(self, v: Vertex) -> Tuple[Vertex, ...]:
        """Return a snapshot of the vertices adjacent to ``v``.

        Raises:
            InvalidVertexError: If ``v`` is out of range.
        """
        return tuple(self._adj[validate_vertex(v, len(self._adj))])

    def degree(self, v: Vertex) -> int:
        return len(self._adj[validate_vertex(v, len(self._adj))])

    def edges(self) -> Iterator[Tuple[Vertex, Vertex]]:
        """Yield each undirected edge once as ``(v, w)`` with ``v <= w``.

        Self loops are stored twice in the adjacency of their vertex and are
        reported once per loop.
        """
        for v, bucket in enumerate(self._adj):
            self_loops = 0
            for w in bucket:
                if w > v:
                    yield v, w
                elif w == v:
                    self_loops += 1
                    if self_loops % 2 == 0:
                        yield v, v

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={len(self._adj)}, edges={self._edge_count}, "
            f"order={self._order.name})"
        )
