"""Depth-first reachability and path index from a single source vertex.

`DepthFirstPaths` runs one depth-first search in its constructor and answers
``has_path_to`` / ``path_to`` queries from the recorded state afterwards.
The search visits each vertex at most once, so construction takes
O(V + E) time; ``has_path_to`` is O(1) and ``path_to`` is proportional to the
length of the returned path. Paths are not necessarily shortest.

Example:
    >>> from dfpaths import Graph, DepthFirstPaths
    >>> g = Graph(4)
    >>> g.add_edge(0, 1)
    >>> g.add_edge(1, 2)
    >>> dfs = DepthFirstPaths(g, 0)
    >>> dfs.path_to(2)
    [0, 1, 2]
    >>> dfs.has_path_to(3)
    False
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from dfpaths.graph import GraphLike, validate_vertex
from dfpaths.logging import get_logger
from dfpaths.types import Vertex

logger = get_logger(__name__)

#: Predecessor value for the source and for vertices never reached.
NO_PREDECESSOR = -1


class DepthFirstPaths:
    """Paths from a source vertex to every vertex reachable from it.

    The exploration is pre-order depth-first: for each unvisited neighbor
    ``w`` of ``v``, in the order ``graph.neighbors(v)`` yields them, ``v`` is
    recorded as the predecessor of ``w`` and the search continues from ``w``
    before returning to ``v``'s remaining neighbors. It runs on an explicit
    stack of ``(vertex, neighbor iterator)`` frames, which records exactly the
    predecessors a recursive search would, without a recursion depth limit.

    State is held in two fixed-size numpy buffers indexed by vertex id and is
    never mutated after ``__init__`` returns, so a constructed instance may be
    queried from several threads.

    Attributes:
        source: The source vertex.
        vertex_count: Number of vertices in the searched graph.
    """

    def __init__(self, graph: GraphLike, source: Vertex) -> None:
        """Search ``graph`` from ``source``.

        Args:
            graph: Any object exposing ``vertex_count()`` and ``neighbors(v)``.
            source: Source vertex id.

        Raises:
            InvalidVertexError: If ``source`` is not in ``[0, V)``, or if the
                graph yields a neighbor id outside that range.
            TypeError: If ``source`` is not an integer.
        """
        n = int(graph.vertex_count())
        self._source = validate_vertex(source, n)
        self._vertex_count = n

        self._visited = np.zeros(n, dtype=bool)
        self._edge_to = np.full(n, NO_PREDECESSOR, dtype=np.int64)
        self._search(graph)

        self._visited.flags.writeable = False
        self._edge_to.flags.writeable = False
        logger.debug(
            "Depth-first search from %d reached %d of %d vertices",
            self._source,
            self.count(),
            n,
        )

    def _search(self, graph: GraphLike) -> None:
        visited = self._visited
        edge_to = self._edge_to
        n = self._vertex_count

        visited[self._source] = True
        stack: List[Tuple[int, Iterator[Vertex]]] = [
            (self._source, iter(graph.neighbors(self._source)))
        ]
        while stack:
            v, pending = stack[-1]
            for w in pending:
                w = validate_vertex(w, n)
                if not visited[w]:
                    edge_to[w] = v
                    visited[w] = True
                    # Descend now; v's iterator resumes when w's frame is done
                    stack.append((w, iter(graph.neighbors(w))))
                    break
            else:
                stack.pop()

    @property
    def source(self) -> int:
        return self._source

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def visited(self) -> np.ndarray:
        """Read-only view of the visited flags, indexed by vertex id."""
        return self._visited.view()

    @property
    def predecessors(self) -> np.ndarray:
        """Read-only view of the predecessor ids, indexed by vertex id.

        Entries are ``NO_PREDECESSOR`` (-1) for the source and for vertices
        that were not reached.
        """
        return self._edge_to.view()

    def has_path_to(self, v: Vertex) -> bool:
        """Return True if there is a path from the source to ``v``.

        Raises:
            InvalidVertexError: If ``v`` is not in ``[0, V)``.
        """
        return bool(self._visited[validate_vertex(v, self._vertex_count)])

    def path_to(self, v: Vertex) -> Optional[List[int]]:
        """Return a path from the source to ``v``, or None if there is none.

        The path starts with the source and ends with ``v``. Each call builds
        a new list.

        Raises:
            InvalidVertexError: If ``v`` is not in ``[0, V)``.
        """
        v = validate_vertex(v, self._vertex_count)
        if not self._visited[v]:
            return None
        path = [v]
        x = v
        while x != self._source:
            x = int(self._edge_to[x])
            path.append(x)
        path.reverse()
        return path

    def reachable(self) -> List[int]:
        """Return the reachable vertices, source included, in ascending order."""
        return [int(v) for v in np.flatnonzero(self._visited)]

    def count(self) -> int:
        """Return the number of reachable vertices, source included."""
        return int(np.count_nonzero(self._visited))

    def paths(self) -> Dict[int, List[int]]:
        """Return a mapping of every reachable vertex to its path."""
        result: Dict[int, List[int]] = {}
        for v in self.reachable():
            path = self.path_to(v)
            assert path is not None
            result[v] = path
        return result

    def __repr__(self) -> str:
        return (
            f"DepthFirstPaths(source={self._source}, "
            f"reachable={self.count()}/{self._vertex_count})"
        )


#: Alias matching the component name used in the package docs.
PathFinder = DepthFirstPaths
