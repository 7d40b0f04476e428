"""NetworkX graph conversion utilities.

Convert undirected NetworkX graphs with arbitrary hashable node names into the
integer-vertex `Graph` used by dfpaths, and back.

Example:
    >>> import networkx as nx
    >>> from dfpaths.nx import from_networkx
    >>> from dfpaths import DepthFirstPaths
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B")
    >>> G.add_edge("B", "C")
    >>> graph, node_map = from_networkx(G)
    >>> dfs = DepthFirstPaths(graph, node_map.to_index["A"])
    >>> [node_map.to_name[v] for v in dfs.path_to(node_map.to_index["C"])]
    ['A', 'B', 'C']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from dfpaths.graph import Graph
from dfpaths.types import AdjacencyOrder

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex ids.

    Attributes:
        to_index: Maps original node names to vertex ids.
        to_name: Maps vertex ids back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in vertex-id order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, path: Optional[List[int]]) -> Optional[List[Hashable]]:
        """Translate a vertex path back to node names (None stays None)."""
        if path is None:
            return None
        return [self.to_name[v] for v in path]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    order: AdjacencyOrder = AdjacencyOrder.INSERTION,
    sort_nodes: bool = False,
) -> Tuple[Graph, NodeMap]:
    """Convert an undirected NetworkX graph to a dfpaths `Graph`.

    Nodes are numbered in ``G.nodes()`` order, or sorted by ``str`` when
    ``sort_nodes`` is True. Edges are added in ``G.edges()`` order; parallel
    edges of a MultiGraph are kept.

    Args:
        G: ``networkx.Graph`` or ``networkx.MultiGraph``.
        order: Neighbor ordering of the resulting graph.
        sort_nodes: Number nodes by their sorted string form.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not an undirected NetworkX graph.
        ValueError: If G has no nodes.
    """
    import networkx as nx

    if not isinstance(G, (nx.Graph, nx.MultiGraph)) or G.is_directed():
        raise TypeError(
            f"Expected undirected NetworkX graph (Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    node_names = list(G.nodes())
    if sort_nodes:
        node_names.sort(key=str)
    node_map = NodeMap.from_names(node_names)

    graph = Graph(len(node_names), order=order)
    for u, v in G.edges():
        graph.add_edge(node_map.to_index[u], node_map.to_index[v])

    return graph, node_map


def to_networkx(graph: Graph, node_map: Optional[NodeMap] = None) -> "nx.MultiGraph":
    """Convert a dfpaths `Graph` to a ``networkx.MultiGraph``.

    Args:
        graph: Graph to convert.
        node_map: Optional mapping to restore node names; vertex ids are used
            when omitted.

    Returns:
        A MultiGraph with one edge per undirected edge of ``graph``.
    """
    import networkx as nx

    def name(v: int) -> Hashable:
        return node_map.to_name[v] if node_map is not None else v

    G = nx.MultiGraph()
    G.add_nodes_from(name(v) for v in range(graph.vertex_count()))
    for v, w in graph.edges():
        G.add_edge(name(v), name(w))
    return G
