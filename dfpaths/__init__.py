"""dfpaths: depth-first reachability and paths in undirected graphs.

Primary API:
    DepthFirstPaths (alias PathFinder) - One search from a source vertex,
        then has_path_to() / path_to() queries
    Graph - Undirected graph over vertices 0..V-1
    AdjacencyOrder - Neighbor ordering of a Graph
    load_graph(), read_graph() - Parse the V/E/edge-pairs text format
    from_networkx(), to_networkx() - Convert NetworkX graphs

Example:
    from dfpaths import DepthFirstPaths, Graph

    g = Graph(6)
    for v, w in [(0, 2), (0, 1), (0, 5), (1, 2), (2, 3), (2, 4), (3, 5), (3, 4)]:
        g.add_edge(v, w)

    dfs = DepthFirstPaths(g, 0)
    dfs.has_path_to(4)   # True
    dfs.path_to(4)       # [0, 2, 3, 4]
"""

from __future__ import annotations

from dfpaths import cli, logging
from dfpaths._version import __version__
from dfpaths.graph import Graph, GraphLike, InvalidVertexError
from dfpaths.io import GraphFormatError, graph_to_lines, load_graph, read_graph
from dfpaths.nx import NodeMap, from_networkx, to_networkx
from dfpaths.paths import DepthFirstPaths, PathFinder
from dfpaths.types import AdjacencyOrder

__all__ = [
    # Version
    "__version__",
    # Core
    "DepthFirstPaths",
    "PathFinder",
    "InvalidVertexError",
    # Graph
    "Graph",
    "GraphLike",
    "AdjacencyOrder",
    # IO
    "GraphFormatError",
    "load_graph",
    "read_graph",
    "graph_to_lines",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
