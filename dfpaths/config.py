"""Configuration classes for dfpaths components."""

from dataclasses import dataclass

from dfpaths.types import AdjacencyOrder


@dataclass
class ReportConfig:
    """Text conventions used by the report formatters."""

    # Joins the vertices of one path: 0-2-3
    path_separator: str = "-"

    # Joins the neighbors of one vertex in the adjacency listing: 2->1->5
    adjacency_separator: str = "->"

    # Printed in place of a path for unreachable vertices
    not_connected: str = "not connected"

    # Minimum width of each column in the marked/edgeTo table
    min_column_width: int = 6


@dataclass
class GraphIOConfig:
    """Defaults for reading graph description files."""

    # Lines starting with this prefix are skipped
    comment_prefix: str = "#"

    # Neighbor ordering used when the caller does not choose one; LIFO
    # matches the bag-backed adjacency lists the file format comes from
    default_order: AdjacencyOrder = AdjacencyOrder.LIFO


# Global configuration instances
REPORT_CONFIG = ReportConfig()
IO_CONFIG = GraphIOConfig()
