"""Base types and enums shared across dfpaths."""

from __future__ import annotations

from enum import IntEnum

#: Vertex identifier; always an int in ``[0, V)``.
Vertex = int


class AdjacencyOrder(IntEnum):
    """Order in which a graph yields the neighbors of a vertex.

    The depth-first finder follows this order, so it decides which
    predecessor is recorded when several paths reach the same vertex.
    """

    #: Neighbors in the order their edges were added.
    INSERTION = 1
    #: Most recently added neighbor first (classic bag-backed adjacency list).
    LIFO = 2
    #: Neighbors in ascending vertex id.
    SORTED = 3

    @classmethod
    def from_string(cls, value: str) -> "AdjacencyOrder":
        """Parse a string into an AdjacencyOrder enum value.

        Args:
            value: Case-insensitive member name (e.g., "lifo", "SORTED").

        Returns:
            The corresponding AdjacencyOrder member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid adjacency order '{value}'. Valid values are: {valid}"
            ) from None
