"""Result model for shortest path queries."""

from typing import Any, List, NamedTuple


class PathResult(NamedTuple):
    """
    A minimum-cost path between two nodes.

    Being a named tuple, a result compares equal to a plain ``(cost, path)``
    tuple and unpacks the same way.

    Attributes:
        cost (int): Sum of the edge weights along the path
        path (List[Any]): Node keys from source to destination, inclusive
    """

    cost: int
    path: List[Any]

    @property
    def source(self) -> Any:
        return self.path[0]

    @property
    def destination(self) -> Any:
        return self.path[-1]

    @property
    def hops(self) -> int:
        """Number of edges followed."""
        return len(self.path) - 1

    def copy(self) -> "PathResult":
        """Return a result whose path list can be mutated independently."""
        return PathResult(self.cost, list(self.path))
