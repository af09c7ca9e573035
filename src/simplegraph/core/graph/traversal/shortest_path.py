"""
Single-source, single-destination shortest path search.

The search is Dijkstra's algorithm over the store's index arena. Every node
starts with an infinite tentative weight except the source, which starts at
zero. Nodes are finalised in order of increasing weight, ties going to the
lowest index, and each finalised node relaxes its outgoing edges. The search
stops as soon as the destination is finalised; the path is then read back
through the parent pointers.
"""

import logging
from typing import Any, List, Optional, Tuple

from simplegraph.core.models import PathResult, TentativeWeight
from .base import GraphAlgorithm
from .utils import OPEN_SETS, reconstruct_path

logger = logging.getLogger(__name__)


class ShortestPathFinder(GraphAlgorithm):
    """
    Minimum-weight path finder.

    Strategies:
        scan: linear scan of the open set for every selection
        heap: binary heap with lazy deletion

    Both strategies return identical results, including on ties.

    Example:
        >>> finder = ShortestPathFinder(graph, strategy="heap")
        >>> finder.find_path("A", "C")
        PathResult(cost=3, path=['A', 'B', 'C'])
    """

    strategies = tuple(OPEN_SETS)

    def find_path(self, from_key: Any, to_key: Any) -> Optional[PathResult]:
        """
        Find the minimum-weight path between two keys.

        Args:
            from_key: Key of the source node
            to_key: Key of the destination node

        Returns:
            Optional[PathResult]: Cost and key path, or None if either key is
            unknown or the destination cannot be reached
        """
        source = self.graph.get_node_index(from_key)
        target = self.graph.get_node_index(to_key)
        if source is None or target is None:
            return None

        found = self.find_path_indices(source, target)
        if found is None:
            return None
        cost, indices = found
        return PathResult(cost, [self.graph.key_at(index) for index in indices])

    def find_path_indices(self, source: int, target: int) -> Optional[Tuple[int, List[int]]]:
        """
        Run the search between two node indices.

        Returns:
            ``(cost, indices)`` or None if ``target`` is unreachable
        """
        size = self.graph.node_count
        distance: List[TentativeWeight] = [TentativeWeight.infinite()] * size
        distance[source] = TentativeWeight.of(0)
        parent: List[Optional[int]] = [None] * size
        open_set = OPEN_SETS[self.strategy](distance)

        finalised = 0
        while True:
            current = open_set.pop_min()
            if current is None:
                logger.debug("Open set exhausted after %d node(s), no path", finalised)
                return None
            finalised += 1

            current_weight = distance[current]
            if current == target:
                if current_weight.is_infinite:
                    return None
                break
            if current_weight.is_infinite:
                # every node still open is unreachable as well
                continue

            for edge in self.graph.out_edges(current):
                candidate = current_weight + edge.weight
                if candidate < distance[edge.target]:
                    distance[edge.target] = candidate
                    parent[edge.target] = current
                    open_set.update(edge.target)

        path = reconstruct_path(parent, source, target)
        assert path, "parent chain does not reach the source"
        logger.debug(
            "Shortest path %d -> %d: cost %s over %d hop(s), %d node(s) finalised",
            source,
            target,
            distance[target].value,
            len(path) - 1,
            finalised,
        )
        return distance[target].value, path
