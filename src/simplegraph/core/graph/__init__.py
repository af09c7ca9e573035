"""
Graph module for the simplegraph library.

This module provides the complete graph implementation:
- Node/edge store over an index arena
- Bounded-hop reachability and shortest path queries
- Event system for graph modifications
- Caching of query results until the next modification
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..config import GraphConfig
from ..models import Edge, EdgeUpdate, PathResult
from ...infrastructure.cache import LRUCache
from .base import BaseGraph
from .events import GraphEvent, GraphEventListener, GraphEventManager
from .traversal import ReachabilityFinder, ShortestPathFinder
from .traversal.reachability import validate_degree

logger = logging.getLogger(__name__)


class SimpleGraph:
    """
    High-level graph interface combining all components.

    The store is created empty. Mutations (``set_nodes``, ``set_edges``) need
    exclusive access to the instance; queries (``connected``,
    ``shortest_path``) only read it. There is no internal locking, so hosts
    sharing an instance between threads must guard it themselves.

    Example:
        >>> graph = SimpleGraph()
        >>> graph.set_nodes(["A", "B", "C"])
        >>> graph.set_edges("A", [(1, "B")])
        EdgeUpdate(index=0, stored=1, dropped=0, created=False)
        >>> graph.set_edges("B", [(2, "C")])
        EdgeUpdate(index=1, stored=1, dropped=0, created=False)
        >>> graph.shortest_path("A", "C")
        PathResult(cost=3, path=['A', 'B', 'C'])
        >>> graph.connected("A", 1)
        {'B'}
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config (Optional[GraphConfig]): Settings; defaults when omitted
        """
        self.config = config if config is not None else GraphConfig()
        self._base_graph = BaseGraph()
        self.event_manager = GraphEventManager()
        self._cache: LRUCache[Any] = LRUCache(max_size=self.config.cache_size)
        self._reachability = ReachabilityFinder(
            self._base_graph, strategy=self.config.reachability_strategy
        )
        self._shortest_path = ShortestPathFinder(
            self._base_graph, strategy=self.config.shortest_path_strategy
        )
        logger.debug(
            "Graph created (shortest path: %s, reachability: %s, cache size: %d)",
            self.config.shortest_path_strategy,
            self.config.reachability_strategy,
            self.config.cache_size,
        )

    @classmethod
    def from_adjacency(
        cls,
        nodes: Iterable[Any],
        edges: Dict[Any, Iterable[Tuple[int, Any]]],
        config: Optional[GraphConfig] = None,
    ) -> "SimpleGraph":
        """
        Create a graph from a node list and a mapping of outgoing edges.

        Args:
            nodes: Node keys in index order
            edges: ``from_key -> [(weight, to_key), ...]``
            config: Optional settings

        Returns:
            SimpleGraph: New graph instance
        """
        graph = cls(config=config)
        graph.set_nodes(nodes)
        for from_key, row in edges.items():
            graph.set_edges(from_key, row)
        return graph

    # Mutations

    def set_nodes(self, nodes: Iterable[Any]) -> None:
        """
        Replace the node registry, clearing all edges.

        Args:
            nodes (Iterable[Any]): The new node keys, in index order
        """
        self._base_graph.set_nodes(nodes)
        self._after_mutation()
        self.event_manager.notify(
            GraphEvent.NODES_REPLACED, {"node_count": self._base_graph.node_count}
        )

    def set_edges(self, from_key: Any, edges: Iterable[Tuple[int, Any]]) -> EdgeUpdate:
        """
        Replace the outgoing edges of ``from_key``, creating it if absent.

        Edges to unregistered keys are dropped and counted.

        Args:
            from_key (Any): Key of the node whose edges are replaced
            edges (Iterable[Tuple[int, Any]]): ``(weight, to_key)`` pairs

        Returns:
            EdgeUpdate: Index of the node and stored/dropped counts

        Raises:
            ValidationError: If a weight is negative or not an integer
        """
        update = self._base_graph.set_edges(from_key, edges)
        self._after_mutation()
        if update.created:
            self.event_manager.notify(
                GraphEvent.NODE_CREATED, {"key": from_key, "index": update.index}
            )
        self.event_manager.notify(GraphEvent.EDGES_SET, {"key": from_key, "update": update})
        return update

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self.set_nodes([])

    def _after_mutation(self) -> None:
        self._cache.clear()
        if self.config.check_invariants:
            self._base_graph.check_invariants()

    # Queries

    def connected(self, from_key: Any, degree: int) -> Optional[Set[Any]]:
        """
        Get the keys reachable from ``from_key`` within ``degree`` hops.

        Args:
            from_key (Any): Key of the start node
            degree (int): Hop budget, zero or more

        Returns:
            Optional[Set[Any]]: Reachable keys, or None if ``from_key`` is unknown

        Raises:
            ValidationError: If ``degree`` is negative or not an integer
        """
        validate_degree(degree)
        cache_key = ("connected", from_key, degree)
        cached = self._cache_get(cache_key)
        if cached is not None:
            return set(cached)

        result = self._reachability.connected(from_key, degree)
        if result is not None:
            self._cache_put(cache_key, frozenset(result))
        return result

    def shortest_path(self, from_key: Any, to_key: Any) -> Optional[PathResult]:
        """
        Find the minimum-weight path from ``from_key`` to ``to_key``.

        Args:
            from_key (Any): Key of the source node
            to_key (Any): Key of the destination node

        Returns:
            Optional[PathResult]: ``(cost, path)``, or None if either key is
            unknown or the destination is unreachable
        """
        cache_key = ("shortest_path", from_key, to_key)
        cached = self._cache_get(cache_key)
        if cached is not None:
            return cached.copy()

        result = self._shortest_path.find_path(from_key, to_key)
        if result is not None:
            self._cache_put(cache_key, result.copy())
        return result

    def _cache_get(self, cache_key: Tuple[Any, ...]) -> Any:
        if self._cache.max_size == 0 or not _is_hashable(cache_key):
            return None
        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug("Cache hit for %s", cache_key[0])
        return cached

    def _cache_put(self, cache_key: Tuple[Any, ...], value: Any) -> None:
        if self._cache.max_size == 0 or not _is_hashable(cache_key):
            return
        self._cache.put(cache_key, value)

    def get_cache_stats(self) -> Dict[str, float]:
        """Get statistics about the query cache."""
        return self._cache.get_metrics()

    def clear_cache(self) -> None:
        """Clear the query cache."""
        self._cache.clear()

    # Store accessors

    def get_node_index(self, key: Any) -> Optional[int]:
        """Get the index of the first node equal to ``key``, or None."""
        return self._base_graph.get_node_index(key)

    def require_node_index(self, key: Any) -> int:
        """Get the index of ``key``, raising NodeNotFoundError if absent."""
        return self._base_graph.require_node_index(key)

    def get_nodes(self) -> List[Any]:
        return self._base_graph.get_nodes()

    def get_edges(self, key: Any) -> Optional[List[Edge]]:
        return self._base_graph.get_edges(key)

    def key_at(self, index: int) -> Any:
        return self._base_graph.key_at(index)

    def out_edges(self, index: int) -> Sequence[Edge]:
        return self._base_graph.out_edges(index)

    def has_node(self, key: Any) -> bool:
        return self._base_graph.has_node(key)

    @property
    def node_count(self) -> int:
        return self._base_graph.node_count

    @property
    def edge_count(self) -> int:
        return self._base_graph.edge_count

    def check_invariants(self) -> None:
        """Assert the store invariants, see :meth:`BaseGraph.check_invariants`."""
        self._base_graph.check_invariants()

    # Events

    def add_listener(self, listener: GraphEventListener) -> None:
        """Add a listener for graph events."""
        self.event_manager.add_listener(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Remove a graph event listener."""
        self.event_manager.remove_listener(listener)

    def clear_listeners(self) -> None:
        """Remove all graph event listeners."""
        self.event_manager.clear_listeners()

    def __len__(self) -> int:
        return self._base_graph.node_count

    def __contains__(self, key: Any) -> bool:
        return self._base_graph.has_node(key)

    def __repr__(self) -> str:
        return f"SimpleGraph(nodes={self.node_count}, edges={self.edge_count})"


def _is_hashable(value: Tuple[Any, ...]) -> bool:
    # a tuple is hashable only if every element is
    try:
        hash(value)
    except TypeError:
        return False
    return True


__all__ = [
    "BaseGraph",
    "SimpleGraph",
    "GraphEvent",
    "GraphEventListener",
    "GraphEventManager",
    "ReachabilityFinder",
    "ShortestPathFinder",
]
