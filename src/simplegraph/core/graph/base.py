"""
Core node/edge store backed by an index arena.

This module provides the BaseGraph class: an ordered registry of node keys and
an adjacency structure holding one row of outgoing edges per registry index.
Edges refer to their targets by index, so traversal never touches keys.

The implementation is pure, focusing only on the store itself. Events,
caching and query dispatch live in :class:`simplegraph.core.graph.SimpleGraph`.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..exceptions import NodeNotFoundError
from ..models.edge import Edge, EdgeUpdate, validate_weight

logger = logging.getLogger(__name__)


@dataclass
class BaseGraph:
    """
    Node registry plus adjacency rows, kept in lock-step.

    Keys are opaque and compared by equality only. They need not be unique:
    lookups return the first matching position, and the host decides whether
    duplicates are meaningful.

    Attributes:
        _nodes (List[Any]): Node keys; position is the node index
        _adjacency (List[Tuple[Edge, ...]]): Outgoing edges per node index
    """

    _nodes: List[Any] = field(default_factory=list)
    _adjacency: List[Tuple[Edge, ...]] = field(default_factory=list)

    def set_nodes(self, nodes: Iterable[Any]) -> None:
        """
        Replace the node registry.

        Every previously stored edge is discarded and each node starts with
        an empty row.

        Args:
            nodes (Iterable[Any]): The new node keys, in index order
        """
        self._nodes = list(nodes)
        self._adjacency = [() for _ in self._nodes]
        logger.debug("Registry replaced with %d node(s)", len(self._nodes))

    def set_edges(self, from_key: Any, edges: Iterable[Tuple[int, Any]]) -> EdgeUpdate:
        """
        Replace the outgoing edges of one node.

        ``from_key`` is appended to the registry, with an empty row, if it is
        not registered yet. Edges whose target key is not registered are
        dropped; the count is reported in the returned update.

        Args:
            from_key (Any): Key of the node whose row is replaced
            edges (Iterable[Tuple[int, Any]]): ``(weight, target_key)`` pairs

        Returns:
            EdgeUpdate: Index of the node and stored/dropped counts

        Raises:
            ValidationError: If any weight is negative or not an integer. The
                store is left unchanged.
        """
        pairs = [(validate_weight(weight), to_key) for weight, to_key in edges]

        index = self.get_node_index(from_key)
        created = index is None
        if index is None:
            self._nodes.append(from_key)
            self._adjacency.append(())
            index = len(self._nodes) - 1

        row: List[Edge] = []
        dropped = 0
        for weight, to_key in pairs:
            target = self.get_node_index(to_key)
            if target is None:
                dropped += 1
                continue
            row.append(Edge(weight, target))
        self._adjacency[index] = tuple(row)

        logger.debug(
            "Set %d edge(s) on node %d (%d dropped%s)",
            len(row),
            index,
            dropped,
            ", node created" if created else "",
        )
        return EdgeUpdate(index=index, stored=len(row), dropped=dropped, created=created)

    def get_node_index(self, key: Any) -> Optional[int]:
        """
        Get the index of the first node equal to ``key``.

        Args:
            key (Any): The node key to look up

        Returns:
            Optional[int]: The index, or None if the key is not registered
        """
        for index, node in enumerate(self._nodes):
            if node == key:
                return index
        return None

    def require_node_index(self, key: Any) -> int:
        """
        Get the index of ``key``, raising if it is not registered.

        Raises:
            NodeNotFoundError: If the key is not registered
        """
        index = self.get_node_index(key)
        if index is None:
            raise NodeNotFoundError(f"Node '{key}' not found in the graph")
        return index

    def key_at(self, index: int) -> Any:
        return self._nodes[index]

    def out_edges(self, index: int) -> Sequence[Edge]:
        """Get the stored row of a node index. Rows are immutable tuples."""
        return self._adjacency[index]

    def get_nodes(self) -> List[Any]:
        """Get a copy of the registry in index order."""
        return list(self._nodes)

    def get_edges(self, key: Any) -> Optional[List[Edge]]:
        """
        Get the outgoing edges of a node.

        Returns:
            Optional[List[Edge]]: A copy of the node's row, or None if the key
            is not registered
        """
        index = self.get_node_index(key)
        if index is None:
            return None
        return list(self._adjacency[index])

    def has_node(self, key: Any) -> bool:
        return self.get_node_index(key) is not None

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(row) for row in self._adjacency)

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self.set_nodes([])

    def check_invariants(self) -> None:
        """
        Assert the structural invariants of the store.

        Raises:
            AssertionError: If the adjacency structure and the registry are
                out of step or an edge points outside the registry
        """
        assert len(self._adjacency) == len(self._nodes), (
            f"adjacency has {len(self._adjacency)} row(s) for {len(self._nodes)} node(s)"
        )
        for index, row in enumerate(self._adjacency):
            for edge in row:
                assert 0 <= edge.target < len(self._nodes), (
                    f"edge from node {index} targets missing index {edge.target}"
                )

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: Any) -> bool:
        return self.has_node(key)
