"""Base classes for graph traversal algorithms."""

from typing import Any, Optional, Protocol, Sequence

from simplegraph.core.exceptions import ConfigurationError
from simplegraph.core.models import Edge


class GraphView(Protocol):
    """Read-only, index-based access to a graph store."""

    @property
    def node_count(self) -> int:
        ...

    def get_node_index(self, key: Any) -> Optional[int]:
        ...

    def key_at(self, index: int) -> Any:
        ...

    def out_edges(self, index: int) -> Sequence[Edge]:
        ...


class GraphAlgorithm:
    """Base class for algorithms that read a graph store."""

    #: strategy names accepted by the concrete algorithm
    strategies: Sequence[str] = ()

    def __init__(self, graph: GraphView, strategy: Optional[str] = None):
        """Initialize algorithm with graph and strategy."""
        if strategy is None:
            strategy = self.strategies[0]
        if strategy not in self.strategies:
            raise ConfigurationError(
                f"Unknown strategy '{strategy}'. Must be one of: {', '.join(self.strategies)}"
            )
        self.graph = graph
        self.strategy = strategy
