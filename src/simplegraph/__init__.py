"""
simplegraph - In-memory weighted directed graphs

This package provides a small graph store for host programs that need ad-hoc
connectivity and distance queries without a persistent store. It includes:

- A node/edge store over an index arena
- Bounded-hop reachability queries
- Dijkstra shortest paths with deterministic tie-breaking
- Query result caching and mutation events
"""

__version__ = "0.1.0"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("simplegraph requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig
from .core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    NodeNotFoundError,
    ValidationError,
)
from .core.graph import SimpleGraph
from .core.models import Edge, EdgeUpdate, PathResult, TentativeWeight

__all__ = [
    "SimpleGraph",
    "GraphConfig",
    "Edge",
    "EdgeUpdate",
    "PathResult",
    "TentativeWeight",
    "ConfigurationError",
    "GraphOperationError",
    "NodeNotFoundError",
    "ValidationError",
]
