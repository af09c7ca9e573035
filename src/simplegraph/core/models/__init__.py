"""
Core value models for the graph library.

This package provides the small immutable types shared by the node/edge store
and the traversal engines.
"""

from .edge import Edge, EdgeUpdate, validate_weight
from .path import PathResult
from .weight import TentativeWeight

__all__ = [
    # Edge models
    "Edge",
    "EdgeUpdate",
    "validate_weight",
    # Path models
    "PathResult",
    # Distance models
    "TentativeWeight",
]
