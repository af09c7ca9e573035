"""Core graph functionality."""

from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .models import Edge, EdgeUpdate, PathResult, TentativeWeight
from .config import GraphConfig
from .graph import BaseGraph, GraphEvent, SimpleGraph

__all__ = [
    "BaseGraph",
    "ConfigurationError",
    "Edge",
    "EdgeUpdate",
    "GraphConfig",
    "GraphEvent",
    "GraphOperationError",
    "NodeNotFoundError",
    "PathResult",
    "ResourceNotFoundError",
    "SimpleGraph",
    "TentativeWeight",
    "ValidationError",
]
