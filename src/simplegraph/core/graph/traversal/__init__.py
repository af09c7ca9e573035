"""
Graph traversal algorithms: bounded reachability and shortest paths.
"""

from .base import GraphAlgorithm, GraphView
from .reachability import ReachabilityFinder
from .shortest_path import ShortestPathFinder
from .utils import HeapOpenSet, OpenSet, ScanOpenSet, reconstruct_path

__all__ = [
    "GraphAlgorithm",
    "GraphView",
    "ReachabilityFinder",
    "ShortestPathFinder",
    "OpenSet",
    "ScanOpenSet",
    "HeapOpenSet",
    "reconstruct_path",
]
