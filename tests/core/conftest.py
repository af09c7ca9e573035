"""Shared test fixtures."""

from typing import Any, Dict, Iterable, List, Tuple

import pytest

from simplegraph.core.config import GraphConfig
from simplegraph.core.graph import SimpleGraph

STRATEGY_CONFIGS = [
    pytest.param(
        GraphConfig(shortest_path_strategy="scan", reachability_strategy="frontier"),
        id="scan-frontier",
    ),
    pytest.param(
        GraphConfig(shortest_path_strategy="heap", reachability_strategy="memoized"),
        id="heap-memoized",
    ),
    pytest.param(
        GraphConfig(
            shortest_path_strategy="heap", reachability_strategy="frontier", cache_size=0
        ),
        id="heap-frontier-nocache",
    ),
]


def build_graph(
    config: GraphConfig,
    nodes: Iterable[Any],
    edges: Dict[Any, List[Tuple[int, Any]]],
) -> SimpleGraph:
    """Helper function to create a graph from nodes and per-node edge rows."""
    return SimpleGraph.from_adjacency(nodes, edges, config=config)


@pytest.fixture(params=STRATEGY_CONFIGS)
def config(request) -> GraphConfig:
    """Fixture providing each supported strategy combination."""
    return request.param


@pytest.fixture
def chain_graph(config: GraphConfig) -> SimpleGraph:
    """
    Fixture providing a weighted chain:
    A -1-> B -2-> C
    """
    return build_graph(config, ["A", "B", "C"], {"A": [(1, "B")], "B": [(2, "C")]})


@pytest.fixture
def cyclic_graph(config: GraphConfig) -> SimpleGraph:
    """
    Fixture providing a test graph with cycles:
    A -> B -> C -> A
    |         |
    v         v
    D ------> E
    """
    return build_graph(
        config,
        ["A", "B", "C", "D", "E"],
        {
            "A": [(1, "B"), (4, "D")],
            "B": [(1, "C")],
            "C": [(1, "A"), (5, "E")],
            "D": [(1, "E")],
        },
    )


@pytest.fixture
def dense_graph(config: GraphConfig) -> SimpleGraph:
    """Fixture providing a complete directed graph on twelve nodes with self-loops."""
    nodes = list(range(12))
    return build_graph(config, nodes, {n: [(1, m) for m in nodes] for n in nodes})
