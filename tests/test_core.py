"""
Core functionality tests through the top-level package.
"""

import logging

import pytest

import simplegraph
from simplegraph import GraphConfig, PathResult, SimpleGraph


def test_public_exports():
    """Test that the commonly used names are importable from the package."""
    for name in simplegraph.__all__:
        assert hasattr(simplegraph, name)
    assert simplegraph.__version__ == "0.1.0"


def test_chain_scenario():
    """Test nodes [A, B, C] with A -> B (1) and B -> C (2)."""
    graph = SimpleGraph()
    graph.set_nodes(["A", "B", "C"])
    graph.set_edges("A", [(1, "B")])
    graph.set_edges("B", [(2, "C")])

    assert graph.shortest_path("A", "C") == PathResult(3, ["A", "B", "C"])
    assert graph.connected("A", 0) == set()


def test_end_to_end_with_heap_config():
    """Test a full workflow with configuration loaded from a mapping."""
    config = GraphConfig.from_dict(
        {"shortest_path_strategy": "heap", "reachability_strategy": "memoized"}
    )
    graph = SimpleGraph(config)
    graph.set_nodes(["home", "shop", "park", "office"])
    graph.set_edges("home", [(4, "shop"), (1, "park"), (2, "moon")])
    graph.set_edges("park", [(1, "shop")])
    update = graph.set_edges("office", [(3, "home")])

    assert not update.created
    assert graph.shortest_path("office", "shop") == (5, ["office", "home", "park", "shop"])
    assert graph.connected("office", 2) == {"home", "shop", "park"}
    assert graph.shortest_path("shop", "home") is None


def test_mutations_are_logged(caplog):
    """Test that dropped edges are reported at debug level."""
    graph = SimpleGraph()
    graph.set_nodes(["A"])

    with caplog.at_level(logging.DEBUG, logger="simplegraph"):
        graph.set_edges("A", [(1, "B")])

    assert any("1 dropped" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize("keys", [[1, 2, 3], [(0, 0), (0, 1), (1, 1)], ["x", "y", "z"]])
def test_any_equality_comparable_keys(keys):
    """Test that keys of different types all work."""
    first, second, third = keys
    graph = SimpleGraph()
    graph.set_nodes(keys)
    graph.set_edges(first, [(2, second)])
    graph.set_edges(second, [(2, third)])

    assert graph.shortest_path(first, third) == (4, [first, second, third])
    assert graph.connected(first, 2) == {second, third}
