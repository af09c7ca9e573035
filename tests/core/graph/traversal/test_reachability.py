"""
Tests for bounded-hop reachability.
"""

import pytest

from simplegraph.core.exceptions import ConfigurationError, ValidationError
from simplegraph.core.graph import BaseGraph, SimpleGraph
from simplegraph.core.graph.traversal import ReachabilityFinder


def test_zero_degree_is_empty(chain_graph: SimpleGraph):
    """Test that a zero hop budget reaches nothing, not even the start."""
    assert chain_graph.connected("A", 0) == set()
    assert chain_graph.connected("C", 0) == set()


@pytest.mark.parametrize("degree", [0, 1, 5, 1000])
def test_unknown_start_returns_none(chain_graph: SimpleGraph, degree: int):
    """Test that an unregistered start key yields None for any budget."""
    assert chain_graph.connected("missing", degree) is None


def test_chain_reachability_by_degree(chain_graph: SimpleGraph):
    """Test reachability growing hop by hop along a chain."""
    assert chain_graph.connected("A", 1) == {"B"}
    assert chain_graph.connected("A", 2) == {"B", "C"}
    assert chain_graph.connected("A", 3) == {"B", "C"}
    assert chain_graph.connected("C", 4) == set()


def test_single_edge_scenario(config):
    """Test nodes [A, B, C] with only A -> B."""
    graph = SimpleGraph(config)
    graph.set_nodes(["A", "B", "C"])
    graph.set_edges("A", [(1, "B")])

    assert graph.connected("A", 1) == {"B"}
    assert graph.connected("A", 2) == {"B"}


def test_no_edges_scenario(config):
    """Test that an edgeless graph reaches nothing."""
    graph = SimpleGraph(config)
    graph.set_nodes(["A", "B"])

    assert graph.connected("A", 5) == set()


def test_start_included_only_through_cycle(cyclic_graph: SimpleGraph):
    """Test that the start node appears once a cycle returns to it."""
    # A -> B -> C -> A is three hops
    assert "A" not in cyclic_graph.connected("A", 2)
    assert "A" in cyclic_graph.connected("A", 3)


def test_cyclic_graph_layers(cyclic_graph: SimpleGraph):
    """Test the reachable sets on a graph with cycles."""
    assert cyclic_graph.connected("A", 1) == {"B", "D"}
    assert cyclic_graph.connected("A", 2) == {"B", "C", "D", "E"}
    assert cyclic_graph.connected("A", 3) == {"A", "B", "C", "D", "E"}
    assert cyclic_graph.connected("E", 10) == set()
    assert cyclic_graph.connected("D", 10) == {"E"}


def test_paths_of_different_length_collapse(config):
    """Test that a node reached by several walks appears once."""
    graph = SimpleGraph.from_adjacency(
        ["S", "X", "Y", "T"],
        {"S": [(1, "X"), (1, "Y"), (1, "T")], "X": [(1, "T")], "Y": [(1, "X")]},
        config=config,
    )

    assert graph.connected("S", 3) == {"X", "Y", "T"}


def test_two_cycle_alternates_without_missing_nodes(config):
    """Test a graph whose layers alternate between two sets."""
    graph = SimpleGraph.from_adjacency(
        ["A", "B", "C"],
        {"A": [(1, "B")], "B": [(1, "A"), (1, "C")]},
        config=config,
    )

    assert graph.connected("A", 1) == {"B"}
    assert graph.connected("A", 2) == {"A", "B", "C"}
    assert graph.connected("C", 2) == set()


def test_dense_graph_large_budget(dense_graph: SimpleGraph):
    """Test that dense cyclic graphs with big budgets finish and reach everything."""
    assert dense_graph.connected(0, 50) == set(range(12))
    assert dense_graph.connected(5, 10**6) == set(range(12))


def test_long_chain_does_not_recurse(config):
    """Test a chain far longer than the default recursion limit."""
    size = 1200
    nodes = list(range(size))
    graph = SimpleGraph.from_adjacency(
        nodes, {n: [(1, n + 1)] for n in range(size - 1)}, config=config
    )

    assert graph.connected(0, size) == set(range(1, size))
    assert graph.connected(0, 10) == set(range(1, 11))


@pytest.mark.parametrize("degree", [-1, 1.0, "2", None, True])
def test_invalid_degree_raises(chain_graph: SimpleGraph, degree):
    """Test that hop budgets must be non-negative integers."""
    with pytest.raises(ValidationError):
        chain_graph.connected("A", degree)


def test_strategies_agree():
    """Test that both strategies produce identical sets for every start and budget."""
    base = BaseGraph()
    base.set_nodes(list("ABCDEFG"))
    base.set_edges("A", [(1, "B"), (1, "C")])
    base.set_edges("B", [(1, "D")])
    base.set_edges("C", [(1, "D"), (1, "A")])
    base.set_edges("D", [(1, "E"), (1, "D")])
    base.set_edges("E", [(1, "C")])
    base.set_edges("F", [(1, "G")])

    frontier = ReachabilityFinder(base, strategy="frontier")
    memoized = ReachabilityFinder(base, strategy="memoized")

    for key in base.get_nodes():
        for degree in range(9):
            assert frontier.connected(key, degree) == memoized.connected(key, degree)


def test_unknown_strategy_rejected():
    """Test that the finder validates its strategy name."""
    with pytest.raises(ConfigurationError, match="Unknown strategy 'bfs'"):
        ReachabilityFinder(BaseGraph(), strategy="bfs")


def test_duplicate_keys_report_reached_key(config):
    """Test that duplicate keys resolve from the first position."""
    graph = SimpleGraph(config)
    graph.set_nodes(["A", "B", "A"])
    # Edges are set on the first "A"; the second "A" stays unreachable
    graph.set_edges("A", [(1, "B")])

    assert graph.connected("A", 2) == {"B"}
