"""
Bounded-hop reachability.

``connected(from, degree)`` is the set of distinct nodes at the end of some
directed walk of 1 to ``degree`` edges starting at ``from``. The start node is
only part of the result when a cycle leads back to it within the budget.

Any node reachable at all is reachable within ``node_count`` edges, so larger
budgets are clamped to the node count before searching.
"""

import logging
from typing import Any, Dict, FrozenSet, List, Optional, Set, Tuple

from simplegraph.core.exceptions import ValidationError
from .base import GraphAlgorithm

logger = logging.getLogger(__name__)


def validate_degree(degree: Any) -> int:
    """
    Check that a hop budget is a non-negative integer.

    Raises:
        ValidationError: If ``degree`` is negative or not an integer
    """
    if isinstance(degree, bool) or not isinstance(degree, int):
        raise ValidationError(f"degree must be an integer, got {degree!r}")
    if degree < 0:
        raise ValidationError(f"degree must be non-negative, got {degree}")
    return degree


class ReachabilityFinder(GraphAlgorithm):
    """
    Finds the nodes reachable from a start node within a hop budget.

    Strategies:
        frontier: expand one layer of walk endpoints per hop
        memoized: union of each edge target and what it reaches with one hop
            fewer, memoised on ``(node index, remaining hops)``

    Both strategies return identical sets.
    """

    strategies = ("frontier", "memoized")

    def connected(self, from_key: Any, degree: int) -> Optional[Set[Any]]:
        """
        Get the keys reachable from ``from_key`` within ``degree`` hops.

        Args:
            from_key: Key of the start node
            degree: Hop budget, zero or more

        Returns:
            Optional[Set[Any]]: Reachable keys, or None if ``from_key`` is unknown

        Raises:
            ValidationError: If ``degree`` is negative or not an integer
        """
        validate_degree(degree)
        start = self.graph.get_node_index(from_key)
        if start is None:
            return None

        indices = self.reachable_indices(start, degree)
        return {self.graph.key_at(index) for index in indices}

    def reachable_indices(self, start: int, degree: int) -> Set[int]:
        """Run the configured strategy from a node index."""
        budget = min(degree, self.graph.node_count)
        if budget == 0:
            return set()
        if self.strategy == "memoized":
            return set(self._memoized(start, budget))
        return self._frontier(start, budget)

    def _frontier(self, start: int, budget: int) -> Set[int]:
        reached: Set[int] = set()
        layer: FrozenSet[int] = frozenset((start,))
        expanded: Set[FrozenSet[int]] = set()

        for hop in range(budget):
            layer = frozenset(
                edge.target for index in layer for edge in self.graph.out_edges(index)
            )
            # a repeated layer means the remaining layers cycle through known ones
            if not layer or layer in expanded:
                logger.debug("Frontier settled after %d of %d hop(s)", hop + 1, budget)
                break
            expanded.add(layer)
            reached |= layer

        return reached

    def _memoized(self, start: int, budget: int) -> FrozenSet[int]:
        memo: Dict[Tuple[int, int], FrozenSet[int]] = {}
        # explicit stack in place of recursion; remaining hops strictly
        # decrease along every dependency so the stack always drains
        stack: List[Tuple[int, int]] = [(start, budget)]

        while stack:
            index, remaining = stack[-1]
            if (index, remaining) in memo:
                stack.pop()
                continue

            edges = self.graph.out_edges(index)
            if remaining > 1:
                pending = [
                    (edge.target, remaining - 1)
                    for edge in edges
                    if (edge.target, remaining - 1) not in memo
                ]
                if pending:
                    stack.extend(pending)
                    continue

            result: Set[int] = set()
            for edge in edges:
                result.add(edge.target)
                if remaining > 1:
                    result |= memo[(edge.target, remaining - 1)]
            memo[(index, remaining)] = frozenset(result)
            stack.pop()

        logger.debug("Memoized reachability evaluated %d state(s)", len(memo))
        return memo[(start, budget)]
