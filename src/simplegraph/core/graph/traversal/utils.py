"""
Utility structures for path finding operations.

This module holds the two open-set implementations used by the shortest path
engine and the parent-pointer path reconstruction. Both open sets select the
node with the smallest tentative weight and break ties in favour of the lowest
node index, so they finalise nodes in the same order.
"""

from heapq import heappop, heappush
from typing import List, Optional, Protocol, Tuple

from simplegraph.core.models import TentativeWeight


class OpenSet(Protocol):
    """Nodes not yet finalised by the shortest path computation."""

    def pop_min(self) -> Optional[int]:
        """Remove and return the next node to finalise, or None when exhausted."""
        ...

    def update(self, index: int) -> None:
        """Record that ``distance[index]`` has just improved."""
        ...

    def __len__(self) -> int:
        ...


class ScanOpenSet:
    """
    Open set backed by a plain list of every node index.

    Each selection scans the whole list, O(V) per pick and O(V^2) overall.
    Unreached nodes stay in the list and are eventually returned with an
    infinite weight.
    """

    def __init__(self, distance: List[TentativeWeight]):
        self._distance = distance
        self._open: List[int] = list(range(len(distance)))

    def pop_min(self) -> Optional[int]:
        if not self._open:
            return None
        best = 0
        for position in range(1, len(self._open)):
            # strict comparison keeps the first index on ties
            if self._distance[self._open[position]] < self._distance[self._open[best]]:
                best = position
        return self._open.pop(best)

    def update(self, index: int) -> None:
        # the scan reads distances directly
        pass

    def __len__(self) -> int:
        return len(self._open)


class HeapOpenSet:
    """
    Open set backed by a binary heap of ``(weight, index)`` entries.

    Improved weights are pushed as new entries and stale ones are skipped on
    pop. Only reached nodes ever enter the heap, so the set is exhausted once
    no finite candidate remains.
    """

    def __init__(self, distance: List[TentativeWeight]):
        self._distance = distance
        self._queue: List[Tuple[int, int]] = []
        self._done: List[bool] = [False] * len(distance)
        self._remaining = len(distance)
        for index, weight in enumerate(distance):
            if not weight.is_infinite:
                heappush(self._queue, (weight.value, index))

    def pop_min(self) -> Optional[int]:
        while self._queue:
            weight, index = heappop(self._queue)
            if self._done[index] or self._distance[index].value != weight:
                continue
            self._done[index] = True
            self._remaining -= 1
            return index
        return None

    def update(self, index: int) -> None:
        if self._done[index]:
            return
        weight = self._distance[index]
        if not weight.is_infinite:
            heappush(self._queue, (weight.value, index))

    def __len__(self) -> int:
        return self._remaining


OPEN_SETS = {
    "scan": ScanOpenSet,
    "heap": HeapOpenSet,
}


def reconstruct_path(parent: List[Optional[int]], source: int, target: int) -> List[int]:
    """
    Return the node indices from ``source`` to ``target`` using parent pointers.

    Args:
        parent: Predecessor of each node, or None if it was never reached
        source: Source node index
        target: Target node index

    Returns:
        Indices from source to target inclusive, or an empty list if the
        chain does not lead back to the source.
    """
    if source == target:
        return [source]

    chain: List[int] = []
    current: Optional[int] = target
    while current is not None:
        chain.append(current)
        if current == source:
            chain.reverse()
            return chain
        if len(chain) > len(parent):
            break
        current = parent[current]

    return []
