"""
Edge models for the graph store.

Edges are stored by the index of their target node, never by key, so that
traversal works on plain integers. The models here are small immutable value
types shared by the store and the traversal engines.
"""

from dataclasses import dataclass
from typing import Any, Tuple

from ..exceptions import ValidationError


def validate_weight(weight: Any) -> int:
    """
    Check that an edge weight is a non-negative integer.

    Args:
        weight: Candidate weight supplied by the host

    Returns:
        int: The weight, unchanged

    Raises:
        ValidationError: If the weight is not an ``int`` or is negative
    """
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValidationError(f"edge weight must be an integer, got {weight!r}")
    if weight < 0:
        raise ValidationError(f"edge weight must be non-negative, got {weight}")
    return weight


@dataclass(frozen=True)
class Edge:
    """
    A directed, weighted edge to another node of the same graph.

    Attributes:
        weight (int): Non-negative cost of following the edge
        target (int): Registry index of the node the edge points to
    """

    weight: int
    target: int

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_weight(self.weight)
        if isinstance(self.target, bool) or not isinstance(self.target, int) or self.target < 0:
            raise ValidationError(f"edge target must be a node index, got {self.target!r}")

    def as_tuple(self) -> Tuple[int, int]:
        """Return ``(weight, target)``."""
        return (self.weight, self.target)


@dataclass(frozen=True)
class EdgeUpdate:
    """
    Outcome of a single ``set_edges`` call.

    Attributes:
        index (int): Registry index of the ``from`` node
        stored (int): Number of edges written to the node's row
        dropped (int): Number of edges discarded because their target key
            was not registered
        created (bool): Whether the ``from`` node was appended by this call
    """

    index: int
    stored: int
    dropped: int
    created: bool = False

    @property
    def total(self) -> int:
        """Number of edges supplied by the caller."""
        return self.stored + self.dropped
