"""
Tentative weights used while computing shortest paths.

A tentative weight is either infinite (the node has not been reached yet) or a
finite non-negative integer. Infinite compares greater than every finite value,
and adding anything to infinite stays infinite.
"""

from functools import total_ordering
from typing import Optional, Union

from ..exceptions import ValidationError


@total_ordering
class TentativeWeight:
    """
    Working distance estimate for a single node.

    Instances are immutable. Use :meth:`infinite` and :meth:`of` rather than
    calling the constructor with ``None``.

    Example:
        >>> TentativeWeight.of(3) + 2
        TentativeWeight.of(5)
        >>> TentativeWeight.infinite() > TentativeWeight.of(10**9)
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[int] = None):
        if value is not None:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"tentative weight must be an integer, got {value!r}")
            if value < 0:
                raise ValidationError(f"tentative weight must be non-negative, got {value}")
        self._value = value

    @classmethod
    def infinite(cls) -> "TentativeWeight":
        """Return the unreached weight."""
        return cls(None)

    @classmethod
    def of(cls, value: int) -> "TentativeWeight":
        """Return a finite weight."""
        return cls(value)

    @property
    def is_infinite(self) -> bool:
        return self._value is None

    @property
    def value(self) -> Optional[int]:
        """The finite value, or ``None`` when infinite."""
        return self._value

    def __add__(self, other: Union[int, "TentativeWeight"]) -> "TentativeWeight":
        if isinstance(other, TentativeWeight):
            if other.is_infinite:
                return TentativeWeight.infinite()
            other = other.value
        if self._value is None:
            return self
        return TentativeWeight(self._value + other)

    __radd__ = __add__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TentativeWeight):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "TentativeWeight") -> bool:
        if not isinstance(other, TentativeWeight):
            return NotImplemented
        if self._value is None:
            return False
        if other._value is None:
            return True
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(("TentativeWeight", self._value))

    def __repr__(self) -> str:
        if self._value is None:
            return "TentativeWeight.infinite()"
        return f"TentativeWeight.of({self._value})"
