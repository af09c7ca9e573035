"""Infrastructure components shared by graph instances."""

from .cache import LRUCache

__all__ = ["LRUCache"]
