"""
Graph event system.

Components can subscribe to a graph and be told about every mutation after it
completes. Dispatch is synchronous and happens on the mutating thread.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Protocol

logger = logging.getLogger(__name__)


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    NODES_REPLACED = auto()
    EDGES_SET = auto()
    NODE_CREATED = auto()


class GraphEventListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_graph_event(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Called after the graph state changes.

        Args:
            event (GraphEvent): Type of event that occurred
            details (Dict): Additional information about the event
        """
        ...


@dataclass
class GraphEventManager:
    """
    Manages graph event subscriptions and notifications.

    Attributes:
        _listeners (List[GraphEventListener]): Registered event listeners
    """

    _listeners: List[GraphEventListener] = field(default_factory=list)

    def add_listener(self, listener: GraphEventListener) -> None:
        """Add a listener for graph events. Adding twice has no effect."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GraphEventListener) -> None:
        """Remove a graph event listener if registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self, event: GraphEvent, details: Dict[str, Any]) -> None:
        """
        Notify all listeners of a graph event.

        Exceptions raised by a listener propagate to the caller of the
        mutation; the mutation itself has already been applied.

        Args:
            event (GraphEvent): The type of event that occurred
            details (Dict): Additional information about the event
        """
        if not self._listeners:
            return
        logger.debug("Dispatching %s to %d listener(s)", event.name, len(self._listeners))
        for listener in self._listeners.copy():
            listener.on_graph_event(event, details)

    def clear_listeners(self) -> None:
        """Remove all event listeners."""
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)
