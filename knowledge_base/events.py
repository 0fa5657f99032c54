"""
Event System
=============

A simple event system for decoupled communication between the controller
and whichever front end is listening.
"""

import logging
from typing import Callable, Dict, List, Any
from enum import Enum, auto

log = logging.getLogger(__name__)


class EventType(Enum):
    """Available event types."""
    STATUS_UPDATED = auto()
    ERROR_OCCURRED = auto()
    TAGS_CHANGED = auto()
    KNOWLEDGE_LOADED = auto()
    KNOWLEDGE_SAVED = auto()
    EXIT_STATE_CHANGED = auto()


class Event:
    """Base event class."""

    def __init__(self, event_type: EventType, data: Any = None):
        self.event_type = event_type
        self.data = data

    def __repr__(self) -> str:
        return f"Event({self.event_type.name}, {self.data!r})"


class EventDispatcher:
    """Manages event registration and dispatch."""

    def __init__(self):
        self._listeners: Dict[EventType, List[Callable[[Event], None]]] = {}

    def add_listener(
        self,
        event_type: EventType,
        listener: Callable[[Event], None]
    ) -> None:
        """
        Add a listener for a specific event type.

        Args:
            event_type: Type of event to listen for
            listener: Callback function to be called when event occurs
        """
        self._listeners.setdefault(event_type, []).append(listener)

    def remove_listener(
        self,
        event_type: EventType,
        listener: Callable[[Event], None]
    ) -> None:
        """Remove a listener; unknown listeners are ignored."""
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)
            if not listeners:
                del self._listeners[event_type]

    def dispatch(self, event: Event) -> None:
        """
        Dispatch an event to all registered listeners.

        A failing listener is logged and does not stop the others.
        """
        for listener in list(self._listeners.get(event.event_type, [])):
            try:
                listener(event)
            except Exception:
                log.exception("Error in event listener for %s", event.event_type.name)

    def dispatch_status(self, message: str) -> None:
        self.dispatch(Event(EventType.STATUS_UPDATED, message))

    def dispatch_error(self, error: str) -> None:
        self.dispatch(Event(EventType.ERROR_OCCURRED, error))

    def dispatch_tags_changed(self, tags: List[str]) -> None:
        """
        Dispatch the current tag collection after the store changed.

        Args:
            tags: Tags in display order
        """
        self.dispatch(Event(EventType.TAGS_CHANGED, tags))

    def dispatch_knowledge_loaded(self, path: Any = None) -> None:
        self.dispatch(Event(EventType.KNOWLEDGE_LOADED, path))

    def dispatch_knowledge_saved(self, paths: List[Any]) -> None:
        self.dispatch(Event(EventType.KNOWLEDGE_SAVED, paths))

    def dispatch_exit_state(self, state: Any) -> None:
        self.dispatch(Event(EventType.EXIT_STATE_CHANGED, state))
