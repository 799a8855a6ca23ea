"""Errors raised by the event registry."""

from __future__ import annotations


class EmitterError(Exception):
    """Base class for registry errors."""


class EventNotRegistered(EmitterError, LookupError):
    """Raised when emitting an event that has no listeners."""

    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        super().__init__(f"event not registered: '{event_name}'")


class ListenerNotFound(EmitterError, LookupError):
    """Raised when removing a listener that is not registered for an event."""

    def __init__(self, event_name: str, listener) -> None:
        self.event_name = event_name
        self.listener = listener
        super().__init__(f"listener not found for event '{event_name}'")
