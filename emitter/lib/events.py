"""Event registry: named listeners, one-shot listeners and synchronous dispatch."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Optional

from emitter.lib.errors import EventNotRegistered, ListenerNotFound

Listener = Optional[Callable[[Any], None]]


def same_listener(a: Listener, b: Listener) -> bool:
    """Return True if two listener references are the same callable.

    Bound methods are rebuilt on every attribute access, so they match when
    they bind the same function to the same instance.
    """
    if a is b:
        return True
    return (
        inspect.ismethod(a)
        and inspect.ismethod(b)
        and a.__self__ is b.__self__
        and a.__func__ is b.__func__
    )


class OnceListener:
    """Wraps a listener so it runs on the first emit only, then removes itself."""

    def __init__(self, emitter: Emitter, event_name: str, listener: Listener) -> None:
        self.emitter = emitter
        self.event_name = event_name
        self.listener = listener
        self.fired = False

    def __call__(self, payload: Any) -> None:
        # A re-entrant emit may dispatch a snapshot that still holds this wrapper
        if self.fired:
            return
        self.fired = True
        try:
            if self.listener is not None:
                self.listener(payload)
        finally:
            self.emitter._remove(self.event_name, self)

    def __repr__(self) -> str:
        return f"OnceListener({self.event_name!r}, {self.listener!r})"


class Emitter:
    """In-process publish/subscribe registry.

    Listeners are called synchronously in registration order with a single
    payload. Exceptions raised by a listener bubble up to the caller of
    emit() and stop the remaining listeners for that emit.

    Not thread safe: share an instance across threads only behind a lock
    that guards every call.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list] = {}

    def on(self, event_name: str, listener: Listener) -> None:
        """Register a listener for an event. The same listener may be added twice."""
        if event_name not in self._handlers:
            self._handlers[event_name] = []
        self._handlers[event_name].append(listener)
        logging.debug(f"Registered listener {listener!r} for event '{event_name}'")

    def once(self, event_name: str, listener: Listener) -> None:
        """Register a listener that is removed right after its first call.

        Registering the same listener again while a one-shot registration for
        it is still pending on this event does nothing.
        """
        for handler in self._handlers.get(event_name, []):
            # A wrapper that already fired is on its way out, so it does not count as pending
            if (
                isinstance(handler, OnceListener)
                and not handler.fired
                and same_listener(handler.listener, listener)
            ):
                logging.debug(
                    f"Listener {listener!r} already registered once for event '{event_name}'"
                )
                return
        self.on(event_name, OnceListener(self, event_name, listener))

    def off(self, event_name: str, listener: Listener) -> None:
        """Remove the first registration of a listener for an event.

        Raises:
            ListenerNotFound: If the listener is not registered for the event.
        """
        if not self._remove(event_name, listener):
            raise ListenerNotFound(event_name, listener)

    def emit(self, event_name: str, payload: Any = None) -> None:
        """Call every listener registered for the event with the payload.

        Listeners run over a copy of the registration list, so listeners added
        or removed while dispatching take effect from the next emit.

        Raises:
            EventNotRegistered: If no listener is registered for the event.
        """
        handlers = self._handlers.get(event_name)
        if not handlers:
            raise EventNotRegistered(event_name)

        snapshot = list(handlers)
        logging.debug(f"Emitting '{event_name}' to {len(snapshot)} listener(s)")
        for handler in snapshot:
            if handler is not None:
                handler(payload)

    def listeners(self, event_name: str) -> list:
        """Return a copy of the listeners registered for an event."""
        return list(self._handlers.get(event_name, []))

    def listener_count(self, event_name: str) -> int:
        return len(self._handlers.get(event_name, []))

    def event_names(self) -> list[str]:
        """Return the names of events that have at least one listener."""
        return list(self._handlers)

    def has_listeners(self, event_name: str) -> bool:
        return event_name in self._handlers

    def clear(self, event_name: str | None = None) -> None:
        """Remove all listeners for one event, or for every event."""
        if event_name is None:
            self._handlers.clear()
            logging.debug("Cleared all listeners")
        elif self._handlers.pop(event_name, None) is not None:
            logging.debug(f"Cleared listeners for event '{event_name}'")

    def __contains__(self, event_name: object) -> bool:
        return event_name in self._handlers

    def _remove(self, event_name: str, listener: Listener) -> bool:
        handlers = self._handlers.get(event_name)
        if not handlers:
            return False

        for idx, handler in enumerate(handlers):
            if same_listener(handler, listener):
                del handlers[idx]
                logging.debug(f"Removed listener {listener!r} from event '{event_name}'")
                # No empty entries: an event is registered only while it has listeners
                if not handlers:
                    del self._handlers[event_name]
                return True
        return False
