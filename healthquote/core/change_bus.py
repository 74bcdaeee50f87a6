"""
Synchronous publish/subscribe keyed by event name.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple


logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class ChangeBus:
    """
    Named-event fan-out.

    Listeners run inline on `emit`, in registration order. A listener may
    emit further events; those complete before the outer `emit` returns.
    There is no cycle detection, so listeners must not feed back into the
    event they listen on.
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def on(self, event_name: str, listener: Listener) -> "ChangeBus":
        """Register `listener` for `event_name`. Returns self for chaining."""
        if not isinstance(event_name, str) or not event_name.strip():
            raise ValueError("event_name must be a non-empty string")
        if not callable(listener):
            raise ValueError("listener must be callable")
        self._listeners.setdefault(event_name, []).append(listener)
        return self

    def off(self, event_name: str, listener: Optional[Listener] = None) -> "ChangeBus":
        """
        Remove one listener, or all listeners when `listener` is None.

        Removing a listener that was never registered is a no-op.
        """
        if listener is None:
            self._listeners.pop(event_name, None)
            return self

        registered = self._listeners.get(event_name)
        if registered and listener in registered:
            registered.remove(listener)
            if not registered:
                del self._listeners[event_name]
        return self

    def emit(self, event_name: str, *args: Any) -> "ChangeBus":
        """
        Call every listener registered for exactly `event_name`.

        The listener list is snapshotted first; registrations made while
        dispatching apply to later emissions only.
        """
        listeners = list(self._listeners.get(event_name, ()))
        logger.debug("Emitting %r to %d listener(s)", event_name, len(listeners))
        for listener in listeners:
            listener(*args)
        return self

    def listeners(self, event_name: str) -> Tuple[Listener, ...]:
        return tuple(self._listeners.get(event_name, ()))


__all__ = ["ChangeBus", "Listener"]
