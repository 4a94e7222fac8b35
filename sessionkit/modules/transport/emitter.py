"""Minimal event emitter returned by callback transports."""

from collections import defaultdict
from typing import Any, Callable, DefaultDict, List


class RequestEmitter:
    """Per-request event emitter; listeners run synchronously in registration order."""

    def __init__(self):
        self._listeners: DefaultDict[str, List[Callable[..., Any]]] = defaultdict(list)

    def on(self, event: str, listener: Callable[..., Any]) -> "RequestEmitter":
        """Register ``listener`` for ``event``. Returns self for chaining."""
        self._listeners[event].append(listener)
        return self

    def emit(self, event: str, *args: Any) -> bool:
        """
        Call every listener registered for ``event``.

        Returns:
            True if at least one listener was called
        """
        listeners = list(self._listeners.get(event, ()))
        for listener in listeners:
            listener(*args)
        return bool(listeners)

    def listener_count(self, event: str) -> int:
        """Number of listeners registered for ``event``."""
        return len(self._listeners.get(event, ()))
