"""Event kinds and the publish/subscribe bus sessions report through."""

from enum import Enum
from typing import Any, Callable, Protocol

Listener = Callable[[Any], None]


class FragmentEvent(str, Enum):
    FRAGMENT_PARSED = "mediaFragmentParsed"
    FRAGMENT_END = "mediaFragmentEnd"


class EventBus(Protocol):
    def on(self, kind: FragmentEvent, listener: Listener) -> None: ...

    def off(self, kind: FragmentEvent, listener: Listener) -> None: ...

    def publish(self, kind: FragmentEvent, payload: Any) -> None: ...


class LocalEventBus:
    """In-process bus. Listeners run synchronously in subscription order.

    Every published event is appended to ``history`` so observers that
    subscribe late (and tests) can inspect what happened.
    """

    def __init__(self) -> None:
        self._listeners: dict[FragmentEvent, list[Listener]] = {}
        self.history: list[tuple[FragmentEvent, Any]] = []

    def on(self, kind: FragmentEvent, listener: Listener) -> None:
        self._listeners.setdefault(kind, []).append(listener)

    def off(self, kind: FragmentEvent, listener: Listener) -> None:
        listeners = self._listeners.get(kind, [])
        if listener in listeners:
            listeners.remove(listener)

    def publish(self, kind: FragmentEvent, payload: Any) -> None:
        self.history.append((kind, payload))
        for listener in list(self._listeners.get(kind, [])):
            listener(payload)

    def published(self, kind: FragmentEvent) -> list[Any]:
        """Payloads published so far for *kind*, oldest first."""
        return [payload for k, payload in self.history if k == kind]
