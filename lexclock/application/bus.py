from collections import defaultdict
from typing import Any, Awaitable, Callable, DefaultDict, List, Type

Handler = Callable[[Any], Awaitable[None]]


class Subscription:
    """Handle returned by ``EventBus.subscribe``; cancel it to stop receiving events."""

    def __init__(self, bus: "EventBus", event_type: Type[Any], handler: Handler) -> None:
        self._bus = bus
        self.event_type = event_type
        self.handler = handler
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self._bus._remove(self.event_type, self.handler)
            self.active = False


class EventBus:
    """Single-loop pub/sub: one writer publishes, any number of readers subscribe."""

    def __init__(self) -> None:
        self._handlers: DefaultDict[Type[Any], List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: Type[Any], handler: Handler) -> Subscription:
        self._handlers[event_type].append(handler)
        return Subscription(self, event_type, handler)

    def subscriber_count(self, event_type: Type[Any]) -> int:
        return len(self._handlers[event_type])

    async def publish(self, event: Any) -> None:
        handlers = list(self._handlers[type(event)])
        for handler in handlers:
            await handler(event)

    def _remove(self, event_type: Type[Any], handler: Handler) -> None:
        handlers = self._handlers[event_type]
        if handler in handlers:
            handlers.remove(handler)
