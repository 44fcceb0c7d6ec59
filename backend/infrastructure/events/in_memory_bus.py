"""Single-process event bus.

Handlers live in a dict keyed by event class and are awaited one by one.
Not thread-safe; intended for one event loop.
"""

import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, DefaultDict, List, Type

from domain.fitness_profile.core.events.base import DomainEvent
from domain.shared.ports.event_bus import EventHandler, TEvent

logger = logging.getLogger(__name__)

_Handler = Callable[[Any], Awaitable[None]]


def _handler_name(handler: _Handler) -> str:
    return getattr(handler, "__qualname__", repr(handler))


class InMemoryEventBus:
    """IEventBus backed by process memory.

    A handler subscribed twice runs twice. Handler errors are logged with
    the event id and swallowed so one subscriber cannot break a command.
    """

    def __init__(self) -> None:
        self._handlers: DefaultDict[Type[DomainEvent], List[_Handler]] = defaultdict(list)

    def subscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> None:
        self._handlers[event_type].append(handler)
        logger.debug(
            "Subscribed %s to %s", _handler_name(handler), event_type.__name__
        )

    async def publish(self, event: TEvent) -> None:
        event_type = type(event)
        # Copy: handlers may (un)subscribe while running
        handlers = list(self._handlers.get(event_type, ()))
        logger.debug(
            "Publishing event",
            extra={
                "event_type": event_type.__name__,
                "event_id": str(event.event_id),
                "handler_count": len(handlers),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    "Event handler failed",
                    extra={
                        "event_type": event_type.__name__,
                        "event_id": str(event.event_id),
                        "handler": _handler_name(handler),
                    },
                )

    def unsubscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> bool:
        """Remove the first matching subscription."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def clear(self) -> None:
        self._handlers.clear()

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        return len(self._handlers.get(event_type, ()))
