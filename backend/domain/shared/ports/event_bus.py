"""Event bus port.

Commands publish fitness profile events through this interface; the
infrastructure layer decides how they are delivered.
"""

from typing import Awaitable, Callable, Protocol, Type, TypeVar

from domain.fitness_profile.core.events.base import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """Publish/subscribe contract keyed by concrete event class.

    Example:
        >>> async def on_plan(event: PlanGenerated) -> None:
        ...     print(event.plan_type, event.day_count)
        >>> bus.subscribe(PlanGenerated, on_plan)
        >>> await bus.publish(PlanGenerated.create(...))
    """

    def subscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> None:
        ...

    async def publish(self, event: TEvent) -> None:
        """Deliver to every handler of ``type(event)``, in subscription order.

        A failing handler must not prevent the others from running.
        """
        ...

    def unsubscribe(self, event_type: Type[TEvent], handler: EventHandler[TEvent]) -> bool:
        """Remove one subscription; False when it was not registered."""
        ...

    def clear(self) -> None:
        ...
