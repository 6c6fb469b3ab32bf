"""
Domain Event Dispatcher

Routes domain events queued on entities to registered handlers, then clears
the entities' pending events.
"""

import inspect
from typing import Awaitable, Callable, Dict, List, Optional, Type, Union

from ..domain.entities.base_entity import IHasDomainEvents
from ..domain.events.domain_event import DomainEvent
from ..guard import Guard
from ..utils.logging_utils import get_logger
from .interfaces import IAppLogger

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]


class DomainEventDispatcher:
    """
    In-process dispatcher for domain events.

    Handlers are registered per event class and also receive subclasses of
    that class. Both plain and async callables are accepted.
    """

    def __init__(self, logger: Optional[IAppLogger] = None):
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}
        self._logger = logger or get_logger(DomainEventDispatcher)

    def register(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """
        Register a handler for an event class.

        Args:
            event_type: DomainEvent subclass (or DomainEvent for all events)
            handler: Callable receiving the event

        Raises:
            ArgumentInvalidError: If event_type is not a DomainEvent class
            ArgumentNullError: If handler is None
        """
        Guard.that(
            isinstance(event_type, type) and issubclass(event_type, DomainEvent),
            "Event type must be a DomainEvent subclass.",
            "event_type",
        )
        Guard.not_null(handler, "handler")
        self._handlers.setdefault(event_type, []).append(handler)

    def handlers_for(self, event: DomainEvent) -> List[EventHandler]:
        """Handlers matching the event, in registration order per class."""
        matched: List[EventHandler] = []
        for event_type, handlers in self._handlers.items():
            if isinstance(event, event_type):
                matched.extend(handlers)
        return matched

    async def dispatch(self, event: DomainEvent) -> int:
        """
        Deliver one event to its handlers.

        Args:
            event: Event to deliver

        Returns:
            Number of handlers invoked
        """
        handlers = self.handlers_for(event)
        if not handlers:
            self._logger.trace("No handlers for %s", event.event_type)
            return 0

        for handler in handlers:
            outcome = handler(event)
            if inspect.isawaitable(outcome):
                await outcome
        self._logger.trace("Dispatched %s to %d handler(s)", event.event_type, len(handlers))
        return len(handlers)

    async def dispatch_pending(self, *entities: IHasDomainEvents) -> int:
        """
        Dispatch each entity's pending events in raise order, then clear them.

        If a handler raises, the exception propagates and the failing entity
        keeps its pending events.

        Args:
            *entities: Entities carrying domain events

        Returns:
            Number of events dispatched
        """
        dispatched = 0
        for entity in entities:
            events = tuple(entity.domain_events)
            for event in events:
                try:
                    await self.dispatch(event)
                except Exception as e:
                    self._logger.error(e, "Handler failed for %s (event %s)", event.event_type, event.event_id)
                    raise
            entity.clear_domain_events()
            dispatched += len(events)

        if dispatched:
            self._logger.info("Dispatched %d domain event(s) from %d entity instance(s)", dispatched, len(entities))
        return dispatched
