"""
Event bus implementation for domain event publishing and subscription.

The planning board is single-threaded and event-driven, so publishing is
synchronous: handlers run in subscription order before ``publish`` returns.
"""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict, deque
from collections.abc import Callable

from planboard.domain.shared.base import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class EventBusInterface(ABC):
    """
    Abstract interface for event bus implementations.

    Defines the contract for publishing events and subscribing to event types.
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event to all registered handlers.

        Args:
            event: Domain event to publish
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe a handler to a specific event type.

        Subscribing to a base class receives every subclass event as well.

        Args:
            event_type: Type of event to subscribe to
            handler: Handler function to call when event is published
        """
        pass

    @abstractmethod
    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """
        Unsubscribe a handler from a specific event type.

        Args:
            event_type: Type of event to unsubscribe from
            handler: Handler function to remove
        """
        pass

    @abstractmethod
    def clear_handlers(self, event_type: type[DomainEvent] | None = None) -> None:
        """
        Clear event handlers.

        Args:
            event_type: Optional event type to clear handlers for. If None, clears all.
        """
        pass


class InMemoryEventBus(EventBusInterface):
    """
    In-memory implementation of event bus.

    Supports multiple handlers per event type and keeps a bounded history
    of published events. A failing handler is logged and does not prevent
    the remaining handlers from running.
    """

    def __init__(self, max_history_size: int = 1000) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._event_history: deque[DomainEvent] = deque(maxlen=max_history_size)

    def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event synchronously to all registered handlers.

        Args:
            event: Domain event to publish
        """
        self._event_history.append(event)

        event_type = type(event)
        handlers = self._handlers_for(event_type)

        if not handlers:
            logger.debug(
                f"No handlers registered for event type: {event_type.__name__}"
            )
            return

        logger.debug(
            f"Publishing event {event_type.__name__} to {len(handlers)} handlers"
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    f"Error handling event {event_type.__name__} with {handler}"
                )
                # Continue with other handlers even if one fails

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)
            logger.debug(
                f"Subscribed handler {handler} to event type {event_type.__name__}"
            )
        else:
            logger.warning(
                f"Handler {handler} already subscribed to event type {event_type.__name__}"
            )

    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        if handler in self._handlers.get(event_type, []):
            self._handlers[event_type].remove(handler)
            logger.debug(
                f"Unsubscribed handler {handler} from event type {event_type.__name__}"
            )
        else:
            logger.warning(
                f"Handler {handler} not found for event type {event_type.__name__}"
            )

    def clear_handlers(self, event_type: type[DomainEvent] | None = None) -> None:
        if event_type:
            self._handlers.pop(event_type, None)
        else:
            self._handlers.clear()

    def get_event_history(
        self, event_type: type[DomainEvent] | None = None
    ) -> list[DomainEvent]:
        """
        Get published events, oldest first.

        Args:
            event_type: Optional filter; subclasses of the type are included
        """
        if event_type is None:
            return list(self._event_history)
        return [event for event in self._event_history if isinstance(event, event_type)]

    def clear_history(self) -> None:
        self._event_history.clear()

    def _handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        handlers: list[EventHandler] = []
        for klass in event_type.__mro__:
            for handler in self._handlers.get(klass, []):
                if handler not in handlers:
                    handlers.append(handler)
        return handlers
