"""Synchronous event bus used by the order service.

Handlers run inside the publisher's transaction, in subscription order;
an exception in a handler propagates to the service that published.
"""

from __future__ import annotations

from typing import Dict, List, Type

import structlog

from shared.domain.bus import IEventBus, IEventHandler
from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


class InMemoryEventBus(IEventBus):
    """Maps event classes to their handlers; subscribing twice is a no-op."""

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[IEventHandler]] = {}

    def subscribe(self, event_class: Type[DomainEvent], handler: IEventHandler) -> None:
        handlers = self._handlers.setdefault(event_class, [])
        if handler not in handlers:
            handlers.append(handler)

    def publish(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(type(event), [])
        logger.debug(
            "event.published",
            event_name=event.event_name,
            aggregate_id=event.aggregate_id,
            handlers=len(handlers),
        )
        for handler in handlers:
            handler.handle(event)


# Shared by the apps' ready() hooks and OrderService.
event_bus = InMemoryEventBus()
