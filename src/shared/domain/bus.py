"""Contracts for publishing order events inside the process.

Services publish (``OrderCreated``, ``OrderStatusChanged``,
``OrderReadyForPickup``); apps subscribe their handlers in ``ready()``.
"""

from __future__ import annotations

from typing import Generic, Protocol, Type, TypeVar

from shared.domain.events import DomainEvent

E = TypeVar("E", bound=DomainEvent, contravariant=True)


class IEventHandler(Protocol, Generic[E]):
    """Reacts to one kind of event, e.g. logging a repair that is ready."""

    def handle(self, event: E) -> None: ...


class IEventBus(Protocol):
    """Delivers an event to the handlers subscribed to its exact class."""

    def publish(self, event: DomainEvent) -> None: ...

    def subscribe(self, event_class: Type[E], handler: IEventHandler[E]) -> None: ...
