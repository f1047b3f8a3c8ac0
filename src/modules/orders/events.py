"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """Raised when a repair order is registered."""

    customer_id: str = ""
    status: str = ""


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """Raised when a saved order moves to another status."""

    old_status: str = ""
    new_status: str = ""


@dataclass(frozen=True)
class OrderReadyForPickup(DomainEvent):
    """Raised when an order enters READY from any other status."""

    customer_id: str = ""
