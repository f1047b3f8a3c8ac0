"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
All write operations are wrapped in ``transaction.atomic()`` so an
order and its history rows are persisted together.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

import structlog
from django.db import transaction
from django.db.models import QuerySet

from modules.orders.exceptions import OrderIdConflict
from modules.orders.models import Order, StatusHistoryEntry
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def queryset(self) -> QuerySet:
        """Base queryset with the customer joined and history prefetched.

        Used by list views that narrow it further with ``django-filter``.
        """
        return Order.objects.select_related("customer").prefetch_related("history")

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with eager-loaded relations, or ``None``."""
        return self.queryset().filter(id=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Order]:
        """List orders with optional Django ORM look-ups.

        Examples of valid filters::

            {"customer_id": "0042"}
            {"status": "READY"}
        """
        queryset = self.queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def find_by_id_prefix(self, text: str) -> Optional[Order]:
        exact = self.get_by_id(text)
        if exact:
            return exact
        return (
            self.queryset()
            .filter(id__startswith=text)
            .order_by("created_at", "id")
            .first()
        )

    def last_history_status(self, order_id: str) -> Optional[str]:
        entry = (
            StatusHistoryEntry.objects.filter(order_id=order_id)
            .order_by("timestamp", "id")
            .last()
        )
        return entry.status if entry else None

    def next_id(self, now: datetime) -> str:
        return Order.next_id(Order.objects.values_list("id", flat=True), now)

    # ------------------------------------------------------------------
    # Save / Delete (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist (create or update) an order.

        A new order is only ever inserted; an id already taken raises
        ``OrderIdConflict`` and leaves the stored order untouched.
        """
        is_new = entity._state.adding
        if is_new and Order.objects.filter(id=entity.id).exists():
            raise OrderIdConflict(f"Order id {entity.id} is already taken.")
        entity.save(force_insert=is_new)
        logger.info("order.saved", order_id=entity.id, status=entity.status)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete an order; its history rows cascade."""
        deleted, _ = Order.objects.filter(id=id).delete()
        if not deleted:
            return False
        logger.info("order.deleted", order_id=id)
        return True

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    @transaction.atomic
    def add_history(
        self, order_id: str, status: str, timestamp: datetime
    ) -> StatusHistoryEntry:
        """Record a status step in the order's audit trail."""
        entry = StatusHistoryEntry(order_id=order_id, status=status, timestamp=timestamp)
        entry.save()
        logger.info("order.history_added", order_id=order_id, status=status)
        return entry
