"""Order and StatusHistoryEntry models.

Business rules implemented:
- Order id is ``NNNN/MM/YY``: a global 4-digit sequence (``max + 1`` over
  all existing ids) followed by the local month and year of creation.
  The sequence is not reset per month.
- Customer FK uses PROTECT: customers with orders cannot be removed.
- Status changes are recorded in an append-only history (enforced at
  service layer); history rows cannot be edited once written.
- Orders are hard-deleted; their history goes with them (CASCADE).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Optional

from django.db import models
from django.utils import timezone

from modules.orders.constants import (
    ORDER_SEQUENCE_PATTERN,
    ORDER_SEQUENCE_WIDTH,
    OrderStatus,
)


class Order(models.Model):
    """Repair order: one device brought in by one customer."""

    id: models.CharField = models.CharField(
        primary_key=True, max_length=16, editable=False
    )
    customer: models.ForeignKey = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    device_name: models.CharField = models.CharField(max_length=255)
    serial_number: models.CharField = models.CharField(
        max_length=64, blank=True, default=""
    )
    issue_description: models.TextField = models.TextField()
    diagnosis: models.TextField = models.TextField(blank=True, default="")
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.RECEIVED,
    )
    estimated_cost: models.DecimalField = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )
    final_cost: models.DecimalField = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True
    )
    technician_notes: models.TextField = models.TextField(blank=True, default="")
    created_at: models.DateTimeField = models.DateTimeField(default=timezone.now)
    updated_at: models.DateTimeField = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "orders"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["-updated_at"], name="orders_updated_idx"),
        ]

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------

    @staticmethod
    def next_id(existing_ids: Iterable[str], now: Optional[datetime] = None) -> str:
        """Next order id: ``max(sequence) + 1`` plus the local ``/MM/YY``.

        Ids without a leading sequence of at least 4 digits count as
        sequence 0.
        """
        highest = 0
        for value in existing_ids:
            match = ORDER_SEQUENCE_PATTERN.match(value or "")
            if match:
                highest = max(highest, int(match.group(1)))
        local = timezone.localtime(now or timezone.now())
        sequence = str(highest + 1).zfill(ORDER_SEQUENCE_WIDTH)
        return f"{sequence}/{local:%m}/{local:%y}"

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @property
    def cost(self):
        """Final cost when known, otherwise the estimate (may be ``None``)."""
        if self.final_cost is not None:
            return self.final_cost
        return self.estimated_cost

    def __str__(self) -> str:
        return f"{self.id} {self.device_name} ({self.status})"


class StatusHistoryEntry(models.Model):
    """One step of an order's status history.

    Rows are ordered by ``timestamp`` and then by insertion, and are
    never modified after being written.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="history",
    )
    status: models.CharField = models.CharField(
        max_length=20, choices=OrderStatus.choices
    )
    timestamp: models.DateTimeField = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "order_status_history"
        ordering = ["timestamp", "id"]
        verbose_name_plural = "status history entries"

    def save(self, *args: Any, **kwargs: Any) -> None:
        if not self._state.adding:
            raise ValueError("Status history entries are append-only.")
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.order_id}: {self.status} @ {self.timestamp:%Y-%m-%d %H:%M}"
