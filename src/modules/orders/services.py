"""Order service layer (Use Cases).

Orchestrates order intake, edits, deletion and the dashboard numbers.
All write operations are atomic; the service defines the unit-of-work
boundary.

Business rules enforced:
- A new order gets the next ``NNNN/MM/YY`` id, status RECEIVED unless
  another status is given, and ``created_at = updated_at = now``.
- Every edit refreshes ``updated_at``.
- Any status may follow any other; there is no transition table.
- History gets a ``{status, now}`` entry when the order is new, when the
  status changed, or when the last history entry disagrees with the
  submitted status, so the last entry always matches the order.
- Entering READY from another status is reported as a "ready transition"
  so the caller can offer to notify the customer.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.orders.constants import (
    ACTIVE_STATUSES,
    RECENT_ORDERS_LIMIT,
    REVENUE_WINDOW_DAYS,
    OrderStatus,
)
from modules.orders.dtos import DashboardSummaryDTO, RecentOrderDTO, SavedOrder
from modules.orders.events import OrderCreated, OrderReadyForPickup, OrderStatusChanged
from modules.orders.exceptions import CustomerNotFound, OrderNotFound
from modules.orders.models import Order
from shared.infrastructure.bus import event_bus as default_event_bus

if TYPE_CHECKING:
    from datetime import datetime

    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.dtos import CreateOrderDTO, UpdateOrderDTO
    from modules.orders.repositories.interfaces import IOrderRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)

EDITABLE_FIELDS = (
    "device_name",
    "serial_number",
    "issue_description",
    "diagnosis",
    "status",
    "estimated_cost",
    "final_cost",
    "technician_notes",
)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories (and optionally the event bus) via constructor
    injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._event_bus = event_bus or default_event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> SavedOrder:
        """Register a repair order for an existing customer.

        Raises:
            CustomerNotFound: the customer does not exist.
        """
        customer = self._customer_repo.get_by_id(dto.customer_id)
        if not customer:
            raise CustomerNotFound(f"Customer {dto.customer_id} not found.")

        now = timezone.now()
        order = Order(
            id=self._order_repo.next_id(now),
            customer=customer,
            device_name=dto.device_name,
            serial_number=dto.serial_number,
            issue_description=dto.issue_description,
            diagnosis=dto.diagnosis,
            status=str(dto.status),
            estimated_cost=dto.estimated_cost,
            final_cost=dto.final_cost,
            technician_notes=dto.technician_notes,
            created_at=now,
            updated_at=now,
        )
        return self._persist(order, previous_status=None, now=now)

    @transaction.atomic
    def update_order(self, order_id: str, dto: UpdateOrderDTO) -> SavedOrder:
        """Apply the submitted fields to an existing order.

        Raises:
            OrderNotFound: the order does not exist.
            CustomerNotFound: the order is moved to an unknown customer.
        """
        order = self.get_order(order_id)
        previous_status = order.status
        submitted = dto.model_fields_set

        if "customer_id" in submitted and dto.customer_id != order.customer_id:
            customer = self._customer_repo.get_by_id(dto.customer_id)
            if not customer:
                raise CustomerNotFound(f"Customer {dto.customer_id} not found.")
            order.customer = customer

        for field in EDITABLE_FIELDS:
            if field not in submitted:
                continue
            value = getattr(dto, field)
            if field == "status":
                value = str(value)
            elif value is None and field not in ("estimated_cost", "final_cost"):
                value = ""
            setattr(order, field, value)

        now = timezone.now()
        order.updated_at = now
        return self._persist(order, previous_status=previous_status, now=now)

    @transaction.atomic
    def delete_order(self, order_id: str) -> None:
        """Remove an order together with its history.

        Raises:
            OrderNotFound: the order does not exist.
        """
        if not self._order_repo.delete(order_id):
            raise OrderNotFound(f"Order {order_id} not found.")
        logger.info("order.removed", order_id=order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by id.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def dashboard_summary(self) -> DashboardSummaryDTO:
        """Counts, 30-day revenue and the most recently created orders.

        Revenue sums the final cost of COMPLETED orders updated within the
        last 30 days; orders without a final cost add nothing.
        """
        orders = self._order_repo.list()
        since = timezone.now() - timedelta(days=REVENUE_WINDOW_DAYS)

        revenue = sum(
            (
                order.final_cost or Decimal("0")
                for order in orders
                if order.status == OrderStatus.COMPLETED and order.updated_at > since
            ),
            Decimal("0"),
        )
        recent = sorted(
            orders, key=lambda order: (order.created_at, order.id), reverse=True
        )[:RECENT_ORDERS_LIMIT]

        return DashboardSummaryDTO(
            active_orders=sum(1 for order in orders if order.status in ACTIVE_STATUSES),
            ready_orders=sum(1 for order in orders if order.status == OrderStatus.READY),
            revenue=revenue,
            recent_orders=[RecentOrderDTO.from_entity(order) for order in recent],
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _persist(
        self, order: Order, previous_status: Optional[str], now: datetime
    ) -> SavedOrder:
        is_new = previous_status is None
        log = logger.bind(
            order_id=order.id, previous_status=previous_status, status=order.status
        )

        self._order_repo.save(order)

        status_changed = not is_new and order.status != previous_status
        history_stale = (
            not is_new and self._order_repo.last_history_status(order.id) != order.status
        )
        if is_new or status_changed or history_stale:
            self._order_repo.add_history(order.id, order.status, now)

        ready_transition = (
            order.status == OrderStatus.READY and previous_status != OrderStatus.READY
        )

        if is_new:
            log.info("order.created")
            self._event_bus.publish(
                OrderCreated(
                    aggregate_id=order.id,
                    customer_id=order.customer_id,
                    status=order.status,
                )
            )
        elif status_changed:
            log.info("order.status_changed")
            self._event_bus.publish(
                OrderStatusChanged(
                    aggregate_id=order.id,
                    old_status=previous_status,
                    new_status=order.status,
                )
            )
        else:
            log.info("order.updated")

        if ready_transition:
            self._event_bus.publish(
                OrderReadyForPickup(aggregate_id=order.id, customer_id=order.customer_id)
            )

        saved = self._order_repo.get_by_id(order.id) or order
        return SavedOrder(
            order=saved,
            previous_status=previous_status,
            ready_transition=ready_transition,
        )
