"""Order list rows and columns.

The order list shows each order flattened together with its customer's
name and contact data so those columns filter and sort like any other.
The enrichment is a read model only and is never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from operator import attrgetter
from typing import TYPE_CHECKING, Iterable, List, Optional

from modules.core.tables import Column, ColumnKind, SortDirection, SortSpec, Table

if TYPE_CHECKING:
    from modules.orders.models import Order

MISSING_CUSTOMER_NAME = "Nieznany"


@dataclass(frozen=True)
class OrderRow:
    """An order as displayed in the order list."""

    id: str
    customer_id: str
    customer_name: str
    customer_contact: str
    customer_phone: str
    customer_email: str
    device_name: str
    serial_number: str
    issue_description: str
    status: str
    status_label: str
    diagnosis: str
    estimated_cost: Optional[Decimal]
    final_cost: Optional[Decimal]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> OrderRow:
        customer = order.customer
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            customer_name=customer.name if customer else MISSING_CUSTOMER_NAME,
            customer_contact=customer.contact if customer else "",
            customer_phone=customer.phone if customer else "",
            customer_email=customer.email if customer else "",
            device_name=order.device_name,
            serial_number=order.serial_number,
            issue_description=order.issue_description,
            status=order.status,
            status_label=order.get_status_display(),
            diagnosis=order.diagnosis,
            estimated_cost=order.estimated_cost,
            final_cost=order.final_cost,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


def build_order_rows(orders: Iterable[Order]) -> List[OrderRow]:
    return [OrderRow.from_order(order) for order in orders]


ORDER_TABLE = Table(
    [
        Column("id", attrgetter("id")),
        Column("customer_id", attrgetter("customer_id")),
        Column("customer_name", attrgetter("customer_name")),
        Column("customer_contact", attrgetter("customer_contact")),
        Column("customer_phone", attrgetter("customer_phone")),
        Column("customer_email", attrgetter("customer_email")),
        Column("device_name", attrgetter("device_name")),
        Column("serial_number", attrgetter("serial_number")),
        Column("issue_description", attrgetter("issue_description")),
        # Staff see and type the Polish label, so that is what status matches on.
        Column("status", attrgetter("status_label")),
        Column("diagnosis", attrgetter("diagnosis")),
        Column("estimated_cost", attrgetter("estimated_cost"), ColumnKind.NUMBER),
        Column("final_cost", attrgetter("final_cost"), ColumnKind.NUMBER),
        Column("created_at", attrgetter("created_at"), ColumnKind.TIMESTAMP),
        Column("updated_at", attrgetter("updated_at"), ColumnKind.TIMESTAMP),
    ]
)

DEFAULT_ORDER_SORT = SortSpec("updated_at", SortDirection.DESC)
