"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderDTO``: input for order intake.
- ``UpdateOrderDTO``: partial input for order edits; only the fields
  present in the request are applied (``model_fields_set``).
- ``SavedOrder``: outcome of a save, including the "ready" transition flag.
- ``RecentOrderDTO`` / ``DashboardSummaryDTO``: dashboard read model.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.orders.models import Order


class OrderStatusEnum(StrEnum):
    RECEIVED = "RECEIVED"
    DIAGNOSIS = "DIAGNOSIS"
    WAITING_PARTS = "WAITING_PARTS"
    IN_PROGRESS = "IN_PROGRESS"
    READY = "READY"
    COMPLETED = "COMPLETED"


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order intake.

    Validates:
    - ``customer_id``, ``device_name`` and ``issue_description`` are
      present and not blank.
    - costs, when given, are not negative (blank means "unknown").
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    customer_id: str
    device_name: str
    issue_description: str
    serial_number: str = ""
    diagnosis: str = ""
    status: OrderStatusEnum = OrderStatusEnum.RECEIVED
    estimated_cost: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    final_cost: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    technician_notes: str = ""

    @field_validator("customer_id", "device_name", "issue_description")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Field is required.")
        return v

    @field_validator("estimated_cost", "final_cost", mode="before")
    @classmethod
    def blank_cost_is_none(cls, v):
        return _blank_to_none(v)


class UpdateOrderDTO(BaseModel):
    """Immutable DTO for order edits.

    Only fields present in ``model_fields_set`` are written; an explicit
    ``null`` cost clears it.  Required fields cannot be blanked.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    customer_id: Optional[str] = None
    device_name: Optional[str] = None
    issue_description: Optional[str] = None
    serial_number: Optional[str] = None
    diagnosis: Optional[str] = None
    status: Optional[OrderStatusEnum] = None
    estimated_cost: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    final_cost: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    technician_notes: Optional[str] = None

    @field_validator("customer_id", "device_name", "issue_description", "status")
    @classmethod
    def required_fields_not_blank(cls, v):
        if v is None or not str(v):
            raise ValueError("Field must not be blank.")
        return v

    @field_validator("estimated_cost", "final_cost", mode="before")
    @classmethod
    def blank_cost_is_none(cls, v):
        return _blank_to_none(v)


class DiagnosisRequestDTO(BaseModel):
    """Device and reported symptoms for an AI diagnosis suggestion."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    device_name: str
    issue_description: str

    @field_validator("device_name", "issue_description")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Field is required.")
        return v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SavedOrder:
    """Result of creating or editing an order.

    ``ready_transition`` is set when the order entered READY with this
    save (including a new order created as READY).
    """

    order: Order
    previous_status: Optional[str]
    ready_transition: bool

    @property
    def created(self) -> bool:
        return self.previous_status is None


class RecentOrderDTO(BaseModel):
    """Immutable DTO for an order shown in the dashboard's recent list."""

    model_config = ConfigDict(frozen=True)

    id: str
    device_name: str
    customer_name: str
    status: str
    status_label: str
    created_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> RecentOrderDTO:
        return cls(
            id=order.id,
            device_name=order.device_name,
            customer_name=order.customer.name,  # type: ignore[attr-defined]
            status=order.status,
            status_label=order.get_status_display(),  # type: ignore[attr-defined]
            created_at=order.created_at,
        )


class DashboardSummaryDTO(BaseModel):
    """Immutable DTO for the dashboard numbers."""

    model_config = ConfigDict(frozen=True)

    active_orders: int
    ready_orders: int
    revenue: Decimal
    recent_orders: List[RecentOrderDTO]
