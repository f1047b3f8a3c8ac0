"""Client portal DTOs.

- ``PortalLookupDTO``: order number (or its prefix) and phone number.
- ``PortalLookupResult``: outcome of a lookup.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class LookupOutcome(StrEnum):
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"
    PHONE_MISMATCH = "PHONE_MISMATCH"


class PortalLookupDTO(BaseModel):
    """Immutable DTO for a portal status question."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    order_id: str
    phone: str

    @field_validator("order_id", "phone")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Field is required.")
        return v


class PortalLookupResult(BaseModel):
    """What the customer gets back.

    ``order_id`` and ``status`` are only filled in when the order was
    found and the phone number matched.
    """

    model_config = ConfigDict(frozen=True)

    outcome: LookupOutcome
    message: str
    order_id: Optional[str] = None
    status: Optional[str] = None
    status_label: Optional[str] = None
