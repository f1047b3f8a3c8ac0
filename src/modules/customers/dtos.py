"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: partial input for customer edits.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator, validate_email


class CustomerTypeEnum(StrEnum):
    """Private person or company."""

    INDIVIDUAL = "INDIVIDUAL"
    COMPANY = "COMPANY"


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    ``name`` and ``phone`` are required and must not be blank.
    ``email`` is optional; an empty string means "no e-mail".
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    phone: str
    email: Optional[EmailStr] = None
    type: CustomerTypeEnum = CustomerTypeEnum.INDIVIDUAL
    tax_id: str = ""
    notes: str = ""

    @field_validator("name", "phone")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Field is required.")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def empty_email_is_none(cls, v):
        return _blank_to_none(v)


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    All fields are optional; only supplied fields will be updated.
    Supplying an empty ``email`` clears it.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    type: Optional[CustomerTypeEnum] = None
    tax_id: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("name", "phone")
    @classmethod
    def must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v:
            raise ValueError("Field must not be blank.")
        return v

    @field_validator("email")
    @classmethod
    def email_is_valid_or_empty(cls, v: Optional[str]) -> Optional[str]:
        if v:
            validate_email(v)
        return v
