"""Notification DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``TemplateDTO``: input for template create / full overwrite.
- ``UpdateTemplateDTO``: partial input for template edits.
- ``DraftRequestDTO``: how to draft a message for an order.
- ``SendNotificationDTO``: a (possibly user-edited) message to send.
- ``NotificationDraftDTO`` / ``DispatchResultDTO``: outputs.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class ChannelEnum(StrEnum):
    SMS = "SMS"
    EMAIL = "EMAIL"


class DraftMode(StrEnum):
    TEMPLATE = "TEMPLATE"
    AI = "AI"


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TemplateDTO(BaseModel):
    """Immutable DTO for template creation and overwrite.

    ``name`` and ``body`` are required; the subject is kept for e-mail
    templates only.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    body: str
    type: ChannelEnum = ChannelEnum.SMS
    subject: str = ""

    @field_validator("name", "body")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Field is required.")
        return v


class UpdateTemplateDTO(BaseModel):
    """Immutable DTO for partial template edits."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: Optional[str] = None
    body: Optional[str] = None
    type: Optional[ChannelEnum] = None
    subject: Optional[str] = None

    @field_validator("name", "body")
    @classmethod
    def must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v:
            raise ValueError("Field must not be blank.")
        return v


# ---------------------------------------------------------------------------
# Drafting / sending
# ---------------------------------------------------------------------------


class DraftRequestDTO(BaseModel):
    """Draft from a stored template, or let the assistant write it.

    TEMPLATE mode needs ``template_id``; AI mode needs ``channel``.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    mode: DraftMode = DraftMode.TEMPLATE
    template_id: Optional[str] = None
    channel: Optional[ChannelEnum] = None

    @model_validator(mode="after")
    def mode_has_its_input(self):
        if self.mode == DraftMode.TEMPLATE and not self.template_id:
            raise ValueError("template_id is required in TEMPLATE mode.")
        if self.mode == DraftMode.AI and self.channel is None:
            raise ValueError("channel is required in AI mode.")
        return self


class SendNotificationDTO(BaseModel):
    """Immutable DTO for a message about to be sent."""

    model_config = ConfigDict(frozen=True)

    channel: ChannelEnum
    body: str
    subject: str = ""

    @field_validator("body")
    @classmethod
    def body_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Message body is required.")
        return v


class NotificationDraftDTO(BaseModel):
    """A drafted message, editable by staff before sending."""

    model_config = ConfigDict(frozen=True)

    channel: ChannelEnum
    subject: str
    body: str
    template_id: Optional[str] = None


class DispatchResultDTO(BaseModel):
    """Outcome of a successful send."""

    model_config = ConfigDict(frozen=True)

    channel: ChannelEnum
    recipient: str
    message: str
