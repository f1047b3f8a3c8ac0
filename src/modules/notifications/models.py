"""Notification template model.

A template is a reusable SMS or e-mail text containing ``{{placeholder}}``
tokens that are filled in from an order and its customer.  ``subject`` is
only meaningful for e-mail templates.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone
from uuid6 import uuid7

from modules.notifications.constants import Channel


def generate_template_id() -> str:
    return str(uuid7())


class NotificationTemplate(models.Model):
    """Message skeleton sent to customers by SMS or e-mail."""

    id: models.CharField = models.CharField(
        primary_key=True, max_length=64, default=generate_template_id, editable=False
    )
    name: models.CharField = models.CharField(max_length=255)
    type: models.CharField = models.CharField(
        max_length=5, choices=Channel.choices, default=Channel.SMS
    )
    subject: models.CharField = models.CharField(max_length=255, blank=True, default="")
    body: models.TextField = models.TextField()
    created_at: models.DateTimeField = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "notification_templates"
        # Creation order; the first matching template wins the "ready" lookup.
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return f"{self.name} ({self.type})"
