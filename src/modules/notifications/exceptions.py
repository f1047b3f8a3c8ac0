"""Notification domain exceptions.

Raised by the Service Layer; the API layer (Views) translates them
into HTTP responses.
"""

from __future__ import annotations


class TemplateNotFound(Exception):
    """The requested notification template does not exist."""


class MissingContactDetails(Exception):
    """The customer has no phone number / e-mail for the chosen channel."""


class NotificationDispatchFailed(Exception):
    """The gateway raised or did not confirm the message."""
