"""Outbound SMS and e-mail gateways.

The SMS gateway is a stand-in for a real provider: it waits the
configured delay, logs the message and reports success.  E-mail goes
through Django's mail framework, so ``EMAIL_BACKEND`` decides whether
messages are printed, captured or really delivered.
"""

from __future__ import annotations

import time

import structlog
from django.conf import settings
from django.core.mail import send_mail

logger = structlog.get_logger(__name__)


class NotificationGateway:
    """Sends customer notifications.

    Both operations return ``True`` once the message was accepted and
    either return ``False`` or raise when it was not.
    """

    def _wait(self) -> None:
        delay = float(settings.NOTIFICATION_SEND_DELAY)
        if delay > 0:
            time.sleep(delay)

    def send_sms(self, phone: str, message: str) -> bool:
        self._wait()
        logger.info("notification.sms_sent", phone=phone, length=len(message))
        return True

    def send_email(self, address: str, subject: str, body: str) -> bool:
        self._wait()
        accepted = send_mail(
            subject,
            body,
            settings.DEFAULT_FROM_EMAIL,
            [address],
            fail_silently=False,
        )
        logger.info("notification.email_sent", subject=subject, accepted=accepted)
        return accepted == 1
