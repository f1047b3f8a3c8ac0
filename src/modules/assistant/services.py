"""AI assistant service.

Each operation builds a prompt, makes one chat-completion request and
returns the generated text.  The assistant never raises: a missing API
key, an empty answer and a failed request each map to a fixed Polish
fallback text, so callers can always show something to the user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

import structlog
from django.conf import settings
from openai import OpenAIError

from modules.assistant import prompts
from modules.assistant.client import get_ai_client

if TYPE_CHECKING:
    from openai import OpenAI

    from modules.customers.models import Customer
    from modules.orders.models import Order

logger = structlog.get_logger(__name__)

NOTIFICATION_NOT_CONFIGURED = "Błąd konfiguracji API."
NOTIFICATION_EMPTY = "Nie udało się wygenerować wiadomości."
NOTIFICATION_FAILED = "Wystąpił błąd podczas generowania wiadomości."

DIAGNOSIS_NOT_CONFIGURED = "Błąd API."
DIAGNOSIS_EMPTY = "Brak sugestii."
DIAGNOSIS_FAILED = "Błąd generowania diagnozy."

PORTAL_NOT_CONFIGURED = "Przepraszamy, asystent jest chwilowo niedostępny."
PORTAL_EMPTY = "Status twojego zlecenia to: {status}"
PORTAL_FAILED = "Wystąpił błąd podczas pobierania statusu."


class AssistantService:
    """Text generation for staff drafts and the client portal."""

    def __init__(
        self, client_factory: Callable[[], Optional[OpenAI]] = get_ai_client
    ) -> None:
        self._client_factory = client_factory

    def customer_notification(
        self, order: Order, customer: Customer, channel: str
    ) -> str:
        """Short SMS / e-mail text telling the customer about their repair."""
        return self._generate(
            operation="notification",
            prompt=prompts.notification_prompt(order, customer, channel),
            not_configured=NOTIFICATION_NOT_CONFIGURED,
            empty=NOTIFICATION_EMPTY,
            failed=NOTIFICATION_FAILED,
        )

    def diagnosis_suggestion(self, device_name: str, issue_description: str) -> str:
        """Likely causes and repair steps for a device and its symptoms."""
        return self._generate(
            operation="diagnosis",
            prompt=prompts.diagnosis_prompt(device_name, issue_description),
            not_configured=DIAGNOSIS_NOT_CONFIGURED,
            empty=DIAGNOSIS_EMPTY,
            failed=DIAGNOSIS_FAILED,
        )

    def client_status_answer(self, order: Order, customer: Customer) -> str:
        """Answer to a customer asking about their order in the portal."""
        return self._generate(
            operation="portal",
            prompt=prompts.portal_prompt(order, customer),
            not_configured=PORTAL_NOT_CONFIGURED,
            empty=PORTAL_EMPTY.format(status=order.get_status_display()),
            failed=PORTAL_FAILED,
        )

    def _generate(
        self,
        operation: str,
        prompt: str,
        not_configured: str,
        empty: str,
        failed: str,
    ) -> str:
        log = logger.bind(operation=operation, model=settings.AI_MODEL)
        client = self._client_factory()
        if client is None:
            log.warning("assistant.not_configured")
            return not_configured

        try:
            response = client.chat.completions.create(
                model=settings.AI_MODEL,
                messages=[
                    {"role": "system", "content": prompts.SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except OpenAIError as exc:
            log.error("assistant.request_failed", error=str(exc))
            return failed

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            log.warning("assistant.empty_response")
            return empty

        log.info("assistant.generated", length=len(content))
        return content.strip()
