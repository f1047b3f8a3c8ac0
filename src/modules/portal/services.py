"""Client portal service.

A customer identifies an order by its number (a prefix is enough) and
proves it is theirs with the phone number stored on the customer.  This
is a convenience check for a low-stakes status page, not authentication.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog
from django.conf import settings

from modules.portal.dtos import LookupOutcome, PortalLookupResult

if TYPE_CHECKING:
    from modules.assistant.services import AssistantService
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.portal.dtos import PortalLookupDTO

logger = structlog.get_logger(__name__)

NOT_FOUND_MESSAGE = (
    "Nie znaleziono zlecenia o podanym numerze. Sprawdź poprawność danych."
)
PHONE_MISMATCH_MESSAGE = "Numer telefonu nie pasuje do tego zlecenia."

_NON_DIGITS = re.compile(r"\D")


def digits_only(value: str) -> str:
    return _NON_DIGITS.sub("", value or "")


def phones_match(stored: str, submitted: str, min_digits: int) -> bool:
    """Compare two phone numbers on their digits.

    An empty submission never matches.  Besides exact equality, one number
    may end with the other (country prefix on either side) provided the
    shorter one still has ``min_digits`` digits.
    """
    stored_digits = digits_only(stored)
    submitted_digits = digits_only(submitted)
    if not stored_digits or not submitted_digits:
        return False
    if stored_digits == submitted_digits:
        return True
    shorter, longer = sorted((stored_digits, submitted_digits), key=len)
    return len(shorter) >= min_digits and longer.endswith(shorter)


class PortalService:
    """Status lookup for the client portal."""

    def __init__(
        self,
        order_repository: IOrderRepository,
        customer_repository: ICustomerRepository,
        assistant: AssistantService,
    ) -> None:
        self._order_repo = order_repository
        self._customer_repo = customer_repository
        self._assistant = assistant

    def lookup(self, dto: PortalLookupDTO) -> PortalLookupResult:
        log = logger.bind(order_query=dto.order_id)

        order = self._order_repo.find_by_id_prefix(dto.order_id)
        if order is None:
            log.info("portal.order_not_found")
            return PortalLookupResult(
                outcome=LookupOutcome.NOT_FOUND, message=NOT_FOUND_MESSAGE
            )

        customer = self._customer_repo.get_by_id(order.customer_id)
        if customer is None or not phones_match(
            customer.phone, dto.phone, settings.PORTAL_MIN_PHONE_DIGITS
        ):
            log.warning("portal.phone_mismatch", order_id=order.id)
            return PortalLookupResult(
                outcome=LookupOutcome.PHONE_MISMATCH, message=PHONE_MISMATCH_MESSAGE
            )

        answer = self._assistant.client_status_answer(order, customer)
        log.info("portal.status_answered", order_id=order.id)
        return PortalLookupResult(
            outcome=LookupOutcome.FOUND,
            message=answer,
            order_id=order.id,
            status=order.status,
            status_label=order.get_status_display(),
        )
