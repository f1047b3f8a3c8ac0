"""Notification service layer (Use Cases).

- ``TemplateService``: CRUD of message templates.
- ``NotificationService``: drafting a message for an order (from a
  template or by the AI assistant) and sending it by SMS or e-mail.

Business rules enforced:
- SMS needs the customer's phone, e-mail needs the customer's address.
- An e-mail without subject is sent as "Powiadomienie Serwisowe".
- A gateway error or an unconfirmed send is a dispatch failure; the
  drafted text is not touched so it can be sent again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.notifications.constants import (
    AI_EMAIL_SUBJECT,
    DEFAULT_EMAIL_SUBJECT,
    DISPATCH_FAILED_MESSAGE,
    MISSING_EMAIL_MESSAGE,
    MISSING_PHONE_MESSAGE,
    NOT_CONFIRMED_MESSAGE,
    READY_TEMPLATE_ID_MARKER,
    READY_TEMPLATE_NAME_MARKER,
    SENT_MESSAGES,
    Channel,
)
from modules.notifications.dtos import (
    ChannelEnum,
    DispatchResultDTO,
    DraftMode,
    NotificationDraftDTO,
)
from modules.notifications.exceptions import (
    MissingContactDetails,
    NotificationDispatchFailed,
    TemplateNotFound,
)
from modules.notifications.models import NotificationTemplate
from modules.notifications.templating import process_template

if TYPE_CHECKING:
    from modules.assistant.services import AssistantService
    from modules.notifications.dtos import (
        DraftRequestDTO,
        SendNotificationDTO,
        TemplateDTO,
        UpdateTemplateDTO,
    )
    from modules.notifications.gateways import NotificationGateway
    from modules.notifications.repositories.interfaces import ITemplateRepository
    from modules.orders.models import Order

logger = structlog.get_logger(__name__)


class TemplateService:
    """Application service for template use-cases.

    Receives an ``ITemplateRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ITemplateRepository) -> None:
        self._repo = repository

    def list_templates(self) -> List[NotificationTemplate]:
        return self._repo.list()

    def get_template(self, id: str) -> NotificationTemplate:
        """Raises ``TemplateNotFound`` for unknown ids."""
        template = self._repo.get_by_id(id)
        if not template:
            raise TemplateNotFound(f"Template {id} not found.")
        return template

    @transaction.atomic
    def create_template(self, dto: TemplateDTO) -> NotificationTemplate:
        template = NotificationTemplate(
            name=dto.name,
            body=dto.body,
            type=str(dto.type),
            subject=dto.subject if dto.type == ChannelEnum.EMAIL else "",
        )
        template = self._repo.save(template)
        logger.info("template.created", template_id=template.id)
        return template

    @transaction.atomic
    def update_template(self, id: str, dto: UpdateTemplateDTO) -> NotificationTemplate:
        template = self.get_template(id)
        for field in ("name", "body", "type", "subject"):
            value = getattr(dto, field)
            if value is not None:
                setattr(template, field, str(value))
        if template.type != Channel.EMAIL:
            template.subject = ""
        template = self._repo.save(template)
        logger.info("template.updated", template_id=id)
        return template

    @transaction.atomic
    def delete_template(self, id: str) -> None:
        if not self._repo.delete(id):
            raise TemplateNotFound(f"Template {id} not found.")

    def find_ready_template(self) -> Optional[NotificationTemplate]:
        """First template meant for the "ready for pickup" message."""
        for template in self._repo.list():
            if (
                READY_TEMPLATE_ID_MARKER in template.id.lower()
                or READY_TEMPLATE_NAME_MARKER in template.name.lower()
            ):
                return template
        return None


class NotificationService:
    """Drafts and sends customer notifications about an order."""

    def __init__(
        self,
        templates: TemplateService,
        assistant: AssistantService,
        gateway: NotificationGateway,
    ) -> None:
        self._templates = templates
        self._assistant = assistant
        self._gateway = gateway

    # ------------------------------------------------------------------
    # Drafting
    # ------------------------------------------------------------------

    def draft(self, order: Order, request: DraftRequestDTO) -> NotificationDraftDTO:
        """Draft a message for *order* as described by *request*.

        Raises:
            TemplateNotFound: TEMPLATE mode with an unknown template id.
        """
        if request.mode == DraftMode.AI:
            return self.draft_with_assistant(order, request.channel)
        template = self._templates.get_template(request.template_id)
        return self.draft_from_template(order, template)

    def draft_from_template(
        self, order: Order, template: NotificationTemplate
    ) -> NotificationDraftDTO:
        is_email = template.type == Channel.EMAIL
        return NotificationDraftDTO(
            channel=template.type,
            subject=template.subject if is_email else "",
            body=process_template(template.body, order, order.customer),
            template_id=template.id,
        )

    def draft_with_assistant(
        self, order: Order, channel: ChannelEnum
    ) -> NotificationDraftDTO:
        body = self._assistant.customer_notification(order, order.customer, str(channel))
        subject = (
            AI_EMAIL_SUBJECT.format(device=order.device_name)
            if channel == ChannelEnum.EMAIL
            else ""
        )
        return NotificationDraftDTO(channel=channel, subject=subject, body=body)

    def ready_prompt(self, order: Order) -> Optional[NotificationDraftDTO]:
        """Pre-filled draft offered when an order becomes READY, if any."""
        template = self._templates.find_ready_template()
        if template is None:
            logger.info("notification.ready_template_missing", order_id=order.id)
            return None
        return self.draft_from_template(order, template)

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    def send(self, order: Order, message: SendNotificationDTO) -> DispatchResultDTO:
        """Send *message* to the order's customer.

        Raises:
            MissingContactDetails: no phone (SMS) / e-mail (EMAIL).
            NotificationDispatchFailed: the gateway raised or did not
                confirm the message.
        """
        customer = order.customer
        is_sms = message.channel == ChannelEnum.SMS
        log = logger.bind(order_id=order.id, channel=str(message.channel))

        recipient = customer.phone if is_sms else customer.email
        if not recipient:
            reason = MISSING_PHONE_MESSAGE if is_sms else MISSING_EMAIL_MESSAGE
            log.warning("notification.missing_contact")
            raise MissingContactDetails(DISPATCH_FAILED_MESSAGE.format(reason=reason))

        try:
            if is_sms:
                accepted = self._gateway.send_sms(recipient, message.body)
            else:
                subject = message.subject.strip() or DEFAULT_EMAIL_SUBJECT
                accepted = self._gateway.send_email(recipient, subject, message.body)
        except Exception as exc:
            log.error("notification.dispatch_error", error=str(exc))
            raise NotificationDispatchFailed(
                DISPATCH_FAILED_MESSAGE.format(reason=exc)
            ) from exc

        if not accepted:
            log.error("notification.not_confirmed")
            raise NotificationDispatchFailed(
                DISPATCH_FAILED_MESSAGE.format(reason=NOT_CONFIRMED_MESSAGE)
            )

        log.info("notification.dispatched")
        return DispatchResultDTO(
            channel=message.channel,
            recipient=recipient,
            message=SENT_MESSAGES[Channel(str(message.channel))],
        )
