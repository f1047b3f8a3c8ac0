"""Wiring of the notification services with their default collaborators."""

from __future__ import annotations

from modules.assistant.services import AssistantService
from modules.notifications.gateways import NotificationGateway
from modules.notifications.repositories.django_repository import (
    TemplateDjangoRepository,
)
from modules.notifications.services import NotificationService, TemplateService


def build_notification_service() -> NotificationService:
    return NotificationService(
        templates=TemplateService(repository=TemplateDjangoRepository()),
        assistant=AssistantService(),
        gateway=NotificationGateway(),
    )
