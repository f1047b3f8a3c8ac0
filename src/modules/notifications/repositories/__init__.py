"""Notification template repositories package."""

from modules.notifications.repositories.django_repository import (
    TemplateDjangoRepository,
)
from modules.notifications.repositories.interfaces import ITemplateRepository

__all__ = ["ITemplateRepository", "TemplateDjangoRepository"]
