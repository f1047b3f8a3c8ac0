"""Django ORM implementation of the notification template repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.notifications.models import NotificationTemplate
from modules.notifications.repositories.interfaces import ITemplateRepository

logger = structlog.get_logger(__name__)


class TemplateDjangoRepository(ITemplateRepository):
    """Concrete template repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[NotificationTemplate]:
        return NotificationTemplate.objects.filter(id=id).first()

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[NotificationTemplate]:
        queryset = NotificationTemplate.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: NotificationTemplate) -> NotificationTemplate:
        entity.save()
        logger.info("template.saved", template_id=entity.id, type=entity.type)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        deleted, _ = NotificationTemplate.objects.filter(id=id).delete()
        if deleted:
            logger.info("template.deleted", template_id=id)
        return bool(deleted)
