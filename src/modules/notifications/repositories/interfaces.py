"""Notification template repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.notifications.models import NotificationTemplate


class ITemplateRepository(IRepository["NotificationTemplate"]):
    """Repository contract for notification templates."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[NotificationTemplate]:
        """List templates in display order."""
