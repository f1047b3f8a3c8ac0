"""Notification URL configuration: ``/api/v1/templates/``."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.notifications.views import TemplateViewSet

router = DefaultRouter(trailing_slash=True)
router.register("templates", TemplateViewSet, basename="template")

urlpatterns = router.urls
