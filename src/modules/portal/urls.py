"""Client portal URL configuration: ``/api/v1/portal/``."""

from __future__ import annotations

from django.urls import path

from modules.portal.views import PortalStatusView

urlpatterns = [
    path("portal/status/", PortalStatusView.as_view(), name="portal-status"),
]
