"""Notification template API views.

Exposes ``TemplateService`` via HTTP using a DRF ViewSet.  Drafting and
sending live on the order resource (``modules.orders.views``).
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.notifications.dtos import TemplateDTO, UpdateTemplateDTO
from modules.notifications.exceptions import TemplateNotFound
from modules.notifications.repositories.django_repository import (
    TemplateDjangoRepository,
)
from modules.notifications.serializers import (
    TemplateInputSerializer,
    TemplateSerializer,
)
from modules.notifications.services import TemplateService

NOT_FOUND = {"detail": "Nie znaleziono szablonu."}
TEMPLATE_FIELDS = ("name", "body", "type", "subject")


class TemplateViewSet(GenericViewSet):
    """CRUD for SMS / e-mail templates.

    Uses ``TemplateService`` with ``TemplateDjangoRepository`` (DIP).
    The template list is short and is returned unpaginated.
    """

    serializer_class = TemplateSerializer
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = TemplateService(repository=TemplateDjangoRepository())

    def get_queryset(self):
        return self._service.list_templates()

    def list(self, request: Request) -> Response:
        """GET /api/v1/templates/"""
        templates = self._service.list_templates()
        return Response(TemplateSerializer(templates, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/templates/{pk}/"""
        try:
            template = self._service.get_template(pk)
        except TemplateNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(TemplateSerializer(template).data)

    @extend_schema(request=TemplateInputSerializer, responses=TemplateSerializer)
    def create(self, request: Request) -> Response:
        """POST /api/v1/templates/"""
        data = request.data
        try:
            dto = TemplateDTO(
                name=data.get("name", ""),
                body=data.get("body", ""),
                type=data.get("type") or "SMS",
                subject=data.get("subject") or "",
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        template = self._service.create_template(dto)
        return Response(
            TemplateSerializer(template).data, status=status.HTTP_201_CREATED
        )

    @extend_schema(request=TemplateInputSerializer, responses=TemplateSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/templates/{pk}/"""
        data = request.data
        try:
            dto = UpdateTemplateDTO(**{f: data[f] for f in TEMPLATE_FIELDS if f in data})
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            template = self._service.update_template(pk, dto)
        except TemplateNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(TemplateSerializer(template).data)

    @extend_schema(request=TemplateInputSerializer, responses=TemplateSerializer)
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/templates/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/templates/{pk}/"""
        try:
            self._service.delete_template(pk)
        except TemplateNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
