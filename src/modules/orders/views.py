"""Order API views.

Exposes ``OrderService`` (and the drafting / sending operations of
``NotificationService``) via HTTP using DRF ViewSets.  Domain exceptions
are caught and translated into appropriate HTTP status codes; the view
never swallows generic exceptions.
"""

from __future__ import annotations

from typing import Any, Dict

from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet

from modules.assistant.services import AssistantService
from modules.core.filters import ColumnTableFilterBackend
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.notifications.dtos import DraftRequestDTO, SendNotificationDTO
from modules.notifications.exceptions import (
    MissingContactDetails,
    NotificationDispatchFailed,
    TemplateNotFound,
)
from modules.notifications.factories import build_notification_service
from modules.notifications.serializers import (
    DispatchResultSerializer,
    DraftRequestSerializer,
    NotificationDraftSerializer,
    SendNotificationSerializer,
)
from modules.orders.constants import ORDER_ID_URL_PATTERN
from modules.orders.dtos import (
    CreateOrderDTO,
    DiagnosisRequestDTO,
    SavedOrder,
    UpdateOrderDTO,
)
from modules.orders.exceptions import CustomerNotFound, OrderIdConflict, OrderNotFound
from modules.orders.filters import OrderFilter
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    DashboardSerializer,
    DiagnosisRequestSerializer,
    DiagnosisSuggestionSerializer,
    OrderInputSerializer,
    OrderRowSerializer,
    OrderSerializer,
    SavedOrderSerializer,
)
from modules.orders.services import OrderService
from modules.orders.tables import DEFAULT_ORDER_SORT, ORDER_TABLE, build_order_rows

ORDER_NOT_FOUND = {"detail": "Nie znaleziono zlecenia."}
CUSTOMER_NOT_FOUND = {"detail": "Nie znaleziono klienta."}
TEMPLATE_NOT_FOUND = {"detail": "Nie znaleziono szablonu."}
ORDER_ID_TAKEN = {"detail": "Numer zlecenia jest już zajęty."}

ORDER_FIELDS = (
    "customer_id",
    "device_name",
    "issue_description",
    "serial_number",
    "diagnosis",
    "status",
    "estimated_cost",
    "final_cost",
    "technician_notes",
)


def _submitted(data, fields) -> Dict[str, Any]:
    return {field: data[field] for field in fields if field in data}


def _bad_request(exc: Exception) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)


class OrderViewSet(ListModelMixin, GenericViewSet):
    """Repair orders: list, intake, edit, delete, drafting and sending.

    Uses ``OrderService`` with injected repositories (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    lookup_value_regex = ORDER_ID_URL_PATTERN
    serializer_class = OrderRowSerializer
    filter_backends = [DjangoFilterBackend, ColumnTableFilterBackend]
    filterset_class = OrderFilter
    table = ORDER_TABLE
    default_sort = DEFAULT_ORDER_SORT

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
        )
        self._notifications = build_notification_service()
        self._assistant = AssistantService()

    def get_queryset(self):
        return OrderDjangoRepository().queryset()

    def build_rows(self, orders):
        return build_order_rows(orders)

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=OrderSerializer)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(pk)
        except OrderNotFound:
            return Response(ORDER_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=OrderInputSerializer, responses=SavedOrderSerializer)
    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        try:
            dto = CreateOrderDTO(**_submitted(request.data, ORDER_FIELDS))
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        try:
            saved = self._service.create_order(dto)
        except CustomerNotFound:
            return Response(CUSTOMER_NOT_FOUND, status=status.HTTP_400_BAD_REQUEST)
        except OrderIdConflict:
            return Response(ORDER_ID_TAKEN, status=status.HTTP_409_CONFLICT)
        return Response(self._saved_payload(saved), status=status.HTTP_201_CREATED)

    @extend_schema(request=OrderInputSerializer, responses=SavedOrderSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/orders/{pk}/

        Only the fields present in the body are changed.
        """
        try:
            dto = UpdateOrderDTO(**_submitted(request.data, ORDER_FIELDS))
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        try:
            saved = self._service.update_order(pk, dto)
        except OrderNotFound:
            return Response(ORDER_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except CustomerNotFound:
            return Response(CUSTOMER_NOT_FOUND, status=status.HTTP_400_BAD_REQUEST)
        return Response(self._saved_payload(saved))

    @extend_schema(request=OrderInputSerializer, responses=SavedOrderSerializer)
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/orders/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/orders/{pk}/"""
        try:
            self._service.delete_order(pk)
        except OrderNotFound:
            return Response(ORDER_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _saved_payload(self, saved: SavedOrder) -> Dict[str, Any]:
        payload = dict(OrderSerializer(saved.order).data)
        payload["ready_transition"] = saved.ready_transition
        prompt = (
            self._notifications.ready_prompt(saved.order)
            if saved.ready_transition
            else None
        )
        payload["notification_prompt"] = (
            prompt.model_dump(mode="json") if prompt else None
        )
        return payload

    # ------------------------------------------------------------------
    # AI diagnosis
    # ------------------------------------------------------------------

    @extend_schema(
        request=DiagnosisRequestSerializer, responses=DiagnosisSuggestionSerializer
    )
    @action(detail=False, methods=["post"], url_path="diagnosis-suggestion")
    def diagnosis_suggestion(self, request: Request) -> Response:
        """POST /api/v1/orders/diagnosis-suggestion/"""
        try:
            dto = DiagnosisRequestDTO(
                device_name=request.data.get("device_name", ""),
                issue_description=request.data.get("issue_description", ""),
            )
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        suggestion = self._assistant.diagnosis_suggestion(
            dto.device_name, dto.issue_description
        )
        return Response({"suggestion": suggestion})

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    @extend_schema(request=DraftRequestSerializer, responses=NotificationDraftSerializer)
    @action(detail=True, methods=["post"], url_path="notification-draft")
    def notification_draft(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/notification-draft/"""
        try:
            dto = DraftRequestDTO(
                **_submitted(request.data, ("mode", "template_id", "channel"))
            )
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        try:
            order = self._service.get_order(pk)
            draft = self._notifications.draft(order, dto)
        except OrderNotFound:
            return Response(ORDER_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except TemplateNotFound:
            return Response(TEMPLATE_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(draft.model_dump(mode="json"))

    @extend_schema(request=SendNotificationSerializer, responses=DispatchResultSerializer)
    @action(detail=True, methods=["post"], url_path="notifications")
    def send_notification(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/notifications/"""
        try:
            dto = SendNotificationDTO(
                **_submitted(request.data, ("channel", "subject", "body"))
            )
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        try:
            order = self._service.get_order(pk)
            result = self._notifications.send(order, dto)
        except OrderNotFound:
            return Response(ORDER_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except MissingContactDetails as exc:
            return _bad_request(exc)
        except NotificationDispatchFailed as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(result.model_dump(mode="json"))


class DashboardView(APIView):
    """GET /api/v1/dashboard/: workload counts, revenue and recent orders."""

    @extend_schema(responses=DashboardSerializer)
    def get(self, request: Request) -> Response:
        service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
        )
        summary = service.dashboard_summary()
        return Response(DashboardSerializer(summary).data)
