"""Customer API views.

Exposes the ``CustomerService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.filters import ColumnTableFilterBackend
from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import CustomerIdConflict, CustomerNotFound
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerInputSerializer, CustomerSerializer
from modules.customers.services import CustomerService
from modules.customers.tables import CUSTOMER_TABLE, DEFAULT_CUSTOMER_SORT

NOT_FOUND = {"detail": "Nie znaleziono klienta."}
ID_TAKEN = {"detail": "Numer klienta jest już zajęty."}


class CustomerViewSet(ListModelMixin, GenericViewSet):
    """List, register and edit customers.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    There is no destroy action: customers are kept for the order history.
    """

    serializer_class = CustomerSerializer
    filter_backends = [ColumnTableFilterBackend]
    table = CUSTOMER_TABLE
    default_sort = DEFAULT_CUSTOMER_SORT

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    def get_queryset(self):
        return self._service.list_customers()

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        try:
            customer = self._service.get_customer(pk)
        except CustomerNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update
    # ------------------------------------------------------------------

    @extend_schema(request=CustomerInputSerializer, responses=CustomerSerializer)
    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        data = request.data
        try:
            dto = CreateCustomerDTO(
                name=data.get("name", ""),
                phone=data.get("phone", ""),
                email=data.get("email"),
                type=data.get("type") or "INDIVIDUAL",
                tax_id=data.get("tax_id") or "",
                notes=data.get("notes") or "",
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            customer = self._service.create_customer(dto)
        except CustomerIdConflict:
            return Response(ID_TAKEN, status=status.HTTP_409_CONFLICT)
        out = CustomerSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)

    @extend_schema(request=CustomerInputSerializer, responses=CustomerSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/customers/{pk}/"""
        data = request.data
        try:
            dto = UpdateCustomerDTO(
                name=data.get("name"),
                phone=data.get("phone"),
                email=data.get("email"),
                type=data.get("type"),
                tax_id=data.get("tax_id"),
                notes=data.get("notes"),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            customer = self._service.update_customer(pk, dto)
        except CustomerNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(CustomerSerializer(customer).data)

    @extend_schema(request=CustomerInputSerializer, responses=CustomerSerializer)
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/customers/{pk}/"""
        return self.update(request, pk)
