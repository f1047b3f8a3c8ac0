"""Client portal API view.

Public endpoint, rate limited with the ``portal_lookup`` throttle scope.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.assistant.services import AssistantService
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.portal.dtos import LookupOutcome, PortalLookupDTO
from modules.portal.serializers import (
    PortalLookupResultSerializer,
    PortalLookupSerializer,
)
from modules.portal.services import PortalService

OUTCOME_STATUS = {
    LookupOutcome.FOUND: status.HTTP_200_OK,
    LookupOutcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    LookupOutcome.PHONE_MISMATCH: status.HTTP_403_FORBIDDEN,
}


class PortalStatusView(APIView):
    """POST /api/v1/portal/status/"""

    throttle_scope = "portal_lookup"

    @extend_schema(request=PortalLookupSerializer, responses=PortalLookupResultSerializer)
    def post(self, request: Request) -> Response:
        try:
            dto = PortalLookupDTO(
                order_id=request.data.get("order_id", ""),
                phone=request.data.get("phone", ""),
            )
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        service = PortalService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            assistant=AssistantService(),
        )
        result = service.lookup(dto)
        return Response(
            result.model_dump(mode="json"), status=OUTCOME_STATUS[result.outcome]
        )
