"""Client portal DRF serializers (OpenAPI schema)."""

from __future__ import annotations

from rest_framework import serializers

from modules.portal.dtos import LookupOutcome


class PortalLookupSerializer(serializers.Serializer):
    order_id = serializers.CharField()
    phone = serializers.CharField()


class PortalLookupResultSerializer(serializers.Serializer):
    outcome = serializers.ChoiceField(choices=[o.value for o in LookupOutcome])
    message = serializers.CharField()
    order_id = serializers.CharField(allow_null=True, required=False)
    status = serializers.CharField(allow_null=True, required=False)
    status_label = serializers.CharField(allow_null=True, required=False)
