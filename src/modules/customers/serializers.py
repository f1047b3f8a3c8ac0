"""Customer DRF serializers for API output.

Input is parsed into Pydantic DTOs (``dtos.py``); these serializers only
render customers and document the request bodies for the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer, CustomerType


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource."""

    type_label = serializers.CharField(source="get_type_display", read_only=True)

    class Meta:
        model = Customer
        fields = [
            "id",
            "name",
            "phone",
            "email",
            "type",
            "type_label",
            "tax_id",
            "notes",
            "created_at",
        ]
        read_only_fields = fields


class CustomerInputSerializer(serializers.Serializer):
    """Request body of customer create / update (schema only)."""

    name = serializers.CharField()
    phone = serializers.CharField()
    email = serializers.EmailField(required=False, allow_blank=True)
    type = serializers.ChoiceField(choices=CustomerType.choices, required=False)
    tax_id = serializers.CharField(required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)
