"""Order DRF serializers for API output.

Requests are parsed into Pydantic DTOs (``dtos.py``); the input
serializers here only document request bodies for the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.notifications.serializers import NotificationDraftSerializer
from modules.orders.constants import OrderStatus
from modules.orders.models import Order, StatusHistoryEntry


class StatusHistoryEntrySerializer(serializers.ModelSerializer):
    status_label = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = StatusHistoryEntry
        fields = ["status", "status_label", "timestamp"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Full order with its status history (detail and save responses)."""

    customer_id = serializers.CharField(read_only=True)
    customer_name = serializers.CharField(source="customer.name", read_only=True)
    status_label = serializers.CharField(source="get_status_display", read_only=True)
    history = StatusHistoryEntrySerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "customer_id",
            "customer_name",
            "device_name",
            "serial_number",
            "issue_description",
            "diagnosis",
            "status",
            "status_label",
            "estimated_cost",
            "final_cost",
            "technician_notes",
            "created_at",
            "updated_at",
            "history",
        ]
        read_only_fields = fields


class SavedOrderSerializer(OrderSerializer):
    """Order save response with the "ready for pickup" prompt."""

    ready_transition = serializers.BooleanField(read_only=True)
    notification_prompt = NotificationDraftSerializer(read_only=True, allow_null=True)

    class Meta(OrderSerializer.Meta):
        fields = OrderSerializer.Meta.fields + ["ready_transition", "notification_prompt"]
        read_only_fields = fields


class OrderRowSerializer(serializers.Serializer):
    """One row of the order list: the order plus its customer's details."""

    id = serializers.CharField()
    customer_id = serializers.CharField()
    customer_name = serializers.CharField()
    customer_contact = serializers.CharField()
    customer_phone = serializers.CharField()
    customer_email = serializers.CharField()
    device_name = serializers.CharField()
    serial_number = serializers.CharField()
    issue_description = serializers.CharField()
    status = serializers.CharField()
    status_label = serializers.CharField()
    diagnosis = serializers.CharField()
    estimated_cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, allow_null=True
    )
    final_cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, allow_null=True
    )
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class OrderInputSerializer(serializers.Serializer):
    customer_id = serializers.CharField()
    device_name = serializers.CharField()
    issue_description = serializers.CharField()
    serial_number = serializers.CharField(required=False, allow_blank=True)
    diagnosis = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)
    estimated_cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    final_cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False, allow_null=True
    )
    technician_notes = serializers.CharField(required=False, allow_blank=True)


class DiagnosisRequestSerializer(serializers.Serializer):
    device_name = serializers.CharField()
    issue_description = serializers.CharField()


class DiagnosisSuggestionSerializer(serializers.Serializer):
    suggestion = serializers.CharField()


class RecentOrderSerializer(serializers.Serializer):
    id = serializers.CharField()
    device_name = serializers.CharField()
    customer_name = serializers.CharField()
    status = serializers.CharField()
    status_label = serializers.CharField()
    created_at = serializers.DateTimeField()


class DashboardSerializer(serializers.Serializer):
    active_orders = serializers.IntegerField()
    ready_orders = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=12, decimal_places=2)
    recent_orders = RecentOrderSerializer(many=True)
