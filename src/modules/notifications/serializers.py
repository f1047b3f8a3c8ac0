"""Notification DRF serializers.

``TemplateSerializer`` renders stored templates.  The remaining
serializers describe request / response bodies for the OpenAPI schema;
requests are parsed into Pydantic DTOs (``dtos.py``).
"""

from __future__ import annotations

from rest_framework import serializers

from modules.notifications.constants import Channel
from modules.notifications.models import NotificationTemplate


class TemplateSerializer(serializers.ModelSerializer):
    """Read serializer for the NotificationTemplate resource."""

    class Meta:
        model = NotificationTemplate
        fields = ["id", "name", "type", "subject", "body"]
        read_only_fields = fields


class TemplateInputSerializer(serializers.Serializer):
    name = serializers.CharField()
    body = serializers.CharField()
    type = serializers.ChoiceField(choices=Channel.choices, required=False)
    subject = serializers.CharField(required=False, allow_blank=True)


class DraftRequestSerializer(serializers.Serializer):
    mode = serializers.ChoiceField(choices=["TEMPLATE", "AI"], default="TEMPLATE")
    template_id = serializers.CharField(required=False)
    channel = serializers.ChoiceField(choices=Channel.choices, required=False)


class NotificationDraftSerializer(serializers.Serializer):
    channel = serializers.ChoiceField(choices=Channel.choices)
    subject = serializers.CharField(allow_blank=True)
    body = serializers.CharField()
    template_id = serializers.CharField(allow_null=True, required=False)


class SendNotificationSerializer(serializers.Serializer):
    channel = serializers.ChoiceField(choices=Channel.choices)
    subject = serializers.CharField(required=False, allow_blank=True)
    body = serializers.CharField()


class DispatchResultSerializer(serializers.Serializer):
    channel = serializers.ChoiceField(choices=Channel.choices)
    recipient = serializers.CharField()
    message = serializers.CharField()
