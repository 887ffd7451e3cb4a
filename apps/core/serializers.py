"""
Serializer building blocks shared across apps.

StrictFieldsMixin:
    Rejects request payloads that carry fields the serializer does not
    declare. DRF silently drops such fields by default; the API treats them
    as a client error instead.

Usage:
    class OrderUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
        status = serializers.ChoiceField(choices=OrderStatus.choices)
"""

from collections.abc import Mapping

from rest_framework import serializers


class StrictFieldsMixin:
    """Raise a ValidationError for every unknown key in the input."""

    def to_internal_value(self, data):
        if isinstance(data, Mapping):
            unknown = sorted(set(data.keys()) - set(self.fields.keys()))
            if unknown:
                raise serializers.ValidationError({
                    field: ['This field is not allowed.'] for field in unknown
                })
        return super().to_internal_value(data)
