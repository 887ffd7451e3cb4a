from decimal import Decimal
from rest_framework import serializers

from apps.core.serializers import StrictFieldsMixin
from .models import Product


class ProductSerializer(StrictFieldsMixin, serializers.ModelSerializer):
    """Product CRUD serializer."""

    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.01'),
    )

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'price',
            'description',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'name': {'allow_blank': False},
            'description': {'required': False},
        }


class ProductMinimalSerializer(serializers.ModelSerializer):
    """Minimal product info for nested serialization."""

    class Meta:
        model = Product
        fields = ['id', 'name', 'price']
        read_only_fields = fields
