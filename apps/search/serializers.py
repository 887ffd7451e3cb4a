from rest_framework import serializers

from apps.clients.serializers import ClientMinimalSerializer
from apps.orders.models import Order
from apps.products.serializers import ProductMinimalSerializer


class SearchQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default='', trim_whitespace=True)


class OrderHitSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source='client.name', read_only=True, default=None)

    class Meta:
        model = Order
        fields = ['id', 'total', 'status', 'client_name', 'created_at']
        read_only_fields = fields


class SearchResultSerializer(serializers.Serializer):
    """Grouped search hits, at most five per category."""

    clients = ClientMinimalSerializer(many=True)
    orders = OrderHitSerializer(many=True)
    products = ProductMinimalSerializer(many=True)
