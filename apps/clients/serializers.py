from rest_framework import serializers

from apps.core.serializers import StrictFieldsMixin
from apps.orders.models import Order, OrderItem
from .models import Client


class ClientSerializer(StrictFieldsMixin, serializers.ModelSerializer):
    """Client CRUD serializer."""

    class Meta:
        model = Client
        fields = [
            'id',
            'name',
            'phone',
            'address',
            'birthday',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class ClientMinimalSerializer(serializers.ModelSerializer):
    """Minimal client info for nested serialization."""

    class Meta:
        model = Client
        fields = ['id', 'name', 'phone']
        read_only_fields = fields


class ClientOrderItemSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)

    class Meta:
        model = OrderItem
        fields = ['product_name', 'quantity', 'price']
        read_only_fields = fields


class ClientOrderSerializer(serializers.ModelSerializer):
    """An order as shown in the client's history."""

    items = ClientOrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = ['id', 'total', 'status', 'delivery_date', 'created_at', 'items']
        read_only_fields = fields


class ClientDetailSerializer(ClientSerializer):
    """Client with order history, newest first."""

    orders = serializers.SerializerMethodField()

    class Meta(ClientSerializer.Meta):
        fields = ClientSerializer.Meta.fields + ['orders']

    def get_orders(self, obj) -> list:
        orders = (
            obj.orders
            .prefetch_related('items__product')
            .order_by('-created_at')
        )
        return ClientOrderSerializer(orders, many=True).data
