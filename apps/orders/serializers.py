"""
Serializers for orders app.

Input Serializers:
    OrderItemInputSerializer - One (product_id, quantity) line
    OrderCreateSerializer - New order payload
    OrderUpdateSerializer - Partial update (status, client, delivery, observations)
    OrderFilterSerializer - List query parameters
    OrderPdfQuerySerializer - Document type for the PDF endpoint

Output Serializers:
    OrderItemSerializer - Line with snapshotted price and subtotal
    OrderSerializer - Order with creator, client and items
"""

from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from apps.clients.serializers import ClientMinimalSerializer
from apps.core.serializers import StrictFieldsMixin
from .models import Order, OrderItem, OrderStatus
from .pdf import DOCUMENT_TYPES, RECEIPT

# Largest values the database columns accept (BigAutoField ids, PositiveIntegerField quantity).
MAX_ID = 9223372036854775807
MAX_QUANTITY = 2147483647


# =============================================================================
# Input Serializers
# =============================================================================

class OrderItemInputSerializer(StrictFieldsMixin, serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1, max_value=MAX_ID)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)


class OrderCreateSerializer(StrictFieldsMixin, serializers.Serializer):
    """
    Validate a new order.

    Fields:
        items (list): At least one {product_id, quantity}
        client_id (int): Optional existing client
        observations (str): Optional free text
        delivery_date (datetime): Optional ISO-8601 timestamp
    """

    items = OrderItemInputSerializer(many=True, allow_empty=False)
    client_id = serializers.IntegerField(required=False, allow_null=True, min_value=1, max_value=MAX_ID)
    observations = serializers.CharField(required=False, allow_blank=True, default='')
    delivery_date = serializers.DateTimeField(required=False, allow_null=True)


class OrderUpdateSerializer(StrictFieldsMixin, serializers.Serializer):
    """Validate a partial order update. Every field is optional."""

    status = serializers.ChoiceField(
        choices=OrderStatus.choices,
        required=False,
        error_messages={'invalid_choice': 'Invalid status.'},
    )
    client_id = serializers.IntegerField(required=False, allow_null=True, min_value=1, max_value=MAX_ID)
    delivery_date = serializers.DateTimeField(required=False, allow_null=True)
    observations = serializers.CharField(required=False, allow_blank=True)


class OrderFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for order listing.

    Query Parameters:
        status (str): Filter by status
        client (int): Filter by client id
        date_from (date): Created on or after this date
        date_to (date): Created on or before this date
    """

    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)
    client = serializers.IntegerField(required=False, min_value=1, max_value=MAX_ID)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')
        if date_from and date_to and date_from > date_to:
            raise serializers.ValidationError({
                'date_to': 'End date must be after start date'
            })
        return attrs


class OrderPdfQuerySerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=DOCUMENT_TYPES, required=False, default=RECEIPT)


# =============================================================================
# Output Serializers
# =============================================================================

class OrderItemSerializer(serializers.ModelSerializer):
    product_id = serializers.IntegerField(read_only=True)
    product_name = serializers.CharField(source='product.name', read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = ['id', 'product_id', 'product_name', 'quantity', 'price', 'subtotal']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Order with creator, client and items."""

    user = UserMinimalSerializer(read_only=True)
    client = ClientMinimalSerializer(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'user',
            'client',
            'total',
            'status',
            'status_display',
            'observations',
            'delivery_date',
            'items',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class DeleteAllResponseSerializer(serializers.Serializer):
    orders = serializers.IntegerField()
    items = serializers.IntegerField()
