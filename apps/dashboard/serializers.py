from rest_framework import serializers

from apps.clients.serializers import ClientMinimalSerializer
from apps.orders.models import Order


class SalesDaySerializer(serializers.Serializer):
    date = serializers.DateField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)


class TopProductSerializer(serializers.Serializer):
    name = serializers.CharField()
    value = serializers.IntegerField()


class UpcomingOrderSerializer(serializers.ModelSerializer):
    client = ClientMinimalSerializer(read_only=True)

    class Meta:
        model = Order
        fields = ['id', 'delivery_date', 'client', 'total', 'status']
        read_only_fields = fields


class DashboardStatsSerializer(serializers.Serializer):
    """Payload of the dashboard page."""

    product_count = serializers.IntegerField()
    user_count = serializers.IntegerField()
    sales_data = SalesDaySerializer(many=True)
    top_products = TopProductSerializer(many=True)
    upcoming_orders = UpcomingOrderSerializer(many=True)
