from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from apps.core.serializers import StrictFieldsMixin
from .models import Expense


class ExpenseSerializer(StrictFieldsMixin, serializers.ModelSerializer):
    """Expense CRUD serializer. The creator is taken from the request."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Expense
        fields = [
            'id',
            'description',
            'amount',
            'category',
            'date',
            'user',
            'created_at',
        ]
        read_only_fields = ['id', 'user', 'created_at']


class ExpenseFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for expense listing.

    Query Parameters:
        category (str): Exact category (case-insensitive)
        date_from (date): On or after this date
        date_to (date): On or before this date
    """

    category = serializers.CharField(required=False)
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


class ExpenseDeleteAllResponseSerializer(serializers.Serializer):
    expenses = serializers.IntegerField()
