from rest_framework import serializers

from apps.core.serializers import StrictFieldsMixin
from .models import MonthlyReport
from .services import MIN_YEAR, MAX_YEAR


class ReportSerializer(serializers.ModelSerializer):
    """Report metadata. The PDF is only served by the download endpoint."""

    class Meta:
        model = MonthlyReport
        fields = [
            'id',
            'month',
            'year',
            'total_revenue',
            'total_expenses',
            'net_profit',
            'created_at',
        ]
        read_only_fields = fields


class ReportGenerateSerializer(StrictFieldsMixin, serializers.Serializer):
    """
    Validate a manual closing request.

    Fields:
        month (int): 1 to 12
        year (int): 2000 to 2100
    """

    month = serializers.IntegerField(min_value=1, max_value=12)
    year = serializers.IntegerField(min_value=MIN_YEAR, max_value=MAX_YEAR)
