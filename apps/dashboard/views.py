from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import DashboardStatsSerializer
from .stats import DashboardQueries


@extend_schema(
    responses={200: DashboardStatsSerializer},
    description="Counts, last 7 days of sales, top products and deliveries due in 3 days.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard_stats(request):
    """Dashboard statistics - thin HTTP handler."""
    data = DashboardQueries.overview()
    return Response(DashboardStatsSerializer(data).data)
