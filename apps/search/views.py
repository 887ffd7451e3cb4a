from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .serializers import SearchQuerySerializer, SearchResultSerializer
from .services import global_search


@extend_schema(
    parameters=[
        OpenApiParameter('q', OpenApiTypes.STR, description='Search text (at least 2 characters)'),
    ],
    responses={200: SearchResultSerializer},
    tags=['search'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def search(request):
    """
    Search clients, orders and products at once.

    GET /api/search/?q=<text>
    """
    query_serializer = SearchQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    results = global_search(query_serializer.validated_data['q'])
    return Response(SearchResultSerializer(results).data)
