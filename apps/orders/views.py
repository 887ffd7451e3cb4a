from django.http import HttpResponse
from rest_framework import viewsets, status, mixins
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import serializers as drf_serializers
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .exceptions import (
    OrderNotFoundError,
    ProductNotFoundError,
    ClientNotFoundError,
    InvalidOrderError,
)
from .models import Order
from .pdf import render_order_pdf, order_pdf_filename
from .serializers import (
    OrderSerializer,
    OrderCreateSerializer,
    OrderUpdateSerializer,
    OrderFilterSerializer,
    OrderPdfQuerySerializer,
    DeleteAllResponseSerializer,
)
from . import services


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class OrderViewSet(mixins.ListModelMixin,
                   mixins.RetrieveModelMixin,
                   viewsets.GenericViewSet):
    """
    ViewSet for orders. Writes go through the orders service layer.

    list: Orders newest first (filter by status, client, date range)
    create: Take an order; total is computed from current product prices
    retrieve: Order with client, creator and items
    partial_update: Change status, client, delivery date or observations
    destroy: Delete the order and its items
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        """Filter orders using input serializer validation."""
        if self.action != 'list':
            return services.list_orders()

        filter_serializer = OrderFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return services.list_orders(
            status=params.get('status'),
            client_id=params.get('client'),
            date_from=params.get('date_from'),
            date_to=params.get('date_to'),
        )

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=['orders'],
    )
    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = services.create_order(user=request.user, **serializer.validated_data)
        except (ProductNotFoundError, ClientNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidOrderError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=OrderUpdateSerializer,
        responses={200: OrderSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=['orders'],
    )
    def partial_update(self, request, pk=None):
        serializer = OrderUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = services.update_order(order_id=pk, changes=serializer.validated_data)
        except (OrderNotFoundError, ClientNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidOrderError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OrderSerializer(order).data)

    @extend_schema(responses={204: None, 404: ErrorResponseSerializer}, tags=['orders'])
    def destroy(self, request, pk=None):
        try:
            services.delete_order(order_id=pk)
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('type', OpenApiTypes.STR, description="'receipt' (default) or 'kitchen'"),
        ],
        responses={(200, 'application/pdf'): OpenApiTypes.BINARY, 404: ErrorResponseSerializer},
        tags=['orders'],
    )
    @action(detail=True, methods=['get'])
    def pdf(self, request, pk=None):
        """
        Download the order as a PDF receipt or kitchen ticket.

        GET /api/orders/{id}/pdf/?type=receipt|kitchen
        """
        query_serializer = OrderPdfQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        try:
            order = services.get_order(pk)
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        content = render_order_pdf(order, query_serializer.validated_data['type'])
        response = HttpResponse(content, content_type='application/pdf')
        response['Content-Disposition'] = f'attachment; filename="{order_pdf_filename(order)}"'
        return response

    @extend_schema(request=None, responses={200: DeleteAllResponseSerializer}, tags=['orders'])
    @action(detail=False, methods=['delete'], url_path='delete-all', url_name='delete-all')
    def delete_all(self, request):
        """
        Remove every order and item.

        DELETE /api/orders/delete-all/
        """
        deleted = services.delete_all_orders()
        return Response(deleted)
