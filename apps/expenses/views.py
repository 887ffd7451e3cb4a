from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .models import Expense
from .serializers import (
    ExpenseSerializer,
    ExpenseFilterSerializer,
    ExpenseDeleteAllResponseSerializer,
)
from . import services


class ExpenseViewSet(viewsets.ModelViewSet):
    """
    ViewSet for expenses.

    list: Expenses newest first (filter by category, date range)
    create: Record an expense; date defaults to today
    retrieve / update / partial_update / destroy: Standard CRUD
    """

    queryset = Expense.objects.all()
    serializer_class = ExpenseSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        if self.action != 'list':
            return services.list_expenses()

        filter_serializer = ExpenseFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        return services.list_expenses(
            category=params.get('category'),
            date_from=params.get('date_from'),
            date_to=params.get('date_to'),
        )

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)

    @extend_schema(request=None, responses={200: ExpenseDeleteAllResponseSerializer}, tags=['expenses'])
    @action(detail=False, methods=['delete'], url_path='delete-all', url_name='delete-all')
    def delete_all(self, request):
        """
        Remove every expense.

        DELETE /api/expenses/delete-all/
        """
        return Response(services.delete_all_expenses())
