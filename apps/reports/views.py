from django.http import HttpResponse
from rest_framework import viewsets, status, mixins
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import serializers as drf_serializers
from drf_spectacular.utils import extend_schema
from drf_spectacular.types import OpenApiTypes
from .exceptions import InvalidPeriodError, ReportConflictError, ReportNotFoundError
from .serializers import ReportSerializer, ReportGenerateSerializer
from . import services


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class ReportViewSet(mixins.ListModelMixin,
                    mixins.RetrieveModelMixin,
                    viewsets.GenericViewSet):
    """
    ViewSet for monthly closing reports.

    list: History, newest period first (without PDF data)
    create: Generate (or regenerate) the report for a month
    retrieve: Report totals
    download: The stored PDF
    """

    serializer_class = ReportSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        return services.list_reports()

    @extend_schema(
        request=ReportGenerateSerializer,
        responses={201: ReportSerializer, 400: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=['reports'],
    )
    def create(self, request, *args, **kwargs):
        serializer = ReportGenerateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            report = services.generate_monthly_report(**serializer.validated_data)
        except InvalidPeriodError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except ReportConflictError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(ReportSerializer(report).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={(200, 'application/pdf'): OpenApiTypes.BINARY, 404: ErrorResponseSerializer},
        tags=['reports'],
    )
    @action(detail=True, methods=['get'])
    def download(self, request, pk=None):
        """
        Download the stored PDF.

        GET /api/reports/{id}/download/
        """
        try:
            report = services.get_report(pk, with_pdf=True)
        except ReportNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        content = bytes(report.pdf_data)
        response = HttpResponse(content, content_type='application/pdf')
        response['Content-Disposition'] = f'attachment; filename="{report.download_filename}"'
        response['Content-Length'] = len(content)
        return response
