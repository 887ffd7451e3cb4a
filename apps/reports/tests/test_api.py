import pytest
from decimal import Decimal
from unittest.mock import patch
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import IntegrityError
from django.urls import reverse
from rest_framework import status
from apps.reports.models import MonthlyReport
from apps.reports.services import generate_monthly_report


@pytest.mark.django_db
class TestReportGenerate:
    """Tests for POST /api/reports/"""

    def test_generate_report(self, report_client, december_2025):
        url = reverse('reports:report-list')
        response = report_client.post(url, {'month': 12, 'year': 2025})

        assert response.status_code == status.HTTP_201_CREATED
        assert Decimal(response.data['total_revenue']) == Decimal('150.00')
        assert Decimal(response.data['total_expenses']) == Decimal('40.00')
        assert Decimal(response.data['net_profit']) == Decimal('110.00')
        assert 'pdf_data' not in response.data

    def test_generate_twice_replaces(self, report_client, december_2025):
        url = reverse('reports:report-list')
        report_client.post(url, {'month': 12, 'year': 2025})
        response = report_client.post(url, {'month': 12, 'year': 2025})

        assert response.status_code == status.HTTP_201_CREATED
        assert MonthlyReport.objects.count() == 1

    def test_generate_conflict(self, report_client, december_2025):
        url = reverse('reports:report-list')
        collision = IntegrityError('UNIQUE constraint failed: reports_monthlyreport.month, reports_monthlyreport.year')

        with patch.object(MonthlyReport.objects, 'create', side_effect=collision):
            response = report_client.post(url, {'month': 12, 'year': 2025})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert '12/2025' in response.data['error']
        assert MonthlyReport.objects.count() == 0

    @pytest.mark.parametrize('payload, field', [
        ({'month': 13, 'year': 2025}, 'month'),
        ({'month': 11, 'year': 1999}, 'year'),
        ({'year': 2025}, 'month'),
    ])
    def test_generate_invalid_period(self, report_client, payload, field):
        url = reverse('reports:report-list')
        response = report_client.post(url, payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert field in response.data
        assert MonthlyReport.objects.count() == 0

    def test_generate_unauthenticated(self, api_client):
        url = reverse('reports:report-list')
        response = api_client.post(url, {'month': 12, 'year': 2025})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestReportRead:
    """Tests for GET /api/reports/, /{id}/ and /{id}/download/"""

    def test_list_reports(self, report_client):
        generate_monthly_report(month=11, year=2025)
        generate_monthly_report(month=12, year=2025)

        url = reverse('reports:report-list')
        response = report_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [(r['month'], r['year']) for r in response.data] == [(12, 2025), (11, 2025)]
        assert all('pdf_data' not in r for r in response.data)

    def test_retrieve_report(self, report_client, december_2025):
        report = generate_monthly_report(month=12, year=2025)

        url = reverse('reports:report-detail', args=[report.id])
        response = report_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert Decimal(response.data['net_profit']) == Decimal('110.00')

    def test_download_report(self, report_client):
        report = generate_monthly_report(month=11, year=2025)

        url = reverse('reports:report-download', args=[report.id])
        response = report_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'application/pdf'
        assert response['Content-Disposition'] == 'attachment; filename="monthly_report_11_2025.pdf"'
        assert response.content.startswith(b'%PDF')

    def test_download_missing_report(self, report_client):
        url = reverse('reports:report-download', args=[9999])
        response = report_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'error' in response.data


@pytest.mark.django_db
class TestCloseMonthCommand:
    """Tests for the close_month management command."""

    def test_close_explicit_month(self, december_2025):
        call_command('close_month', '--month', '12', '--year', '2025')

        report = MonthlyReport.objects.get(month=12, year=2025)
        assert report.net_profit == Decimal('110.00')

    def test_close_requires_both_arguments(self):
        with pytest.raises(CommandError):
            call_command('close_month', '--month', '12')

    def test_close_invalid_month(self):
        with pytest.raises(CommandError):
            call_command('close_month', '--month', '13', '--year', '2025')

    def test_close_conflict(self, december_2025):
        with patch.object(MonthlyReport.objects, 'create', side_effect=IntegrityError('duplicate')):
            with pytest.raises(CommandError, match='already being generated'):
                call_command('close_month', '--month', '12', '--year', '2025')

    def test_close_previous_month_by_default(self):
        call_command('close_month')

        assert MonthlyReport.objects.count() == 1
