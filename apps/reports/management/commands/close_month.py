"""
Run the monthly closing by hand.

Usage:
    python manage.py close_month                      # month that just ended
    python manage.py close_month --month 11 --year 2025
"""

from django.core.management.base import BaseCommand, CommandError

from apps.reports.exceptions import ReportServiceError
from apps.reports.services import close_previous_month, generate_monthly_report


class Command(BaseCommand):
    help = 'Generate (or regenerate) the monthly closing report'

    def add_arguments(self, parser):
        parser.add_argument('--month', type=int, help='Month to close (1-12)')
        parser.add_argument('--year', type=int, help='Year of the month to close')

    def handle(self, *args, **options):
        month = options['month']
        year = options['year']

        if (month is None) != (year is None):
            raise CommandError('--month and --year must be given together')

        try:
            if month is None:
                report = close_previous_month()
            else:
                report = generate_monthly_report(month=month, year=year)
        except ReportServiceError as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.SUCCESS(
            f'Report {report.month:02d}/{report.year}: '
            f'revenue {report.total_revenue}, '
            f'expenses {report.total_expenses}, '
            f'profit {report.net_profit}'
        ))
