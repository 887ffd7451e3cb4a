"""
Report Services Module
======================

Monthly closing: aggregate revenue and expenses for a calendar month in the
shop's local time zone, render the summary PDF and persist it as the single
report for that period.

Functions:
    month_bounds: Local-time [start, end) datetimes of a month.
    compute_monthly_totals: Revenue, expenses and profit for a month.
    generate_monthly_report: Compute, render and store (replacing any previous run).
    close_previous_month: Run the closing for the month before ``today``.
    list_reports: History without the PDF payload.
    get_report: Fetch one report.

Example:
    Regenerating December after a late expense was recorded::

        from apps.reports.services import generate_monthly_report

        report = generate_monthly_report(month=12, year=2025)
        print(report.net_profit)

Note:
    The delete of the old row and the insert of the new one share a single
    transaction, and a unique constraint on (month, year) backs it up: a
    period never has zero or two reports after a run.
"""

import logging
from datetime import date, datetime, timedelta
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.db.models import Sum
from django.utils import timezone

from apps.expenses.models import Expense
from apps.orders.models import Order, OrderStatus
from .exceptions import InvalidPeriodError, ReportConflictError, ReportNotFoundError
from .models import MonthlyReport
from .pdf import render_monthly_report_pdf

logger = logging.getLogger(__name__)

MIN_YEAR = 2000
MAX_YEAR = 2100


def _validate_period(month, year):
    if not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidPeriodError(f"Invalid month: {month}")
    if not isinstance(year, int) or not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidPeriodError(f"Invalid year: {year}")


def _first_day_of_next_month(month, year):
    if month == 12:
        return date(year + 1, 1, 1)
    return date(year, month + 1, 1)


def month_bounds(month, year):
    """
    Return the aware datetimes ``(start, end)`` delimiting a month.

    ``start`` is midnight of day 1 in the current time zone and ``end`` is
    midnight of day 1 of the following month; the interval is half-open.
    """
    start = timezone.make_aware(datetime(year, month, 1))
    next_month = _first_day_of_next_month(month, year)
    end = timezone.make_aware(datetime(next_month.year, next_month.month, 1))
    return start, end


def compute_monthly_totals(month, year):
    """
    Aggregate one month.

    Args:
        month (int): 1 to 12.
        year (int): 2000 to 2100.

    Returns:
        dict: ``revenue`` (non-cancelled order totals), ``expenses`` (all
        expenses dated in the month) and ``profit`` (revenue minus
        expenses, possibly negative), all Decimals.

    Raises:
        InvalidPeriodError: If month or year is out of range.
    """
    _validate_period(month, year)
    start, end = month_bounds(month, year)

    revenue = (
        Order.objects
        .filter(created_at__gte=start, created_at__lt=end)
        .exclude(status=OrderStatus.CANCELADO)
        .aggregate(total=Sum('total'))['total']
    ) or Decimal('0.00')

    expenses = (
        Expense.objects
        .filter(date__gte=date(year, month, 1), date__lt=_first_day_of_next_month(month, year))
        .aggregate(total=Sum('amount'))['total']
    ) or Decimal('0.00')

    return {
        'revenue': revenue,
        'expenses': expenses,
        'profit': revenue - expenses,
    }


def generate_monthly_report(*, month, year):
    """
    Compute, render and store the closing report for a month.

    Any existing report for the same month and year is replaced. Deleting
    the old row and inserting the new one happen in one transaction.

    Args:
        month (int): 1 to 12.
        year (int): 2000 to 2100.

    Returns:
        MonthlyReport: The freshly stored report.

    Raises:
        InvalidPeriodError: If month or year is out of range.
        ReportConflictError: If another run stored the same period concurrently.
    """
    totals = compute_monthly_totals(month, year)
    pdf_bytes = render_monthly_report_pdf(month=month, year=year, **totals)

    try:
        with transaction.atomic():
            replaced, _ = MonthlyReport.objects.filter(month=month, year=year).delete()
            report = MonthlyReport.objects.create(
                month=month,
                year=year,
                total_revenue=totals['revenue'],
                total_expenses=totals['expenses'],
                net_profit=totals['profit'],
                pdf_data=pdf_bytes,
            )
    except IntegrityError as e:
        # A concurrent run inserted its row between our delete and insert.
        logger.warning("Concurrent closing for %02d/%d: %s", month, year, e)
        raise ReportConflictError(
            f"Report {month:02d}/{year} is already being generated"
        ) from e

    logger.info(
        "Monthly report %02d/%d %s: revenue %s, expenses %s, profit %s",
        month, year, 'replaced' if replaced else 'created',
        totals['revenue'], totals['expenses'], totals['profit'],
    )
    return report


def previous_month(today):
    """Return ``(month, year)`` of the month before the one containing ``today``."""
    last_day = today.replace(day=1) - timedelta(days=1)
    return last_day.month, last_day.year


def close_previous_month(today=None):
    """
    Run the closing for the month that just ended.

    Args:
        today (date, optional): Reference date; defaults to today in local time.

    Returns:
        MonthlyReport: The stored report.
    """
    month, year = previous_month(today or timezone.localdate())
    logger.info("Starting monthly closing for %02d/%d", month, year)
    try:
        return generate_monthly_report(month=month, year=year)
    except Exception:
        logger.exception("Monthly closing for %02d/%d failed", month, year)
        raise


def list_reports():
    """Return the report history, newest period first, without PDF bytes."""
    return MonthlyReport.objects.defer('pdf_data').order_by('-year', '-month')


def get_report(report_id, *, with_pdf=False):
    """
    Fetch one report.

    Raises:
        ReportNotFoundError: If no report has this id.
    """
    queryset = MonthlyReport.objects.all()
    if not with_pdf:
        queryset = queryset.defer('pdf_data')
    try:
        return queryset.get(id=report_id)
    except MonthlyReport.DoesNotExist:
        raise ReportNotFoundError(f"Report {report_id} not found")
