"""
Expense services: listing with filters and bulk cleanup.
"""

import logging

from django.db import transaction

from .models import Expense

logger = logging.getLogger(__name__)


def list_expenses(*, category=None, date_from=None, date_to=None):
    """Return expenses newest first, optionally filtered by category and date range."""
    queryset = Expense.objects.select_related('user').order_by('-date', '-created_at')

    if category:
        queryset = queryset.filter(category__iexact=category)
    if date_from:
        queryset = queryset.filter(date__gte=date_from)
    if date_to:
        queryset = queryset.filter(date__lte=date_to)

    return queryset


@transaction.atomic
def delete_all_expenses():
    """
    Delete every expense.

    Returns:
        dict: ``{'expenses': <deleted rows>}``
    """
    deleted, _ = Expense.objects.all().delete()
    logger.warning("Deleted all expenses (%d rows)", deleted)
    return {'expenses': deleted}
