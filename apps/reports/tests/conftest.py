import pytest
from datetime import date, datetime
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.expenses.models import Expense
from apps.orders.models import Order, OrderStatus


def local_dt(*args):
    """Aware datetime in the shop's time zone."""
    return timezone.make_aware(datetime(*args))


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def report_user(db):
    """Create and return the owner closing the month."""
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        name='Owner',
    )


@pytest.fixture
def report_client(api_client, report_user):
    """Return API client authenticated as the report user."""
    refresh = RefreshToken.for_user(report_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def make_order(report_user):
    """Factory for orders with a given total, status and creation time."""
    def _make(total, created_at, status=OrderStatus.CONCLUIDO):
        return Order.objects.create(
            user=report_user,
            total=Decimal(total),
            status=status,
            created_at=created_at,
        )
    return _make


@pytest.fixture
def make_expense(report_user):
    """Factory for expenses with a given amount and date."""
    def _make(amount, on):
        return Expense.objects.create(
            description='Supplies',
            amount=Decimal(amount),
            date=on,
            user=report_user,
        )
    return _make


@pytest.fixture
def december_2025(make_order, make_expense):
    """
    Two valid orders totalling 150.00, one cancelled order of 50.00 and
    one expense of 40.00, all inside December 2025.
    """
    make_order('100.00', local_dt(2025, 12, 5, 10, 0))
    make_order('50.00', local_dt(2025, 12, 20, 15, 30), status=OrderStatus.PENDENTE)
    make_order('50.00', local_dt(2025, 12, 21, 9, 0), status=OrderStatus.CANCELADO)
    make_expense('40.00', date(2025, 12, 15))
