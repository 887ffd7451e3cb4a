"""
Unit tests for dashboard statistics queries.
"""

import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from django.utils import timezone

from apps.dashboard.stats import DashboardQueries
from apps.orders.models import Order, OrderStatus
from apps.orders.services import create_order, update_order
from apps.products.models import Product


def local_dt(*args):
    return timezone.make_aware(datetime(*args))


@pytest.mark.django_db
class TestSalesByDay:
    """Tests for DashboardQueries.sales_by_day."""

    def test_zero_filled_seven_days(self):
        data = DashboardQueries.sales_by_day(today=date(2025, 12, 10))

        assert [d['date'] for d in data] == [date(2025, 12, day) for day in range(4, 11)]
        assert all(d['amount'] == Decimal('0.00') for d in data)

    def test_sums_per_local_day(self, dashboard_user):
        Order.objects.create(user=dashboard_user, total=Decimal('10.00'), created_at=local_dt(2025, 12, 9, 0, 30))
        Order.objects.create(user=dashboard_user, total=Decimal('15.00'), created_at=local_dt(2025, 12, 9, 23, 30))
        Order.objects.create(user=dashboard_user, total=Decimal('7.00'), created_at=local_dt(2025, 12, 10, 8, 0))

        data = {d['date']: d['amount'] for d in DashboardQueries.sales_by_day(today=date(2025, 12, 10))}

        assert data[date(2025, 12, 9)] == Decimal('25.00')
        assert data[date(2025, 12, 10)] == Decimal('7.00')
        assert data[date(2025, 12, 8)] == Decimal('0.00')

    def test_excludes_cancelled_and_older_orders(self, dashboard_user):
        Order.objects.create(
            user=dashboard_user, total=Decimal('99.00'),
            status=OrderStatus.CANCELADO, created_at=local_dt(2025, 12, 9, 12, 0),
        )
        Order.objects.create(user=dashboard_user, total=Decimal('50.00'), created_at=local_dt(2025, 12, 3, 23, 59))

        data = DashboardQueries.sales_by_day(today=date(2025, 12, 10))

        assert sum(d['amount'] for d in data) == Decimal('0.00')


@pytest.mark.django_db
class TestTopProducts:
    """Tests for DashboardQueries.top_products."""

    def test_ranked_by_quantity(self, dashboard_user, product_cake, product_brigadeiro):
        create_order(user=dashboard_user, items=[
            {'product_id': product_cake.id, 'quantity': 2},
            {'product_id': product_brigadeiro.id, 'quantity': 30},
        ])
        create_order(user=dashboard_user, items=[{'product_id': product_brigadeiro.id, 'quantity': 20}])

        assert DashboardQueries.top_products() == [
            {'name': 'Brigadeiro', 'value': 50},
            {'name': 'Chocolate Cake', 'value': 2},
        ]

    def test_cancelled_orders_ignored(self, dashboard_user, product_cake):
        order = create_order(user=dashboard_user, items=[{'product_id': product_cake.id, 'quantity': 4}])
        update_order(order_id=order.id, changes={'status': OrderStatus.CANCELADO})

        assert DashboardQueries.top_products() == []

    def test_limited_to_five(self, dashboard_user):
        items = []
        for i in range(7):
            product = Product.objects.create(name=f'Cookie {i}', price=Decimal('1.00'))
            items.append({'product_id': product.id, 'quantity': i + 1})
        create_order(user=dashboard_user, items=items)

        top = DashboardQueries.top_products()

        assert len(top) == 5
        assert top[0] == {'name': 'Cookie 6', 'value': 7}


@pytest.mark.django_db
class TestUpcomingOrders:
    """Tests for DashboardQueries.upcoming_orders."""

    def test_window_and_status(self, dashboard_user, customer):
        now = timezone.now()

        def make(delta, status=OrderStatus.PENDENTE):
            return Order.objects.create(
                user=dashboard_user, client=customer, total=Decimal('1.00'),
                status=status, delivery_date=now + delta,
            )

        later = make(timedelta(days=2))
        soon = make(timedelta(hours=3), status=OrderStatus.EM_PREPARO)
        make(timedelta(hours=-1))
        make(timedelta(days=4))
        make(timedelta(hours=5), status=OrderStatus.CONCLUIDO)
        make(timedelta(hours=6), status=OrderStatus.CANCELADO)
        Order.objects.create(user=dashboard_user, total=Decimal('1.00'))

        assert DashboardQueries.upcoming_orders(now=now) == [soon, later]
