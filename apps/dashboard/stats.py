"""
Dashboard Statistics Module
===========================

Read-only aggregate queries behind the dashboard page: catalog and staff
counts, the last week of sales, best-selling products and deliveries due
soon.

Classes:
    DashboardQueries: Static methods for each dashboard block.

Example:
    Building the whole payload::

        from apps.dashboard.stats import DashboardQueries

        data = DashboardQueries.overview()
        data['sales_data']      # [{'date': date(2025, 12, 14), 'amount': Decimal('0.00')}, ...]
        data['top_products']    # [{'name': 'Brigadeiro', 'value': 350}, ...]

Note:
    Cancelled orders never count as sales. Days are calendar days in the
    configured TIME_ZONE.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from django.db.models import Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from apps.accounts.models import User
from apps.orders.models import Order, OrderItem, OrderStatus
from apps.products.models import Product

SALES_DAYS = 7
TOP_PRODUCTS_LIMIT = 5
UPCOMING_WINDOW = timedelta(days=3)


class DashboardQueries:
    """
    Aggregations for the dashboard endpoint.

    Methods:
        counts: Number of products and users.
        sales_by_day: Daily non-cancelled revenue, zero-filled.
        top_products: Best sellers by quantity.
        upcoming_orders: Open orders due within the next days.
        overview: All of the above in one dictionary.
    """

    @staticmethod
    def counts():
        return {
            'product_count': Product.objects.count(),
            'user_count': User.objects.count(),
        }

    @staticmethod
    def sales_by_day(days=SALES_DAYS, today=None):
        """
        Revenue per local day for the last ``days`` days, including today.

        Args:
            days (int): Number of days to report.
            today (date, optional): Last day of the window; defaults to the
                local date.

        Returns:
            list[dict]: ``{'date', 'amount'}`` entries, oldest first. Days
            without sales are present with ``Decimal('0.00')``.
        """
        today = today or timezone.localdate()
        first_day = today - timedelta(days=days - 1)
        start = timezone.make_aware(datetime.combine(first_day, datetime.min.time()))
        end = timezone.make_aware(datetime.combine(today + timedelta(days=1), datetime.min.time()))

        rows = (
            Order.objects
            .filter(created_at__gte=start, created_at__lt=end)
            .exclude(status=OrderStatus.CANCELADO)
            .annotate(day=TruncDate('created_at', tzinfo=timezone.get_current_timezone()))
            .values('day')
            .annotate(amount=Sum('total'))
        )
        totals = {row['day']: row['amount'] for row in rows}

        return [
            {
                'date': day,
                'amount': totals.get(day) or Decimal('0.00'),
            }
            for day in (first_day + timedelta(days=offset) for offset in range(days))
        ]

    @staticmethod
    def top_products(limit=TOP_PRODUCTS_LIMIT):
        """Products with the most units sold in non-cancelled orders."""
        rows = (
            OrderItem.objects
            .exclude(order__status=OrderStatus.CANCELADO)
            .values('product__name')
            .annotate(value=Sum('quantity'))
            .order_by('-value', 'product__name')[:limit]
        )
        return [{'name': row['product__name'], 'value': row['value']} for row in rows]

    @staticmethod
    def upcoming_orders(now=None, window=UPCOMING_WINDOW):
        """
        Orders due between ``now`` and ``now + window`` that are still open.

        Completed and cancelled orders are left out. Soonest first.
        """
        now = now or timezone.now()
        return list(
            Order.objects
            .filter(delivery_date__gte=now, delivery_date__lte=now + window)
            .exclude(status__in=[OrderStatus.CONCLUIDO, OrderStatus.CANCELADO])
            .select_related('client')
            .order_by('delivery_date')
        )

    @staticmethod
    def overview():
        return {
            **DashboardQueries.counts(),
            'sales_data': DashboardQueries.sales_by_day(),
            'top_products': DashboardQueries.top_products(),
            'upcoming_orders': DashboardQueries.upcoming_orders(),
        }
