"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear

This creates:
- 2 users (admin, counter)
- 8 products
- 5 clients
- Orders spread over the last 45 days, a few due in the next days
- Expenses for the current and previous month
"""

import random
from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.clients.models import Client
from apps.expenses.models import Expense
from apps.orders.models import Order, OrderStatus
from apps.orders.services import create_order, delete_all_orders
from apps.products.models import Product
from apps.reports.models import MonthlyReport

PRODUCTS = [
    ('Chocolate Cake', '80.00', 'Two layers, ganache frosting'),
    ('Carrot Cake', '65.00', 'With chocolate topping'),
    ('Brigadeiro', '2.50', ''),
    ('Beijinho', '2.50', 'Coconut sweet'),
    ('Lemon Pie', '45.00', ''),
    ('Cheese Bread (dozen)', '18.00', ''),
    ('Banana Bread', '25.00', ''),
    ('Birthday Kit', '220.00', 'Cake, 50 sweets and 50 savory snacks'),
]

CLIENTS = [
    ('Ana Souza', '11955554444', 'Rua das Flores, 10'),
    ('Bruno Santana', '11933332222', 'Av. Brasil, 500'),
    ('Carla Dias', '11912345678', ''),
    ('Diego Alves', '21977776666', 'Rua do Porto, 7'),
    ('Elisa Martins', '11988887777', ''),
]

EXPENSES = [
    ('Flour 25kg', '110.00', 'Ingredients'),
    ('Chocolate 10kg', '320.00', 'Ingredients'),
    ('Cake boxes', '40.00', 'Packaging'),
    ('Electricity', '230.45', 'Utilities'),
    ('Rent', '1800.00', 'Fixed'),
]


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        products = self.create_products()
        clients = self.create_clients()
        self.create_orders(users['counter'], products, clients)
        self.create_expenses(users['admin'])

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  counter@example.com / password123')

    def clear_data(self):
        """Clear all shop data from the database."""
        delete_all_orders()
        Expense.objects.all().delete()
        MonthlyReport.objects.all().delete()
        Client.objects.all().delete()
        Product.objects.all().delete()
        User.objects.filter(email__in=['admin@example.com', 'counter@example.com']).delete()

    def create_users(self):
        admin, created = User.objects.get_or_create(
            email='admin@example.com',
            defaults={'name': 'Admin', 'is_staff': True, 'is_superuser': True},
        )
        if created:
            admin.set_password('admin123')
            admin.save()

        counter, created = User.objects.get_or_create(
            email='counter@example.com',
            defaults={'name': 'Counter'},
        )
        if created:
            counter.set_password('password123')
            counter.save()

        self.stdout.write('  Created users')
        return {'admin': admin, 'counter': counter}

    def create_products(self):
        products = []
        for name, price, description in PRODUCTS:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={'price': Decimal(price), 'description': description},
            )
            products.append(product)
        self.stdout.write(f'  Created {len(products)} products')
        return products

    def create_clients(self):
        clients = []
        for name, phone, address in CLIENTS:
            client, _ = Client.objects.get_or_create(
                name=name,
                defaults={'phone': phone, 'address': address},
            )
            clients.append(client)
        self.stdout.write(f'  Created {len(clients)} clients')
        return clients

    def create_orders(self, user, products, clients):
        now = timezone.now()
        count = 0

        for days_ago in range(45, -1, -1):
            for _ in range(random.randint(0, 3)):
                items = [
                    {'product_id': product.id, 'quantity': random.randint(1, 20)}
                    for product in random.sample(products, random.randint(1, 3))
                ]
                client = random.choice(clients + [None])
                order = create_order(
                    user=user,
                    items=items,
                    client_id=client.id if client else None,
                )

                created_at = now - timedelta(days=days_ago, hours=random.randint(0, 8))
                status = random.choice(
                    [OrderStatus.CONCLUIDO] * 6 + [OrderStatus.CANCELADO]
                ) if days_ago > 3 else random.choice(OrderStatus.values)
                Order.objects.filter(id=order.id).update(created_at=created_at, status=status)
                count += 1

        for hours_ahead in (5, 26, 50):
            create_order(
                user=user,
                items=[{'product_id': products[0].id, 'quantity': 1}],
                client_id=random.choice(clients).id,
                delivery_date=now + timedelta(hours=hours_ahead),
                observations='Write "Happy birthday" on top',
            )
            count += 1

        self.stdout.write(f'  Created {count} orders')

    def create_expenses(self, user):
        today = timezone.localdate()
        last_month = today.replace(day=1) - timedelta(days=1)
        count = 0

        for day in (today.replace(day=1), last_month.replace(day=1)):
            for description, amount, category in EXPENSES:
                Expense.objects.create(
                    description=description,
                    amount=Decimal(amount),
                    category=category,
                    date=min(day + timedelta(days=random.randint(0, 20)), today),
                    user=user,
                )
                count += 1

        self.stdout.write(f'  Created {count} expenses')
