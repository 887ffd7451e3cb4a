import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.clients.models import Client
from apps.products.models import Product


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def dashboard_user(db):
    """Create and return a staff user."""
    return User.objects.create_user(
        email='manager@example.com',
        password='TestPass123!',
        name='Manager',
    )


@pytest.fixture
def dashboard_client(api_client, dashboard_user):
    """Return API client authenticated as the dashboard user."""
    refresh = RefreshToken.for_user(dashboard_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def customer(db):
    return Client.objects.create(name='Paula Reis', phone='11944443333')


@pytest.fixture
def product_cake(db):
    return Product.objects.create(name='Chocolate Cake', price=Decimal('80.00'))


@pytest.fixture
def product_brigadeiro(db):
    return Product.objects.create(name='Brigadeiro', price=Decimal('2.50'))
