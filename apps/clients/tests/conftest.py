import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.clients.models import Client
from apps.orders.services import create_order
from apps.products.models import Product


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def clients_user(db):
    """Create and return a staff user managing clients."""
    return User.objects.create_user(
        email='front@example.com',
        password='TestPass123!',
        name='Front Desk',
    )


@pytest.fixture
def clients_api(api_client, clients_user):
    """Return API client authenticated as the clients user."""
    refresh = RefreshToken.for_user(clients_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def client_maria(db):
    """Create a client with full contact data."""
    return Client.objects.create(
        name='Maria Oliveira',
        phone='11988887777',
        address='Av. Paulista, 1000',
        notes='Prefers less sugar',
    )


@pytest.fixture
def client_joao(db):
    """Create a client with only a name and phone."""
    return Client.objects.create(name='João Lima', phone='21977776666')


@pytest.fixture
def maria_order(clients_user, client_maria):
    """Create an order for Maria with one pie."""
    pie = Product.objects.create(name='Lemon Pie', price=Decimal('45.00'))
    return create_order(
        user=clients_user,
        client_id=client_maria.id,
        items=[{'product_id': pie.id, 'quantity': 2}],
    )
