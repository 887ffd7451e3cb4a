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
def order_user(db):
    """Create and return the staff member taking orders."""
    return User.objects.create_user(
        email='counter@example.com',
        password='TestPass123!',
        name='Counter Staff',
    )


@pytest.fixture
def staff_client(api_client, order_user):
    """Return API client authenticated as the order user."""
    refresh = RefreshToken.for_user(order_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def customer(db):
    """Create and return a client placing orders."""
    return Client.objects.create(
        name='Ana Souza',
        phone='11999990000',
        address='Rua das Flores, 10',
    )


@pytest.fixture
def product_cake(db):
    """Create a chocolate cake product."""
    return Product.objects.create(name='Chocolate Cake', price=Decimal('80.00'))


@pytest.fixture
def product_brigadeiro(db):
    """Create a brigadeiro product."""
    return Product.objects.create(name='Brigadeiro', price=Decimal('2.50'))


@pytest.fixture
def party_order(order_user, customer, product_cake, product_brigadeiro):
    """Create an order of one cake and fifty brigadeiros (total 205.00)."""
    return create_order(
        user=order_user,
        client_id=customer.id,
        items=[
            {'product_id': product_cake.id, 'quantity': 1},
            {'product_id': product_brigadeiro.id, 'quantity': 50},
        ],
        observations='Write "Happy birthday" on the cake',
    )
