import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.clients.models import Client
from apps.orders.models import Order
from apps.products.models import Product


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def search_user(db):
    """Create and return a staff user."""
    return User.objects.create_user(
        email='search@example.com',
        password='TestPass123!',
        name='Searcher',
    )


@pytest.fixture
def search_client(api_client, search_user):
    """Return API client authenticated as the search user."""
    refresh = RefreshToken.for_user(search_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def client_ana(db):
    return Client.objects.create(name='Ana Souza', phone='11955554444')


@pytest.fixture
def client_bruno(db):
    return Client.objects.create(name='Bruno Santana', phone='11933332222')


@pytest.fixture
def banana_bread(db):
    return Product.objects.create(name='Banana Bread', price=Decimal('25.00'))


@pytest.fixture
def ana_order(search_user, client_ana):
    return Order.objects.create(user=search_user, client=client_ana, total=Decimal('25.00'))
