import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.products.models import Product


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def catalog_user(db):
    """Create and return a staff user managing the catalog."""
    return User.objects.create_user(
        email='catalog@example.com',
        password='TestPass123!',
        name='Catalog Manager',
    )


@pytest.fixture
def catalog_client(api_client, catalog_user):
    """Return API client authenticated as the catalog user."""
    refresh = RefreshToken.for_user(catalog_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def product_cake(db):
    """Create a chocolate cake product."""
    return Product.objects.create(
        name='Chocolate Cake',
        price=Decimal('80.00'),
        description='Two layers, ganache frosting',
    )


@pytest.fixture
def product_brigadeiro(db):
    """Create a brigadeiro product."""
    return Product.objects.create(
        name='Brigadeiro',
        price=Decimal('2.50'),
    )
