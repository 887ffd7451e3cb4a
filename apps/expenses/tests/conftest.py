import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.expenses.models import Expense


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def expense_user(db):
    """Create and return the staff member recording expenses."""
    return User.objects.create_user(
        email='finance@example.com',
        password='TestPass123!',
        name='Finance',
    )


@pytest.fixture
def expense_client(api_client, expense_user):
    """Return API client authenticated as the expense user."""
    refresh = RefreshToken.for_user(expense_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def expense_flour(expense_user):
    """Ingredient expense on 2025-12-03."""
    return Expense.objects.create(
        description='Flour 25kg',
        amount=Decimal('110.00'),
        category='Ingredients',
        date=date(2025, 12, 3),
        user=expense_user,
    )


@pytest.fixture
def expense_boxes(expense_user):
    """Packaging expense on 2025-12-10."""
    return Expense.objects.create(
        description='Cake boxes',
        amount=Decimal('40.00'),
        category='Packaging',
        date=date(2025, 12, 10),
        user=expense_user,
    )
