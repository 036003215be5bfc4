import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.flats.models import Flat


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def flats(db):
    """Create unlinked flats 101, 102 and 103."""
    return {
        number: Flat.objects.create(flat_number=number)
        for number in ['101', '102', '103']
    }


@pytest.fixture
def user(flats):
    """Create and return the resident of flat 101."""
    return User.objects.create_user(
        username='testuser',
        email='testuser@example.com',
        password='TestPass123!',
        flat=flats['101'],
        contact='9876512345',
    )


@pytest.fixture
def user_inactive(flats):
    """Create and return a deactivated former resident of flat 102."""
    return User.objects.create_user(
        username='inactive',
        email='inactive@example.com',
        password='TestPass123!',
        flat=flats['102'],
        is_active=False,
    )


@pytest.fixture
def admin_user(db):
    """Create and return a building administrator."""
    return User.objects.create_user(
        username='admin',
        email='admin@example.com',
        password='TestPass123!',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return API client authenticated as the resident."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def admin_client(admin_user):
    """Return API client authenticated as admin."""
    client = APIClient()
    refresh = RefreshToken.for_user(admin_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
