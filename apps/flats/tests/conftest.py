import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.flats.services import create_flat


def _authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def building(db):
    """
    Create flats 101-103 and 201-202 through the placement heuristic.

    Resulting groups: [101, 102, 103] and [201, 202].
    """
    return {
        number: create_flat(flat_number=number)
        for number in ['101', '102', '103', '201', '202']
    }


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
def resident(building):
    """Create and return the resident of flat 101."""
    return User.objects.create_user(
        username='rajesh101',
        email='rajesh@example.com',
        password='TestPass123!',
        flat=building['101'],
        contact='9876512345',
    )


@pytest.fixture
def admin_client(admin_user):
    """Return API client authenticated as admin."""
    return _authenticate(APIClient(), admin_user)


@pytest.fixture
def resident_client(resident):
    """Return API client authenticated as the resident of flat 101."""
    return _authenticate(APIClient(), resident)
