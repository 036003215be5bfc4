import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserRole
from apps.flats.services import create_flat
from apps.payments.models import Payment, PaymentMode


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def flats(db):
    """Create flats 101, 102 and 103 (one group)."""
    return {number: create_flat(flat_number=number) for number in ['101', '102', '103']}


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
def resident(flats):
    """Create and return the resident of flat 101."""
    return User.objects.create_user(
        username='rajesh101',
        email='rajesh@example.com',
        password='TestPass123!',
        flat=flats['101'],
    )


@pytest.fixture
def homeless_user(db):
    """Create and return a resident without a flat."""
    return User.objects.create_user(
        username='nobody',
        email='nobody@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def payment(flats, admin_user):
    """January 2024 payment of flat 101."""
    return Payment.objects.create(
        flat=flats['101'],
        month=1,
        year=2024,
        amount=Decimal('1500.00'),
        paid_on=date(2024, 1, 5),
        payment_mode=PaymentMode.UPI,
        recorded_by=admin_user,
    )


@pytest.fixture
def other_payment(flats, admin_user):
    """January 2024 payment of flat 102."""
    return Payment.objects.create(
        flat=flats['102'],
        month=1,
        year=2024,
        amount=Decimal('1200.00'),
        paid_on=date(2024, 1, 8),
        payment_mode=PaymentMode.CASH,
        recorded_by=admin_user,
    )


@pytest.fixture
def admin_client(admin_user):
    """Return API client authenticated as admin."""
    client = APIClient()
    refresh = RefreshToken.for_user(admin_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def resident_client(resident):
    """Return API client authenticated as the resident of flat 101."""
    client = APIClient()
    refresh = RefreshToken.for_user(resident)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
