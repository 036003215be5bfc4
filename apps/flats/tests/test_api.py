import pytest
from datetime import date
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.flats.models import Flat
from apps.flats.services import load_adjacency
from apps.payments.models import Payment


# =============================================================================
# Flat List / Create Tests
# =============================================================================

@pytest.mark.django_db
class TestFlatList:
    """Tests for GET /api/flats/"""

    def test_admin_sees_all_flats(self, admin_client, resident):
        url = reverse('flats:flat-list')
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [f['flat_number'] for f in response.data] == ['101', '102', '103', '201', '202']

        first = response.data[0]
        assert first['connected_flats'] == ['102', '103']
        assert first['owner_name'] == 'rajesh101'
        assert first['contact'] == '9876512345'
        assert response.data[1]['owner_name'] is None

    def test_resident_sees_own_flat(self, resident_client):
        url = reverse('flats:flat-list')
        response = resident_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [f['flat_number'] for f in response.data] == ['101']

    def test_unauthenticated(self, api_client, building):
        url = reverse('flats:flat-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestFlatCreate:
    """Tests for POST /api/flats/"""

    def test_create_places_flat(self, admin_client, building):
        url = reverse('flats:flat-list')
        response = admin_client.post(url, {'flat_number': '203'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['flat_number'] == '203'
        assert response.data['connected_flats'] == ['201', '202']
        assert load_adjacency().neighbors('201') == ['202', '203']

    def test_create_without_placement(self, admin_client, building):
        url = reverse('flats:flat-list')
        response = admin_client.post(url, {'flat_number': '203', 'auto_place': False}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['connected_flats'] == []

    def test_create_duplicate(self, admin_client, building):
        url = reverse('flats:flat-list')
        response = admin_client.post(url, {'flat_number': '101'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_create_blank(self, admin_client):
        url = reverse('flats:flat-list')
        response = admin_client.post(url, {'flat_number': '  '}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not Flat.objects.exists()

    def test_resident_cannot_create(self, resident_client):
        url = reverse('flats:flat-list')
        response = resident_client.post(url, {'flat_number': '301'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Flat.objects.filter(flat_number='301').exists()


# =============================================================================
# Flat Detail Tests
# =============================================================================

@pytest.mark.django_db
class TestFlatRetrieve:
    """Tests for GET /api/flats/{flat_number}/"""

    def test_resident_gets_own_flat(self, resident_client):
        url = reverse('flats:flat-detail', kwargs={'flat_number': '101'})
        response = resident_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['owner_name'] == 'rajesh101'

    def test_resident_cannot_get_other_flat(self, resident_client):
        url = reverse('flats:flat-detail', kwargs={'flat_number': '102'})
        response = resident_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_missing_flat(self, admin_client):
        url = reverse('flats:flat-detail', kwargs={'flat_number': '999'})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestFlatGroup:
    """Tests for GET /api/flats/{flat_number}/group/"""

    def test_group_with_stats(self, resident_client):
        Payment.objects.create(
            flat_id='102', month=3, year=2024,
            amount=Decimal('1500.00'), paid_on=date(2024, 3, 2),
        )

        url = reverse('flats:flat-group', kwargs={'flat_number': '101'})
        response = resident_client.get(url, {'month': 3, 'year': 2024})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['group'] == ['101', '102', '103']
        assert response.data['connected_flats'] == ['102', '103']
        assert response.data['stats'] == {'total': 3, 'paid': 1, 'due': 2}

    def test_invalid_month(self, resident_client):
        url = reverse('flats:flat-group', kwargs={'flat_number': '101'})
        response = resident_client.get(url, {'month': 13})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_other_flat_forbidden(self, resident_client):
        url = reverse('flats:flat-group', kwargs={'flat_number': '201'})
        response = resident_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_missing_flat(self, admin_client):
        url = reverse('flats:flat-group', kwargs={'flat_number': '999'})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Connection Tests
# =============================================================================

@pytest.mark.django_db
class TestFlatConnect:
    """Tests for POST /api/flats/{flat_number}/connect/"""

    def test_connect(self, admin_client, building):
        url = reverse('flats:flat-connect', kwargs={'flat_number': '103'})
        response = admin_client.post(url, {'target_flats': ['201']}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['connected_flats'] == ['101', '102', '201']
        assert load_adjacency().neighbors('201') == ['202', '103']

    def test_missing_target(self, admin_client, building):
        before = load_adjacency().as_dict()

        url = reverse('flats:flat-connect', kwargs={'flat_number': '101'})
        response = admin_client.post(url, {'target_flats': ['201', '107']}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['missing_flats'] == ['107']
        assert load_adjacency().as_dict() == before

    def test_missing_source(self, admin_client, building):
        url = reverse('flats:flat-connect', kwargs={'flat_number': '999'})
        response = admin_client.post(url, {'target_flats': ['101']}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_self_connection(self, admin_client, building):
        url = reverse('flats:flat-connect', kwargs={'flat_number': '101'})
        response = admin_client.post(url, {'target_flats': ['101']}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_empty_targets(self, admin_client, building):
        url = reverse('flats:flat-connect', kwargs={'flat_number': '101'})
        response = admin_client.post(url, {'target_flats': []}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_resident_cannot_connect(self, resident_client):
        url = reverse('flats:flat-connect', kwargs={'flat_number': '101'})
        response = resident_client.post(url, {'target_flats': ['201']}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestClearOwner:
    """Tests for PUT /api/flats/{flat_number}/clear-owner/"""

    def test_clear_owner(self, admin_client, resident):
        url = reverse('flats:flat-clear-owner', kwargs={'flat_number': '101'})
        response = admin_client.put(url)

        assert response.status_code == status.HTTP_200_OK
        assert Flat.objects.get(flat_number='101').get_active_resident() is None

    def test_no_owner(self, admin_client, building):
        url = reverse('flats:flat-clear-owner', kwargs={'flat_number': '102'})
        response = admin_client.put(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Collection Endpoints
# =============================================================================

@pytest.mark.django_db
class TestAvailableFlats:
    """Tests for GET /api/flats/available/"""

    def test_public_list_of_unassigned_flats(self, api_client, resident):
        url = reverse('flats:flat-available')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [f['flat_number'] for f in response.data] == ['102', '103', '201', '202']


@pytest.mark.django_db
class TestAllGroups:
    """Tests for GET /api/flats/groups/"""

    def test_admin_gets_groups(self, admin_client, building):
        url = reverse('flats:flat-groups')
        response = admin_client.get(url, {'month': 1, 'year': 2024})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['group_count'] == 2
        assert response.data['groups'][0]['flats'] == ['101', '102', '103']
        assert response.data['groups'][1]['stats'] == {'total': 2, 'paid': 0, 'due': 2}

    def test_resident_forbidden(self, resident_client):
        url = reverse('flats:flat-groups')
        response = resident_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
