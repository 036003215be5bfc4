import pytest
from django.urls import reverse
from rest_framework import status

from apps.payments.models import Payment


# =============================================================================
# Payment List / Create Tests
# =============================================================================

@pytest.mark.django_db
class TestPaymentList:
    """Tests for GET /api/payments/"""

    def test_admin_lists_all(self, admin_client, payment, other_payment):
        url = reverse('payments:payment-list')
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [p['flat_number'] for p in response.data] == ['102', '101']
        assert response.data[1]['period'] == 'January 2024'
        assert response.data[1]['recorded_by'] == 'admin'

    def test_admin_filters_by_flat(self, admin_client, payment, other_payment):
        url = reverse('payments:payment-list')
        response = admin_client.get(url, {'flat_number': '101'})

        assert response.status_code == status.HTTP_200_OK
        assert [p['id'] for p in response.data] == [payment.id]

    def test_resident_lists_own_flat(self, resident_client, payment, other_payment):
        url = reverse('payments:payment-list')
        response = resident_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [p['flat_number'] for p in response.data] == ['101']

    def test_invalid_month_filter(self, admin_client):
        url = reverse('payments:payment-list')
        response = admin_client.get(url, {'month': 14})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unauthenticated(self, api_client):
        url = reverse('payments:payment-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestPaymentCreate:
    """Tests for POST /api/payments/"""

    def _data(self, **overrides):
        data = {
            'flat_number': '101',
            'month': 2,
            'year': 2024,
            'amount': '1500.00',
            'paid_on': '2024-02-03',
            'payment_mode': 'cash',
        }
        data.update(overrides)
        return data

    def test_resident_records_payment(self, resident_client, resident):
        url = reverse('payments:payment-list')
        response = resident_client.post(url, self._data(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['flat_number'] == '101'
        assert response.data['payment_mode'] == 'cash'
        assert response.data['recorded_by'] == 'rajesh101'

    def test_resident_other_flat_forbidden(self, resident_client):
        url = reverse('payments:payment-list')
        response = resident_client.post(url, self._data(flat_number='102'), format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Payment.objects.exists()

    def test_duplicate_month(self, resident_client, payment):
        url = reverse('payments:payment-list')
        response = resident_client.post(url, self._data(month=1), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Payment already exists for this flat, month, and year'

    def test_missing_flat(self, admin_client):
        url = reverse('payments:payment-list')
        response = admin_client.post(url, self._data(flat_number='999'), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_non_positive_amount(self, resident_client):
        url = reverse('payments:payment-list')
        response = resident_client.post(url, self._data(amount='0'), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_defaults_to_upi(self, resident_client):
        data = self._data()
        del data['payment_mode']

        url = reverse('payments:payment-list')
        response = resident_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['payment_mode'] == 'upi'


@pytest.mark.django_db
class TestPaymentDelete:
    """Tests for DELETE /api/payments/{id}/"""

    def test_admin_deletes(self, admin_client, payment):
        url = reverse('payments:payment-detail', kwargs={'pk': payment.id})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Payment.objects.exists()

    def test_resident_cannot_delete(self, resident_client, payment):
        url = reverse('payments:payment-detail', kwargs={'pk': payment.id})
        response = resident_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Payment.objects.exists()

    def test_missing(self, admin_client):
        url = reverse('payments:payment-detail', kwargs={'pk': 12345})
        response = admin_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Additional Endpoints
# =============================================================================

@pytest.mark.django_db
class TestFlatPayments:
    """Tests for GET /api/payments/flat/{flat_number}/"""

    def test_resident_gets_own(self, resident_client, payment):
        url = reverse('payments:flat-payments', kwargs={'flat_number': '101'})
        response = resident_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [p['id'] for p in response.data] == [payment.id]

    def test_resident_cannot_get_other(self, resident_client, other_payment):
        url = reverse('payments:flat-payments', kwargs={'flat_number': '102'})
        response = resident_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_missing_flat(self, admin_client):
        url = reverse('payments:flat-payments', kwargs={'flat_number': '999'})
        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestCollectionSummary:
    """Tests for GET /api/payments/summary/"""

    def test_admin_summary(self, admin_client, payment, other_payment):
        url = reverse('payments:collection-summary')
        response = admin_client.get(url, {'month': 1, 'year': 2024})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == 3
        assert response.data['paid'] == 2
        assert response.data['due'] == 1
        assert response.data['collected_amount'] == '2700.00'

    def test_resident_forbidden(self, resident_client):
        url = reverse('payments:collection-summary')
        response = resident_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
