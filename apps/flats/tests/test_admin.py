import pytest
from django.test import Client
from django.urls import reverse

from apps.accounts.models import User
from apps.flats.models import FlatLink
from apps.flats.services import load_adjacency


@pytest.fixture
def site_admin_client(db):
    """Return a Django test client logged in to the admin site."""
    superuser = User.objects.create_superuser(
        username='root',
        email='root@example.com',
        password='TestPass123!',
    )
    client = Client()
    client.force_login(superuser)
    return client


@pytest.mark.django_db
class TestFlatLinkAdmin:
    """Tests for /admin/flats/flatlink/"""

    def test_single_link_cannot_be_deleted(self, site_admin_client, building):
        link = FlatLink.objects.get(from_flat__flat_number='101', to_flat__flat_number='102')

        url = reverse('admin:flats_flatlink_delete', args=[link.pk])
        response = site_admin_client.post(url, {'post': 'yes'})

        assert response.status_code == 403
        model = load_adjacency()
        assert model.neighbors('101') == ['102', '103']
        assert model.neighbors('102') == ['101', '103']

    def test_link_table_stays_symmetric(self, site_admin_client, building):
        link_ids = list(FlatLink.objects.values_list('pk', flat=True))

        url = reverse('admin:flats_flatlink_changelist')
        site_admin_client.post(url, {'action': 'delete_selected', '_selected_action': link_ids[:1]})

        pairs = set(FlatLink.objects.values_list('from_flat_id', 'to_flat_id'))
        assert len(pairs) == len(link_ids)
        assert all((to_id, from_id) in pairs for from_id, to_id in pairs)

    def test_links_are_listed(self, site_admin_client, building):
        url = reverse('admin:flats_flatlink_changelist')
        response = site_admin_client.get(url)

        assert response.status_code == 200
