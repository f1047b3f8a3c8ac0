"""Integration tests for the ``seed_data`` management command."""

from io import StringIO

import pytest
from django.core.management import call_command

from modules.customers.models import Customer
from modules.notifications.models import NotificationTemplate
from modules.orders.models import Order, StatusHistoryEntry

pytestmark = pytest.mark.integration


class TestSeedData:
    def test_fills_empty_database(self):
        out = StringIO()
        call_command("seed_data", "--seed", "1", stdout=out)

        assert Customer.objects.count() == 100
        assert Order.objects.count() == 200
        assert NotificationTemplate.objects.count() == 4
        assert StatusHistoryEntry.objects.count() >= 200
        assert "customers=100, orders=200, templates=4" in out.getvalue()

    def test_second_run_changes_nothing(self):
        call_command("seed_data", "--seed", "1", stdout=StringIO())
        out = StringIO()
        call_command("seed_data", "--seed", "2", stdout=out)

        assert Customer.objects.count() == 100
        assert Order.objects.count() == 200
        assert "customers=0, orders=0, templates=0" in out.getvalue()

    def test_existing_customers_are_kept(self, customer):
        call_command("seed_data", "--seed", "1", stdout=StringIO())

        assert Customer.objects.count() == 1
        assert Order.objects.count() == 200
        assert set(Order.objects.values_list("customer_id", flat=True)) == {"0001"}

    def test_seeded_orders_have_matching_history(self):
        call_command("seed_data", "--seed", "3", stdout=StringIO())

        order = Order.objects.filter(status="COMPLETED").first()
        assert order is not None
        assert order.history.first().status == "RECEIVED"
        assert order.history.last().status == "COMPLETED"

    def test_seeded_history_ends_in_current_status(self):
        call_command("seed_data", "--seed", "3", stdout=StringIO())

        for order in Order.objects.prefetch_related("history"):
            assert list(order.history.all())[-1].status == order.status

    def test_editing_seeded_order_keeps_history(self, api_client):
        call_command("seed_data", "--seed", "3", stdout=StringIO())
        order = Order.objects.filter(status="COMPLETED").first()
        before = order.history.count()

        response = api_client.patch(
            f"/api/v1/orders/{order.id}/", {"device_name": "Makita Strug"}, format="json"
        )

        assert response.status_code == 200
        assert order.history.count() == before
