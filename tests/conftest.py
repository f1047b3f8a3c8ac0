from datetime import timedelta
from decimal import Decimal

import pytest
from django.core.cache import cache
from django.utils import timezone
from rest_framework.test import APIClient

from modules.customers.models import Customer, CustomerType
from modules.notifications.constants import DEFAULT_TEMPLATES
from modules.notifications.models import NotificationTemplate
from modules.orders.constants import OrderStatus
from modules.orders.models import Order, StatusHistoryEntry


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _fast_offline_settings(settings):
    """No send delay, no AI key: tests never wait and never call out."""
    settings.NOTIFICATION_SEND_DELAY = 0
    settings.OPENAI_API_KEY = ""
    settings.EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttle counters live in the cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def customer():
    """A persisted private customer with phone and e-mail."""
    return Customer.objects.create(
        id="0001",
        name="Jan Kowalski",
        phone="+48 501 234 567",
        email="jan.kowalski@example.com",
        type=CustomerType.INDIVIDUAL,
    )


@pytest.fixture()
def company():
    """A persisted company customer without e-mail."""
    return Customer.objects.create(
        id="0002",
        name="Bud-Max Sp. z o.o.",
        phone="602345678",
        type=CustomerType.COMPANY,
        tax_id="123-456-78-90",
    )


@pytest.fixture()
def order(customer):
    """A persisted order in DIAGNOSIS with a two-step history."""
    created = timezone.now() - timedelta(days=2)
    order = Order.objects.create(
        id="0001/10/26",
        customer=customer,
        device_name="Bosch Wiertarka",
        serial_number="SN12345",
        issue_description="Nie włącza się",
        status=OrderStatus.DIAGNOSIS,
        estimated_cost=Decimal("250.00"),
        created_at=created,
        updated_at=created,
    )
    StatusHistoryEntry.objects.create(
        order=order, status=OrderStatus.RECEIVED, timestamp=created
    )
    StatusHistoryEntry.objects.create(
        order=order,
        status=OrderStatus.DIAGNOSIS,
        timestamp=created + timedelta(hours=1),
    )
    return order


@pytest.fixture()
def default_templates():
    """The four seed templates, created in their listed order."""
    now = timezone.now()
    return [
        NotificationTemplate.objects.create(
            created_at=now + timedelta(microseconds=index), **data
        )
        for index, data in enumerate(DEFAULT_TEMPLATES)
    ]
