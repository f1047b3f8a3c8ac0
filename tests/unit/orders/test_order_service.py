"""Unit tests for order ids, DTOs and OrderService.

Covers:
- Order.next_id: global sequence, month/year suffix, odd ids.
- create_order: history entry, ready transition for orders created READY,
  unknown customer.
- update_order: history appended on status change only, ready transition
  on entering READY, stale history repaired, costs cleared.
- delete_order and dashboard_summary.
- Event publication.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest
from django.utils import timezone
from freezegun import freeze_time
from pydantic import ValidationError

from modules.customers.models import Customer
from modules.orders.constants import OrderStatus
from modules.orders.dtos import CreateOrderDTO, OrderStatusEnum, UpdateOrderDTO
from modules.orders.events import OrderCreated, OrderReadyForPickup, OrderStatusChanged
from modules.orders.exceptions import CustomerNotFound, OrderNotFound
from modules.orders.models import Order
from modules.orders.services import OrderService

pytestmark = pytest.mark.unit

WARSAW = ZoneInfo("Europe/Warsaw")


@pytest.fixture()
def order_repo():
    repo = MagicMock()
    repo.next_id.return_value = "0001/10/26"
    repo.save.side_effect = lambda o: o
    repo.get_by_id.return_value = None
    return repo


@pytest.fixture()
def customer_repo():
    repo = MagicMock()
    repo.get_by_id.return_value = Customer(id="0001", name="Jan Kowalski", phone="501234567")
    return repo


@pytest.fixture()
def bus():
    return MagicMock()


@pytest.fixture()
def service(order_repo, customer_repo, bus):
    return OrderService(
        order_repository=order_repo, customer_repository=customer_repo, event_bus=bus
    )


def _existing(status: str = OrderStatus.DIAGNOSIS, **overrides) -> Order:
    data = {
        "id": "0001/10/26",
        "customer": Customer(id="0001", name="Jan Kowalski", phone="501234567"),
        "device_name": "Makita Wkrętarka",
        "issue_description": "Nie włącza się",
        "status": status,
        "estimated_cost": Decimal("200"),
    }
    data.update(overrides)
    return Order(**data)


def _published(bus, event_type):
    return [c.args[0] for c in bus.publish.call_args_list if isinstance(c.args[0], event_type)]


# ===========================================================================
# Order.next_id
# ===========================================================================


class TestNextOrderId:
    NOW = datetime(2026, 10, 18, 12, 0, tzinfo=WARSAW)

    def test_first_id(self):
        assert Order.next_id([], self.NOW) == "0001/10/26"

    def test_sequence_is_global_across_months(self):
        assert Order.next_id(["0007/08/26", "0012/09/26"], self.NOW) == "0013/10/26"

    def test_non_matching_ids_count_as_zero(self):
        assert Order.next_id(["ABC", "12/10/26"], self.NOW) == "0001/10/26"

    def test_sequence_grows_past_four_digits(self):
        assert Order.next_id(["9999/09/26"], self.NOW) == "10000/10/26"
        assert Order.next_id(["10000/10/26", "9999/09/26"], self.NOW) == "10001/10/26"

    def test_month_and_year_are_local(self):
        # 23:30 UTC on 31 December is already January in Warsaw.
        utc_new_year_eve = datetime(2026, 12, 31, 23, 30, tzinfo=ZoneInfo("UTC"))
        assert Order.next_id(["0004/12/26"], utc_new_year_eve) == "0005/01/27"

    @freeze_time("2026-03-05 10:00:00")
    def test_defaults_to_current_month(self):
        assert Order.next_id(["0041/02/26"]) == "0042/03/26"


# ===========================================================================
# DTOs
# ===========================================================================


class TestOrderDTOs:
    def test_required_fields(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO(customer_id="0001", device_name="", issue_description="x")
        with pytest.raises(ValidationError):
            CreateOrderDTO(customer_id="", device_name="x", issue_description="x")

    def test_blank_cost_is_unknown(self):
        dto = CreateOrderDTO(
            customer_id="0001", device_name="x", issue_description="y", estimated_cost=""
        )
        assert dto.estimated_cost is None

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO(
                customer_id="0001",
                device_name="x",
                issue_description="y",
                final_cost="-1",
            )

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            UpdateOrderDTO(status="LOST")

    def test_update_tracks_submitted_fields(self):
        dto = UpdateOrderDTO(status="READY", final_cost=None)
        assert dto.model_fields_set == {"status", "final_cost"}


# ===========================================================================
# create_order
# ===========================================================================


class TestCreateOrder:
    def _dto(self, **overrides):
        data = {
            "customer_id": "0001",
            "device_name": "Bosch Wiertarka",
            "issue_description": "Iskrzy na szczotkach",
        }
        data.update(overrides)
        return CreateOrderDTO(**data)

    def test_new_order_gets_history_entry(self, service, order_repo, bus):
        saved = service.create_order(self._dto())

        order = saved.order
        assert order.id == "0001/10/26"
        assert order.status == OrderStatus.RECEIVED
        assert order.created_at == order.updated_at
        order_repo.add_history.assert_called_once_with(
            "0001/10/26", OrderStatus.RECEIVED, order.created_at
        )
        assert saved.created is True
        assert saved.ready_transition is False
        assert len(_published(bus, OrderCreated)) == 1

    def test_new_order_created_ready_is_a_ready_transition(self, service, bus):
        saved = service.create_order(self._dto(status=OrderStatusEnum.READY))
        assert saved.ready_transition is True
        assert len(_published(bus, OrderReadyForPickup)) == 1

    def test_unknown_customer(self, service, customer_repo, order_repo):
        customer_repo.get_by_id.return_value = None
        with pytest.raises(CustomerNotFound):
            service.create_order(self._dto(customer_id="9999"))
        order_repo.save.assert_not_called()


# ===========================================================================
# update_order
# ===========================================================================


class TestUpdateOrder:
    def test_status_change_appends_history(self, service, order_repo, bus):
        order_repo.get_by_id.return_value = _existing(OrderStatus.DIAGNOSIS)
        order_repo.last_history_status.return_value = OrderStatus.DIAGNOSIS

        saved = service.update_order("0001/10/26", UpdateOrderDTO(status="IN_PROGRESS"))

        assert saved.order.status == OrderStatus.IN_PROGRESS
        assert saved.previous_status == OrderStatus.DIAGNOSIS
        assert saved.ready_transition is False
        order_repo.add_history.assert_called_once()
        assert order_repo.add_history.call_args.args[1] == OrderStatus.IN_PROGRESS
        changed = _published(bus, OrderStatusChanged)
        assert changed[0].old_status == OrderStatus.DIAGNOSIS
        assert changed[0].new_status == OrderStatus.IN_PROGRESS

    def test_edit_without_status_change_keeps_history(self, service, order_repo, bus):
        order_repo.get_by_id.return_value = _existing(OrderStatus.DIAGNOSIS)
        order_repo.last_history_status.return_value = OrderStatus.DIAGNOSIS

        saved = service.update_order(
            "0001/10/26", UpdateOrderDTO(diagnosis="Spalony wirnik")
        )

        assert saved.order.diagnosis == "Spalony wirnik"
        order_repo.add_history.assert_not_called()
        assert _published(bus, OrderStatusChanged) == []

    def test_stale_history_is_repaired(self, service, order_repo):
        order_repo.get_by_id.return_value = _existing(OrderStatus.IN_PROGRESS)
        order_repo.last_history_status.return_value = OrderStatus.DIAGNOSIS

        service.update_order("0001/10/26", UpdateOrderDTO(technician_notes="x"))

        order_repo.add_history.assert_called_once()
        assert order_repo.add_history.call_args.args[1] == OrderStatus.IN_PROGRESS

    def test_entering_ready_is_a_ready_transition(self, service, order_repo, bus):
        order_repo.get_by_id.return_value = _existing(OrderStatus.IN_PROGRESS)
        order_repo.last_history_status.return_value = OrderStatus.IN_PROGRESS

        saved = service.update_order(
            "0001/10/26", UpdateOrderDTO(status="READY", final_cost="260")
        )

        assert saved.ready_transition is True
        assert saved.order.final_cost == Decimal("260")
        assert len(_published(bus, OrderReadyForPickup)) == 1

    def test_saving_ready_again_is_not_a_transition(self, service, order_repo, bus):
        order_repo.get_by_id.return_value = _existing(OrderStatus.READY)
        order_repo.last_history_status.return_value = OrderStatus.READY

        saved = service.update_order("0001/10/26", UpdateOrderDTO(status="READY"))

        assert saved.ready_transition is False
        order_repo.add_history.assert_not_called()
        assert _published(bus, OrderReadyForPickup) == []

    def test_backward_transition_is_allowed(self, service, order_repo):
        order_repo.get_by_id.return_value = _existing(OrderStatus.COMPLETED)
        order_repo.last_history_status.return_value = OrderStatus.COMPLETED

        saved = service.update_order("0001/10/26", UpdateOrderDTO(status="RECEIVED"))

        assert saved.order.status == OrderStatus.RECEIVED

    def test_explicit_null_clears_cost(self, service, order_repo):
        order_repo.get_by_id.return_value = _existing()
        order_repo.last_history_status.return_value = OrderStatus.DIAGNOSIS

        saved = service.update_order("0001/10/26", UpdateOrderDTO(estimated_cost=None))

        assert saved.order.estimated_cost is None

    def test_updated_at_refreshed(self, service, order_repo):
        old = timezone.now() - timedelta(days=3)
        order_repo.get_by_id.return_value = _existing(created_at=old, updated_at=old)
        order_repo.last_history_status.return_value = OrderStatus.DIAGNOSIS

        saved = service.update_order("0001/10/26", UpdateOrderDTO(serial_number="SN1"))

        assert saved.order.updated_at > old
        assert saved.order.created_at == old

    def test_not_found(self, service, order_repo):
        with pytest.raises(OrderNotFound):
            service.update_order("9999/10/26", UpdateOrderDTO(status="READY"))

    def test_move_to_unknown_customer(self, service, order_repo, customer_repo):
        order_repo.get_by_id.return_value = _existing()
        customer_repo.get_by_id.return_value = None
        with pytest.raises(CustomerNotFound):
            service.update_order("0001/10/26", UpdateOrderDTO(customer_id="0999"))


# ===========================================================================
# delete_order / dashboard_summary
# ===========================================================================


class TestDeleteOrder:
    def test_delete(self, service, order_repo):
        order_repo.delete.return_value = True
        service.delete_order("0001/10/26")
        order_repo.delete.assert_called_once_with("0001/10/26")

    def test_delete_missing(self, service, order_repo):
        order_repo.delete.return_value = False
        with pytest.raises(OrderNotFound):
            service.delete_order("0001/10/26")


class TestDashboardSummary:
    def test_counts_revenue_and_recent(self, service, order_repo):
        now = timezone.now()
        orders = [
            _existing(OrderStatus.COMPLETED, id=f"000{i}/10/26", final_cost=Decimal("100"),
                      created_at=now - timedelta(days=10 - i), updated_at=now - timedelta(days=1))
            for i in range(1, 3)
        ]
        orders.append(
            _existing(OrderStatus.COMPLETED, id="0003/10/26", final_cost=Decimal("999"),
                      created_at=now - timedelta(days=90), updated_at=now - timedelta(days=45))
        )
        orders.append(
            _existing(OrderStatus.COMPLETED, id="0004/10/26", final_cost=None,
                      created_at=now - timedelta(days=20), updated_at=now)
        )
        orders.append(
            _existing(OrderStatus.READY, id="0005/10/26",
                      created_at=now - timedelta(days=1), updated_at=now)
        )
        for i, status in enumerate((OrderStatus.RECEIVED, OrderStatus.IN_PROGRESS), start=6):
            orders.append(
                _existing(status, id=f"000{i}/10/26",
                          created_at=now - timedelta(days=30 + i), updated_at=now)
            )
        order_repo.list.return_value = orders

        summary = service.dashboard_summary()

        assert summary.active_orders == 3
        assert summary.ready_orders == 1
        assert summary.revenue == Decimal("200")
        assert [o.id for o in summary.recent_orders] == [
            "0005/10/26",
            "0002/10/26",
            "0001/10/26",
            "0004/10/26",
            "0006/10/26",
        ]
        assert summary.recent_orders[0].customer_name == "Jan Kowalski"
        assert summary.recent_orders[0].status_label == "GOTOWE DO ODBIORU"


class TestStatusHistoryEntry:
    def test_entries_cannot_be_rewritten(self, order):
        entry = order.history.first()
        entry.status = OrderStatus.READY
        with pytest.raises(ValueError):
            entry.save()
        entry.refresh_from_db()
        assert entry.status == OrderStatus.RECEIVED
