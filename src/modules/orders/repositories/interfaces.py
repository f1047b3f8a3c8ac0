"""Order repository interface.

Extends ``IRepository[Order]`` with the methods the Order aggregate
needs: id allocation, status history tracking, and the id-prefix
look-up used by the client portal.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order, StatusHistoryEntry


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The Order aggregate includes its StatusHistoryEntry rows, which are
    only ever appended.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its customer and history loaded."""

    @abstractmethod
    def next_id(self, now: datetime) -> str:
        """Allocate the id of the next order created at *now*."""

    @abstractmethod
    def add_history(
        self, order_id: str, status: str, timestamp: datetime
    ) -> StatusHistoryEntry:
        """Append a status entry to an order's history."""

    @abstractmethod
    def last_history_status(self, order_id: str) -> Optional[str]:
        """Status of the latest history entry, or ``None`` without history."""

    @abstractmethod
    def find_by_id_prefix(self, text: str) -> Optional[Order]:
        """Exact id match, else the earliest order whose id starts with *text*."""
