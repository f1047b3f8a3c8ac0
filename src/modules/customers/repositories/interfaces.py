"""Customer repository interface.

Extends ``IRepository[Customer]`` with the id allocation used when a
new customer is registered.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Customer]:
        """List customers with optional filters."""

    @abstractmethod
    def next_id(self) -> str:
        """Allocate the id for the next customer (``0001``, ``0002`` ...)."""
