"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.customers.exceptions import CustomerIdConflict
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by its 4-digit id, or ``None``."""
        return Customer.objects.filter(id=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Customer]:
        """List customers with optional Django ORM look-ups.

        Examples of valid filters::

            {"type": "COMPANY"}
            {"name__icontains": "kowal"}
        """
        queryset = Customer.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer.

        Raises ``CustomerIdConflict`` when a new customer reuses a stored id.
        """
        is_new = entity._state.adding
        if is_new and Customer.objects.filter(id=entity.id).exists():
            raise CustomerIdConflict(f"Customer id {entity.id} is already taken.")
        entity.save(force_insert=is_new)
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Remove a customer; ``False`` if it does not exist.

        Customers that still have orders are protected by the foreign key.
        """
        deleted, _ = Customer.objects.filter(id=id).delete()
        if deleted:
            logger.info("customer.deleted", customer_id=id)
        return bool(deleted)

    def next_id(self) -> str:
        return Customer.next_id(Customer.objects.values_list("id", flat=True))
