"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- A new customer gets the next free 4-digit id and ``created_at = now``.
- Edits overwrite the supplied fields; customers are never deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = ("name", "phone", "email", "type", "tax_id", "notes")


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Register a new customer under the next free id."""
        customer = Customer(
            id=self._repo.next_id(),
            name=dto.name,
            phone=dto.phone,
            email=dto.email or "",
            type=str(dto.type),
            tax_id=dto.tax_id,
            notes=dto.notes,
            created_at=timezone.now(),
        )
        customer = self._repo.save(customer)
        logger.info("customer.created", customer_id=customer.id, type=customer.type)
        return customer

    @transaction.atomic
    def update_customer(self, id: str, dto: UpdateCustomerDTO) -> Customer:
        """Overwrite the supplied fields of an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self.get_customer(id)
        for field in UPDATABLE_FIELDS:
            value = getattr(dto, field)
            if value is not None:
                setattr(customer, field, str(value))

        customer = self._repo.save(customer)
        logger.info("customer.updated", customer_id=id)
        return customer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[Customer]:
        """Return a list of customers, optionally filtered."""
        return self._repo.list(filters)

    def get_customer(self, id: str) -> Customer:
        """Retrieve a single customer by id.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer
