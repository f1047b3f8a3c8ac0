"""Customer model.

Business rules implemented:
- Customer id is a 4-digit, zero-padded sequence (``0001``, ``0002`` ...),
  assigned as ``max(numeric ids) + 1`` and used as the join key for orders.
- Customers are never deleted; edits overwrite the whole record.
- ``tax_id`` (NIP) is stored digits-only and masked in ``__str__``.
"""

from __future__ import annotations

import re
from typing import Iterable

from django.db import models
from django.utils import timezone

CUSTOMER_ID_WIDTH = 4


class CustomerType(models.TextChoices):
    INDIVIDUAL = "INDIVIDUAL", "Osoba prywatna"
    COMPANY = "COMPANY", "Firma"


class Customer(models.Model):
    """Customer of the repair shop: a private person or a company."""

    id = models.CharField(primary_key=True, max_length=16, editable=False)
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=32)
    email = models.EmailField(max_length=254, blank=True, default="")
    type = models.CharField(
        max_length=10,
        choices=CustomerType.choices,
        default=CustomerType.INDIVIDUAL,
    )
    tax_id = models.CharField(max_length=32, blank=True, default="")
    notes = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------

    @staticmethod
    def next_id(existing_ids: Iterable[str]) -> str:
        """Return ``max(numeric ids) + 1`` zero-padded to 4 digits.

        Ids that do not parse as integers are ignored; ``0001`` is the
        first id when no numeric id exists.
        """
        numbers = []
        for value in existing_ids:
            try:
                numbers.append(int(value))
            except (TypeError, ValueError):
                continue
        next_number = max(numbers) + 1 if numbers else 1
        return str(next_number).zfill(CUSTOMER_ID_WIDTH)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        if self.tax_id:
            self.tax_id = re.sub(r"\D", "", self.tax_id)
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @property
    def contact(self) -> str:
        """Phone and e-mail in one line, as shown in the order list."""
        return f"{self.phone} {self.email}".strip()

    def __str__(self) -> str:
        return f"[{self.id}] {self.name}"
