"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist."""


class CustomerNotFound(Exception):
    """The customer referenced by the order does not exist."""


class OrderIdConflict(Exception):
    """A new order would reuse the id of a stored order."""
