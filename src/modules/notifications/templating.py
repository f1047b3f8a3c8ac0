"""Placeholder substitution for notification templates.

Supported tokens: ``{{customer}}``, ``{{device}}``, ``{{issue}}``,
``{{diagnosis}}``, ``{{cost}}``, ``{{status}}`` and ``{{notes}}``.
Every occurrence is replaced literally; unknown tokens are left as they are.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from modules.core.formatting import format_number
from modules.notifications.constants import NO_DIAGNOSIS_TEXT, UNKNOWN_COST_TEXT

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.orders.models import Order


def cost_text(order: Order) -> str:
    """Final cost, else the estimate, else ``?``; zero counts as unknown."""
    cost = order.final_cost or order.estimated_cost
    return format_number(cost) if cost else UNKNOWN_COST_TEXT


def placeholder_values(order: Order, customer: Customer) -> Dict[str, str]:
    return {
        "{{customer}}": customer.name,
        "{{device}}": order.device_name,
        "{{issue}}": order.issue_description,
        "{{diagnosis}}": order.diagnosis or NO_DIAGNOSIS_TEXT,
        "{{cost}}": cost_text(order),
        "{{status}}": order.get_status_display(),
        "{{notes}}": order.technician_notes or "",
    }


def process_template(body: str, order: Order, customer: Customer) -> str:
    """Fill a template body with the order's and customer's data."""
    text = body
    for token, value in placeholder_values(order, customer).items():
        text = text.replace(token, value)
    return text
