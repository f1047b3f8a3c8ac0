"""Text rendering helpers for values shown to staff and customers."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

Number = Union[int, float, Decimal]


def format_number(value: Number) -> str:
    """Render a number the way a person would type it: ``250``, ``250.5``.

    Trailing zeros of the decimal part are dropped, so a ``Decimal("250.00")``
    cost reads as ``250``.
    """
    if isinstance(value, bool):
        return str(value)
    decimal_value = value if isinstance(value, Decimal) else Decimal(str(value))
    if decimal_value == decimal_value.to_integral_value():
        return str(int(decimal_value))
    return format(decimal_value.normalize(), "f")
