"""Order domain constants.

Defines the repair workflow statuses (see the status badge order in the
order list) and the id format of repair orders.
"""

import re

from django.db import models


class OrderStatus(models.TextChoices):
    RECEIVED = "RECEIVED", "PRZYJĘTO"
    DIAGNOSIS = "DIAGNOSIS", "DIAGNOZA"
    WAITING_PARTS = "WAITING_PARTS", "CZEKA NA CZĘŚCI"
    IN_PROGRESS = "IN_PROGRESS", "W TRAKCIE"
    READY = "READY", "GOTOWE DO ODBIORU"
    COMPLETED = "COMPLETED", "ZAKOŃCZONE"


# Every status except COMPLETED counts as work in progress on the dashboard.
ACTIVE_STATUSES: set[str] = {
    status for status in OrderStatus.values if status != OrderStatus.COMPLETED
}

ORDER_SEQUENCE_WIDTH = 4
# Four digits at least; the sequence keeps growing past 9999.
ORDER_SEQUENCE_PATTERN = re.compile(r"^(\d{4,})/")

# Order ids look like 0042/10/26 and are embedded in URLs as-is.
ORDER_ID_URL_PATTERN = r"[0-9]+/[0-9]{2}/[0-9]{2}"

REVENUE_WINDOW_DAYS = 30
RECENT_ORDERS_LIMIT = 5
