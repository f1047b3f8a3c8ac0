"""Sample data for a fresh installation.

Generates a realistic book of a power-tool repair shop: 100 customers
(companies and private persons) and 200 repair orders with status
histories.  Generators take a ``random.Random`` so a seed reproduces the
same data.  Nothing here touches the database.
"""

from __future__ import annotations

import random
import re
from datetime import datetime, timedelta
from decimal import Decimal
from functools import cmp_to_key
from typing import List, Sequence, Tuple

from django.utils import timezone

from modules.core.tables import compare_values
from modules.customers.models import Customer, CustomerType
from modules.orders.constants import ORDER_SEQUENCE_WIDTH, OrderStatus
from modules.orders.models import Order, StatusHistoryEntry

COMPANY_COUNT = 40
INDIVIDUAL_COUNT = 60
ORDER_COUNT = 200

FIRST_NAMES = [
    "Jan", "Anna", "Piotr", "Maria", "Krzysztof", "Agnieszka", "Tomasz",
    "Barbara", "Paweł", "Ewa", "Michał", "Krystyna", "Marcin", "Elżbieta",
    "Andrzej", "Małgorzata", "Grzegorz", "Zofia", "Adam", "Jadwiga",
]
LAST_NAMES = [
    "Kowalski", "Nowak", "Wiśniewski", "Wójcik", "Kowalczyk", "Kamiński",
    "Lewandowski", "Zieliński", "Szymański", "Woźniak", "Dąbrowski",
    "Kozłowski", "Jankowski", "Mazur", "Kwiatkowski", "Krawczyk",
]
COMPANY_PREFIXES = [
    "Bud", "Rem", "Elektro", "Tech", "Auto", "Dom", "Ogród", "Serwis", "Inwest", "Pro",
]
COMPANY_SUFFIXES = [
    "Max", "Pol", "Bud", "System", "Trans", "Serwis", "Dom", "Ex", "Lux", "Mix",
]
TOOLS = [
    "Wiertarka", "Wkrętarka", "Szlifierka kątowa", "Młot udarowy", "Pilarka tarczowa",
    "Strug", "Polerka", "Wyrzynarka", "Bruzdownica", "Mieszadło",
]
BRANDS = [
    "Bosch", "Makita", "DeWalt", "Hilti", "Metabo", "Milwaukee", "Ryobi",
    "Festool", "Hitachi", "Black&Decker",
]
ISSUES = [
    "Nie włącza się", "Iskrzy na szczotkach", "Uszkodzony kabel zasilający",
    "Bicie na uchwycie", "Spalony wirnik", "Słaby udar", "Głośna praca przekładni",
    "Wymiana szczotek", "Przegląd okresowy", "Dymi z silnika", "Nie trzyma obrotów",
    "Uszkodzony wyłącznik",
]
WORN_PARTS = ["wirnik", "szczotki", "łożyska", "kabel"]
RETURN_PARTS_NOTE = "Klient prosi o zwrot starych części."

# Completed and ready orders dominate, as in a shop that has been running a while.
STATUS_WEIGHTS = [
    OrderStatus.COMPLETED, OrderStatus.COMPLETED, OrderStatus.COMPLETED,
    OrderStatus.READY, OrderStatus.READY,
    OrderStatus.IN_PROGRESS, OrderStatus.IN_PROGRESS,
    OrderStatus.WAITING_PARTS,
    OrderStatus.DIAGNOSIS,
    OrderStatus.RECEIVED,
]

_EMAIL_UNSAFE = re.compile(r"[^a-z0-9]")


def _ms(value: int) -> timedelta:
    return timedelta(milliseconds=value)


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------


def _company(rng: random.Random, now: datetime) -> Customer:
    name = f"{rng.choice(COMPANY_PREFIXES)}-{rng.choice(COMPANY_SUFFIXES)} Sp. z o.o."
    tax_id = (
        f"{rng.randint(100, 999)}{rng.randint(100, 999)}"
        f"{rng.randint(10, 99)}{rng.randint(10, 99)}"
    )
    return Customer(
        name=name,
        phone=f"60{rng.randint(0, 9)}{rng.randint(100000, 999999)}",
        email=f"biuro@{_EMAIL_UNSAFE.sub('', name.lower())}.pl",
        type=CustomerType.COMPANY,
        tax_id=tax_id,
        created_at=now - _ms(rng.randint(10_000_000, 500_000_000)),
    )


def _individual(rng: random.Random, now: datetime) -> Customer:
    first_name = rng.choice(FIRST_NAMES)
    last_name = rng.choice(LAST_NAMES)
    return Customer(
        # Surname first until ids are assigned.
        name=f"{last_name} {first_name}",
        phone=f"50{rng.randint(0, 9)}{rng.randint(100000, 999999)}",
        type=CustomerType.INDIVIDUAL,
        created_at=now - _ms(rng.randint(10_000_000, 500_000_000)),
    )


def generate_customers(
    rng: random.Random, now: datetime | None = None
) -> List[Customer]:
    """100 unsaved customers with ids ``0001``..``0100``.

    Ids follow alphabetical order of the surname-first name; private
    persons are then displayed "First Last".
    """
    now = now or timezone.now()
    customers = [_company(rng, now) for _ in range(COMPANY_COUNT)]
    customers += [_individual(rng, now) for _ in range(INDIVIDUAL_COUNT)]
    customers.sort(key=cmp_to_key(lambda a, b: compare_values(a.name, b.name)))

    for index, customer in enumerate(customers, start=1):
        customer.id = str(index).zfill(4)
        if customer.type == CustomerType.INDIVIDUAL:
            customer.name = " ".join(reversed(customer.name.split(" ")))
    return customers


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


STATUS_PATHS = {
    OrderStatus.RECEIVED: [OrderStatus.RECEIVED],
    OrderStatus.DIAGNOSIS: [OrderStatus.RECEIVED, OrderStatus.DIAGNOSIS],
    OrderStatus.WAITING_PARTS: [
        OrderStatus.RECEIVED, OrderStatus.DIAGNOSIS, OrderStatus.WAITING_PARTS,
    ],
    OrderStatus.IN_PROGRESS: [
        OrderStatus.RECEIVED, OrderStatus.DIAGNOSIS, OrderStatus.IN_PROGRESS,
    ],
    OrderStatus.READY: [
        OrderStatus.RECEIVED, OrderStatus.DIAGNOSIS, OrderStatus.IN_PROGRESS,
        OrderStatus.READY,
    ],
    OrderStatus.COMPLETED: [
        OrderStatus.RECEIVED, OrderStatus.DIAGNOSIS, OrderStatus.IN_PROGRESS,
        OrderStatus.READY, OrderStatus.COMPLETED,
    ],
}


def _history(
    status: str, created_at: datetime, updated_at: datetime
) -> List[Tuple[str, datetime]]:
    """Steps from RECEIVED at creation to ``status`` at the last update."""
    steps = STATUS_PATHS[status]
    if len(steps) == 1:
        return [(steps[0], created_at)]
    gap = (updated_at - created_at) / (len(steps) - 1)
    return [(step, created_at + gap * index) for index, step in enumerate(steps)]


def generate_orders(
    rng: random.Random,
    customers: Sequence[Customer],
    now: datetime | None = None,
) -> List[Tuple[Order, List[StatusHistoryEntry]]]:
    """200 unsaved orders with their history rows.

    Ids run ``0001``..``0200`` with the current month and year; creation
    dates reach about six months back.
    """
    now = now or timezone.now()
    local = timezone.localtime(now)
    suffix = f"{local:%m}/{local:%y}"
    generated = []

    for sequence in range(1, ORDER_COUNT + 1):
        customer = rng.choice(customers)
        status = rng.choice(STATUS_WEIGHTS)
        created_at = now - _ms(rng.randint(86_400_000, 1_500_000_000))

        estimated = rng.randint(100, 800)
        final = None
        if status in (OrderStatus.READY, OrderStatus.COMPLETED):
            final = Decimal(estimated + rng.randint(0, 100))

        serial_number = ""
        if rng.random() > 0.7:
            serial_number = f"SN{rng.randint(10000, 999999)}"

        diagnosis = ""
        if status not in (OrderStatus.RECEIVED, OrderStatus.DIAGNOSIS):
            diagnosis = f"Wymagana wymiana podzespołów: {rng.choice(WORN_PARTS)}."

        updated_at = created_at + _ms(rng.randint(3_600_000, 864_000_000))
        order = Order(
            id=f"{str(sequence).zfill(ORDER_SEQUENCE_WIDTH)}/{suffix}",
            customer=customer,
            device_name=f"{rng.choice(BRANDS)} {rng.choice(TOOLS)}",
            serial_number=serial_number,
            issue_description=rng.choice(ISSUES),
            diagnosis=diagnosis,
            status=status,
            estimated_cost=Decimal(estimated),
            final_cost=final,
            technician_notes=RETURN_PARTS_NOTE if rng.random() > 0.8 else "",
            created_at=created_at,
            updated_at=updated_at,
        )
        history = [
            StatusHistoryEntry(order=order, status=step, timestamp=timestamp)
            for step, timestamp in _history(status, created_at, updated_at)
        ]
        generated.append((order, history))
    return generated
