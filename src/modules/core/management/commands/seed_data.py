from __future__ import annotations

import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from modules.core.sample_data import generate_customers, generate_orders
from modules.customers.models import Customer
from modules.notifications.constants import DEFAULT_TEMPLATES
from modules.notifications.models import NotificationTemplate
from modules.orders.models import Order, StatusHistoryEntry


class Command(BaseCommand):
    help = (
        "Fill empty collections with sample customers, repair orders and the "
        "default notification templates. Collections that hold data are left alone."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed for reproducible sample data.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        rng = random.Random(options["seed"])
        self.stdout.write("Seeding sample data...")

        customers_created = self._seed_customers(rng)
        orders_created = self._seed_orders(rng)
        templates_created = self._seed_templates()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"customers={customers_created}, "
                f"orders={orders_created}, "
                f"templates={templates_created}"
            )
        )

    def _seed_customers(self, rng: random.Random) -> int:
        if Customer.objects.exists():
            self.stdout.write("Customers present, skipping.")
            return 0
        customers = generate_customers(rng)
        Customer.objects.bulk_create(customers)
        return len(customers)

    def _seed_orders(self, rng: random.Random) -> int:
        if Order.objects.exists():
            self.stdout.write("Orders present, skipping.")
            return 0
        customers = list(Customer.objects.all())
        if not customers:
            self.stdout.write(self.style.WARNING("No customers, skipping orders."))
            return 0

        generated = generate_orders(rng, customers)
        Order.objects.bulk_create([order for order, _ in generated])
        StatusHistoryEntry.objects.bulk_create(
            [entry for _, history in generated for entry in history]
        )
        return len(generated)

    def _seed_templates(self) -> int:
        if NotificationTemplate.objects.exists():
            self.stdout.write("Templates present, skipping.")
            return 0
        now = timezone.now()
        templates = [
            NotificationTemplate(created_at=now + timedelta(microseconds=index), **data)
            for index, data in enumerate(DEFAULT_TEMPLATES)
        ]
        NotificationTemplate.objects.bulk_create(templates)
        return len(templates)
