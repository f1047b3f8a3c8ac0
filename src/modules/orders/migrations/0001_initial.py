import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

STATUS_CHOICES = [
    ("RECEIVED", "PRZYJĘTO"),
    ("DIAGNOSIS", "DIAGNOZA"),
    ("WAITING_PARTS", "CZEKA NA CZĘŚCI"),
    ("IN_PROGRESS", "W TRAKCIE"),
    ("READY", "GOTOWE DO ODBIORU"),
    ("COMPLETED", "ZAKOŃCZONE"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("customers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.CharField(
                        editable=False, max_length=16, primary_key=True, serialize=False
                    ),
                ),
                ("device_name", models.CharField(max_length=255)),
                ("serial_number", models.CharField(blank=True, default="", max_length=64)),
                ("issue_description", models.TextField()),
                ("diagnosis", models.TextField(blank=True, default="")),
                (
                    "status",
                    models.CharField(
                        choices=STATUS_CHOICES, default="RECEIVED", max_length=20
                    ),
                ),
                (
                    "estimated_cost",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=10, null=True
                    ),
                ),
                (
                    "final_cost",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=10, null=True
                    ),
                ),
                ("technician_notes", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="orders",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "db_table": "orders",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(fields=["status"], name="orders_status_idx"),
                    models.Index(fields=["-updated_at"], name="orders_updated_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="StatusHistoryEntry",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("status", models.CharField(choices=STATUS_CHOICES, max_length=20)),
                ("timestamp", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="history",
                        to="orders.order",
                    ),
                ),
            ],
            options={
                "db_table": "order_status_history",
                "ordering": ["timestamp", "id"],
                "verbose_name_plural": "status history entries",
            },
        ),
    ]
