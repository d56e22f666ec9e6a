import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Platform",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100, unique=True)),
                ("api_enabled", models.BooleanField(default=False)),
                ("color_hex", models.CharField(blank=True, max_length=7, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("date", models.DateField()),
                ("venue", models.CharField(blank=True, max_length=255, null=True)),
                ("total_capacity", models.PositiveIntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="events",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-date"],
                "indexes": [
                    models.Index(fields=["owner"], name="events_owner_idx"),
                    models.Index(fields=["date"], name="events_date_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Sale",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("external_sale_id", models.CharField(blank=True, max_length=255, null=True)),
                ("ticket_type", models.CharField(blank=True, max_length=100, null=True)),
                (
                    "quantity",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                (
                    "price_per_ticket",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "fees",
                    models.DecimalField(
                        decimal_places=2,
                        default=0,
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("sale_date", models.DateTimeField()),
                ("synced_at", models.DateTimeField(auto_now_add=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sales",
                        to="events.event",
                    ),
                ),
                (
                    "platform",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="sales",
                        to="events.platform",
                    ),
                ),
            ],
            options={
                "ordering": ["-sale_date"],
                "indexes": [
                    models.Index(fields=["event", "sale_date"], name="sales_event_date_idx"),
                    models.Index(fields=["platform"], name="sales_platform_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("quantity__gte", 1)), name="sales_quantity_positive"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("price_per_ticket__gte", 0)),
                        name="sales_price_non_negative",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("fees__gte", 0)), name="sales_fees_non_negative"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ProjectionSnapshot",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("projected_total", models.DecimalField(decimal_places=2, max_digits=14, null=True)),
                ("confidence_level", models.CharField(max_length=10)),
                ("calculation_date", models.DateTimeField()),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="projections",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "ordering": ["-calculation_date"],
                "indexes": [
                    models.Index(fields=["event", "-calculation_date"], name="projections_event_calc_idx"),
                ],
            },
        ),
    ]
