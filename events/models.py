"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/ and analytics/.
"""

import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Platform(models.Model):
    """Persistence model for ticketing platforms."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    api_enabled = models.BooleanField(default=False)
    color_hex = models.CharField(max_length=7, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="events",
        null=True,
        blank=True,
    )
    name = models.CharField(max_length=255)
    date = models.DateField()
    venue = models.CharField(max_length=255, blank=True, null=True)
    total_capacity = models.PositiveIntegerField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date"]
        indexes = [
            models.Index(fields=["owner"], name="events_owner_idx"),
            models.Index(fields=["date"], name="events_date_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class Sale(models.Model):
    """Persistence model for ticket sales, manual or platform-sourced."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="sales")
    platform = models.ForeignKey(
        Platform,
        on_delete=models.SET_NULL,
        related_name="sales",
        null=True,
        blank=True,
    )
    external_sale_id = models.CharField(max_length=255, blank=True, null=True)
    ticket_type = models.CharField(max_length=100, blank=True, null=True)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    price_per_ticket = models.DecimalField(
        max_digits=12, decimal_places=2, validators=[MinValueValidator(0)]
    )
    fees = models.DecimalField(
        max_digits=12, decimal_places=2, default=0, validators=[MinValueValidator(0)]
    )
    sale_date = models.DateTimeField()
    synced_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-sale_date"]
        indexes = [
            models.Index(fields=["event", "sale_date"], name="sales_event_date_idx"),
            models.Index(fields=["platform"], name="sales_platform_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gte=1), name="sales_quantity_positive"),
            models.CheckConstraint(
                condition=models.Q(price_per_ticket__gte=0), name="sales_price_non_negative"
            ),
            models.CheckConstraint(condition=models.Q(fees__gte=0), name="sales_fees_non_negative"),
        ]

    def __str__(self) -> str:
        return f"{self.quantity} x {self.ticket_type or 'Unknown'} @ {self.price_per_ticket}"


class ProjectionSnapshot(models.Model):
    """A projection as it was computed at a point in time."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="projections")
    projected_total = models.DecimalField(max_digits=14, decimal_places=2, null=True)
    confidence_level = models.CharField(max_length=10)
    calculation_date = models.DateTimeField()

    class Meta:
        ordering = ["-calculation_date"]
        indexes = [
            models.Index(fields=["event", "-calculation_date"], name="projections_event_calc_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.event_id} - {self.calculation_date}"
