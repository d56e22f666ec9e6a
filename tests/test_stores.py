"""Integration tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from events import models
from events.domain import (
    Capacity,
    ConfidenceLevel,
    EventId,
    PlatformId,
    Projection,
)
from events.stores import (
    DjangoEventStore,
    DjangoPlatformStore,
    DjangoProjectionStore,
    DjangoSaleStore,
)

SALE_TIME = datetime(2025, 3, 10, 18, 30, tzinfo=timezone.utc)


@pytest.fixture
def owner(django_user_model):
    return django_user_model.objects.create_user(username="promoter", password="secret")


@pytest.fixture
def event_row(owner) -> models.Event:
    return models.Event.objects.create(
        owner=owner, name="Rooftop Sessions", date=date(2025, 4, 5), venue="", total_capacity=300
    )


@pytest.fixture
def platform_row() -> models.Platform:
    return models.Platform.objects.create(name="Megatix", color_hex="#ff5500", api_enabled=True)


@pytest.mark.django_db
class TestDjangoEventStore:
    """Tests for DjangoEventStore."""

    def test_get_event_converts_to_domain(self, event_row, owner):
        event = DjangoEventStore().get_event(EventId(event_row.id))

        assert event.name == "Rooftop Sessions"
        assert event.owner_id == owner.pk
        assert event.total_capacity == Capacity(300)
        assert event.venue is None

    def test_get_event_missing_returns_none(self):
        assert DjangoEventStore().get_event(EventId(uuid4())) is None

    def test_event_without_capacity(self, owner):
        row = models.Event.objects.create(owner=owner, name="Open air", date=date(2025, 6, 1))
        assert DjangoEventStore().get_event(EventId(row.id)).total_capacity is None

    def test_list_events_for_owner(self, event_row, owner, django_user_model):
        other = django_user_model.objects.create_user(username="other", password="secret")
        models.Event.objects.create(owner=other, name="Elsewhere", date=date(2025, 5, 1))

        events = DjangoEventStore().list_events_for_owner(owner.pk)

        assert [event.name for event in events] == ["Rooftop Sessions"]


@pytest.mark.django_db
class TestDjangoSaleStore:
    """Tests for DjangoSaleStore."""

    def test_sales_convert_with_platform(self, event_row, platform_row):
        models.Sale.objects.create(
            event=event_row,
            platform=platform_row,
            ticket_type="VIP",
            quantity=2,
            price_per_ticket=Decimal("100.00"),
            fees=Decimal("10.00"),
            sale_date=SALE_TIME,
        )

        (sale,) = DjangoSaleStore().list_sales_for_event(EventId(event_row.id))

        assert sale.gross_revenue == Decimal("200")
        assert sale.fees.amount == Decimal("10")
        assert sale.platform.name == "Megatix"
        assert sale.platform.id == PlatformId(platform_row.id)
        assert sale.sale_timestamp == SALE_TIME

    def test_sales_without_platform(self, event_row):
        models.Sale.objects.create(
            event=event_row, quantity=1, price_per_ticket=Decimal("25"), sale_date=SALE_TIME
        )

        (sale,) = DjangoSaleStore().list_sales_for_event(EventId(event_row.id))

        assert sale.platform is None
        assert sale.fees.amount == 0

    def test_sales_for_event_ordered_by_date(self, event_row):
        for day in (12, 3, 7):
            models.Sale.objects.create(
                event=event_row,
                quantity=1,
                price_per_ticket=Decimal("10"),
                sale_date=datetime(2025, 3, day, tzinfo=timezone.utc),
            )

        sales = DjangoSaleStore().list_sales_for_event(EventId(event_row.id))

        assert [sale.sale_timestamp.day for sale in sales] == [3, 7, 12]

    def test_sales_for_events_includes_events_without_sales(self, event_row, owner):
        empty = models.Event.objects.create(owner=owner, name="Quiet", date=date(2025, 8, 1))
        models.Sale.objects.create(
            event=event_row, quantity=3, price_per_ticket=Decimal("10"), sale_date=SALE_TIME
        )

        grouped = DjangoSaleStore().list_sales_for_events([EventId(event_row.id), EventId(empty.id)])

        assert len(grouped[EventId(event_row.id)]) == 1
        assert grouped[EventId(empty.id)] == []

    def test_sales_for_no_events(self):
        assert DjangoSaleStore().list_sales_for_events([]) == {}

    def test_external_sale_ids(self, event_row, platform_row):
        for external_id in ("MGX-1", "MGX-2", None):
            models.Sale.objects.create(
                event=event_row,
                platform=platform_row,
                external_sale_id=external_id,
                quantity=1,
                price_per_ticket=Decimal("10"),
                sale_date=SALE_TIME,
            )

        ids = DjangoSaleStore().list_external_sale_ids(EventId(event_row.id), PlatformId(platform_row.id))

        assert ids == {"MGX-1", "MGX-2"}

    @pytest.mark.parametrize(
        "overrides",
        [
            {"quantity": 0},
            {"price_per_ticket": Decimal("-1.00")},
            {"fees": Decimal("-0.50")},
        ],
        ids=["zero-quantity", "negative-price", "negative-fees"],
    )
    def test_database_rejects_invalid_sale_rows(self, event_row, overrides):
        fields = {"quantity": 1, "price_per_ticket": Decimal("10"), "fees": Decimal("0")}
        fields.update(overrides)

        with pytest.raises(IntegrityError), transaction.atomic():
            models.Sale.objects.create(event=event_row, sale_date=SALE_TIME, **fields)

        assert DjangoSaleStore().list_sales_for_event(EventId(event_row.id)) == []

    def test_full_clean_rejects_zero_quantity(self, event_row):
        sale = models.Sale(
            event=event_row, quantity=0, price_per_ticket=Decimal("10"), sale_date=SALE_TIME
        )

        with pytest.raises(ValidationError) as excinfo:
            sale.full_clean()

        assert "quantity" in excinfo.value.message_dict


@pytest.mark.django_db
class TestDjangoProjectionStore:
    """Tests for DjangoProjectionStore."""

    def test_record_projection(self, event_row):
        projection = Projection(
            projected_total_revenue=Decimal("1000") / 3,
            projected_total_tickets=300,
            percentage_sold=12.5,
            days_until_sellout=40.0,
            confidence_level=ConfidenceLevel.LOW,
            as_of=SALE_TIME,
        )

        DjangoProjectionStore().record_projection(EventId(event_row.id), projection)

        snapshot = models.ProjectionSnapshot.objects.get(event=event_row)
        assert snapshot.projected_total == Decimal("333.33")
        assert snapshot.confidence_level == "low"
        assert snapshot.calculation_date == SALE_TIME


@pytest.mark.django_db
class TestDjangoPlatformStore:
    """Tests for DjangoPlatformStore."""

    def test_list_platforms_ordered_by_name(self, platform_row):
        models.Platform.objects.create(name="At Door")

        platforms = DjangoPlatformStore().list_platforms()

        assert [platform.name for platform in platforms] == ["At Door", "Megatix"]
        assert platforms[0].color_hex is None
        assert platforms[0].api_enabled is False
        assert platforms[1].id == PlatformId(platform_row.id)
        assert platforms[1].api_enabled is True
