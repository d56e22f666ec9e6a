"""Django ORM implementations of the stores.

Each method queries the ORM and converts rows to domain models.
"""

from collections.abc import Iterable
from decimal import Decimal

from events import models
from events.domain import (
    Capacity,
    Event,
    EventId,
    Money,
    Platform,
    PlatformId,
    Projection,
    SaleId,
    SaleRecord,
)
from events.stores.interfaces import EventStore, PlatformStore, ProjectionStore, SaleStore

CENTS = Decimal("0.01")


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        owner_id=row.owner_id,
        name=row.name,
        date=row.date,
        venue=row.venue or None,
        total_capacity=Capacity(row.total_capacity) if row.total_capacity is not None else None,
    )


def _to_platform(row: models.Platform | None) -> Platform | None:
    if row is None:
        return None
    return Platform(
        id=PlatformId(row.id),
        name=row.name,
        color_hex=row.color_hex or None,
        api_enabled=row.api_enabled,
    )


def _to_sale(row: models.Sale) -> SaleRecord:
    return SaleRecord(
        id=SaleId(row.id),
        event_id=EventId(row.event_id),
        quantity=row.quantity,
        unit_price=Money(row.price_per_ticket),
        fees=Money(row.fees if row.fees is not None else Decimal("0")),
        ticket_type=row.ticket_type,
        platform=_to_platform(row.platform),
        sale_timestamp=row.sale_date,
    )


class DjangoEventStore(EventStore):
    """Event store backed by the Django ORM."""

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row is not None else None

    def list_events_for_owner(self, owner_id: int) -> list[Event]:
        return [_to_event(row) for row in models.Event.objects.filter(owner_id=owner_id)]


class DjangoPlatformStore(PlatformStore):
    """Platform store backed by the Django ORM."""

    def list_platforms(self) -> list[Platform]:
        return [_to_platform(row) for row in models.Platform.objects.order_by("name")]


class DjangoSaleStore(SaleStore):
    """Sale store backed by the Django ORM."""

    def list_sales_for_event(self, event_id: EventId) -> list[SaleRecord]:
        rows = (
            models.Sale.objects.filter(event_id=event_id.value)
            .select_related("platform")
            .order_by("sale_date")
        )
        return [_to_sale(row) for row in rows]

    def list_sales_for_events(
        self, event_ids: Iterable[EventId]
    ) -> dict[EventId, list[SaleRecord]]:
        grouped: dict[EventId, list[SaleRecord]] = {event_id: [] for event_id in event_ids}
        if not grouped:
            return grouped
        rows = (
            models.Sale.objects.filter(event_id__in=[event_id.value for event_id in grouped])
            .select_related("platform")
            .order_by("sale_date")
        )
        for row in rows:
            sale = _to_sale(row)
            grouped[sale.event_id].append(sale)
        return grouped

    def list_external_sale_ids(self, event_id: EventId, platform_id: PlatformId) -> set[str]:
        return set(
            models.Sale.objects.filter(
                event_id=event_id.value,
                platform_id=platform_id.value,
                external_sale_id__isnull=False,
            ).values_list("external_sale_id", flat=True)
        )


class DjangoProjectionStore(ProjectionStore):
    """Appends computed projections to the projection history table."""

    def record_projection(self, event_id: EventId, projection: Projection) -> None:
        models.ProjectionSnapshot.objects.create(
            event_id=event_id.value,
            projected_total=projection.projected_total_revenue.quantize(CENTS),
            confidence_level=projection.confidence_level.value,
            calculation_date=projection.as_of,
        )
