"""Pytest configuration and shared fixtures."""

from collections.abc import Iterable
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

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
from events.stores.interfaces import EventStore, ProjectionStore, SaleStore

NOW = datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc)


class InMemoryEventStore(EventStore):
    def __init__(self, events: Iterable[Event] = ()) -> None:
        self.events = {event.id: event for event in events}

    def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def list_events_for_owner(self, owner_id: int) -> list[Event]:
        return [event for event in self.events.values() if event.owner_id == owner_id]


class InMemorySaleStore(SaleStore):
    def __init__(self, sales: Iterable[SaleRecord] = ()) -> None:
        self.sales = list(sales)
        self.external_ids: dict[tuple[EventId, PlatformId], set[str]] = {}

    def list_sales_for_event(self, event_id: EventId) -> list[SaleRecord]:
        return sorted(
            (sale for sale in self.sales if sale.event_id == event_id),
            key=lambda sale: sale.sale_timestamp,
        )

    def list_sales_for_events(
        self, event_ids: Iterable[EventId]
    ) -> dict[EventId, list[SaleRecord]]:
        return {event_id: self.list_sales_for_event(event_id) for event_id in event_ids}

    def list_external_sale_ids(self, event_id: EventId, platform_id: PlatformId) -> set[str]:
        return set(self.external_ids.get((event_id, platform_id), set()))


class InMemoryProjectionStore(ProjectionStore):
    def __init__(self) -> None:
        self.recorded: list[tuple[EventId, Projection]] = []

    def record_projection(self, event_id: EventId, projection: Projection) -> None:
        self.recorded.append((event_id, projection))


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def platform_a() -> Platform:
    return Platform(id=PlatformId(uuid4()), name="Megatix", color_hex="#ff5500")


@pytest.fixture
def platform_b() -> Platform:
    return Platform(id=PlatformId(uuid4()), name="Ticketmelon", color_hex="#22aa44")


@pytest.fixture
def make_event():
    def _make_event(
        owner_id: int | None = 1,
        name: str = "Warehouse Night",
        on: date = date(2025, 4, 1),
        venue: str | None = "Dock 7",
        capacity: int | None = None,
    ) -> Event:
        return Event(
            id=EventId(uuid4()),
            owner_id=owner_id,
            name=name,
            date=on,
            venue=venue,
            total_capacity=Capacity(capacity) if capacity is not None else None,
        )

    return _make_event


@pytest.fixture
def make_sale():
    default_event = EventId(uuid4())

    def _make_sale(
        quantity: int = 1,
        price: str | int = "100",
        fees: str | int = "0",
        ticket_type: str | None = "GA",
        platform: Platform | None = None,
        at: datetime = NOW,
        event_id: EventId | None = None,
    ) -> SaleRecord:
        return SaleRecord(
            id=SaleId(uuid4()),
            event_id=event_id or default_event,
            quantity=quantity,
            unit_price=Money(Decimal(price)),
            fees=Money(Decimal(fees)),
            ticket_type=ticket_type,
            platform=platform,
            sale_timestamp=at,
        )

    return _make_sale


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def sale_store() -> InMemorySaleStore:
    return InMemorySaleStore()


@pytest.fixture
def projection_store() -> InMemoryProjectionStore:
    return InMemoryProjectionStore()
