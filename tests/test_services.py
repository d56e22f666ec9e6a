"""Unit tests for AnalyticsService and SyncService.

These test orchestration and domain error mapping with in-memory stores.
Run with: pytest tests/test_services.py -v
"""

from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from events.domain import ConfidenceLevel, EventId, PlatformId, Trend
from events.domain.errors import EventNotFoundError, InvalidEventIdError, PlatformNotFoundError
from events.platforms import PlatformCredentials, PlatformEventMapping
from events.services import AnalyticsService, SyncService


@pytest.fixture
def service(event_store, sale_store, projection_store, now) -> AnalyticsService:
    return AnalyticsService(
        event_store=event_store,
        sale_store=sale_store,
        projection_store=projection_store,
        clock=lambda: now,
    )


class TestEventLookup:
    """Tests for event resolution and error mapping."""

    def test_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidEventIdError):
            service.get_event_analytics("not-a-uuid")

    def test_missing_event_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError) as excinfo:
            service.get_revenue_breakdown(str(uuid4()))
        assert excinfo.value.code.value == "EVENT_NOT_FOUND"

    def test_event_owned_by_someone_else_is_not_found(self, service, event_store, make_event):
        event = make_event(owner_id=1)
        event_store.events[event.id] = event

        with pytest.raises(EventNotFoundError):
            service.get_sales_velocity(str(event.id), owner_id=2)

    def test_owner_can_read_event(self, service, event_store, make_event):
        event = make_event(owner_id=1)
        event_store.events[event.id] = event

        assert service.get_sales_velocity(str(event.id), owner_id=1).total_tickets_sold == 0


class TestEventAnalytics:
    """Tests for get_event_analytics."""

    def test_three_sale_scenario(
        self, service, event_store, sale_store, make_event, make_sale, platform_a, platform_b, now
    ):
        event = make_event(capacity=20)
        event_store.events[event.id] = event
        day_1 = now - timedelta(days=2)
        sale_store.sales.extend(
            [
                make_sale(2, 100, 10, "VIP", platform_a, day_1, event.id),
                make_sale(1, 50, 0, "GA", platform_b, day_1, event.id),
                make_sale(3, 80, 5, "GA", platform_a, now, event.id),
            ]
        )

        analytics = service.get_event_analytics(str(event.id))

        assert analytics.revenue.total_revenue == Decimal("490")
        assert analytics.revenue.total_fees == Decimal("15")
        assert analytics.revenue.net_revenue == Decimal("475")
        assert [(p.revenue, p.tickets_sold) for p in analytics.revenue.by_platform] == [
            (Decimal("440"), 5),
            (Decimal("50"), 1),
        ]
        assert [(d.date, d.tickets_sold, d.revenue) for d in analytics.velocity.by_day] == [
            (date(2025, 3, 13), 3, Decimal("250")),
            (date(2025, 3, 15), 3, Decimal("240")),
        ]
        assert analytics.projections.projected_total_tickets == 20
        assert analytics.projections.percentage_sold == 30
        assert analytics.projections.confidence_level is ConfidenceLevel.MEDIUM
        assert analytics.projections.days_until_sellout == pytest.approx(14 / 3)

    def test_views_share_one_instant(self, event_store, sale_store, make_event, make_sale, now):
        ticks = iter([now, now + timedelta(days=30)])
        service = AnalyticsService(event_store, sale_store, clock=lambda: next(ticks))
        event = make_event(capacity=100)
        event_store.events[event.id] = event
        sale_store.sales.append(make_sale(quantity=10, at=now - timedelta(days=1), event_id=event.id))

        analytics = service.get_event_analytics(str(event.id))

        assert analytics.projections.as_of == now
        assert analytics.velocity.daily_average == 10
        assert analytics.projections.days_until_sellout == 9

    def test_clock_read_before_sales_are_fetched(self, event_store, sale_store, make_event, now):
        calls = []

        class RecordingSaleStore(type(sale_store)):
            def list_sales_for_event(self, event_id):
                calls.append("sales")
                return super().list_sales_for_event(event_id)

        def clock():
            calls.append("clock")
            return now

        event = make_event(capacity=100)
        event_store.events[event.id] = event
        service = AnalyticsService(event_store, RecordingSaleStore(), clock=clock)

        service.get_event_analytics(str(event.id))
        service.get_sales_velocity(str(event.id))

        assert calls == ["clock", "sales", "clock", "sales"]

    def test_empty_event_without_capacity(self, service, event_store, make_event):
        event = make_event(capacity=None)
        event_store.events[event.id] = event

        analytics = service.get_event_analytics(str(event.id))

        assert analytics.revenue.total_revenue == 0
        assert analytics.velocity.daily_average == 0
        assert analytics.velocity.trend is Trend.STABLE
        assert analytics.projections.projected_total_tickets == 0
        assert analytics.projections.confidence_level is ConfidenceLevel.LOW

    def test_records_projection(self, service, event_store, projection_store, make_event):
        event = make_event(capacity=100)
        event_store.events[event.id] = event

        projection = service.get_projection(str(event.id))

        assert projection_store.recorded == [(event.id, projection)]

    def test_works_without_projection_store(self, event_store, sale_store, make_event, now):
        service = AnalyticsService(event_store, sale_store, clock=lambda: now)
        event = make_event()
        event_store.events[event.id] = event

        assert service.get_projection(str(event.id)).as_of == now


class TestAccountOverview:
    """Tests for get_account_overview."""

    def test_no_events(self, service):
        overview = service.get_account_overview(owner_id=1)

        assert overview.total_events == 0
        assert overview.total_revenue == 0
        assert overview.event_summaries == ()
        assert overview.recent_sales == ()

    def test_totals_and_ordering(self, service, event_store, sale_store, make_event, make_sale, now):
        spring = make_event(name="Spring", on=date(2025, 4, 1))
        summer = make_event(name="Summer", on=date(2025, 7, 1))
        empty = make_event(name="Winter", on=date(2025, 1, 10))
        foreign = make_event(owner_id=99, name="Not mine")
        for event in (spring, summer, empty, foreign):
            event_store.events[event.id] = event
        sale_store.sales.extend(
            [
                make_sale(quantity=2, price=100, fees=10, event_id=spring.id, at=now - timedelta(days=3)),
                make_sale(quantity=1, price=60, fees=4, event_id=summer.id, at=now - timedelta(days=1)),
                make_sale(quantity=5, price=10, event_id=foreign.id, at=now),
            ]
        )

        overview = service.get_account_overview(owner_id=1)

        assert overview.total_events == 3
        assert overview.total_revenue == Decimal("260")
        assert overview.total_tickets_sold == 3
        assert overview.total_fees == Decimal("14")
        assert [s.event_name for s in overview.event_summaries] == ["Summer", "Spring", "Winter"]
        assert overview.event_summaries[2].revenue == 0
        assert [s.event_name for s in overview.recent_sales] == ["Summer", "Spring"]

    def test_recent_sales_capped_and_newest_first(
        self, service, event_store, sale_store, make_event, make_sale, platform_a, now
    ):
        event = make_event()
        event_store.events[event.id] = event
        sale_store.sales.extend(
            make_sale(event_id=event.id, at=now - timedelta(hours=i), platform=platform_a if i % 2 else None)
            for i in range(15)
        )

        recent = service.get_account_overview(owner_id=1).recent_sales

        assert len(recent) == 10
        assert [sale.sale_date for sale in recent] == sorted(
            (sale.sale_date for sale in recent), reverse=True
        )
        assert recent[0].sale_date == now
        assert recent[0].platform_name == "Unknown"
        assert recent[0].platform_id is None
        assert recent[1].platform_name == "Megatix"
        assert recent[0].event_name == event.name

    def test_recent_sales_limit_is_configurable(self, event_store, sale_store, make_event, make_sale, now):
        service = AnalyticsService(event_store, sale_store, clock=lambda: now, recent_sales_limit=3)
        event = make_event()
        event_store.events[event.id] = event
        sale_store.sales.extend(make_sale(event_id=event.id, at=now - timedelta(hours=i)) for i in range(5))

        assert len(service.get_account_overview(owner_id=1).recent_sales) == 3

    def test_result_does_not_depend_on_worker_count(
        self, event_store, sale_store, make_event, make_sale, now
    ):
        for i in range(6):
            event = make_event(name=f"Show {i}", on=date(2025, 5, i + 1))
            event_store.events[event.id] = event
            sale_store.sales.append(make_sale(quantity=i + 1, price="12.50", event_id=event.id))

        serial = AnalyticsService(event_store, sale_store, clock=lambda: now, max_workers=1)
        parallel = AnalyticsService(event_store, sale_store, clock=lambda: now, max_workers=6)

        assert serial.get_account_overview(1) == parallel.get_account_overview(1)


class TestSyncService:
    """Tests for SyncService."""

    def test_unknown_platform_raises(self, sale_store):
        mapping = PlatformEventMapping(PlatformId(uuid4()), "ext-1", EventId(uuid4()))
        with pytest.raises(PlatformNotFoundError):
            SyncService(sale_store).sync_event("Eventbrite", mapping, PlatformCredentials())

    def test_already_imported_sales_are_skipped(self, sale_store):
        mapping = PlatformEventMapping(PlatformId(uuid4()), "ext-1", EventId(uuid4()))
        sale_store.external_ids[(mapping.event_id, mapping.platform_id)] = {"MGX-ext-1-1000"}

        result = SyncService(sale_store).sync_event("Megatix", mapping, PlatformCredentials())

        assert result.success
        assert result.sales_updated == 1
        assert result.sales_imported == 9
        assert "MGX-ext-1-1000" not in {record.external_id for record in result.records}
