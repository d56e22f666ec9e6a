"""Analytics service - orchestrates the analytics engine for events and accounts.

Services:
- Depend only on interfaces (stores)
- Resolve and authorize events, raising domain errors
- Capture a single "now" per request so every derived view agrees
- Return domain value objects
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from decimal import Decimal

from django.utils import timezone

from events.analytics import (
    compute_projection,
    compute_revenue_breakdown,
    compute_sales_velocity,
    select_recent_sales,
    summarize_event,
)
from events.domain import (
    AccountOverview,
    Event,
    EventAnalytics,
    EventId,
    Projection,
    RevenueBreakdown,
    SalesVelocity,
)
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.stores.interfaces import EventStore, ProjectionStore, SaleStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4
DEFAULT_RECENT_SALES_LIMIT = 10


class AnalyticsService:
    """Service for per-event analytics and account overviews."""

    def __init__(
        self,
        event_store: EventStore,
        sale_store: SaleStore,
        projection_store: ProjectionStore | None = None,
        clock: Callable[[], datetime] = timezone.now,
        max_workers: int = DEFAULT_MAX_WORKERS,
        recent_sales_limit: int = DEFAULT_RECENT_SALES_LIMIT,
    ) -> None:
        self._events = event_store
        self._sales = sale_store
        self._projections = projection_store
        self._clock = clock
        self._max_workers = max(1, max_workers)
        self._recent_sales_limit = recent_sales_limit

    def get_event_analytics(self, event_id: str, owner_id: int | None = None) -> EventAnalytics:
        """Return revenue, velocity and projection for one event.

        All three are computed from the same sale records and the same
        instant.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist or is not owned by owner_id.
        """
        now = self._clock()
        event = self._resolve_event(event_id, owner_id)
        records = self._sales.list_sales_for_event(event.id)
        logger.debug("Computing analytics for event %s over %d sales", event.id, len(records))

        revenue = compute_revenue_breakdown(records)
        velocity = compute_sales_velocity(records, now)
        projection = compute_projection(event.total_capacity, velocity, revenue, now)
        self._record_projection(event, projection)
        return EventAnalytics(revenue=revenue, velocity=velocity, projections=projection)

    def get_revenue_breakdown(
        self, event_id: str, owner_id: int | None = None
    ) -> RevenueBreakdown:
        """Return the revenue breakdown for one event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist or is not owned by owner_id.
        """
        event = self._resolve_event(event_id, owner_id)
        return compute_revenue_breakdown(self._sales.list_sales_for_event(event.id))

    def get_sales_velocity(self, event_id: str, owner_id: int | None = None) -> SalesVelocity:
        """Return the sales velocity for one event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist or is not owned by owner_id.
        """
        now = self._clock()
        event = self._resolve_event(event_id, owner_id)
        return compute_sales_velocity(self._sales.list_sales_for_event(event.id), now)

    def get_projection(self, event_id: str, owner_id: int | None = None) -> Projection:
        """Return the sellout projection for one event and record it.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist or is not owned by owner_id.
        """
        return self.get_event_analytics(event_id, owner_id).projections

    def get_account_overview(self, owner_id: int) -> AccountOverview:
        """Return totals, per-event summaries and recent sales for a user.

        Sales are fetched once on the calling thread; the per-event folds run
        on a thread pool and are merged by summation.
        """
        events = self._events.list_events_for_owner(owner_id)
        sales_by_event = self._sales.list_sales_for_events(event.id for event in events)
        logger.debug("Computing account overview for user %s over %d events", owner_id, len(events))

        summaries = []
        if events:
            workers = min(self._max_workers, len(events))
            with ThreadPoolExecutor(max_workers=workers) as pool:
                summaries = list(
                    pool.map(
                        lambda event: summarize_event(event, sales_by_event.get(event.id, [])),
                        events,
                    )
                )

        total_revenue = sum((summary.revenue for summary, _ in summaries), Decimal("0"))
        total_tickets = sum(summary.tickets_sold for summary, _ in summaries)
        total_fees = sum((fees for _, fees in summaries), Decimal("0"))

        event_summaries = sorted(
            (summary for summary, _ in summaries),
            key=lambda summary: summary.date,
            reverse=True,
        )
        return AccountOverview(
            total_events=len(events),
            total_revenue=total_revenue,
            total_tickets_sold=total_tickets,
            total_fees=total_fees,
            event_summaries=tuple(event_summaries),
            recent_sales=select_recent_sales(events, sales_by_event, self._recent_sales_limit),
        )

    def _resolve_event(self, event_id: str, owner_id: int | None) -> Event:
        try:
            parsed = EventId.from_string(event_id)
        except (TypeError, ValueError) as exc:
            raise InvalidEventIdError() from exc

        event = self._events.get_event(parsed)
        if event is None or (owner_id is not None and event.owner_id != owner_id):
            logger.warning("Event %s not found for user %s", event_id, owner_id)
            raise EventNotFoundError(event_id)
        return event

    def _record_projection(self, event: Event, projection: Projection) -> None:
        if self._projections is None:
            return
        self._projections.record_projection(event.id, projection)
        logger.info(
            "Recorded projection for event %s: %s (%s confidence)",
            event.id,
            projection.projected_total_revenue,
            projection.confidence_level.value,
        )
