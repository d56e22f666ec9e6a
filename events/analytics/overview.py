"""Account-level summaries across a user's events."""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from events.analytics.revenue import UNKNOWN, summarize_sales
from events.domain import Event, EventId, EventSummary, RecentSale, SaleRecord


def summarize_event(event: Event, records: Sequence[SaleRecord]) -> tuple[EventSummary, Decimal]:
    """Revenue and tickets for one event, plus its fees for account totals."""
    revenue, tickets_sold, fees = summarize_sales(records)
    summary = EventSummary(
        event_id=str(event.id),
        event_name=event.name,
        date=event.date,
        venue=event.venue,
        revenue=revenue,
        tickets_sold=tickets_sold,
    )
    return summary, fees


def select_recent_sales(
    events: Iterable[Event],
    sales_by_event: Mapping[EventId, Sequence[SaleRecord]],
    limit: int,
) -> tuple[RecentSale, ...]:
    """The ``limit`` most recent sales across all events, newest first."""
    names = {event.id: event.name for event in events}
    records = [
        record
        for event_id, event_records in sales_by_event.items()
        if event_id in names
        for record in event_records
    ]
    records.sort(key=lambda record: record.sale_timestamp, reverse=True)

    return tuple(
        RecentSale(
            sale_id=str(record.id),
            event_id=str(record.event_id),
            event_name=names[record.event_id],
            platform_id=str(record.platform.id) if record.platform else None,
            platform_name=record.platform.name if record.platform else UNKNOWN,
            ticket_type=record.ticket_type,
            quantity=record.quantity,
            price_per_ticket=record.unit_price.amount,
            fees=record.fees.amount,
            revenue=record.gross_revenue,
            sale_date=record.sale_timestamp,
        )
        for record in records[:limit]
    )
