"""Sales velocity: day-bucketed sales and a recent-trend signal."""

import math
from collections.abc import Sequence
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from events.domain import DailySales, SaleRecord, SalesVelocity, Trend

ONE_DAY = timedelta(days=1)
RECENT_WINDOW_DAYS = 7
INCREASING_FACTOR = 1.1
DECREASING_FACTOR = 0.9


def utc_date(timestamp: datetime) -> date:
    """Calendar date of ``timestamp`` in UTC. Naive timestamps are taken as UTC."""
    if timestamp.tzinfo is None:
        return timestamp.date()
    return timestamp.astimezone(timezone.utc).date()


def _as_utc(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def classify_trend(daily_average: float, recent_average: float) -> Trend:
    """Compare the recent daily rate against the lifetime daily rate.

    A recent rate more than 10% above the lifetime rate is increasing, more
    than 10% below is decreasing. With no lifetime rate the trend is stable.
    """
    if daily_average <= 0:
        return Trend.STABLE
    if recent_average > daily_average * INCREASING_FACTOR:
        return Trend.INCREASING
    if recent_average < daily_average * DECREASING_FACTOR:
        return Trend.DECREASING
    return Trend.STABLE


def days_since_first_sale(records: Sequence[SaleRecord], now: datetime) -> int:
    if not records:
        return 0
    first_sale = min(_as_utc(record.sale_timestamp) for record in records)
    return max(1, math.ceil((_as_utc(now) - first_sale) / ONE_DAY))


def compute_sales_velocity(records: Sequence[SaleRecord], now: datetime) -> SalesVelocity:
    """Bucket sales by UTC day and derive daily, weekly and recent rates.

    Only days with at least one sale appear in ``by_day``. The recent rate is
    the last seven days' tickets divided by seven, whatever the event's age.
    """
    now = _as_utc(now)
    buckets: dict[date, list] = {}
    total_tickets_sold = 0
    recent_tickets = 0
    recent_start = now - RECENT_WINDOW_DAYS * ONE_DAY

    for record in records:
        total_tickets_sold += record.quantity
        bucket = buckets.setdefault(utc_date(record.sale_timestamp), [0, Decimal("0")])
        bucket[0] += record.quantity
        bucket[1] += record.gross_revenue
        if _as_utc(record.sale_timestamp) >= recent_start:
            recent_tickets += record.quantity

    elapsed_days = days_since_first_sale(records, now)
    daily_average = total_tickets_sold / elapsed_days if elapsed_days > 0 else 0.0
    recent_average = recent_tickets / RECENT_WINDOW_DAYS

    by_day = tuple(
        DailySales(date=day, tickets_sold=tickets, revenue=revenue)
        for day, (tickets, revenue) in sorted(buckets.items())
    )
    return SalesVelocity(
        total_tickets_sold=total_tickets_sold,
        daily_average=daily_average,
        weekly_average=daily_average * 7,
        trend=classify_trend(daily_average, recent_average),
        by_day=by_day,
    )
