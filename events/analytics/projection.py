"""Sellout projection from capacity, velocity and revenue."""

from datetime import datetime
from decimal import Decimal

from events.domain import (
    Capacity,
    ConfidenceLevel,
    Projection,
    RevenueBreakdown,
    SalesVelocity,
)

HIGH_CONFIDENCE_PERCENT = 70
MEDIUM_CONFIDENCE_PERCENT = 30


def confidence_for(percentage_sold: float | None) -> ConfidenceLevel:
    if percentage_sold is None:
        return ConfidenceLevel.LOW
    if percentage_sold > HIGH_CONFIDENCE_PERCENT:
        return ConfidenceLevel.HIGH
    if percentage_sold >= MEDIUM_CONFIDENCE_PERCENT:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def compute_projection(
    capacity: Capacity | None,
    velocity: SalesVelocity,
    revenue: RevenueBreakdown,
    now: datetime,
) -> Projection:
    """Extrapolate final tickets and revenue for an event.

    ``velocity`` and ``revenue`` must come from the same sale records and the
    same ``now``. Without a positive capacity the projection is the current
    actuals and confidence is low.
    """
    tickets_sold = velocity.total_tickets_sold
    has_capacity = capacity is not None and capacity.value > 0

    avg_price = revenue.total_revenue / tickets_sold if tickets_sold > 0 else Decimal("0")

    if not has_capacity:
        return Projection(
            projected_total_revenue=revenue.total_revenue,
            projected_total_tickets=tickets_sold,
            percentage_sold=None,
            days_until_sellout=None,
            confidence_level=ConfidenceLevel.LOW,
            as_of=now,
        )

    total = capacity.value
    if avg_price > 0:
        projected_revenue = avg_price * total
    else:
        projected_revenue = revenue.total_revenue

    percentage_sold = tickets_sold * 100 / total
    remaining = max(0, total - tickets_sold)
    days_until_sellout = remaining / velocity.daily_average if velocity.daily_average > 0 else None

    return Projection(
        projected_total_revenue=projected_revenue,
        projected_total_tickets=total,
        percentage_sold=percentage_sold,
        days_until_sellout=days_until_sellout,
        confidence_level=confidence_for(percentage_sold),
        as_of=now,
    )
