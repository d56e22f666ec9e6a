"""Value objects produced by the analytics engine.

All of them are computed fresh from a set of sale records and never mutated.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class Trend(Enum):
    """Direction of recent sales compared to the lifetime daily rate."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class ConfidenceLevel(Enum):
    """How far a projection can be trusted, based on share of capacity sold."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class PlatformRevenue:
    platform_id: str | None
    platform_name: str
    color_hex: str | None
    revenue: Decimal
    fees: Decimal
    net_revenue: Decimal
    tickets_sold: int


@dataclass(frozen=True)
class TicketTypeRevenue:
    ticket_type: str
    revenue: Decimal
    tickets_sold: int
    avg_price: Decimal


@dataclass(frozen=True)
class RevenueBreakdown:
    """Gross revenue and fees, split by platform and by ticket type."""

    total_revenue: Decimal
    total_fees: Decimal
    net_revenue: Decimal
    by_platform: tuple[PlatformRevenue, ...] = ()
    by_ticket_type: tuple[TicketTypeRevenue, ...] = ()


@dataclass(frozen=True)
class DailySales:
    date: date
    tickets_sold: int
    revenue: Decimal


@dataclass(frozen=True)
class SalesVelocity:
    """Tickets-per-day rates and a day-bucketed time series."""

    total_tickets_sold: int
    daily_average: float
    weekly_average: float
    trend: Trend
    by_day: tuple[DailySales, ...] = ()


@dataclass(frozen=True)
class Projection:
    """Capacity-aware extrapolation of final ticket and revenue totals."""

    projected_total_revenue: Decimal
    projected_total_tickets: int
    percentage_sold: float | None
    days_until_sellout: float | None
    confidence_level: ConfidenceLevel
    as_of: datetime


@dataclass(frozen=True)
class EventAnalytics:
    """Revenue, velocity and projection computed from one sales snapshot."""

    revenue: RevenueBreakdown
    velocity: SalesVelocity
    projections: Projection


@dataclass(frozen=True)
class EventSummary:
    event_id: str
    event_name: str
    date: date
    venue: str | None
    revenue: Decimal
    tickets_sold: int


@dataclass(frozen=True)
class RecentSale:
    sale_id: str
    event_id: str
    event_name: str
    platform_id: str | None
    platform_name: str
    ticket_type: str | None
    quantity: int
    price_per_ticket: Decimal
    fees: Decimal
    revenue: Decimal
    sale_date: datetime


@dataclass(frozen=True)
class AccountOverview:
    """Totals across every event a user owns."""

    total_events: int
    total_revenue: Decimal
    total_tickets_sold: int
    total_fees: Decimal
    event_summaries: tuple[EventSummary, ...] = ()
    recent_sales: tuple[RecentSale, ...] = ()
