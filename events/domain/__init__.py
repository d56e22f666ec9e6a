from events.domain.analytics import (
    AccountOverview,
    ConfidenceLevel,
    DailySales,
    EventAnalytics,
    EventSummary,
    PlatformRevenue,
    Projection,
    RecentSale,
    RevenueBreakdown,
    SalesVelocity,
    TicketTypeRevenue,
    Trend,
)
from events.domain.models import Event, Platform, SaleRecord
from events.domain.value_objects import Capacity, EventId, Money, PlatformId, SaleId

__all__ = [
    "Event",
    "Platform",
    "SaleRecord",
    "EventId",
    "SaleId",
    "PlatformId",
    "Money",
    "Capacity",
    "RevenueBreakdown",
    "PlatformRevenue",
    "TicketTypeRevenue",
    "SalesVelocity",
    "DailySales",
    "Trend",
    "Projection",
    "ConfidenceLevel",
    "EventAnalytics",
    "AccountOverview",
    "EventSummary",
    "RecentSale",
]
