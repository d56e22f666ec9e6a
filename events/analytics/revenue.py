"""Revenue aggregation over sale records.

Gross revenue is ``quantity * unit_price``; fees are summed separately and
only subtracted when net figures are derived.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from events.domain import (
    Platform,
    PlatformRevenue,
    RevenueBreakdown,
    SaleRecord,
    TicketTypeRevenue,
)

UNKNOWN = "Unknown"
_UNKNOWN_PLATFORM_KEY = "__unknown__"

ZERO = Decimal("0")


@dataclass
class _PlatformTotals:
    platform_id: str | None
    platform_name: str
    color_hex: str | None
    revenue: Decimal = ZERO
    fees: Decimal = ZERO
    tickets_sold: int = 0


@dataclass
class _TicketTypeTotals:
    revenue: Decimal = ZERO
    tickets_sold: int = 0


def normalize_ticket_type(ticket_type: str | None) -> str:
    """Return the ticket type as given, or ``"Unknown"`` when absent or blank."""
    if ticket_type is None or not ticket_type.strip():
        return UNKNOWN
    return ticket_type


def _platform_key(platform: Platform | None) -> str:
    if platform is None:
        return _UNKNOWN_PLATFORM_KEY
    return str(platform.id)


def _new_platform_totals(platform: Platform | None) -> _PlatformTotals:
    if platform is None:
        return _PlatformTotals(platform_id=None, platform_name=UNKNOWN, color_hex=None)
    return _PlatformTotals(
        platform_id=str(platform.id),
        platform_name=platform.name,
        color_hex=platform.color_hex,
    )


def compute_revenue_breakdown(records: Iterable[SaleRecord]) -> RevenueBreakdown:
    """Fold sale records into totals and per-platform / per-ticket-type groups.

    Both group lists are sorted by revenue, highest first. The sort is stable,
    so groups with equal revenue keep the order they were first seen in.
    """
    total_revenue = ZERO
    total_fees = ZERO
    by_platform: dict[str, _PlatformTotals] = {}
    by_ticket_type: dict[str, _TicketTypeTotals] = {}

    for record in records:
        revenue = record.gross_revenue
        fees = record.fees.amount
        total_revenue += revenue
        total_fees += fees

        key = _platform_key(record.platform)
        platform_totals = by_platform.get(key)
        if platform_totals is None:
            platform_totals = by_platform[key] = _new_platform_totals(record.platform)
        platform_totals.revenue += revenue
        platform_totals.fees += fees
        platform_totals.tickets_sold += record.quantity

        ticket_type = normalize_ticket_type(record.ticket_type)
        type_totals = by_ticket_type.setdefault(ticket_type, _TicketTypeTotals())
        type_totals.revenue += revenue
        type_totals.tickets_sold += record.quantity

    platforms = [
        PlatformRevenue(
            platform_id=totals.platform_id,
            platform_name=totals.platform_name,
            color_hex=totals.color_hex,
            revenue=totals.revenue,
            fees=totals.fees,
            # Derived after accumulation, not summed per record.
            net_revenue=totals.revenue - totals.fees,
            tickets_sold=totals.tickets_sold,
        )
        for totals in by_platform.values()
    ]
    ticket_types = [
        TicketTypeRevenue(
            ticket_type=ticket_type,
            revenue=totals.revenue,
            tickets_sold=totals.tickets_sold,
            avg_price=totals.revenue / totals.tickets_sold if totals.tickets_sold > 0 else ZERO,
        )
        for ticket_type, totals in by_ticket_type.items()
    ]
    platforms.sort(key=lambda group: group.revenue, reverse=True)
    ticket_types.sort(key=lambda group: group.revenue, reverse=True)

    return RevenueBreakdown(
        total_revenue=total_revenue,
        total_fees=total_fees,
        net_revenue=total_revenue - total_fees,
        by_platform=tuple(platforms),
        by_ticket_type=tuple(ticket_types),
    )


def summarize_sales(records: Iterable[SaleRecord]) -> tuple[Decimal, int, Decimal]:
    """Return ``(revenue, tickets_sold, fees)`` without any breakdown."""
    revenue = ZERO
    tickets_sold = 0
    fees = ZERO
    for record in records:
        revenue += record.gross_revenue
        tickets_sold += record.quantity
        fees += record.fees.amount
    return revenue, tickets_sold, fees
