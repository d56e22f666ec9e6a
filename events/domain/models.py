"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from events.domain.value_objects import Capacity, EventId, Money, PlatformId, SaleId


@dataclass(frozen=True)
class Platform:
    """A ticketing platform a sale was made through."""

    id: PlatformId
    name: str
    color_hex: str | None = None
    api_enabled: bool = False


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    owner_id: int | None
    name: str
    date: date
    venue: str | None = None
    total_capacity: Capacity | None = None


@dataclass(frozen=True)
class SaleRecord:
    """One ticket sale transaction against an event.

    Fees are tracked next to the gross amount and never folded into it.
    """

    id: SaleId
    event_id: EventId
    quantity: int
    unit_price: Money
    sale_timestamp: datetime
    fees: Money = field(default_factory=Money.zero)
    ticket_type: str | None = None
    platform: Platform | None = None

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError("Sale quantity must be positive")

    @property
    def gross_revenue(self) -> Decimal:
        return self.quantity * self.unit_price.amount

    @property
    def net_revenue(self) -> Decimal:
        return self.gross_revenue - self.fees.amount
