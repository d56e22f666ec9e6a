"""Stand-in adapters that generate deterministic sales instead of calling a platform.

Each platform has its own ticket catalogue, pricing and cadence. Records are
spread over the last 30 days and filtered by ``since``.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from django.utils import timezone

from events.platforms.base import (
    PlatformAdapter,
    PlatformCredentials,
    PlatformEventMapping,
    PlatformSaleRecord,
)

LOOKBACK = timedelta(days=30)


class SyntheticPlatformAdapter(PlatformAdapter):
    """Generates ``record_count`` sales cycling through ``catalogue``.

    Subclasses set the catalogue as ``{ticket_type: (price, fees)}``, the
    spacing between sales in days, and how quantities cycle.
    """

    id_prefix: str
    catalogue: dict[str, tuple[Decimal, Decimal]]
    record_count: int
    days_between_sales: float
    quantity_cycle: int = 1
    base_sequence: int = 1000

    def authenticate(self, credentials: PlatformCredentials) -> bool:
        return True

    def fetch_sales(
        self, mapping: PlatformEventMapping, since: datetime | None = None
    ) -> list[PlatformSaleRecord]:
        now = timezone.now()
        cutoff = since or now - LOOKBACK
        ticket_types = list(self.catalogue)

        records = []
        for i in range(self.record_count):
            ticket_type = ticket_types[i % len(ticket_types)]
            price, fees = self.catalogue[ticket_type]
            days_ago = (i * self.days_between_sales) % LOOKBACK.days
            sale_date = now - timedelta(days=days_ago)
            if sale_date < cutoff:
                continue
            sequence = self.base_sequence + i
            records.append(
                PlatformSaleRecord(
                    external_id=f"{self.id_prefix}-{mapping.external_event_id}-{sequence}",
                    ticket_type=ticket_type,
                    quantity=1 + i % self.quantity_cycle,
                    price_per_ticket=price,
                    fees=fees,
                    sale_date=sale_date,
                    buyer_email=self.buyer_email(i),
                    metadata=self.metadata(i),
                )
            )
        return records

    def buyer_email(self, index: int) -> str | None:
        return None

    def metadata(self, index: int) -> dict:
        return {}


class MegatixAdapter(SyntheticPlatformAdapter):
    name = "Megatix"
    slug = "Megatix"
    supports_api = True
    id_prefix = "MGX"
    catalogue = {
        "Standard": (Decimal("800"), Decimal("80")),
        "VIP": (Decimal("2500"), Decimal("200")),
        "Early Bird": (Decimal("500"), Decimal("50")),
    }
    record_count = 10
    days_between_sales = 3
    quantity_cycle = 3
    base_sequence = 1000

    def buyer_email(self, index: int) -> str | None:
        return f"buyer{index}@example.com"

    def metadata(self, index: int) -> dict:
        return {
            "paymentMethod": "credit_card" if index % 2 == 0 else "promptpay",
            "confirmationCode": f"MGX-{self.base_sequence + index}",
        }


class TicketmelonAdapter(SyntheticPlatformAdapter):
    name = "Ticketmelon"
    slug = "Ticketmelon"
    supports_api = True
    id_prefix = "TM"
    catalogue = {
        "General Admission": (Decimal("1200"), Decimal("120")),
        "Premium": (Decimal("2200"), Decimal("220")),
        "Meet & Greet": (Decimal("3000"), Decimal("300")),
    }
    record_count = 12
    days_between_sales = 2.5
    quantity_cycle = 4
    base_sequence = 2000

    def buyer_email(self, index: int) -> str | None:
        return f"customer{index}@email.com"

    def metadata(self, index: int) -> dict:
        methods = ("bank_transfer", "credit_card", "truemoney")
        return {
            "paymentMethod": methods[index % 3],
            "orderNumber": f"TM-ORD-{self.base_sequence + index}",
        }


class ResidentAdvisorAdapter(SyntheticPlatformAdapter):
    name = "Resident Advisor"
    slug = "Resident Advisor"
    supports_api = True
    id_prefix = "RA"
    catalogue = {
        "First Release": (Decimal("25"), Decimal("3")),
        "Second Release": (Decimal("40"), Decimal("5")),
        "Door": (Decimal("60"), Decimal("8")),
    }
    record_count = 15
    days_between_sales = 2
    quantity_cycle = 2
    base_sequence = 3000

    def buyer_email(self, index: int) -> str | None:
        return f"attendee{index}@domain.com"

    def metadata(self, index: int) -> dict:
        return {
            "paymentMethod": "stripe",
            "ticketCode": f"RA-TKT-{self.base_sequence + index}",
            "region": "international",
        }


class AtDoorAdapter(SyntheticPlatformAdapter):
    """Walk-in and guest-list entries recorded by staff; there is no remote API."""

    name = "At Door"
    slug = "At-Door"
    supports_api = False
    id_prefix = "DOOR"
    catalogue = {
        "Walk-in": (Decimal("1000"), Decimal("0")),
        "Guest List": (Decimal("0"), Decimal("0")),
    }
    record_count = 8
    days_between_sales = 3.5
    base_sequence = 4000

    def metadata(self, index: int) -> dict:
        guest_list = index % 2 == 1
        return {
            "entryMethod": "manual",
            "staffMember": f"staff{index % 3 + 1}",
            "notes": "Promoter list" if guest_list else "Cash payment",
        }
