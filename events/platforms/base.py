"""Capability interface for external ticketing platforms.

An adapter knows how to authenticate against one platform and fetch its sales
for an event. ``sync`` is shared: authenticate, fetch, drop records that were
already imported.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import NAMESPACE_URL, uuid5

from django.utils import timezone

from events.domain import EventId, Money, Platform, PlatformId, SaleId, SaleRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlatformSaleRecord:
    """A sale as reported by an external platform."""

    external_id: str
    ticket_type: str
    quantity: int
    price_per_ticket: Decimal
    fees: Decimal
    sale_date: datetime
    buyer_email: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PlatformEventMapping:
    """Links one of our events to the platform's own event ID."""

    platform_id: PlatformId
    external_event_id: str
    event_id: EventId


@dataclass(frozen=True)
class PlatformCredentials:
    api_key: str | None = None
    api_secret: str | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True)
class SyncError:
    message: str
    record: Any = None


@dataclass(frozen=True)
class SyncResult:
    success: bool
    sales_imported: int
    sales_updated: int
    synced_at: datetime
    errors: tuple[SyncError, ...] = ()
    records: tuple[PlatformSaleRecord, ...] = ()


class PlatformAdapter(ABC):
    """Interface implemented once per ticketing platform."""

    name: str
    slug: str
    supports_api: bool

    @abstractmethod
    def authenticate(self, credentials: PlatformCredentials) -> bool:
        ...

    @abstractmethod
    def fetch_sales(
        self, mapping: PlatformEventMapping, since: datetime | None = None
    ) -> list[PlatformSaleRecord]:
        """Return the platform's sales for an event, optionally only after ``since``."""
        ...

    def validate_credentials(self, credentials: PlatformCredentials) -> bool:
        """Check credentials without syncing. Adapter errors count as invalid."""
        try:
            return self.authenticate(credentials)
        except Exception:
            logger.warning("Credential validation failed for %s", self.slug, exc_info=True)
            return False

    def sync(
        self,
        mapping: PlatformEventMapping,
        credentials: PlatformCredentials,
        known_external_ids: Iterable[str] = (),
    ) -> SyncResult:
        """Authenticate, fetch and deduplicate sales for one event.

        Records whose external ID is in ``known_external_ids`` count as
        updated; the rest are returned as new imports.
        """
        synced_at = timezone.now()
        try:
            if not self.authenticate(credentials):
                return SyncResult(
                    success=False,
                    sales_imported=0,
                    sales_updated=0,
                    synced_at=synced_at,
                    errors=(SyncError("Authentication failed"),),
                )
            records = self.fetch_sales(mapping)
        except Exception as exc:
            logger.exception("Sync failed for %s event %s", self.slug, mapping.event_id)
            return SyncResult(
                success=False,
                sales_imported=0,
                sales_updated=0,
                synced_at=synced_at,
                errors=(SyncError(str(exc) or "Unknown error during sync"),),
            )

        new_records = self.deduplicate_sales(records, known_external_ids)
        logger.info(
            "Synced %s event %s: %d new, %d already imported",
            self.slug,
            mapping.event_id,
            len(new_records),
            len(records) - len(new_records),
        )
        return SyncResult(
            success=True,
            sales_imported=len(new_records),
            sales_updated=len(records) - len(new_records),
            synced_at=synced_at,
            records=tuple(new_records),
        )

    @staticmethod
    def deduplicate_sales(
        records: Iterable[PlatformSaleRecord], known_external_ids: Iterable[str]
    ) -> list[PlatformSaleRecord]:
        known = set(known_external_ids)
        return [record for record in records if record.external_id not in known]

    def to_sale_record(
        self, record: PlatformSaleRecord, event_id: EventId, platform: Platform
    ) -> SaleRecord:
        """Normalize a platform record into a domain sale record.

        The sale ID is derived from the platform and external ID, so the same
        external sale always maps to the same record.
        """
        return SaleRecord(
            id=SaleId(uuid5(NAMESPACE_URL, f"{platform.id}/{record.external_id}")),
            event_id=event_id,
            quantity=record.quantity,
            unit_price=Money(record.price_per_ticket),
            fees=Money(record.fees),
            ticket_type=record.ticket_type,
            platform=platform,
            sale_timestamp=record.sale_date,
        )
