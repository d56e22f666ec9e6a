"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from events.domain import Event, EventId, Platform, PlatformId, Projection, SaleRecord


class EventStore(ABC):
    """Interface for event lookups."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def list_events_for_owner(self, owner_id: int) -> list[Event]:
        """Return all events owned by a user."""
        ...


class PlatformStore(ABC):
    """Interface for the platforms sales can be attributed to."""

    @abstractmethod
    def list_platforms(self) -> list[Platform]:
        """Return every known platform, ordered by name."""
        ...


class SaleStore(ABC):
    """Interface for reading sale records."""

    @abstractmethod
    def list_sales_for_event(self, event_id: EventId) -> list[SaleRecord]:
        """Return every sale for an event, ordered by sale timestamp ascending."""
        ...

    @abstractmethod
    def list_sales_for_events(
        self, event_ids: Iterable[EventId]
    ) -> dict[EventId, list[SaleRecord]]:
        """Return sales grouped by event. Events without sales map to an empty list."""
        ...

    @abstractmethod
    def list_external_sale_ids(self, event_id: EventId, platform_id: PlatformId) -> set[str]:
        """Return external sale IDs already imported for an event from a platform."""
        ...


class ProjectionStore(ABC):
    """Interface for keeping a history of computed projections."""

    @abstractmethod
    def record_projection(self, event_id: EventId, projection: Projection) -> None:
        ...
