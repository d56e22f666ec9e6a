"""Platform sync service - pulls sales from a platform adapter for one event."""

from events.domain.errors import PlatformNotFoundError
from events.platforms import (
    PlatformCredentials,
    PlatformEventMapping,
    SyncResult,
    get_adapter,
)
from events.stores.interfaces import SaleStore


class SyncService:
    """Runs an adapter sync, skipping sales that were already imported."""

    def __init__(self, sale_store: SaleStore) -> None:
        self._sales = sale_store

    def sync_event(
        self,
        platform_slug: str,
        mapping: PlatformEventMapping,
        credentials: PlatformCredentials,
    ) -> SyncResult:
        """Sync one event from one platform.

        Raises:
            PlatformNotFoundError: If no adapter is registered for platform_slug.
        """
        adapter = get_adapter(platform_slug)
        if adapter is None:
            raise PlatformNotFoundError(platform_slug)
        known = self._sales.list_external_sale_ids(mapping.event_id, mapping.platform_id)
        return adapter.sync(mapping, credentials, known_external_ids=known)
