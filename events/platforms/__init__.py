"""Ticketing platform adapters, registered by slug."""

from events.platforms.base import (
    PlatformAdapter,
    PlatformCredentials,
    PlatformEventMapping,
    PlatformSaleRecord,
    SyncError,
    SyncResult,
)
from events.platforms.synthetic import (
    AtDoorAdapter,
    MegatixAdapter,
    ResidentAdvisorAdapter,
    TicketmelonAdapter,
)

_REGISTRY: dict[str, PlatformAdapter] = {
    adapter.slug: adapter
    for adapter in (
        MegatixAdapter(),
        TicketmelonAdapter(),
        ResidentAdvisorAdapter(),
        AtDoorAdapter(),
    )
}


def get_adapter(slug: str) -> PlatformAdapter | None:
    return _REGISTRY.get(slug)


def all_adapters() -> list[PlatformAdapter]:
    return list(_REGISTRY.values())


def adapter_slugs() -> list[str]:
    return list(_REGISTRY)


__all__ = [
    "PlatformAdapter",
    "PlatformCredentials",
    "PlatformEventMapping",
    "PlatformSaleRecord",
    "SyncError",
    "SyncResult",
    "MegatixAdapter",
    "TicketmelonAdapter",
    "ResidentAdvisorAdapter",
    "AtDoorAdapter",
    "get_adapter",
    "all_adapters",
    "adapter_slugs",
]
