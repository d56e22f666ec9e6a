from events.stores.django_store import (
    DjangoEventStore,
    DjangoPlatformStore,
    DjangoProjectionStore,
    DjangoSaleStore,
)
from events.stores.interfaces import EventStore, PlatformStore, ProjectionStore, SaleStore

__all__ = [
    "EventStore",
    "PlatformStore",
    "SaleStore",
    "ProjectionStore",
    "DjangoEventStore",
    "DjangoPlatformStore",
    "DjangoSaleStore",
    "DjangoProjectionStore",
]
