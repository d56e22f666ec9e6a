from events.services.analytics_service import AnalyticsService
from events.services.sync_service import SyncService

__all__ = ["AnalyticsService", "SyncService"]
