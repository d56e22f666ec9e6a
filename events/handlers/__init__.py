from events.handlers.views import (
    DashboardOverviewView,
    EventAnalyticsView,
    PlatformListView,
    ProjectionView,
    RevenueView,
    VelocityView,
)

__all__ = [
    "EventAnalyticsView",
    "RevenueView",
    "VelocityView",
    "ProjectionView",
    "DashboardOverviewView",
    "PlatformListView",
]
