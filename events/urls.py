from django.urls import path

from events.handlers import (
    DashboardOverviewView,
    EventAnalyticsView,
    PlatformListView,
    ProjectionView,
    RevenueView,
    VelocityView,
)

urlpatterns = [
    path(
        "events/<str:event_id>/analytics",
        EventAnalyticsView.as_view(),
        name="event-analytics",
    ),
    path(
        "events/<str:event_id>/analytics/revenue",
        RevenueView.as_view(),
        name="event-revenue",
    ),
    path(
        "events/<str:event_id>/analytics/velocity",
        VelocityView.as_view(),
        name="event-velocity",
    ),
    path(
        "events/<str:event_id>/analytics/projections",
        ProjectionView.as_view(),
        name="event-projections",
    ),
    path("dashboard/overview", DashboardOverviewView.as_view(), name="dashboard-overview"),
    path("platforms", PlatformListView.as_view(), name="platform-list"),
]
