"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError, ErrorCode
from events.handlers.serializers import (
    AccountOverviewSerializer,
    EventAnalyticsSerializer,
    PlatformSerializer,
    ProjectionSerializer,
    RevenueBreakdownSerializer,
    SalesVelocitySerializer,
)
from events.services import AnalyticsService
from events.stores import (
    DjangoEventStore,
    DjangoPlatformStore,
    DjangoProjectionStore,
    DjangoSaleStore,
)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PLATFORM_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def build_analytics_service() -> AnalyticsService:
    config = settings.ANALYTICS
    return AnalyticsService(
        event_store=DjangoEventStore(),
        sale_store=DjangoSaleStore(),
        projection_store=DjangoProjectionStore(),
        max_workers=config["OVERVIEW_MAX_WORKERS"],
        recent_sales_limit=config["RECENT_SALES_LIMIT"],
    )


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


class EventAnalyticsView(APIView):
    """Handler for GET /api/events/{event_id}/analytics"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            analytics = build_analytics_service().get_event_analytics(event_id, request.user.pk)
        except DomainError as error:
            return error_response(error)
        return Response(EventAnalyticsSerializer(analytics).data)


class RevenueView(APIView):
    """Handler for GET /api/events/{event_id}/analytics/revenue"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            revenue = build_analytics_service().get_revenue_breakdown(event_id, request.user.pk)
        except DomainError as error:
            return error_response(error)
        return Response(RevenueBreakdownSerializer(revenue).data)


class VelocityView(APIView):
    """Handler for GET /api/events/{event_id}/analytics/velocity"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            velocity = build_analytics_service().get_sales_velocity(event_id, request.user.pk)
        except DomainError as error:
            return error_response(error)
        return Response(SalesVelocitySerializer(velocity).data)


class ProjectionView(APIView):
    """Handler for GET /api/events/{event_id}/analytics/projections"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            projection = build_analytics_service().get_projection(event_id, request.user.pk)
        except DomainError as error:
            return error_response(error)
        return Response(ProjectionSerializer(projection).data)


class DashboardOverviewView(APIView):
    """Handler for GET /api/dashboard/overview"""

    def get(self, request: Request) -> Response:
        overview = build_analytics_service().get_account_overview(request.user.pk)
        return Response(AccountOverviewSerializer(overview).data)


class PlatformListView(APIView):
    """Handler for GET /api/platforms"""

    def get(self, request: Request) -> Response:
        platforms = DjangoPlatformStore().list_platforms()
        return Response(PlatformSerializer(platforms, many=True).data)
