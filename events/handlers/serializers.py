"""Serializers for transforming analytics value objects to API responses.

Field names are camelCase to match the dashboard's JSON contract. Money is
rendered as a number with two decimal places.
"""

from rest_framework import serializers


def money(source: str | None = None) -> serializers.DecimalField:
    """Two-decimal money field. Pass ``source`` only when it differs from the field name."""
    options = {"source": source} if source else {}
    return serializers.DecimalField(
        max_digits=None, decimal_places=2, coerce_to_string=False, **options
    )


class EnumValueField(serializers.Field):
    """Renders an Enum member as its value."""

    def to_representation(self, value):
        return value.value


class PlatformRevenueSerializer(serializers.Serializer):
    platformId = serializers.CharField(source="platform_id", allow_null=True)
    platformName = serializers.CharField(source="platform_name")
    colorHex = serializers.CharField(source="color_hex", allow_null=True)
    revenue = money()
    fees = money()
    netRevenue = money("net_revenue")
    ticketsSold = serializers.IntegerField(source="tickets_sold")


class TicketTypeRevenueSerializer(serializers.Serializer):
    ticketType = serializers.CharField(source="ticket_type")
    revenue = money()
    ticketsSold = serializers.IntegerField(source="tickets_sold")
    avgPrice = money("avg_price")


class RevenueBreakdownSerializer(serializers.Serializer):
    """Serializer for RevenueBreakdown."""

    totalRevenue = money("total_revenue")
    totalFees = money("total_fees")
    netRevenue = money("net_revenue")
    byPlatform = PlatformRevenueSerializer(source="by_platform", many=True)
    byTicketType = TicketTypeRevenueSerializer(source="by_ticket_type", many=True)


class DailySalesSerializer(serializers.Serializer):
    date = serializers.DateField(format="%Y-%m-%d")
    ticketsSold = serializers.IntegerField(source="tickets_sold")
    revenue = money()


class SalesVelocitySerializer(serializers.Serializer):
    """Serializer for SalesVelocity."""

    totalTicketsSold = serializers.IntegerField(source="total_tickets_sold")
    dailyAverage = serializers.FloatField(source="daily_average")
    weeklyAverage = serializers.FloatField(source="weekly_average")
    trend = EnumValueField()
    byDay = DailySalesSerializer(source="by_day", many=True)


class ProjectionSerializer(serializers.Serializer):
    """Serializer for Projection."""

    projectedTotalRevenue = money("projected_total_revenue")
    projectedTotalTickets = serializers.IntegerField(source="projected_total_tickets")
    percentageSold = serializers.FloatField(source="percentage_sold", allow_null=True)
    daysUntilSellout = serializers.FloatField(source="days_until_sellout", allow_null=True)
    confidenceLevel = EnumValueField(source="confidence_level")
    asOf = serializers.DateTimeField(source="as_of")


class EventAnalyticsSerializer(serializers.Serializer):
    revenue = RevenueBreakdownSerializer()
    velocity = SalesVelocitySerializer()
    projections = ProjectionSerializer()


class EventSummarySerializer(serializers.Serializer):
    eventId = serializers.CharField(source="event_id")
    eventName = serializers.CharField(source="event_name")
    date = serializers.DateField(format="%Y-%m-%d")
    venue = serializers.CharField(allow_null=True)
    revenue = money()
    ticketsSold = serializers.IntegerField(source="tickets_sold")


class RecentSaleSerializer(serializers.Serializer):
    saleId = serializers.CharField(source="sale_id")
    eventId = serializers.CharField(source="event_id")
    eventName = serializers.CharField(source="event_name")
    platformId = serializers.CharField(source="platform_id", allow_null=True)
    platformName = serializers.CharField(source="platform_name")
    ticketType = serializers.CharField(source="ticket_type", allow_null=True)
    quantity = serializers.IntegerField()
    pricePerTicket = money("price_per_ticket")
    fees = money()
    revenue = money()
    saleDate = serializers.DateTimeField(source="sale_date")


class AccountOverviewSerializer(serializers.Serializer):
    """Serializer for AccountOverview."""

    totalEvents = serializers.IntegerField(source="total_events")
    totalRevenue = money("total_revenue")
    totalTicketsSold = serializers.IntegerField(source="total_tickets_sold")
    totalFees = money("total_fees")
    eventSummaries = EventSummarySerializer(source="event_summaries", many=True)
    recentSales = RecentSaleSerializer(source="recent_sales", many=True)


class PlatformSerializer(serializers.Serializer):
    """Serializer for Platform. ``id`` matches ``byPlatform[].platformId``."""

    id = serializers.CharField()
    name = serializers.CharField()
    colorHex = serializers.CharField(source="color_hex", allow_null=True)
    apiEnabled = serializers.BooleanField(source="api_enabled")
