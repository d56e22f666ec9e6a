from django.contrib import admin

from events.models import Event, Platform, ProjectionSnapshot, Sale


class SaleInline(admin.TabularInline):
    model = Sale
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "venue", "date", "total_capacity", "owner"]
    search_fields = ["name", "venue"]
    inlines = [SaleInline]


@admin.register(Platform)
class PlatformAdmin(admin.ModelAdmin):
    list_display = ["name", "api_enabled", "color_hex"]


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = ["event", "platform", "ticket_type", "quantity", "price_per_ticket", "fees", "sale_date"]
    list_filter = ["event", "platform"]


@admin.register(ProjectionSnapshot)
class ProjectionSnapshotAdmin(admin.ModelAdmin):
    list_display = ["event", "projected_total", "confidence_level", "calculation_date"]
    list_filter = ["event", "confidence_level"]
