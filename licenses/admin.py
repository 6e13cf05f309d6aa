"""
Django admin configuration for licenses app.
"""
from django.contrib import admin
from django.utils.html import format_html

from licenses.infrastructure.models import License, LicenseType


@admin.register(LicenseType)
class LicenseTypeAdmin(admin.ModelAdmin):
    """Admin interface for LicenseType model."""

    list_display = ["label", "plugin_id", "license_count", "created_at"]
    list_filter = ["plugin_id"]
    search_fields = ["label"]
    readonly_fields = ["id", "created_at", "updated_at"]

    def license_count(self, obj):
        """Display number of licenses of this type."""
        return obj.licenses.count()

    license_count.short_description = "Licenses"


@admin.register(License)
class LicenseAdmin(admin.ModelAdmin):
    """Admin interface for License model."""

    list_display = [
        "license_type",
        "owner",
        "state_display",
        "created_at",
    ]
    list_filter = ["state", "license_type", "created_at"]
    search_fields = ["owner__username", "license_type__label"]
    readonly_fields = ["id", "target_group_ids", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "license_type", "owner", "state"),
            },
        ),
        (
            "Entitlement",
            {
                "fields": ("target_group_ids",),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def state_display(self, obj):
        """Display state with color coding."""
        colors = {
            "pending": "gray",
            "active": "green",
            "suspended": "orange",
            "expired": "gray",
            "canceled": "red",
        }
        color = colors.get(obj.state, "black")
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color,
            obj.state.upper(),
        )

    state_display.short_description = "State"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("license_type", "owner")
