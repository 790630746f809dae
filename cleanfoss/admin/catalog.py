"""Catalog admin."""

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from cleanfoss.formatting import format_dkk
from cleanfoss.models import Addon, MainProduct, ServiceCategory


class ActivationActionsMixin:
    actions = ["activate_items", "deactivate_items"]

    @admin.action(description="Activate selected items")
    def activate_items(self, request, queryset):
        updated = queryset.update(is_active=True)
        self.message_user(request, f"{updated} item(s) activated.")

    @admin.action(description="Deactivate selected items")
    def deactivate_items(self, request, queryset):
        updated = queryset.update(is_active=False)
        self.message_user(request, f"{updated} item(s) deactivated.")


@admin.register(ServiceCategory)
class ServiceCategoryAdmin(admin.ModelAdmin):
    list_display = ["slug", "name", "sort_order"]
    list_editable = ["sort_order"]
    search_fields = ["slug", "name"]


@admin.register(MainProduct)
class MainProductAdmin(ActivationActionsMixin, SimpleHistoryAdmin):
    list_display = [
        "code",
        "name",
        "product_type",
        "company",
        "formatted_price",
        "duration_minutes",
        "sort_order",
        "is_active",
    ]
    list_filter = ["product_type", "is_active", "company", "category"]
    search_fields = ["code", "name"]
    list_editable = ["sort_order", "is_active"]
    readonly_fields = ["uuid", "created_at", "updated_at"]
    autocomplete_fields = ["company"]

    fieldsets = [
        (None, {"fields": ("company", "product_type", "code", "name", "description", "category")}),
        ("Price", {"fields": ("price", "duration_minutes")}),
        ("Display", {"fields": ("image", "sort_order", "is_active")}),
        (
            "Metadata",
            {
                "fields": ("uuid", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    ]

    def formatted_price(self, obj):
        return format_dkk(obj.price)

    formatted_price.short_description = "Price"
    formatted_price.admin_order_field = "price"


@admin.register(Addon)
class AddonAdmin(ActivationActionsMixin, SimpleHistoryAdmin):
    list_display = [
        "code",
        "name",
        "product_type",
        "company",
        "kind",
        "formatted_price",
        "sort_order",
        "is_active",
    ]
    list_filter = ["product_type", "kind", "is_active", "company"]
    search_fields = ["code", "name"]
    list_editable = ["sort_order", "is_active"]
    readonly_fields = ["uuid", "created_at", "updated_at"]
    autocomplete_fields = ["company"]

    fieldsets = [
        (None, {"fields": ("company", "product_type", "code", "name", "description")}),
        (
            "Price",
            {
                "fields": ("kind", "price", "unit_price", "min_qty", "max_qty"),
                "description": "Boolean addons use price; quantity addons use unit price and min/max.",
            },
        ),
        ("Display", {"fields": ("sort_order", "is_active")}),
        (
            "Metadata",
            {
                "fields": ("uuid", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    ]

    def formatted_price(self, obj):
        """Flat price, or unit price with its quantity range."""
        if obj.is_quantity:
            if obj.unit_price is None:
                return "-"
            return f"{format_dkk(obj.unit_price)} / stk. ({obj.min_qty}-{obj.max_qty})"
        if obj.price is None:
            return "-"
        return format_dkk(obj.price)

    formatted_price.short_description = "Price"
