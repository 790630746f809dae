"""Company admin."""

from django.contrib import admin

from cleanfoss.models import Company


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ["slug", "name", "is_active", "main_products_count", "addons_count"]
    list_filter = ["is_active"]
    search_fields = ["slug", "name"]
    readonly_fields = ["uuid", "created_at", "updated_at"]
    prepopulated_fields = {"slug": ("name",)}

    def main_products_count(self, obj):
        return obj.main_products.count()

    main_products_count.short_description = "Main products"

    def addons_count(self, obj):
        return obj.addons.count()

    addons_count.short_description = "Addons"
