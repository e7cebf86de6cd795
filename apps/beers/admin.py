"""
Django Admin configuration for the Beers app.
"""

from django.contrib import admin

from apps.beers.infrastructure.persistence.models import BeerRecord


@admin.register(BeerRecord)
class BeerRecordAdmin(admin.ModelAdmin):
    """Admin interface for BeerRecord model."""

    list_display = ('id', 'name', 'brewery', 'country', 'get_price')
    list_filter = ('country', 'currency')
    search_fields = ('name', 'brewery', 'country')
    ordering = ('id',)

    fieldsets = (
        ('Beer Information', {
            'fields': ('id', 'name', 'brewery', 'country')
        }),
        ('Price', {
            'fields': ('price', 'currency')
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        """Ids are primary keys assigned on creation; don't allow changing them."""
        if obj is not None:
            return ('id',)
        return ()

    @admin.display(description='Price', ordering='price')
    def get_price(self, obj):
        """Display price with its currency."""
        return f"{obj.price} {obj.currency}"
