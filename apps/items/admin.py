# ==========================================
# apps/items/admin.py
# ==========================================

from django.contrib import admin
from apps.items.models import Item


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    """Admin interface for logged items."""

    list_display = ['name', 'user', 'price', 'created_at']
    list_filter = ['created_at']
    search_fields = ['name', 'user__username', 'user__nickname']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user')
