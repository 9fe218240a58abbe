from django.contrib import admin
from .models import HallOfFameEntry


@admin.register(HallOfFameEntry)
class HallOfFameEntryAdmin(admin.ModelAdmin):
    list_display = ['period_type', 'period_start', 'period_end', 'user_name', 'total_amount', 'created_at']
    list_filter = ['period_type']
    search_fields = ['user_name', 'user__username']
    readonly_fields = ['created_at']
    date_hierarchy = 'period_start'
    raw_id_fields = ['user']
