from django.contrib import admin
from .models import EventLog


@admin.register(EventLog)
class EventLogAdmin(admin.ModelAdmin):
    list_display = ('id', 'event_type', 'user', 'campaign', 'created_at')
    list_filter = ('event_type',)
    readonly_fields = ('user', 'campaign', 'event_type', 'metadata', 'created_at')
