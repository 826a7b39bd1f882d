from django.contrib import admin
from .models import FounderApplication


@admin.register(FounderApplication)
class FounderApplicationAdmin(admin.ModelAdmin):
    list_display = ('id', 'company_name', 'contact_name', 'stage', 'desired_crowd_raise', 'status', 'created_at')
    list_filter = ('status', 'stage')
    search_fields = ('company_name', 'contact_email')
