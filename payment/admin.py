from django.contrib import admin
from .models import FundingSource


@admin.register(FundingSource)
class FundingSourceAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'type', 'institution_name', 'last4', 'provider_id', 'status', 'created_at')
    list_filter = ('type', 'status')
    search_fields = ('user__email', 'institution_name')
