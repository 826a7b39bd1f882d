from django.contrib import admin
from django.contrib import messages
from .models import Campaign, InvestmentIntent
from .services import mark_failed


@admin.register(Campaign)
class CampaignAdmin(admin.ModelAdmin):
    list_display = ('id', 'company_name', 'status', 'min_investment', 'max_investment_per_person', 'target_amount', 'amount_raised', 'created_at')
    list_filter = ('status',)
    search_fields = ('company_name', 'slug')
    prepopulated_fields = {'slug': ('company_name',)}


@admin.action(description="Mark selected investments as failed")
def mark_investments_failed(modeladmin, request, queryset):
    for intent in queryset:
        if mark_failed(intent):
            messages.info(request, f"Marked investment {intent.id} as failed")
        else:
            messages.error(request, f"Investment {intent.id} is already {intent.status}")


@admin.register(InvestmentIntent)
class InvestmentIntentAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'campaign', 'amount', 'status', 'partner_tx_id', 'created_at')
    list_filter = ('status',)
    search_fields = ('user__email', 'partner_tx_id', 'campaign__company_name')
    actions = [mark_investments_failed]
