from django.contrib import admin
from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(admin.ModelAdmin):
    list_display = ('id', 'email', 'full_name', 'kyc_status', 'terms_accepted', 'is_active', 'is_staff', 'date_joined')
    list_filter = ('kyc_status', 'terms_accepted', 'is_staff')
    search_fields = ('email', 'full_name')
