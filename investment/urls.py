from django.urls import path
from . import views

app_name = 'investment'

urlpatterns = [
    path('campaigns/', views.campaign_list, name='campaign_list'),
    path('campaigns/<slug:slug>/', views.campaign_detail, name='campaign_detail'),
    path('invest/<slug:slug>/', views.invest_page, name='invest_page'),
    path('investments/', views.portfolio_view, name='portfolio'),
    path('investments/<uuid:intent_id>/processing/', views.investment_processing, name='processing'),

    # JSON API
    path('api/investments/', views.api_create_investment, name='api_create'),
    path('api/investments/<str:intent_id>/', views.api_investment_status, name='api_status'),

    # Staff
    path('admin/campaigns/', views.admin_campaign_list, name='admin_campaign_list'),
    path('admin/campaigns/new/', views.admin_campaign_create, name='admin_campaign_create'),
    path('admin/campaigns/<int:pk>/edit/', views.admin_campaign_edit, name='admin_campaign_edit'),
    path('admin/campaigns/<int:pk>/delete/', views.admin_campaign_delete, name='admin_campaign_delete'),
]
