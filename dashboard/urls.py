from django.urls import path
from .views import admin_console_view, home_view, how_it_works_view, risk_disclosure_view

app_name = "dashboard"

urlpatterns = [
    path("", home_view, name="home"),
    path("how-it-works/", how_it_works_view, name="how_it_works"),
    path("risk-disclosure/", risk_disclosure_view, name="risk_disclosure"),
    path("admin/", admin_console_view, name="admin_console"),
]
