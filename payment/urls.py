# payment/urls.py
from django.urls import path
from . import views

app_name = "payment"

urlpatterns = [
    path("funding-sources/", views.funding_sources_view, name="funding_sources"),
    path("funding-sources/link/", views.link_funding_source_view, name="link_funding_source"),
    path("funding-sources/<int:pk>/deactivate/", views.deactivate_funding_source_view, name="deactivate_funding_source"),
]
