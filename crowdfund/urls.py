from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("django-admin/", admin.site.urls),
    path("", include("users.urls")),
    path("", include("dashboard.urls")),
    path("kyc/", include("kyc.urls")),
    path("payment/", include("payment.urls")),
    path("", include("investment.urls")),
    path("founders/", include("founders.urls")),
    path("analytics/", include("analytics.urls")),
    path("", include("cms.urls")),
]
