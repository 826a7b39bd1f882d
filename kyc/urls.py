from django.urls import path
from . import views

app_name = "kyc"

urlpatterns = [
    path("verify/", views.verify_kyc, name="verify"),
    path("review/", views.kyc_list_view, name="submissions"),
    path("review/<int:pk>/approve/", views.approve_kyc_view, name="approve"),
    path("review/<int:pk>/reject/", views.reject_kyc_view, name="reject"),
]
