from django.urls import path
from . import views

app_name = "founders"

urlpatterns = [
    path("", views.apply_view, name="apply"),
    path("admin/<int:pk>/review/", views.review_application_view, name="review_application"),
]
