from django.urls import path
from . import views

app_name = "cms"

urlpatterns = [
    path("api/cms/", views.content_api, name="content_api"),
    path("api/preview/", views.preview_enable, name="preview_enable"),
    path("api/preview/exit/", views.preview_exit, name="preview_exit"),
]
