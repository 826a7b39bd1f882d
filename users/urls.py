from django.urls import path
from . import views

urlpatterns = [
    path("auth/signup/", views.register_view, name="register"),
    path("auth/signin/", views.login_view, name="login"),
    path("auth/signout/", views.logout_view, name="logout"),
    path("account/", views.account_view, name="account"),
    path("onboarding/", views.onboarding_view, name="onboarding"),
    path("onboarding/terms/", views.accept_terms_view, name="accept_terms"),
]
