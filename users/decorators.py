from functools import wraps

from django.contrib import messages
from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect


def admin_required(user):
    return user.is_staff or user.is_superuser


def kyc_required(view_func):
    """
    Like login_required, but also sends investors without a verified identity
    back to onboarding.
    """

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path())
        if not request.user.kyc_verified:
            messages.warning(request, "Please verify your identity before investing.")
            return redirect("onboarding")
        return view_func(request, *args, **kwargs)

    return _wrapped
