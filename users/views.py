import logging

from django.shortcuts import render, redirect
from django.contrib.auth import login, logout
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from analytics.tracking import track_event
from kyc.forms import KYCForm
from payment.forms import FundingSourceForm
from payment.services import get_active_funding_source
from .forms import RegisterForm, LoginForm, ProfileEditForm, TermsForm
from .onboarding import compute_onboarding_step, current_step, STEP_COMPLETE

logger = logging.getLogger(__name__)


def _safe_next(request):
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return next_url
    return None


def register_view(request):
    if request.user.is_authenticated:
        return redirect("onboarding")

    if request.method == "POST":
        form = RegisterForm(request.POST)
        if form.is_valid():
            user = form.save()
            login(request, user, backend="django.contrib.auth.backends.ModelBackend")
            track_event(request, "signup_completed")
            logger.info("New investor account %s", user.pk)
            messages.success(request, "Account created! Let's get you verified.")
            return redirect("onboarding")
    else:
        form = RegisterForm()
    return render(request, "users/register.html", {"form": form})


def login_view(request):
    if request.method == "POST":
        form = LoginForm(request, data=request.POST)
        if form.is_valid():
            user = form.get_user()
            login(request, user)
            messages.success(request, f"Welcome back {user.display_name}!")

            next_url = _safe_next(request)
            if next_url:
                return redirect(next_url)
            if current_step(user) != STEP_COMPLETE:
                return redirect("onboarding")
            return redirect("investment:campaign_list")
        else:
            messages.error(request, "Invalid credentials")
    else:
        form = LoginForm()
    return render(request, "users/login.html", {"form": form, "next": _safe_next(request)})


@login_required
def logout_view(request):
    logout(request)
    messages.success(request, "You have been logged out.")
    return redirect("login")


@login_required
def account_view(request):
    user = request.user

    if request.method == "POST":
        form = ProfileEditForm(request.POST, instance=user)
        if form.is_valid():
            form.save()
            messages.success(request, "Profile updated successfully!")
            return redirect("account")
    else:
        form = ProfileEditForm(instance=user)

    funding_source = get_active_funding_source(user)
    context = {
        "form": form,
        "kyc": getattr(user, "kyc", None),
        "funding_source": funding_source,
        "onboarding_step": compute_onboarding_step(user, funding_source),
    }
    return render(request, "users/account.html", context)


@login_required
def onboarding_view(request):
    user = request.user
    funding_source = get_active_funding_source(user)
    step = compute_onboarding_step(user, funding_source)

    if step == STEP_COMPLETE:
        return redirect("investment:campaign_list")

    kyc = getattr(user, "kyc", None)
    context = {
        "step": step,
        "kyc": kyc,
        "funding_source": funding_source,
        "kyc_form": KYCForm(instance=kyc),
        "funding_form": FundingSourceForm(),
        "terms_form": TermsForm(initial={"risk_accepted": user.terms_accepted, "terms_accepted": user.terms_accepted}),
    }
    return render(request, "users/onboarding.html", context)


@login_required
@require_POST
def accept_terms_view(request):
    form = TermsForm(request.POST)
    if not form.is_valid():
        for errors in form.errors.values():
            for error in errors:
                messages.error(request, error)
        return redirect("onboarding")

    user = request.user
    user.accept_terms()

    if current_step(user) == STEP_COMPLETE:
        track_event(request, "onboarding_completed")
        messages.success(request, "You're all set! Start exploring campaigns.")
        return redirect("investment:campaign_list")

    messages.success(request, "Terms accepted.")
    return redirect("onboarding")
