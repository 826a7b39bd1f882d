# payment/views.py
from django.shortcuts import render, redirect, get_object_or_404
from django.contrib.auth.decorators import login_required
from django.contrib import messages
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .forms import FundingSourceForm
from .models import FundingSource
from .services import link_funding_source, deactivate_funding_source


def _return_to(request):
    target = request.POST.get("return_to")
    if target and url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()}):
        return target
    return "onboarding"


@login_required
def funding_sources_view(request):
    sources = FundingSource.objects.filter(user=request.user)
    return render(request, "payment/funding_sources.html", {"sources": sources, "form": FundingSourceForm()})


@login_required
@require_POST
def link_funding_source_view(request):
    """
    Link a bank account or card (sandbox). The new source replaces whichever
    one was active before.
    """
    form = FundingSourceForm(request.POST)
    if not form.is_valid():
        for errors in form.errors.values():
            for error in errors:
                messages.error(request, error)
        return redirect(_return_to(request))

    source = link_funding_source(
        request.user,
        type=form.cleaned_data["type"],
        last4=form.cleaned_data["last4"],
        institution_name=form.cleaned_data["institution_name"],
    )
    messages.success(request, f"Connected {source.display}.")
    return redirect(_return_to(request))


@login_required
@require_POST
def deactivate_funding_source_view(request, pk):
    source = get_object_or_404(FundingSource, pk=pk, user=request.user)
    if not source.is_active:
        messages.info(request, "That funding source is already inactive.")
    else:
        deactivate_funding_source(source)
        messages.success(request, f"Removed {source.display}.")
    return redirect("payment:funding_sources")
