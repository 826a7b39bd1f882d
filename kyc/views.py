import logging

from django.conf import settings
from django.shortcuts import render, redirect, get_object_or_404
from django.contrib.auth.decorators import login_required, user_passes_test
from django.contrib import messages
from django.views.decorators.http import require_POST

from users.decorators import admin_required
from .forms import KYCForm
from .models import KYCVerification

logger = logging.getLogger(__name__)


@login_required
def verify_kyc(request):
    kyc = getattr(request.user, "kyc", None)

    if kyc is not None and kyc.verified:
        messages.info(request, "Your identity is already verified.")
        return redirect("onboarding")

    if request.method == "POST":
        form = KYCForm(request.POST, instance=kyc)
        if form.is_valid():
            kyc = form.save(commit=False)
            kyc.user = request.user
            # sandbox: no identity vendor, submissions pass straight through
            if settings.KYC_AUTO_APPROVE:
                kyc.status = KYCVerification.STATUS_VERIFIED
            else:
                kyc.status = KYCVerification.STATUS_PENDING
            kyc.save()

            request.user.full_name = kyc.full_name
            request.user.save(update_fields=["full_name", "updated_at"])
            logger.info("KYC submitted for user %s (%s)", request.user.pk, kyc.status)

            if kyc.verified:
                messages.success(request, "Identity verified. Next, link a funding source.")
            else:
                messages.success(request, "KYC submitted successfully! Await verification.")
            return redirect("onboarding")
    else:
        form = KYCForm(instance=kyc)

    return render(request, "kyc/verify.html", {"form": form})


@user_passes_test(admin_required)
def kyc_list_view(request):
    """
    Admin-only: View all KYC submissions (pending, verified and failed)
    """
    kycs = KYCVerification.objects.select_related("user").order_by("-submitted_at")
    return render(request, "kyc/admin_kyc_list.html", {"kycs": kycs})


@user_passes_test(admin_required)
@require_POST
def approve_kyc_view(request, pk):
    """
    Admin approves a user's KYC submission
    """
    kyc = get_object_or_404(KYCVerification, pk=pk)
    if not kyc.verified:
        kyc.mark(KYCVerification.STATUS_VERIFIED)
        messages.success(request, f"KYC for {kyc.user.email} has been approved successfully.")
    else:
        messages.info(request, f"KYC for {kyc.user.email} is already verified.")
    return redirect("kyc:submissions")


@user_passes_test(admin_required)
@require_POST
def reject_kyc_view(request, pk):
    """
    Admin rejects a user's KYC submission. The record is kept so the investor
    can correct and resubmit.
    """
    kyc = get_object_or_404(KYCVerification, pk=pk)
    kyc.mark(KYCVerification.STATUS_FAILED)
    messages.warning(request, f"KYC submission for {kyc.user.email} has been rejected.")
    return redirect("kyc:submissions")
