import logging

from django.contrib import messages
from django.contrib.auth.decorators import user_passes_test
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from users.decorators import admin_required
from .forms import ApplicationReviewForm, FounderApplicationForm
from .models import FounderApplication

logger = logging.getLogger(__name__)


def apply_view(request):
    """
    Public page where founders apply to raise from the crowd.
    """
    if request.method == "POST":
        form = FounderApplicationForm(request.POST)
        if form.is_valid():
            application = form.save()
            logger.info("Founder application %s from %s", application.pk, application.contact_email)
            messages.success(request, "Thanks! Our team will review your application and get back to you.")
            return redirect("founders:apply")
    else:
        form = FounderApplicationForm()
    return render(request, "founders/apply.html", {"form": form})


@user_passes_test(admin_required)
@require_POST
def review_application_view(request, pk):
    application = get_object_or_404(FounderApplication, pk=pk)
    form = ApplicationReviewForm(request.POST, instance=application)
    if form.is_valid():
        form.save()
        messages.success(request, f"{application.company_name} marked {application.get_status_display().lower()}.")
    else:
        messages.error(request, "Invalid application status.")
    return redirect("dashboard:admin_console")
