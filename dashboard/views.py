from django.shortcuts import render
from django.contrib.auth.decorators import user_passes_test

from cms.services import is_preview, resolve_how_it_works, resolve_landing
from founders.forms import ApplicationReviewForm
from founders.models import FounderApplication
from investment.models import Campaign
from investment.services import platform_metrics
from users.decorators import admin_required
from .legal import RISK_DISCLOSURE_INTRO, RISK_DISCLOSURE_POINTS


def home_view(request):
    live = list(Campaign.objects.filter(status=Campaign.STATUS_LIVE))
    return render(request, "dashboard/home.html", {
        "content": resolve_landing(is_preview(request)),
        "featured": live[0] if live else None,
        "more_campaigns": live[1:],
    })


def how_it_works_view(request):
    return render(request, "dashboard/how_it_works.html", {
        "content": resolve_how_it_works(is_preview(request)),
    })


def risk_disclosure_view(request):
    return render(request, "dashboard/risk_disclosure.html", {
        "intro": RISK_DISCLOSURE_INTRO,
        "points": RISK_DISCLOSURE_POINTS,
    })


@user_passes_test(admin_required)
def admin_console_view(request):
    """
    Staff overview: every campaign, incoming founder applications and the
    platform-wide investment metrics.
    """
    applications = FounderApplication.objects.all()
    return render(request, "dashboard/admin_console.html", {
        "campaigns": Campaign.objects.all(),
        "applications": [(a, ApplicationReviewForm(instance=a)) for a in applications],
        "metrics": platform_metrics(),
    })
