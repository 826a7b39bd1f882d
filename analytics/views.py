from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_POST

from .tracking import CONSENT_DENIED, CONSENT_GRANTED

CONSENT_MAX_AGE = 60 * 60 * 24 * 365


@require_POST
def consent_view(request):
    consent = request.POST.get("consent")
    if consent not in (CONSENT_GRANTED, CONSENT_DENIED):
        return JsonResponse({"error": "consent must be 'granted' or 'denied'"}, status=400)

    response = JsonResponse({"consent": consent})
    response.set_cookie(
        settings.ANALYTICS_CONSENT_COOKIE,
        consent,
        max_age=CONSENT_MAX_AGE,
        samesite="Lax",
        secure=request.is_secure(),
    )
    return response
