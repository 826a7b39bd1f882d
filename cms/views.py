import logging

from django.conf import settings
from django.http import JsonResponse
from django.shortcuts import redirect
from django.utils.crypto import constant_time_compare
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET

from .services import PREVIEW_SESSION_KEY, resolve_content

logger = logging.getLogger(__name__)


@require_GET
def content_api(request):
    content_type = request.GET.get("type")
    if not content_type:
        return JsonResponse({"error": "type query parameter is required"}, status=400)

    try:
        resolved = resolve_content(
            content_type,
            preview=bool(request.session.get(PREVIEW_SESSION_KEY)),
            slug=request.GET.get("slug"),
        )
    except ValueError as e:
        return JsonResponse({"error": str(e)}, status=400)
    return JsonResponse(resolved)


@require_GET
def preview_enable(request):
    secret = request.GET.get("secret", "")
    expected = settings.CMS_PREVIEW_SECRET
    if not expected or not constant_time_compare(secret, expected):
        logger.warning("Rejected CMS preview request from %s", request.META.get("REMOTE_ADDR"))
        return JsonResponse({"message": "Invalid preview secret"}, status=401)

    request.session[PREVIEW_SESSION_KEY] = True
    target = request.GET.get("redirect") or "/"
    if not url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()}):
        target = "/"
    return redirect(target)


@require_GET
def preview_exit(request):
    request.session.pop(PREVIEW_SESSION_KEY, None)
    target = request.GET.get("redirect") or "/"
    if not url_has_allowed_host_and_scheme(target, allowed_hosts={request.get_host()}):
        target = "/"
    return redirect(target)
