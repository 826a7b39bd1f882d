"""
Product analytics events.

Events are only recorded when analytics is switched on for the deployment and
the visitor has granted consent through the consent cookie.
"""
import logging

from django.conf import settings
from django.db import DatabaseError, transaction

from .models import EventLog

logger = logging.getLogger(__name__)

EVENTS = frozenset({
    "signup_completed",
    "onboarding_completed",
    "invest_attempt",
    "invest_success",
})

CONSENT_GRANTED = "granted"
CONSENT_DENIED = "denied"


def has_consent(request):
    return request.COOKIES.get(settings.ANALYTICS_CONSENT_COOKIE) == CONSENT_GRANTED


def is_analytics_enabled(request):
    return bool(settings.ANALYTICS_ENABLED) and has_consent(request)


def record_event(event, user=None, campaign=None, metadata=None):
    if event not in EVENTS:
        raise ValueError(f"Unknown analytics event: {event}")

    if user is not None and not user.is_authenticated:
        user = None
    try:
        with transaction.atomic():
            return EventLog.objects.create(
                user=user, campaign=campaign, event_type=event, metadata=metadata or {}
            )
    except DatabaseError as e:
        logger.warning("Analytics tracking failed for %s: %s", event, e)
        return None


def track_event(request, event, campaign=None, **metadata):
    if event not in EVENTS:
        raise ValueError(f"Unknown analytics event: {event}")
    if not is_analytics_enabled(request):
        return None

    logger.debug("Analytics event %s %s", event, metadata)
    return record_event(event, user=request.user, campaign=campaign, metadata=metadata)
