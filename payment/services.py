# payment/services.py
"""
Sandbox payment plumbing.

Nothing here talks to a real processor: payment intents are minted locally in
the shape Stripe uses (``pi_...``) and funding sources get opaque sandbox
tokens. Swapping in a live provider means replacing these functions.
"""
import logging
import random
import string
import uuid
from decimal import Decimal

from django.conf import settings
from django.db import transaction

from .models import FundingSource

logger = logging.getLogger(__name__)

VALID_PAYMENT_METHODS = (FundingSource.TYPE_BANK, FundingSource.TYPE_CARD)

RECEIPT_URL_TEMPLATE = "https://dashboard.stripe.com/test/payments/{}"

SANDBOX_PROVIDER_IDS = {
    FundingSource.TYPE_BANK: "plaid_sandbox",
    FundingSource.TYPE_CARD: "stripe_test",
}

_BASE36 = string.digits + string.ascii_lowercase


class FundingSourceUnavailable(LookupError):
    pass


def build_receipt_url(payment_intent_id):
    if not payment_intent_id:
        return None
    return RECEIPT_URL_TEMPLATE.format(payment_intent_id)


def generate_payment_intent_id(length=11):
    return "pi_" + "".join(random.choices(_BASE36, k=length))


def create_sandbox_payment(amount, payment_method):
    """Simulate creating a payment intent. The intent always starts out processing."""
    if payment_method not in VALID_PAYMENT_METHODS:
        raise ValueError("Unsupported payment method.")

    payment_intent_id = generate_payment_intent_id()
    logger.debug("Sandbox payment %s for %s via %s", payment_intent_id, amount, payment_method)
    return {
        "provider": settings.PAYMENT_SANDBOX_PROVIDER,
        "payment_intent_id": payment_intent_id,
        "status": "processing",
        "receipt_url": build_receipt_url(payment_intent_id),
        "payment_method": payment_method,
        "amount": Decimal(amount),
    }


def get_active_funding_source(user):
    return FundingSource.objects.filter(user=user, status=FundingSource.STATUS_ACTIVE).first()


def link_funding_source(user, type, last4, institution_name=""):
    """
    Link a new funding source for `user`. Any previously active source is
    retired so a user has at most one active source.
    """
    with transaction.atomic():
        FundingSource.objects.select_for_update().filter(
            user=user, status=FundingSource.STATUS_ACTIVE
        ).update(status=FundingSource.STATUS_INACTIVE)

        source = FundingSource.objects.create(
            user=user,
            type=type,
            provider_id=SANDBOX_PROVIDER_IDS.get(type),
            provider_token=f"tok_sandbox_{uuid.uuid4().hex[:24]}",
            institution_name=institution_name,
            last4=last4,
            status=FundingSource.STATUS_ACTIVE,
        )
    logger.info("Linked %s funding source %s for user %s", type, source.pk, user.pk)
    return source


def deactivate_funding_source(source):
    source.status = FundingSource.STATUS_INACTIVE
    source.save(update_fields=["status", "updated_at"])
    return source


def resolve_funding_source(user, funding_source_id, payment_method):
    """
    Return the user's active funding source matching `payment_method`.
    Without an explicit id the user's current active source is used.
    """
    qs = FundingSource.objects.filter(user=user, status=FundingSource.STATUS_ACTIVE)
    if funding_source_id:
        try:
            source = qs.get(pk=funding_source_id)
        except (FundingSource.DoesNotExist, ValueError, TypeError):
            raise FundingSourceUnavailable("Funding source is not available.")
    else:
        source = qs.first()
        if source is None:
            raise FundingSourceUnavailable("Funding source is not available.")

    if source.type != payment_method:
        raise FundingSourceUnavailable("Funding source is not available.")
    return source
