"""
Investment intent validation and the sandbox payment lifecycle.

An intent is created ``processing`` with a sandbox payment intent id attached.
Reading its status after the confirmation delay settles it to ``confirmed``;
``failed`` is only ever set by staff. Cap checks count every intent that has
not failed, so processing intents hold their place against the target.
"""
import logging
from datetime import timedelta
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Count, Sum
from django.utils import timezone

from payment.services import VALID_PAYMENT_METHODS, create_sandbox_payment, resolve_funding_source
from .models import Campaign, InvestmentIntent

logger = logging.getLogger(__name__)

PUBLIC_STATUS = {
    InvestmentIntent.STATUS_CONFIRMED: "succeeded",
    InvestmentIntent.STATUS_FAILED: "failed",
}


class InvestmentValidationError(ValueError):
    pass


class CampaignNotFound(LookupError):
    pass


def format_money(value):
    value = Decimal(value)
    if value == value.to_integral_value():
        return str(int(value))
    return f"{value:.2f}"


def parse_amount(raw):
    if isinstance(raw, bool) or raw is None:
        raise InvestmentValidationError("Invalid amount.")
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        raise InvestmentValidationError("Invalid amount.")
    if not amount.is_finite() or amount <= 0 or amount.as_tuple().exponent < -2:
        raise InvestmentValidationError("Invalid amount.")
    return amount


def validate_campaign_rules(campaign, amount, user):
    if campaign.status != Campaign.STATUS_LIVE:
        raise InvestmentValidationError("Campaign is not live for investments.")

    if amount < campaign.min_investment:
        raise InvestmentValidationError(f"Minimum investment is ${format_money(campaign.min_investment)}.")

    if amount > campaign.max_investment_per_person:
        raise InvestmentValidationError(f"Maximum per person is ${format_money(campaign.max_investment_per_person)}.")

    if campaign.total_raised() + amount > campaign.target_amount:
        raise InvestmentValidationError("Campaign has reached its target amount.")

    if campaign.committed_amount(user=user) + amount > campaign.max_investment_per_person:
        raise InvestmentValidationError("You have reached the per-person investment cap for this campaign.")


def submit_investment(user, campaign_slug, amount, payment_method, funding_source_id=None):
    """
    Validate and record an investment. Returns ``(intent, payment)``.

    Raises InvestmentValidationError, CampaignNotFound or
    FundingSourceUnavailable.
    """
    if payment_method not in VALID_PAYMENT_METHODS:
        raise InvestmentValidationError("Unsupported payment method.")
    amount = parse_amount(amount)

    with transaction.atomic():
        # the row lock serialises cap checks for the same campaign
        try:
            campaign = Campaign.objects.select_for_update().get(slug=campaign_slug)
        except Campaign.DoesNotExist:
            raise CampaignNotFound("Campaign not found.")

        resolve_funding_source(user, funding_source_id, payment_method)
        validate_campaign_rules(campaign, amount, user)

        payment = create_sandbox_payment(amount, payment_method)
        intent = InvestmentIntent.objects.create(
            user=user,
            campaign=campaign,
            amount=amount,
            status=InvestmentIntent.STATUS_PROCESSING,
            partner_tx_id=payment["payment_intent_id"],
        )

    logger.info(
        "Investment %s: user %s -> %s $%s (%s)",
        intent.id, user.pk, campaign.slug, amount, payment["payment_intent_id"],
    )
    return intent, payment


def confirmation_delay():
    return timedelta(seconds=settings.INVESTMENT_CONFIRMATION_DELAY_SECONDS)


def refresh_investment_status(intent, now=None):
    """
    Settle a processing intent once the confirmation delay has passed.
    Returns True when this call moved it to confirmed.
    """
    if intent.status != InvestmentIntent.STATUS_PROCESSING:
        return False

    now = now or timezone.now()
    if now - intent.created_at <= confirmation_delay():
        return False

    # conditional update so concurrent pollers confirm it only once
    updated = InvestmentIntent.objects.filter(
        pk=intent.pk, status=InvestmentIntent.STATUS_PROCESSING
    ).update(status=InvestmentIntent.STATUS_CONFIRMED, updated_at=now)
    if not updated:
        # someone else settled it first; report what they wrote
        intent.refresh_from_db(fields=["status", "updated_at"])
        return False

    intent.status = InvestmentIntent.STATUS_CONFIRMED
    intent.updated_at = now
    logger.info("Investment %s confirmed (%s)", intent.id, intent.partner_tx_id)
    return True


def mark_failed(intent):
    """
    Fail an intent that has not settled yet. Returns False, with the stored
    status loaded onto `intent`, when it was already confirmed or failed.
    """
    now = timezone.now()
    updated = InvestmentIntent.objects.filter(
        pk=intent.pk,
        status__in=[InvestmentIntent.STATUS_INITIATED, InvestmentIntent.STATUS_PROCESSING],
    ).update(status=InvestmentIntent.STATUS_FAILED, updated_at=now)
    if not updated:
        intent.refresh_from_db(fields=["status", "updated_at"])
        return False

    intent.status = InvestmentIntent.STATUS_FAILED
    intent.updated_at = now
    logger.warning("Investment %s marked failed", intent.id)
    return True


def public_status(status):
    return PUBLIC_STATUS.get(status, "processing")


def portfolio_summary(user):
    intents = InvestmentIntent.objects.filter(user=user).select_related("campaign").order_by("-created_at")
    confirmed = intents.filter(status=InvestmentIntent.STATUS_CONFIRMED)
    return {
        "investments": intents,
        "total_invested": confirmed.aggregate(total=Sum("amount"))["total"] or Decimal("0.00"),
        "pending_count": intents.filter(
            status__in=[InvestmentIntent.STATUS_INITIATED, InvestmentIntent.STATUS_PROCESSING]
        ).count(),
        "company_count": intents.exclude(status=InvestmentIntent.STATUS_FAILED)
        .order_by().values("campaign_id").distinct().count(),
    }


def platform_metrics():
    confirmed = InvestmentIntent.objects.filter(status=InvestmentIntent.STATUS_CONFIRMED)
    totals = confirmed.aggregate(volume=Sum("amount"), active=Count("user", distinct=True))
    volume = totals["volume"] or Decimal("0.00")
    active_investors = totals["active"] or 0
    total_investors = get_user_model().objects.count()
    conversion = (active_investors / total_investors * 100) if total_investors > 0 else 0.0
    return {
        "volume": volume,
        "active_investors": active_investors,
        "total_investors": total_investors,
        "conversion": round(conversion, 1),
    }
