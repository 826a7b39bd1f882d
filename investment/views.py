import json
import logging
import uuid

from django.db import OperationalError
from django.db.models import ProtectedError
from django.http import JsonResponse
from django.shortcuts import render, redirect, get_object_or_404
from django.contrib.auth.decorators import login_required, user_passes_test
from django.contrib import messages
from django.views.decorators.http import require_GET, require_POST

from analytics.tracking import track_event
from cms.services import is_preview, resolve_campaign_story
from payment.services import FundingSourceUnavailable, build_receipt_url, get_active_funding_source
from users.decorators import admin_required, kyc_required
from .forms import AMOUNT_PRESETS, CampaignForm, InvestForm
from .models import Campaign, InvestmentIntent
from .services import (
    CampaignNotFound,
    InvestmentValidationError,
    portfolio_summary,
    public_status,
    refresh_investment_status,
    submit_investment,
)

logger = logging.getLogger(__name__)

# concurrent writers on sqlite surface as "database is locked"
BUSY_MESSAGE = "We're handling a lot of investments right now. Please try again."


def campaign_list(request):
    """
    Public browse page: live campaigns plus upcoming (draft) ones.
    """
    campaigns = Campaign.objects.filter(status__in=[Campaign.STATUS_LIVE, Campaign.STATUS_DRAFT])
    context = {
        "live_campaigns": [c for c in campaigns if c.status == Campaign.STATUS_LIVE],
        "upcoming_campaigns": [c for c in campaigns if c.status == Campaign.STATUS_DRAFT],
    }
    return render(request, "investment/campaign_list.html", context)


def campaign_detail(request, slug):
    campaign = get_object_or_404(Campaign, slug=slug)
    story = resolve_campaign_story(is_preview(request), campaign)
    return render(request, "investment/campaign_detail.html", {"campaign": campaign, "story": story})


@kyc_required
def invest_page(request, slug):
    """
    Amount entry for a campaign. On POST the investment is validated and
    submitted against the user's active funding source, then the user is sent
    to the processing page which polls for confirmation.
    """
    campaign = get_object_or_404(Campaign, slug=slug)
    funding_source = get_active_funding_source(request.user)
    if funding_source is None:
        messages.warning(request, "Link a funding source before investing.")
        return redirect("onboarding")

    if request.method == "POST":
        form = InvestForm(request.POST)
        if not form.is_valid():
            messages.error(request, "Invalid amount.")
            return redirect("investment:invest_page", slug)

        amount = form.cleaned_data["amount"]
        track_event(request, "invest_attempt", campaign=campaign, amount=amount)
        try:
            intent, _ = submit_investment(
                request.user,
                campaign_slug=campaign.slug,
                amount=amount,
                payment_method=funding_source.type,
                funding_source_id=funding_source.pk,
            )
        except (InvestmentValidationError, FundingSourceUnavailable, CampaignNotFound) as e:
            messages.error(request, str(e))
            return redirect("investment:invest_page", slug)
        except OperationalError as e:
            logger.warning("Investment in %s by user %s hit a busy database: %s", slug, request.user.pk, e)
            messages.error(request, BUSY_MESSAGE)
            return redirect("investment:invest_page", slug)

        return redirect("investment:processing", intent_id=intent.id)

    context = {
        "campaign": campaign,
        "funding_source": funding_source,
        "form": InvestForm(initial={"amount": campaign.min_investment}),
        "presets": [p for p in AMOUNT_PRESETS if campaign.min_investment <= p <= campaign.max_investment_per_person],
        "remaining_allowance": campaign.max_investment_per_person - campaign.committed_amount(user=request.user),
    }
    return render(request, "investment/invest_page.html", context)


@login_required
def investment_processing(request, intent_id):
    intent = get_object_or_404(InvestmentIntent.objects.select_related("campaign"), pk=intent_id, user=request.user)
    return render(request, "investment/processing.html", {
        "intent": intent,
        "receipt_url": build_receipt_url(intent.partner_tx_id),
    })


@kyc_required
def portfolio_view(request):
    return render(request, "investment/portfolio.html", portfolio_summary(request.user))


# -------------------------
# JSON API
# -------------------------
@require_POST
def api_create_investment(request):
    if not request.user.is_authenticated:
        return JsonResponse({"error": "User is required."}, status=401)

    try:
        body = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError):
        return JsonResponse({"error": "Invalid JSON body."}, status=400)
    if not isinstance(body, dict):
        return JsonResponse({"error": "Invalid JSON body."}, status=400)

    if not request.user.kyc_verified:
        return JsonResponse({"error": "Identity verification is required."}, status=403)

    campaign_slug = body.get("campaignSlug")
    track_event(request, "invest_attempt", amount=body.get("amount"), campaign_slug=campaign_slug)

    try:
        intent, payment = submit_investment(
            request.user,
            campaign_slug=campaign_slug,
            amount=body.get("amount"),
            payment_method=body.get("paymentMethod"),
            funding_source_id=body.get("fundingSourceId"),
        )
    except CampaignNotFound as e:
        return JsonResponse({"error": str(e)}, status=404)
    except (InvestmentValidationError, FundingSourceUnavailable) as e:
        return JsonResponse({"error": str(e)}, status=400)
    except OperationalError as e:
        logger.warning("Investment in %s by user %s hit a busy database: %s", campaign_slug, request.user.pk, e)
        response = JsonResponse({"error": BUSY_MESSAGE}, status=503)
        response["Retry-After"] = "1"
        return response

    return JsonResponse({
        "id": str(intent.id),
        "status": "processing",
        "payment_intent_id": payment["payment_intent_id"],
        "receipt_url": payment["receipt_url"],
    })


@require_GET
def api_investment_status(request, intent_id):
    if not request.user.is_authenticated:
        return JsonResponse({"error": "User is required."}, status=401)

    try:
        intent_uuid = uuid.UUID(str(intent_id))
    except ValueError:
        intent_uuid = None

    intent = None
    if intent_uuid is not None:
        intent = (
            InvestmentIntent.objects.select_related("campaign")
            .filter(pk=intent_uuid, user=request.user)
            .first()
        )
    if intent is None:
        return JsonResponse({"error": "Investment not found."}, status=404)

    if refresh_investment_status(intent):
        track_event(request, "invest_success", campaign=intent.campaign, amount=intent.amount)

    return JsonResponse({
        "id": str(intent.id),
        "status": public_status(intent.status),
        "receipt_url": build_receipt_url(intent.partner_tx_id),
        "payment_intent_id": intent.partner_tx_id,
    })


# -------------------------
# Staff: campaign CRUD
# -------------------------
@user_passes_test(admin_required)
def admin_campaign_list(request):
    campaigns = Campaign.objects.all()
    return render(request, "investment/admin_campaign_list.html", {"campaigns": campaigns})


@user_passes_test(admin_required)
def admin_campaign_create(request):
    if request.method == "POST":
        form = CampaignForm(request.POST)
        if form.is_valid():
            campaign = form.save()
            logger.info("Campaign %s created by %s", campaign.slug, request.user)
            messages.success(request, f"Campaign {campaign.company_name} created.")
            return redirect("investment:admin_campaign_list")
    else:
        form = CampaignForm()
    return render(request, "investment/admin_campaign_form.html", {"form": form, "campaign": None})


@user_passes_test(admin_required)
def admin_campaign_edit(request, pk):
    campaign = get_object_or_404(Campaign, pk=pk)
    if request.method == "POST":
        form = CampaignForm(request.POST, instance=campaign)
        if form.is_valid():
            form.save()
            messages.success(request, f"Campaign {campaign.company_name} updated.")
            return redirect("investment:admin_campaign_list")
    else:
        form = CampaignForm(instance=campaign)
    return render(request, "investment/admin_campaign_form.html", {"form": form, "campaign": campaign})


@user_passes_test(admin_required)
@require_POST
def admin_campaign_delete(request, pk):
    campaign = get_object_or_404(Campaign, pk=pk)
    name = campaign.company_name
    try:
        campaign.delete()
    except ProtectedError:
        messages.error(request, f"{name} has investments and cannot be deleted. Close it instead.")
        return redirect("investment:admin_campaign_list")
    messages.warning(request, f"Campaign {name} deleted.")
    return redirect("investment:admin_campaign_list")
