from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from investment.models import Campaign, InvestmentIntent
from investment.services import (
    CampaignNotFound,
    InvestmentValidationError,
    format_money,
    mark_failed,
    parse_amount,
    platform_metrics,
    portfolio_summary,
    public_status,
    refresh_investment_status,
    submit_investment,
    validate_campaign_rules,
)
from payment.services import FundingSourceUnavailable, link_funding_source

pytestmark = pytest.mark.django_db


class TestParseAmount:
    @pytest.mark.parametrize("raw, expected", [
        ("50", Decimal("50")),
        (100, Decimal("100")),
        ("250.50", Decimal("250.50")),
        (" 75 ", Decimal("75")),
    ])
    def test_valid_amounts(self, raw, expected):
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", [None, True, "", "abc", "0", "-5", "10.123", "NaN", "Infinity"])
    def test_invalid_amounts(self, raw):
        with pytest.raises(InvestmentValidationError, match="Invalid amount."):
            parse_amount(raw)


class TestFormatMoney:
    def test_whole_amounts_have_no_decimals(self):
        assert format_money(Decimal("50.00")) == "50"
        assert format_money(Decimal("1000")) == "1000"

    def test_fractional_amounts_keep_cents(self):
        assert format_money(Decimal("12.5")) == "12.50"


class TestValidateCampaignRules:
    def test_campaign_must_be_live(self, campaign, user):
        campaign.status = Campaign.STATUS_PAUSED
        with pytest.raises(InvestmentValidationError, match="Campaign is not live for investments."):
            validate_campaign_rules(campaign, Decimal("1"), user)

    def test_minimum(self, campaign, user):
        with pytest.raises(InvestmentValidationError) as exc:
            validate_campaign_rules(campaign, Decimal("49.99"), user)
        assert str(exc.value) == "Minimum investment is $50."

    def test_maximum_per_person(self, campaign, user):
        with pytest.raises(InvestmentValidationError) as exc:
            validate_campaign_rules(campaign, Decimal("1000.01"), user)
        assert str(exc.value) == "Maximum per person is $1000."

    def test_target_includes_outside_raise_and_open_intents(self, campaign, user, other_user, make_intent):
        campaign.amount_raised = Decimal("9000")
        campaign.save()
        make_intent(other_user, campaign, "900")
        with pytest.raises(InvestmentValidationError) as exc:
            validate_campaign_rules(campaign, Decimal("200"), user)
        assert str(exc.value) == "Campaign has reached its target amount."

    def test_exactly_reaching_target_is_allowed(self, campaign, user):
        campaign.amount_raised = Decimal("9800")
        campaign.save()
        validate_campaign_rules(campaign, Decimal("200"), user)

    def test_user_cap_counts_existing_intents(self, campaign, user, make_intent):
        make_intent(user, campaign, "900")
        with pytest.raises(InvestmentValidationError) as exc:
            validate_campaign_rules(campaign, Decimal("200"), user)
        assert str(exc.value) == "You have reached the per-person investment cap for this campaign."

    def test_failed_intents_do_not_count(self, campaign, user, make_intent):
        campaign.amount_raised = Decimal("9000")
        campaign.save()
        make_intent(user, campaign, "900", status=InvestmentIntent.STATUS_FAILED)
        validate_campaign_rules(campaign, Decimal("1000"), user)

    def test_other_users_do_not_affect_user_cap(self, campaign, user, other_user, make_intent):
        make_intent(other_user, campaign, "1000", status=InvestmentIntent.STATUS_CONFIRMED)
        validate_campaign_rules(campaign, Decimal("1000"), user)


class TestSubmitInvestment:
    def test_creates_processing_intent(self, investor, funding_source, campaign):
        intent, payment = submit_investment(investor, "test-rocket", "100", "bank")

        assert intent.status == InvestmentIntent.STATUS_PROCESSING
        assert intent.amount == Decimal("100")
        assert intent.campaign == campaign
        assert intent.partner_tx_id == payment["payment_intent_id"]
        assert payment["payment_intent_id"].startswith("pi_")
        assert len(payment["payment_intent_id"]) == 14
        assert payment["receipt_url"] == f"https://dashboard.stripe.com/test/payments/{intent.partner_tx_id}"
        assert payment["provider"] == "stripe_test"

    def test_explicit_funding_source(self, investor, funding_source, campaign):
        intent, _ = submit_investment(investor, "test-rocket", 50, "bank", funding_source_id=funding_source.pk)
        assert intent.pk is not None

    def test_unsupported_payment_method(self, investor, campaign):
        with pytest.raises(InvestmentValidationError, match="Unsupported payment method."):
            submit_investment(investor, "test-rocket", "100", "crypto")

    def test_unknown_campaign(self, investor):
        with pytest.raises(CampaignNotFound, match="Campaign not found."):
            submit_investment(investor, "no-such-campaign", "100", "bank")

    def test_payment_method_must_match_funding_source(self, investor, campaign):
        with pytest.raises(FundingSourceUnavailable, match="Funding source is not available."):
            submit_investment(investor, "test-rocket", "100", "card")

    def test_cannot_use_someone_elses_funding_source(self, investor, other_user, campaign):
        foreign = link_funding_source(other_user, type="bank", last4="1111")
        with pytest.raises(FundingSourceUnavailable):
            submit_investment(investor, "test-rocket", "100", "bank", funding_source_id=foreign.pk)

    def test_validation_failure_creates_nothing(self, investor, campaign):
        with pytest.raises(InvestmentValidationError):
            submit_investment(investor, "test-rocket", "10", "bank")
        assert not InvestmentIntent.objects.filter(campaign=campaign).exists()

    def test_repeated_investments_stop_at_cap(self, investor, campaign):
        submit_investment(investor, "test-rocket", "600", "bank")
        submit_investment(investor, "test-rocket", "400", "bank")
        with pytest.raises(InvestmentValidationError, match="per-person investment cap"):
            submit_investment(investor, "test-rocket", "50", "bank")


class TestStatusLifecycle:
    def test_stays_processing_within_delay(self, user, campaign, make_intent):
        intent = make_intent(user, campaign, "100")
        assert refresh_investment_status(intent, now=intent.created_at + timedelta(seconds=3)) is False
        intent.refresh_from_db()
        assert intent.status == InvestmentIntent.STATUS_PROCESSING

    def test_confirms_after_delay(self, user, campaign, make_intent):
        intent = make_intent(user, campaign, "100")
        InvestmentIntent.objects.filter(pk=intent.pk).update(created_at=timezone.now() - timedelta(seconds=10))
        intent.refresh_from_db()

        assert refresh_investment_status(intent) is True
        intent.refresh_from_db()
        assert intent.status == InvestmentIntent.STATUS_CONFIRMED

    def test_confirms_only_once(self, user, campaign, make_intent):
        intent = make_intent(user, campaign, "100")
        later = intent.created_at + timedelta(seconds=5)
        stale_copy = InvestmentIntent.objects.get(pk=intent.pk)

        assert refresh_investment_status(intent, now=later) is True
        assert refresh_investment_status(stale_copy, now=later) is False
        assert stale_copy.status == InvestmentIntent.STATUS_CONFIRMED

    def test_failed_is_terminal(self, user, campaign, make_intent):
        intent = make_intent(user, campaign, "100")
        assert mark_failed(intent) is True
        assert refresh_investment_status(intent, now=intent.created_at + timedelta(minutes=5)) is False
        intent.refresh_from_db()
        assert intent.status == InvestmentIntent.STATUS_FAILED
        assert mark_failed(intent) is False

    def test_stale_copy_cannot_fail_a_confirmed_intent(self, user, campaign, make_intent):
        intent = make_intent(user, campaign, "100")
        stale_copy = InvestmentIntent.objects.get(pk=intent.pk)
        assert refresh_investment_status(intent, now=intent.created_at + timedelta(seconds=5)) is True

        assert mark_failed(stale_copy) is False
        assert stale_copy.status == InvestmentIntent.STATUS_CONFIRMED
        intent.refresh_from_db()
        assert intent.status == InvestmentIntent.STATUS_CONFIRMED

    def test_stale_poller_sees_failure(self, user, campaign, make_intent):
        intent = make_intent(user, campaign, "100")
        stale_copy = InvestmentIntent.objects.get(pk=intent.pk)
        assert mark_failed(intent) is True

        assert refresh_investment_status(stale_copy, now=intent.created_at + timedelta(seconds=10)) is False
        assert stale_copy.status == InvestmentIntent.STATUS_FAILED
        assert public_status(stale_copy.status) == "failed"
        intent.refresh_from_db()
        assert intent.status == InvestmentIntent.STATUS_FAILED

    @pytest.mark.parametrize("status, expected", [
        ("initiated", "processing"),
        ("processing", "processing"),
        ("confirmed", "succeeded"),
        ("failed", "failed"),
    ])
    def test_public_status(self, status, expected):
        assert public_status(status) == expected


class TestPortfolioAndMetrics:
    def test_portfolio_summary(self, user, other_user, campaign, make_intent):
        second = Campaign.objects.create(company_name="Second Co", status=Campaign.STATUS_LIVE)
        make_intent(user, campaign, "100", status=InvestmentIntent.STATUS_CONFIRMED)
        make_intent(user, campaign, "50", status=InvestmentIntent.STATUS_CONFIRMED)
        make_intent(user, second, "75")
        make_intent(user, second, "500", status=InvestmentIntent.STATUS_FAILED)
        make_intent(other_user, campaign, "300", status=InvestmentIntent.STATUS_CONFIRMED)

        summary = portfolio_summary(user)

        assert summary["total_invested"] == Decimal("150")
        assert summary["pending_count"] == 1
        assert summary["company_count"] == 2
        assert len(summary["investments"]) == 4

    def test_platform_metrics(self, user, other_user, campaign, make_intent):
        make_intent(user, campaign, "100", status=InvestmentIntent.STATUS_CONFIRMED)
        make_intent(user, campaign, "200", status=InvestmentIntent.STATUS_CONFIRMED)
        make_intent(other_user, campaign, "300")

        metrics = platform_metrics()

        assert metrics["volume"] == Decimal("300")
        assert metrics["active_investors"] == 1
        assert metrics["total_investors"] == 2
        assert metrics["conversion"] == 50.0

    def test_platform_metrics_without_users(self, db, django_user_model):
        django_user_model.objects.all().delete()
        metrics = platform_metrics()
        assert metrics["total_investors"] == 0
        assert metrics["conversion"] == 0


class TestCampaignModel:
    def test_slug_is_generated_and_unique(self):
        first = Campaign.objects.create(company_name="Green Widgets")
        second = Campaign.objects.create(company_name="Green Widgets")
        assert first.slug == "green-widgets"
        assert second.slug == "green-widgets-2"

    def test_progress_is_capped(self, campaign):
        campaign.amount_raised = Decimal("20000")
        assert campaign.progress_percent() == 100

    def test_progress_counts_open_intents(self, campaign, user, make_intent):
        campaign.amount_raised = Decimal("1000")
        make_intent(user, campaign, "1000")
        make_intent(user, campaign, "1000", status=InvestmentIntent.STATUS_FAILED)
        assert campaign.total_raised() == Decimal("2000")
        assert campaign.progress_percent() == 20

    def test_demo_campaigns_are_seeded(self):
        slugs = set(Campaign.objects.values_list("slug", flat=True))
        assert {"solarflow", "mindfulmeals", "petpal"} <= slugs
