from decimal import Decimal
from unittest import mock

import pytest
from django.db import OperationalError
from django.urls import reverse

from investment.models import Campaign, InvestmentIntent
from investment.views import BUSY_MESSAGE

pytestmark = pytest.mark.django_db


class TestBrowse:
    def test_campaign_list(self, client, campaign):
        Campaign.objects.create(company_name="Hidden Paused", status=Campaign.STATUS_PAUSED)
        response = client.get(reverse("investment:campaign_list"))
        assert response.status_code == 200
        assert campaign in response.context["live_campaigns"]
        assert "Hidden Paused" not in response.content.decode()

    def test_campaign_detail(self, client, campaign):
        response = client.get(reverse("investment:campaign_detail", args=[campaign.slug]))
        assert response.status_code == 200
        assert response.context["story"]["source"] == "fallback"
        assert response.context["story"]["data"]["problem"] == "Space is hard."

    def test_missing_campaign_is_404(self, client):
        assert client.get(reverse("investment:campaign_detail", args=["nope"])).status_code == 404


class TestInvestPage:
    def test_anonymous_redirected_to_login(self, client, campaign):
        response = client.get(reverse("investment:invest_page", args=[campaign.slug]))
        assert response.status_code == 302
        assert reverse("login") in response.url

    def test_unverified_sent_to_onboarding(self, user_client, campaign):
        response = user_client.get(reverse("investment:invest_page", args=[campaign.slug]))
        assert response.status_code == 302
        assert response.url == reverse("onboarding")

    def test_renders_presets(self, investor_client, campaign):
        response = investor_client.get(reverse("investment:invest_page", args=[campaign.slug]))
        assert response.status_code == 200
        assert response.context["presets"] == [50, 100, 250, 500]
        assert response.context["remaining_allowance"] == Decimal("1000")

    def test_submit_redirects_to_processing(self, investor_client, investor, campaign):
        response = investor_client.post(reverse("investment:invest_page", args=[campaign.slug]), {"amount": "250"})
        intent = InvestmentIntent.objects.get(user=investor)
        assert response.status_code == 302
        assert response.url == reverse("investment:processing", args=[intent.id])

        page = investor_client.get(response.url)
        assert page.status_code == 200
        assert page.context["receipt_url"].endswith(intent.partner_tx_id)

    def test_submit_validation_error(self, investor_client, investor, campaign):
        response = investor_client.post(
            reverse("investment:invest_page", args=[campaign.slug]), {"amount": "5000"}, follow=True
        )
        assert "Maximum per person is $1000." in [str(m) for m in response.context["messages"]]
        assert not InvestmentIntent.objects.filter(user=investor).exists()

    def test_submit_on_locked_database(self, investor_client, investor, campaign):
        with mock.patch("investment.views.submit_investment", side_effect=OperationalError("database is locked")):
            response = investor_client.post(reverse("investment:invest_page", args=[campaign.slug]), {"amount": "100"})

        assert response.status_code == 302
        assert response.url == reverse("investment:invest_page", args=[campaign.slug])
        page = investor_client.get(response.url)
        assert BUSY_MESSAGE in [str(m) for m in page.context["messages"]]
        assert not InvestmentIntent.objects.filter(user=investor).exists()

    def test_portfolio(self, investor_client, investor, campaign, make_intent):
        make_intent(investor, campaign, "100", status=InvestmentIntent.STATUS_CONFIRMED)
        response = investor_client.get(reverse("investment:portfolio"))
        assert response.status_code == 200
        assert response.context["total_invested"] == Decimal("100")


class TestCampaignAdmin:
    def test_staff_only(self, user_client):
        response = user_client.get(reverse("investment:admin_campaign_list"))
        assert response.status_code == 302

    def test_create(self, staff_client):
        response = staff_client.post(reverse("investment:admin_campaign_create"), {
            "company_name": "Brand New Co",
            "min_investment": "50",
            "max_investment_per_person": "500",
            "target_amount": "50000",
            "amount_raised": "0",
            "crowd_percentage": "5",
            "status": "live",
        })
        assert response.status_code == 302
        campaign = Campaign.objects.get(company_name="Brand New Co")
        assert campaign.slug == "brand-new-co"
        assert campaign.is_live

    def test_create_rejects_inconsistent_limits(self, staff_client):
        response = staff_client.post(reverse("investment:admin_campaign_create"), {
            "company_name": "Bad Limits",
            "min_investment": "500",
            "max_investment_per_person": "50",
            "target_amount": "50000",
            "amount_raised": "0",
            "crowd_percentage": "5",
            "status": "draft",
        })
        assert response.status_code == 200
        assert "max_investment_per_person" in response.context["form"].errors
        assert not Campaign.objects.filter(company_name="Bad Limits").exists()

    def test_edit(self, staff_client, campaign):
        response = staff_client.post(reverse("investment:admin_campaign_edit", args=[campaign.pk]), {
            "company_name": campaign.company_name,
            "min_investment": "50",
            "max_investment_per_person": "1000",
            "target_amount": "10000",
            "amount_raised": "0",
            "crowd_percentage": "5",
            "status": "paused",
        })
        assert response.status_code == 302
        campaign.refresh_from_db()
        assert campaign.status == Campaign.STATUS_PAUSED

    def test_delete(self, staff_client, campaign):
        staff_client.post(reverse("investment:admin_campaign_delete", args=[campaign.pk]))
        assert not Campaign.objects.filter(pk=campaign.pk).exists()

    def test_delete_with_investments_is_refused(self, staff_client, user, campaign, make_intent):
        make_intent(user, campaign, "100")
        staff_client.post(reverse("investment:admin_campaign_delete", args=[campaign.pk]))
        assert Campaign.objects.filter(pk=campaign.pk).exists()
