import json
import uuid
from datetime import timedelta
from unittest import mock

import pytest
from django.db import OperationalError
from django.test import Client
from django.urls import reverse
from django.utils import timezone

from analytics.models import EventLog
from investment.models import InvestmentIntent
from investment.views import BUSY_MESSAGE

pytestmark = pytest.mark.django_db

CREATE_URL = "/api/investments/"


def post_json(client, data):
    body = data if isinstance(data, str) else json.dumps(data)
    return client.post(CREATE_URL, data=body, content_type="application/json")


class TestCreateInvestment:
    def test_requires_login(self, client, campaign):
        response = post_json(client, {"campaignSlug": campaign.slug, "amount": 100, "paymentMethod": "bank"})
        assert response.status_code == 401
        assert response.json() == {"error": "User is required."}

    def test_rejects_invalid_json(self, investor_client):
        response = post_json(investor_client, "{not json")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body."}

    def test_requires_verified_identity(self, user_client, campaign):
        response = post_json(user_client, {"campaignSlug": campaign.slug, "amount": 100, "paymentMethod": "bank"})
        assert response.status_code == 403
        assert response.json() == {"error": "Identity verification is required."}

    def test_unknown_campaign(self, investor_client):
        response = post_json(investor_client, {"campaignSlug": "missing", "amount": 100, "paymentMethod": "bank"})
        assert response.status_code == 404
        assert response.json() == {"error": "Campaign not found."}

    def test_validation_error(self, investor_client, campaign):
        response = post_json(investor_client, {"campaignSlug": campaign.slug, "amount": 10, "paymentMethod": "bank"})
        assert response.status_code == 400
        assert response.json() == {"error": "Minimum investment is $50."}

    def test_invalid_amount(self, investor_client, campaign):
        response = post_json(investor_client, {"campaignSlug": campaign.slug, "amount": "lots", "paymentMethod": "bank"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid amount."}

    def test_funding_source_mismatch(self, investor_client, campaign):
        response = post_json(investor_client, {"campaignSlug": campaign.slug, "amount": 100, "paymentMethod": "card"})
        assert response.status_code == 400
        assert response.json() == {"error": "Funding source is not available."}

    def test_success(self, investor_client, investor, campaign):
        response = post_json(investor_client, {"campaignSlug": campaign.slug, "amount": 100, "paymentMethod": "bank"})

        assert response.status_code == 200
        data = response.json()
        intent = InvestmentIntent.objects.get(pk=data["id"])
        assert intent.user == investor
        assert data["status"] == "processing"
        assert data["payment_intent_id"] == intent.partner_tx_id
        assert data["receipt_url"].endswith(intent.partner_tx_id)

    def test_locked_database_is_retryable(self, investor_client, campaign):
        with mock.patch("investment.views.submit_investment", side_effect=OperationalError("database is locked")):
            response = post_json(investor_client, {"campaignSlug": campaign.slug, "amount": 100, "paymentMethod": "bank"})

        assert response.status_code == 503
        assert response["Retry-After"] == "1"
        assert response.json() == {"error": BUSY_MESSAGE}

    def test_get_not_allowed(self, investor_client):
        assert investor_client.get(CREATE_URL).status_code == 405

    def test_csrf_enforced(self, investor, campaign):
        client = Client(enforce_csrf_checks=True)
        client.force_login(investor)
        response = post_json(client, {"campaignSlug": campaign.slug, "amount": 100, "paymentMethod": "bank"})
        assert response.status_code == 403

    def test_records_attempt_with_consent(self, investor_client, campaign):
        investor_client.cookies["analytics_consent"] = "granted"
        post_json(investor_client, {"campaignSlug": campaign.slug, "amount": 100, "paymentMethod": "bank"})
        assert EventLog.objects.filter(event_type="invest_attempt").count() == 1

    def test_no_tracking_without_consent(self, investor_client, campaign):
        post_json(investor_client, {"campaignSlug": campaign.slug, "amount": 100, "paymentMethod": "bank"})
        assert not EventLog.objects.exists()


class TestInvestmentStatus:
    def url(self, intent_id):
        return reverse("investment:api_status", args=[intent_id])

    def test_requires_login(self, client, investor, campaign, make_intent):
        intent = make_intent(investor, campaign, "100")
        assert client.get(self.url(intent.id)).status_code == 401

    @pytest.mark.parametrize("intent_id", ["not-a-uuid", str(uuid.uuid4())])
    def test_unknown_investment(self, investor_client, intent_id):
        response = investor_client.get(self.url(intent_id))
        assert response.status_code == 404
        assert response.json() == {"error": "Investment not found."}

    def test_cannot_read_other_users_investment(self, investor_client, other_user, campaign, make_intent):
        intent = make_intent(other_user, campaign, "100")
        assert investor_client.get(self.url(intent.id)).status_code == 404

    def test_processing_then_succeeded(self, investor_client, investor, campaign, make_intent):
        investor_client.cookies["analytics_consent"] = "granted"
        intent = make_intent(investor, campaign, "100", partner_tx_id="pi_abc123def45")

        response = investor_client.get(self.url(intent.id))
        assert response.json()["status"] == "processing"

        InvestmentIntent.objects.filter(pk=intent.pk).update(created_at=timezone.now() - timedelta(seconds=4))
        response = investor_client.get(self.url(intent.id))
        data = response.json()
        assert data["status"] == "succeeded"
        assert data["payment_intent_id"] == "pi_abc123def45"
        assert data["receipt_url"] == "https://dashboard.stripe.com/test/payments/pi_abc123def45"

        # polling again does not record a second success
        investor_client.get(self.url(intent.id))
        assert EventLog.objects.filter(event_type="invest_success").count() == 1

    def test_failed_investment(self, investor_client, investor, campaign, make_intent):
        intent = make_intent(investor, campaign, "100", status=InvestmentIntent.STATUS_FAILED)
        assert investor_client.get(self.url(intent.id)).json()["status"] == "failed"
