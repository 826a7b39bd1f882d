import re

import pytest
from django.urls import reverse

from payment.models import FundingSource
from payment.services import (
    FundingSourceUnavailable,
    build_receipt_url,
    create_sandbox_payment,
    generate_payment_intent_id,
    get_active_funding_source,
    link_funding_source,
    resolve_funding_source,
)

pytestmark = pytest.mark.django_db


class TestSandboxPayments:
    def test_payment_intent_id_format(self):
        assert re.fullmatch(r"pi_[0-9a-z]{11}", generate_payment_intent_id())

    def test_receipt_url(self):
        assert build_receipt_url("pi_123") == "https://dashboard.stripe.com/test/payments/pi_123"
        assert build_receipt_url(None) is None

    def test_create_payment(self):
        payment = create_sandbox_payment("100", "card")
        assert payment["status"] == "processing"
        assert payment["provider"] == "stripe_test"
        assert payment["receipt_url"] == build_receipt_url(payment["payment_intent_id"])

    def test_unknown_method(self):
        with pytest.raises(ValueError):
            create_sandbox_payment("100", "cash")


class TestFundingSources:
    def test_linking_replaces_active_source(self, user):
        first = link_funding_source(user, type="bank", last4="1111", institution_name="Chase Bank")
        second = link_funding_source(user, type="card", last4="2222")

        first.refresh_from_db()
        assert first.status == FundingSource.STATUS_INACTIVE
        assert get_active_funding_source(user) == second
        assert second.provider_id == "stripe_test"
        assert second.provider_token.startswith("tok_sandbox_")

    def test_resolve_requires_active_source(self, user):
        with pytest.raises(FundingSourceUnavailable):
            resolve_funding_source(user, None, "bank")

    def test_resolve_by_id(self, user):
        source = link_funding_source(user, type="bank", last4="1111")
        assert resolve_funding_source(user, source.pk, "bank") == source
        with pytest.raises(FundingSourceUnavailable):
            resolve_funding_source(user, "not-an-id", "bank")

    def test_link_view(self, user_client, user):
        response = user_client.post(reverse("payment:link_funding_source"), {
            "type": "bank", "institution_name": "Chase Bank", "last4": "4321",
        })
        assert response.url == reverse("onboarding")
        assert get_active_funding_source(user).last4 == "4321"

    def test_link_view_return_to(self, user_client):
        target = reverse("payment:funding_sources")
        response = user_client.post(reverse("payment:link_funding_source"), {
            "type": "card", "institution_name": "Visa", "last4": "4321", "return_to": target,
        })
        assert response.url == target

    def test_link_view_ignores_external_return_to(self, user_client):
        response = user_client.post(reverse("payment:link_funding_source"), {
            "type": "card", "institution_name": "Visa", "last4": "4321", "return_to": "https://evil.example/",
        })
        assert response.url == reverse("onboarding")

    def test_link_view_rejects_bad_last4(self, user_client, user):
        user_client.post(reverse("payment:link_funding_source"), {
            "type": "bank", "institution_name": "Chase Bank", "last4": "43",
        })
        assert get_active_funding_source(user) is None

    def test_deactivate_view(self, user_client, user):
        source = link_funding_source(user, type="bank", last4="1111")
        user_client.post(reverse("payment:deactivate_funding_source", args=[source.pk]))
        source.refresh_from_db()
        assert not source.is_active

    def test_cannot_deactivate_other_users_source(self, user_client, other_user):
        source = link_funding_source(other_user, type="bank", last4="1111")
        response = user_client.post(reverse("payment:deactivate_funding_source", args=[source.pk]))
        assert response.status_code == 404
