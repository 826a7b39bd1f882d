from decimal import Decimal

import pytest
from django.core.cache import cache
from django.test import Client

from investment.models import Campaign, InvestmentIntent
from payment.services import link_funding_source

PASSWORD = "Sup3r-Secret-Pass!"


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(db, django_user_model):
    return django_user_model.objects.create_user(
        email="investor@example.com", password=PASSWORD, full_name="Ada Investor"
    )


@pytest.fixture
def other_user(db, django_user_model):
    return django_user_model.objects.create_user(email="other@example.com", password=PASSWORD)


@pytest.fixture
def verified_user(user):
    user.kyc_status = user.KYC_VERIFIED
    user.save()
    return user


@pytest.fixture
def funding_source(verified_user):
    return link_funding_source(verified_user, type="bank", last4="6789", institution_name="Chase Bank")


@pytest.fixture
def investor(verified_user, funding_source):
    verified_user.accept_terms()
    return verified_user


@pytest.fixture
def staff_user(db, django_user_model):
    return django_user_model.objects.create_user(email="staff@example.com", password=PASSWORD, is_staff=True)


@pytest.fixture
def campaign(db):
    return Campaign.objects.create(
        company_name="Test Rocket",
        slug="test-rocket",
        tagline="Rockets for everyone",
        problem="Space is hard.",
        solution="Smaller rockets.",
        min_investment=Decimal("50"),
        max_investment_per_person=Decimal("1000"),
        target_amount=Decimal("10000"),
        amount_raised=Decimal("0"),
        status=Campaign.STATUS_LIVE,
    )


@pytest.fixture
def make_intent():
    def _make(user, campaign, amount, status=InvestmentIntent.STATUS_PROCESSING, **kwargs):
        return InvestmentIntent.objects.create(
            user=user, campaign=campaign, amount=Decimal(str(amount)), status=status, **kwargs
        )

    return _make


@pytest.fixture
def user_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def investor_client(client, investor):
    client.force_login(investor)
    return client


@pytest.fixture
def staff_client(db, staff_user):
    c = Client()
    c.force_login(staff_user)
    return c
