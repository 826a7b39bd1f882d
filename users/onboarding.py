"""
Onboarding progress for investors.

An investor is onboarded once their identity is verified, a funding source is
linked and active, and the terms and risk disclosure have been accepted. The
step is always derived from stored state, never stored itself.
"""
STEP_ACCOUNT = "account"
STEP_KYC = "kyc"
STEP_FUNDING = "funding"
STEP_TERMS = "terms"
STEP_COMPLETE = "complete"

STEPS = [STEP_ACCOUNT, STEP_KYC, STEP_FUNDING, STEP_TERMS, STEP_COMPLETE]


def compute_onboarding_step(user, funding_source=None):
    if user is None or not user.is_authenticated:
        return STEP_ACCOUNT
    if not user.kyc_verified:
        return STEP_KYC
    if funding_source is None or not funding_source.is_active:
        return STEP_FUNDING
    if not user.terms_accepted:
        return STEP_TERMS
    return STEP_COMPLETE


def current_step(user):
    """Look up the user's funding source and compute their step."""
    from payment.services import get_active_funding_source

    funding_source = None
    if user is not None and user.is_authenticated:
        funding_source = get_active_funding_source(user)
    return compute_onboarding_step(user, funding_source)


def is_onboarded(user):
    return current_step(user) == STEP_COMPLETE
