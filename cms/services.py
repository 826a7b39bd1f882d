import logging

from . import client
from .fallback import (
    EDITORIAL_GUIDELINES,
    HOW_IT_WORKS_CONTENT,
    LANDING_CONTENT,
    campaign_story_content,
)

logger = logging.getLogger(__name__)

PREVIEW_SESSION_KEY = "cms_preview"

CONTENT_LANDING = "landing"
CONTENT_HOW_IT_WORKS = "howItWorks"
CONTENT_CAMPAIGN_STORY = "campaignStory"
CONTENT_TYPES = (CONTENT_LANDING, CONTENT_HOW_IT_WORKS, CONTENT_CAMPAIGN_STORY)


def is_preview(request):
    return bool(request.session.get(PREVIEW_SESSION_KEY))


def _resolved(data, fallback, preview):
    return {
        "data": data,
        "source": "fallback" if data is fallback else "cms",
        "context": {"preview": preview, "guidelines": EDITORIAL_GUIDELINES},
    }


def resolve_landing(preview=False):
    data = client.fetch_landing_content(preview, LANDING_CONTENT)
    return _resolved(data, LANDING_CONTENT, preview)


def resolve_how_it_works(preview=False):
    data = client.fetch_how_it_works_content(preview, HOW_IT_WORKS_CONTENT)
    return _resolved(data, HOW_IT_WORKS_CONTENT, preview)


def resolve_campaign_story(preview, campaign=None, slug=None):
    """
    Story copy for a campaign page. CMS fields override the story built from
    the campaign record; anything the CMS leaves out keeps the record's value.
    """
    slug = slug or (campaign.slug if campaign is not None else "")
    fallback = campaign_story_content(campaign, slug=slug)
    data = client.fetch_campaign_story_content(preview, slug, fallback)
    return _resolved(data, fallback, preview)


def resolve_content(content_type, preview=False, slug=None):
    if content_type == CONTENT_LANDING:
        return resolve_landing(preview)
    if content_type == CONTENT_HOW_IT_WORKS:
        return resolve_how_it_works(preview)
    if content_type == CONTENT_CAMPAIGN_STORY:
        if not slug:
            raise ValueError("slug is required for campaign stories")
        from investment.models import Campaign

        campaign = Campaign.objects.filter(slug=slug).first()
        return resolve_campaign_story(preview, campaign, slug=slug)
    raise ValueError(f"Unsupported content type: {content_type}")
