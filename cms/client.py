# cms/client.py
import logging

import requests
from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

DELIVERY_HOST = "cdn.contentful.com"
PREVIEW_HOST = "preview.contentful.com"


class CMSUnavailable(Exception):
    pass


def is_configured():
    return bool(
        settings.CONTENTFUL_SPACE_ID
        and (settings.CONTENTFUL_DELIVERY_TOKEN or settings.CONTENTFUL_PREVIEW_TOKEN)
    )


def fetch_entries(content_type: str, preview: bool):
    """
    Fetch all entries of `content_type` from Contentful. Delivery responses are
    cached; preview responses are always fetched fresh.
    """
    if not is_configured():
        raise CMSUnavailable("CMS not configured")

    token = settings.CONTENTFUL_PREVIEW_TOKEN if preview else settings.CONTENTFUL_DELIVERY_TOKEN
    host = PREVIEW_HOST if preview else DELIVERY_HOST
    if not token:
        raise CMSUnavailable("Missing Contentful token")

    cache_key = f"cms:entries:{content_type}"
    if not preview:
        cached = cache.get(cache_key)
        if cached is not None:
            return cached

    url = (
        f"https://{host}/spaces/{settings.CONTENTFUL_SPACE_ID}"
        f"/environments/{settings.CONTENTFUL_ENVIRONMENT}/entries"
    )
    try:
        response = requests.get(
            url,
            params={"content_type": content_type},
            headers={"Authorization": f"Bearer {token}"},
            timeout=settings.CMS_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        raise CMSUnavailable(f"Failed to fetch CMS content: {e}") from e

    if not isinstance(payload, dict):
        raise CMSUnavailable(f"Unexpected CMS payload: {type(payload).__name__}")
    items = payload.get("items") or []
    if not isinstance(items, list):
        raise CMSUnavailable(f"Unexpected CMS items: {type(items).__name__}")
    items = [item for item in items if isinstance(item, dict)]

    if not preview:
        cache.set(cache_key, items, settings.CMS_CACHE_SECONDS)
    return items


def entry_fields(entry):
    fields = entry.get("fields")
    return fields if isinstance(fields, dict) else {}


def merge_first_entry(entries, fallback):
    if not entries:
        return fallback
    return {**fallback, **entry_fields(entries[0])}


def fetch_landing_content(preview, fallback):
    try:
        return merge_first_entry(fetch_entries("landingPage", preview), fallback)
    except CMSUnavailable as e:
        logger.warning("[CMS] Falling back to static landing content: %s", e)
        return fallback


def fetch_how_it_works_content(preview, fallback):
    try:
        return merge_first_entry(fetch_entries("howItWorks", preview), fallback)
    except CMSUnavailable as e:
        logger.warning("[CMS] Falling back to static how-it-works content: %s", e)
        return fallback


def fetch_campaign_story_content(preview, slug, fallback):
    try:
        entries = fetch_entries("campaignStory", preview)
    except CMSUnavailable as e:
        logger.warning("[CMS] Falling back to static campaign story for %s: %s", slug, e)
        return fallback

    match = [e for e in entries if entry_fields(e).get("slug") == slug]
    return merge_first_entry(match[:1], fallback)
