# CHANGE LOG
# Oct 12, 2026 — Accept Clerk's newer `image_url` key next to `profile_image_url`.
# Oct 05, 2026 — Duplicate creates raise ConflictError instead of a bare IntegrityError.

"""
coach.services.identity_service

Maps an external (Clerk) user id to a local UserProfile, backfilling the
profile from the Clerk Backend API the first time the id is seen.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

import requests
from django.conf import settings
from django.db import IntegrityError, transaction

from coach.models import UserProfile
from .errors import ConflictError, IdentityLookupError

logger = logging.getLogger("coach")

DEFAULT_EMAIL = "unknown@example.com"
DEFAULT_NAME = "Unnamed User"

IMAGE_KEYS = ("profile_image_url", "image_url")


def fetch_identity(external_id: str) -> Dict[str, Any]:
    """
    GET /v1/users/{external_id} with bearer auth.
    Any transport error, non-2xx, or malformed payload → IdentityLookupError.
    """
    url = f"{settings.CLERK_API_URL}/v1/users/{external_id}"
    headers = {"Authorization": f"Bearer {settings.CLERK_SECRET_KEY}"}

    try:
        resp = requests.get(url, headers=headers, timeout=settings.CLERK_TIMEOUT)
    except requests.RequestException as e:
        raise IdentityLookupError(f"Identity provider unreachable: {e}") from e

    if not resp.ok:
        raise IdentityLookupError(f"Identity provider error: {resp.status_code} - {resp.reason}")

    try:
        payload = resp.json()
    except ValueError as e:
        raise IdentityLookupError("Identity provider returned non-JSON body") from e

    if not isinstance(payload, dict) or payload.get("error") or payload.get("errors"):
        raise IdentityLookupError("Failed to fetch valid identity details")

    if not isinstance(payload.get("email_addresses"), list):
        raise IdentityLookupError("Identity payload missing email_addresses")
    if "first_name" not in payload:
        raise IdentityLookupError("Identity payload missing first_name")
    if not any(k in payload for k in IMAGE_KEYS):
        raise IdentityLookupError("Identity payload missing profile image url")

    return payload


def _profile_fields(payload: Dict[str, Any]) -> Dict[str, str]:
    emails = payload.get("email_addresses") or []
    first = emails[0] if emails and isinstance(emails[0], dict) else {}
    image = next((payload.get(k) for k in IMAGE_KEYS if payload.get(k)), "")
    return {
        "email": first.get("email_address") or DEFAULT_EMAIL,
        "name": payload.get("first_name") or DEFAULT_NAME,
        "image_url": image or "",
    }


def ensure_profile_exists(external_id: str) -> UserProfile:
    """
    Return the stored profile for `external_id`, creating it from the identity
    provider when absent. At most one create per unseen id; a lost race raises
    ConflictError so the caller can re-read.
    """
    if not external_id:
        raise IdentityLookupError("External user id is required")

    profile = UserProfile.objects.filter(external_id=external_id).first()
    if profile:
        return profile

    logger.warning("Profile for external id %s not found. Fetching from identity provider...", external_id)
    payload = fetch_identity(external_id)

    try:
        with transaction.atomic():
            profile = UserProfile.objects.create(external_id=external_id, **_profile_fields(payload))
    except IntegrityError as e:
        raise ConflictError(f"Profile for external id {external_id} already exists") from e

    logger.info("New profile created id=%s external_id=%s", profile.pk, external_id)
    return profile
